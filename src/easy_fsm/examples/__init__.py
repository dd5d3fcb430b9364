"""Example domains built on easy_fsm."""
