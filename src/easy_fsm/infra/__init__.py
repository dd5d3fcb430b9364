"""Infrastructure helpers: logging setup and exception hooks."""

from .exceptions import install_exception_hook
from .logging import configure_logging

__all__ = ["configure_logging", "install_exception_hook"]
