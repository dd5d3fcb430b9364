"""Global exception handling for the command-line tool."""

from __future__ import annotations

import logging
import sys
import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional

logger = logging.getLogger("easy_fsm.exceptions")


def install_exception_hook() -> "_ExceptionHook":
    """Log unhandled exceptions of the main thread and worker threads at CRITICAL."""

    hook = _ExceptionHook()
    hook.install()
    return hook


@dataclass
class _ExceptionHook:
    _original_excepthook: Optional[Callable[..., Any]] = None
    _original_thread_excepthook: Optional[Callable[..., Any]] = None

    def install(self) -> None:
        self._original_excepthook = sys.excepthook
        sys.excepthook = self._handle_exception
        self._original_thread_excepthook = threading.excepthook
        threading.excepthook = self._handle_thread_exception

    def uninstall(self) -> None:
        if self._original_excepthook is not None:
            sys.excepthook = self._original_excepthook
        if self._original_thread_excepthook is not None:
            threading.excepthook = self._original_thread_excepthook

    def _handle_exception(self, exc_type, exc_value, exc_traceback) -> None:
        logger.critical(
            "Unhandled exception: %s",
            exc_value,
            exc_info=(exc_type, exc_value, exc_traceback),
        )
        if self._original_excepthook:
            self._original_excepthook(exc_type, exc_value, exc_traceback)

    def _handle_thread_exception(self, args: "threading.ExceptHookArgs") -> None:
        logger.critical(
            "Unhandled thread exception in %s: %s",
            args.thread.name if args.thread else "<unknown>",
            args.exc_value,
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
        )
        if self._original_thread_excepthook:
            self._original_thread_excepthook(args)
