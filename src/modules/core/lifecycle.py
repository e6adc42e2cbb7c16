"""Process-level safety net.

An exception nobody handled (main thread or a worker thread) leaves the
process in an unknown state: it is logged and the process exits with
status 1 so the supervisor can restart it.  Per-request failures never get
here; they are answered by the views and ``JsonErrorMiddleware``.
"""

from __future__ import annotations

import os
import sys
import threading

import structlog

logger = structlog.get_logger(__name__)

EXIT_STATUS = 1


def _main_thread_hook(exc_type, exc_value, exc_traceback) -> None:
    # The interpreter exits with status 1 once the hook returns
    logger.critical(
        "process.unhandled_exception",
        error_type=exc_type.__name__,
        error=str(exc_value),
        exc_info=(exc_type, exc_value, exc_traceback),
    )


def _thread_hook(args: threading.ExceptHookArgs) -> None:
    if args.exc_type is SystemExit:
        return
    logger.critical(
        "process.unhandled_thread_exception",
        thread=getattr(args.thread, "name", None),
        error_type=args.exc_type.__name__,
        error=str(args.exc_value),
        exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
    )
    # SystemExit would only end the failing thread
    os._exit(EXIT_STATUS)


def install_fatal_exception_hooks() -> None:
    """Replace the interpreter's exception hooks with the log-and-exit ones."""
    sys.excepthook = _main_thread_hook
    threading.excepthook = _thread_hook
    logger.debug("process.fatal_exception_hooks_installed")
