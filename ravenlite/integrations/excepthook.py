"""Report uncaught exceptions through ``sys.excepthook``."""

from __future__ import annotations

import sys
from types import TracebackType
from typing import Any

from ravenlite import client as client_module
from ravenlite.client import RavenClient

# Interpreter shutdown, not application errors
IGNORED_EXCEPTIONS: tuple[type[BaseException], ...] = (KeyboardInterrupt, SystemExit)

_previous_hook: Any = None


def _report(client: RavenClient | None, exc_value: BaseException) -> None:
    target = client or client_module.get_client()
    if target is not None:
        target.capture_exception(exc_value)


def install_excepthook(client: RavenClient | None = None) -> None:
    """
    Report uncaught exceptions, then hand them to the previous hook.

    Without ``client`` the process-wide client at the time of the crash is
    used. ``KeyboardInterrupt`` and ``SystemExit`` are never reported.
    Installing twice keeps the first installation.
    """
    global _previous_hook

    if _previous_hook is not None:
        return

    previous = _previous_hook = sys.excepthook

    def hook(
        exc_type: type[BaseException],
        exc_value: BaseException,
        exc_tb: TracebackType | None,
    ) -> None:
        if not issubclass(exc_type, IGNORED_EXCEPTIONS):
            _report(client, exc_value)
        previous(exc_type, exc_value, exc_tb)

    sys.excepthook = hook


def uninstall_excepthook() -> None:
    """Restore the hook that was active before ``install_excepthook``."""
    global _previous_hook

    if _previous_hook is not None:
        sys.excepthook = _previous_hook
        _previous_hook = None
