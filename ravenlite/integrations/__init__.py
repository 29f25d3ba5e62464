"""Integrations module for ravenlite."""

from ravenlite.integrations.excepthook import install_excepthook, uninstall_excepthook
from ravenlite.integrations.logging import RavenLoggingHandler

__all__ = ["install_excepthook", "uninstall_excepthook", "RavenLoggingHandler"]
