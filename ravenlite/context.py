"""User context management for ravenlite."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class UserContext:
    """
    Ambient key/value metadata attached to every event as ``extra``.

    One instance lives on each client. Writes are last-write-wins and
    there is no locking, a send reads whatever value is current when its
    envelope is built.
    """

    data: dict[str, Any] = field(default_factory=dict)

    def replace(self, context: Mapping[str, Any] | None) -> None:
        """Replace the whole context. Previous keys are dropped."""
        self.data = dict(context or {})

    def snapshot(self) -> dict[str, Any]:
        """Return a shallow copy safe to decorate per event."""
        return dict(self.data)
