"""JSON encoding of event bodies."""

from __future__ import annotations

import datetime
import decimal
import json
import uuid
from typing import Any, Callable


class EventJSONEncoder(json.JSONEncoder):
    """JSON encoder that understands the common non-JSON types found in context."""

    ENCODER_BY_TYPE: dict[type, Callable[[Any], Any]] = {
        uuid.UUID: lambda o: o.hex,
        datetime.datetime: lambda o: o.isoformat(),
        datetime.date: lambda o: o.isoformat(),
        decimal.Decimal: str,
        set: list,
        frozenset: list,
        bytes: lambda o: o.decode("utf-8", errors="replace"),
    }

    def default(self, obj: Any) -> Any:
        encoder = self.ENCODER_BY_TYPE.get(type(obj))
        if encoder is None:
            return super().default(obj)
        return encoder(obj)


def dumps(value: Any) -> str:
    """Serialize ``value``. Raises TypeError or ValueError on unsupported data."""
    return json.dumps(value, cls=EventJSONEncoder)
