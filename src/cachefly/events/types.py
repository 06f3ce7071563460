"""Event types and data structures."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

ERROR_EVENT = "error"


@dataclass(frozen=True)
class EventEnvelope:
    """Envelope wrapping an emitted payload with metadata.

    ``payload`` is carried by identity; for ``"error"`` events it is the
    exception instance that caused the failure.
    """

    event_type: str
    payload: Any
    source: str = ""
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
