"""Domain models for shared images."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ShareRecord:
    """Represents a persisted, publicly viewable image."""

    id: str
    image: str
    created_at: datetime | None = None
