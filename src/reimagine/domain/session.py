"""State variants for a transform session."""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


class SessionStatus(StrEnum):
    """User-visible lifecycle of a transform session."""

    IDLE = "idle"
    PROCESSING = "processing"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class Idle:
    """No transform has been submitted for the current source."""

    status: ClassVar[SessionStatus] = SessionStatus.IDLE


@dataclass(frozen=True)
class Processing:
    """A transform call is outstanding."""

    status: ClassVar[SessionStatus] = SessionStatus.PROCESSING


@dataclass(frozen=True)
class Ready:
    """A transformed image is available, optionally with a share id."""

    image: str
    share_id: str | None = None
    status: ClassVar[SessionStatus] = SessionStatus.READY


@dataclass(frozen=True)
class Failed:
    """The last transform failed with a user-presentable message."""

    error: str
    status: ClassVar[SessionStatus] = SessionStatus.FAILED


SessionState = Idle | Processing | Ready | Failed
