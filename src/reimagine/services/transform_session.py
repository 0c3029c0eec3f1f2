"""Client-side state machine for upload, transform and share."""

import asyncio
import logging
from dataclasses import dataclass, field, replace

from reimagine.adapters.share_client import ShareClient
from reimagine.catalog import DEFAULT_THEME, Theme, get_theme
from reimagine.domain.errors import ReimagineError
from reimagine.domain.session import (
    Failed,
    Idle,
    Processing,
    Ready,
    SessionState,
    SessionStatus,
)
from reimagine.services.transformation import (
    GENERIC_FAILURE_MESSAGE,
    TransformationClient,
)

logger = logging.getLogger(__name__)


@dataclass
class TransformSession:
    """Drives one user's journey from source photo to shareable result.

    Each submission is tagged with a sequence number and each share request
    with a request number. Results are merged only while both are still
    current, so a late response never overwrites state for a newer source
    image or a newer share.
    """

    transformation_client: TransformationClient
    share_client: ShareClient
    share_base_url: str
    selected_theme: Theme = DEFAULT_THEME
    auto_share: bool = True
    source_image: str | None = None
    state: SessionState = field(default_factory=Idle)
    _sequence: int = field(default=0, init=False, repr=False)
    _sharing: int = field(default=0, init=False, repr=False)
    _share_request: int = field(default=0, init=False, repr=False)
    _share_tasks: set[asyncio.Task[str | None]] = field(
        default_factory=set, init=False, repr=False
    )

    @property
    def status(self) -> SessionStatus:
        return self.state.status

    @property
    def result_image(self) -> str | None:
        return self.state.image if isinstance(self.state, Ready) else None

    @property
    def share_id(self) -> str | None:
        return self.state.share_id if isinstance(self.state, Ready) else None

    @property
    def error(self) -> str | None:
        return self.state.error if isinstance(self.state, Failed) else None

    @property
    def is_sharing(self) -> bool:
        return self._sharing > 0

    @property
    def share_url(self) -> str | None:
        if self.share_id is None:
            return None
        return f"{self.share_base_url}/share/{self.share_id}"

    @property
    def download_filename(self) -> str:
        return f"future-{self.selected_theme.id}.png"

    def set_source(self, image: str) -> None:
        """Replace the source photo and reset any previous outcome."""
        self._sequence += 1
        self.source_image = image
        self.state = Idle()

    def select_theme(self, theme: Theme | str) -> None:
        """Choose the theme used by future submissions."""
        self.selected_theme = get_theme(theme) if isinstance(theme, str) else theme

    async def submit(self) -> None:
        """Transform the current source with the selected theme."""
        if self.source_image is None or isinstance(self.state, Processing):
            return
        await self._run_transform(self.source_image, self.selected_theme.prompt)

    async def retry(self) -> None:
        """Re-issue the transform after a failure."""
        if self.source_image is None or not isinstance(self.state, Failed):
            return
        await self._run_transform(self.source_image, self.selected_theme.prompt)

    async def share(self) -> str | None:
        """Create a new share for the current result, replacing any previous id."""
        if not isinstance(self.state, Ready):
            return None
        self._share_request += 1
        return await self._share(
            self._sequence, self._share_request, self.state.image
        )

    async def drain(self) -> None:
        """Wait for background share tasks to settle."""
        while self._share_tasks:
            await asyncio.gather(*list(self._share_tasks))

    def snapshot(self) -> dict[str, object]:
        """Return the derived session view for presentation."""
        return {
            "status": self.status.value,
            "theme_id": self.selected_theme.id,
            "has_source": self.source_image is not None,
            "result_image": self.result_image,
            "share_id": self.share_id,
            "share_url": self.share_url,
            "error": self.error,
            "is_sharing": self.is_sharing,
        }

    async def _run_transform(self, image: str, prompt: str) -> None:
        self._sequence += 1
        sequence = self._sequence
        self.state = Processing()
        try:
            result = await self.transformation_client.transform(image, prompt)
        except ReimagineError as exc:
            self._on_failure(sequence, str(exc) or GENERIC_FAILURE_MESSAGE)
            return
        except Exception:
            logger.exception("Unexpected transformation failure")
            self._on_failure(sequence, GENERIC_FAILURE_MESSAGE)
            return
        self._on_success(sequence, result)

    def _on_success(self, sequence: int, image: str) -> None:
        if sequence != self._sequence:
            logger.debug("Discarding stale transform result %s", sequence)
            return
        self.state = Ready(image=image)
        if self.auto_share:
            self._share_request += 1
            task = asyncio.create_task(
                self._share(sequence, self._share_request, image)
            )
            self._share_tasks.add(task)
            task.add_done_callback(self._share_tasks.discard)

    def _on_failure(self, sequence: int, message: str) -> None:
        if sequence != self._sequence:
            logger.debug("Discarding stale transform failure %s", sequence)
            return
        self.state = Failed(error=message)

    async def _share(self, sequence: int, request: int, image: str) -> str | None:
        self._sharing += 1
        try:
            share_id = await self.share_client.create_share(image)
        except ReimagineError:
            logger.exception("Sharing failed")
            return None
        except Exception:
            logger.exception("Unexpected sharing failure")
            return None
        finally:
            self._sharing -= 1
        if (
            sequence != self._sequence
            or request != self._share_request
            or not isinstance(self.state, Ready)
            or self.state.image != image
        ):
            logger.debug("Discarding stale share %s", share_id)
            return None
        self.state = replace(self.state, share_id=share_id)
        return share_id
