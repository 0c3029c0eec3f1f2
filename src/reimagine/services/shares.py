"""Share creation and lookup over a durable store."""

import logging
from dataclasses import dataclass
from typing import Protocol

from reimagine.domain.errors import InvalidInputError, PayloadTooLargeError
from reimagine.domain.images import ImagePayload
from reimagine.domain.shares import ShareRecord

logger = logging.getLogger(__name__)


class ShareStore(Protocol):
    """Append-only persistence interface for shared images."""

    def put(self, image: str) -> str:
        """Persist an image under a fresh id and return the id."""

    def get(self, share_id: str) -> ShareRecord:
        """Return the share with the exact id or raise ``ShareNotFoundError``."""


@dataclass
class ShareService:
    """Validates share requests and delegates to the store."""

    store: ShareStore
    max_payload_bytes: int

    def create(self, image: str | None) -> str:
        """Store an image and return its new share id.

        Every call mints a new share, even for an identical payload.
        """
        if not image:
            raise InvalidInputError("No image provided")
        if len(image.encode("utf-8")) > self.max_payload_bytes:
            raise PayloadTooLargeError("Image exceeds the maximum payload size")
        ImagePayload.from_data_url(image)
        share_id = self.store.put(image)
        logger.info("Created share %s", share_id)
        return share_id

    def read(self, share_id: str) -> ShareRecord:
        """Return a stored share by id."""
        return self.store.get(share_id)
