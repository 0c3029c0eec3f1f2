"""Image transformation through a generative provider."""

import logging
from dataclasses import dataclass
from typing import Protocol

from reimagine.domain.errors import NoImageReturnedError, ProviderError
from reimagine.domain.images import ImagePayload, png_data_url

logger = logging.getLogger(__name__)

NO_IMAGE_MESSAGE = "The AI didn't return an image. Please try again."
GENERIC_FAILURE_MESSAGE = "Something went wrong during the transformation."


class ProviderTransportError(Exception):
    """Connection-level provider failure that may be retried once."""


class ImageProvider(Protocol):
    """Interface for a generative image-editing provider."""

    async def generate(
        self,
        *,
        model: str,
        image_bytes: bytes,
        mime_type: str,
        prompt: str,
    ) -> list[str | None]:
        """Return the base64 image parts of the provider response, in order.

        Raises ``ProviderTransportError`` for connection failures and
        ``ProviderError`` for any other provider failure.
        """


@dataclass
class TransformationClient:
    """Runs one image + prompt through the provider and returns a data URI."""

    provider: ImageProvider
    model: str
    transport_retries: int = 1

    async def transform(self, image: str, prompt: str) -> str:
        """Transform a data URI image with a text prompt."""
        payload = ImagePayload.from_data_url(image)
        parts = await self._generate(payload, prompt)
        for part in parts:
            if part:
                return png_data_url(part)
        raise NoImageReturnedError(NO_IMAGE_MESSAGE)

    async def _generate(self, payload: ImagePayload, prompt: str) -> list[str | None]:
        attempt = 0
        while True:
            try:
                return await self.provider.generate(
                    model=self.model,
                    image_bytes=payload.data,
                    mime_type=payload.mime_type,
                    prompt=prompt,
                )
            except ProviderTransportError as exc:
                if attempt >= self.transport_retries:
                    raise ProviderError(str(exc) or GENERIC_FAILURE_MESSAGE) from exc
                attempt += 1
                logger.warning("Provider transport error, retrying: %s", exc)
