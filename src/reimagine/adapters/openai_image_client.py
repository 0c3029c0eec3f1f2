"""OpenAI Images API client for photo transformation."""

from dataclasses import dataclass

import openai
from openai import AsyncOpenAI

from reimagine.domain.errors import ProviderError
from reimagine.services.transformation import (
    GENERIC_FAILURE_MESSAGE,
    ImageProvider,
    ProviderTransportError,
)


@dataclass
class OpenAIImageClient(ImageProvider):
    """Image provider backed by the OpenAI image edit endpoint."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str, timeout: float) -> "OpenAIImageClient":
        """Create an OpenAI image client without SDK-level retries."""
        return cls(client=AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0))

    async def generate(
        self,
        *,
        model: str,
        image_bytes: bytes,
        mime_type: str,
        prompt: str,
    ) -> list[str | None]:
        """Call images.edit and return the base64 image parts."""
        extension = mime_type.split("/", 1)[-1]
        try:
            response = await self.client.images.edit(
                model=model,
                image=(f"photo.{extension}", image_bytes, mime_type),
                prompt=prompt,
            )
        except openai.APIConnectionError as exc:
            raise ProviderTransportError(str(exc)) from exc
        except openai.APIError as exc:
            raise ProviderError(exc.message or GENERIC_FAILURE_MESSAGE) from exc
        return [item.b64_json for item in response.data or []]

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
