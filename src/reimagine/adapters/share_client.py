"""HTTP client for the share endpoint."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from reimagine.domain.errors import ShareUnavailableError


class ShareClient(Protocol):
    """Interface for creating shares from the client side."""

    async def create_share(self, image: str) -> str:
        """Create a share for an image and return its id."""


@dataclass
class HttpxShareClient(ShareClient):
    """Share client posting to ``/api/share`` with httpx."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxShareClient":
        """Create a share client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient())

    async def create_share(self, image: str) -> str:
        """Post an image and return the minted share id."""
        url = f"{self.base_url}/api/share"
        try:
            response = await self.http_client.post(
                url, json={"image": image}, timeout=30
            )
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise ShareUnavailableError(f"Share request failed: {exc}") from exc
        share_id = payload.get("id") if isinstance(payload, dict) else None
        if not share_id:
            raise ShareUnavailableError("Share response did not include an id")
        return str(share_id)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
