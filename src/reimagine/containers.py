"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from reimagine.adapters.openai_image_client import OpenAIImageClient
from reimagine.adapters.share_client import HttpxShareClient, ShareClient
from reimagine.adapters.supabase_share_repository import SupabaseShareRepository
from reimagine.config import Settings, normalize_base_url
from reimagine.services.shares import ShareService
from reimagine.services.transform_session import TransformSession
from reimagine.services.transformation import TransformationClient


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    share_service: ShareService
    transformation_client: TransformationClient
    share_client: ShareClient
    close_resources: Callable[[], Awaitable[None]]

    def new_session(self, auto_share: bool = True) -> TransformSession:
        """Create a fresh transform session bound to the shared clients."""
        return TransformSession(
            transformation_client=self.transformation_client,
            share_client=self.share_client,
            share_base_url=normalize_base_url(self.settings.share_base_url),
            auto_share=auto_share,
        )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    share_repository = SupabaseShareRepository(
        supabase_client, table=resolved_settings.share_table
    )
    share_service = ShareService(
        store=share_repository,
        max_payload_bytes=resolved_settings.share_max_payload_bytes,
    )
    image_client = OpenAIImageClient.create(
        resolved_settings.openai_api_key,
        timeout=resolved_settings.openai_timeout_seconds,
    )
    transformation_client = TransformationClient(
        provider=image_client,
        model=resolved_settings.openai_image_model,
        transport_retries=resolved_settings.provider_transport_retries,
    )
    share_client = HttpxShareClient.create(
        normalize_base_url(resolved_settings.share_base_url)
    )

    async def close_resources() -> None:
        await image_client.close()
        await share_client.close()

    return AppContainer(
        settings=resolved_settings,
        share_service=share_service,
        transformation_client=transformation_client,
        share_client=share_client,
        close_resources=close_resources,
    )
