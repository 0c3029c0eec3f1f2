"""Supabase-backed share repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from reimagine.domain.errors import ShareNotFoundError, StorageError
from reimagine.domain.shares import ShareRecord
from reimagine.services.shares import ShareStore


@dataclass
class SupabaseShareRepository(ShareStore):
    """Supabase implementation for shared image persistence."""

    client: Client
    table: str = "shares"

    def put(self, image: str) -> str:
        """Insert a share row under a new UUID and return the id."""
        share_id = str(uuid4())
        try:
            response = (
                self.client.table(self.table)
                .insert({"id": share_id, "image": image})
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise StorageError("Failed to store share") from exc
        if not response.data:
            raise StorageError("Failed to store share")
        return share_id

    def get(self, share_id: str) -> ShareRecord:
        """Return the share row with the exact id."""
        try:
            response = (
                self.client.table(self.table)
                .select("id, image, created_at")
                .eq("id", share_id)
                .limit(1)
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise StorageError("Failed to load share") from exc
        if not response.data:
            raise ShareNotFoundError(share_id)
        row = response.data[0]
        return ShareRecord(
            id=row["id"],
            image=row["image"],
            created_at=_parse_timestamp(row.get("created_at")),
        )


def _parse_timestamp(value: object) -> datetime | None:
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    return None
