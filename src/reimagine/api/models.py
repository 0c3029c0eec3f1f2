"""Pydantic models for the share API."""

from pydantic import BaseModel


class ShareCreateRequest(BaseModel):
    """Body of a share creation request."""

    image: str | None = None


class ShareCreateResponse(BaseModel):
    """Identifier of a newly created share."""

    id: str


class ThemeModel(BaseModel):
    """Theme entry exposed to front ends."""

    id: str
    title: str
    description: str
    prompt: str
    color: str


class ThemeListResponse(BaseModel):
    """Ordered theme catalog."""

    themes: list[ThemeModel]
