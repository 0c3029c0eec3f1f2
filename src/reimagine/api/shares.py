"""Share endpoints: create a share and view it."""

from __future__ import annotations

import html
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from reimagine.api.models import ShareCreateRequest, ShareCreateResponse

if TYPE_CHECKING:
    from reimagine.containers import AppContainer

router = APIRouter(tags=["shares"])


@router.post("/api/share", response_model=ShareCreateResponse)
async def create_share(
    body: ShareCreateRequest, request: Request
) -> ShareCreateResponse:
    """Store an image and return its share id.

    Only base64 data URIs are accepted (400 otherwise) since the payload is
    embedded verbatim as the viewer's image source and download link.
    """
    container: AppContainer = request.app.state.container
    share_id = container.share_service.create(body.image)
    return ShareCreateResponse(id=share_id)


@router.get("/share/{share_id}", response_class=HTMLResponse)
async def view_share(share_id: str, request: Request) -> HTMLResponse:
    """Render a standalone page to view and download a shared image."""
    container: AppContainer = request.app.state.container
    record = container.share_service.read(share_id)
    return HTMLResponse(render_viewer(record.image))


def render_viewer(image: str) -> str:
    """Return viewer markup for an image data URI."""
    return _VIEWER_HTML.replace("{image}", html.escape(image, quote=True))


_VIEWER_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Your Future Occupation</title>
    <style>
      body {
        background: #09090b; color: #f4f4f5; font-family: ui-sans-serif, sans-serif;
        min-height: 100vh; margin: 0; display: flex;
        align-items: center; justify-content: center;
      }
      .card {
        max-width: 28rem; width: 100%; padding: 1.5rem; text-align: center;
        background: rgba(255, 255, 255, 0.05); border-radius: 1rem;
        border: 1px solid rgba(255, 255, 255, 0.1);
      }
      h1 { color: #34d399; margin-bottom: 1.5rem; }
      img { width: 100%; height: auto; border-radius: 0.75rem; margin-bottom: 1.5rem; }
      a.download {
        display: block; padding: 0.75rem; border-radius: 0.75rem;
        background: #10b981; color: #09090b; font-weight: bold; text-decoration: none;
      }
      p { margin-top: 1rem; color: #71717a; font-size: 0.875rem; }
    </style>
  </head>
  <body>
    <div class="card">
      <h1>Your Future Self</h1>
      <img src="{image}" alt="Future Occupation" />
      <a class="download" href="{image}" download="my-future.png">Download Image</a>
      <p>Created with Reimagine My Future</p>
    </div>
  </body>
</html>
"""
