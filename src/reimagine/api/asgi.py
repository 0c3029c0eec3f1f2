"""ASGI entrypoint for the share API."""

from reimagine.api.app import create_app
from reimagine.containers import build_container

app = create_app(build_container())
