"""ASGI entrypoint for the salad catalog API."""

from salad_catalog.api.app import create_app
from salad_catalog.containers import build_container

app = create_app(build_container())
