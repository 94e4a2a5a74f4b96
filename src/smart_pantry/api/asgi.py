"""ASGI entrypoint for the recipe generation API."""

from smart_pantry.api.app import create_app
from smart_pantry.containers import build_container

app = create_app(build_container())
