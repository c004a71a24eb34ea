"""ASGI entrypoint for the photobooth API."""

from photobooth.api.app import create_app
from photobooth.containers import build_container

app = create_app(build_container())
