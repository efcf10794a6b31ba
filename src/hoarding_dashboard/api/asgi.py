"""ASGI entrypoint for the hoarding dashboard."""

from hoarding_dashboard.api.app import create_app
from hoarding_dashboard.containers import build_container

app = create_app(build_container())
