"""ASGI entrypoint for the IntelliForm API."""

from intelliform.api.app import create_app
from intelliform.containers import build_container

app = create_app(build_container())
