"""ASGI entrypoint for the macro calculator API."""

from macro_calculator.api.app import create_app
from macro_calculator.containers import build_container

app = create_app(build_container())
