"""ASGI entrypoint for the registration station."""

from seminar_registration.api.app import create_app
from seminar_registration.containers import build_container

app = create_app(build_container())
