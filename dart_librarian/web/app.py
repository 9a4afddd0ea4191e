"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from dart_librarian import __version__
from dart_librarian.web.api import router


def create_app() -> FastAPI:
    app = FastAPI(title="dart-librarian", version=__version__)
    app.include_router(router)
    return app
