"""FastAPI application factory."""

from __future__ import annotations
import os
from typing import Optional, Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from indoormap.api.routes import router

# Comma-separated origins of browser map viewers allowed to call the API
CORS_ORIGINS_ENV = "INDOORMAP_CORS_ORIGINS"


def _cors_origins() -> list[str]:
    raw = os.environ.get(CORS_ORIGINS_ENV, "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def create_app(cors_origins: Optional[Sequence[str]] = None) -> FastAPI:
    app = FastAPI(
        title="Indoor Map Service",
        description="Parses indoor map documents into floors, walls and sensors",
        version="0.1.0",
    )

    # Viewers only read maps and post documents; no cookies are involved
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins) if cors_origins is not None else _cors_origins(),
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
