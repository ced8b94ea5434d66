"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from genart.config import settings
from genart.engine.registry import load_paintings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.genart_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="genart",
        description="Procedural vector art — perfect mazes and consolidated stroke patterns as SVG",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all painting modules to trigger registration
    load_paintings()

    from genart.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
