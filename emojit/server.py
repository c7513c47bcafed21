"""
HTTP front-end for the translator.

POST /translate accepts {"message": "..."} and answers
{"response": "ok", "translation": "..."}.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request
from fastapi.staticfiles import StaticFiles
from path import Path
from pydantic import BaseModel, Field

from emojit.common.config import BaseConfig, RootConfig
from emojit.pipeline import Translator, initialize

logger = logging.getLogger(__name__)


class ServerConfig(BaseConfig):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8080, description="Bind port", ge=1, le=65535)
    static_dir: str | None = Field(
        default=None,
        description="Directory served at / when set",
    )


class TranslateRequest(BaseModel):
    message: str


class TranslateResponse(BaseModel):
    response: str = "ok"
    translation: str


router = APIRouter(tags=["Translate"])


@router.post("/translate", response_model=TranslateResponse)
def translate_message(body: TranslateRequest, request: Request) -> TranslateResponse:
    """Translate a message into pictograms."""
    translator: Translator = request.app.state.translator
    return TranslateResponse(translation=translator.translate(body.message))


@router.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok"}


def create_app(
    config: RootConfig | None = None,
    translator: Translator | None = None,
) -> FastAPI:
    """Build the application.

    When no translator is given one is initialized from the config at startup.
    """
    config = config or RootConfig()
    server = ServerConfig(**config.server)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "translator", None) is None:
            app.state.translator = initialize(config)
        yield

    app = FastAPI(
        title="Emoji Translate",
        description="Rewrite messages with pictograms",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.translator = translator
    app.include_router(router)

    if server.static_dir:
        static = Path(server.static_dir)
        if static.isdir():
            app.mount("/", StaticFiles(directory=static, html=True), name="static")
        else:
            logger.warning(f"Static directory not found, not serving files: {static}")

    return app
