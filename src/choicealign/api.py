"""HTTP API for choicealign."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException

from choicealign import __version__
from choicealign.config import configure_logging, load_config
from choicealign.core import run_find, run_recognize, run_tokenize
from choicealign.models import (
    ChoicesRequest,
    ChoicesResponse,
    HealthResponse,
    TokenizeRequest,
    TokenizeResponse,
)


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="choicealign",
        version=__version__,
        description="Choice recognition service API.",
    )
    config = load_config()
    configure_logging(config.log_level)

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__, env=config.env)

    @app.post("/v1/tokenize", response_model=TokenizeResponse, tags=["recognition"])
    def tokenize(request: TokenizeRequest) -> TokenizeResponse:
        return run_tokenize(request, config)

    @app.post("/v1/find", response_model=ChoicesResponse, tags=["recognition"])
    def find(request: ChoicesRequest) -> ChoicesResponse:
        try:
            return run_find(request, config)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    @app.post("/v1/recognize", response_model=ChoicesResponse, tags=["recognition"])
    def recognize(request: ChoicesRequest) -> ChoicesResponse:
        try:
            return run_recognize(request, config)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    return app


app = create_app()
