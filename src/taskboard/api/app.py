"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskboard.api.dependencies import (
    close_controller,
    close_preference_store,
    init_controller,
    init_preference_store,
)
from taskboard.api.models import APIResponse
from taskboard.api.routes import board
from taskboard.board import BoardController, BoardError, InvalidMoveError
from taskboard.config import BoardConfig
from taskboard.preferences import PreferenceStoreError
from taskboard.source import BoardDataSource, load_board_data

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    config: BoardConfig = app.state.config

    # Startup
    preferences = init_preference_store(config.db_path)
    source = BoardDataSource(config.data_url, timeout=config.fetch_timeout)
    try:
        data = load_board_data(source)
    finally:
        source.close()
    init_controller(BoardController(preferences=preferences, data=data))
    logger.info("Board ready")

    yield
    # Shutdown
    close_controller()
    close_preference_store()


def create_app(config: BoardConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Task Board API",
        description="REST API for the grouped, sortable task board",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.config = config or BoardConfig()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(InvalidMoveError)
    async def invalid_move_handler(_request: Request, exc: InvalidMoveError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=APIResponse[None](data=None, error=str(exc)).model_dump(),
        )

    @app.exception_handler(BoardError)
    async def board_error_handler(_request: Request, _exc: BoardError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=APIResponse[None](data=None, error="Internal server error").model_dump(),
        )

    @app.exception_handler(PreferenceStoreError)
    async def preference_store_error_handler(
        _request: Request, exc: PreferenceStoreError
    ) -> JSONResponse:
        logger.error("Preference store error: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=APIResponse[None](data=None, error="Internal server error").model_dump(),
        )

    # Include routers
    app.include_router(board.router, prefix="/api/v1")

    return app
