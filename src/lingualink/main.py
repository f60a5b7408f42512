"""
LinguaLink Translation Service - FastAPI Application

Serves the translation, language list and history endpoints, plus health
and Prometheus metrics.

The app is built on demand, either by the `lingualink` command or with
`uvicorn lingualink.main:create_app --factory`.
"""

import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from lingualink import __version__
from lingualink.api import history, languages, translate
from lingualink.config import Settings, get_settings
from lingualink.observability import get_logger, setup_logging
from lingualink.persistence import ObjectStore, TranslationRepository, create_object_store
from lingualink.translation import (
    CompletionClient,
    TranslationError,
    TranslationService,
    create_completion_client,
)

SERVICE_NAME = "lingualink"

logger = get_logger(__name__)


def _build_translation_service(
    settings: Settings,
    completion_client: CompletionClient | None,
    mock_translation: bool,
) -> TranslationService:
    if completion_client is not None:
        return TranslationService(completion_client)

    try:
        client = create_completion_client(settings, mock=mock_translation)
    except TranslationError as e:
        # Not fatal: the translate endpoint reports the configuration error
        logger.warning("Translation disabled", code=e.code.value, reason=e.message)
        return TranslationService(None, client_error=e)

    logger.info("Translation client ready", client=client.client_name, model=settings.openai_model)
    return TranslationService(client)


def create_app(
    settings: Settings | None = None,
    *,
    completion_client: CompletionClient | None = None,
    object_store: ObjectStore | None = None,
    mock_translation: bool = False,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Service settings (defaults to the environment)
        completion_client: Completion client to use instead of the one
            built from settings
        object_store: Object store to use instead of the one built from settings
        mock_translation: Use the mock completion client

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    translation_service = _build_translation_service(settings, completion_client, mock_translation)
    store = object_store or create_object_store(settings)
    repository = TranslationRepository(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan manager."""
        logger.info("LinguaLink service starting", version=__version__)
        yield
        logger.info("LinguaLink service shutting down")
        if app.state.completion_client is not None:
            await app.state.completion_client.close()
        await store.close()

    app = FastAPI(
        title="LinguaLink Translation Service",
        description="Text translation through a completion API with translation history",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.translation_service = translation_service
    app.state.completion_client = translation_service.client
    app.state.repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def assign_request_id(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    app.include_router(translate.router, tags=["translation"])
    app.include_router(languages.router, tags=["languages"])
    app.include_router(history.router, tags=["history"])

    @app.get("/health")
    async def health_check() -> JSONResponse:
        """Health check endpoint."""
        return JSONResponse({"status": "ok", "service": SERVICE_NAME})

    @app.get("/")
    async def root() -> JSONResponse:
        """Root endpoint."""
        return JSONResponse(
            {
                "service": SERVICE_NAME,
                "version": __version__,
                "status": "running",
                "translation_configured": translation_service.is_configured,
            }
        )

    @app.get("/metrics")
    async def metrics_endpoint() -> Response:
        """Prometheus metrics endpoint."""
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return app

