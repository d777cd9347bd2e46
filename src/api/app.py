"""
FastAPI application factory.
"""

import logging
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.dependencies import shared_secret_protection
from src.api.ios_contact_router import router as ios_contact_router
from src.error_handler import ErrorHandler
from src.integrations.clients.mocks.notion import InMemoryNotionStore
from src.integrations.clients.real_http.notion import NotionClient
from src.integrations.contracts.notion import NotionAPIError, NotionStore
from src.utils.config_loader import AppConfig

logger = logging.getLogger(__name__)


def _select_store(config: AppConfig) -> NotionStore:
    if config.integrations_mode == "mock":
        logger.info("INTEGRATIONS_MODE=mock: using in-memory Notion store")
        return InMemoryNotionStore()
    return NotionClient(token=config.notion_token, config=config.notion)


def create_app(config: AppConfig, store: Optional[NotionStore] = None) -> FastAPI:
    app = FastAPI(
        title="iOS Contact Notion Sync",
        description="Upserts contacts exported from an iOS Shortcut into a Notion database",
        version="1.0.0",
    )
    app.state.config = config
    app.state.store = store if store is not None else _select_store(config)

    error_handler = ErrorHandler()

    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("Rejected payload on %s: %r", request.url.path, exc.body)
        return await request_validation_exception_handler(request, exc)

    async def translate_error(request: Request, exc: Exception):
        status_code, body = error_handler.translate(exc, context={"path": request.url.path})
        return JSONResponse(status_code=status_code, content=body)

    app.add_exception_handler(NotionAPIError, translate_error)
    app.add_exception_handler(httpx.HTTPError, translate_error)
    app.add_exception_handler(Exception, translate_error)

    # protect everything by default, docs and unknown paths included
    app.middleware("http")(shared_secret_protection)

    app.include_router(ios_contact_router)
    return app
