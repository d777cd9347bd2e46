import hmac
import logging
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from src.integrations.contracts.notion import NotionStore
from src.utils.config_loader import AppConfig

logger = logging.getLogger(__name__)


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_store(request: Request) -> NotionStore:
    return request.app.state.store


def is_authorized(config: AppConfig, path: str, authorization: Optional[str]) -> bool:
    """Public paths always pass; everything else needs the exact shared secret."""
    if path.startswith(config.gate.public_path_prefix):
        return True
    expected = config.password
    return authorization is not None and bool(expected) and hmac.compare_digest(
        authorization.encode("utf-8"), expected.encode("utf-8")
    )


async def shared_secret_protection(request: Request, call_next):
    """HTTP middleware: runs before routing, so no body is read for rejected requests."""
    config = get_config(request)
    path = request.url.path
    authorization = request.headers.get("Authorization")

    ok = is_authorized(config, path, authorization)
    logger.debug("Gate: path=%s header_present=%s ok=%s", path, authorization is not None, ok)

    if not ok:
        return JSONResponse(status_code=401, content={"error": "Unauthorized"})
    return await call_next(request)
