"""
Notion store contract.

The Notion workspace is the only durable store this service talks to. Both the
real HTTP client and the in-memory mock implement NotionStore, so the contact
upsert logic never depends on which one is wired in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class APIErrorCode(str, Enum):
    UNAUTHORIZED = "unauthorized"
    RESTRICTED_RESOURCE = "restricted_resource"
    OBJECT_NOT_FOUND = "object_not_found"
    RATE_LIMITED = "rate_limited"
    INVALID_JSON = "invalid_json"
    INVALID_REQUEST_URL = "invalid_request_url"
    INVALID_REQUEST = "invalid_request"
    VALIDATION_ERROR = "validation_error"
    MISSING_VERSION = "missing_version"
    CONFLICT_ERROR = "conflict_error"
    INTERNAL_SERVER_ERROR = "internal_server_error"
    SERVICE_UNAVAILABLE = "service_unavailable"
    DATABASE_CONNECTION_UNAVAILABLE = "database_connection_unavailable"
    GATEWAY_TIMEOUT = "gateway_timeout"


_STATUS_CODES = {
    400: APIErrorCode.INVALID_REQUEST,
    401: APIErrorCode.UNAUTHORIZED,
    403: APIErrorCode.RESTRICTED_RESOURCE,
    404: APIErrorCode.OBJECT_NOT_FOUND,
    409: APIErrorCode.CONFLICT_ERROR,
    429: APIErrorCode.RATE_LIMITED,
    500: APIErrorCode.INTERNAL_SERVER_ERROR,
    503: APIErrorCode.SERVICE_UNAVAILABLE,
    504: APIErrorCode.GATEWAY_TIMEOUT,
}


def parse_error_code(raw: Any, status: Optional[int] = None) -> Union[APIErrorCode, str]:
    """Map a Notion error code (or, failing that, an HTTP status) to APIErrorCode.

    Codes Notion adds later are kept as plain strings.
    """
    if raw:
        try:
            return APIErrorCode(str(raw))
        except ValueError:
            return str(raw)
    if status is not None and status in _STATUS_CODES:
        return _STATUS_CODES[status]
    return APIErrorCode.INTERNAL_SERVER_ERROR


class NotionAPIError(Exception):
    def __init__(
        self,
        code: Union[APIErrorCode, str],
        message: str,
        *,
        status: Optional[int] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status
        self.payload = payload or {}

    @property
    def is_unauthorized(self) -> bool:
        return self.code == APIErrorCode.UNAUTHORIZED

    def __str__(self) -> str:
        code = getattr(self.code, "value", self.code)
        return f"Notion API error {code} (status={self.status}): {self.message}"


@dataclass
class NotionPage:
    id: str
    properties: Dict[str, Any] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "NotionPage":
        return cls(id=str(data["id"]), properties=data.get("properties") or {}, raw=data)


# ---------------------------------------------------------------------------
# Database query filters
# ---------------------------------------------------------------------------

def title_equals(prop: str, value: str) -> Dict[str, Any]:
    return {"property": prop, "title": {"equals": value}}


def rich_text_equals(prop: str, value: str) -> Dict[str, Any]:
    return {"property": prop, "rich_text": {"equals": value}}


def and_filter(*filters: Dict[str, Any]) -> Dict[str, Any]:
    return {"and": list(filters)}


class NotionStore(ABC):
    """Pages/databases operations the contact sync needs."""

    @abstractmethod
    async def query_database(self, database_id: str, filter: Optional[Dict[str, Any]] = None) -> List[NotionPage]:
        """Return the pages of a database matching the filter."""

    @abstractmethod
    async def create_page(self, database_id: str, properties: Dict[str, Any]) -> NotionPage:
        """Create a page in a database and return it with its assigned id."""

    @abstractmethod
    async def update_page(self, page_id: str, properties: Dict[str, Any]) -> NotionPage:
        """Overwrite the given properties of an existing page."""
