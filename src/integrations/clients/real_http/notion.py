"""
Real Notion HTTP Client.

Used whenever INTEGRATIONS_MODE is "real" (the default). Talks to the Notion
REST API directly with httpx; error responses are raised as NotionAPIError so
the API layer can tell an invalid integration token apart from other failures.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from src.integrations.contracts.notion import NotionAPIError, NotionPage, NotionStore, parse_error_code
from src.utils.config_loader import NotionConfig

logger = logging.getLogger(__name__)


class NotionClient(NotionStore):
    def __init__(
        self,
        token: str,
        config: NotionConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.token = token
        self.base_url = config.api_base_url.rstrip("/")
        self.api_version = config.api_version
        self.timeout_seconds = config.timeout_seconds
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Notion-Version": self.api_version,
            "Content-Type": "application/json",
        }

    async def _request(self, method: str, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
            response = await client.request(method, url, json=payload, headers=self._headers())

        if response.is_success:
            return response.json() if response.content else {}

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        code = parse_error_code(body.get("code"), response.status_code)
        message = str(body.get("message") or response.reason_phrase or "Notion request failed")
        logger.debug("Notion %s %s failed: status=%s code=%s", method, path, response.status_code, code)
        raise NotionAPIError(code, message, status=response.status_code, payload=body)

    async def query_database(self, database_id: str, filter: Optional[Dict[str, Any]] = None) -> List[NotionPage]:
        payload: Dict[str, Any] = {}
        if filter is not None:
            payload["filter"] = filter
        data = await self._request("POST", f"/databases/{database_id}/query", payload)
        return [NotionPage.from_api(item) for item in data.get("results") or []]

    async def create_page(self, database_id: str, properties: Dict[str, Any]) -> NotionPage:
        payload = {
            "parent": {"database_id": database_id},
            "properties": properties,
        }
        data = await self._request("POST", "/pages", payload)
        return NotionPage.from_api(data)

    async def update_page(self, page_id: str, properties: Dict[str, Any]) -> NotionPage:
        data = await self._request("PATCH", f"/pages/{page_id}", {"properties": properties})
        return NotionPage.from_api(data)
