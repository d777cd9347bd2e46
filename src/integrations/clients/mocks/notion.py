"""
Mock Notion Store.

Purpose:
- Keeps Notion databases in memory so the service runs without a workspace
- Does NOT make any network calls
- Records every call so tests can assert what would have been sent

Usage:
- Wired in src/api/app.py when INTEGRATIONS_MODE=mock
- Used directly by the test-suite

Only the filter shapes the contact sync issues are understood:
"title"/"rich_text" equality and "and" compositions of them.
"""

from __future__ import annotations

import copy
import uuid
from typing import Any, Dict, List, Optional, Tuple

from src.integrations.contracts.notion import APIErrorCode, NotionAPIError, NotionPage, NotionStore


def _plain_text(value: Dict[str, Any], kind: str) -> str:
    return "".join(part.get("text", {}).get("content", "") for part in value.get(kind) or [])


def _matches(properties: Dict[str, Any], filter: Optional[Dict[str, Any]]) -> bool:
    if not filter:
        return True
    if "and" in filter:
        return all(_matches(properties, f) for f in filter["and"])
    if "or" in filter:
        return any(_matches(properties, f) for f in filter["or"])

    prop = properties.get(filter["property"]) or {}
    for kind in ("title", "rich_text"):
        if kind in filter:
            return _plain_text(prop, kind) == filter[kind]["equals"]
    raise ValueError(f"Unsupported filter: {filter!r}")


class InMemoryNotionStore(NotionStore):
    def __init__(self, fail_with: Optional[Exception] = None) -> None:
        self.databases: Dict[str, Dict[str, NotionPage]] = {}
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self.fail_with = fail_with

    def _check_failure(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def seed(self, database_id: str, properties: Dict[str, Any], page_id: Optional[str] = None) -> NotionPage:
        """Insert a page without recording a call."""
        page = NotionPage(id=page_id or uuid.uuid4().hex, properties=copy.deepcopy(properties))
        self.databases.setdefault(database_id, {})[page.id] = page
        return page

    def calls_named(self, name: str) -> List[Dict[str, Any]]:
        return [args for call, args in self.calls if call == name]

    async def query_database(self, database_id: str, filter: Optional[Dict[str, Any]] = None) -> List[NotionPage]:
        self.calls.append(("query_database", {"database_id": database_id, "filter": filter}))
        self._check_failure()
        pages = self.databases.get(database_id, {}).values()
        return [page for page in pages if _matches(page.properties, filter)]

    async def create_page(self, database_id: str, properties: Dict[str, Any]) -> NotionPage:
        self.calls.append(("create_page", {"database_id": database_id, "properties": properties}))
        self._check_failure()
        return self.seed(database_id, properties)

    async def update_page(self, page_id: str, properties: Dict[str, Any]) -> NotionPage:
        self.calls.append(("update_page", {"page_id": page_id, "properties": properties}))
        self._check_failure()
        for pages in self.databases.values():
            if page_id in pages:
                page = pages[page_id]
                page.properties.update(copy.deepcopy(properties))
                return page
        raise NotionAPIError(APIErrorCode.OBJECT_NOT_FOUND, f"Could not find page with ID: {page_id}.", status=404)
