"""
Integrations layer.
This package contains all code used to communicate with the Notion workspace
that stores organizations and contacts.

Key rule:
- Contact mapping code MUST NOT call the Notion API directly.
- It goes through the NotionStore contract (src/integrations/contracts/notion.py).
- The in-memory mock is used for development and tests; the real HTTP client otherwise.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (src/api/app.py).
"""

from .contracts.notion import (
    APIErrorCode,
    NotionAPIError,
    NotionPage,
    NotionStore,
    and_filter,
    rich_text_equals,
    title_equals,
)

__all__ = [
    "APIErrorCode", "NotionAPIError", "NotionPage", "NotionStore",
    "and_filter", "rich_text_equals", "title_equals",
]
