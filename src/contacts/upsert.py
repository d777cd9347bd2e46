"""
Organization resolution and contact upsert against the Notion databases.

Contacts are matched on exact (Last Name, First Name). The lookup and the
write are two separate Notion calls: two requests for the same new contact
can both miss and both create a page, and re-sending a contact to a database
that has no match for it always creates a new page.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from src.contacts.models import ContactPayload
from src.contacts.normalizer import normalize_contact
from src.contacts.properties import build_contact_properties, build_organization_properties
from src.integrations.contracts.notion import NotionStore, and_filter, rich_text_equals, title_equals
from src.utils.config_loader import AppConfig

logger = logging.getLogger(__name__)


class UpsertOutcome(str, Enum):
    CREATED = "created"
    UPDATED = "updated"


@dataclass
class UpsertResult:
    outcome: UpsertOutcome
    page_id: str
    last_name: str
    first_name: Optional[str] = None

    @property
    def status_code(self) -> int:
        return 201 if self.outcome == UpsertOutcome.CREATED else 200

    def to_response(self) -> Dict[str, Any]:
        if self.outcome == UpsertOutcome.CREATED:
            body = {
                "message": "Successfully created contact",
                "pageId": self.page_id,
                "firstName": self.first_name,
                "lastName": self.last_name,
            }
        else:
            body = {
                "message": "Successfully updated contact",
                "firstName": self.first_name,
                "lastName": self.last_name,
                "pageId": self.page_id,
            }
        return {k: v for k, v in body.items() if v is not None}


async def resolve_organization(store: NotionStore, config: AppConfig, name: Optional[str]) -> Optional[str]:
    """Return the id of the organization page titled `name`, creating it if needed."""
    if not name:
        return None

    database_id = config.notion.organizations_database_id
    matches = await store.query_database(database_id, title_equals("Name", name))
    if matches:
        return matches[0].id

    page = await store.create_page(database_id, build_organization_properties(name))
    logger.info("Created organization %r (page_id=%s)", name, page.id)
    return page.id


async def upsert_contact(store: NotionStore, config: AppConfig, payload: ContactPayload) -> UpsertResult:
    contact = normalize_contact(payload)
    organization_id = await resolve_organization(store, config, contact.organization)
    properties = build_contact_properties(contact, organization_id)

    database_id = config.notion.contacts_database_id
    existing = await store.query_database(
        database_id,
        and_filter(
            title_equals("Last Name", contact.last_name),
            rich_text_equals("First Name", contact.first_name or ""),
        ),
    )

    if not existing:
        page = await store.create_page(database_id, properties)
        logger.info("Created contact %s %s (page_id=%s)", contact.first_name or "", contact.last_name, page.id)
        return UpsertResult(UpsertOutcome.CREATED, page.id, contact.last_name, contact.first_name)

    if len(existing) > 1:
        logger.warning(
            "%d contacts named %s %s; updating the first (page_id=%s)",
            len(existing), contact.first_name or "", contact.last_name, existing[0].id,
        )
    page = await store.update_page(existing[0].id, properties)
    logger.info("Updated contact %s %s (page_id=%s)", contact.first_name or "", contact.last_name, page.id)
    return UpsertResult(UpsertOutcome.UPDATED, page.id, contact.last_name, contact.first_name)
