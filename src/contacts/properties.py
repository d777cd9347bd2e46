"""
Notion property-set construction for the Contacts and Organizations databases.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from src.contacts.models import NormalizedContact

PropertyValue = Dict[str, Any]


def _text(content: str) -> List[Dict[str, Any]]:
    return [{"text": {"content": content}}]


def title_value(content: str) -> PropertyValue:
    return {"title": _text(content)}


def rich_text_value(content: str) -> PropertyValue:
    return {"rich_text": _text(content)}


def email_value(email: str) -> PropertyValue:
    return {"email": email}


def phone_value(number: str) -> PropertyValue:
    return {"phone_number": number}


def url_value(url: str) -> PropertyValue:
    return {"url": url}


def relation_value(*page_ids: str) -> PropertyValue:
    return {"relation": [{"id": page_id} for page_id in page_ids]}


def select_value(name: str) -> PropertyValue:
    return {"select": {"name": name}}


class PropertySetBuilder:
    """Collects Notion properties, leaving out every field whose source value is missing."""

    def __init__(self) -> None:
        self._properties: Dict[str, PropertyValue] = {}

    def set(self, name: str, value: PropertyValue) -> "PropertySetBuilder":
        self._properties[name] = value
        return self

    def add(
        self,
        name: str,
        factory: Callable[[Any], PropertyValue],
        source: Optional[Any],
        *,
        keep_empty: bool = False,
    ) -> "PropertySetBuilder":
        if source is None or (source == "" and not keep_empty):
            return self
        return self.set(name, factory(source))

    def build(self) -> Dict[str, PropertyValue]:
        return dict(self._properties)


def build_contact_properties(
    contact: NormalizedContact,
    organization_id: Optional[str] = None,
) -> Dict[str, PropertyValue]:
    builder = (
        PropertySetBuilder()
        .set("Last Name", title_value(contact.last_name))
        .add("First Name", rich_text_value, contact.first_name)
        .add("Email (Work)", email_value, contact.work_email)
        .add("Email (Home)", email_value, contact.home_email)
        .add("Main", phone_value, contact.main_phone)
        .add("Work", phone_value, contact.work_phone)
        .add("Mobile", phone_value, contact.mobile_phone)
        .add("Home", phone_value, contact.home_phone)
        # a labeled address is written even when none of its parts were filled in
        .add("Address (Work)", rich_text_value, contact.work_address, keep_empty=True)
        .add("Address (Home)", rich_text_value, contact.home_address, keep_empty=True)
        .add("iOS Notes", rich_text_value, contact.note)
        .add("Website", url_value, contact.website)
        .add("Job Title", rich_text_value, contact.job_title)
        .add("Organization", relation_value, organization_id)
        .set("Source", select_value(contact.source_label))
    )
    return builder.build()


def build_organization_properties(name: str) -> Dict[str, PropertyValue]:
    return PropertySetBuilder().set("Name", title_value(name)).build()
