"""
Field normalizer: picks the preferred email/phone/address for each Notion
column from the label-tagged collections of an iOS contact.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, TypeVar

from src.contacts.models import IOS_CONTACT_SOURCE, ContactPayload, NormalizedContact, PostalAddress

T = TypeVar("T")

SOURCE_LABELS = {
    IOS_CONTACT_SOURCE: "iOS Contact",
}

MOBILE_LABELS = ("iPhone", "Mobile")
ADDRESS_PARTS = ("street", "zip", "city", "country")


def pick_first(items: Optional[Iterable[Optional[T]]], predicate: Callable[[T], bool]) -> Optional[T]:
    """Return the first non-null item (input order) matching predicate, else None."""
    for item in items or ():
        if item is not None and predicate(item):
            return item
    return None


def has_label(*labels: str) -> Callable[[Any], bool]:
    wanted = set(labels)
    return lambda item: getattr(item, "label", None) in wanted


def format_address(address: PostalAddress) -> str:
    """street, zip, city, country, each followed by a space; missing parts are skipped."""
    out = ""
    for part in ADDRESS_PARTS:
        value = getattr(address, part)
        if value:
            out += value + " "
    return out


def source_label(source: str) -> str:
    return SOURCE_LABELS.get(source, source)


def normalize_contact(payload: ContactPayload) -> NormalizedContact:
    work_email = pick_first(payload.emails, has_label("Work"))
    home_email = pick_first(payload.emails, has_label("Home"))

    main_phone = pick_first(payload.phones, has_label("Main"))
    work_phone = pick_first(payload.phones, has_label("Work"))
    mobile_phone = pick_first(payload.phones, has_label(*MOBILE_LABELS))
    home_phone = pick_first(payload.phones, has_label("Home"))

    work_address = pick_first(payload.addresses, has_label("Work"))
    home_address = pick_first(payload.addresses, has_label("Home"))

    return NormalizedContact(
        last_name=payload.last_name,
        first_name=payload.first_name,
        organization=payload.organization,
        job_title=payload.job_title,
        website=payload.website,
        note=payload.note,
        work_email=work_email.email if work_email else None,
        home_email=home_email.email if home_email else None,
        main_phone=main_phone.number if main_phone else None,
        work_phone=work_phone.number if work_phone else None,
        mobile_phone=mobile_phone.number if mobile_phone else None,
        home_phone=home_phone.number if home_phone else None,
        work_address=format_address(work_address) if work_address is not None else None,
        home_address=format_address(home_address) if home_address is not None else None,
        source_label=source_label(payload.source),
    )
