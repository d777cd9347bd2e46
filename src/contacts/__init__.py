"""
iOS contact -> Notion mapping: payload models, field normalization,
property-set construction and the contact upsert.
"""
from .models import ContactPayload, NormalizedContact
from .normalizer import normalize_contact, pick_first
from .properties import build_contact_properties
from .upsert import UpsertOutcome, UpsertResult, resolve_organization, upsert_contact

__all__ = [
    "ContactPayload",
    "NormalizedContact",
    "normalize_contact",
    "pick_first",
    "build_contact_properties",
    "UpsertOutcome",
    "UpsertResult",
    "resolve_organization",
    "upsert_contact",
]
