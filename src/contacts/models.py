"""
Contact payload models (request validation) and the normalized record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

IOS_CONTACT_SOURCE = "ios-contact"


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class LabeledEmail(_CamelModel):
    email: EmailStr
    label: str


class LabeledPhone(_CamelModel):
    label: str
    number: str


class PostalAddress(_CamelModel):
    street: Optional[str] = None
    zip: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    label: Optional[str] = None


class ContactPayload(_CamelModel):
    """One contact as exported by the iOS Shortcut."""

    last_name: str = Field(alias="lastName")
    first_name: Optional[str] = Field(default=None, alias="firstName")
    organization: Optional[str] = None
    job_title: Optional[str] = Field(default=None, alias="jobTitle")
    website: Optional[str] = None
    note: Optional[str] = None
    emails: Optional[List[LabeledEmail]] = None
    phones: Optional[List[LabeledPhone]] = None
    addresses: Optional[List[Optional[PostalAddress]]] = None
    source: Literal["ios-contact"] = IOS_CONTACT_SOURCE


@dataclass(frozen=True)
class NormalizedContact:
    last_name: str
    first_name: Optional[str] = None
    organization: Optional[str] = None
    job_title: Optional[str] = None
    website: Optional[str] = None
    note: Optional[str] = None
    work_email: Optional[str] = None
    home_email: Optional[str] = None
    main_phone: Optional[str] = None
    work_phone: Optional[str] = None
    mobile_phone: Optional[str] = None
    home_phone: Optional[str] = None
    # "" when an address was picked but carries no street/zip/city/country
    work_address: Optional[str] = None
    home_address: Optional[str] = None
    source_label: str = "iOS Contact"
