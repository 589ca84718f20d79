"""
Record models for Brevo resources and action results.

Remote payloads are parsed through these Pydantic models at the boundary so
handlers never touch loosely-typed response dicts. Every record serialises
with camelCase keys via ``to_record()``.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BrevoRecord(BaseModel):
    """Base model for all records returned to the host."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_record(self) -> dict[str, Any]:
        """Serialise with camelCase keys, as the host expects."""
        return self.model_dump(mode="json", by_alias=True)


# ----------------------------------------------------------------------
# Resources
# ----------------------------------------------------------------------


class ContactRow(BrevoRecord):
    """A contact as returned by GetContactsFromList."""

    id: int
    email: str
    email_blacklisted: Optional[bool] = None
    sms_blacklisted: Optional[bool] = None
    created_at: Optional[str] = None
    modified_at: Optional[str] = None
    first_name: str = ""
    last_name: str = ""


class ContactListRow(BrevoRecord):
    id: int
    name: str
    total_blacklisted: Optional[int] = None
    total_subscribers: Optional[int] = None
    unique_subscribers: Optional[int] = None
    folder_id: Optional[int] = None


class FolderRow(BrevoRecord):
    id: int
    name: str
    total_blacklisted: Optional[int] = None
    total_subscribers: Optional[int] = None
    unique_subscribers: Optional[int] = None


class EmailTemplateRow(BrevoRecord):
    id: int
    name: str
    subject: Optional[str] = None
    is_active: Optional[bool] = None
    test_sent: Optional[bool] = None
    sender_name: Optional[str] = None
    sender_email: Optional[str] = None
    reply_to: Optional[str] = None
    to_field: Optional[str] = None
    tag: Optional[str] = None
    html_content: Optional[str] = None
    created_at: Optional[str] = None
    modified_at: Optional[str] = None
    doi_template: Optional[bool] = None


# ----------------------------------------------------------------------
# Action results
# ----------------------------------------------------------------------


class CampaignRecord(BrevoRecord):
    id: int


class ContactRecord(BrevoRecord):
    id: int = 0
    email: str
    already_exists: bool = False


class ListRecord(BrevoRecord):
    id: int = 0
    name: str


class AddToListResult(BrevoRecord):
    """
    Result of AddContactToList.

    ``success`` is True only when the contact was resolved and added.
    ``contact_id`` and ``contact_created`` are kept on a failed add so the
    caller can tell "never got a contact" from "got one but failed to add it".
    """

    success: bool
    email: str
    contact_id: Optional[int] = None
    contact_created: bool = False
    added_to_list: bool = False
    error: Optional[str] = None


# ----------------------------------------------------------------------
# Upsert outcome
# ----------------------------------------------------------------------


class UpsertStatus(str, Enum):
    """Which branch a get-or-create call took."""

    FOUND = "found"
    CREATED = "created"
    MISSING_ID = "missing_id"
    FAILED = "failed"


class UpsertOutcome(BaseModel):
    """Tagged result of a get-or-create call. Constructed per call, never stored."""

    status: UpsertStatus
    email: str
    contact_id: Optional[int] = Field(default=None)
    error: Optional[str] = Field(default=None)

    @property
    def resolved(self) -> bool:
        """True when a usable contact ID was obtained."""
        return self.status in (UpsertStatus.FOUND, UpsertStatus.CREATED)

    @property
    def created(self) -> bool:
        """True when the create call went through, with or without an ID."""
        return self.status in (UpsertStatus.CREATED, UpsertStatus.MISSING_ID)

    @classmethod
    def found(cls, email: str, contact_id: int) -> "UpsertOutcome":
        return cls(status=UpsertStatus.FOUND, email=email, contact_id=contact_id)

    @classmethod
    def created_with(cls, email: str, contact_id: int) -> "UpsertOutcome":
        return cls(status=UpsertStatus.CREATED, email=email, contact_id=contact_id)

    @classmethod
    def missing_id(cls, email: str) -> "UpsertOutcome":
        return cls(
            status=UpsertStatus.MISSING_ID,
            email=email,
            error="Contact was created but no ID was returned",
        )

    @classmethod
    def failed(cls, email: str, error: str) -> "UpsertOutcome":
        return cls(status=UpsertStatus.FAILED, email=email, error=error)
