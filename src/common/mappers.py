"""
Mapping between Brevo API payloads and the records returned to the host.

This module is the single source of truth for field-level translation:
  - contact attributes (English and French aliases) → ContactRow
  - list / folder / template payloads → sync table rows
  - action parameters → the email campaign create payload
"""

from typing import Any, Iterable, Optional

from pydantic import ValidationError

from common.exceptions import BrevoAPIException
from common.models import (
    AddToListResult,
    BrevoRecord,
    ContactListRow,
    ContactRow,
    EmailTemplateRow,
    FolderRow,
    UpsertOutcome,
)

# ---------------------------------------------------------------------------
# Contact attribute aliases, first match wins
# ---------------------------------------------------------------------------

FIRST_NAME_ATTRIBUTES = ("FIRSTNAME", "PRENOM")
LAST_NAME_ATTRIBUTES = ("LASTNAME", "NOM")

# Merge fields Brevo substitutes per recipient
CAMPAIGN_TO_FIELD = "{{contact.FIRSTNAME}} {{contact.LASTNAME}}"


def _first_attribute(attributes: dict, names: Iterable[str]) -> str:
    for name in names:
        value = attributes.get(name)
        if value:
            return str(value)
    return ""


def _parse(model: type[BrevoRecord], raw: Any, resource: str):
    """Validate one remote payload, failing loudly on an unexpected shape."""
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        raw_id = raw.get("id") if isinstance(raw, dict) else None
        raise BrevoAPIException(
            f"Unexpected {resource} payload from Brevo: {exc.error_count()} invalid field(s)",
            {"resource": resource, "id": raw_id, "errors": exc.errors(include_url=False)},
        ) from exc


# ---------------------------------------------------------------------------
# Contacts
# ---------------------------------------------------------------------------


def brevo_contact_to_row(contact: dict) -> ContactRow:
    """Map a Brevo contact to a ContactRow, resolving name aliases."""
    attributes = contact.get("attributes") or {}
    return _parse(
        ContactRow,
        {
            "id": contact.get("id"),
            "email": contact.get("email"),
            "emailBlacklisted": contact.get("emailBlacklisted"),
            "smsBlacklisted": contact.get("smsBlacklisted"),
            "createdAt": contact.get("createdAt"),
            "modifiedAt": contact.get("modifiedAt"),
            "firstName": _first_attribute(attributes, FIRST_NAME_ATTRIBUTES),
            "lastName": _first_attribute(attributes, LAST_NAME_ATTRIBUTES),
        },
        "contact",
    )


def upsert_outcome_to_add_result(
    outcome: UpsertOutcome, added: bool = False, error: Optional[str] = None
) -> AddToListResult:
    """
    Build the AddContactToList record from an upsert outcome and the
    result of the add step.
    """
    if not outcome.resolved:
        return AddToListResult(
            success=False,
            email=outcome.email,
            contact_created=outcome.created,
            added_to_list=False,
            error=outcome.error,
        )

    return AddToListResult(
        success=added,
        email=outcome.email,
        contact_id=outcome.contact_id,
        contact_created=outcome.created,
        added_to_list=added,
        error=error,
    )


# ---------------------------------------------------------------------------
# Lists, folders, templates
# ---------------------------------------------------------------------------


def brevo_list_to_row(raw: dict) -> ContactListRow:
    return _parse(ContactListRow, raw, "list")


def brevo_folder_to_row(raw: dict) -> FolderRow:
    return _parse(FolderRow, raw, "folder")


def brevo_template_to_row(raw: dict) -> EmailTemplateRow:
    """Flatten the nested sender object onto the template row."""
    sender = raw.get("sender") or {}
    data = dict(raw)
    data.setdefault("senderName", sender.get("name"))
    data.setdefault("senderEmail", sender.get("email"))
    return _parse(EmailTemplateRow, data, "template")


# ---------------------------------------------------------------------------
# Campaigns
# ---------------------------------------------------------------------------


def build_email_campaign_payload(
    sender_name: str,
    sender_email: str,
    campaign_name: str,
    template_id: int,
    scheduled_at: str,
    subject: str,
    list_ids: list[int],
) -> dict:
    """
    Build the POST /emailCampaigns body.

    ``scheduled_at`` must already be a UTC ISO-8601 string.
    """
    return {
        "sender": {"name": sender_name, "email": sender_email},
        "name": campaign_name,
        "templateId": template_id,
        "scheduledAt": scheduled_at,
        "subject": subject,
        "toField": CAMPAIGN_TO_FIELD,
        "recipients": {"listIds": list(list_ids)},
    }
