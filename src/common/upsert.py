"""
Get-or-create for contacts keyed by email.

The lookup and the create are issued sequentially; no retry is attempted.
"""

import logging

from common.exceptions import ContactNotFoundException
from common.models import UpsertOutcome

logger = logging.getLogger(__name__)


def get_or_create_contact(
    client,
    email: str,
    first_name: str = "",
    last_name: str = "",
    strict_not_found: bool = False,
) -> UpsertOutcome:
    """
    Return the contact for ``email``, creating it when the lookup fails.

    Args:
        client: BrevoClient
        email: natural key of the contact
        first_name, last_name: sent as PRENOM / NOM, only on create
        strict_not_found: only fall back to create on a real 404; other
            lookup failures propagate instead of triggering a create

    Returns:
        UpsertOutcome with status found, created, missing_id or failed
    """
    try:
        existing = client.get_contact(email)
    except ContactNotFoundException:
        logger.info("Contact %s not found, creating it", email)
    except Exception as exc:
        if strict_not_found:
            raise
        logger.info("Lookup of contact %s failed (%s), creating it", email, exc)
    else:
        contact_id = existing.get("id") or 0
        logger.info("Contact %s already exists: %s", email, contact_id)
        return UpsertOutcome.found(email, contact_id)

    attributes = {"PRENOM": first_name or "", "NOM": last_name or ""}
    try:
        created = client.create_contact(email, attributes)
    except Exception as exc:
        logger.warning("Failed to create contact %s: %s", email, exc)
        return UpsertOutcome.failed(email, f"Failed to create contact: {exc}")

    contact_id = created.get("id")
    if not contact_id:
        logger.warning("Contact %s was created but no ID was returned", email)
        return UpsertOutcome.missing_id(email)

    return UpsertOutcome.created_with(email, contact_id)
