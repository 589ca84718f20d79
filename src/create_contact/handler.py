"""
Action: CreateContact

Creates a Brevo contact with name and email. If the contact already
exists, returns the existing contact instead of creating a duplicate.
"""

from common.base_handler import BaseActionHandler
from common.exceptions import ContactCreateException
from common.models import ContactRecord, UpsertStatus
from common.upsert import get_or_create_contact
from common.validators import sanitize_string, validate_email, validate_optional_bool


class CreateContactHandler(BaseActionHandler):
    """Get-or-create a contact by email."""

    def _execute(self, params: dict, context) -> dict:
        email = validate_email(params.get("email"))
        first_name = sanitize_string(params.get("firstName"), field_name="firstName")
        last_name = sanitize_string(params.get("lastName"), field_name="lastName")
        strict = bool(validate_optional_bool(params.get("strictNotFound"), "strictNotFound"))

        outcome = get_or_create_contact(
            self.brevo_client, email, first_name, last_name, strict_not_found=strict
        )

        if outcome.status == UpsertStatus.FAILED:
            raise ContactCreateException(outcome.error, {"email": email})

        record = ContactRecord(
            id=outcome.contact_id or 0,
            email=email,
            already_exists=outcome.status == UpsertStatus.FOUND,
        )
        return self._success_response(record.to_record())


def lambda_handler(event: dict, context) -> dict:
    """Entry point for CreateContact."""
    return CreateContactHandler().handle(event, context)
