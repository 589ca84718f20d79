"""
Action: AddContactToList

Adds a contact to a list, creating the contact first if it doesn't exist.

Failures are reported in the returned record rather than raised, so the
caller can see how far the action got:
  - contact lookup/create failed → no contactId, addedToList false
    (in strict mode a lookup error other than 404 lands here too)
  - contact resolved, add failed → contactId kept, addedToList false
"""

from common.base_handler import BaseActionHandler
from common.exceptions import BrevoAPIException
from common.mappers import upsert_outcome_to_add_result
from common.models import UpsertOutcome
from common.upsert import get_or_create_contact
from common.validators import sanitize_string, validate_email, validate_id, validate_optional_bool


class AddContactToListHandler(BaseActionHandler):
    """Upsert a contact, then add it to a list."""

    def _execute(self, params: dict, context) -> dict:
        list_id = validate_id(params.get("listId"), "listId")
        email = validate_email(params.get("email"))
        first_name = sanitize_string(params.get("firstName"), field_name="firstName")
        last_name = sanitize_string(params.get("lastName"), field_name="lastName")
        strict = bool(validate_optional_bool(params.get("strictNotFound"), "strictNotFound"))

        try:
            outcome = get_or_create_contact(
                self.brevo_client, email, first_name, last_name, strict_not_found=strict
            )
        except BrevoAPIException as exc:
            outcome = UpsertOutcome.failed(email, f"Failed to look up contact: {exc}")

        if not outcome.resolved:
            self.logger.warning("Skipping list add for %s: %s", email, outcome.error)
            result = upsert_outcome_to_add_result(outcome)
            return self._success_response(result.to_record())

        try:
            self.brevo_client.add_contacts_to_list(list_id, [email])
        except Exception as exc:
            self.logger.warning("Failed to add %s to list %s: %s", email, list_id, exc)
            result = upsert_outcome_to_add_result(
                outcome, added=False, error=f"Failed to add contact to list: {exc}"
            )
            return self._success_response(result.to_record())

        self.logger.info("Added %s (contact %s) to list %s", email, outcome.contact_id, list_id)
        result = upsert_outcome_to_add_result(outcome, added=True)
        return self._success_response(result.to_record())


def lambda_handler(event: dict, context) -> dict:
    """Entry point for AddContactToList."""
    return AddContactToListHandler().handle(event, context)
