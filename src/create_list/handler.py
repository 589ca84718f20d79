"""Action: CreateList - creates a contact list inside a folder."""

from common.base_handler import BaseActionHandler
from common.models import ListRecord
from common.validators import require_string, validate_id


class CreateListHandler(BaseActionHandler):
    """Handler for creating Brevo contact lists."""

    def _execute(self, params: dict, context) -> dict:
        name = require_string(params.get("name"), "name")
        folder_id = validate_id(params.get("folderId"), "folderId")

        response = self.brevo_client.create_list(name, folder_id)

        record = ListRecord(id=response.get("id") or 0, name=name)
        return self._success_response(record.to_record())


def lambda_handler(event: dict, context) -> dict:
    """Entry point for CreateList."""
    return CreateListHandler().handle(event, context)
