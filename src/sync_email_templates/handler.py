"""
Sync table: EmailTemplates

Collects every email template in the Brevo account, optionally filtered
on status (``templateStatus``: true = active, false = inactive).
Pages hold up to 1000 templates.
"""

from common.base_handler import BaseActionHandler
from common.mappers import brevo_template_to_row
from common.pagination import MAX_LIMIT_TEMPLATES, collect_pages, resolve_limit
from common.validators import validate_optional_bool


class SyncEmailTemplatesHandler(BaseActionHandler):
    """Handler for the EmailTemplates sync table."""

    def _execute(self, params: dict, context) -> dict:
        template_status = validate_optional_bool(params.get("templateStatus"), "templateStatus")
        limit = resolve_limit(params.get("limit"), MAX_LIMIT_TEMPLATES)

        def fetch_page(offset: int, page_limit: int) -> list[dict]:
            return self.brevo_client.get_templates(
                offset, page_limit, template_status=template_status
            )

        collection = collect_pages(fetch_page, limit)

        self.logger.info("Synced %d template(s)", len(collection.items))
        return self._collection_response(collection, brevo_template_to_row)


def lambda_handler(event: dict, context) -> dict:
    """Entry point for the EmailTemplates sync table."""
    return SyncEmailTemplatesHandler().handle(event, context)
