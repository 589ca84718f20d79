"""Sync table: ContactLists - every contact list in the Brevo account."""

from common.base_handler import BaseActionHandler
from common.mappers import brevo_list_to_row
from common.pagination import MAX_LIMIT_LISTS, collect_pages, resolve_limit


class SyncContactListsHandler(BaseActionHandler):
    """Collects all contact lists, ``limit`` per page (max 50)."""

    def _execute(self, params: dict, context) -> dict:
        limit = resolve_limit(params.get("limit"), MAX_LIMIT_LISTS)

        collection = collect_pages(self.brevo_client.get_lists, limit)

        self.logger.info("Synced %d contact list(s)", len(collection.items))
        return self._collection_response(collection, brevo_list_to_row)


def lambda_handler(event: dict, context) -> dict:
    """Entry point for the ContactLists sync table."""
    return SyncContactListsHandler().handle(event, context)
