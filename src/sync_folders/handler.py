"""Sync table: Folders - every contact folder in the Brevo account."""

from common.base_handler import BaseActionHandler
from common.mappers import brevo_folder_to_row
from common.pagination import MAX_LIMIT_FOLDERS, collect_pages, resolve_limit


class SyncFoldersHandler(BaseActionHandler):
    """Collects all contact folders, ``limit`` per page (max 50)."""

    def _execute(self, params: dict, context) -> dict:
        limit = resolve_limit(params.get("limit"), MAX_LIMIT_FOLDERS)

        collection = collect_pages(self.brevo_client.get_folders, limit)

        self.logger.info("Synced %d folder(s)", len(collection.items))
        return self._collection_response(collection, brevo_folder_to_row)


def lambda_handler(event: dict, context) -> dict:
    """Entry point for the Folders sync table."""
    return SyncFoldersHandler().handle(event, context)
