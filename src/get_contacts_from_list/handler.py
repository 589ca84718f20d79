"""
Action: GetContactsFromList

Reads the contacts of a Brevo list. Without an explicit ``offset`` the
whole list is collected page by page; with one, only that page is read.

Event:
    {"api_key", "listId", "modifiedSince"?, "limit"? (max 500),
     "offset"?, "sort"? ("asc" | "desc")}
"""

from functools import partial

from common.base_handler import BaseActionHandler
from common.mappers import brevo_contact_to_row
from common.pagination import MAX_LIMIT_LIST_CONTACTS, Collection, collect_pages, resolve_limit
from common.validators import sanitize_string, validate_id, validate_optional_int, validate_sort


class GetContactsFromListHandler(BaseActionHandler):
    """Handler for reading list members."""

    def _execute(self, params: dict, context) -> dict:
        list_id = validate_id(params.get("listId"), "listId")
        limit = resolve_limit(params.get("limit"), MAX_LIMIT_LIST_CONTACTS)
        offset = validate_optional_int(params.get("offset"), "offset")
        sort = validate_sort(params.get("sort"))
        modified_since = sanitize_string(params.get("modifiedSince"), field_name="modifiedSince") or None

        fetch_page = partial(self._fetch_page, list_id, modified_since, sort)

        if offset is None:
            collection = collect_pages(fetch_page, limit)
        else:
            page = fetch_page(offset, limit)
            collection = Collection(items=page, pages_fetched=1)

        self.logger.info(
            "Read %d contact(s) from list %s in %d page(s)",
            len(collection.items),
            list_id,
            collection.pages_fetched,
        )
        return self._collection_response(collection, brevo_contact_to_row)

    def _fetch_page(self, list_id, modified_since, sort, offset: int, limit: int) -> list[dict]:
        return self.brevo_client.get_list_contacts(
            list_id,
            modified_since=modified_since,
            limit=limit,
            offset=offset,
            sort=sort,
        )


def lambda_handler(event: dict, context) -> dict:
    """Entry point for GetContactsFromList."""
    return GetContactsFromListHandler().handle(event, context)
