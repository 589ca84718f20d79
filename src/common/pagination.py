"""
Offset/limit pagination for Brevo collection endpoints.

``collect_pages`` walks a collection until a short page comes back or the
offset passes a safety bound. Once the bound is reached nothing further is
requested, so the returned Collection may be incomplete; ``truncated`` says
the bound stopped the run, not that rows were certainly left behind.
"""

import logging
import os
from typing import Any, Callable, Optional, Sequence

from pydantic import BaseModel, Field

from common.exceptions import PageFetchException, ValidationException
from common.validators import validate_optional_int

logger = logging.getLogger(__name__)

DEFAULT_PAGE_LIMIT = 50
SAFETY_MAX_OFFSET = 1000

# Per-resource page size maxima accepted by the API
MAX_LIMIT_LISTS = 50
MAX_LIMIT_FOLDERS = 50
MAX_LIMIT_TEMPLATES = 1000
MAX_LIMIT_LIST_CONTACTS = 500

FetchPage = Callable[[int, int], Sequence[Any]]


class SyncCursor(BaseModel):
    """Position in a paginated collection. ``limit`` is fixed for a run."""

    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=DEFAULT_PAGE_LIMIT, gt=0)

    def advance(self) -> "SyncCursor":
        return SyncCursor(offset=self.offset + self.limit, limit=self.limit)


class Collection(BaseModel):
    """
    Everything a collection run gathered.

    ``truncated`` is set when the safety bound stopped the run after a full
    page. The remote collection may hold more rows, or may have ended exactly
    at the bound; the two cases cannot be told apart without another request.
    """

    items: list[Any] = Field(default_factory=list)
    pages_fetched: int = 0
    truncated: bool = False


def resolve_limit(limit: Optional[int], max_limit: int) -> int:
    """
    Validate a caller-supplied page size.

    A missing or zero limit falls back to DEFAULT_PAGE_LIMIT (capped at
    ``max_limit``). Negative or oversized limits are rejected.
    """
    limit = validate_optional_int(limit, "limit")
    if not limit:
        return min(DEFAULT_PAGE_LIMIT, max_limit)

    if limit > max_limit:
        raise ValidationException(
            f"limit {limit} exceeds the maximum of {max_limit}",
            {"limit": limit, "max_limit": max_limit},
        )
    return limit


def default_max_offset() -> int:
    """Safety bound from BREVO_SYNC_MAX_OFFSET, or SAFETY_MAX_OFFSET."""
    return int(os.environ.get("BREVO_SYNC_MAX_OFFSET", SAFETY_MAX_OFFSET))


def collect_pages(
    fetch_page: FetchPage,
    limit: int = DEFAULT_PAGE_LIMIT,
    max_offset: Optional[int] = None,
) -> Collection:
    """
    Collect a whole collection by calling ``fetch_page(offset, limit)``.

    Args:
        fetch_page: returns the items at ``offset``, at most ``limit`` of them
        limit: page size, fixed for the run
        max_offset: no page beyond this offset is requested

    Returns:
        Collection with items in remote order

    Raises:
        PageFetchException: a page fetch failed; nothing collected is returned
    """
    if max_offset is None:
        max_offset = default_max_offset()

    cursor = SyncCursor(offset=0, limit=limit)
    collection = Collection()

    while True:
        try:
            page = fetch_page(cursor.offset, cursor.limit)
        except Exception as exc:
            raise PageFetchException(
                f"Failed to fetch page at offset {cursor.offset}: {exc}",
                offset=cursor.offset,
                limit=cursor.limit,
                details={"pages_fetched": collection.pages_fetched},
            ) from exc

        page = list(page or [])
        collection.pages_fetched += 1
        collection.items.extend(page)
        logger.debug(
            "Fetched page at offset %d: %d item(s)", cursor.offset, len(page)
        )

        if len(page) < cursor.limit:
            break

        cursor = cursor.advance()
        if cursor.offset > max_offset:
            collection.truncated = True
            logger.warning(
                "Stopped collecting at offset %d (bound %d); %d item(s) kept",
                cursor.offset,
                max_offset,
                len(collection.items),
            )
            break

    return collection
