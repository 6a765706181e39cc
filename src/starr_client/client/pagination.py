"""
Pagination aggregation for page-limited list endpoints.

The starr servers cap page sizes and only report the authoritative total per
request. ``aggregate`` walks the pages of one endpoint and returns a single
page holding every record the caller asked for.
"""

from __future__ import annotations
import logging
from typing import Callable, Generic, List, Optional, TypeVar
from pydantic import Field

from ..types import StarrModel
from .requests import DEFAULT_PAGE_SIZE, PageReq


logger = logging.getLogger(__name__)

T = TypeVar("T")


class Page(StarrModel, Generic[T]):
    """
    One page of a paginated list endpoint.

    ``total_records`` is the server's global count regardless of the slice
    returned.
    """
    page: int = 0
    page_size: int = 0
    sort_key: str = ""
    sort_direction: str = ""
    total_records: int = 0
    records: List[T] = Field(default_factory=list)


def set_per_page(records: int, per_page: int) -> int:
    """
    Starting page size for a request of ``records`` items (0 means all).

    Never zero, and never larger than the record count desired.
    """
    if per_page <= 1:
        if records > DEFAULT_PAGE_SIZE or records == 0:
            return DEFAULT_PAGE_SIZE
        return records
    if records != 0 and per_page > records:
        return records
    return per_page


def adjust_per_page(records: int, total: int, collected: int, per_page: int) -> int:
    """
    Next page size after ``collected`` items out of ``total``.

    Args:
        records: Number of items requested (0 means all)
        total: Number of items the server holds
        collected: Number of items gathered so far
        per_page: Current page size
    """
    remaining = total - collected
    if records != 0:
        remaining = min(remaining, records - collected)

    if 0 < remaining < per_page:
        return remaining
    if remaining > per_page and per_page < DEFAULT_PAGE_SIZE:
        return min(remaining, DEFAULT_PAGE_SIZE)
    return per_page


def aggregate(fetch_page: Callable[[PageReq], Page[T]], records: int = 0,
              template: Optional[PageReq] = None) -> Page[T]:
    """
    Fetch pages until ``records`` items (0 means all) have been gathered.

    Stops when the server total is reached, when enough records were
    gathered, or when a page comes back empty. A fetch error propagates
    as-is; no partial result is returned.

    Args:
        fetch_page: Fetches one page; it carries the caller's context
        records: Number of items wanted, 0 for all of them
        template: Sort key, direction and filters applied to every page

    Returns:
        A page of the fetched type whose ``records`` holds everything
        gathered, in server order
    """
    template = template or PageReq()
    per_page = set_per_page(records, 0)
    limit = DEFAULT_PAGE_SIZE
    collected: List[T] = []
    page = 1

    while True:
        params = PageReq(
            page=page,
            page_size=per_page,
            sort_key=template.sort_key,
            sort_dir=template.sort_dir,
            filter=template.filter,
            values=dict(template.values),
        )
        current = fetch_page(params)
        collected.extend(current.records)
        logger.debug(f"page {page} (size {per_page}): {len(current.records)} records, "
                     f"{len(collected)}/{current.total_records} collected")

        if (len(collected) >= current.total_records
                or (records != 0 and len(collected) >= records)
                or not current.records):
            break

        # A short page that keeps offsets aligned is the server's page-size cap;
        # any other short page is the end of the data.
        if len(current.records) < per_page:
            if len(collected) % len(current.records) != 0:
                break
            limit = per_page = len(current.records)

        # Page offsets are (page - 1) * size, so a new size must divide what is already held.
        next_size = min(adjust_per_page(records, current.total_records, len(collected), per_page), limit)
        if next_size > 0 and len(collected) % next_size == 0:
            per_page = next_size
        page = len(collected) // per_page + 1

    if records != 0:
        collected = collected[:records]

    return type(current)(
        page=1,
        page_size=current.total_records,
        sort_key=current.sort_key,
        sort_direction=current.sort_direction,
        total_records=current.total_records,
        records=collected,
    )


__all__ = ["Page", "set_per_page", "adjust_per_page", "aggregate"]
