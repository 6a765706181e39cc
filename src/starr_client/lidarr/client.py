"""
Lidarr API client.
"""

from __future__ import annotations
from typing import Iterable, Optional

from ..client.pagination import aggregate
from ..client.requests import PageReq, Request
from ..product import Product
from ..runtime.codec import encode_json
from ..runtime.context import Context
from .models import BlockList


# API version supported by this client.
API_VERSION = "v1"

BP_BLOCKLIST = "blocklist"


class Lidarr(Product):
    """
    Lidarr API client.

    Example:
        ```python
        lidarr = Lidarr.from_config("http://localhost:8686", api_key="...")
        blocked = lidarr.get_block_list(0)
        lidarr.delete_block_lists([r.id for r in blocked.records])
        ```
    """

    api_version = API_VERSION

    # =========================================================================
    # Block list
    # =========================================================================

    def get_block_list(self, records: int = 0, *, ctx: Optional[Context] = None) -> BlockList:
        """
        Return ``records`` block list items, or all of them for 0.

        For control over the page use ``get_block_list_page``.
        """
        return aggregate(lambda params: self.get_block_list_page(params, ctx=ctx), records)

    def get_block_list_page(self, params: PageReq, *, ctx: Optional[Context] = None) -> BlockList:
        """Return one page of block list items."""
        params.check_set("sortKey", "date")
        req = Request.build(API_VERSION, BP_BLOCKLIST, query=params.params())
        return self.api.get_into(req, BlockList, ctx=ctx)

    def delete_block_list(self, list_id: int, *, ctx: Optional[Context] = None) -> None:
        """Remove a single block list item."""
        req = Request.build(API_VERSION, BP_BLOCKLIST, list_id)
        self.api.delete_any(req, ctx=ctx)

    def delete_block_lists(self, ids: Iterable[int], *, ctx: Optional[Context] = None) -> None:
        """Remove several block list items with one bulk call."""
        body = encode_json({"ids": list(ids)}, BP_BLOCKLIST)
        req = Request.build(API_VERSION, BP_BLOCKLIST, "bulk", body=body)
        self.api.delete_any(req, ctx=ctx)


def new(config, api_key: str = "") -> Lidarr:
    """Return a Lidarr client with its own transport."""
    return Lidarr.from_config(config, api_key=api_key)


__all__ = ["API_VERSION", "Lidarr", "new"]
