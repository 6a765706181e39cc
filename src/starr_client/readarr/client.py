"""
Readarr API client.
"""

from __future__ import annotations
from typing import List, Optional

from ..client.requests import Request
from ..product import Product
from ..runtime.codec import DISCARD, encode_json
from ..runtime.context import Context
from .models import DownloadClientInput, DownloadClientOutput


# API version supported by this client.
API_VERSION = "v1"

BP_DOWNLOAD_CLIENT = "downloadClient"


class Readarr(Product):
    """Readarr API client."""

    api_version = API_VERSION

    # =========================================================================
    # Download clients
    # =========================================================================

    def get_download_clients(self, *, ctx: Optional[Context] = None) -> List[DownloadClientOutput]:
        """Return all configured download clients."""
        req = Request.build(API_VERSION, BP_DOWNLOAD_CLIENT)
        return self.api.get_into(req, List[DownloadClientOutput], ctx=ctx)

    def get_download_client(self, client_id: int, *, ctx: Optional[Context] = None) -> DownloadClientOutput:
        """Return a single download client."""
        req = Request.build(API_VERSION, BP_DOWNLOAD_CLIENT, client_id)
        return self.api.get_into(req, DownloadClientOutput, ctx=ctx)

    def add_download_client(self, client: DownloadClientInput, *,
                            ctx: Optional[Context] = None) -> DownloadClientOutput:
        """Create a download client without testing it."""
        body = encode_json(client.model_copy(update={"id": 0}), BP_DOWNLOAD_CLIENT)
        req = Request.build(API_VERSION, BP_DOWNLOAD_CLIENT, query={"forceSave": True}, body=body)
        return self.api.post_into(req, DownloadClientOutput, ctx=ctx)

    def test_download_client(self, client: DownloadClientInput, *, ctx: Optional[Context] = None) -> None:
        """Ask the server to test a download client's settings."""
        body = encode_json(client, BP_DOWNLOAD_CLIENT)
        req = Request.build(API_VERSION, BP_DOWNLOAD_CLIENT, "test", body=body)
        self.api.post_into(req, DISCARD, ctx=ctx)

    def update_download_client(self, client: DownloadClientInput, force: bool = False, *,
                               ctx: Optional[Context] = None) -> DownloadClientOutput:
        """Update a download client; ``force`` saves it even if its test fails."""
        body = encode_json(client, BP_DOWNLOAD_CLIENT)
        req = Request.build(API_VERSION, BP_DOWNLOAD_CLIENT, client.id, query={"forceSave": force}, body=body)
        return self.api.put_into(req, DownloadClientOutput, ctx=ctx)

    def delete_download_client(self, client_id: int, *, ctx: Optional[Context] = None) -> None:
        """Remove a single download client."""
        req = Request.build(API_VERSION, BP_DOWNLOAD_CLIENT, client_id)
        self.api.delete_any(req, ctx=ctx)


def new(config, api_key: str = "") -> Readarr:
    """Return a Readarr client with its own transport."""
    return Readarr.from_config(config, api_key=api_key)


__all__ = ["API_VERSION", "Readarr", "new"]
