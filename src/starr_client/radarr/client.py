"""
Radarr API client.
"""

from __future__ import annotations
import logging
from typing import Iterable, List, Optional

from ..client.requests import Request
from ..product import Product
from ..runtime.codec import DISCARD, encode_json
from ..runtime.context import Context
from ..runtime.errors import BulkRequestError, StarrError
from .models import Exclusion


logger = logging.getLogger(__name__)

# API version supported by this client.
API_VERSION = "v3"

BP_EXCLUSIONS = "exclusions"


class Radarr(Product):
    """Radarr API client."""

    api_version = API_VERSION

    # =========================================================================
    # Exclusions
    # =========================================================================

    def get_exclusions(self, *, ctx: Optional[Context] = None) -> List[Exclusion]:
        """Return every configured exclusion."""
        req = Request.build(API_VERSION, BP_EXCLUSIONS)
        return self.api.get_into(req, List[Exclusion], ctx=ctx)

    def update_exclusion(self, exclusion: Exclusion, *, ctx: Optional[Context] = None) -> Exclusion:
        """Change an exclusion."""
        body = encode_json(exclusion, BP_EXCLUSIONS)
        req = Request.build(API_VERSION, BP_EXCLUSIONS, exclusion.id, body=body)
        return self.api.put_into(req, Exclusion, ctx=ctx)

    def delete_exclusions(self, ids: Iterable[int], *, ctx: Optional[Context] = None) -> None:
        """
        Remove exclusions, one request per id.

        Radarr has no bulk delete for exclusions. Every id is attempted; the
        failures are reported together afterwards.

        Raises:
            BulkRequestError: If any delete failed; ``failures`` lists the ids
        """
        failures = []
        for exclusion_id in ids:
            req = Request.build(API_VERSION, BP_EXCLUSIONS, exclusion_id)
            try:
                self.api.delete_any(req, ctx=ctx)
            except StarrError as e:
                logger.warning(f"Deleting exclusion {exclusion_id} failed: {e}")
                failures.append((exclusion_id, e))

        if failures:
            raise BulkRequestError(failures, "deleting exclusions")

    def add_exclusions(self, exclusions: Iterable[Exclusion], *, ctx: Optional[Context] = None) -> None:
        """Add several exclusions with one bulk call."""
        payload = [exclusion.model_copy(update={"id": 0}) for exclusion in exclusions]
        body = encode_json(payload, BP_EXCLUSIONS)
        req = Request.build(API_VERSION, BP_EXCLUSIONS, "bulk", body=body)
        self.api.post_into(req, DISCARD, ctx=ctx)

    def add_exclusion(self, exclusion: Exclusion, *, ctx: Optional[Context] = None) -> Exclusion:
        """Add one exclusion; the server assigns its id."""
        body = encode_json(exclusion.model_copy(update={"id": 0}), BP_EXCLUSIONS)
        req = Request.build(API_VERSION, BP_EXCLUSIONS, body=body)
        return self.api.post_into(req, Exclusion, ctx=ctx)


def new(config, api_key: str = "") -> Radarr:
    """Return a Radarr client with its own transport."""
    return Radarr.from_config(config, api_key=api_key)


__all__ = ["API_VERSION", "Radarr", "new"]
