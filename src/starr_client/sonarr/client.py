"""
Sonarr API client.
"""

from __future__ import annotations
from typing import List, Optional

from ..client.requests import Request
from ..product import Product
from ..runtime.codec import encode_json
from ..runtime.context import Context
from .models import CustomFormatInput, CustomFormatOutput, Naming


# API version supported by this client.
API_VERSION = "v3"

BP_CUSTOM_FORMAT = "customFormat"
BP_NAMING = "config/naming"


class Sonarr(Product):
    """
    Sonarr API client.

    The custom format endpoints exist in Sonarr v4 only.
    """

    api_version = API_VERSION

    # =========================================================================
    # Custom formats
    # =========================================================================

    def get_custom_formats(self, *, ctx: Optional[Context] = None) -> List[CustomFormatOutput]:
        """Return all configured custom formats."""
        req = Request.build(API_VERSION, BP_CUSTOM_FORMAT)
        return self.api.get_into(req, List[CustomFormatOutput], ctx=ctx)

    def get_custom_format(self, format_id: int, *, ctx: Optional[Context] = None) -> CustomFormatOutput:
        """Return a single custom format."""
        req = Request.build(API_VERSION, BP_CUSTOM_FORMAT, format_id)
        return self.api.get_into(req, CustomFormatOutput, ctx=ctx)

    def add_custom_format(self, custom_format: Optional[CustomFormatInput], *,
                          ctx: Optional[Context] = None) -> CustomFormatOutput:
        """
        Create a custom format and return it with its new id.

        A ``None`` input returns an empty output without calling the server.
        """
        if custom_format is None:
            return CustomFormatOutput()

        body = encode_json(custom_format.model_copy(update={"id": 0}), BP_CUSTOM_FORMAT)
        req = Request.build(API_VERSION, BP_CUSTOM_FORMAT, body=body)
        return self.api.post_into(req, CustomFormatOutput, ctx=ctx)

    def update_custom_format(self, custom_format: CustomFormatInput, *,
                             ctx: Optional[Context] = None) -> CustomFormatOutput:
        """Update an existing custom format."""
        body = encode_json(custom_format, BP_CUSTOM_FORMAT)
        req = Request.build(API_VERSION, BP_CUSTOM_FORMAT, custom_format.id, body=body)
        return self.api.put_into(req, CustomFormatOutput, ctx=ctx)

    def delete_custom_format(self, format_id: int, *, ctx: Optional[Context] = None) -> None:
        req = Request.build(API_VERSION, BP_CUSTOM_FORMAT, format_id)
        self.api.delete_any(req, ctx=ctx)

    # =========================================================================
    # Naming
    # =========================================================================

    def get_naming(self, *, ctx: Optional[Context] = None) -> Naming:
        req = Request.build(API_VERSION, BP_NAMING)
        return self.api.get_into(req, Naming, ctx=ctx)

    def update_naming(self, naming: Naming, *, ctx: Optional[Context] = None) -> Naming:
        """Update the naming config; it is a singleton with id 1."""
        body = encode_json(naming.model_copy(update={"id": 1}), BP_NAMING)
        req = Request.build(API_VERSION, BP_NAMING, body=body)
        return self.api.put_into(req, Naming, ctx=ctx)


def new(config, api_key: str = "") -> Sonarr:
    """Return a Sonarr client with its own transport."""
    return Sonarr.from_config(config, api_key=api_key)


__all__ = ["API_VERSION", "Sonarr", "new"]
