"""
Prowlarr API client.
"""

from __future__ import annotations
from typing import List, Optional

from ..client.requests import Request
from ..product import Product
from ..runtime.codec import DISCARD, encode_json
from ..runtime.context import Context
from .models import ApplicationInput, ApplicationOutput


# API version supported by this client.
API_VERSION = "v1"

BP_APPLICATIONS = "applications"


class Prowlarr(Product):
    """Prowlarr API client."""

    api_version = API_VERSION

    # =========================================================================
    # Applications
    # =========================================================================

    def get_applications(self, *, ctx: Optional[Context] = None) -> List[ApplicationOutput]:
        req = Request.build(API_VERSION, BP_APPLICATIONS)
        return self.api.get_into(req, List[ApplicationOutput], ctx=ctx)

    def get_application(self, application_id: int, *, ctx: Optional[Context] = None) -> ApplicationOutput:
        req = Request.build(API_VERSION, BP_APPLICATIONS, application_id)
        return self.api.get_into(req, ApplicationOutput, ctx=ctx)

    def add_application(self, application: ApplicationInput, *,
                        ctx: Optional[Context] = None) -> ApplicationOutput:
        """Create an application without testing it."""
        body = encode_json(application.model_copy(update={"id": 0}), BP_APPLICATIONS)
        req = Request.build(API_VERSION, BP_APPLICATIONS, query={"forceSave": True}, body=body)
        return self.api.post_into(req, ApplicationOutput, ctx=ctx)

    def test_application(self, application: ApplicationInput, *, ctx: Optional[Context] = None) -> None:
        body = encode_json(application, BP_APPLICATIONS)
        req = Request.build(API_VERSION, BP_APPLICATIONS, "test", body=body)
        self.api.post_into(req, DISCARD, ctx=ctx)

    def update_application(self, application: ApplicationInput, force: bool = False, *,
                           ctx: Optional[Context] = None) -> ApplicationOutput:
        """Update an application; ``force`` saves it even if its test fails."""
        body = encode_json(application, BP_APPLICATIONS)
        req = Request.build(API_VERSION, BP_APPLICATIONS, application.id, query={"forceSave": force}, body=body)
        return self.api.put_into(req, ApplicationOutput, ctx=ctx)

    def delete_application(self, application_id: int, *, ctx: Optional[Context] = None) -> None:
        req = Request.build(API_VERSION, BP_APPLICATIONS, application_id)
        self.api.delete_any(req, ctx=ctx)


def new(config, api_key: str = "") -> Prowlarr:
    """Return a Prowlarr client with its own transport."""
    return Prowlarr.from_config(config, api_key=api_key)


__all__ = ["API_VERSION", "Prowlarr", "new"]
