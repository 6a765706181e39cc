"""
Common surface of the per-product clients.

A product client holds a reference to a ``StarrClient`` and exposes its
resource bindings as methods that delegate to it. Several product clients
may share one transport.
"""

from __future__ import annotations
from typing import Optional, Type, TypeVar, Union

import requests

from .api_client import ClientConfig, StarrClient
from .runtime.context import Context


P = TypeVar("P", bound="Product")


class Product:
    """Base for Lidarr, Radarr, Readarr, Sonarr and Prowlarr clients."""

    #: API version prefix of every versioned path, e.g. ``v3``.
    api_version: str = ""

    def __init__(self, api: StarrClient):
        self.api = api

    @classmethod
    def from_config(cls: Type[P], config: Union[str, ClientConfig], api_key: str = "",
                    session: Optional[requests.Session] = None) -> P:
        """Create a client with its own transport."""
        return cls(StarrClient(config, api_key=api_key, session=session))

    def ping(self, *, ctx: Optional[Context] = None) -> None:
        """Raise unless the server answers ``/ping`` with a 2xx status."""
        self.api.ping(ctx=ctx)

    def close(self) -> None:
        self.api.close()

    def __enter__(self: P) -> P:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["Product"]
