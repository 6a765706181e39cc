"""
starr Python client

This package provides a typed client for the *arr media automation servers
(Lidarr, Radarr, Readarr, Sonarr, Prowlarr). A shared transport performs the
HTTP exchanges; each product client exposes its resource bindings on top.
"""

# Transport
from .api_client import ClientConfig, StarrClient, MAX_ERROR_BODY

# Requests and pagination
from .client import DEFAULT_PAGE_SIZE, Request, PageReq, Sorting, Filtering, Page, aggregate

# Runtime
from .runtime.context import Context
from .runtime.codec import DISCARD
from .runtime.errors import *

# Shared types
from .types import FieldInput, FieldOutput, FieldValue, SelectOption, Protocol, Quality, BaseQuality, QualityRevision

# Product clients
from .lidarr import Lidarr
from .radarr import Radarr
from .readarr import Readarr
from .sonarr import Sonarr
from .prowlarr import Prowlarr

__version__ = "0.1.0"
__all__ = [
    # Transport
    "ClientConfig",
    "StarrClient",
    "MAX_ERROR_BODY",

    # Requests and pagination
    "DEFAULT_PAGE_SIZE",
    "Request",
    "PageReq",
    "Sorting",
    "Filtering",
    "Page",
    "aggregate",

    # Runtime
    "Context",
    "DISCARD",
    "ErrorCode",
    "StarrError",
    "NetworkError",
    "TimeoutError",
    "CancelledError",
    "DeadlineExceededError",
    "InvalidStatusError",
    "EncodingError",
    "MarshalError",
    "UnmarshalError",
    "BulkRequestError",

    # Shared types
    "FieldInput",
    "FieldOutput",
    "FieldValue",
    "SelectOption",
    "Protocol",
    "Quality",
    "BaseQuality",
    "QualityRevision",

    # Product clients
    "Lidarr",
    "Radarr",
    "Readarr",
    "Sonarr",
    "Prowlarr",
]
