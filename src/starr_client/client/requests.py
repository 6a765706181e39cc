"""
Request types and pagination support for the starr client.

Provides the immutable request descriptor the transport executes and the
page request used by paginated list endpoints.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, BinaryIO, Dict, Iterable, List, Mapping, Optional, Tuple, Union
from urllib.parse import urlencode
import posixpath


# Starr servers cap their own page sizes; this is what the client asks for by default.
DEFAULT_PAGE_SIZE = 500

# The servers' defaults when a paging parameter is missing.
SERVER_PAGE_SIZE = 10

QueryParams = Tuple[Tuple[str, str], ...]


def format_value(value: Any) -> str:
    """Render a query value the way the servers parse it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return format_value(value.value)
    return str(value)


def _normalize_query(query: Union[None, Mapping[str, Any], Iterable[Tuple[str, Any]]]) -> QueryParams:
    if query is None:
        return ()
    items = query.items() if isinstance(query, Mapping) else query
    params: List[Tuple[str, str]] = []
    for key, value in items:
        if isinstance(value, (list, tuple)):
            params.extend((key, format_value(v)) for v in value)
        else:
            params.append((key, format_value(value)))
    return tuple(params)


@dataclass(frozen=True)
class Request:
    """
    One HTTP call, before it is executed.

    ``path`` is relative to ``/api/{api_version}``; with an empty version it is
    used as-is (``/ping``). ``query`` is an ordered multimap. ``body`` is read
    once by the transport and not owned afterwards.
    """
    path: str
    query: QueryParams = ()
    body: Optional[BinaryIO] = field(default=None, compare=False)
    api_version: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "query", _normalize_query(self.query))

    @classmethod
    def build(cls, api_version: str, *segments: Any, query: Any = None,
              body: Optional[BinaryIO] = None) -> Request:
        """
        Join path segments into a request.

        Example:
            ```python
            Request.build("v3", "exclusions", 12)  # /api/v3/exclusions/12
            Request.build("v1", "downloadClient", "test", body=buf)
            ```
        """
        path = posixpath.join(*(str(s).strip("/") for s in segments)) if segments else ""
        return cls(path=path, query=query, body=body, api_version=api_version)

    @property
    def uri(self) -> str:
        """Server-relative path including the API prefix."""
        if not self.api_version:
            return "/" + self.path.lstrip("/")
        return posixpath.join("/api", self.api_version, self.path.lstrip("/")).rstrip("/")

    def query_string(self) -> str:
        return urlencode(list(self.query))

    def __str__(self) -> str:
        if not self.query:
            return self.uri
        return f"{self.uri}?{self.query_string()}"


class Sorting(str, Enum):
    """Sort direction for paginated endpoints."""
    DEFAULT = ""
    ASCENDING = "ascending"
    DESCENDING = "descending"


class Filtering(IntEnum):
    """Base type for the per-product history/event filters."""


@dataclass
class PageReq:
    """
    Parameters for one page of a paginated list endpoint.

    Attributes:
        page: 1-based page number; values below 1 are sent as 1
        page_size: records per page; 0 sends the server default
        sort_key: server field to sort on
        sort_dir: sort direction
        filter: product-specific event filter, sent as ``eventType``
        values: additional named filters
    """
    page: int = 0
    page_size: int = 0
    sort_key: str = ""
    sort_dir: Sorting = Sorting.DEFAULT
    filter: Optional[Filtering] = None
    values: Dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str:
        """Current value of ``key``, or an empty string."""
        if key == "page":
            return str(self.page) if self.page > 0 else ""
        if key == "pageSize":
            return str(self.page_size) if self.page_size > 0 else ""
        if key == "sortKey":
            return self.sort_key
        if key == "sortDirection":
            return self.sort_dir.value
        if key == "eventType":
            return str(int(self.filter)) if self.filter else ""
        return self.values.get(key, "")

    def set(self, key: str, value: str) -> None:
        if key == "page":
            self.page = int(value)
        elif key == "pageSize":
            self.page_size = int(value)
        elif key == "sortKey":
            self.sort_key = value
        elif key == "sortDirection":
            self.sort_dir = Sorting(value)
        else:
            self.values[key] = value

    def check_set(self, key: str, value: str) -> None:
        """Set ``key`` to ``value`` only if it has no value yet."""
        if not self.get(key):
            self.set(key, value)

    def params(self) -> QueryParams:
        """Render the query, filling in the servers' defaults."""
        params: Dict[str, str] = dict(self.values)
        params["page"] = str(self.page) if self.page > 0 else "1"
        params["pageSize"] = str(self.page_size) if self.page_size > 0 else str(SERVER_PAGE_SIZE)
        params["sortKey"] = self.sort_key or "date"
        if self.sort_dir in (Sorting.ASCENDING, Sorting.DESCENDING):
            params["sortDirection"] = self.sort_dir.value
        else:
            params["sortDirection"] = Sorting.DESCENDING.value
        if self.filter:
            params["eventType"] = str(int(self.filter))
        return tuple(params.items())


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "Request",
    "Sorting",
    "Filtering",
    "PageReq",
    "format_value",
]
