"""
Fake HTTP plumbing for the transport tests.

FakeSession stands in for requests.Session: it records each request and
replays queued responses (or raises queued exceptions) in order.
"""

from __future__ import annotations
import io
import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple, Union
from urllib.parse import urlsplit

import requests


def make_response(status_code: int = 200, body: Union[bytes, str, Any] = b"",
                  reason: str = "OK") -> requests.Response:
    """Build a real requests.Response whose body streams from memory."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    elif not isinstance(body, bytes):
        body = json.dumps(body).encode("utf-8")

    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.raw = io.BytesIO(body)
    return response


@dataclass
class RecordedRequest:
    method: str
    url: str
    params: List[Tuple[str, str]]
    data: Optional[bytes]
    headers: Dict[str, str]
    timeout: Any = None
    kwargs: Dict[str, Any] = field(default_factory=dict)

    @property
    def path(self) -> str:
        return urlsplit(self.url).path

    @property
    def query(self) -> Dict[str, str]:
        return dict(self.params)

    def json(self) -> Any:
        return json.loads(self.data) if self.data else None


Reply = Union[requests.Response, Exception, Callable[[RecordedRequest], requests.Response]]


class FakeSession:
    """Records requests and replays queued replies."""

    def __init__(self, replies: Optional[List[Reply]] = None):
        self.replies: List[Reply] = list(replies or [])
        self.requests: List[RecordedRequest] = []
        self.closed = False

    def queue(self, *replies: Reply) -> FakeSession:
        self.replies.extend(replies)
        return self

    def queue_json(self, body: Any, status_code: int = 200) -> FakeSession:
        return self.queue(make_response(status_code, body))

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]

    def request(self, method, url, params=None, data=None, headers=None, timeout=None, **kwargs):
        recorded = RecordedRequest(
            method=method,
            url=url,
            params=list(params or []),
            data=data,
            headers=dict(headers or {}),
            timeout=timeout,
            kwargs=kwargs,
        )
        self.requests.append(recorded)

        if not self.replies:
            return make_response(200, b"{}")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if callable(reply) and not isinstance(reply, requests.Response):
            return reply(recorded)
        return reply

    def close(self):
        self.closed = True


class PagedServer:
    """
    Serves ``items`` the way the starr list endpoints do: page N of size S
    holds items[(N-1)*S : N*S].

    Args:
        items: The full data set
        reported_total: Total to report; defaults to len(items)
        max_page_size: Server-side cap on the page size
        fail_on_page: Raise this error when that page is requested
    """

    def __init__(self, items: List[Any], reported_total: Optional[int] = None,
                 max_page_size: Optional[int] = None, fail_on_page: Optional[int] = None,
                 error: Optional[Exception] = None):
        self.items = items
        self.reported_total = len(items) if reported_total is None else reported_total
        self.max_page_size = max_page_size
        self.fail_on_page = fail_on_page
        self.error = error
        self.fetches: List[Tuple[int, int]] = []

    def slice(self, page: int, page_size: int) -> Dict[str, Any]:
        self.fetches.append((page, page_size))
        if page == self.fail_on_page:
            raise self.error
        if self.max_page_size is not None:
            page_size = min(page_size, self.max_page_size)
        start = (page - 1) * page_size
        return {
            "page": page,
            "pageSize": page_size,
            "sortKey": "date",
            "sortDirection": "descending",
            "totalRecords": self.reported_total,
            "records": self.items[start:start + page_size],
        }

    def __call__(self, recorded: RecordedRequest) -> requests.Response:
        query = recorded.query
        return make_response(200, self.slice(int(query["page"]), int(query["pageSize"])))
