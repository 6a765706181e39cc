"""
Starr API Client

This module provides the transport shared by every starr product client. It
resolves request descriptors against the configured server, attaches the API
key, performs exactly one HTTP exchange per call under a cancellable context,
and maps every failure onto the error model in ``runtime.errors``.
"""

from __future__ import annotations
import time
import logging
from typing import Any, Optional, Union
from dataclasses import dataclass

import requests

from .client.requests import Request
from .runtime.codec import DISCARD, decode_json
from .runtime.context import Context
from .runtime.errors import (
    StarrError, NetworkError, TimeoutError, DeadlineExceededError, InvalidStatusError,
)


# Longest response snippet kept on an InvalidStatusError.
MAX_ERROR_BODY = 1024

CHUNK_SIZE = 64 * 1024

API_KEY_HEADER = "X-Api-Key"


@dataclass
class ClientConfig:
    """Configuration for a starr server connection."""

    url: str
    api_key: str = ""
    timeout: float = 30.0
    verify_ssl: bool = True
    debug: bool = False
    user_agent: str = "starr-client-python/0.1.0"
    max_error_body: int = MAX_ERROR_BODY

    def __post_init__(self) -> None:
        self.url = self.url.rstrip("/")

    def set_path(self, request: Request) -> str:
        """Full URL for ``request``, without the query string."""
        return self.url + request.uri


class StarrClient:
    """
    Transport for the starr APIs.

    Provides one method per verb:
    - ``get``/``post``/``put``/``delete`` return the open response; close it
      (it is a context manager)
    - ``get_into``/``post_into``/``put_into`` decode the JSON body into a
      model class, a typing form such as ``List[Model]``, or ``DISCARD``
    - ``delete_any`` drains and discards the body

    Every call accepts ``ctx``; ``None`` means no cancellation and no deadline.
    No call is retried.
    """

    def __init__(self, config: Union[str, ClientConfig], api_key: str = "",
                 session: Optional[requests.Session] = None):
        """
        Initialize the transport.

        Args:
            config: Either a base URL or a ClientConfig object
            api_key: API key, used when ``config`` is a URL
            session: Optional requests.Session to share a connection pool
        """
        if isinstance(config, str):
            self.config = ClientConfig(url=config, api_key=api_key)
        else:
            self.config = config

        self.logger = logging.getLogger(__name__)
        if self.config.debug:
            self.logger.setLevel(logging.DEBUG)

        self._session = session or requests.Session()
        self._owns_session = session is None

    @property
    def session(self) -> requests.Session:
        return self._session

    def close(self) -> None:
        """Close the HTTP session if owned by this client."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> StarrClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # =========================================================================
    # Exchange
    # =========================================================================

    def _timeout(self, ctx: Context) -> tuple[float, bool]:
        """Request timeout and whether it was cut short by the context deadline."""
        remaining = ctx.remaining()
        if remaining is not None and remaining < self.config.timeout:
            return max(remaining, 0.001), True
        return self.config.timeout, False

    def _headers(self, has_body: bool) -> dict:
        headers = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }
        if self.config.api_key:
            headers[API_KEY_HEADER] = self.config.api_key
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _send(self, ctx: Optional[Context], method: str, req: Request) -> requests.Response:
        """Perform the exchange and check the status; the caller closes the response."""
        ctx = ctx or Context.background()
        rendered = str(req)
        ctx.raise_if_done(rendered)

        url = self.config.set_path(req)
        body = req.body.read() if req.body is not None else None
        timeout, deadline_bound = self._timeout(ctx)

        if self.config.debug and body:
            self.logger.debug(f"Request body: {method} {rendered} -> {body.decode('utf-8', 'replace')}")

        start = time.monotonic()
        try:
            response = self._session.request(
                method,
                url,
                params=list(req.query),
                data=body,
                headers=self._headers(body is not None),
                timeout=timeout,
                verify=self.config.verify_ssl,
                stream=True,
            )
        except requests.Timeout as e:
            error = ctx.err(rendered)
            if error is None and deadline_bound:
                error = DeadlineExceededError(cause=e, request=rendered)
            if error is not None:
                raise error from e
            raise TimeoutError(f"{method} {url}: {e}", cause=e, request=rendered) from e
        except requests.RequestException as e:
            error = ctx.err(rendered)
            if error is not None:
                raise error from e
            raise NetworkError(f"{method} {url}: {e}", cause=e, request=rendered) from e

        self.logger.debug(f"{method} {rendered} -> {response.status_code} ({time.monotonic() - start:.3f}s)")

        error = ctx.err(rendered)
        if error is not None:
            response.close()
            raise error

        if not 200 <= response.status_code < 300:
            try:
                snippet = self._read(ctx, response, rendered, limit=self.config.max_error_body)
            finally:
                response.close()
            text = snippet.decode("utf-8", "replace")[: self.config.max_error_body]
            raise InvalidStatusError(response.status_code, text, response.reason or "", request=rendered)

        return response

    def _read(self, ctx: Context, response: requests.Response, rendered: str,
              limit: Optional[int] = None) -> bytes:
        """Drain the body, stopping early on cancellation or once ``limit`` bytes arrived."""
        unregister = ctx.on_cancel(response.close)
        chunks = []
        size = 0
        try:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                ctx.raise_if_done(rendered)
                chunks.append(chunk)
                size += len(chunk)
                if limit is not None and size >= limit:
                    break
        except StarrError:
            raise
        except (requests.RequestException, OSError, ValueError, AttributeError) as e:
            # A cancel hook closing the response surfaces here as a read failure.
            error = ctx.err(rendered)
            if error is not None:
                raise error from e
            raise NetworkError(f"reading body: {e}", cause=e, request=rendered) from e
        finally:
            unregister()
        return b"".join(chunks)

    def _exchange_into(self, ctx: Optional[Context], method: str, req: Request, out: Any) -> Any:
        ctx = ctx or Context.background()
        rendered = str(req)
        response = self._send(ctx, method, req)
        try:
            data = self._read(ctx, response, rendered)
        finally:
            response.close()

        if self.config.debug:
            self.logger.debug(f"Response body: {method} {rendered} -> {data.decode('utf-8', 'replace')}")

        return decode_json(data, out, rendered)

    # =========================================================================
    # Verbs
    # =========================================================================

    def get(self, req: Request, *, ctx: Optional[Context] = None) -> requests.Response:
        """HTTP GET; the caller closes the returned response."""
        return self._send(ctx, "GET", req)

    def post(self, req: Request, *, ctx: Optional[Context] = None) -> requests.Response:
        """HTTP POST; the caller closes the returned response."""
        return self._send(ctx, "POST", req)

    def put(self, req: Request, *, ctx: Optional[Context] = None) -> requests.Response:
        """HTTP PUT; the caller closes the returned response."""
        return self._send(ctx, "PUT", req)

    def delete(self, req: Request, *, ctx: Optional[Context] = None) -> requests.Response:
        """HTTP DELETE; the caller closes the returned response."""
        return self._send(ctx, "DELETE", req)

    def get_into(self, req: Request, out: Any, *, ctx: Optional[Context] = None) -> Any:
        """HTTP GET and decode the body into ``out``."""
        return self._exchange_into(ctx, "GET", req, out)

    def post_into(self, req: Request, out: Any, *, ctx: Optional[Context] = None) -> Any:
        """HTTP POST and decode the body into ``out``."""
        return self._exchange_into(ctx, "POST", req, out)

    def put_into(self, req: Request, out: Any, *, ctx: Optional[Context] = None) -> Any:
        """HTTP PUT and decode the body into ``out``."""
        return self._exchange_into(ctx, "PUT", req, out)

    def delete_any(self, req: Request, *, ctx: Optional[Context] = None) -> None:
        """HTTP DELETE, discarding whatever body comes back."""
        ctx = ctx or Context.background()
        response = self._send(ctx, "DELETE", req)
        try:
            self._read(ctx, response, str(req))
        finally:
            response.close()

    def ping(self, *, ctx: Optional[Context] = None) -> None:
        """
        Raise unless the server answers ``/ping`` with a 2xx status.

        ``/ping`` has no API or version prefix.
        """
        response = self.get(Request(path="/ping"), ctx=ctx)
        response.close()


__all__ = [
    "MAX_ERROR_BODY",
    "ClientConfig",
    "StarrClient",
    "DISCARD",
]
