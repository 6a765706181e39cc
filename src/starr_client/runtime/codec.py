"""
JSON encoding/decoding for request and response bodies.

Request bodies are encoded to a byte stream the transport reads once.
Response bodies are decoded into a pydantic model class, any typing form a
``TypeAdapter`` accepts (``List[Model]``), or the ``DISCARD`` sink.
"""

from __future__ import annotations
import io
import json
from functools import lru_cache
from typing import Any, BinaryIO, Optional
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import MarshalError, UnmarshalError


class _Discard:
    """Write-only decode target: the body is drained and checked, never kept."""

    def __repr__(self) -> str:
        return "DISCARD"


DISCARD = _Discard()


def to_jsonable(value: Any) -> Any:
    """Convert models (and lists/dicts of them) to JSON-ready values."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    return value


def encode_json(value: Any, where: str = "") -> BinaryIO:
    """
    Encode ``value`` as a UTF-8 JSON body.

    Args:
        value: A model, a list of models, or plain JSON data
        where: Path used to label the error

    Returns:
        A byte stream positioned at the start

    Raises:
        MarshalError: If the value cannot be encoded
    """
    try:
        payload = json.dumps(to_jsonable(value), separators=(",", ":"))
    except (TypeError, ValueError, PydanticSerializationError) as e:
        raise MarshalError(f"json.Marshal({where}): {e}", cause=e) from e
    return io.BytesIO(payload.encode("utf-8"))


@lru_cache(maxsize=256)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def decode_json(data: bytes, target: Any, request: Optional[str] = None) -> Any:
    """
    Decode a response body into ``target``.

    Raises:
        UnmarshalError: If the body is not JSON or does not fit ``target``
    """
    if target is DISCARD:
        if data.strip():
            try:
                json.loads(data)
            except ValueError as e:
                raise UnmarshalError(f"invalid JSON body: {e}", cause=e, request=request) from e
        return None

    try:
        if isinstance(target, type) and issubclass(target, BaseModel):
            return target.model_validate_json(data)
        return _adapter(target).validate_json(data)
    except ValidationError as e:
        raise UnmarshalError(
            f"decoding {getattr(target, '__name__', target)}: {e.error_count()} validation error(s)",
            details={"errors": e.errors(include_url=False)},
            cause=e,
            request=request,
        ) from e


__all__ = ["DISCARD", "to_jsonable", "encode_json", "decode_json"]
