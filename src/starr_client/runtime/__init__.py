"""Runtime helpers for the starr client"""

from .context import Context
from .errors import StarrError
from .codec import DISCARD, encode_json, decode_json

__all__ = [
    "Context",
    "StarrError",
    "DISCARD",
    "encode_json",
    "decode_json",
]
