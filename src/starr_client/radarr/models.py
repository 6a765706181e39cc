"""
Radarr data types.
"""

from __future__ import annotations
from typing import ClassVar, FrozenSet
from pydantic import Field

from ..types import StarrModel


class Exclusion(StarrModel):
    """A movie excluded from import lists."""
    tmdb_id: int = 0
    title: str = Field(default="", alias="movieTitle")
    year: int = Field(default=0, alias="movieYear")
    id: int = 0

    omit_empty_fields: ClassVar[FrozenSet[str]] = frozenset({"id"})


__all__ = ["Exclusion"]
