"""
Prowlarr data types.
"""

from __future__ import annotations
from typing import List
from pydantic import Field

from ..types import FieldInput, FieldOutput, StarrModel


class ApplicationInput(StarrModel):
    """An application (a Sonarr, Radarr, ... instance Prowlarr syncs indexers to)."""
    id: int = 0
    name: str = ""
    fields: List[FieldInput] = Field(default_factory=list)
    implementation_name: str = ""
    implementation: str = ""
    config_contract: str = ""
    info_link: str = ""
    tags: List[int] = Field(default_factory=list)


class ApplicationOutput(StarrModel):
    """An application as the server returns it."""
    id: int = 0
    name: str = ""
    fields: List[FieldOutput] = Field(default_factory=list)
    implementation_name: str = ""
    implementation: str = ""
    config_contract: str = ""
    info_link: str = ""
    tags: List[int] = Field(default_factory=list)


__all__ = ["ApplicationInput", "ApplicationOutput"]
