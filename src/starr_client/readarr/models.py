"""
Readarr data types.
"""

from __future__ import annotations
from typing import ClassVar, FrozenSet, List
from pydantic import Field

from ..types import FieldInput, FieldOutput, Protocol, StarrModel


class DownloadClientInput(StarrModel):
    """Input for a new or updated download client."""
    enable: bool = False
    priority: int = 0
    id: int = 0
    config_contract: str = ""
    implementation: str = ""
    implementation_name: str = ""
    name: str = ""
    protocol: str = Protocol.UNKNOWN.value
    tags: List[int] = Field(default_factory=list)
    fields: List[FieldInput] = Field(default_factory=list)

    omit_empty_fields: ClassVar[FrozenSet[str]] = frozenset({"id"})


class DownloadClientOutput(StarrModel):
    """A download client as the server returns it."""
    enable: bool = False
    priority: int = 0
    id: int = 0
    config_contract: str = ""
    implementation: str = ""
    implementation_name: str = ""
    info_link: str = ""
    name: str = ""
    protocol: str = Protocol.UNKNOWN.value
    tags: List[int] = Field(default_factory=list)
    fields: List[FieldOutput] = Field(default_factory=list)


__all__ = ["DownloadClientInput", "DownloadClientOutput"]
