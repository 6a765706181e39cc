"""
Sonarr data types.

Custom formats do not exist in Sonarr v3; those types are v4 only.
"""

from __future__ import annotations
from enum import IntEnum
from typing import ClassVar, FrozenSet, List
from pydantic import Field

from ..types import FieldInput, FieldOutput, StarrModel


class ColonReplacement(IntEnum):
    """Colon replacement formats for the naming config."""
    DELETE = 0
    REPLACE_WITH_DASH = 1
    REPLACE_WITH_SPACE_DASH = 2
    REPLACE_WITH_SPACE_DASH_SPACE = 3
    SMART_REPLACE = 4
    CUSTOM = 5


class CustomFormatInputSpec(StarrModel):
    """One specification of a CustomFormatInput."""
    name: str = ""
    implementation: str = ""
    negate: bool = False
    required: bool = False
    fields: List[FieldInput] = Field(default_factory=list)


class CustomFormatInput(StarrModel):
    """Input for a new or updated custom format."""
    id: int = 0
    name: str = ""
    include_cf_when_renaming: bool = Field(default=False, alias="includeCustomFormatWhenRenaming")
    specifications: List[CustomFormatInputSpec] = Field(default_factory=list)

    omit_empty_fields: ClassVar[FrozenSet[str]] = frozenset({"id"})


class CustomFormatOutputSpec(StarrModel):
    """One specification of a CustomFormatOutput."""
    name: str = ""
    implementation: str = ""
    implementation_name: str = ""
    info_link: str = ""
    negate: bool = False
    required: bool = False
    fields: List[FieldOutput] = Field(default_factory=list)


class CustomFormatOutput(StarrModel):
    """A custom format as the server returns it."""
    id: int = 0
    name: str = ""
    include_cf_when_renaming: bool = Field(default=False, alias="includeCustomFormatWhenRenaming")
    specifications: List[CustomFormatOutputSpec] = Field(default_factory=list)


class Naming(StarrModel):
    """The config/naming singleton."""
    rename_episodes: bool = False
    replace_illegal_characters: bool = False
    colon_replacement_format: ColonReplacement = ColonReplacement.DELETE
    id: int = 0
    multi_episode_style: int = 0
    daily_episode_format: str = ""
    anime_episode_format: str = ""
    series_folder_format: str = ""
    season_folder_format: str = ""
    specials_folder_format: str = ""
    standard_episode_format: str = ""
    custom_colon_replacement_format: str = ""


__all__ = [
    "ColonReplacement",
    "CustomFormatInputSpec",
    "CustomFormatInput",
    "CustomFormatOutputSpec",
    "CustomFormatOutput",
    "Naming",
]
