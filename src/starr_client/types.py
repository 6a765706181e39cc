"""
Shared data types for the starr APIs.

All models decode leniently: unknown fields are ignored and missing fields
take their zero value. Field names are snake_case in Python and camelCase on
the wire.
"""

from __future__ import annotations
from enum import Enum
from typing import ClassVar, FrozenSet, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr, model_serializer
from pydantic.alias_generators import to_camel


# Field values are a closed variant; list elements are scalars.
FieldScalar = Union[StrictBool, StrictInt, StrictFloat, StrictStr]
FieldValue = Union[FieldScalar, List[FieldScalar], None]


class StarrModel(BaseModel):
    """
    Base for every wire model.

    ``omit_empty_fields`` names fields left off the wire while they still
    hold their default (the servers treat a missing ``id`` as "assign one").
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        use_enum_values=True,
    )

    omit_empty_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler):
        data = handler(self)
        if not isinstance(data, dict):
            return data
        fields = type(self).model_fields
        for name in self.omit_empty_fields:
            if getattr(self, name) != fields[name].default:
                continue
            for key in (name, fields[name].alias):
                data.pop(key, None)
        return data


class Protocol(str, Enum):
    """Download protocols."""
    UNKNOWN = "unknown"
    USENET = "usenet"
    TORRENT = "torrent"


class FieldInput(StarrModel):
    """A name/value setting sent to the server."""
    name: str = ""
    value: FieldValue = None

    omit_empty_fields: ClassVar[FrozenSet[str]] = frozenset({"value"})


class SelectOption(StarrModel):
    """One choice of a select-type field."""
    divider_after: bool = False
    order: int = 0
    value: int = 0
    hint: str = ""
    name: str = ""


class FieldOutput(StarrModel):
    """A setting as the server describes it, schema metadata included."""
    advanced: bool = False
    order: int = 0
    help_link: str = ""
    help_text: str = ""
    hidden: str = ""
    label: str = ""
    name: str = ""
    select_options_provider_action: str = ""
    type: str = ""
    privacy: str = ""
    value: FieldValue = None
    select_options: List[SelectOption] = Field(default_factory=list)


class BaseQuality(StarrModel):
    id: int = 0
    name: str = ""
    source: str = ""
    resolution: int = 0
    modifier: str = ""


class QualityRevision(StarrModel):
    version: int = 0
    real: int = 0
    is_repack: bool = False


class Quality(StarrModel):
    """A quality item as embedded in history, queue and block list records."""
    name: str = ""
    id: int = 0
    quality: Optional[BaseQuality] = None
    items: List[Quality] = Field(default_factory=list)
    allowed: bool = False
    revision: Optional[QualityRevision] = None


__all__ = [
    "FieldScalar",
    "FieldValue",
    "StarrModel",
    "Protocol",
    "FieldInput",
    "FieldOutput",
    "SelectOption",
    "BaseQuality",
    "QualityRevision",
    "Quality",
]
