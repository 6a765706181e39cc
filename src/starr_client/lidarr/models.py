"""
Lidarr data types.
"""

from __future__ import annotations
from datetime import datetime
from typing import List, Optional
from pydantic import Field

from ..client.pagination import Page
from ..client.requests import Filtering
from ..types import Quality, StarrModel


class Filter(Filtering):
    """
    History event types; the server takes them as integers.

    Reference: Lidarr src/NzbDrone.Core/History/History.cs
    """
    UNKNOWN = 0
    GRABBED = 1
    ARTIST_FOLDER_IMPORTED = 2
    TRACK_FILE_IMPORTED = 3
    DOWNLOAD_FAILED = 4
    DELETED = 5
    RENAMED = 6
    IMPORT_FAILED = 7
    DOWNLOAD_IMPORTED = 8
    RETAGGED = 9
    IGNORED = 10


class Artist(StarrModel):
    """The artist fields embedded in block list records."""
    id: int = 0
    artist_name: str = ""
    foreign_artist_id: str = ""
    status: str = ""
    overview: str = ""
    artist_type: str = ""
    disambiguation: str = ""
    path: str = ""
    root_folder_path: str = ""
    clean_name: str = ""
    sort_name: str = ""
    quality_profile_id: int = 0
    metadata_profile_id: int = 0
    monitored: bool = False
    genres: List[str] = Field(default_factory=list)
    tags: List[int] = Field(default_factory=list)
    added: Optional[datetime] = None


class CustomFormatSummary(StarrModel):
    """A custom format as referenced from another record."""
    id: int = 0
    name: str = ""


class BlockListRecord(StarrModel):
    """A single block list item."""
    artist: Optional[Artist] = None
    quality: Optional[Quality] = None
    custom_formats: List[CustomFormatSummary] = Field(default_factory=list)
    album_ids: List[int] = Field(default_factory=list)
    id: int = 0
    artist_id: int = 0
    date: Optional[datetime] = None
    source_title: str = ""
    protocol: str = ""
    indexer: str = ""
    message: str = ""


BlockList = Page[BlockListRecord]


__all__ = ["Filter", "Artist", "CustomFormatSummary", "BlockListRecord", "BlockList"]
