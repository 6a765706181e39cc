"""
Lidarr (music) API client and data types.
"""

from .client import API_VERSION, Lidarr, new
from .models import Filter, Artist, CustomFormatSummary, BlockListRecord, BlockList

__all__ = [
    "API_VERSION",
    "Lidarr",
    "new",
    "Filter",
    "Artist",
    "CustomFormatSummary",
    "BlockListRecord",
    "BlockList",
]
