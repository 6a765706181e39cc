"""
Readarr (books) API client and data types.
"""

from .client import API_VERSION, Readarr, new
from .models import DownloadClientInput, DownloadClientOutput

__all__ = ["API_VERSION", "Readarr", "new", "DownloadClientInput", "DownloadClientOutput"]
