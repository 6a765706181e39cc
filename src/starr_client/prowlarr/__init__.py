"""
Prowlarr (indexer manager) API client and data types.
"""

from .client import API_VERSION, Prowlarr, new
from .models import ApplicationInput, ApplicationOutput

__all__ = ["API_VERSION", "Prowlarr", "new", "ApplicationInput", "ApplicationOutput"]
