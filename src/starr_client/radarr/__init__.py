"""
Radarr (movies) API client and data types.
"""

from .client import API_VERSION, Radarr, new
from .models import Exclusion

__all__ = ["API_VERSION", "Radarr", "new", "Exclusion"]
