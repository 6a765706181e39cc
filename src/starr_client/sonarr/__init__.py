"""
Sonarr (series) API client and data types.
"""

from .client import API_VERSION, Sonarr, new
from .models import (
    ColonReplacement,
    CustomFormatInputSpec,
    CustomFormatInput,
    CustomFormatOutputSpec,
    CustomFormatOutput,
    Naming,
)

__all__ = [
    "API_VERSION",
    "Sonarr",
    "new",
    "ColonReplacement",
    "CustomFormatInputSpec",
    "CustomFormatInput",
    "CustomFormatOutputSpec",
    "CustomFormatOutput",
    "Naming",
]
