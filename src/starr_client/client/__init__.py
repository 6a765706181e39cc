"""
Request descriptors and pagination for the starr client.
"""

from .requests import DEFAULT_PAGE_SIZE, Request, PageReq, Sorting, Filtering
from .pagination import Page, aggregate, set_per_page, adjust_per_page

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "Request",
    "PageReq",
    "Sorting",
    "Filtering",
    "Page",
    "aggregate",
    "set_per_page",
    "adjust_per_page",
]
