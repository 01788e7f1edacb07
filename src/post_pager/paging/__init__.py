"""
Paging Module

Provides the fixed-size page view over the fetched post collection.
"""

from .paginator import Paginator

__all__ = ["Paginator"]
