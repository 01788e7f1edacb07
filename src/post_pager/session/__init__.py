"""
Session Module

Display-facing state: fetch status plus the paginated collection.
"""

from .status import FetchState, FetchStatus
from .state import PostSession

__all__ = ["FetchState", "FetchStatus", "PostSession"]
