"""
API Client Module

Provides the async HTTP client and single-flight fetcher for posts
from the JSONPlaceholder API.
"""

from .client import APIClient, Post, FetchError, NetworkError, DecodeError, decode_posts
from .fetcher import PostFetcher, FetcherBusyError

__all__ = [
    "APIClient",
    "Post",
    "FetchError",
    "NetworkError",
    "DecodeError",
    "decode_posts",
    "PostFetcher",
    "FetcherBusyError",
]
