"""
Post Fetcher Module

Single-flight wrapper around the API client: one fetch at a time,
every failure surfaced as a FetchError.
"""

import logging
from typing import Tuple

from .client import APIClient, FetchError, Post


logger = logging.getLogger(__name__)


class FetcherBusyError(Exception):
    """Raised when fetch_all() is called while a fetch is already running."""


class PostFetcher:
    """
    Fetches the complete post collection through an APIClient.

    Rejects overlapping calls instead of relying on the display to
    hide its download trigger. No retries: a failed fetch must be
    started again by the caller.
    """

    def __init__(self, api: APIClient):
        self.api = api
        self._in_flight = False

    @property
    def busy(self) -> bool:
        """True while a fetch is outstanding."""
        return self._in_flight

    async def fetch_all(self) -> Tuple[Post, ...]:
        """
        Fetch every post.

        Returns:
            The complete ordered collection.

        Raises:
            FetcherBusyError: If another fetch is still outstanding.
            FetchError: If the request or decoding failed.
        """
        # Checked and set before the first await
        if self._in_flight:
            logger.warning("Fetch rejected: another fetch is in progress")
            raise FetcherBusyError("A fetch is already in progress")

        self._in_flight = True
        try:
            posts = await self.api.get_posts()
        except FetchError as e:
            logger.error(f"Fetch failed: {e.message}")
            raise
        finally:
            self._in_flight = False

        return posts
