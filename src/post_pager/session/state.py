"""
Session State Module

Composes the fetcher and the paginator for a display surface.
The fetch status and the page cursor are kept as separate owned
structures; the display reads both and re-renders when notified.
"""

import asyncio
import logging
from typing import Callable, List

from ..api import FetchError, Post, PostFetcher
from ..paging import Paginator
from .status import FetchState, FetchStatus


logger = logging.getLogger(__name__)

Listener = Callable[["PostSession"], None]


class PostSession:
    """
    Display-facing state for one viewing session.

    Owns:
    - the current FetchStatus
    - a Paginator holding the last successfully fetched collection
    """

    def __init__(self, fetcher: PostFetcher, paginator: "Paginator[Post]"):
        self._fetcher = fetcher
        self._paginator = paginator
        self._status = FetchStatus.idle()
        self._listeners: List[Listener] = []

    @property
    def fetcher(self) -> PostFetcher:
        return self._fetcher

    @property
    def paginator(self) -> "Paginator[Post]":
        return self._paginator

    @property
    def status(self) -> FetchStatus:
        return self._status

    @property
    def is_loading(self) -> bool:
        return self._status.state is FetchState.LOADING

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called after every state change.

        Args:
            listener: Callable receiving this session.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _set_status(self, status: FetchStatus) -> None:
        self._status = status
        logger.debug(f"Status: {status.describe()}")
        self._notify()

    async def load(self) -> FetchStatus:
        """
        Fetch the collection and hand it to the paginator.

        A failed fetch leaves the previous collection and page in place.
        A call made while a fetch is outstanding changes nothing.

        Returns:
            The status after the attempt.
        """
        if self._fetcher.busy:
            logger.warning("Load ignored: a fetch is already in progress")
            return self._status

        previous = self._status
        self._set_status(FetchStatus.loading())

        # The status must never be left at Loading once this returns or raises
        try:
            posts = await self._fetcher.fetch_all()
        except FetchError as e:
            self._set_status(FetchStatus.failed(e.message))
            return self._status
        except asyncio.CancelledError:
            logger.info("Load cancelled")
            self._set_status(previous)
            raise
        except Exception as e:
            logger.exception("Unexpected error while loading posts")
            self._set_status(FetchStatus.failed(str(e) or type(e).__name__))
            raise

        self._paginator.set_collection(posts)
        self._set_status(FetchStatus.success(len(posts)))
        return self._status

    def next_page(self) -> bool:
        """Advance one page; listeners are notified only if the page changed."""
        moved = self._paginator.go_next()
        if moved:
            self._notify()
        return moved

    def previous_page(self) -> bool:
        """Go back one page; listeners are notified only if the page changed."""
        moved = self._paginator.go_previous()
        if moved:
            self._notify()
        return moved
