"""
API Client Module

Async HTTP client for fetching posts from the JSONPlaceholder API
and decoding them into typed Post records.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import httpx

from ..config import config


logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when posts could not be fetched or decoded."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkError(FetchError):
    """The server was unreachable, timed out, or answered with an error status."""


class DecodeError(FetchError):
    """The response body was not a well-formed list of posts."""


@dataclass(frozen=True)
class Post:
    """Represents a post from the API."""
    id: int
    title: str
    body: str

    @classmethod
    def from_dict(cls, item: Any) -> "Post":
        """
        Build a Post from one decoded JSON object.

        Extra keys (userId and so on) are ignored.

        Args:
            item: A decoded JSON value, expected to be an object.

        Returns:
            The Post.

        Raises:
            ValueError: If the object is missing a field or a field has the wrong type.
        """
        if not isinstance(item, dict):
            raise ValueError(f"expected an object, got {type(item).__name__}")

        for key in ("id", "title", "body"):
            if key not in item:
                raise ValueError(f"missing required field '{key}'")

        post_id = item["id"]
        # bool is an int subclass; true/false is not a valid id
        if isinstance(post_id, bool) or not isinstance(post_id, int):
            raise ValueError(f"field 'id' must be an integer, got {post_id!r}")
        if not isinstance(item["title"], str):
            raise ValueError("field 'title' must be a string")
        if not isinstance(item["body"], str):
            raise ValueError("field 'body' must be a string")

        return cls(id=post_id, title=item["title"], body=item["body"])


def decode_posts(data: Any) -> Tuple[Post, ...]:
    """
    Decode a JSON payload into an ordered tuple of posts.

    Args:
        data: The decoded response body.

    Returns:
        Posts in the order the server sent them.

    Raises:
        DecodeError: If the payload is not an array of valid post objects.
    """
    if not isinstance(data, list):
        raise DecodeError(f"Unexpected API response format: {type(data).__name__}")

    posts = []
    for index, item in enumerate(data):
        try:
            posts.append(Post.from_dict(item))
        except ValueError as e:
            raise DecodeError(f"Invalid post at index {index}: {e}") from e

    return tuple(posts)


class APIClient:
    """
    HTTP client for the JSONPlaceholder API.

    Owns a single httpx.AsyncClient for its whole lifetime. Construct it
    once at startup and hand it to whatever needs to fetch; close it with
    aclose() or by using it as an async context manager.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the API client.

        Args:
            base_url: Server root (uses config default if None).
            timeout: Request timeout in seconds (uses config default if None).
            http_client: Pre-built client to use instead of creating one.
        """
        self.base_url = (base_url or config.api.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.api.timeout_seconds
        self._http = http_client or httpx.AsyncClient(timeout=self.timeout)
        logger.info(f"APIClient initialized (base_url: {self.base_url})")

    @property
    def posts_url(self) -> str:
        return f"{self.base_url}{config.api.posts_endpoint}"

    async def get_posts(self) -> Tuple[Post, ...]:
        """
        Fetch and decode every post.

        Returns:
            Tuple of Post objects in server order.

        Raises:
            NetworkError: On connection failure, timeout, or non-2xx status.
            DecodeError: If the body is not a valid list of posts.
        """
        url = self.posts_url
        logger.info(f"Fetching posts from {url}")

        try:
            response = await self._http.get(url)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout fetching {url}: {e}")
            raise NetworkError(f"Request to {url} timed out") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"HTTP {status} from {url}")
            raise NetworkError(f"Server returned HTTP {status}") from e
        except httpx.HTTPError as e:
            logger.warning(f"HTTP error fetching {url}: {e}")
            raise NetworkError(f"Could not reach server: {e}") from e

        try:
            data = response.json()
        except RecursionError as e:
            logger.warning(f"Response from {url} is nested too deeply to decode")
            raise DecodeError("Malformed JSON in response: nested too deeply") from e
        except ValueError as e:
            logger.warning(f"Response from {url} is not valid JSON: {e}")
            raise DecodeError(f"Malformed JSON in response: {e}") from e

        posts = decode_posts(data)
        logger.info(f"Fetched {len(posts)} posts successfully")
        return posts

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()
        logger.debug("APIClient closed")

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
