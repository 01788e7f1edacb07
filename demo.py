"""
Pagination Demo Script

This script demonstrates the fetch-and-paginate flow by:
1. Downloading all posts from the API
2. Splitting them into pages
3. Walking forward through every page, then back to the first

Run this to see the whole collection without the interactive viewer.
"""

import asyncio
import sys
import time
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from post_pager.config import config
from post_pager.api import APIClient, PostFetcher
from post_pager.paging import Paginator
from post_pager.session import FetchState, PostSession


def print_page(paginator: Paginator) -> None:
    """Print the posts on the current page."""
    print(f"\n      {paginator.page_label()}")
    for post in paginator.current_page():
        print(f"        [{post.id:>3}] {post.title[:config.display.title_width]}")


async def demonstrate_pagination() -> bool:
    """
    Fetch once and print every page.

    Returns:
        True if the download succeeded.
    """
    print("=" * 60)
    print("Post Pager Demo")
    print("=" * 60)

    async with APIClient() as api:
        session = PostSession(PostFetcher(api), Paginator())

        # Download
        print(f"\n[1/3] Downloading posts from {api.posts_url}...")
        start_time = time.time()
        status = await session.load()
        print(f"      {status.describe()} ({time.time() - start_time:.2f}s)")

        if status.state is not FetchState.SUCCESS:
            return False

        # Walk forward
        paginator = session.paginator
        print(f"\n[2/3] Paging forward ({paginator.page_size} per page, "
              f"{paginator.total_pages()} pages)")
        print_page(paginator)
        while session.next_page():
            print_page(paginator)

        # Walk back
        print("\n[3/3] Paging back to the start")
        steps = 0
        while session.previous_page():
            steps += 1
        print(f"      Moved back {steps} page(s), now on {paginator.page_label()}")

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)
    return True


if __name__ == "__main__":
    ok = asyncio.run(demonstrate_pagination())
    sys.exit(0 if ok else 1)
