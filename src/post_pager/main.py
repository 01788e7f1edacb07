"""
Main Entry Point

Console viewer for the Post Pager. Drives the complete workflow:

1. Build the API client, fetcher, paginator and session once
2. Wait for the user to start the download
3. Show the fetched posts one page at a time
4. Navigate with next / previous until the user quits

The viewer is only a rendering surface: it reads the session state,
re-renders whenever the session notifies it, and forwards commands.
"""

import asyncio
import logging
import sys
from typing import Optional, TextIO

from .config import config
from .api import APIClient, PostFetcher
from .paging import Paginator
from .session import PostSession


HELP_TEXT = "Commands: [d]ownload  [n]ext  [p]rev  [r]eload  [q]uit"


# Configure logging
def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Set up logging for the application."""
    # Ensure log directory exists
    config.log.log_directory.mkdir(parents=True, exist_ok=True)

    # Create logger
    logger = logging.getLogger("post_pager")
    logger.setLevel(logging.DEBUG)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)

    # File handler
    file_handler = logging.FileHandler(
        config.log.log_file_path,
        mode='w',
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(config.log.log_format))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger


class ConsoleViewer:
    """
    Text rendering surface for a PostSession.

    Renders the status line, the current page of posts and the
    page indicator, and maps typed commands onto session actions.
    """

    def __init__(self, session: PostSession, out: Optional[TextIO] = None):
        self.session = session
        self.out = out or sys.stdout
        self._unsubscribe = session.subscribe(self.render)

    def _write(self, text: str = "") -> None:
        self.out.write(text + "\n")
        self.out.flush()

    def render(self, session: PostSession) -> None:
        """Redraw everything the user can see."""
        paginator = session.paginator

        self._write()
        self._write(session.status.describe())

        page = paginator.current_page()
        if page:
            self._write(f"Parsed Post objects (Page {paginator.current_page_index + 1})")
            self._write("-" * 40)
            width = config.display.title_width
            for post in page:
                title = post.title if len(post.title) <= width else post.title[:width - 3] + "..."
                self._write(f"[{post.id:>3}] {title}")
            self._write("-" * 40)

            prev_hint = "< Prev" if paginator.has_previous() else "      "
            next_hint = "Next >" if paginator.has_next() else "      "
            self._write(f"{prev_hint}   {paginator.page_label()}   {next_hint}")

    async def download(self) -> None:
        """Start a download after the demo pause."""
        if self.session.is_loading:
            self._write("A download is already running.")
            return

        delay = config.display.demo_delay_seconds
        if delay > 0:
            await asyncio.sleep(delay)
        await self.session.load()

    async def handle_command(self, command: str) -> bool:
        """
        Apply one user command.

        Args:
            command: The raw input line.

        Returns:
            False when the user asked to quit, True otherwise.
        """
        command = command.strip().lower()

        if command in ("q", "quit", "exit"):
            return False
        if command in ("d", "download"):
            if not self.session.paginator.is_empty():
                self._write("Data already loaded; use [r]eload to fetch again.")
                return True
            await self.download()
        elif command in ("r", "reload"):
            await self.download()
        elif command in ("n", "next"):
            if not self.session.next_page():
                self._write("Already on the last page.")
        elif command in ("p", "prev", "previous"):
            if not self.session.previous_page():
                self._write("Already on the first page.")
        else:
            self._write(HELP_TEXT)

        return True

    async def run(self) -> None:
        """Read commands until the user quits or input ends."""
        self.render(self.session)
        self._write(HELP_TEXT)

        try:
            while True:
                try:
                    line = await asyncio.to_thread(input, "> ")
                except EOFError:
                    break
                if not await self.handle_command(line):
                    break
        finally:
            self._unsubscribe()


async def run_viewer() -> int:
    """Build the components once, run the viewer, and release the client."""
    logger = logging.getLogger("post_pager.main")

    async with APIClient() as api:
        session = PostSession(PostFetcher(api), Paginator())
        viewer = ConsoleViewer(session)
        await viewer.run()

    logger.info("Viewer closed")
    return 0


def main():
    """Main entry point for the console viewer."""
    # Set up logging
    logger = setup_logging(config.log.log_level)

    try:
        sys.exit(asyncio.run(run_viewer()))

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)

    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
