"""
Configuration constants for the Post Pager.

This module centralizes all configurable parameters to make the client
easy to tune and point at a different environment.
"""

from pathlib import Path
from dataclasses import dataclass, field


@dataclass
class APIConfig:
    """API configuration settings."""
    base_url: str = "https://jsonplaceholder.typicode.com"
    posts_endpoint: str = "/posts"
    timeout_seconds: float = 10.0


@dataclass
class PaginationConfig:
    """Pagination configuration."""
    page_size: int = 6  # Fits a phone screen without scrolling


@dataclass
class DisplayConfig:
    """Console display configuration."""
    # Pause before downloading, purely for demo pacing
    demo_delay_seconds: float = 1.0
    title_width: int = 60

    # Status lines
    idle_message: str = "Ready to Download Data"
    loading_message: str = "Downloading items from Server..."
    success_template: str = "Success! Loaded {count} Posts."
    failure_template: str = "Error: {message}"


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "post_pager.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    api: APIConfig = field(default_factory=APIConfig)
    pagination: PaginationConfig = field(default_factory=PaginationConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
