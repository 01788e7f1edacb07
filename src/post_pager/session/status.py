"""
Fetch status shown to the user: idle, loading, success or failure.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import config


class FetchState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchStatus:
    """Outcome of the most recent fetch, as seen by the display."""
    state: FetchState
    count: Optional[int] = None
    message: Optional[str] = None

    @classmethod
    def idle(cls) -> "FetchStatus":
        return cls(FetchState.IDLE)

    @classmethod
    def loading(cls) -> "FetchStatus":
        return cls(FetchState.LOADING)

    @classmethod
    def success(cls, count: int) -> "FetchStatus":
        return cls(FetchState.SUCCESS, count=count)

    @classmethod
    def failed(cls, message: str) -> "FetchStatus":
        return cls(FetchState.FAILED, message=message)

    def describe(self) -> str:
        """Status line for the display."""
        if self.state is FetchState.LOADING:
            return config.display.loading_message
        if self.state is FetchState.SUCCESS:
            return config.display.success_template.format(count=self.count)
        if self.state is FetchState.FAILED:
            return config.display.failure_template.format(message=self.message)
        return config.display.idle_message
