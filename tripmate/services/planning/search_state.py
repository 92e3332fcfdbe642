"""
Caller-side state for a best-date search view: idle -> loading -> success | error.
Kept separate from the finder, which stays a pure request/response function.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .types import SearchResult, VacationOption


class SearchState(str, Enum):
    IDLE = "IDLE"
    LOADING = "LOADING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class InvalidTransition(Exception):
    pass


@dataclass
class SearchSession:
    state: SearchState = SearchState.IDLE
    options: list[VacationOption] = field(default_factory=list)
    error: Optional[str] = None

    def begin(self) -> None:
        if self.is_loading:
            raise InvalidTransition("A search is already running")
        self.state = SearchState.LOADING
        self.options = []
        self.error = None

    def complete(self, result: SearchResult) -> None:
        if not result.success:
            self.fail(result.error_message or "Unknown error")
            return
        self._require_loading()
        self.state = SearchState.SUCCESS
        self.options = list(result.options)

    def fail(self, message: str) -> None:
        self._require_loading()
        self.state = SearchState.ERROR
        self.error = message

    def reset(self) -> None:
        self.state = SearchState.IDLE
        self.options = []
        self.error = None

    @property
    def is_loading(self) -> bool:
        return self.state == SearchState.LOADING

    def _require_loading(self) -> None:
        if not self.is_loading:
            raise InvalidTransition(f"Cannot finish a search from state {self.state.value}")
