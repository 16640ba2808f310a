"""Fetch lifecycle shared by every external data fetcher.

A fetch moves Idle -> Requesting -> Success | Failed -> Idle. Failures are
returned as values; nothing raises past the fetch boundary.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class FetchState(str, Enum):
    IDLE = "idle"
    REQUESTING = "requesting"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of one request/response cycle."""

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "FetchResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "FetchResult[T]":
        return cls(ok=False, error=error)


class FetchTracker:
    """Tracks fetch state per widget and drops superseded results.

    There is no true cancellation: a request that was overtaken by a newer
    one of the same kind still completes, but its result is ignored.
    """

    def __init__(self):
        self.states: Dict[str, FetchState] = {}
        self._tokens: Dict[str, int] = {}

    def state(self, kind: str) -> FetchState:
        return self.states.get(kind, FetchState.IDLE)

    def begin(self, kind: str) -> int:
        """Mark a request as started and return its token."""
        token = self._tokens.get(kind, 0) + 1
        self._tokens[kind] = token
        self.states[kind] = FetchState.REQUESTING
        return token

    def is_current(self, kind: str, token: int) -> bool:
        return self._tokens.get(kind) == token

    def finish(self, kind: str, token: int, result: FetchResult) -> bool:
        """Record a finished request.

        Returns:
            True if the result belongs to the latest request and should be
            applied, False if it was superseded.
        """
        if not self.is_current(kind, token):
            print(f"⏭️  Dropping stale {kind} result")
            return False
        self.states[kind] = FetchState.SUCCESS if result.ok else FetchState.FAILED
        return True

    def settle(self, kind: str):
        """Return to Idle once the result has been applied."""
        self.states[kind] = FetchState.IDLE
