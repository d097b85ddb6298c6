"""Counter view state.

Mirrors the banana counter page:
- Leaderboard is loaded once on start and after every increment
- Changing the name fetches that user's score (empty name clears it locally);
  the previous score stays on screen until the new one arrives
- Increment is ignored while a previous increment is still in flight

Every failure is logged and leaves the previous state untouched.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
import logging

import httpx

from scoreboard.client.http import ScoreboardClient
from scoreboard.schemas import ScoreEntry

logger = logging.getLogger("uvicorn.error")

# ValueError covers bad JSON and pydantic validation of leaderboard rows.
CLIENT_ERRORS = (httpx.HTTPError, ValueError, KeyError, TypeError)


def normalize_user_id(raw: str) -> str:
    """Trim and lowercase an entered name."""
    return raw.strip().lower()


@dataclass
class CounterState:
    """What the page shows."""

    user_id: str = ""
    score: int | None = None  # None = not loaded yet
    leaderboard: list[ScoreEntry] = field(default_factory=list)
    is_loading: bool = False


class CounterView:
    """Event-driven view: each input or completed request updates state, then notifies listeners."""

    def __init__(self, client: ScoreboardClient):
        self.client = client
        self.state = CounterState()
        self._listeners: list[Callable[[CounterState], None]] = []

    def subscribe(self, listener: Callable[[CounterState], None]) -> None:
        """Register a redraw callback."""
        self._listeners.append(listener)

    def _changed(self) -> None:
        for listener in self._listeners:
            listener(self.state)

    async def load(self) -> None:
        """Initial page load."""
        await self.refresh_leaderboard()

    async def refresh_leaderboard(self) -> None:
        try:
            leaderboard = await self.client.get_leaderboard()
        except CLIENT_ERRORS as e:
            logger.warning(f"Failed to fetch leaderboard: {e}")
            return
        self.state.leaderboard = leaderboard
        self._changed()

    async def set_user_id(self, raw: str) -> None:
        """Handle a change of the name input."""
        user_id = normalize_user_id(raw)
        if user_id == self.state.user_id:
            return

        self.state.user_id = user_id
        if not user_id:
            self.state.score = None
        self._changed()
        if not user_id:
            return

        try:
            score = await self.client.get_score(user_id)
        except CLIENT_ERRORS as e:
            logger.warning(f"Failed to fetch score for {user_id!r}: {e}")
            return
        # Name changed while the request was in flight.
        if self.state.user_id != user_id:
            return
        self.state.score = score
        self._changed()

    async def increment(self) -> bool:
        """Handle the increment button.

        Returns:
            True if an increment request was issued.
        """
        user_id = self.state.user_id
        if not user_id or self.state.is_loading:
            return False

        self.state.is_loading = True
        self._changed()
        try:
            score = await self.client.increment(user_id)
            if self.state.user_id == user_id:
                self.state.score = score
                self._changed()
            await self.refresh_leaderboard()
        except CLIENT_ERRORS as e:
            logger.warning(f"Failed to increment score for {user_id!r}: {e}")
        finally:
            self.state.is_loading = False
            self._changed()
        return True
