"""Client side of the scoreboard: HTTP client and counter view state."""

from scoreboard.client.http import ScoreboardClient
from scoreboard.client.view import CounterState, CounterView, normalize_user_id

__all__ = [
    "CounterState",
    "CounterView",
    "ScoreboardClient",
    "normalize_user_id",
]
