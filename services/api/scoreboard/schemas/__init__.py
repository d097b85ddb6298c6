"""Pydantic schemas for API request/response validation."""

from scoreboard.schemas.common import ErrorResponse
from scoreboard.schemas.score import (
    IncrementRequest,
    LeaderboardResponse,
    ScoreEntry,
    ScoreResponse,
)

__all__ = [
    "ErrorResponse",
    "IncrementRequest",
    "LeaderboardResponse",
    "ScoreEntry",
    "ScoreResponse",
]
