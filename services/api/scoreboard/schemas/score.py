"""Schemas for the score and leaderboard endpoints."""

from pydantic import BaseModel, Field


class ScoreEntry(BaseModel):
    """A single user's score on the leaderboard."""

    user: str
    score: int = Field(ge=0)


class ScoreResponse(BaseModel):
    """Response payload for GET/POST /score."""

    score: int = Field(ge=0)


class IncrementRequest(BaseModel):
    """Request body for POST /score.

    ``userId`` is optional at the schema level so that a missing id yields the
    same 400 error shape as the query endpoint instead of a validation error.
    """

    user_id: str | None = Field(alias="userId", default=None)

    model_config = {"populate_by_name": True}


class LeaderboardResponse(BaseModel):
    """Response payload for GET /leaderboard (top scores, descending)."""

    leaderboard: list[ScoreEntry] = Field(max_length=10)
