"""Combined banana counter endpoint.

GET  /api/banana?userId=...  - Score for the user
GET  /api/banana             - Top-10 leaderboard when no userId is given
POST /api/banana             - Increment the user's score

Kept for clients of the single-route API; behaviour matches /score and
/leaderboard.
"""

from fastapi import APIRouter, Query

from scoreboard.schemas import (
    IncrementRequest,
    LeaderboardResponse,
    ScoreResponse,
)
from scoreboard.services.scores import get_score, get_top_k, increment_score
from scoreboard.settings import get_settings

router = APIRouter()


@router.get("", response_model=ScoreResponse | LeaderboardResponse)
async def read_banana(
    user_id: str | None = Query(default=None, alias="userId"),
) -> ScoreResponse | LeaderboardResponse:
    """Return the user's score, or the leaderboard if no userId is given."""
    if user_id:
        return ScoreResponse(score=await get_score(user_id))
    k = get_settings().leaderboard_size
    return LeaderboardResponse(leaderboard=await get_top_k(k))


@router.post("", response_model=ScoreResponse)
async def bump_banana(body: IncrementRequest | None = None) -> ScoreResponse:
    """Increment the user's score by one and return the new value."""
    return ScoreResponse(score=await increment_score(body.user_id if body else None))
