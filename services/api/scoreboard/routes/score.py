"""Score endpoints.

GET  /score?userId=...  - Current score for a user
POST /score             - Increment a user's score by one
GET  /leaderboard       - Top-10 scores, descending

Routers are thin: call services for business logic. ValidationError and
StoreUnavailable are mapped to HTTP responses by the app's exception handlers.
"""

from fastapi import APIRouter, Query

from scoreboard.schemas import (
    ErrorResponse,
    IncrementRequest,
    LeaderboardResponse,
    ScoreResponse,
)
from scoreboard.services.scores import get_score, get_top_k, increment_score
from scoreboard.settings import get_settings

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid user id"},
    503: {"model": ErrorResponse, "description": "Score store unavailable"},
}


@router.get("/score", response_model=ScoreResponse, responses=ERROR_RESPONSES)
async def read_score(
    user_id: str | None = Query(
        default=None,
        alias="userId",
        description="User identifier",
        examples=["alice"],
    ),
) -> ScoreResponse:
    """Get a user's current score (0 if the user has never incremented)."""
    return ScoreResponse(score=await get_score(user_id))


@router.post("/score", response_model=ScoreResponse, responses=ERROR_RESPONSES)
async def bump_score(body: IncrementRequest | None = None) -> ScoreResponse:
    """Increment a user's score by one and return the new value."""
    user_id = body.user_id if body else None
    return ScoreResponse(score=await increment_score(user_id))


@router.get("/leaderboard", response_model=LeaderboardResponse, responses=ERROR_RESPONSES)
async def read_leaderboard(
    limit: int | None = Query(
        default=None,
        ge=1,
        le=10,
        description="Number of entries (defaults to LEADERBOARD_SIZE)",
    ),
) -> LeaderboardResponse:
    """Get the top scores, highest first.

    Ties between equal scores follow the store's native ordering.
    """
    k = limit if limit is not None else get_settings().leaderboard_size
    return LeaderboardResponse(leaderboard=await get_top_k(k))
