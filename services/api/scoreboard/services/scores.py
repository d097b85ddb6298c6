"""Score service: per-user counters and the Top-K leaderboard.

Rules:
- A user id must be non-blank; otherwise ValidationError (nothing is written)
- Unknown users read as 0
- Increments go through the store's atomic ZINCRBY, never read-modify-write
- Leaderboard is sorted by score DESC; ties keep the store's native order

Store failures propagate as StoreUnavailable.
"""

import logging

from scoreboard.schemas import ScoreEntry
from scoreboard.stores.redis import (
    get_member_score,
    get_top_members,
    increment_member_score,
)

logger = logging.getLogger("uvicorn.error")

USER_ID_REQUIRED = "User ID is required"


class ValidationError(ValueError):
    """Raised when a request is missing a usable user id or limit."""


def _require_user(user: str | None) -> str:
    if user is None or not user.strip():
        raise ValidationError(USER_ID_REQUIRED)
    return user


async def get_score(user: str | None) -> int:
    """Get the current score for a user.

    Args:
        user: User id.

    Returns:
        Current score, 0 if the user has never incremented.

    Raises:
        ValidationError: If the user id is missing or blank.
    """
    return await get_member_score(_require_user(user))


async def increment_score(user: str | None) -> int:
    """Add one to a user's score.

    Args:
        user: User id.

    Returns:
        The new score.

    Raises:
        ValidationError: If the user id is missing or blank.
    """
    user = _require_user(user)
    score = await increment_member_score(user)
    logger.debug(f"Score incremented: user={user!r} score={score}")
    return score


async def get_top_k(k: int) -> list[ScoreEntry]:
    """Get up to ``k`` entries, highest score first.

    Args:
        k: Maximum number of entries. 0 returns an empty list.

    Returns:
        List of ScoreEntry objects, sorted by score DESC.

    Raises:
        ValidationError: If ``k`` is negative.
    """
    if k < 0:
        raise ValidationError(f"Leaderboard size must be >= 0, got {k}")
    if k == 0:
        # ZREVRANGE 0 -1 would return the whole set.
        return []

    rows = await get_top_members(k)
    return [ScoreEntry(user=user, score=score) for user, score in rows]
