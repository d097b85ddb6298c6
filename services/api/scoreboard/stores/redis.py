"""Redis store for the score leaderboard.

Layout:
- A single sorted set (``settings.leaderboard_key``)
- Member = user id, score = number of increments

Every operation maps to one native Redis command, so atomicity under
concurrent callers is provided by the server:
- ZSCORE    -> read a single score
- ZINCRBY   -> atomic increment, returns the new value
- ZREVRANGE -> top-K by score (ties: reverse lexicographic by member)

Any Redis failure is surfaced as StoreUnavailable. There are no retries.
"""

import logging

import redis.asyncio as redis
from redis.exceptions import RedisError

from scoreboard.settings import get_settings

# Redis client (initialized on startup)
_redis: redis.Redis | None = None
logger = logging.getLogger("uvicorn.error")


class StoreUnavailable(RuntimeError):
    """Raised when the score store cannot be reached or rejects a command."""


async def init_redis() -> None:
    """Initialize Redis connection."""
    global _redis
    settings = get_settings()
    _redis = redis.from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=settings.redis_socket_timeout,
        socket_timeout=settings.redis_socket_timeout,
    )
    # Validate connectivity early (especially for `rediss://` in production).
    await _redis.ping()
    logger.info("Redis connected")


async def close_redis() -> None:
    """Close Redis connection."""
    global _redis
    if _redis:
        await _redis.aclose()
        _redis = None


def _get_redis() -> redis.Redis:
    """Get Redis client instance."""
    if _redis is None:
        raise StoreUnavailable("Redis not initialized. Call init_redis() first.")
    return _redis


def _leaderboard_key() -> str:
    return get_settings().leaderboard_key


# ============================================================
# Leaderboard operations
# ============================================================


async def get_member_score(member: str) -> int:
    """Get a member's score.

    Args:
        member: Sorted set member (user id).

    Returns:
        Current score, 0 if the member does not exist.
    """
    try:
        score = await _get_redis().zscore(_leaderboard_key(), member)
    except RedisError as e:
        logger.error(f"Redis ZSCORE failed for {member!r}: {e}")
        raise StoreUnavailable(str(e)) from e
    return int(score) if score is not None else 0


async def increment_member_score(member: str, amount: int = 1) -> int:
    """Atomically increment a member's score.

    Creates the member with score 0 first if absent (ZINCRBY semantics).

    Args:
        member: Sorted set member (user id).
        amount: Increment step.

    Returns:
        The score after the increment.
    """
    try:
        score = await _get_redis().zincrby(_leaderboard_key(), amount, member)
    except RedisError as e:
        logger.error(f"Redis ZINCRBY failed for {member!r}: {e}")
        raise StoreUnavailable(str(e)) from e
    return int(score)


async def get_top_members(limit: int) -> list[tuple[str, int]]:
    """Get the highest scoring members.

    Args:
        limit: Maximum number of members to return (must be >= 1).

    Returns:
        (member, score) pairs, score descending.
    """
    try:
        rows = await _get_redis().zrevrange(
            _leaderboard_key(), 0, limit - 1, withscores=True
        )
    except RedisError as e:
        logger.error(f"Redis ZREVRANGE failed: {e}")
        raise StoreUnavailable(str(e)) from e
    return [(str(member), int(score)) for member, score in rows]
