"""Shared fixtures: an in-memory sorted set standing in for the Redis client."""

import pytest
from httpx import ASGITransport, AsyncClient
from redis.exceptions import ConnectionError as RedisConnectionError

from scoreboard.main import app
from scoreboard.stores import redis as redis_store


class FakeRedis:
    """Implements the sorted-set commands the store uses.

    Each command completes without awaiting anything, so it is atomic with
    respect to other coroutines, like a single Redis command.
    """

    def __init__(self) -> None:
        self.zsets: dict[str, dict[str, float]] = {}
        self.calls: list[str] = []

    async def ping(self) -> bool:
        return True

    async def aclose(self) -> None:
        pass

    async def zscore(self, name: str, member: str) -> float | None:
        self.calls.append("zscore")
        return self.zsets.get(name, {}).get(member)

    async def zincrby(self, name: str, amount: float, member: str) -> float:
        self.calls.append("zincrby")
        zset = self.zsets.setdefault(name, {})
        zset[member] = zset.get(member, 0.0) + amount
        return zset[member]

    async def zrevrange(
        self, name: str, start: int, end: int, withscores: bool = False
    ) -> list:
        self.calls.append("zrevrange")
        # Redis orders equal scores by member, reversed for ZREVRANGE.
        rows = sorted(
            self.zsets.get(name, {}).items(),
            key=lambda item: (item[1], item[0]),
            reverse=True,
        )
        stop = None if end == -1 else end + 1
        rows = rows[start:stop]
        if withscores:
            return rows
        return [member for member, _ in rows]


class BrokenRedis(FakeRedis):
    """Every command fails as if the server went away."""

    async def zscore(self, name: str, member: str) -> float | None:
        raise RedisConnectionError("Connection refused")

    async def zincrby(self, name: str, amount: float, member: str) -> float:
        raise RedisConnectionError("Connection refused")

    async def zrevrange(self, name: str, start: int, end: int, withscores: bool = False) -> list:
        raise RedisConnectionError("Connection refused")


@pytest.fixture
def fake_redis(monkeypatch: pytest.MonkeyPatch) -> FakeRedis:
    """Install an empty in-memory store as the Redis client."""
    fake = FakeRedis()
    monkeypatch.setattr(redis_store, "_redis", fake)
    return fake


@pytest.fixture
def broken_redis(monkeypatch: pytest.MonkeyPatch) -> BrokenRedis:
    """Install a Redis client whose commands all fail."""
    broken = BrokenRedis()
    monkeypatch.setattr(redis_store, "_redis", broken)
    return broken


@pytest.fixture
async def client():
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
