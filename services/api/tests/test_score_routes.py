"""Tests for /score, /leaderboard and /api/banana."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_get_score_for_unknown_user(client: AsyncClient, fake_redis):
    response = await client.get("/score", params={"userId": "nobody"})
    assert response.status_code == 200
    assert response.json() == {"score": 0}


@pytest.mark.asyncio
async def test_get_score_requires_user_id(client: AsyncClient, fake_redis):
    response = await client.get("/score")
    assert response.status_code == 400
    assert response.json() == {"error": "User ID is required"}

    response = await client.get("/score", params={"userId": ""})
    assert response.status_code == 400
    assert response.json() == {"error": "User ID is required"}


@pytest.mark.asyncio
async def test_post_score_increments(client: AsyncClient, fake_redis):
    for expected in (1, 2, 3):
        response = await client.post("/score", json={"userId": "alice"})
        assert response.status_code == 200
        assert response.json() == {"score": expected}

    response = await client.get("/score", params={"userId": "alice"})
    assert response.json() == {"score": 3}


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{}, {"userId": ""}, {"userId": "  "}, {"userId": None}])
async def test_post_score_requires_user_id(client: AsyncClient, fake_redis, body):
    response = await client.post("/score", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "User ID is required"}
    assert fake_redis.zsets == {}


@pytest.mark.asyncio
async def test_post_score_without_body(client: AsyncClient, fake_redis):
    response = await client.post("/score")
    assert response.status_code == 400
    assert response.json() == {"error": "User ID is required"}


@pytest.mark.asyncio
async def test_post_score_malformed_body(client: AsyncClient, fake_redis):
    response = await client.post(
        "/score",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request"}


@pytest.mark.asyncio
async def test_leaderboard(client: AsyncClient, fake_redis):
    response = await client.get("/leaderboard")
    assert response.status_code == 200
    assert response.json() == {"leaderboard": []}

    for _ in range(3):
        await client.post("/score", json={"userId": "alice"})
    await client.post("/score", json={"userId": "bob"})

    response = await client.get("/leaderboard")
    assert response.json() == {
        "leaderboard": [
            {"user": "alice", "score": 3},
            {"user": "bob", "score": 1},
        ]
    }


@pytest.mark.asyncio
async def test_leaderboard_is_capped_at_ten(client: AsyncClient, fake_redis):
    for i in range(12):
        await client.post("/score", json={"userId": f"user{i}"})

    response = await client.get("/leaderboard")
    assert len(response.json()["leaderboard"]) == 10

    response = await client.get("/leaderboard", params={"limit": 3})
    assert len(response.json()["leaderboard"]) == 3

    response = await client.get("/leaderboard", params={"limit": 11})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request"}


@pytest.mark.asyncio
async def test_store_unavailable_maps_to_503(client: AsyncClient, broken_redis):
    response = await client.post("/score", json={"userId": "alice"})
    assert response.status_code == 503
    assert response.json() == {"error": "Score store unavailable"}

    response = await client.get("/leaderboard")
    assert response.status_code == 503


@pytest.mark.asyncio
async def test_combined_endpoint(client: AsyncClient, fake_redis):
    response = await client.get("/api/banana")
    assert response.status_code == 200
    assert response.json() == {"leaderboard": []}

    response = await client.post("/api/banana", json={"userId": "alice"})
    assert response.json() == {"score": 1}

    response = await client.get("/api/banana", params={"userId": "alice"})
    assert response.json() == {"score": 1}

    response = await client.get("/api/banana")
    assert response.json() == {"leaderboard": [{"user": "alice", "score": 1}]}


@pytest.mark.asyncio
async def test_combined_endpoint_post_requires_user_id(client: AsyncClient, fake_redis):
    response = await client.post("/api/banana", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "User ID is required"}


@pytest.mark.asyncio
async def test_score_reads_map_store_unavailable_to_503(client: AsyncClient, broken_redis):
    response = await client.get("/score", params={"userId": "alice"})
    assert response.status_code == 503
    assert response.json() == {"error": "Score store unavailable"}

    response = await client.get("/api/banana", params={"userId": "alice"})
    assert response.status_code == 503
    assert response.json() == {"error": "Score store unavailable"}
