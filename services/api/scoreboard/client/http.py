"""HTTP client for the scoreboard API."""

import logging

import httpx

from scoreboard.schemas import ScoreEntry
from scoreboard.settings import get_settings

logger = logging.getLogger("uvicorn.error")


class ScoreboardClient:
    """Client for the /score and /leaderboard endpoints.

    Errors are not handled here: non-2xx responses raise
    httpx.HTTPStatusError, malformed payloads raise ValueError or KeyError.
    """

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ):
        """Initialize client.

        Args:
            base_url: API root (defaults to settings.api_base_url).
            transport: Optional transport (e.g. ASGITransport in tests).
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url or get_settings().api_base_url
        self._transport = transport
        self._timeout = timeout
        self._http_client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self.base_url,
                transport=self._transport,
                timeout=self._timeout,
            )
        return self._http_client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "ScoreboardClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def get_score(self, user_id: str) -> int:
        """GET /score?userId=..."""
        client = await self._get_client()
        response = await client.get("/score", params={"userId": user_id})
        response.raise_for_status()
        return int(response.json()["score"])

    async def increment(self, user_id: str) -> int:
        """POST /score, returns the new score."""
        client = await self._get_client()
        response = await client.post("/score", json={"userId": user_id})
        response.raise_for_status()
        return int(response.json()["score"])

    async def get_leaderboard(self) -> list[ScoreEntry]:
        """GET /leaderboard."""
        client = await self._get_client()
        response = await client.get("/leaderboard")
        response.raise_for_status()
        data = response.json()
        return [ScoreEntry.model_validate(entry) for entry in data.get("leaderboard") or []]
