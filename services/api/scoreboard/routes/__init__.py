"""API routes."""

from fastapi import APIRouter

from scoreboard.routes import banana, score

api_router = APIRouter()

# Score and leaderboard endpoints
api_router.include_router(score.router, tags=["score"])

# Single-route variant (GET with/without userId, POST)
api_router.include_router(banana.router, prefix="/api/banana", tags=["banana"])
