"""Banana Scoreboard: Redis-backed counters and a Top-10 leaderboard."""
