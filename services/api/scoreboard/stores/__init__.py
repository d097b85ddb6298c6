"""Data stores for persistence.

Stores handle:
- Redis: the leaderboard sorted set and its connection lifecycle

No validation or response shaping in stores - that belongs in services.
"""
