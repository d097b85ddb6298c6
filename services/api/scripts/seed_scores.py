#!/usr/bin/env python3
"""Seed the leaderboard with demo scores.

Issues real increments (ZINCRBY) so the result is the same as users clicking.
Running it twice doubles the demo scores.

Usage:
    cd services/api
    python -m scripts.seed_scores
"""

import asyncio
import os
import sys

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from scoreboard.services.scores import increment_score
from scoreboard.stores.redis import close_redis, init_redis

load_dotenv()

# user id -> number of increments
DEMO_SCORES = {
    "alice": 12,
    "bob": 9,
    "carol": 7,
    "dave": 4,
    "erin": 1,
}


async def seed() -> None:
    await init_redis()
    try:
        for user, count in DEMO_SCORES.items():
            score = 0
            for _ in range(count):
                score = await increment_score(user)
            print(f"  {user}: {score}")
    finally:
        await close_redis()


if __name__ == "__main__":
    print("Seeding leaderboard...")
    asyncio.run(seed())
    print("Done.")
