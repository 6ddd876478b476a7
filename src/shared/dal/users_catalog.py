"""
Fixed users catalog standing in for a real data store.

``get_users`` mimics the latency of a downstream call with a non-blocking
sleep, so concurrent invocations on the same event loop keep progressing.
"""

import asyncio
import time
from typing import List, Tuple

from shared.models.output import User

# Simulated data store round trip, in seconds
USERS_LATENCY_SECONDS = 0.05

USERS_CATALOG: Tuple[User, ...] = (
    User(id='1', name='John Doe', email='john@example.com', created_at='2024-01-15T10:30:00Z'),
    User(id='2', name='Jane Smith', email='jane@example.com', created_at='2024-01-16T14:45:00Z'),
    User(id='3', name='Alice Johnson', email='alice@example.com', created_at='2024-01-17T09:15:00Z'),
)


async def simulate_latency(seconds: float) -> None:
    """Suspend for at least ``seconds`` of monotonic time."""
    deadline = time.monotonic() + seconds
    remaining = seconds
    # asyncio timers may fire up to one clock tick early
    while remaining > 0:
        await asyncio.sleep(remaining)
        remaining = deadline - time.monotonic()


async def get_users(delay: float = USERS_LATENCY_SECONDS) -> List[User]:
    """Return the catalog in fixed order after at least ``delay`` seconds."""
    await simulate_latency(max(delay, USERS_LATENCY_SECONDS))
    return [user.model_copy() for user in USERS_CATALOG]
