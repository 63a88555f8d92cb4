from __future__ import annotations

from typing import Optional

from redis import Redis
from rq import Queue

from api.config import get_settings


def get_redis() -> Redis:
    settings = get_settings()
    return Redis.from_url(settings.redis_url)


def get_queue(name: Optional[str] = None) -> Queue:
    return Queue(name or get_settings().rq_queue, connection=get_redis())
