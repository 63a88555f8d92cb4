from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    redis_url: str
    environment: str
    lovable_api_key: str
    ai_gateway_url: str
    ai_gateway_model: str
    rq_queue: str
    log_level: str


def get_settings() -> Settings:
    return Settings(
        redis_url=os.getenv("REDIS_URL", "redis://localhost:6379/0"),
        environment=os.getenv("ENVIRONMENT", "local"),
        lovable_api_key=os.getenv("LOVABLE_API_KEY", "").strip(),
        ai_gateway_url=os.getenv("AI_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1").rstrip("/"),
        ai_gateway_model=os.getenv("AI_GATEWAY_MODEL", "google/gemini-3-flash-preview"),
        rq_queue=os.getenv("RQ_QUEUE", "default"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
