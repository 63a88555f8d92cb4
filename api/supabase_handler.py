from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from supabase import Client, create_client

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SupabaseEnv:
    url: str
    key: str


def get_supabase_env() -> SupabaseEnv:
    """
    API-safe Supabase config loader (no Streamlit secrets).

    Expected env vars:
    - SUPABASE_URL
    - SUPABASE_SERVICE_ROLE_KEY (preferred for the worker) OR SUPABASE_ANON_KEY / SUPABASE_KEY
    """
    url = os.getenv("SUPABASE_URL", "").strip()
    key = (
        os.getenv("SUPABASE_SERVICE_ROLE_KEY", "").strip()
        or os.getenv("SUPABASE_ANON_KEY", "").strip()
        or os.getenv("SUPABASE_KEY", "").strip()
    )
    if not url or not key:
        raise RuntimeError(
            "Missing Supabase env vars. Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY "
            "(or SUPABASE_ANON_KEY / SUPABASE_KEY)."
        )
    return SupabaseEnv(url=url, key=key)


class SupabaseAPIHandler:
    """
    Minimal DB handler for the API/worker.

    Provides `.client` (supabase-py Client) and the assessment reads/writes
    used by background scoring.
    """

    def __init__(self):
        env = get_supabase_env()
        self.client: Client = create_client(env.url, env.key)

    def insert_assessment(self, record: Dict[str, Any]) -> Optional[str]:
        """
        Insert an ``ai_assessments`` row and return its ID.
        """
        if not record.get("user_id"):
            # user_id is NOT NULL on ai_assessments
            return None
        try:
            resp = self.client.table("ai_assessments").insert(record).execute()
        except Exception:
            logger.exception("Failed to insert assessment for user %s", record.get("user_id"))
            return None
        if resp.data and resp.data[0].get("id"):
            return str(resp.data[0]["id"])
        return None
