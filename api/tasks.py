from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from api.serialize import to_jsonable
from api.supabase_handler import SupabaseAPIHandler
from assessment_engine import build_assessment_record, score_responses

logger = logging.getLogger(__name__)


def _compact_result(result: Dict[str, Any]) -> Dict[str, Any]:
    """
    Keep job payloads small; the full result lives in ai_assessments.
    """
    return {
        "total_score": result.get("total_score"),
        "dimension_scores": [
            {
                "dimension_id": ds.get("dimension_id"),
                "percentage": ds.get("percentage"),
                "level": ds.get("level"),
            }
            for ds in result.get("dimension_scores") or []
        ],
        "recommendation_count": len(result.get("recommendations") or []),
        "top_platforms": [m.get("platform_id") for m in (result.get("platform_matches") or [])[:3]],
    }


def run_assessment_scoring_task(
    answers: Dict[str, Any],
    assessment_type: str = "external",
    organization_name: str = "",
    contact_email: str = "",
    user_id: Optional[str] = None,
    persist: bool = True,
) -> Dict[str, Any]:
    """
    Background job entrypoint.

    Scores a complete answer sheet outside Streamlit and optionally saves it.
    """
    started = datetime.now(tz=timezone.utc).isoformat()
    result = score_responses(
        answers,
        assessment_type=assessment_type,
        organization_name=organization_name,
        contact_email=contact_email,
    )

    assessment_id: Optional[str] = None
    if persist and user_id:
        db = SupabaseAPIHandler()
        record = to_jsonable(build_assessment_record(result, user_id))
        assessment_id = db.insert_assessment(record)  # type: ignore[arg-type]
        if assessment_id is None:
            logger.warning("Assessment for user %s was scored but not saved", user_id)

    return {
        "user_id": user_id,
        "assessment_type": assessment_type,
        "started_at": started,
        "finished_at": datetime.now(tz=timezone.utc).isoformat(),
        "result": to_jsonable(_compact_result(result)),
        "assessment_id": assessment_id,
    }
