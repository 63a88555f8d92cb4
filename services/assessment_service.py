"""
Assessment Service
==================
Business logic for saving and listing AI readiness assessments.
"""

from typing import List, Dict, Optional, Any

from assessment_engine import build_assessment_record


class AssessmentService:
    """
    Service for assessment persistence.

    Both the quick wizard and the enhanced assessment are stored in
    ``ai_assessments``.
    """

    def __init__(self, db_handler):
        """
        Initialize assessment service.

        Args:
            db_handler: Database handler instance (SupabaseHandler)
        """
        self.db = db_handler

    def list_assessments(self, user_id: str) -> List[Dict[str, Any]]:
        return self.db.get_assessments(user_id)

    def save_wizard(self, user_id: str, record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Save a quick wizard result.

        Args:
            user_id: User ID
            record: Row from ``ReadinessWizard.to_record``

        Returns:
            Saved row or None if the score is out of range
        """
        score = record.get('readiness_score')
        if score is None or not 0 <= score <= 100:
            return None
        return self.db.create_assessment({**record, 'user_id': user_id})

    def save_enhanced(self, user_id: str, result: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Save an enhanced assessment result.

        Args:
            user_id: User ID
            result: Payload from ``EnhancedAssessment.build_result``

        Returns:
            Saved row or None if no dimension has been scored
        """
        if not result.get('dimension_scores'):
            return None
        return self.db.create_assessment(build_assessment_record(result, user_id))

    def delete_assessment(self, assessment_id: str, user_id: str) -> bool:
        return self.db.delete_assessment(assessment_id, user_id)

    def latest_score(self, user_id: str) -> Optional[int]:
        assessments = self.list_assessments(user_id)
        if not assessments:
            return None
        return assessments[0].get('readiness_score')
