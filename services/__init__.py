"""
Services Layer
==============
Business logic separated from UI and database layers.

Service classes provide business logic abstraction and can be used
independently of UI components.
"""

from .assessment_service import AssessmentService
from .knowledge_service import KnowledgeService
from .roi_service import ROIService
from .persona_service import PersonaService
from .symphony_service import SymphonyService
from .session_manager import SessionManager

__all__ = [
    'AssessmentService',
    'KnowledgeService',
    'ROIService',
    'PersonaService',
    'SymphonyService',
    'SessionManager',
]
