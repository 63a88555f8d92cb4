"""
Persona Service
===============
Business logic for employee personas, their hats (roles with a time share)
and the per-ecosystem prompt exports.
"""

from typing import List, Dict, Optional, Any

from catalog.personas import (
    AI_INTERACTION_STYLES,
    DEFAULT_COMMUNICATION_STYLE,
    DEFAULT_WORK_PREFERENCES,
    ECOSYSTEMS,
    EXPORT_TYPES,
    PERSONA_STATUSES,
    RESPONSE_LENGTHS,
    TONES,
)
from persona_engine import export_name, next_export_version, validate_hat_allocation


class PersonaService:
    """
    Service for employee persona business logic.
    """

    def __init__(self, db_handler):
        """
        Initialize persona service.

        Args:
            db_handler: Database handler instance (SupabaseHandler)
        """
        self.db = db_handler

    # =========================================================================
    # PERSONAS
    # =========================================================================

    def list_personas(self, user_id: str) -> List[Dict[str, Any]]:
        return self.db.get_personas(user_id)

    def get_persona(self, persona_id: str) -> Optional[Dict[str, Any]]:
        return self.db.get_persona(persona_id)

    def _clean_persona(self, data: Dict[str, Any]) -> Dict[str, Any]:
        persona = dict(data)
        persona['communication_style'] = {**DEFAULT_COMMUNICATION_STYLE, **(data.get('communication_style') or {})}
        persona['work_preferences'] = {**DEFAULT_WORK_PREFERENCES, **(data.get('work_preferences') or {})}
        if persona.get('status') not in PERSONA_STATUSES:
            persona['status'] = 'draft'
        if persona.get('ai_interaction_style') not in AI_INTERACTION_STYLES:
            persona['ai_interaction_style'] = 'balanced'
        if persona.get('preferred_response_length') not in RESPONSE_LENGTHS:
            persona['preferred_response_length'] = 'medium'
        if persona.get('preferred_tone') not in TONES:
            persona['preferred_tone'] = 'professional'
        return persona

    def create_persona(self, user_id: str, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Create a persona; unknown enum values fall back to defaults.

        Returns:
            Created row or None if the name is missing
        """
        name = (data.get('name') or '').strip()
        if not name:
            return None
        return self.db.create_persona(user_id, self._clean_persona({**data, 'name': name}))

    def update_persona(self, persona_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        if 'name' in updates and not (updates['name'] or '').strip():
            return None
        if 'status' in updates and updates['status'] not in PERSONA_STATUSES:
            return None
        return self.db.update_persona(persona_id, updates)

    def delete_persona(self, persona_id: str) -> bool:
        return self.db.delete_persona(persona_id)

    # =========================================================================
    # HATS
    # =========================================================================

    def list_hats(self, persona_id: str) -> List[Dict[str, Any]]:
        return self.db.get_hats(persona_id)

    def add_hat(self, user_id: str, persona_id: str, hat: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Add a hat if its time share keeps the persona at or under 100%.

        Returns:
            Created row or None if the name is missing or allocation overflows
        """
        name = (hat.get('name') or '').strip()
        if not name:
            return None
        percentage = int(hat.get('time_percentage') or 0)
        existing = self.list_hats(persona_id)
        if not validate_hat_allocation(existing, percentage):
            return None
        payload = {**hat, 'name': name, 'persona_id': persona_id, 'time_percentage': percentage}
        payload.setdefault('priority', len(existing))
        return self.db.create_hat(user_id, payload)

    def update_hat(self, hat_id: str, persona_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        if 'time_percentage' in updates:
            existing = self.list_hats(persona_id)
            if not validate_hat_allocation(existing, int(updates['time_percentage'] or 0), exclude_hat_id=hat_id):
                return None
        return self.db.update_hat(hat_id, updates)

    def delete_hat(self, hat_id: str) -> bool:
        return self.db.delete_hat(hat_id)

    # =========================================================================
    # ECOSYSTEM EXPORTS
    # =========================================================================

    def list_exports(self, persona_id: str) -> List[Dict[str, Any]]:
        return self.db.get_exports(persona_id)

    def save_export(
        self,
        user_id: str,
        persona: Dict[str, Any],
        ecosystem: str,
        content: str,
        export_type: str = 'system_prompt'
    ) -> Optional[Dict[str, Any]]:
        """
        Save generated content for an ecosystem.

        An existing export for the same persona, ecosystem and type is
        updated with its version bumped; otherwise a version 1 row is created.

        Returns:
            Saved row or None on invalid ecosystem, export type or empty content
        """
        if ecosystem not in ECOSYSTEMS or export_type not in EXPORT_TYPES:
            return None
        if not content or not content.strip():
            return None

        existing = self.db.find_export(persona['id'], ecosystem, export_type)
        version = next_export_version(existing)
        if existing:
            return self.db.update_export(existing['id'], {'content': content, 'version': version})

        return self.db.insert_export(user_id, {
            'persona_id': persona['id'],
            'ecosystem': ecosystem,
            'export_type': export_type,
            'name': export_name(persona['name'], ecosystem),
            'content': content,
            'version': version,
            'is_active': True,
        })
