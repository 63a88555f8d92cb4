"""
Session State Manager
=====================
Centralized session state management for the dashboard tabs.

Provides a single interface over ``st.session_state`` so components do not
scatter raw key strings.
"""

import streamlit as st
from typing import Any, Optional, Dict


class SessionManager:
    """
    Centralized session state manager.
    """

    # Session state keys (centralized constants)
    DB_HANDLER = 'db_handler'
    CURRENT_SECTION = 'current_section'
    ASSESSMENT = 'enhanced_assessment'
    READINESS_WIZARD = 'readiness_wizard'
    COMPARED_PLATFORMS = 'compared_platforms'
    SELECTED_DEALS = 'selected_deals'
    DEAL_SOURCING = 'deal_sourcing'
    ROI_INPUTS = 'roi_inputs'
    ACTIVE_PERSONA_ID = 'active_persona_id'
    GENERATED_PROMPTS = 'generated_prompts'

    @staticmethod
    def get(key: str, default: Any = None) -> Any:
        """
        Get value from session state.

        Args:
            key: Session state key
            default: Default value if key doesn't exist

        Returns:
            Value from session state or default
        """
        return st.session_state.get(key, default)

    @staticmethod
    def set(key: str, value: Any) -> None:
        st.session_state[key] = value

    @staticmethod
    def delete(key: str) -> None:
        if key in st.session_state:
            del st.session_state[key]

    @staticmethod
    def get_or_create(key: str, factory) -> Any:
        """
        Return the value under ``key``, creating it with ``factory()`` first
        when missing.
        """
        if key not in st.session_state:
            st.session_state[key] = factory()
        return st.session_state[key]

    @staticmethod
    def get_generated_prompt(ecosystem: str) -> Optional[str]:
        prompts: Dict[str, str] = SessionManager.get(SessionManager.GENERATED_PROMPTS, {})
        return prompts.get(ecosystem)

    @staticmethod
    def set_generated_prompt(ecosystem: str, content: str) -> None:
        prompts = dict(SessionManager.get(SessionManager.GENERATED_PROMPTS, {}))
        prompts[ecosystem] = content
        SessionManager.set(SessionManager.GENERATED_PROMPTS, prompts)

