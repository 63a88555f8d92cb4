"""
Unit Tests for Application Session Setup
========================================
"""

import pytest
from unittest.mock import patch

import app
from services.session_manager import SessionManager


@pytest.fixture
def session_state():
    with patch('services.session_manager.st') as mock_st:
        mock_st.session_state = {}
        yield mock_st.session_state


class TestInitSessionState:
    """Tests for first-run session defaults."""

    def test_defaults_created_once(self, session_state):
        """Test the handler and section are stored under the manager's keys."""
        with patch('app.SupabaseHandler') as mock_handler:
            app.init_session_state()
            app.init_session_state()

        mock_handler.assert_called_once_with()
        assert session_state[SessionManager.DB_HANDLER] is mock_handler.return_value
        assert session_state[SessionManager.CURRENT_SECTION] == app.DEFAULT_SECTION

    def test_existing_section_kept(self, session_state):
        """Test a chosen section survives reruns."""
        session_state[SessionManager.CURRENT_SECTION] = 'pricing'
        with patch('app.SupabaseHandler'):
            app.init_session_state()

        assert session_state[SessionManager.CURRENT_SECTION] == 'pricing'
