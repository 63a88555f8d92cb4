"""
Unit Tests for the Streamlit AI Assistant
=========================================
"""

import json
from types import SimpleNamespace
from unittest.mock import Mock, patch

import httpx
import openai
import pytest

from components.ai_assistant import AIAssistant


def _reply(content=None, tool_calls=None):
    message = SimpleNamespace(content=content, tool_calls=tool_calls)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def mock_st():
    with patch('components.ai_assistant.st') as mock:
        mock.secrets = {}
        yield mock


@pytest.fixture
def assistant(mock_st):
    mock_st.secrets = {'ai_gateway': {'api_key': 'test-key', 'model': 'test-model'}}
    assistant = AIAssistant()
    assistant.client = Mock()
    return assistant


class TestAIAssistant:
    """Tests for the in-process gateway client."""

    def test_unconfigured_uses_fallback(self, mock_st):
        """Test onboarding falls back without credentials."""
        assistant = AIAssistant()
        assert not assistant.is_available()
        suggestions, source = assistant.onboarding_suggestions('fund_manager', 'expert')
        assert source == 'fallback'
        assert suggestions['riskTolerance'] == 'aggressive'

    def test_configured_model(self, assistant):
        """Test the model comes from secrets."""
        assert assistant.is_available()
        assert assistant.model == 'test-model'

    def test_tool_call_suggestions(self, assistant):
        """Test tool arguments are returned as AI suggestions."""
        call = SimpleNamespace(function=SimpleNamespace(name='provide_suggestions', arguments=json.dumps({'tips': ['x']})))
        assistant.client.chat.completions.create.return_value = _reply(tool_calls=[call])

        suggestions, source = assistant.onboarding_suggestions('advisor', 'novice')

        assert (suggestions, source) == ({'tips': ['x']}, 'ai')
        kwargs = assistant.client.chat.completions.create.call_args.kwargs
        assert kwargs['model'] == 'test-model'
        assert kwargs['temperature'] == 0.7

    def test_rate_limit_falls_back_quietly(self, assistant, mock_st):
        """Test 429 returns the fallback without an error message."""
        response = httpx.Response(429, request=httpx.Request('POST', 'https://gateway.test/v1/chat/completions'))
        assistant.client.chat.completions.create.side_effect = openai.RateLimitError('slow down', response=response, body=None)

        _, source = assistant.onboarding_suggestions('advisor', 'novice')

        assert source == 'fallback'
        mock_st.error.assert_not_called()

    def test_out_of_credits_reported(self, assistant, mock_st):
        """Test 402 is shown to the user."""
        response = httpx.Response(402, request=httpx.Request('POST', 'https://gateway.test/v1/chat/completions'))
        assistant.client.chat.completions.create.side_effect = openai.APIStatusError('pay', response=response, body=None)

        assert assistant.generate_persona('Analyst', 'Finance') is None
        mock_st.error.assert_called_once_with("AI credits depleted. Please add credits to continue.")

    def test_out_of_credits_has_no_suggestions(self, assistant, mock_st):
        """Test 402 during onboarding returns no suggestions."""
        response = httpx.Response(402, request=httpx.Request('POST', 'https://gateway.test/v1/chat/completions'))
        assistant.client.chat.completions.create.side_effect = openai.APIStatusError('pay', response=response, body=None)

        assert assistant.onboarding_suggestions('advisor', 'novice') == (None, 'error')
        mock_st.error.assert_called_once_with("AI credits depleted. Please add credits to continue.")

    def test_gateway_error_falls_back(self, assistant, mock_st):
        """Test other gateway failures still show standard suggestions."""
        response = httpx.Response(500, request=httpx.Request('POST', 'https://gateway.test/v1/chat/completions'))
        assistant.client.chat.completions.create.side_effect = openai.APIStatusError('boom', response=response, body=None)

        suggestions, source = assistant.onboarding_suggestions('advisor', 'novice')

        assert source == 'fallback'
        assert suggestions is not None
        mock_st.error.assert_called_once()

    def test_generate_persona(self, assistant):
        """Test the persona JSON is extracted."""
        assistant.client.chat.completions.create.return_value = _reply(content='{"skills": ["SQL"]}')
        assert assistant.generate_persona('Analyst', 'Finance') == {'skills': ['SQL']}

    def test_hat_suggestions_prompt(self, assistant):
        """Test hat suggestions are parsed and token limit applied."""
        assistant.client.chat.completions.create.return_value = _reply(content='{"automation_opportunities": []}')

        result = assistant.generate_prompt('hat_suggestions', {'name': 'Dana'}, hat={'name': 'Reporting'})

        assert result == {'automation_opportunities': []}
        assert assistant.client.chat.completions.create.call_args.kwargs['max_tokens'] == 2000

    def test_empty_prompt_reply(self, assistant, mock_st):
        """Test an empty reply reports an error."""
        assistant.client.chat.completions.create.return_value = _reply(content='')
        assert assistant.generate_prompt('claude', {'name': 'Dana'}) is None
        mock_st.error.assert_called_once_with("No content generated")
