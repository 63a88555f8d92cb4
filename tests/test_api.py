"""
API Route Tests
===============
FastAPI routes with the AI gateway, auth and the job queue patched out.
"""

import json
from datetime import datetime
from types import SimpleNamespace
from unittest.mock import Mock, patch

import httpx
import openai
import pytest
from fastapi.testclient import TestClient

from api.auth import AuthContext, require_user
from api.main import app


def _completion(content=None, tool_calls=None):
    message = SimpleNamespace(content=content, tool_calls=tool_calls)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _tool_completion(name, arguments):
    call = SimpleNamespace(function=SimpleNamespace(name=name, arguments=arguments))
    return _completion(tool_calls=[call])


def _status_error(status_code, cls=openai.APIStatusError):
    response = httpx.Response(status_code, request=httpx.Request('POST', 'https://gateway.test/v1/chat/completions'))
    return cls('gateway error', response=response, body=None)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def authed_client():
    app.dependency_overrides[require_user] = lambda: AuthContext(user_id='user-1', claims={'sub': 'user-1'})
    yield TestClient(app)
    app.dependency_overrides.clear()


SUGGESTIONS = {
    'industries': ['Technology'],
    'dealStructures': ['Equity'],
    'stages': ['Seed'],
    'regions': ['Europe'],
    'riskTolerance': 'moderate',
    'investmentRange': {'min': 10000, 'max': 50000},
    'reasoning': 'Fits.',
    'tips': ['Diversify'],
}


class TestHealth:
    """Tests for the health route."""

    def test_health(self, client):
        """Test the service reports healthy."""
        assert client.get('/health').json() == {'ok': True}


class TestOnboardingSuggestions:
    """Tests for /v1/onboarding/suggestions."""

    def test_tool_call_suggestions(self, client):
        """Test tool call arguments are returned as AI suggestions."""
        response = _tool_completion('provide_suggestions', json.dumps(SUGGESTIONS))
        with patch('api.main.chat_completion', return_value=response) as mock_chat:
            resp = client.post('/v1/onboarding/suggestions',
                               json={'role': 'advisor', 'experienceLevel': 'expert'})

        assert resp.status_code == 200
        assert resp.json() == {'suggestions': SUGGESTIONS, 'source': 'ai'}
        kwargs = mock_chat.call_args.kwargs
        assert kwargs['tool_choice']['function']['name'] == 'provide_suggestions'

    def test_rate_limited_returns_fallback(self, client):
        """Test 429 from the gateway serves rule-based suggestions."""
        with patch('api.main.chat_completion', side_effect=_status_error(429, openai.RateLimitError)):
            resp = client.post('/v1/onboarding/suggestions',
                               json={'role': 'family_office', 'experienceLevel': 'novice'})

        body = resp.json()
        assert resp.status_code == 200
        assert body['source'] == 'fallback'
        assert body['suggestions']['riskTolerance'] == 'conservative'
        assert body['suggestions']['regions'] == ['North America', 'Europe']

    def test_missing_tool_call_uses_fallback(self, client):
        """Test a reply without the tool call still returns suggestions."""
        with patch('api.main.chat_completion', return_value=_completion(content='Hello')):
            resp = client.post('/v1/onboarding/suggestions',
                               json={'role': 'unknown', 'experienceLevel': 'unknown'})

        body = resp.json()
        assert body['source'] == 'ai'
        assert body['suggestions']['investmentRange'] == {'min': 25000, 'max': 250000}

    def test_out_of_credits(self, client):
        """Test 402 is passed through."""
        with patch('api.main.chat_completion', side_effect=_status_error(402)):
            resp = client.post('/v1/onboarding/suggestions',
                               json={'role': 'advisor', 'experienceLevel': 'expert'})

        assert resp.status_code == 402
        assert 'credits' in resp.json()['error']

    def test_unparseable_arguments(self, client):
        """Test broken tool arguments give a 500."""
        with patch('api.main.chat_completion', return_value=_tool_completion('provide_suggestions', '{oops')):
            resp = client.post('/v1/onboarding/suggestions',
                               json={'role': 'advisor', 'experienceLevel': 'expert'})

        assert resp.status_code == 500
        assert resp.json() == {'error': 'Failed to parse suggestions'}

    def test_missing_gateway_key(self, client):
        """Test configuration errors surface as 500."""
        with patch('api.main.chat_completion', side_effect=RuntimeError('LOVABLE_API_KEY is not configured')):
            resp = client.post('/v1/onboarding/suggestions',
                               json={'role': 'advisor', 'experienceLevel': 'expert'})

        assert resp.status_code == 500
        assert resp.json() == {'error': 'LOVABLE_API_KEY is not configured'}

    def test_role_required(self, client):
        """Test request validation."""
        assert client.post('/v1/onboarding/suggestions', json={'experienceLevel': 'expert'}).status_code == 422


class TestPersonaGeneration:
    """Tests for /v1/personas/generate."""

    def test_requires_auth(self, client):
        """Test requests without a bearer token are rejected."""
        resp = client.post('/v1/personas/generate', json={'job_title': 'Analyst', 'department': 'Finance'})
        assert resp.status_code == 401

    def test_missing_fields(self, authed_client):
        """Test empty job title is a 400 with the UI message."""
        with patch('api.main.chat_completion') as mock_chat:
            resp = authed_client.post('/v1/personas/generate', json={'job_title': '', 'department': 'Finance'})

        assert resp.status_code == 400
        assert resp.json() == {'error': 'job_title and department are required'}
        mock_chat.assert_not_called()

    def test_generates_persona(self, authed_client):
        """Test the JSON object is pulled out of the reply."""
        reply = 'Here is the persona:\n{"skills": ["Excel", "SQL"], "ai_interaction_style": "concise"}'
        with patch('api.main.chat_completion', return_value=_completion(content=reply)):
            resp = authed_client.post('/v1/personas/generate', json={'job_title': 'Analyst', 'department': 'Finance'})

        assert resp.status_code == 200
        assert resp.json() == {'success': True,
                               'persona': {'skills': ['Excel', 'SQL'], 'ai_interaction_style': 'concise'}}

    def test_rate_limited(self, authed_client):
        """Test 429 is passed through."""
        with patch('api.main.chat_completion', side_effect=_status_error(429, openai.RateLimitError)):
            resp = authed_client.post('/v1/personas/generate', json={'job_title': 'Analyst', 'department': 'Finance'})
        assert resp.status_code == 429

    def test_reply_without_json(self, authed_client):
        """Test a prose reply is a 500."""
        with patch('api.main.chat_completion', return_value=_completion(content='I cannot help')):
            resp = authed_client.post('/v1/personas/generate', json={'job_title': 'Analyst', 'department': 'Finance'})
        assert resp.status_code == 500
        assert resp.json() == {'error': 'Failed to parse AI response as JSON'}


class TestPersonaPrompts:
    """Tests for /v1/personas/prompts."""

    PERSONA = {'id': 'p1', 'name': 'Dana Lee', 'job_title': 'Marketing Manager'}

    def test_ecosystem_prompt(self, authed_client):
        """Test generated content is returned as-is."""
        with patch('api.main.chat_completion', return_value=_completion(content='You are Dana...')) as mock_chat:
            resp = authed_client.post('/v1/personas/prompts', json={
                'type': 'claude', 'persona': self.PERSONA,
                'hats': [{'name': 'Campaign Lead', 'time_percentage': 60}],
            })

        assert resp.json() == {'content': 'You are Dana...'}
        messages = mock_chat.call_args.args[0]
        assert 'Campaign Lead (60% of time)' in messages[1]['content']
        assert mock_chat.call_args.kwargs['max_tokens'] == 2000

    def test_hat_suggestions(self, authed_client):
        """Test hat suggestions are parsed from fenced JSON."""
        reply = '```json\n{"efficiency_tips": ["Template briefs"]}\n```'
        with patch('api.main.chat_completion', return_value=_completion(content=reply)):
            resp = authed_client.post('/v1/personas/prompts', json={
                'type': 'hat_suggestions', 'persona': self.PERSONA, 'hat': {'name': 'Campaign Lead'},
            })

        assert resp.json() == {'suggestions': {'efficiency_tips': ['Template briefs']}}

    def test_unknown_type(self, authed_client):
        """Test unknown prompt types fail validation."""
        resp = authed_client.post('/v1/personas/prompts', json={'type': 'chatgpt', 'persona': self.PERSONA})
        assert resp.status_code == 422

    def test_empty_reply(self, authed_client):
        """Test an empty reply is a 500."""
        with patch('api.main.chat_completion', return_value=_completion(content='')):
            resp = authed_client.post('/v1/personas/prompts', json={'type': 'gemini', 'persona': self.PERSONA})
        assert resp.status_code == 500
        assert resp.json() == {'error': 'No content generated'}


class TestAssessmentJobs:
    """Tests for background scoring routes."""

    def test_enqueue(self, client):
        """Test scoring is queued with the request fields."""
        queue = Mock()
        queue.enqueue.return_value = Mock(id='job-1')
        with patch('api.main.get_queue', return_value=queue):
            resp = client.post('/v1/assessments/score', json={
                'answers': {'oc_change_readiness': 4}, 'assessment_type': 'internal', 'user_id': 'user-1',
            })

        assert resp.json() == {'job_id': 'job-1'}
        args = queue.enqueue.call_args.args
        assert args[1:] == ({'oc_change_readiness': 4}, 'internal', '', '', 'user-1', True)

    def test_empty_answers(self, client):
        """Test an empty answer sheet is rejected."""
        with patch('api.main.get_queue') as mock_queue:
            resp = client.post('/v1/assessments/score', json={'answers': {}})
        assert resp.status_code == 400
        mock_queue.assert_not_called()

    def test_unknown_job(self, client):
        """Test unknown job ids are a 404."""
        with patch('api.main.fetch_job', return_value=None):
            assert client.get('/v1/jobs/missing').status_code == 404

    def test_finished_job(self, client):
        """Test a finished job reports its result."""
        job = Mock()
        job.id = 'job-1'
        job.get_status.return_value = 'finished'
        job.func_name = 'api.tasks.run_assessment_scoring_task'
        job.enqueued_at = datetime(2025, 1, 20, 10, 30)
        job.started_at = None
        job.ended_at = None
        job.return_value.return_value = {'assessment_id': 'a1'}

        with patch('api.main.fetch_job', return_value=job):
            body = client.get('/v1/jobs/job-1').json()

        assert body['status'] == 'finished'
        assert body['kind'] == 'run_assessment_scoring_task'
        assert body['enqueued_at'] == '2025-01-20T10:30:00+00:00'
        assert body['result'] == {'assessment_id': 'a1'}
        assert body['error'] is None
