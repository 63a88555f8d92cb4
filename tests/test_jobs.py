"""
Worker and Gateway Helper Tests
===============================
Tests for job serialization, the scoring task, bearer auth and the AI
gateway response helpers.
"""

import math
from datetime import date, datetime, timezone
from types import SimpleNamespace
from unittest.mock import Mock, patch
from urllib.error import URLError

import numpy as np
import pandas as pd
import pytest
from fastapi import HTTPException
from jose import jwt
from rq.exceptions import NoSuchJobError

from api.auth import _KeySetCache, parse_bearer_token, require_user, verify_supabase_jwt
from api.config import Settings
from api.gateway import get_client, message_content, tool_call_arguments
from api.jobs import fetch_job, job_to_status
from api.serialize import to_jsonable
from api.tasks import run_assessment_scoring_task


def _settings(**overrides):
    values = dict(
        redis_url='redis://localhost:6379/0',
        environment='test',
        lovable_api_key='',
        ai_gateway_url='https://gateway.test/v1',
        ai_gateway_model='test-model',
        rq_queue='default',
        log_level='INFO',
    )
    values.update(overrides)
    return Settings(**values)


class TestToJsonable:
    """Tests for job result serialization."""

    def test_non_finite_floats(self):
        """Test NaN and infinity become None."""
        assert to_jsonable(float('nan')) is None
        assert to_jsonable(math.inf) is None
        assert to_jsonable(1.5) == 1.5

    def test_numpy_values(self):
        """Test numpy scalars and arrays become python values."""
        assert to_jsonable(np.int64(3)) == 3
        assert to_jsonable(np.array([1.0, np.nan])) == [1.0, None]

    def test_dataframe(self):
        """Test frames become lists of records."""
        frame = pd.DataFrame({'dimension': ['data'], 'score': [72]})
        assert to_jsonable(frame) == [{'dimension': 'data', 'score': 72}]

    def test_nested(self):
        """Test containers and dates are converted recursively."""
        payload = {'when': date(2025, 1, 20), 'tags': ('a', 'b'), 1: {'x': object}}
        result = to_jsonable(payload)
        assert result['when'] == '2025-01-20'
        assert result['tags'] == ['a', 'b']
        assert isinstance(result['1']['x'], str)


class TestJobStatus:
    """Tests for job status payloads."""

    def _job(self, status):
        job = Mock()
        job.id = 'job-9'
        job.get_status.return_value = SimpleNamespace(value=status)
        job.func_name = 'api.tasks.run_assessment_scoring_task'
        job.enqueued_at = datetime(2025, 1, 20, 10, 0, tzinfo=timezone.utc)
        job.started_at = datetime(2025, 1, 20, 10, 1)
        job.ended_at = None
        return job

    def test_failed(self):
        """Test failed jobs carry the traceback text."""
        job = self._job('failed')
        job.exc_info = 'Traceback: boom'
        status = job_to_status(job)
        assert status['status'] == 'failed'
        assert status['error'] == 'Traceback: boom'
        assert status['result'] is None
        job.return_value.assert_not_called()

    def test_failed_without_traceback(self):
        """Test a generic message when no traceback was stored."""
        job = self._job('failed')
        job.exc_info = None
        assert job_to_status(job)['error'] == 'Job failed'

    def test_queued(self):
        """Test pending jobs have neither result nor error."""
        status = job_to_status(self._job('queued'))
        assert status['started_at'] == '2025-01-20T10:01:00+00:00'
        assert status['ended_at'] is None
        assert status['result'] is None and status['error'] is None

    def test_fetch_missing_job(self):
        """Test unknown job ids return None."""
        with patch('api.jobs.get_redis'), \
                patch('api.jobs.Job.fetch', side_effect=NoSuchJobError('gone')):
            assert fetch_job('missing') is None

    def test_fetch_job(self):
        """Test jobs are fetched from the configured redis."""
        job = Mock()
        with patch('api.jobs.get_redis') as mock_redis, \
                patch('api.jobs.Job.fetch', return_value=job) as mock_fetch:
            assert fetch_job('job-1') is job
        mock_fetch.assert_called_once_with('job-1', connection=mock_redis.return_value)


class TestScoringTask:
    """Tests for the background scoring entrypoint."""

    def test_without_persist(self):
        """Test scoring without saving."""
        with patch('api.tasks.SupabaseAPIHandler') as mock_handler:
            payload = run_assessment_scoring_task({'not_a_question': 3}, 'internal', 'Acme', 'a@acme.test',
                                                  user_id='user-1', persist=False)

        mock_handler.assert_not_called()
        assert payload['assessment_id'] is None
        assert payload['assessment_type'] == 'internal'
        assert set(payload['result']) == {'total_score', 'dimension_scores', 'recommendation_count', 'top_platforms'}
        assert len(payload['result']['top_platforms']) <= 3

    def test_persist_requires_user(self):
        """Test anonymous results are never saved."""
        with patch('api.tasks.SupabaseAPIHandler') as mock_handler:
            payload = run_assessment_scoring_task({}, persist=True)
        mock_handler.assert_not_called()
        assert payload['user_id'] is None

    def test_persist(self):
        """Test the scored record is inserted for the user."""
        with patch('api.tasks.SupabaseAPIHandler') as mock_handler:
            mock_handler.return_value.insert_assessment.return_value = 'assessment-1'
            payload = run_assessment_scoring_task({}, user_id='user-1', persist=True)

        assert payload['assessment_id'] == 'assessment-1'
        record = mock_handler.return_value.insert_assessment.call_args.args[0]
        assert record['user_id'] == 'user-1'
        assert record['organization_profile']['assessmentType'] == 'external'


class TestAuth:
    """Tests for bearer token handling."""

    @pytest.mark.parametrize("header,expected", [
        ('Bearer abc', 'abc'),
        ('bearer  abc ', 'abc'),
        (None, None),
        ('', None),
        ('Basic abc', None),
        ('Bearer', None),
        ('Bearer a b', None),
    ])
    def test_parse_bearer_token(self, header, expected):
        """Test header parsing."""
        assert parse_bearer_token(header) == expected

    def test_missing_token(self):
        """Test a request without a token is unauthorized."""
        request = Mock()
        request.headers = {}
        with pytest.raises(HTTPException) as exc:
            require_user(request)
        assert exc.value.status_code == 401

    def test_invalid_token(self):
        """Test verification failures are unauthorized."""
        request = Mock()
        request.headers = {'Authorization': 'Bearer bad'}
        with patch('api.auth.verify_supabase_jwt', side_effect=RuntimeError('Invalid JWT')):
            with pytest.raises(HTTPException) as exc:
                require_user(request)
        assert exc.value.detail == 'Invalid token'

    def test_shared_secret_token(self, monkeypatch):
        """Test HS256 tokens verify against the project secret."""
        monkeypatch.setenv('SUPABASE_JWT_SECRET', 'test-secret')
        token = jwt.encode({'sub': 'user-1', 'email': 'dana@int.test'}, 'test-secret', algorithm='HS256')
        context = verify_supabase_jwt(token)
        assert context.user_id == 'user-1'
        assert context.email == 'dana@int.test'

    def test_token_without_subject(self, monkeypatch):
        """Test tokens must name a user."""
        monkeypatch.setenv('SUPABASE_JWT_SECRET', 'test-secret')
        token = jwt.encode({'role': 'anon'}, 'test-secret', algorithm='HS256')
        with pytest.raises(RuntimeError):
            verify_supabase_jwt(token)

    def test_wrong_secret(self, monkeypatch):
        """Test signatures from another secret are rejected."""
        monkeypatch.setenv('SUPABASE_JWT_SECRET', 'test-secret')
        token = jwt.encode({'sub': 'user-1'}, 'other-secret', algorithm='HS256')
        with pytest.raises(RuntimeError):
            verify_supabase_jwt(token)

    def test_unknown_signing_key(self, monkeypatch):
        """Test a kid missing from a refreshed key set is rejected."""
        monkeypatch.delenv('SUPABASE_JWT_SECRET', raising=False)
        token = jwt.encode({'sub': 'user-1'}, 'k', algorithm='HS256', headers={'kid': 'gone'})
        with patch('api.auth._download_key_set', return_value=[{'kid': 'current'}]) as mock_download:
            with pytest.raises(RuntimeError):
                verify_supabase_jwt(token)
        assert mock_download.call_count == 2

    def test_key_server_unreachable(self, monkeypatch):
        """Test a failed signing key download is unauthorized, not a server error."""
        monkeypatch.delenv('SUPABASE_JWT_SECRET', raising=False)
        monkeypatch.setenv('SUPABASE_URL', 'https://project.supabase.test')
        monkeypatch.setattr('api.auth._KEY_SET', _KeySetCache())
        token = jwt.encode({'sub': 'user-1'}, 'k', algorithm='HS256', headers={'kid': 'current'})
        request = Mock()
        request.headers = {'Authorization': f'Bearer {token}'}

        with patch('api.auth.urllib.request.urlopen', side_effect=URLError('connection refused')):
            with pytest.raises(HTTPException) as exc:
                require_user(request)

        assert exc.value.status_code == 401


class TestGatewayHelpers:
    """Tests for AI gateway response helpers."""

    def test_client_requires_key(self):
        """Test a missing key is a configuration error."""
        with pytest.raises(RuntimeError):
            get_client(_settings())

    def test_client_uses_gateway_url(self):
        """Test the client points at the gateway."""
        client = get_client(_settings(lovable_api_key='key'))
        assert str(client.base_url).rstrip('/') == 'https://gateway.test/v1'

    def test_message_content(self):
        """Test content of the first choice."""
        response = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content='hi'))])
        assert message_content(response) == 'hi'
        assert message_content(SimpleNamespace(choices=[])) is None

    def test_tool_call_arguments(self):
        """Test arguments are found by tool name."""
        calls = [
            SimpleNamespace(function=SimpleNamespace(name='other', arguments='{}')),
            SimpleNamespace(function=SimpleNamespace(name='provide_suggestions', arguments='{"a": 1}')),
        ]
        response = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(tool_calls=calls))])
        assert tool_call_arguments(response, 'provide_suggestions') == '{"a": 1}'
        assert tool_call_arguments(response, 'missing') is None

        no_calls = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(tool_calls=None))])
        assert tool_call_arguments(no_calls, 'provide_suggestions') is None
