"""
Unit Tests for Persona Engine
=============================
"""

import pytest

from persona_engine import (
    FALLBACK_HAT_SUGGESTIONS,
    build_generation_messages,
    build_persona_context,
    build_prompt_messages,
    ecosystem_label,
    export_filename,
    export_name,
    extract_persona_json,
    get_ai_tool_recommendations,
    get_related_case_studies,
    get_related_services,
    hats_context,
    next_export_version,
    parse_hat_suggestions,
    total_hat_allocation,
    validate_generation_request,
    validate_hat_allocation,
)


class TestClientPersonas:
    """Tests for client persona lookups."""

    def test_recommendations_sorted_by_relevance(self):
        """Test most relevant tools first."""
        scores = [r['relevance_score'] for r in get_ai_tool_recommendations('cmo')]
        assert scores and scores == sorted(scores, reverse=True)

    def test_unknown_persona(self):
        """Test unknown ids return empty lists."""
        assert get_ai_tool_recommendations('astronaut') == []
        assert get_related_services('astronaut') == []
        assert get_related_case_studies('astronaut') == []

    def test_related_services_are_services(self):
        """Test related services resolve to service records."""
        for service in get_related_services('cmo'):
            assert 'slug' in service


class TestHats:
    """Tests for hat allocation."""

    def test_total(self, sample_hats):
        """Test time shares are summed."""
        assert total_hat_allocation(sample_hats) == 70

    def test_add_within_limit(self, sample_hats):
        """Test a new hat may bring the total to exactly 100%."""
        assert validate_hat_allocation(sample_hats, 30)
        assert not validate_hat_allocation(sample_hats, 31)

    def test_edit_excludes_old_share(self, sample_hats):
        """Test editing a hat ignores its current share."""
        assert validate_hat_allocation(sample_hats, 80, exclude_hat_id='h1')
        assert not validate_hat_allocation(sample_hats, 81, exclude_hat_id='h1')

    def test_negative_share_rejected(self, sample_hats):
        """Test negative time shares are invalid."""
        assert not validate_hat_allocation(sample_hats, -5)

    def test_hats_context(self, sample_hats):
        """Test description falls back to responsibilities."""
        context = hats_context(sample_hats)
        assert '- Campaign Lead (50% of time): Runs campaigns' in context
        assert '- Reporting (20% of time): Weekly dashboard' in context
        assert hats_context([]) == 'No specific roles defined'


class TestPrompts:
    """Tests for prompt assembly."""

    def test_context_uses_defaults_for_missing_preferences(self, sample_persona, sample_hats):
        """Test persona values override defaults only where set."""
        context = build_persona_context(sample_persona, sample_hats)
        assert '- Formality: casual' in context
        assert '- Detail Level: balanced' in context
        assert '- Focus Time: flexible' in context
        assert 'Goals: None specified' in context
        assert 'Tools Used: HubSpot, Slack' in context

    @pytest.mark.parametrize("ecosystem", ['claude', 'copilot', 'gemini'])
    def test_ecosystem_messages(self, ecosystem, sample_persona):
        """Test each ecosystem prompt embeds the profile."""
        messages = build_prompt_messages(ecosystem, sample_persona)
        assert [m['role'] for m in messages] == ['system', 'user']
        assert 'Dana Lee' in messages[1]['content']

    def test_hat_suggestion_messages(self, sample_persona, sample_hats):
        """Test hat suggestions describe the hat and the employee."""
        messages = build_prompt_messages('hat_suggestions', sample_persona, hat=sample_hats[0])
        assert 'Role: Campaign Lead' in messages[1]['content']
        assert 'Time Allocation: 50%' in messages[1]['content']

    def test_unknown_prompt_type(self, sample_persona):
        """Test unknown prompt types raise."""
        with pytest.raises(ValueError):
            build_prompt_messages('chatgpt', sample_persona)

    def test_parse_fenced_suggestions(self):
        """Test fenced JSON is unwrapped."""
        content = 'Here you go:\n```json\n{"efficiency_tips": ["Batch email"]}\n```'
        assert parse_hat_suggestions(content) == {'efficiency_tips': ['Batch email']}

    def test_parse_invalid_suggestions(self):
        """Test unparseable replies give the fixed suggestions."""
        result = parse_hat_suggestions('not json')
        assert result == FALLBACK_HAT_SUGGESTIONS
        result['efficiency_tips'].append('x')
        assert FALLBACK_HAT_SUGGESTIONS['efficiency_tips'] == ['Review and optimize your current workflow']


class TestExports:
    """Tests for export naming and versions."""

    def test_names(self):
        """Test display and file names."""
        assert export_name('Dana Lee', 'claude') == 'Dana Lee - Claude System Prompt'
        assert export_filename('Dana  Lee', 'gemini') == 'dana-lee-gemini-prompt.txt'

    def test_version(self):
        """Test versions start at one and increment."""
        assert next_export_version(None) == 1
        assert next_export_version({'version': 3}) == 4

    def test_ecosystem_label(self):
        """Test labels with fallback to the key."""
        assert ecosystem_label('copilot') == 'Microsoft Copilot'
        assert ecosystem_label('other') == 'other'


class TestGeneration:
    """Tests for AI persona generation helpers."""

    def test_validation(self):
        """Test required fields and length limits."""
        assert validate_generation_request('Analyst', 'Finance') is None
        assert validate_generation_request('', 'Finance') == 'job_title and department are required'
        assert validate_generation_request('x' * 201, 'Finance') is not None
        assert validate_generation_request('Analyst', 'Finance', 'c' * 2001) is not None

    def test_generation_messages(self):
        """Test the request is spelled out in the user message."""
        messages = build_generation_messages('Analyst', 'Finance', 'Remote team')
        assert 'Job Title: Analyst' in messages[1]['content']
        assert 'Additional Context: Remote team' in messages[1]['content']

    def test_extract_json(self):
        """Test the outermost object is parsed out of prose."""
        content = 'Sure! {"skills": ["Excel"], "communication_style": {"formality": "formal"}} Done.'
        assert extract_persona_json(content)['skills'] == ['Excel']

    def test_extract_json_failure(self):
        """Test missing or broken JSON raises."""
        with pytest.raises(ValueError):
            extract_persona_json('no json here')
        with pytest.raises(ValueError):
            extract_persona_json('{broken')
