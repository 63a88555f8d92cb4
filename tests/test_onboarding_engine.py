"""
Unit Tests for Onboarding Engine
================================
"""

from catalog.deals import FALLBACK_REASONING, ROLE_PROFILES
from onboarding_engine import (
    SUGGESTION_TOOL,
    SYSTEM_PROMPT,
    TOOL_CHOICE,
    TOOL_NAME,
    adjust_risk,
    build_messages,
    build_user_prompt,
    fallback_suggestions,
    get_role_profile,
)


class TestProfiles:
    """Tests for role and experience lookups."""

    def test_unknown_role_falls_back(self):
        """Test unknown roles use the individual investor profile."""
        profile = get_role_profile('astronaut')
        assert profile == ROLE_PROFILES['individual_investor']
        assert profile['investmentRange'] == {'min': 25000, 'max': 250000}

    def test_adjust_risk_clamps(self):
        """Test the risk scale does not run off either end."""
        assert adjust_risk('conservative', -1) == 'conservative'
        assert adjust_risk('very_aggressive', 1) == 'very_aggressive'
        assert adjust_risk('moderate', 1) == 'aggressive'
        assert adjust_risk('unknown', 0) == 'moderate'


class TestFallback:
    """Tests for rule-based suggestions."""

    def test_novice_is_more_conservative(self):
        """Test novices shift one step toward conservative."""
        assert fallback_suggestions('individual_investor', 'novice')['riskTolerance'] == 'conservative'

    def test_expert_is_more_aggressive(self):
        """Test experts shift one step toward aggressive."""
        assert fallback_suggestions('individual_investor', 'expert')['riskTolerance'] == 'aggressive'

    def test_unknown_experience_is_intermediate(self):
        """Test unknown experience leaves the profile risk alone."""
        assert fallback_suggestions('individual_investor', 'guru')['riskTolerance'] == 'moderate'

    def test_conservative_novice_stays_conservative(self):
        """Test clamping at the conservative end."""
        assert fallback_suggestions('family_office', 'novice')['riskTolerance'] == 'conservative'

    def test_fallback_shape(self):
        """Test the fallback matches the tool call arguments."""
        result = fallback_suggestions('unknown', 'intermediate')
        required = SUGGESTION_TOOL['function']['parameters']['required']
        assert set(result) == set(required)
        assert result['industries'] == ['Technology', 'Healthcare & Life Sciences', 'Consumer & Retail']
        assert result['regions'] == ['North America', 'Europe']
        assert result['reasoning'] == FALLBACK_REASONING

    def test_fallback_does_not_share_profile_lists(self):
        """Test callers cannot mutate the catalog through the result."""
        result = fallback_suggestions('advisor', 'intermediate')
        result['industries'].append('Crypto')
        result['investmentRange']['min'] = 0
        assert 'Crypto' not in ROLE_PROFILES['advisor']['industries']
        assert ROLE_PROFILES['advisor']['investmentRange']['min'] == 50000


class TestPrompts:
    """Tests for gateway prompts."""

    def test_user_prompt_mentions_role_and_preferences(self):
        """Test the prompt carries the profile and existing choices."""
        prompt = build_user_prompt('fund_manager', 'expert',
                                   {'targetIndustries': ['Real Estate'], 'riskTolerance': 'aggressive'})
        assert '- Role: fund manager' in prompt
        assert '- Experience Level: expert' in prompt
        assert '- Already interested in: Real Estate' in prompt
        assert '- Current risk tolerance: aggressive' in prompt

    def test_messages(self):
        """Test system then user message."""
        messages = build_messages('advisor', 'novice')
        assert [m['role'] for m in messages] == ['system', 'user']
        assert messages[0]['content'] == SYSTEM_PROMPT

    def test_tool_choice_names_tool(self):
        """Test the forced tool matches the schema."""
        assert TOOL_CHOICE['function']['name'] == TOOL_NAME == SUGGESTION_TOOL['function']['name']
