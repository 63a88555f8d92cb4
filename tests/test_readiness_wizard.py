"""
Unit Tests for the Readiness Wizard
===================================
"""

import pytest

from readiness_wizard import (
    ReadinessWizard,
    budget_score,
    calculate_readiness_score,
    generate_recommendations,
)


class TestBudgetScore:
    """Tests for budget label scoring."""

    @pytest.mark.parametrize("label,score", [
        ('Under $10,000', 40),
        ('$10,000 - $50,000', 60),
        ('$50,000 - $100,000', 80),
        ('$100,000 - $500,000', 80),
        ('$500,000+', 20),
    ])
    def test_labels(self, label, score):
        """Test the largest matching amount wins."""
        assert budget_score(label) == score


class TestReadinessScore:
    """Tests for the quick readiness score."""

    def test_default_answers(self, wizard_answers):
        """Test the untouched wizard scores 42."""
        assert calculate_readiness_score(wizard_answers) == 42

    def test_score_is_clamped(self, wizard_answers):
        """Test extreme inputs stay within 0-100."""
        wizard_answers['organization_profile'].update(digital_maturity=5, industry='Tech', primary_objectives=['x'])
        wizard_answers['current_ai_usage'].update(current_tools=['x'], ai_budget_percentage=50,
                                                  team_proficiency='expert', past_project_success=100)
        wizard_answers['technical_readiness'].update(data_infrastructure=5, api_readiness=5,
                                                     security_requirements=['SOC2'])
        wizard_answers['budget_timeline'].update(budget_range='$100,000 - $500,000', change_management_readiness=5)
        score = calculate_readiness_score(wizard_answers)
        assert 0 <= score <= 100
        assert score >= 80


class TestRecommendations:
    """Tests for platform tiers and action items."""

    def test_developing_band(self, wizard_answers):
        """Test a score of 42 gets the developing action items."""
        result = generate_recommendations(wizard_answers)
        assert result['action_items'][0].startswith('Consider pilot projects')
        assert result['overall_assessment'].startswith('Your organization is in the early stages')

    def test_tiers_capped_at_five(self, wizard_answers):
        """Test each tier holds at most five platform ids."""
        result = generate_recommendations(wizard_answers)
        for key in ('tier1_platforms', 'tier2_platforms', 'tier3_platforms'):
            assert len(result[key]) <= 5

    def test_compliance_match_ignores_case_and_spaces(self, wizard_answers):
        """Test 'SOC2' matches a platform offering 'SOC 2'."""
        wizard_answers['technical_readiness']['security_requirements'] = ['soc2', 'ISO27001']
        platforms = [
            {'id': 'fit', 'priority': 'Tier 2', 'category': 'Enterprise',
             'compliance': ['SOC 2', 'ISO 27001'], 'capabilities': {}},
            {'id': 'nofit', 'priority': 'Tier 2', 'category': 'Enterprise',
             'compliance': ['GDPR'], 'capabilities': {}},
        ]
        result = generate_recommendations(wizard_answers, platforms)
        assert result['tier2_platforms'] == ['fit']
        assert result['tier3_platforms'] == []

    def test_large_enterprise_with_compliance_is_tier_one(self, wizard_answers):
        """Test size plus compliance reaches the first tier."""
        wizard_answers['organization_profile']['company_size'] = 1000
        wizard_answers['technical_readiness']['security_requirements'] = ['GDPR']
        platforms = [{'id': 'big', 'priority': 'Tier 1', 'category': 'Enterprise',
                      'compliance': ['GDPR'], 'capabilities': {}}]
        assert generate_recommendations(wizard_answers, platforms)['tier1_platforms'] == ['big']

    def test_unfit_tier_one_platforms_fall_to_tier_three(self, wizard_answers):
        """Test Tier 1 platforms without fit land in the third tier."""
        platforms = [{'id': 'p', 'priority': 'Tier 1', 'category': 'Productivity',
                      'compliance': [], 'capabilities': {'developer_experience': 5}}]
        assert generate_recommendations(wizard_answers, platforms)['tier3_platforms'] == ['p']


class TestReadinessWizard:
    """Tests for the step cursor."""

    def test_steps_are_clamped(self):
        """Test the cursor stays within the five steps."""
        wizard = ReadinessWizard()
        wizard.previous_step()
        assert wizard.current_step == 0
        wizard.go_to_step(10)
        assert wizard.current_step == 4
        assert wizard.step_name == 'Results'
        wizard.next_step()
        assert wizard.current_step == 4

    def test_update_unknown_section(self):
        """Test updating an unknown section raises."""
        wizard = ReadinessWizard()
        with pytest.raises(ValueError):
            wizard.update('finances', budget=1)

    def test_update_and_reset(self):
        """Test updates stick until reset."""
        wizard = ReadinessWizard()
        wizard.update('organization_profile', industry='Healthcare')
        assert wizard.answers['organization_profile']['industry'] == 'Healthcare'
        wizard.reset()
        assert wizard.answers['organization_profile']['industry'] == ''

    def test_instances_do_not_share_answers(self):
        """Test default answers are copied per wizard."""
        first, second = ReadinessWizard(), ReadinessWizard()
        first.update('current_ai_usage', current_tools=['GitHub Copilot'])
        assert second.answers['current_ai_usage']['current_tools'] == []

    def test_to_record(self):
        """Test the persisted row carries the score and recommendations."""
        record = ReadinessWizard().to_record('user-1')
        assert record['user_id'] == 'user-1'
        assert record['readiness_score'] == 42
        assert 'tier1_platforms' in record['recommendations']
