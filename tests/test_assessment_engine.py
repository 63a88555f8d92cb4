"""
Unit Tests for Assessment Engine
================================
Scoring, navigation, recommendations, roadmap and platform matching.
"""

import pytest

from assessment_engine import (
    EnhancedAssessment,
    build_assessment_record,
    calculate_question_score,
    dimension_scores_to_csv,
    get_score_level,
    score_responses,
)
from catalog.assessment import ASSESSMENT_DIMENSIONS


@pytest.fixture
def two_dimension_questions():
    """One rating question for culture and one for data."""
    return [
        {'id': 'culture', 'dimension_id': 'organizational_culture', 'type': 'rating',
         'question': 'Leadership support', 'weight': 1.0, 'max_value': 5},
        {'id': 'data', 'dimension_id': 'data_infrastructure', 'type': 'rating',
         'question': 'Data quality', 'weight': 1.0, 'max_value': 5},
    ]


@pytest.fixture
def scored_assessment(two_dimension_questions):
    """Culture at 100%, data at 20%."""
    assessment = EnhancedAssessment('external', two_dimension_questions)
    assessment.answer('culture', 5)
    assessment.answer('data', 1)
    return assessment


class TestScoreLevels:
    """Tests for percentage to level mapping."""

    @pytest.mark.parametrize("percentage,level", [
        (0, 'critical'), (20, 'critical'), (21, 'developing'), (40, 'developing'),
        (60, 'competent'), (80, 'advanced'), (81, 'leading'), (100, 'leading'),
    ])
    def test_boundaries(self, percentage, level):
        """Test level boundaries are inclusive on the upper side."""
        assert get_score_level(percentage) == level


class TestQuestionScore:
    """Tests for single answer scoring."""

    def test_rating_scales_by_max_value(self, sample_questions):
        """Test a full rating scores twice the weight."""
        assert calculate_question_score(sample_questions[0], 5) == 2.0
        assert calculate_question_score(sample_questions[0], 1) == 0.4

    def test_single_choice_uses_option_score(self, sample_questions):
        """Test option score times weight over three."""
        assert calculate_question_score(sample_questions[1], 'yes') == 1.5
        assert calculate_question_score(sample_questions[1], 'no') == 0.0

    def test_multi_choice_sums_options(self, sample_questions):
        """Test selected option scores are summed."""
        assert calculate_question_score(sample_questions[3], ['warehouse', 'lake']) == 2.0

    def test_unknown_option_scores_zero(self, sample_questions):
        """Test an option outside the list adds nothing."""
        assert calculate_question_score(sample_questions[1], 'maybe') == 0.0

    def test_text_question_scores_zero(self):
        """Test free text carries no score."""
        question = {'id': 't', 'dimension_id': 'business_strategy', 'type': 'text', 'question': 'Notes'}
        assert calculate_question_score(question, 'anything') == 0.0


class TestEnhancedAssessment:
    """Tests for the stateful assessment."""

    def test_unknown_type_rejected(self):
        """Test only internal and external assessments exist."""
        with pytest.raises(ValueError):
            EnhancedAssessment('partner')

    def test_answer_unknown_question(self, two_dimension_questions):
        """Test answering an unknown id stores nothing."""
        assessment = EnhancedAssessment('internal', two_dimension_questions)
        assert assessment.answer('missing', 3) is None
        assert assessment.answered_questions == 0

    def test_answer_replaces_previous(self, two_dimension_questions):
        """Test re-answering keeps one response per question."""
        assessment = EnhancedAssessment('internal', two_dimension_questions)
        assessment.answer('culture', 2)
        assessment.answer('culture', 4)
        assert assessment.answered_questions == 1
        assert assessment.get_response('culture')['value'] == 4
        assert assessment.progress_percentage == 50

    def test_applicable_dimensions_follow_questions(self, two_dimension_questions):
        """Test dimensions without questions are left out."""
        assessment = EnhancedAssessment('external', two_dimension_questions)
        ids = [d['id'] for d in assessment.applicable_dimensions]
        assert ids == ['organizational_culture', 'data_infrastructure']

    def test_navigation_advances_and_completes(self, two_dimension_questions):
        """Test the cursor walks dimensions and flags completion."""
        assessment = EnhancedAssessment('external', two_dimension_questions)
        assert assessment.current_question['id'] == 'culture'
        assessment.next_question()
        assert assessment.current_dimension['id'] == 'data_infrastructure'
        assert assessment.current_question['id'] == 'data'
        assessment.next_question()
        assert assessment.is_complete is True

    def test_previous_question_crosses_dimension(self, sample_questions):
        """Test stepping back lands on the last question of the previous dimension."""
        assessment = EnhancedAssessment('external', sample_questions)
        assessment.go_to_dimension(1)
        assessment.previous_question()
        assert assessment.current_dimension_index == 0
        assert assessment.current_question['id'] == 'q2'

    def test_skip_logic_jumps_to_next_dimension(self, sample_questions):
        """Test a matching skip rule without a target ends the dimension."""
        assessment = EnhancedAssessment('external', sample_questions)
        assessment.next_question()
        assert assessment.current_question['id'] == 'q2'
        assessment.answer('q2', 'no')
        assessment.next_question()
        assert assessment.current_dimension['id'] == 'data_infrastructure'
        assert assessment.current_question_index == 0

    def test_skip_logic_forward_target(self):
        """Test a matching skip rule jumps forward within the dimension."""
        questions = [
            {'id': 'a', 'dimension_id': 'talent_skills', 'type': 'single_choice', 'question': 'A',
             'options': [{'value': 'none', 'label': 'None', 'score': 0}],
             'skip_logic': {'condition': 'equals', 'value': 'none', 'skip_to': 'c'}},
            {'id': 'b', 'dimension_id': 'talent_skills', 'type': 'rating', 'question': 'B'},
            {'id': 'c', 'dimension_id': 'talent_skills', 'type': 'rating', 'question': 'C'},
        ]
        assessment = EnhancedAssessment('internal', questions)
        assessment.answer('a', 'none')
        assessment.next_question()
        assert assessment.current_question['id'] == 'c'

    def test_go_to_dimension_clamps(self, two_dimension_questions):
        """Test out of range indexes are clamped."""
        assessment = EnhancedAssessment('external', two_dimension_questions)
        assessment.go_to_dimension(99)
        assert assessment.current_dimension_index == 1
        assessment.go_to_dimension(-3)
        assert assessment.current_dimension_index == 0

    def test_reset_clears_responses(self, scored_assessment):
        """Test reset keeps the type and question bank."""
        scored_assessment.reset()
        assert scored_assessment.responses == []
        assert scored_assessment.total_questions == 2

    def test_default_bank_covers_all_dimensions(self):
        """Test the built-in question bank touches every dimension."""
        assessment = EnhancedAssessment()
        assert len(assessment.applicable_dimensions) == len(ASSESSMENT_DIMENSIONS)

    def test_question_set_depends_on_type(self):
        """Test internal and external assessments ask different questions."""
        internal = EnhancedAssessment('internal')
        external = EnhancedAssessment('external')

        assert internal.total_questions == 19
        assert external.total_questions == 18
        assert 'budget_resources' not in [d['id'] for d in internal.applicable_dimensions]
        assert 'budget_resources' in [d['id'] for d in external.applicable_dimensions]
        assert internal.answer('br_budget', 'dedicated') is None
        assert external.answer('ts_personal_usage', 'daily') is None

    def test_untagged_questions_apply_to_both(self, two_dimension_questions):
        """Test questions without assessment types are asked in both."""
        assert EnhancedAssessment('internal', two_dimension_questions).total_questions == 2
        assert EnhancedAssessment('external', two_dimension_questions).total_questions == 2

    def test_set_assessment_type_starts_over(self, two_dimension_questions):
        """Test switching type clears answers and reloads questions."""
        questions = two_dimension_questions + [
            {'id': 'budget', 'dimension_id': 'budget_resources', 'type': 'rating',
             'question': 'Budget', 'max_value': 5, 'assessment_types': ['external']},
        ]
        assessment = EnhancedAssessment('external', questions)
        assessment.answer('culture', 4)
        assessment.go_to_dimension(1)

        assessment.set_assessment_type('internal')

        assert assessment.assessment_type == 'internal'
        assert assessment.responses == []
        assert assessment.current_dimension_index == 0
        assert assessment.total_questions == 2

        assessment.set_assessment_type('external')
        assert assessment.total_questions == 3


class TestResults:
    """Tests for derived results."""

    def test_dimension_scores(self, scored_assessment):
        """Test percentages, levels, gaps and strengths."""
        scores = {ds['dimension_id']: ds for ds in scored_assessment.calculate_dimension_scores()}
        culture = scores['organizational_culture']
        data = scores['data_infrastructure']

        assert culture['percentage'] == 100
        assert culture['level'] == 'leading'
        assert culture['strengths'] == ['Leadership support']
        assert data['percentage'] == 20
        assert data['level'] == 'critical'
        assert data['gaps'] == ['Data quality']

    def test_total_score_is_weighted(self, scored_assessment):
        """Test 100% x 15 plus 20% x 20."""
        assert scored_assessment.calculate_total_score() == 19

    def test_total_score_rounds_half_up(self):
        """Test a 10.5 weighted total is reported as 11."""
        assessment = EnhancedAssessment('external')
        assessment.answer('tc_api_readiness', 'most')
        assessment.answer('tc_integration_tools', ['ipaas'])
        assessment.answer('tc_it_skills', 3)

        scores = {ds['dimension_id']: ds for ds in assessment.calculate_dimension_scores()}
        assert scores['technical_capabilities']['percentage'] == 70
        assert assessment.calculate_total_score() == 11

    def test_recommendation_for_critical_dimension(self, scored_assessment):
        """Test critical dimensions produce a critical recommendation."""
        recommendations = scored_assessment.generate_recommendations()
        assert [r['id'] for r in recommendations] == ['rec_data_infrastructure_critical']
        assert recommendations[0]['action_items'] == ['Review and improve: Data quality']

    def test_roadmap_with_critical_gap(self, scored_assessment):
        """Test a critical gap adds the foundation phase and shifts the rest."""
        roadmap = scored_assessment.generate_roadmap()
        assert [p['phase'] for p in roadmap] == [1, 2, 3]
        assert (roadmap[1]['start_week'], roadmap[1]['end_week']) == (5, 12)
        assert roadmap[1]['dependencies'] == ['phase_1']
        assert roadmap[2]['start_week'] == 13

    def test_roadmap_for_high_scores(self):
        """Test a strong result skips the foundation and adds optimize."""
        questions = [
            {'id': d['id'], 'dimension_id': d['id'], 'type': 'rating', 'question': d['name'], 'max_value': 5}
            for d in ASSESSMENT_DIMENSIONS
        ]
        assessment = EnhancedAssessment('external', questions)
        for question in questions:
            assessment.answer(question['id'], 5)

        assert assessment.calculate_total_score() == 100
        roadmap = assessment.generate_roadmap()
        assert [p['phase'] for p in roadmap] == [2, 3, 4]
        assert (roadmap[0]['start_week'], roadmap[0]['end_week']) == (1, 8)
        assert roadmap[1]['start_week'] == 9

    def test_low_total_without_critical_keeps_foundation(self, two_dimension_questions):
        """Test a total under 40 still adds the foundation phase."""
        assessment = EnhancedAssessment('external', two_dimension_questions)
        assessment.answer('culture', 5)
        assessment.answer('data', 5)
        assert assessment.calculate_total_score() == 35
        roadmap = assessment.generate_roadmap()
        assert [p['phase'] for p in roadmap] == [1, 2, 3]
        assert roadmap[1]['start_week'] == 1
        assert roadmap[2]['start_week'] == 13

    def test_low_scores_match_easy_platforms(self, scored_assessment):
        """Test low readiness favours platforms with a strong developer experience."""
        matches = scored_assessment.match_platforms()
        assert {m['platform_id'] for m in matches} == {
            'google-gemini', 'openai-chatgpt', 'anthropic-claude', 'github-copilot'
        }
        assert all(m['match_score'] == 20 for m in matches)
        assert all(m['implementation_complexity'] == 'high' for m in matches)

    def test_zero_score_platforms_excluded(self, scored_assessment):
        """Test platforms with no match reasons are dropped."""
        platforms = [{'id': 'x', 'name': 'X', 'priority': 'Tier 2', 'capabilities': {'developer_experience': 3}}]
        assert scored_assessment.match_platforms(platforms) == []

    def test_build_result(self, scored_assessment):
        """Test the full result payload."""
        scored_assessment.set_organization_info('Acme', 'ops@acme.test')
        result = scored_assessment.build_result()
        assert result['organization_name'] == 'Acme'
        assert result['total_score'] == 19
        assert result['max_possible_score'] == 100
        assert len(result['dimension_scores']) == 2


class TestScoreResponses:
    """Tests for one-shot scoring."""

    def test_unknown_ids_ignored(self):
        """Test only known question ids contribute."""
        result = score_responses({'not-a-question': 5}, 'external', 'Acme')
        assert result['total_score'] == 0
        assert result['organization_name'] == 'Acme'

    def test_record_shape(self, scored_assessment):
        """Test the row written to ai_assessments."""
        result = scored_assessment.build_result()
        record = build_assessment_record(result, 'user-1')
        assert record['user_id'] == 'user-1'
        assert record['readiness_score'] == 19
        assert record['organization_profile']['assessmentType'] == 'external'
        assert set(record['technical_readiness']) == {'organizational_culture', 'data_infrastructure'}
        assert set(record['recommendations']) == {'recommendations', 'roadmapItems', 'platformMatches'}

    def test_csv_export(self, scored_assessment):
        """Test CSV columns and level labels."""
        csv = dimension_scores_to_csv(scored_assessment.calculate_dimension_scores())
        lines = csv.strip().split('\n')
        assert lines[0] == 'Dimension,Score (%),Level,Gaps,Strengths'
        assert len(lines) == 3
        assert 'Critical' in lines[2]
