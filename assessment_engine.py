"""
Assessment Engine
=================
Enhanced AI readiness assessment: question scoring, dimension roll-ups,
recommendations, an implementation roadmap and platform matching.

Core business logic for the AI Assessment tab, separated from UI concerns.
This module is unit-testable and can be used independently of Streamlit.
"""

import io
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

import pandas as pd

from catalog.assessment import ASSESSMENT_DIMENSIONS, ASSESSMENT_QUESTIONS, ASSESSMENT_TYPES, get_questions_for_type
from catalog.platforms import ENTERPRISE_PLATFORMS
from rounding import round_half_up

ResponseValue = Union[str, List[str], float, int]

SCORE_LEVELS = {
    'critical': {'label': 'Critical', 'color': '#EF4444', 'description': 'Significant gaps block AI adoption'},
    'developing': {'label': 'Developing', 'color': '#F59E0B', 'description': 'Foundations are forming'},
    'competent': {'label': 'Competent', 'color': '#3B82F6', 'description': 'Ready for targeted pilots'},
    'advanced': {'label': 'Advanced', 'color': '#22C55E', 'description': 'Ready to scale AI'},
    'leading': {'label': 'Leading', 'color': '#D4A537', 'description': 'AI is a strategic differentiator'},
}

PRIORITY_ORDER = {'critical': 0, 'high': 1, 'medium': 2, 'low': 3}


def get_score_level(percentage: float) -> str:
    """Map a 0-100 dimension percentage onto a readiness level."""
    if percentage <= 20:
        return 'critical'
    if percentage <= 40:
        return 'developing'
    if percentage <= 60:
        return 'competent'
    if percentage <= 80:
        return 'advanced'
    return 'leading'


def calculate_question_score(question: Dict[str, Any], value: ResponseValue) -> float:
    """
    Score a single answer.

    Rating and slider answers scale against the question's max value, option
    answers sum the selected option scores, free text carries no score.

    Args:
        question: Question dict from the question bank
        value: The raw answer (option value, list of option values, or number)

    Returns:
        Score rounded to one decimal place
    """
    weight = question.get('weight', 1.0)
    score = 0.0

    if question['type'] in ('rating', 'slider'):
        max_value = question.get('max_value') or 5
        score = float(value) / max_value * weight * 2
    elif question.get('options'):
        scores = {o['value']: o['score'] for o in question['options']}
        if isinstance(value, list):
            raw = sum(scores.get(v, 0) for v in value)
        else:
            raw = scores.get(value, 0)
        score = raw * (weight / 3)

    return round_half_up(score, 1)


def _skip_matches(skip_logic: Dict[str, Any], value: ResponseValue) -> bool:
    condition = skip_logic.get('condition')
    target = skip_logic.get('value')

    if condition == 'equals':
        return value == target
    if condition == 'notEquals':
        return value != target
    if condition == 'greaterThan':
        return isinstance(value, (int, float)) and value > target
    if condition == 'lessThan':
        return isinstance(value, (int, float)) and value < target
    if condition == 'contains':
        if isinstance(value, list):
            return target in value
        return isinstance(value, str) and str(target) in value
    return False


class EnhancedAssessment:
    """
    Stateful walk through the assessment question bank.

    Holds the current dimension/question cursor and the accumulated
    responses; every result (scores, recommendations, roadmap, matches) is
    derived from the responses on demand.
    """

    def __init__(self, assessment_type: str = 'external',
                 questions: Optional[List[Dict[str, Any]]] = None):
        if assessment_type not in ASSESSMENT_TYPES:
            raise ValueError(f"Unknown assessment type: {assessment_type}")
        self.assessment_type = assessment_type
        self.question_bank = questions if questions is not None else ASSESSMENT_QUESTIONS
        self.questions = get_questions_for_type(assessment_type, self.question_bank)
        self.current_dimension_index = 0
        self.current_question_index = 0
        self.responses: List[Dict[str, Any]] = []
        self.organization_name = ''
        self.contact_email = ''
        self.is_complete = False

    # =========================================================================
    # STRUCTURE
    # =========================================================================

    @property
    def questions_by_dimension(self) -> Dict[str, List[Dict[str, Any]]]:
        grouped: Dict[str, List[Dict[str, Any]]] = {}
        for question in self.questions:
            grouped.setdefault(question['dimension_id'], []).append(question)
        return grouped

    @property
    def applicable_dimensions(self) -> List[Dict[str, Any]]:
        grouped = self.questions_by_dimension
        return [d for d in ASSESSMENT_DIMENSIONS if grouped.get(d['id'])]

    @property
    def current_dimension(self) -> Optional[Dict[str, Any]]:
        dimensions = self.applicable_dimensions
        if 0 <= self.current_dimension_index < len(dimensions):
            return dimensions[self.current_dimension_index]
        return None

    @property
    def current_questions(self) -> List[Dict[str, Any]]:
        dimension = self.current_dimension
        if not dimension:
            return []
        return self.questions_by_dimension.get(dimension['id'], [])

    @property
    def current_question(self) -> Optional[Dict[str, Any]]:
        questions = self.current_questions
        if 0 <= self.current_question_index < len(questions):
            return questions[self.current_question_index]
        return None

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def answered_questions(self) -> int:
        return len(self.responses)

    @property
    def progress_percentage(self) -> int:
        if self.total_questions == 0:
            return 0
        return round_half_up(self.answered_questions / self.total_questions * 100)

    # =========================================================================
    # ANSWERS
    # =========================================================================

    def set_organization_info(self, name: str, email: str) -> None:
        self.organization_name = name
        self.contact_email = email

    def answer(self, question_id: str, value: ResponseValue) -> Optional[Dict[str, Any]]:
        """
        Record (or replace) the answer to a question.

        Returns:
            The stored response, or None if the question id is unknown
        """
        question = next((q for q in self.questions if q['id'] == question_id), None)
        if question is None:
            return None

        response = {
            'question_id': question_id,
            'dimension_id': question['dimension_id'],
            'value': value,
            'score': calculate_question_score(question, value),
            'timestamp': datetime.now().isoformat(),
        }
        self.responses = [r for r in self.responses if r['question_id'] != question_id]
        self.responses.append(response)
        return response

    def get_response(self, question_id: str) -> Optional[Dict[str, Any]]:
        return next((r for r in self.responses if r['question_id'] == question_id), None)

    # =========================================================================
    # NAVIGATION
    # =========================================================================

    def next_question(self) -> None:
        """Advance the cursor, honouring any skip rule on the current answer."""
        questions = self.current_questions
        dimensions = self.applicable_dimensions
        question = self.current_question

        if question and question.get('skip_logic'):
            response = self.get_response(question['id'])
            skip = question['skip_logic']
            if response is not None and _skip_matches(skip, response['value']):
                target = skip.get('skip_to')
                target_index = next(
                    (i for i, q in enumerate(questions) if q['id'] == target), None
                ) if target else None
                if target_index is not None and target_index > self.current_question_index:
                    self.current_question_index = target_index
                    return
                self._advance_dimension(dimensions)
                return

        if self.current_question_index < len(questions) - 1:
            self.current_question_index += 1
        else:
            self._advance_dimension(dimensions)

    def _advance_dimension(self, dimensions: List[Dict[str, Any]]) -> None:
        if self.current_dimension_index < len(dimensions) - 1:
            self.current_dimension_index += 1
            self.current_question_index = 0
        else:
            self.is_complete = True

    def previous_question(self) -> None:
        if self.current_question_index > 0:
            self.current_question_index -= 1
        elif self.current_dimension_index > 0:
            self.current_dimension_index -= 1
            previous = self.questions_by_dimension.get(
                self.applicable_dimensions[self.current_dimension_index]['id'], []
            )
            self.current_question_index = max(len(previous) - 1, 0)

    def go_to_dimension(self, index: int) -> None:
        last = len(self.applicable_dimensions) - 1
        self.current_dimension_index = max(0, min(index, last))
        self.current_question_index = 0

    def reset(self) -> None:
        self.__init__(self.assessment_type, self.question_bank)

    def set_assessment_type(self, assessment_type: str) -> None:
        """Switch between internal and external, starting over on the new question set."""
        self.__init__(assessment_type, self.question_bank)

    # =========================================================================
    # RESULTS
    # =========================================================================

    def calculate_dimension_scores(self) -> List[Dict[str, Any]]:
        """
        Roll responses up into one score per applicable dimension.

        Returns:
            List of dicts with dimension_id, dimension_name, score, max_score,
            percentage, level, gaps and strengths (at most 3 of each)
        """
        grouped = self.questions_by_dimension
        results = []

        for dimension in self.applicable_dimensions:
            questions = grouped.get(dimension['id'], [])
            by_id = {q['id']: q for q in questions}
            responses = [r for r in self.responses if r['dimension_id'] == dimension['id']]

            score = sum(r['score'] for r in responses)
            max_score = sum(q.get('weight', 1.0) * 2 for q in questions)
            percentage = round_half_up(score / max_score * 100) if max_score > 0 else 0

            gaps: List[str] = []
            strengths: List[str] = []
            for response in responses:
                question = by_id.get(response['question_id'])
                if not question:
                    continue
                normalized = response['score'] / (question.get('weight', 1.0) * 2)
                if normalized < 0.4:
                    gaps.append(question['question'])
                elif normalized > 0.7:
                    strengths.append(question['question'])

            results.append({
                'dimension_id': dimension['id'],
                'dimension_name': dimension['name'],
                'score': score,
                'max_score': max_score,
                'percentage': percentage,
                'level': get_score_level(percentage),
                'gaps': gaps[:3],
                'strengths': strengths[:3],
            })

        return results

    def calculate_total_score(self) -> int:
        weights = {d['id']: d.get('weight') or 10 for d in ASSESSMENT_DIMENSIONS}
        total = sum(
            ds['percentage'] * weights.get(ds['dimension_id'], 10) / 100
            for ds in self.calculate_dimension_scores()
        )
        return round_half_up(total)

    def generate_recommendations(self) -> List[Dict[str, Any]]:
        recommendations = []

        for ds in self.calculate_dimension_scores():
            name = ds['dimension_name']
            if ds['level'] == 'critical':
                recommendations.append({
                    'id': f"rec_{ds['dimension_id']}_critical",
                    'priority': 'critical',
                    'category': name,
                    'title': f"Address Critical Gaps in {name}",
                    'description': f"Your {name.lower()} score indicates significant gaps that must be addressed before AI adoption.",
                    'action_items': [f"Review and improve: {g}" for g in ds['gaps']],
                    'estimated_effort': '3-6 months',
                    'expected_impact': 'Foundation for AI readiness',
                    'related_dimensions': [ds['dimension_id']],
                })
            elif ds['level'] == 'developing':
                recommendations.append({
                    'id': f"rec_{ds['dimension_id']}_develop",
                    'priority': 'high',
                    'category': name,
                    'title': f"Strengthen {name}",
                    'description': f"Improving {name.lower()} will significantly enhance your AI readiness.",
                    'action_items': [f"Focus on: {g}" for g in ds['gaps']],
                    'estimated_effort': '2-4 months',
                    'expected_impact': 'Improved AI adoption success rate',
                    'related_dimensions': [ds['dimension_id']],
                })

        return sorted(recommendations, key=lambda r: PRIORITY_ORDER[r['priority']])

    def generate_roadmap(self) -> List[Dict[str, Any]]:
        """Build the phased implementation roadmap for the current answers."""
        total_score = self.calculate_total_score()
        has_critical = any(ds['level'] == 'critical' for ds in self.calculate_dimension_scores())
        roadmap: List[Dict[str, Any]] = []

        if has_critical or total_score < 40:
            roadmap.append({
                'id': 'phase_1',
                'phase': 1,
                'phase_name': 'Foundation',
                'title': 'Build AI Readiness Foundation',
                'description': 'Address critical gaps and establish baseline capabilities',
                'start_week': 1,
                'end_week': 4,
                'milestones': [
                    'Complete infrastructure assessment',
                    'Establish data governance baseline',
                    'Define AI ethics guidelines',
                    'Identify pilot use cases',
                ],
                'dependencies': [],
                'resources': ['IT Team', 'Leadership Sponsor', 'External Consultant'],
                'estimated_cost': '$25,000 - $50,000',
                'success_metrics': [
                    'Infrastructure gaps documented',
                    'Governance framework drafted',
                    '3+ pilot use cases identified',
                ],
            })

        roadmap.append({
            'id': 'phase_2',
            'phase': 2,
            'phase_name': 'Pilot',
            'title': 'Launch AI Pilot Program',
            'description': 'Implement and validate AI solutions with limited scope',
            'start_week': 5 if has_critical else 1,
            'end_week': 12 if has_critical else 8,
            'milestones': [
                'Select pilot team and use case',
                'Deploy initial AI tools',
                'Conduct user training',
                'Gather feedback and metrics',
            ],
            'dependencies': ['phase_1'] if has_critical else [],
            'resources': ['Pilot Team (5-10 users)', 'IT Support', 'Training Resources'],
            'estimated_cost': '$15,000 - $30,000',
            'success_metrics': [
                '80% pilot user adoption',
                '20% productivity improvement',
                'User satisfaction > 4.0/5.0',
            ],
        })

        scaled_late = len(roadmap) > 1
        roadmap.append({
            'id': 'phase_3',
            'phase': 3,
            'phase_name': 'Scale',
            'title': 'Scale AI Deployment',
            'description': 'Expand successful pilots to broader organization',
            'start_week': 13 if scaled_late else 9,
            'end_week': 24 if scaled_late else 20,
            'milestones': [
                'Develop scaling strategy',
                'Roll out to additional departments',
                'Establish support processes',
                'Document best practices',
            ],
            'dependencies': ['phase_2'],
            'resources': ['Full IT Team', 'Department Champions', 'Change Management'],
            'estimated_cost': '$50,000 - $150,000',
            'success_metrics': [
                '50%+ organization adoption',
                'Documented ROI > 2x investment',
                'Support ticket volume stable',
            ],
        })

        if total_score >= 60:
            roadmap.append({
                'id': 'phase_4',
                'phase': 4,
                'phase_name': 'Optimize',
                'title': 'Optimize & Innovate',
                'description': 'Refine AI capabilities and explore advanced use cases',
                'start_week': 25,
                'end_week': 52,
                'milestones': [
                    'Implement advanced AI features',
                    'Develop custom AI solutions',
                    'Establish AI Center of Excellence',
                    'Pursue industry leadership',
                ],
                'dependencies': ['phase_3'],
                'resources': ['AI/ML Team', 'Innovation Budget', 'External Partners'],
                'estimated_cost': '$100,000+',
                'success_metrics': [
                    'New AI use cases implemented',
                    'Custom models deployed',
                    'Industry recognition achieved',
                ],
            })

        return roadmap

    def match_platforms(self, platforms: Optional[List[Dict[str, Any]]] = None) -> List[Dict[str, Any]]:
        """
        Rank platforms against the assessment outcome.

        Args:
            platforms: Platform catalog to rank (defaults to the enterprise catalog)

        Returns:
            Up to 10 matches with a positive score, best first
        """
        platforms = platforms if platforms is not None else ENTERPRISE_PLATFORMS
        dimension_scores = {ds['dimension_id']: ds for ds in self.calculate_dimension_scores()}
        total_score = self.calculate_total_score()
        tech = dimension_scores.get('technical_capabilities')
        gov = dimension_scores.get('governance_compliance')

        matches = []
        for platform in platforms:
            caps = platform.get('capabilities', {})
            match_score = 0
            reasons: List[str] = []
            considerations: List[str] = []

            if total_score >= 70 and platform.get('priority') == 'Tier 1':
                match_score += 30
                reasons.append('Your high readiness aligns with enterprise-grade platforms')
            elif total_score >= 40 and platform.get('priority') == 'Tier 2':
                match_score += 25
                reasons.append('Good fit for your current maturity level')
            elif total_score < 40 and caps.get('developer_experience', 0) >= 8:
                match_score += 20
                reasons.append('User-friendly platform suitable for building AI skills')

            if tech and tech['percentage'] >= 60 and caps.get('enterprise_features', 0) >= 8:
                match_score += 15
                reasons.append('Strong technical foundation supports enterprise features')

            if gov and gov['percentage'] >= 50 and len(platform.get('compliance', [])) >= 3:
                match_score += 15
                reasons.append('Platform compliance meets your governance requirements')

            if caps.get('data_privacy', 0) < 7:
                considerations.append('Review data privacy capabilities for sensitive data')
            if caps.get('on_prem_option', 0) < 5:
                considerations.append('Cloud-only deployment - ensure cloud strategy aligns')

            if match_score >= 50:
                complexity, roi = 'low', '3-6 months payback'
            elif match_score >= 30:
                complexity, roi = 'medium', '6-12 months payback'
            else:
                complexity, roi = 'high', '12+ months payback'

            matches.append({
                'platform_id': platform['id'],
                'platform_name': platform['name'],
                'match_score': match_score,
                'match_reasons': reasons,
                'consideration_points': considerations,
                'implementation_complexity': complexity,
                'estimated_roi': roi,
            })

        ranked = sorted((m for m in matches if m['match_score'] > 0),
                        key=lambda m: m['match_score'], reverse=True)
        return ranked[:10]

    def build_result(self) -> Dict[str, Any]:
        """Assemble the full result payload shown on the results screen and persisted."""
        total_score = self.calculate_total_score()
        return {
            'assessment_type': self.assessment_type,
            'organization_name': self.organization_name,
            'contact_email': self.contact_email,
            'total_score': total_score,
            'max_possible_score': 100,
            'percentage_score': total_score,
            'dimension_scores': self.calculate_dimension_scores(),
            'recommendations': self.generate_recommendations(),
            'roadmap_items': self.generate_roadmap(),
            'platform_matches': self.match_platforms(),
        }


def score_responses(
    answers: Dict[str, ResponseValue],
    assessment_type: str = 'external',
    organization_name: str = '',
    contact_email: str = '',
) -> Dict[str, Any]:
    """
    Score a complete answer sheet in one call (used by background jobs).

    Unknown question ids are ignored.
    """
    assessment = EnhancedAssessment(assessment_type)
    assessment.set_organization_info(organization_name, contact_email)
    for question_id, value in answers.items():
        assessment.answer(question_id, value)
    assessment.is_complete = True
    return assessment.build_result()


def build_assessment_record(result: Dict[str, Any], user_id: str) -> Dict[str, Any]:
    """Shape a result payload as an ``ai_assessments`` row."""
    return {
        'user_id': user_id,
        'organization_profile': {
            'name': result.get('organization_name', ''),
            'email': result.get('contact_email', ''),
            'assessmentType': result.get('assessment_type', 'external'),
        },
        'current_ai_usage': {},
        'technical_readiness': {ds['dimension_id']: ds for ds in result.get('dimension_scores', [])},
        'budget_timeline': {},
        'readiness_score': result.get('total_score', 0),
        'recommendations': {
            'recommendations': result.get('recommendations', []),
            'roadmapItems': result.get('roadmap_items', []),
            'platformMatches': result.get('platform_matches', []),
        },
    }


def dimension_scores_to_csv(dimension_scores: List[Dict[str, Any]]) -> str:
    """Export dimension results as CSV (dimension, score, level, gaps, strengths)."""
    rows = [{
        'Dimension': ds['dimension_name'],
        'Score (%)': ds['percentage'],
        'Level': SCORE_LEVELS[ds['level']]['label'],
        'Gaps': '; '.join(ds['gaps']),
        'Strengths': '; '.join(ds['strengths']),
    } for ds in dimension_scores]
    df = pd.DataFrame(rows, columns=['Dimension', 'Score (%)', 'Level', 'Gaps', 'Strengths'])
    buffer = io.StringIO()
    df.to_csv(buffer, index=False, lineterminator='\n')
    return buffer.getvalue()
