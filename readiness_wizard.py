"""
Readiness Wizard
================
Quick five-step AI readiness check: organization, current AI usage,
technical readiness, budget & timeline, results.

Scores the answers into a 0-100 readiness score and sorts the platform
catalog into recommendation tiers.
"""

from copy import deepcopy
from typing import Any, Dict, List, Optional

from catalog.platforms import ENTERPRISE_PLATFORMS
from catalog.readiness import (
    ACTION_ITEMS,
    DEFAULT_WIZARD_ANSWERS,
    OVERALL_ASSESSMENTS,
    PROFICIENCY_SCORES,
    WIZARD_STEPS,
)
from rounding import round_half_up

LAST_STEP = len(WIZARD_STEPS) - 1


def _normalize_compliance(label: str) -> str:
    return label.lower().replace(' ', '')


def budget_score(budget_range: str) -> int:
    """Score a budget range label; checked largest first on the label text."""
    if '100,000' in budget_range:
        return 80
    if '50,000' in budget_range:
        return 60
    if '10,000' in budget_range:
        return 40
    return 20


def calculate_readiness_score(answers: Dict[str, Dict[str, Any]]) -> int:
    """
    Compute the quick readiness score.

    Args:
        answers: Dict with organization_profile, current_ai_usage,
            technical_readiness and budget_timeline sections

    Returns:
        Score clamped to 0-100
    """
    org = answers['organization_profile']
    usage = answers['current_ai_usage']
    tech = answers['technical_readiness']
    budget = answers['budget_timeline']

    org_score = (
        org['digital_maturity'] / 5 * 50
        + (30 if org['primary_objectives'] else 0)
        + (20 if org['industry'] else 0)
    ) * 0.2

    proficiency = PROFICIENCY_SCORES.get(usage['team_proficiency'], 0)
    usage_score = (
        (30 if usage['current_tools'] else 0)
        + min(usage['ai_budget_percentage'] * 2, 30)
        + proficiency * 0.2
        + usage['past_project_success'] * 0.2
    ) * 0.25

    tech_score = (
        tech['data_infrastructure'] / 5 * 40
        + tech['api_readiness'] / 5 * 40
        + (20 if tech['security_requirements'] else 0)
    ) * 0.25

    timeline_score = (
        budget_score(budget['budget_range']) * 0.4
        + budget['change_management_readiness'] / 5 * 60
    ) * 0.3

    score = round_half_up(org_score + usage_score + tech_score + timeline_score)
    return min(100, max(0, score))


def _platform_fit(platform: Dict[str, Any], answers: Dict[str, Dict[str, Any]]) -> int:
    org = answers['organization_profile']
    usage = answers['current_ai_usage']
    tech = answers['technical_readiness']
    caps = platform.get('capabilities', {})
    score = 0

    if org['company_size'] > 500 and platform.get('category') == 'Enterprise':
        score += 30

    requirements = tech['security_requirements']
    if requirements:
        offered = {_normalize_compliance(c) for c in platform.get('compliance', [])}
        if all(_normalize_compliance(r) in offered for r in requirements):
            score += 25

    if tech['deployment_preference'] == 'on-premise' and caps.get('on_prem_option', 0) >= 8:
        score += 20

    if usage['team_proficiency'] == 'novice' and caps.get('developer_experience', 0) >= 8:
        score += 15

    return score


def generate_recommendations(
    answers: Dict[str, Dict[str, Any]],
    platforms: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """
    Sort platforms into three tiers and attach action items.

    Returns:
        Dict with tier1_platforms, tier2_platforms, tier3_platforms (ids, at
        most 5 each), action_items and overall_assessment
    """
    platforms = platforms if platforms is not None else ENTERPRISE_PLATFORMS
    score = calculate_readiness_score(answers)
    tiers: Dict[str, List[str]] = {'tier1': [], 'tier2': [], 'tier3': []}

    for platform in platforms:
        fit = _platform_fit(platform, answers)
        if fit >= 50:
            tiers['tier1'].append(platform['id'])
        elif fit >= 25:
            tiers['tier2'].append(platform['id'])
        elif platform.get('priority') == 'Tier 1':
            tiers['tier3'].append(platform['id'])

    if score < 40:
        band = 'foundational'
    elif score < 70:
        band = 'developing'
    else:
        band = 'ready'

    overall = next(text for threshold, text in OVERALL_ASSESSMENTS if score >= threshold)

    return {
        'tier1_platforms': tiers['tier1'][:5],
        'tier2_platforms': tiers['tier2'][:5],
        'tier3_platforms': tiers['tier3'][:5],
        'action_items': list(ACTION_ITEMS[band]),
        'overall_assessment': overall,
    }


class ReadinessWizard:
    """Step cursor plus the four answer sections."""

    def __init__(self):
        self.current_step = 0
        self.answers = deepcopy(DEFAULT_WIZARD_ANSWERS)

    @property
    def step_name(self) -> str:
        return WIZARD_STEPS[self.current_step]

    def next_step(self) -> None:
        self.current_step = min(self.current_step + 1, LAST_STEP)

    def previous_step(self) -> None:
        self.current_step = max(self.current_step - 1, 0)

    def go_to_step(self, step: int) -> None:
        self.current_step = min(max(step, 0), LAST_STEP)

    def update(self, section: str, **values: Any) -> None:
        if section not in self.answers:
            raise ValueError(f"Unknown wizard section: {section}")
        self.answers[section].update(values)

    def reset(self) -> None:
        self.__init__()

    def readiness_score(self) -> int:
        return calculate_readiness_score(self.answers)

    def recommendations(self) -> Dict[str, Any]:
        return generate_recommendations(self.answers)

    def to_record(self, user_id: str) -> Dict[str, Any]:
        """Shape the wizard state as an ``ai_assessments`` row."""
        return {
            'user_id': user_id,
            'organization_profile': deepcopy(self.answers['organization_profile']),
            'current_ai_usage': deepcopy(self.answers['current_ai_usage']),
            'technical_readiness': deepcopy(self.answers['technical_readiness']),
            'budget_timeline': deepcopy(self.answers['budget_timeline']),
            'readiness_score': self.readiness_score(),
            'recommendations': self.recommendations(),
        }
