"""
Onboarding Engine
=================
Investor onboarding suggestions: role profiles, experience modifiers, the
chat prompts and tool schema sent to the AI gateway, and the rule-based
fallback used when the gateway is rate limited or returns no tool call.
"""

from copy import deepcopy
from typing import Any, Dict, List, Optional

from catalog.deals import (
    EXPERIENCE_MODIFIERS,
    FALLBACK_REASONING,
    FALLBACK_REGIONS,
    FALLBACK_TIPS,
    RISK_TOLERANCES,
    ROLE_PROFILES,
)

DEFAULT_ROLE = 'individual_investor'
DEFAULT_EXPERIENCE = 'intermediate'
TOOL_NAME = 'provide_suggestions'

SYSTEM_PROMPT = """You are an expert investment advisor helping personalize deal sourcing criteria.
Based on the investor profile, provide specific, actionable suggestions.
Return a JSON object with the following structure:
{
  "industries": ["array of 3-5 recommended industries"],
  "dealStructures": ["array of 2-4 recommended deal structures"],
  "stages": ["array of 2-4 recommended deal stages"],
  "regions": ["array of 2-3 recommended geographic regions"],
  "riskTolerance": "one of: conservative, moderate, aggressive, very_aggressive",
  "investmentRange": { "min": number, "max": number },
  "reasoning": "Brief 2-3 sentence explanation of why these recommendations fit the profile",
  "tips": ["array of 2-3 personalized tips for this investor type"]
}"""

SUGGESTION_TOOL: Dict[str, Any] = {
    'type': 'function',
    'function': {
        'name': TOOL_NAME,
        'description': 'Return personalized deal sourcing suggestions',
        'parameters': {
            'type': 'object',
            'properties': {
                'industries': {'type': 'array', 'items': {'type': 'string'}, 'description': 'Recommended target industries'},
                'dealStructures': {'type': 'array', 'items': {'type': 'string'}, 'description': 'Recommended deal structures'},
                'stages': {'type': 'array', 'items': {'type': 'string'}, 'description': 'Recommended deal stages'},
                'regions': {'type': 'array', 'items': {'type': 'string'}, 'description': 'Recommended geographic regions'},
                'riskTolerance': {'type': 'string', 'enum': list(RISK_TOLERANCES)},
                'investmentRange': {
                    'type': 'object',
                    'properties': {'min': {'type': 'number'}, 'max': {'type': 'number'}},
                    'required': ['min', 'max'],
                },
                'reasoning': {'type': 'string'},
                'tips': {'type': 'array', 'items': {'type': 'string'}},
            },
            'required': [
                'industries', 'dealStructures', 'stages', 'regions',
                'riskTolerance', 'investmentRange', 'reasoning', 'tips',
            ],
            'additionalProperties': False,
        },
    },
}

TOOL_CHOICE: Dict[str, Any] = {'type': 'function', 'function': {'name': TOOL_NAME}}


def get_role_profile(role: str) -> Dict[str, Any]:
    return ROLE_PROFILES.get(role) or ROLE_PROFILES[DEFAULT_ROLE]


def get_experience_modifier(experience_level: str) -> Dict[str, Any]:
    return EXPERIENCE_MODIFIERS.get(experience_level) or EXPERIENCE_MODIFIERS[DEFAULT_EXPERIENCE]


def adjust_risk(risk_profile: str, adjustment: int) -> str:
    """Shift a risk tolerance along the scale, clamped at both ends."""
    index = RISK_TOLERANCES.index(risk_profile) if risk_profile in RISK_TOLERANCES else 1
    index = min(max(index + adjustment, 0), len(RISK_TOLERANCES) - 1)
    return RISK_TOLERANCES[index]


def fallback_suggestions(role: str, experience_level: str) -> Dict[str, Any]:
    """Rule-based suggestions in the same shape as the tool call arguments."""
    profile = get_role_profile(role)
    modifier = get_experience_modifier(experience_level)
    return {
        'industries': list(profile['industries']),
        'dealStructures': list(profile['dealStructures']),
        'stages': list(profile['stages']),
        'regions': list(FALLBACK_REGIONS),
        # Experience shifts the role's base risk profile one step either way
        'riskTolerance': adjust_risk(profile['riskProfile'], modifier['risk_adjustment']),
        'investmentRange': deepcopy(profile['investmentRange']),
        'reasoning': FALLBACK_REASONING,
        'tips': list(FALLBACK_TIPS),
    }


def build_user_prompt(role: str, experience_level: str,
                      existing_preferences: Optional[Dict[str, Any]] = None) -> str:
    profile = get_role_profile(role)
    existing = existing_preferences or {}
    industries: List[str] = existing.get('targetIndustries') or []
    risk = existing.get('riskTolerance')

    lines = [
        'Generate personalized deal sourcing recommendations for:',
        f"- Role: {role.replace('_', ' ')}",
        f"- Experience Level: {experience_level}",
        f"- Base suggestions: Industries ({', '.join(profile['industries'])}), Stages ({', '.join(profile['stages'])})",
        f"- Already interested in: {', '.join(industries)}" if industries else '',
        f"- Current risk tolerance: {risk}" if risk else '',
        '',
        'Tailor the recommendations to be specific and actionable for this investor profile.',
    ]
    return '\n'.join(lines)


def build_messages(role: str, experience_level: str,
                   existing_preferences: Optional[Dict[str, Any]] = None) -> List[Dict[str, str]]:
    return [
        {'role': 'system', 'content': SYSTEM_PROMPT},
        {'role': 'user', 'content': build_user_prompt(role, experience_level, existing_preferences)},
    ]
