"""
Persona Engine
==============
Client persona lookups (AI tool recommendations, related services and case
studies) and the employee persona builder: prompt context assembly for the
AI gateway, hat time allocation checks, and ecosystem export naming.

This module is unit-testable and can be used independently of Streamlit.
"""

import json
import re
from typing import Any, Dict, List, Optional

from catalog.personas import (
    AI_TOOL_RECOMMENDATIONS,
    CASE_STUDIES,
    CLIENT_PERSONAS,
    DEFAULT_COMMUNICATION_STYLE,
    DEFAULT_WORK_PREFERENCES,
    ECOSYSTEMS,
    INT_SERVICES,
)

MAX_HAT_ALLOCATION = 100
PROMPT_TYPES = ['claude', 'copilot', 'gemini', 'hat_suggestions']

FALLBACK_HAT_SUGGESTIONS: Dict[str, List[str]] = {
    'efficiency_tips': ['Review and optimize your current workflow'],
    'automation_opportunities': ['Look for repetitive tasks that can be automated'],
    'skill_gaps': [],
    'recommended_tools': [],
    'prompt_improvements': ['Be specific about your role context when prompting AI'],
}


# =============================================================================
# CLIENT PERSONAS
# =============================================================================

def get_client_persona(persona_id: str) -> Optional[Dict[str, Any]]:
    return next((p for p in CLIENT_PERSONAS if p['id'] == persona_id), None)


def get_ai_tool_recommendations(persona_id: str) -> List[Dict[str, Any]]:
    """AI tools for a client persona, most relevant first; [] when unknown."""
    recommendations = AI_TOOL_RECOMMENDATIONS.get(persona_id, [])
    return sorted(recommendations, key=lambda r: r['relevance_score'], reverse=True)


def get_related_services(persona_id: str) -> List[Dict[str, Any]]:
    persona = get_client_persona(persona_id)
    if not persona:
        return []
    return [s for s in INT_SERVICES if s['slug'] in persona['related_services']]


def get_related_case_studies(persona_id: str) -> List[Dict[str, Any]]:
    persona = get_client_persona(persona_id)
    if not persona:
        return []
    return [cs for cs in CASE_STUDIES if persona['role'] in cs['roles_mentioned']]


# =============================================================================
# EMPLOYEE PERSONAS
# =============================================================================

def _joined(values: Optional[List[str]], empty: str) -> str:
    return ', '.join(values) if values else empty


def total_hat_allocation(hats: List[Dict[str, Any]]) -> int:
    return sum(hat.get('time_percentage') or 0 for hat in hats)


def validate_hat_allocation(hats: List[Dict[str, Any]], new_percentage: int = 0,
                            exclude_hat_id: Optional[str] = None) -> bool:
    """
    Check that adding or updating a hat keeps total time at or under 100%.

    Args:
        hats: Existing hats for the persona
        new_percentage: Time share of the hat being added or edited
        exclude_hat_id: Id of the hat being edited, so its old share is ignored
    """
    if new_percentage < 0:
        return False
    others = [h for h in hats if h.get('id') != exclude_hat_id]
    return total_hat_allocation(others) + new_percentage <= MAX_HAT_ALLOCATION


def hats_context(hats: Optional[List[Dict[str, Any]]]) -> str:
    if not hats:
        return 'No specific roles defined'
    lines = []
    for hat in hats:
        detail = hat.get('description') or ', '.join(hat.get('responsibilities') or [])
        lines.append(f"- {hat['name']} ({hat.get('time_percentage', 0)}% of time): {detail}")
    return '\n'.join(lines)


def build_persona_context(persona: Dict[str, Any], hats: Optional[List[Dict[str, Any]]] = None) -> str:
    """
    Render an employee persona and its hats as the profile block sent to the
    AI gateway. Missing preferences fall back to the builder defaults.
    """
    comm = {**DEFAULT_COMMUNICATION_STYLE, **{k: v for k, v in (persona.get('communication_style') or {}).items() if v}}
    work = {**DEFAULT_WORK_PREFERENCES, **{k: v for k, v in (persona.get('work_preferences') or {}).items() if v}}

    return f"""
Employee Profile:
- Name: {persona.get('name', '')}
- Title: {persona.get('job_title') or 'Not specified'}
- Department: {persona.get('department') or 'Not specified'}

Roles/Responsibilities ("Hats"):
{hats_context(hats)}

Communication Preferences:
- Formality: {comm['formality']}
- Detail Level: {comm['detail_level']}
- Examples: {comm['examples_preference']}
- Technical Depth: {comm['technical_depth']}

Work Style:
- Focus Time: {work['focus_time']}
- Collaboration: {work['collaboration_style']}
- Decision Making: {work['decision_making']}
- Feedback: {work['feedback_preference']}

Pain Points: {_joined(persona.get('pain_points'), 'None specified')}
Goals: {_joined(persona.get('goals'), 'None specified')}
Skills: {_joined(persona.get('skills'), 'Not specified')}
Expertise: {_joined(persona.get('expertise_areas'), 'Not specified')}
Tools Used: {_joined(persona.get('tools_used'), 'None specified')}

AI Interaction Preferences:
- Style: {persona.get('ai_interaction_style') or 'balanced'}
- Response Length: {persona.get('preferred_response_length') or 'medium'}
- Tone: {persona.get('preferred_tone') or 'professional'}"""


_ECOSYSTEM_SYSTEM_PROMPTS = {
    'claude': """You are an expert at creating Claude system prompts for enterprise users. Generate a comprehensive, production-ready system prompt that will help Claude assist this employee effectively.

The system prompt should:
1. Define Claude's role as a personalized AI assistant for this employee
2. Incorporate their communication preferences and work style
3. Reference their specific roles and responsibilities
4. Address their pain points and help achieve their goals
5. Use appropriate formality and technical depth
6. Include specific examples of how to handle common requests

Format: Return ONLY the system prompt text, no explanations or metadata.""",
    'copilot': """You are an expert at creating Microsoft Copilot custom instructions and context configurations. Generate a comprehensive configuration that will help Copilot assist this employee effectively within the Microsoft 365 ecosystem.

The configuration should:
1. Define the assistant's role within Microsoft 365 apps
2. Include context for Teams, Outlook, Word, Excel, and PowerPoint
3. Incorporate their communication and collaboration preferences
4. Reference their specific roles and Microsoft tools usage
5. Provide guidance for document creation, email drafting, and meeting preparation
6. Address their pain points with Microsoft productivity tools

Format: Return ONLY the Copilot configuration/instructions text, formatted for Microsoft Copilot custom instructions.""",
    'gemini': """You are an expert at creating Google Gemini and Google Workspace AI configurations. Generate a comprehensive system prompt and configuration that will help Gemini assist this employee effectively within the Google ecosystem.

The configuration should:
1. Define the assistant's role within Google Workspace
2. Include context for Gmail, Google Docs, Sheets, Slides, and Meet
3. Incorporate their communication and collaboration preferences
4. Reference their specific roles and Google tools usage
5. Provide guidance for document creation, email management, and data analysis
6. Address their pain points with Google productivity tools

Format: Return ONLY the Gemini configuration/instructions text, formatted for Google Gemini.""",
}

_ECOSYSTEM_USER_PROMPTS = {
    'claude': 'Create a Claude system prompt for this employee:\n',
    'copilot': 'Create Microsoft Copilot custom instructions for this employee:\n',
    'gemini': 'Create Google Gemini instructions for this employee:\n',
}

HAT_SUGGESTIONS_SYSTEM_PROMPT = """You are an AI productivity and role optimization expert. Analyze the employee's role/hat and provide actionable suggestions for improvement.

Return a JSON object with these fields:
- efficiency_tips: Array of 3-5 specific tips to improve efficiency in this role
- automation_opportunities: Array of 2-4 tasks that could be automated
- skill_gaps: Array of 1-3 skills that would benefit this role
- recommended_tools: Array of 2-4 tools that could help with this role
- prompt_improvements: Array of 2-3 ways to better prompt AI assistants for this role"""


def build_prompt_messages(prompt_type: str, persona: Dict[str, Any],
                          hats: Optional[List[Dict[str, Any]]] = None,
                          hat: Optional[Dict[str, Any]] = None) -> List[Dict[str, str]]:
    """
    Chat messages for an ecosystem prompt or hat suggestion request.

    Raises:
        ValueError: If prompt_type is not one of PROMPT_TYPES
    """
    if prompt_type not in PROMPT_TYPES:
        raise ValueError(f"Unknown prompt type: {prompt_type}")

    if prompt_type == 'hat_suggestions':
        hat = hat or {}
        user_prompt = f"""Analyze this role and provide optimization suggestions:

Role: {hat.get('name', '')}
Description: {hat.get('description') or 'Not specified'}
Responsibilities: {_joined(hat.get('responsibilities'), 'Not specified')}
Key Tasks: {_joined(hat.get('key_tasks'), 'Not specified')}
Time Allocation: {hat.get('time_percentage', 0)}%
Current Tools: {_joined(hat.get('tools'), 'None specified')}

Employee Context:
- Name: {persona.get('name', '')}
- Title: {persona.get('job_title') or 'Not specified'}
- Department: {persona.get('department') or 'Not specified'}
- Skills: {_joined(persona.get('skills'), 'Not specified')}
- Expertise: {_joined(persona.get('expertise_areas'), 'Not specified')}

Provide specific, actionable suggestions in JSON format."""
        return [
            {'role': 'system', 'content': HAT_SUGGESTIONS_SYSTEM_PROMPT},
            {'role': 'user', 'content': user_prompt},
        ]

    context = build_persona_context(persona, hats)
    return [
        {'role': 'system', 'content': _ECOSYSTEM_SYSTEM_PROMPTS[prompt_type]},
        {'role': 'user', 'content': _ECOSYSTEM_USER_PROMPTS[prompt_type] + context},
    ]


def parse_hat_suggestions(content: str) -> Dict[str, Any]:
    """Parse a JSON reply, unwrapping a fenced block; fixed suggestions on failure."""
    match = re.search(r'```(?:json)?\s*([\s\S]*?)```', content)
    payload = match.group(1).strip() if match else content
    try:
        return json.loads(payload)
    except ValueError:
        return {key: list(values) for key, values in FALLBACK_HAT_SUGGESTIONS.items()}


def export_name(persona_name: str, ecosystem: str) -> str:
    """'Dana Lee', 'claude' -> 'Dana Lee - Claude System Prompt'."""
    return f"{persona_name} - {ecosystem.capitalize()} System Prompt"


def export_filename(persona_name: str, ecosystem: str) -> str:
    slug = re.sub(r'\s+', '-', persona_name.lower())
    return f"{slug}-{ecosystem}-prompt.txt"


def next_export_version(existing: Optional[Dict[str, Any]]) -> int:
    return existing['version'] + 1 if existing else 1


def ecosystem_label(ecosystem: str) -> str:
    return ECOSYSTEMS.get(ecosystem, {}).get('label', ecosystem)


# =============================================================================
# PERSONA GENERATION
# =============================================================================

MAX_JOB_FIELD_LENGTH = 200
MAX_CONTEXT_LENGTH = 2000

PERSONA_GENERATION_SYSTEM_PROMPT = """You are an expert HR and organizational psychologist specializing in creating detailed employee personas for AI-assisted workplace optimization.

Your task is to generate a comprehensive persona profile based on a job title and department. The persona should be realistic, nuanced, and useful for configuring AI assistants to better serve this employee type.

CRITICAL: You must return a valid JSON object with EXACTLY these values (no variations):

{
  "communication_style": {
    "formality": "casual" | "balanced" | "formal",
    "detail_level": "concise" | "balanced" | "detailed",
    "examples_preference": "minimal" | "moderate" | "extensive",
    "technical_depth": "simplified" | "balanced" | "technical"
  },
  "work_preferences": {
    "focus_time": "morning" | "afternoon" | "evening" | "flexible",
    "collaboration_style": "async" | "realtime" | "mixed",
    "decision_making": "data_driven" | "intuitive" | "collaborative",
    "feedback_preference": "direct" | "diplomatic" | "coaching"
  },
  "skills": ["skill1", "skill2", "skill3", "skill4", "skill5"],
  "expertise_areas": ["area1", "area2", "area3"],
  "tools_used": ["tool1", "tool2", "tool3", "tool4"],
  "pain_points": ["pain point 1", "pain point 2", "pain point 3"],
  "goals": ["goal 1", "goal 2", "goal 3"],
  "ai_interaction_style": "concise" | "balanced" | "comprehensive",
  "preferred_response_length": "short" | "medium" | "long",
  "preferred_tone": "casual" | "professional" | "formal"
}

IMPORTANT: Use ONLY the exact values shown above (e.g., "balanced" not "Balanced", "mixed" not "highly_collaborative").

Make the persona specific and realistic for the given job title and department."""


def validate_generation_request(job_title: str, department: str,
                                additional_context: Optional[str] = None) -> Optional[str]:
    """Return an error message for an invalid request, or None."""
    if not job_title or not department:
        return "job_title and department are required"
    if len(job_title) > MAX_JOB_FIELD_LENGTH or len(department) > MAX_JOB_FIELD_LENGTH:
        return "job_title and department must be under 200 characters"
    if additional_context and len(additional_context) > MAX_CONTEXT_LENGTH:
        return "additional_context must be under 2000 characters"
    return None


def build_generation_messages(job_title: str, department: str,
                              additional_context: Optional[str] = None) -> List[Dict[str, str]]:
    context_line = f"Additional Context: {additional_context}" if additional_context else ''
    user_prompt = f"""Generate a detailed persona profile for:

Job Title: {job_title}
Department: {department}
{context_line}

Create a realistic and useful persona that would help AI assistants better serve someone in this role."""
    return [
        {'role': 'system', 'content': PERSONA_GENERATION_SYSTEM_PROMPT},
        {'role': 'user', 'content': user_prompt},
    ]


def extract_persona_json(content: str) -> Dict[str, Any]:
    """
    Pull the outermost JSON object out of a model reply.

    Raises:
        ValueError: If no object is present or it does not parse
    """
    match = re.search(r'\{[\s\S]*\}', content)
    if not match:
        raise ValueError("Failed to parse AI response as JSON")
    try:
        return json.loads(match.group(0))
    except ValueError as e:
        raise ValueError("Failed to parse AI response as JSON") from e
