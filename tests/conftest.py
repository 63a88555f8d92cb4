"""
Pytest Configuration and Fixtures
==================================
Shared test fixtures and configuration.
"""

import pytest
from copy import deepcopy
from unittest.mock import Mock

from catalog.pricing import DEFAULT_ROI_INPUTS
from catalog.readiness import DEFAULT_WIZARD_ANSWERS


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: tests that exercise several layers together")


@pytest.fixture
def mock_db_handler():
    """Create a mock database handler."""
    db = Mock()
    db.client = Mock()
    return db


@pytest.fixture
def wizard_answers():
    """Default quick-wizard answers (scores 42)."""
    return deepcopy(DEFAULT_WIZARD_ANSWERS)


@pytest.fixture
def roi_inputs():
    """ROI calculator defaults."""
    return dict(DEFAULT_ROI_INPUTS)


@pytest.fixture
def sample_questions():
    """Small question bank over two dimensions."""
    return [
        {
            'id': 'q1', 'dimension_id': 'organizational_culture', 'type': 'rating',
            'question': 'How supportive is leadership of AI?', 'weight': 1.0, 'max_value': 5,
        },
        {
            'id': 'q2', 'dimension_id': 'organizational_culture', 'type': 'single_choice',
            'question': 'Do you have an AI champion?', 'weight': 1.5,
            'options': [{'value': 'yes', 'label': 'Yes', 'score': 3}, {'value': 'no', 'label': 'No', 'score': 0}],
            'skip_logic': {'condition': 'equals', 'value': 'no', 'skip_to': None},
        },
        {
            'id': 'q3', 'dimension_id': 'data_infrastructure', 'type': 'rating',
            'question': 'How clean is your data?', 'weight': 1.0, 'max_value': 5,
        },
        {
            'id': 'q4', 'dimension_id': 'data_infrastructure', 'type': 'multi_choice',
            'question': 'Which data stores do you run?', 'weight': 3.0,
            'options': [
                {'value': 'warehouse', 'label': 'Warehouse', 'score': 1},
                {'value': 'lake', 'label': 'Lake', 'score': 1},
                {'value': 'none', 'label': 'None', 'score': 0},
            ],
        },
    ]


@pytest.fixture
def sample_documents():
    """Knowledge base rows."""
    return [
        {
            'id': 'd1', 'title': 'Copilot Rollout Playbook', 'slug': 'copilot-rollout-playbook',
            'description': 'Step-by-step rollout for Microsoft 365 Copilot',
            'content': 'Start with a pilot group. Measure adoption weekly. Copilot licensing is per user.',
            'category': 'playbooks', 'tags': ['microsoft', 'rollout'],
        },
        {
            'id': 'd2', 'title': 'Data Governance Primer', 'slug': 'data-governance-primer',
            'description': None,
            'content': 'Classify data before any AI pilot. Restricted data stays in Microsoft.',
            'category': 'governance', 'tags': ['data', 'policy'],
        },
        {
            'id': 'd3', 'title': 'Prompt Patterns', 'slug': 'prompt-patterns',
            'description': 'Reusable prompts',
            'content': 'Role, context, task, format.',
            'category': 'playbooks', 'tags': ['prompts'],
        },
    ]


@pytest.fixture
def sample_persona():
    """Employee persona row."""
    return {
        'id': 'p1',
        'name': 'Dana Lee',
        'job_title': 'Marketing Manager',
        'department': 'Marketing',
        'communication_style': {'formality': 'casual'},
        'work_preferences': {},
        'skills': ['Copywriting', 'Analytics'],
        'expertise_areas': ['B2B SaaS'],
        'pain_points': ['Too many meetings'],
        'goals': [],
        'tools_used': ['HubSpot', 'Slack'],
        'ai_interaction_style': 'concise',
        'preferred_response_length': 'short',
        'status': 'active',
    }


@pytest.fixture
def sample_hats():
    """Hats totalling 70%."""
    return [
        {'id': 'h1', 'name': 'Campaign Lead', 'time_percentage': 50, 'description': 'Runs campaigns'},
        {'id': 'h2', 'name': 'Reporting', 'time_percentage': 20, 'responsibilities': ['Weekly dashboard']},
    ]
