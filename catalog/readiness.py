"""
Option lists and canned text for the quick five-step readiness wizard.
"""

from typing import Any, Dict, List

WIZARD_STEPS = [
    'Organization Profile',
    'Current AI Usage',
    'Technical Readiness',
    'Budget & Timeline',
    'Results',
]

INDUSTRIES = [
    'Technology',
    'Financial Services',
    'Healthcare',
    'Manufacturing',
    'Retail & E-commerce',
    'Professional Services',
    'Education',
    'Media & Entertainment',
    'Real Estate',
    'Energy & Utilities',
    'Transportation & Logistics',
    'Government',
    'Non-profit',
    'Other',
]

PRIMARY_OBJECTIVES = [
    'Increase productivity',
    'Reduce costs',
    'Improve customer experience',
    'Accelerate innovation',
    'Automate workflows',
    'Enhance decision-making',
    'Generate content',
    'Improve data analysis',
    'Code development',
    'Research & development',
]

AI_TOOLS = [
    'ChatGPT / OpenAI',
    'Claude / Anthropic',
    'GitHub Copilot',
    'Microsoft Copilot',
    'Google Gemini',
    'Midjourney / DALL-E',
    'Zapier / Make automation',
    'Custom ML models',
    'Other LLMs',
    'None',
]

SECURITY_REQUIREMENTS = ['SOC2', 'HIPAA', 'GDPR', 'FedRAMP', 'ISO 27001']

BUDGET_RANGES = [
    'Under $10,000',
    '$10,000 - $50,000',
    '$50,000 - $100,000',
    '$100,000 - $500,000',
    '$500,000+',
]

IMPLEMENTATION_TIMELINES = ['1-3 months', '3-6 months', '6-12 months', '12+ months']
ROI_TIMELINES = ['3-6 months', '6-12 months', '12-24 months', '24+ months']
PROFICIENCY_LEVELS = ['novice', 'intermediate', 'expert']
DEPLOYMENT_PREFERENCES = ['cloud', 'hybrid', 'on-premise']

PROFICIENCY_SCORES: Dict[str, int] = {'novice': 20, 'intermediate': 50, 'expert': 100}

DEFAULT_WIZARD_ANSWERS: Dict[str, Dict[str, Any]] = {
    'organization_profile': {
        'company_size': 100,
        'industry': '',
        'digital_maturity': 3,
        'primary_objectives': [],
    },
    'current_ai_usage': {
        'current_tools': [],
        'ai_budget_percentage': 5,
        'team_proficiency': 'novice',
        'past_project_success': 50,
    },
    'technical_readiness': {
        'data_infrastructure': 3,
        'api_readiness': 3,
        'security_requirements': [],
        'deployment_preference': 'cloud',
    },
    'budget_timeline': {
        'budget_range': '$10,000 - $50,000',
        'implementation_timeline': '3-6 months',
        'expected_roi_timeline': '6-12 months',
        'change_management_readiness': 3,
    },
}

ACTION_ITEMS: Dict[str, List[str]] = {
    'foundational': [
        'Focus on building foundational data infrastructure before large AI investments',
        'Start with simple productivity AI tools to build team familiarity',
        'Develop AI governance policies and compliance frameworks',
    ],
    'developing': [
        'Consider pilot projects with Tier 2 platforms to validate use cases',
        'Invest in training programs to upskill your team',
        'Establish clear success metrics for AI initiatives',
    ],
    'ready': [
        'Ready for enterprise-scale AI deployment',
        'Consider multi-platform strategy for different use cases',
        'Focus on integration and workflow automation',
    ],
}

OVERALL_ASSESSMENTS: List[tuple] = [
    (80, 'Your organization is highly ready for AI adoption. You have strong infrastructure, experienced teams, and clear objectives. Focus on selecting the right platforms and scaling effectively.'),
    (60, 'Your organization has good AI readiness with some areas for improvement. Consider addressing gaps in team training or infrastructure before scaling AI initiatives.'),
    (40, 'Your organization is in the early stages of AI readiness. Start with pilot projects and focus on building foundational capabilities before major investments.'),
    (0, 'Your organization needs to build foundational capabilities before significant AI investment. Focus on data infrastructure, team training, and developing clear use cases.'),
]
