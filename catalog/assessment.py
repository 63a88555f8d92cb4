"""
AI readiness dimensions and the enhanced assessment question bank.

Option scores run 0-6 so that a top answer on a single-choice question
reaches the same ceiling (weight x 2) as a maxed-out rating or slider.
Multiple-choice options carry 0-2 each and are summed.

Questions are tagged with the assessment types that ask them: the internal
assessment profiles an employee's own work, the external one an organization.
"""

from typing import Any, Dict, List, Optional

ASSESSMENT_DIMENSIONS: List[Dict[str, Any]] = [
    {
        'id': 'organizational_culture',
        'name': 'Organizational Culture & Leadership',
        'description': 'Evaluates leadership support, change readiness, and innovation culture',
        'weight': 15,
    },
    {
        'id': 'data_infrastructure',
        'name': 'Data & Infrastructure',
        'description': 'Assesses data quality, governance, and technical infrastructure',
        'weight': 20,
    },
    {
        'id': 'technical_capabilities',
        'name': 'Technical Capabilities',
        'description': 'Evaluates IT skills, API readiness, and integration capacity',
        'weight': 15,
    },
    {
        'id': 'talent_skills',
        'name': 'Talent & Skills',
        'description': 'Measures team AI proficiency and training programs',
        'weight': 15,
    },
    {
        'id': 'governance_compliance',
        'name': 'Governance & Compliance',
        'description': 'Evaluates AI policies, ethics frameworks, and regulatory compliance',
        'weight': 15,
    },
    {
        'id': 'business_strategy',
        'name': 'Business Strategy & Use Cases',
        'description': 'Assesses strategic alignment and identified use cases',
        'weight': 10,
    },
    {
        'id': 'budget_resources',
        'name': 'Budget & Resources',
        'description': 'Evaluates financial commitment and resource allocation',
        'weight': 10,
    },
]

ASSESSMENT_TYPES = ['internal', 'external']
QUESTION_TYPES = ['single', 'multiple', 'slider', 'text', 'rating']
SKIP_CONDITIONS = ['equals', 'notEquals', 'greaterThan', 'lessThan', 'contains']


def _opt(value: str, label: str, score: float, description: Optional[str] = None) -> Dict[str, Any]:
    option = {'value': value, 'label': label, 'score': score}
    if description:
        option['description'] = description
    return option


def _question(
    question_id: str,
    dimension_id: str,
    text: str,
    qtype: str,
    weight: float = 1.0,
    options: Optional[List[Dict[str, Any]]] = None,
    help_text: Optional[str] = None,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
    skip_logic: Optional[Dict[str, Any]] = None,
    required: bool = True,
    assessment_types: Optional[List[str]] = None,
) -> Dict[str, Any]:
    return {
        'id': question_id,
        'dimension_id': dimension_id,
        'question': text,
        'type': qtype,
        'options': options or [],
        'skip_logic': skip_logic,
        'required': required,
        'help_text': help_text,
        'min_value': min_value,
        'max_value': max_value,
        'weight': weight,
        'assessment_types': assessment_types or list(ASSESSMENT_TYPES),
    }


ASSESSMENT_QUESTIONS: List[Dict[str, Any]] = [
    # Organizational culture
    _question(
        'oc_leadership_support', 'organizational_culture',
        'How actively does executive leadership sponsor AI initiatives?', 'single', 1.5,
        options=[
            _opt('none', 'No visible sponsorship', 0),
            _opt('interest', 'Interested but not committed', 2),
            _opt('sponsor', 'Named executive sponsor', 4),
            _opt('champion', 'Leadership actively champions AI', 6),
        ],
    ),
    _question(
        'oc_change_readiness', 'organizational_culture',
        'Rate your organization\'s readiness to change established workflows.', 'rating', 1.0,
        min_value=1, max_value=5,
        help_text='1 = strong resistance, 5 = change is routine',
    ),
    _question(
        'oc_experimentation', 'organizational_culture',
        'Do teams have time and permission to experiment with new tools?', 'single', 1.0,
        options=[
            _opt('no', 'Rarely', 0),
            _opt('adhoc', 'Ad hoc, depends on the manager', 3),
            _opt('yes', 'Yes, experimentation is encouraged', 6),
        ],
    ),
    _question(
        'oc_team_collaboration', 'organizational_culture',
        'How openly does your team share AI tips and workflows?', 'rating', 1.0,
        min_value=1, max_value=5,
        help_text='1 = everyone works alone, 5 = shared prompt libraries and demos',
        assessment_types=['internal'],
    ),
    # Data & infrastructure
    _question(
        'di_data_quality', 'data_infrastructure',
        'How would you rate the quality and accessibility of your business data?', 'rating', 1.5,
        min_value=1, max_value=5,
    ),
    _question(
        'di_data_platform', 'data_infrastructure',
        'Where does most of your operational data live?', 'single', 1.0,
        options=[
            _opt('spreadsheets', 'Spreadsheets and email', 0),
            _opt('silos', 'Several disconnected systems', 2),
            _opt('warehouse', 'A central data warehouse', 4),
            _opt('lakehouse', 'Governed lakehouse with catalog', 6),
        ],
        skip_logic={'condition': 'equals', 'value': 'spreadsheets', 'skip_dimension': True},
    ),
    _question(
        'di_cloud_maturity', 'data_infrastructure',
        'What share of your infrastructure runs in the cloud?', 'slider', 1.0,
        min_value=0, max_value=100,
        help_text='Percentage of workloads',
    ),
    # Technical capabilities
    _question(
        'tc_api_readiness', 'technical_capabilities',
        'Do your core systems expose APIs for integration?', 'single', 1.5,
        options=[
            _opt('none', 'No APIs', 0),
            _opt('some', 'Some systems', 3),
            _opt('most', 'Most systems, documented', 6),
        ],
    ),
    _question(
        'tc_integration_tools', 'technical_capabilities',
        'Which integration capabilities are in place today?', 'multiple', 1.0,
        options=[
            _opt('ipaas', 'iPaaS / automation platform', 2),
            _opt('sso', 'Single sign-on', 2),
            _opt('event_bus', 'Event streaming', 2),
            _opt('none', 'None of these', 0),
        ],
    ),
    _question(
        'tc_it_skills', 'technical_capabilities',
        'Rate your IT team\'s familiarity with AI and ML tooling.', 'rating', 1.0,
        min_value=1, max_value=5,
    ),
    # Talent & skills
    _question(
        'ts_proficiency', 'talent_skills',
        'What share of staff uses AI tools at least weekly?', 'single', 1.5,
        options=[
            _opt('lt10', 'Under 10%', 0),
            _opt('10_40', '10-40%', 2),
            _opt('40_70', '40-70%', 4),
            _opt('gt70', 'Over 70%', 6),
        ],
    ),
    _question(
        'ts_training', 'talent_skills',
        'Is there a structured AI training program?', 'single', 1.0,
        options=[
            _opt('no', 'No', 0),
            _opt('planned', 'Planned', 2),
            _opt('yes', 'Yes, with role-based tracks', 6),
        ],
    ),
    _question(
        'ts_personal_usage', 'talent_skills',
        'How often do you use AI assistants in your own daily work?', 'single', 1.5,
        options=[
            _opt('never', 'Never', 0),
            _opt('monthly', 'A few times a month', 2),
            _opt('weekly', 'Weekly', 4),
            _opt('daily', 'Every day', 6),
        ],
        assessment_types=['internal'],
    ),
    _question(
        'ts_automation_candidates', 'talent_skills',
        'Which parts of your role could AI take on today?', 'multiple', 1.0,
        options=[
            _opt('drafting', 'Drafting documents and email', 2),
            _opt('research', 'Research and summarising', 2),
            _opt('reporting', 'Reporting and data prep', 2),
            _opt('none', 'None of these', 0),
        ],
        assessment_types=['internal'],
    ),
    _question(
        'ts_prompt_confidence', 'talent_skills',
        'Rate your confidence writing effective prompts.', 'rating', 1.0,
        min_value=1, max_value=5,
        assessment_types=['internal'],
    ),
    # Governance & compliance
    _question(
        'gc_policy', 'governance_compliance',
        'Does your organization have an approved AI acceptable-use policy?', 'single', 1.5,
        options=[
            _opt('no', 'No', 0),
            _opt('draft', 'Draft in progress', 3),
            _opt('yes', 'Yes, approved and communicated', 6),
        ],
    ),
    _question(
        'gc_frameworks', 'governance_compliance',
        'Which compliance frameworks do you currently operate under?', 'multiple', 1.0,
        assessment_types=['external'],
        options=[
            _opt('soc2', 'SOC 2', 2),
            _opt('iso27001', 'ISO 27001', 2),
            _opt('hipaa', 'HIPAA', 1),
            _opt('gdpr', 'GDPR', 1),
        ],
    ),
    _question(
        'gc_notes', 'governance_compliance',
        'Describe any regulatory constraints on AI use.', 'text', 0.5,
        required=False,
    ),
    # Business strategy
    _question(
        'bs_use_cases', 'business_strategy',
        'How many AI use cases have been identified and prioritized?', 'single', 1.5,
        assessment_types=['external'],
        options=[
            _opt('none', 'None yet', 0),
            _opt('few', '1-3 ideas', 2),
            _opt('backlog', 'A prioritized backlog', 4),
            _opt('roadmap', 'Funded roadmap with owners', 6),
        ],
    ),
    _question(
        'bs_personal_use_cases', 'business_strategy',
        'How many of your recurring tasks have you already tried with AI?', 'single', 1.5,
        options=[
            _opt('none', 'None', 0),
            _opt('one', 'One or two', 3),
            _opt('several', 'Several, with repeatable prompts', 6),
        ],
        assessment_types=['internal'],
    ),
    _question(
        'bs_alignment', 'business_strategy',
        'Rate how well AI goals align with company strategy.', 'rating', 1.0,
        min_value=1, max_value=5,
    ),
    # Budget & resources
    _question(
        'br_budget', 'budget_resources',
        'Is there a dedicated budget for AI initiatives this year?', 'single', 1.5,
        assessment_types=['external'],
        options=[
            _opt('none', 'No budget', 0),
            _opt('discretionary', 'Discretionary spend only', 2),
            _opt('dedicated', 'Dedicated budget line', 6),
        ],
    ),
    _question(
        'br_headcount', 'budget_resources',
        'Rate the availability of people to own AI projects.', 'rating', 1.0,
        min_value=1, max_value=5,
        assessment_types=['external'],
    ),
]


def get_questions_for_type(
    assessment_type: str,
    questions: Optional[List[Dict[str, Any]]] = None,
) -> List[Dict[str, Any]]:
    """Questions asked in an internal or external assessment; untagged questions apply to both."""
    questions = questions if questions is not None else ASSESSMENT_QUESTIONS
    return [q for q in questions if assessment_type in q.get('assessment_types', ASSESSMENT_TYPES)]
