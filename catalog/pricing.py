"""
Pricing toolkit catalog: plan feature comparison, sales objections, data
triage matrix, department ROI, pilot budget and the elevator pitch.
"""

from typing import Any, Dict, List

PRICING_TIERS = ['starter', 'professional', 'enterprise']


def _features(category: str, rows: List[tuple]) -> List[Dict[str, Any]]:
    return [
        {'name': name, 'category': category, 'starter': s, 'professional': p, 'enterprise': e}
        for name, s, p, e in rows
    ]


FEATURE_COMPARISON: List[Dict[str, Any]] = (
    _features('Personas & Users', [
        ('Employee Personas', '10', '50', 'Unlimited'),
        ('Team Members', '5', '25', 'Unlimited'),
        ('Admin Accounts', '1', '5', 'Unlimited'),
        ('Role-Based Access Control', False, True, True),
    ])
    + _features('Ecosystem Exports', [
        ('Claude Export', True, True, True),
        ('Google Gemini Export', True, True, True),
        ('Microsoft Copilot Export', False, True, True),
        ('OpenAI/ChatGPT Export', False, True, True),
        ('Custom API JSON Export', False, True, True),
        ('n8n Workflow Templates', False, True, True),
        ('Bulk Export (ZIP)', False, True, True),
    ])
    + _features('Knowledge Base', [
        ('Knowledge Documents', '5', 'Unlimited', 'Unlimited'),
        ('Document Versioning', False, True, True),
        ('Folder Organization', True, True, True),
        ('AI Document Generation', '10/mo', '100/mo', 'Unlimited'),
    ])
    + _features('Analytics & Reporting', [
        ('Basic Analytics', True, True, True),
        ('Advanced Analytics', False, True, True),
        ('Usage Reports', False, True, True),
        ('Custom Dashboards', False, False, True),
        ('API Usage Metrics', False, True, True),
    ])
    + _features('Integration & API', [
        ('REST API Access', False, True, True),
        ('Webhooks', False, True, True),
        ('API Rate Limit', '-', '1K/day', 'Unlimited'),
        ('Zapier/Make Integration', False, True, True),
    ])
    + _features('Security & Compliance', [
        ('SSO (SAML/OIDC)', False, False, True),
        ('Audit Logs', False, True, True),
        ('Data Encryption', True, True, True),
        ('GDPR Compliance', True, True, True),
        ('SOC 2 Type II', False, True, True),
        ('HIPAA Compliance', False, False, True),
        ('On-Premise Deployment', False, False, True),
    ])
    + _features('Support', [
        ('Email Support', True, True, True),
        ('Priority Support', False, True, True),
        ('Dedicated Success Manager', False, False, True),
        ('Custom SLAs', False, False, True),
        ('Training Sessions', False, '2/year', 'Unlimited'),
        ('White-Label Options', False, False, True),
    ])
)

OBJECTIONS: List[Dict[str, str]] = [
    {
        'objection': 'We already pay for Copilot. Why should we pay for more tools?',
        'response': (
            "Think of Copilot like a General Practitioner doctor: essential for general health. "
            "But sometimes you need a Specialist. For complex coding or deep market research, Copilot "
            "often hallucinates or gets stuck. For just $20/month, a 'Specialist' tool like Claude can "
            "save an engineer 5 hours. The ROI on that $20 is instant."
        ),
        'data_point': 'Claude Pro at $20/month = 5 hours saved per engineer = $250+ value at $50/hr loaded cost',
    },
    {
        'objection': "I'm worried about security. I don't want company data on other servers.",
        'response': (
            "I agree 100%. That is why the Data Triage Matrix is the core of this proposal. We are "
            "strictly prohibiting Client PII in these new tools. We will only use them for non-sensitive "
            "tasks like code syntax, public market research, and generic drafting. Secure data stays in "
            "Microsoft. Speed goes to the others."
        ),
        'data_point': 'All recommended platforms (Claude, Perplexity) have SOC 2 Type II certification and zero data retention policies',
    },
    {
        'objection': "This sounds complicated to manage. We don't want Shadow IT.",
        'response': (
            "Actually, 'Shadow IT' is happening right now. People are likely using personal ChatGPT "
            "accounts because they need the help. By sanctioning a Pilot Program, we bring that activity "
            "into the light, govern it, and actually see what works. It gives us control back, rather "
            "than losing it."
        ),
        'data_point': 'Industry surveys show 60-70% of employees use unauthorized AI tools. Sanctioned pilots reduce risk.',
    },
]

DATA_TRIAGE_MATRIX: List[Dict[str, str]] = [
    {'type': 'Client PII', 'platform': 'Microsoft ONLY', 'level': 'RESTRICTED', 'examples': 'SSN, financials, health data'},
    {'type': 'Internal Docs', 'platform': 'Microsoft + Claude', 'level': 'CONFIDENTIAL', 'examples': 'SOPs, runbooks, policies'},
    {'type': 'Code/Technical', 'platform': 'Claude + ChatGPT', 'level': 'STANDARD', 'examples': 'PowerShell, Python, configs'},
    {'type': 'Market Research', 'platform': 'Perplexity + Gemini', 'level': 'PUBLIC', 'examples': 'Vendor intel, industry trends'},
    {'type': 'Creative Content', 'platform': 'ChatGPT + Gemini', 'level': 'PUBLIC', 'examples': 'Blog drafts, social, emails'},
]

TRIAGE_LEVEL_COLORS = {
    'RESTRICTED': '#EF4444',
    'CONFIDENTIAL': '#F59E0B',
    'STANDARD': '#3B82F6',
    'PUBLIC': '#10B981',
}

DEPARTMENT_ROI: List[Dict[str, str]] = [
    {'department': 'IT Services', 'platform': 'Copilot + Claude', 'time_savings': '30-40%', 'cost_impact': '50-60%', 'roi': '800-1000%'},
    {'department': 'InfoSec', 'platform': 'Claude', 'time_savings': '69%', 'cost_impact': '50-60%', 'roi': '800-1000%'},
    {'department': 'Marketing', 'platform': 'Gemini + ChatGPT', 'time_savings': '63%', 'cost_impact': '40-50%', 'roi': '800-1200%'},
    {'department': 'Creative', 'platform': 'ChatGPT + Copilot', 'time_savings': '38%', 'cost_impact': '25-30%', 'roi': '500-700%'},
    {'department': 'Operations', 'platform': 'Claude + Copilot', 'time_savings': '70%', 'cost_impact': '50-60%', 'roi': '600-900%'},
]

PILOT_BUDGET: List[Dict[str, Any]] = [
    {'item': 'Claude Pro (5 licenses x $20 x 5 months)', 'cost': '$500', 'is_total': False},
    {'item': 'Perplexity Pro (optional, 2 licenses x $20 x 3 months)', 'cost': '$120', 'is_total': False},
    {'item': 'Total Pilot Investment', 'cost': '$500-$620', 'is_total': True},
]

ELEVATOR_PITCH = """Good morning/afternoon. Thank you for the time.

We all know AI is shifting the landscape. Right now, we have a strong foundation with Microsoft 365 and Copilot. It's excellent for keeping our internal data secure and searchable.

However, as I've been digging into our workflows, I've noticed a 'Capability Gap.' While Copilot is a great Librarian, it isn't always the best Analyst or Coder.

Competitors who are using tools like Perplexity for real-time market research, or Claude for complex code generation, are moving faster than us.

My goal today isn't to replace Copilot. It's to diversify our toolkit. I want to show you how a low-cost, high-security pilot program can help us reclaim about 15% of our team's time for higher-value work.

Let's look at the numbers."""

PITCH_PHRASES: List[Dict[str, str]] = [
    {'phrase': 'Diversify our toolkit', 'note': 'Not replacing, adding options'},
    {'phrase': 'Capability Gap', 'note': 'Technical term that sounds strategic'},
    {'phrase': 'Librarian vs. Analyst', 'note': 'Memorable metaphor'},
    {'phrase': 'Low-cost, high-security', 'note': 'Addresses two biggest concerns upfront'},
]

KEY_NUMBERS: List[Dict[str, str]] = [
    {'label': 'Year 1 Investment', 'value': '$50K-$75K'},
    {'label': 'Time Savings', 'value': '15-22%'},
    {'label': '3-Year ROI', 'value': '626%'},
    {'label': 'Breakeven', 'value': 'Month 6'},
]

# ROI calculator defaults
DEFAULT_ROI_INPUTS: Dict[str, float] = {
    'employees': 100,
    'average_salary': 75000,
    'adoption_percentage': 50,
    'weekly_productivity_gain': 5,
    'annual_platform_cost': 50000,
    'training_cost': 10000,
}

HOURS_PER_YEAR = 2080
WORKING_WEEKS = 48
ADOPTION_GROWTH = 1.15
MAX_PAYBACK_MONTHS = 999

# Pricing widget constants
WIDGET_HOURS_SAVED_PER_EMPLOYEE = 5
WIDGET_HOURLY_RATE = 50
CONSOLIDATION_RATE = 0.3
STARTER_PRICE = 299
PROFESSIONAL_PRICE = 799
ENTERPRISE_SEAT_PRICE = 15
