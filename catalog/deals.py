"""
Deal comparison catalog and investor onboarding reference lists.
"""

from typing import Any, Dict, List, Optional


def _criterion(id: str, label: str, key: str, category: str, format: str,
               higher_is_better: Optional[bool] = None) -> Dict[str, Any]:
    return {
        'id': id,
        'label': label,
        'key': key,
        'category': category,
        'format': format,
        'higher_is_better': higher_is_better,
    }


COMPARISON_CATEGORIES = ['all', 'overview', 'fit', 'metrics', 'team', 'timeline']

COMPARISON_CRITERIA: List[Dict[str, Any]] = [
    _criterion('name', 'Deal Name', 'name', 'overview', 'text'),
    _criterion('industry', 'Industry', 'industry', 'overview', 'text'),
    _criterion('stage', 'Stage', 'stage', 'overview', 'text'),
    _criterion('amount', 'Deal Size', 'amount', 'overview', 'currency'),
    _criterion('match', 'Match Score', 'match', 'fit', 'match', True),
    _criterion('revenue', 'Revenue', 'metrics.revenue', 'metrics', 'currency', True),
    _criterion('revenue_growth', 'Revenue Growth', 'metrics.revenue_growth', 'metrics', 'percentage', True),
    _criterion('gross_margin', 'Gross Margin', 'metrics.gross_margin', 'metrics', 'percentage', True),
    _criterion('burn_rate', 'Burn Rate', 'metrics.burn_rate', 'metrics', 'currency', False),
    _criterion('runway', 'Runway (months)', 'metrics.runway', 'metrics', 'number', True),
    _criterion('customers', 'Customers', 'metrics.customers', 'metrics', 'number', True),
    _criterion('arr', 'ARR', 'metrics.arr', 'metrics', 'currency', True),
    _criterion('team_size', 'Team Size', 'team.size', 'team', 'number'),
    _criterion('founders', 'Founders', 'team.founders', 'team', 'number'),
    _criterion('advisors', 'Advisors', 'team.advisors', 'team', 'number'),
    _criterion('previous_exits', 'Previous Exits', 'team.previous_exits', 'team', 'boolean', True),
    _criterion('founded', 'Founded', 'timeline.founded', 'timeline', 'date'),
    _criterion('target_close', 'Target Close', 'timeline.target_close', 'timeline', 'date'),
    _criterion('due_diligence', 'DD Phase', 'timeline.due_diligence_phase', 'timeline', 'text'),
]

SAMPLE_DEALS: List[Dict[str, Any]] = [
    {
        'id': '1', 'name': 'TechVenture AI', 'industry': 'Technology', 'stage': 'Series A',
        'amount': 5000000, 'match': 95, 'trending': True,
        'description': 'AI-powered enterprise automation platform',
        'metrics': {'revenue': 1200000, 'revenue_growth': 180, 'gross_margin': 75, 'burn_rate': 250000,
                    'runway': 18, 'customers': 45, 'arr': 1200000, 'mrr': 100000},
        'team': {'size': 28, 'founders': 2, 'advisors': 4, 'previous_exits': True},
        'timeline': {'founded': '2021-03-15', 'last_round': '2022-06-01', 'target_close': '2024-03-31',
                     'due_diligence_phase': 'detailed'},
    },
    {
        'id': '2', 'name': 'HealthCore Systems', 'industry': 'Healthcare & Life Sciences', 'stage': 'Series B',
        'amount': 15000000, 'match': 88, 'trending': False,
        'description': 'Digital health infrastructure for hospitals',
        'metrics': {'revenue': 8500000, 'revenue_growth': 95, 'gross_margin': 68, 'burn_rate': 500000,
                    'runway': 24, 'customers': 120, 'arr': 8500000, 'mrr': 708333},
        'team': {'size': 85, 'founders': 3, 'advisors': 6, 'previous_exits': True},
        'timeline': {'founded': '2019-08-22', 'last_round': '2022-01-15', 'target_close': '2024-04-15',
                     'due_diligence_phase': 'final'},
    },
    {
        'id': '3', 'name': 'GreenEnergy Solutions', 'industry': 'Energy & Utilities', 'stage': 'Growth Equity',
        'amount': 25000000, 'match': 82, 'trending': True,
        'description': 'Renewable energy storage technology',
        'metrics': {'revenue': 22000000, 'revenue_growth': 65, 'gross_margin': 42, 'burn_rate': 800000,
                    'runway': 30, 'customers': 35, 'arr': 18000000},
        'team': {'size': 150, 'founders': 2, 'advisors': 8, 'previous_exits': False},
        'timeline': {'founded': '2017-01-10', 'last_round': '2021-09-20', 'target_close': '2024-06-30',
                     'due_diligence_phase': 'initial'},
    },
    {
        'id': '4', 'name': 'FinServe Platform', 'industry': 'Financial Services', 'stage': 'Series C+',
        'amount': 50000000, 'match': 78, 'trending': False,
        'description': 'B2B payments infrastructure',
        'metrics': {'revenue': 45000000, 'revenue_growth': 55, 'gross_margin': 58, 'burn_rate': 1200000,
                    'runway': 36, 'customers': 500, 'arr': 45000000, 'mrr': 3750000},
        'team': {'size': 220, 'founders': 4, 'advisors': 10, 'previous_exits': True},
        'timeline': {'founded': '2016-05-01', 'last_round': '2022-11-01', 'target_close': '2024-05-15',
                     'due_diligence_phase': 'detailed'},
    },
    {
        'id': '5', 'name': 'RetailTech Pro', 'industry': 'Consumer & Retail', 'stage': 'Series A',
        'amount': 8000000, 'match': 75, 'trending': True,
        'description': 'Omnichannel retail analytics',
        'metrics': {'revenue': 2500000, 'revenue_growth': 120, 'gross_margin': 72, 'burn_rate': 300000,
                    'runway': 20, 'customers': 85, 'arr': 2500000, 'mrr': 208333},
        'team': {'size': 35, 'founders': 2, 'advisors': 3, 'previous_exits': False},
        'timeline': {'founded': '2020-11-01', 'last_round': '2022-08-15', 'target_close': '2024-04-01',
                     'due_diligence_phase': 'initial'},
    },
    {
        'id': '6', 'name': 'LogiChain AI', 'industry': 'Transportation & Logistics', 'stage': 'Series B',
        'amount': 20000000, 'match': 72, 'trending': False,
        'description': 'AI-powered supply chain optimization',
        'metrics': {'revenue': 12000000, 'revenue_growth': 85, 'gross_margin': 55, 'burn_rate': 600000,
                    'runway': 28, 'customers': 200, 'arr': 12000000, 'mrr': 1000000},
        'team': {'size': 95, 'founders': 3, 'advisors': 5, 'previous_exits': True},
        'timeline': {'founded': '2018-06-15', 'last_round': '2022-03-01', 'target_close': '2024-07-31',
                     'due_diligence_phase': 'detailed'},
    },
]

MAX_COMPARED_DEALS = 4

# =============================================================================
# INVESTOR ONBOARDING
# =============================================================================

INVESTOR_ROLES = ['individual_investor', 'fund_manager', 'family_office', 'institutional', 'advisor']
EXPERIENCE_LEVELS = ['novice', 'intermediate', 'experienced', 'expert']
RISK_TOLERANCES = ['conservative', 'moderate', 'aggressive', 'very_aggressive']

INDUSTRIES = [
    'Technology', 'Healthcare & Life Sciences', 'Financial Services', 'Real Estate',
    'Energy & Utilities', 'Consumer & Retail', 'Industrial & Manufacturing',
    'Media & Entertainment', 'Transportation & Logistics', 'Agriculture & Food',
    'Education', 'Telecommunications',
]

DEAL_STRUCTURES = [
    'Equity', 'Debt', 'Convertible Notes', 'SAFE', 'Revenue-Based Financing',
    'Joint Venture', 'Mezzanine', 'Preferred Equity',
]

REGIONS = ['North America', 'Europe', 'Asia Pacific', 'Latin America', 'Middle East', 'Africa', 'Global']

DEAL_STAGES = ['Pre-Seed', 'Seed', 'Series A', 'Series B', 'Series C+', 'Growth Equity', 'Buyout', 'Secondary']

# Default deal-sourcing criteria for a new investor profile
DEFAULT_DEAL_SOURCING: Dict[str, Any] = {
    'target_industries': [],
    'investment_size_range': {'min': 100000, 'max': 1000000, 'currency': 'USD'},
    'preferred_deal_structures': [],
    'regions': [],
    'risk_tolerance': 'moderate',
    'deal_stages': [],
}

ROLE_PROFILES: Dict[str, Dict[str, Any]] = {
    'individual_investor': {
        'industries': ['Technology', 'Healthcare & Life Sciences', 'Consumer & Retail'],
        'dealStructures': ['Equity', 'SAFE', 'Convertible Notes'],
        'stages': ['Seed', 'Series A', 'Series B'],
        'riskProfile': 'moderate',
        'investmentRange': {'min': 25000, 'max': 250000},
    },
    'fund_manager': {
        'industries': ['Technology', 'Financial Services', 'Healthcare & Life Sciences', 'Industrial & Manufacturing'],
        'dealStructures': ['Equity', 'Preferred Equity', 'Mezzanine'],
        'stages': ['Series B', 'Series C+', 'Growth Equity'],
        'riskProfile': 'moderate',
        'investmentRange': {'min': 1000000, 'max': 25000000},
    },
    'family_office': {
        'industries': ['Real Estate', 'Energy & Utilities', 'Financial Services', 'Technology'],
        'dealStructures': ['Equity', 'Debt', 'Joint Venture', 'Preferred Equity'],
        'stages': ['Growth Equity', 'Buyout', 'Secondary'],
        'riskProfile': 'conservative',
        'investmentRange': {'min': 500000, 'max': 10000000},
    },
    'institutional': {
        'industries': ['Financial Services', 'Industrial & Manufacturing', 'Energy & Utilities', 'Technology'],
        'dealStructures': ['Equity', 'Debt', 'Mezzanine', 'Preferred Equity'],
        'stages': ['Series C+', 'Growth Equity', 'Buyout'],
        'riskProfile': 'conservative',
        'investmentRange': {'min': 5000000, 'max': 100000000},
    },
    'advisor': {
        'industries': ['Technology', 'Healthcare & Life Sciences', 'Financial Services'],
        'dealStructures': ['Equity', 'Convertible Notes', 'SAFE'],
        'stages': ['Seed', 'Series A', 'Series B', 'Series C+'],
        'riskProfile': 'moderate',
        'investmentRange': {'min': 50000, 'max': 500000},
    },
}

EXPERIENCE_MODIFIERS: Dict[str, Dict[str, Any]] = {
    'novice': {'risk_adjustment': -1, 'stage_preference': ['Seed', 'Series A'], 'diversification_advice': 'higher'},
    'intermediate': {'risk_adjustment': 0, 'stage_preference': None, 'diversification_advice': 'balanced'},
    'experienced': {'risk_adjustment': 0, 'stage_preference': None, 'diversification_advice': 'balanced'},
    'expert': {'risk_adjustment': 1, 'stage_preference': None, 'diversification_advice': 'flexible'},
}

FALLBACK_REGIONS = ['North America', 'Europe']
FALLBACK_REASONING = 'Based on your role and experience level.'
FALLBACK_TIPS = ['Start with familiar industries', 'Consider diversification']
