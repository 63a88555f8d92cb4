"""
Deal Engine
===========
Side-by-side deal comparison: value lookup and formatting, best-value
highlighting, deal selection, and fit against an investor's sourcing criteria.

This module is unit-testable and can be used independently of Streamlit.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

import pandas as pd

from catalog.deals import COMPARISON_CRITERIA, DEFAULT_DEAL_SOURCING, MAX_COMPARED_DEALS, SAMPLE_DEALS

MISSING = '—'


def get_nested_value(obj: Dict[str, Any], path: str) -> Any:
    """Follow a dotted path through nested dicts; None when any part is missing."""
    current: Any = obj
    for part in path.split('.'):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return None
    return current


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_value(value: Any, fmt: str) -> str:
    """
    Render a criterion value for display.

    Args:
        value: Raw value (None renders as an em dash placeholder)
        fmt: currency, percentage, number, boolean, date, match or text

    Returns:
        Display string
    """
    if value is None:
        return MISSING

    if fmt == 'currency':
        if _is_number(value):
            if value >= 1_000_000:
                return f"${value / 1_000_000:.1f}M"
            if value >= 1000:
                return f"${value / 1000:.0f}K"
            return f"${value}"
        return str(value)
    if fmt in ('percentage', 'match'):
        return f"{value}%"
    if fmt == 'number':
        return f"{value:,}" if _is_number(value) else str(value)
    if fmt == 'boolean':
        return 'Yes' if value else 'No'
    if fmt == 'date':
        try:
            return datetime.fromisoformat(str(value)[:10]).strftime('%b %Y')
        except ValueError:
            return str(value)
    return str(value)


def filter_criteria(category: str = 'all') -> List[Dict[str, Any]]:
    if category == 'all':
        return list(COMPARISON_CRITERIA)
    return [c for c in COMPARISON_CRITERIA if c['category'] == category]


def best_deal_id(criterion: Dict[str, Any], deals: List[Dict[str, Any]]) -> Optional[str]:
    """
    Id of the deal with the highest numeric value for a criterion.

    Only criteria marked higher-is-better are ranked; non-numeric values
    (including booleans) are ignored.
    """
    if not criterion.get('higher_is_better') or not deals:
        return None

    candidates = [
        (deal['id'], get_nested_value(deal, criterion['key']))
        for deal in deals
    ]
    candidates = [(deal_id, value) for deal_id, value in candidates if _is_number(value)]
    if not candidates:
        return None
    return max(candidates, key=lambda item: item[1])[0]


def toggle_deal(selected: List[str], deal_id: str, limit: int = MAX_COMPARED_DEALS) -> List[str]:
    if deal_id in selected:
        return [d for d in selected if d != deal_id]
    if len(selected) >= limit:
        return list(selected)
    return [*selected, deal_id]


def get_deals(deal_ids: List[str], deals: Optional[List[Dict[str, Any]]] = None) -> List[Dict[str, Any]]:
    """Deals matching ``deal_ids`` in catalog order."""
    deals = deals if deals is not None else SAMPLE_DEALS
    return [d for d in deals if d['id'] in deal_ids]


def risk_level(deal: Dict[str, Any]) -> str:
    metrics = deal.get('metrics', {})
    runway = metrics.get('runway')
    if runway and runway >= 24 and metrics.get('gross_margin', 0) >= 60:
        return 'low'
    if runway and runway < 12:
        return 'high'
    return 'medium'


def analyze_fit(deal: Dict[str, Any], sourcing: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Score a deal against deal-sourcing criteria.

    Args:
        deal: Deal record
        sourcing: Dict with target_industries, deal_stages,
            investment_size_range{min,max} and risk_tolerance; defaults to
            DEFAULT_DEAL_SOURCING

    Returns:
        Dict with industry, stage, size, risk booleans, risk_level,
        fit_count and fit_percentage
    """
    sourcing = sourcing or DEFAULT_DEAL_SOURCING
    industries = sourcing.get('target_industries') or []
    stages = sourcing.get('deal_stages') or []
    size_range = sourcing.get('investment_size_range') or DEFAULT_DEAL_SOURCING['investment_size_range']
    tolerance = sourcing.get('risk_tolerance', 'moderate')

    level = risk_level(deal)
    checks = {
        'industry': not industries or deal['industry'] in industries,
        'stage': not stages or deal['stage'] in stages,
        'size': size_range['min'] * 0.5 <= deal['amount'] <= size_range['max'] * 2,
        'risk': (
            (tolerance == 'conservative' and level == 'low')
            or (tolerance == 'moderate' and level != 'high')
            or tolerance in ('aggressive', 'very_aggressive')
        ),
    }
    fit_count = sum(1 for ok in checks.values() if ok)
    return {
        **checks,
        'risk_level': level,
        'fit_count': fit_count,
        'fit_percentage': fit_count / len(checks) * 100,
    }


def comparison_frame(deals: List[Dict[str, Any]], category: str = 'all') -> pd.DataFrame:
    """Formatted comparison grid: one row per criterion, one column per deal name."""
    criteria = filter_criteria(category)
    data = {
        deal['name']: [format_value(get_nested_value(deal, c['key']), c['format']) for c in criteria]
        for deal in deals
    }
    return pd.DataFrame(data, index=[c['label'] for c in criteria])
