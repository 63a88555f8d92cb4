"""
Platform Engine
===============
Search, filter, sort, compare and export the enterprise AI platform catalog.

This module is unit-testable and can be used independently of Streamlit.
"""

import csv
import io
from datetime import date
from typing import Any, Dict, List, Optional

import pandas as pd

from catalog.platforms import CAPABILITY_LABELS, DEPARTMENTS, ENTERPRISE_PLATFORMS

MAX_COMPARED_PLATFORMS = 4

SORT_OPTIONS = {
    'name': 'Name',
    'market_share': 'Market Share',
    'pricing': 'Price (low to high)',
    'compliance': 'Compliance Score',
    'integration': 'Integration Score',
}

CSV_HEADER = (
    'Platform,Provider,Model,Market Share,Context Window,Monthly Price,'
    'Compliance Score,Integration Score,Priority,Departments'
)


def get_providers(platforms: Optional[List[Dict[str, Any]]] = None) -> List[str]:
    platforms = platforms if platforms is not None else ENTERPRISE_PLATFORMS
    return sorted({p['provider'] for p in platforms})


def get_platform(platform_id: str) -> Optional[Dict[str, Any]]:
    return next((p for p in ENTERPRISE_PLATFORMS if p['id'] == platform_id), None)


def filter_platforms(
    platforms: Optional[List[Dict[str, Any]]] = None,
    query: str = '',
    providers: Optional[List[str]] = None,
    priority: str = '',
    sort_by: str = 'name',
) -> List[Dict[str, Any]]:
    """
    Apply search, provider and priority filters, then sort.

    Args:
        platforms: Platform records (defaults to the full catalog)
        query: Case-insensitive text matched against name, provider, model, focus
        providers: Keep only these providers when non-empty
        priority: Keep only platforms with this recommendation priority
        sort_by: One of SORT_OPTIONS keys; anything else sorts by name

    Returns:
        New list of matching platforms
    """
    result = list(platforms if platforms is not None else ENTERPRISE_PLATFORMS)

    if query:
        needle = query.lower()
        result = [
            p for p in result
            if any(needle in str(p.get(field, '')).lower() for field in ('name', 'provider', 'model', 'focus'))
        ]

    if providers:
        result = [p for p in result if p['provider'] in providers]

    if priority:
        result = [p for p in result if p['recommendation']['priority'] == priority]

    if sort_by == 'market_share':
        result.sort(key=lambda p: p.get('market_share_pct', 0), reverse=True)
    elif sort_by == 'pricing':
        result.sort(key=lambda p: p.get('monthly_price') or 0)
    elif sort_by == 'compliance':
        result.sort(key=lambda p: p.get('compliance_score', 0), reverse=True)
    elif sort_by == 'integration':
        result.sort(key=lambda p: p.get('integration_score', 0), reverse=True)
    else:
        result.sort(key=lambda p: p['name'].lower())

    return result


def toggle_comparison(selected: List[str], platform_id: str,
                      limit: int = MAX_COMPARED_PLATFORMS) -> List[str]:
    """Add or remove a platform id; additions beyond ``limit`` are ignored."""
    if platform_id in selected:
        return [pid for pid in selected if pid != platform_id]
    if len(selected) >= limit:
        return list(selected)
    return [*selected, platform_id]


def platforms_to_csv(platforms: List[Dict[str, Any]]) -> str:
    """Serialize platforms to the explorer's CSV layout."""
    rows = []
    for p in platforms:
        rows.append({
            'Platform': p['name'],
            'Provider': p['provider'],
            'Model': p['model'],
            'Market Share': p['market_share'],
            'Context Window': p['context_window'],
            'Monthly Price': str(p.get('monthly_price') or 'Custom'),
            'Compliance Score': p['compliance_score'],
            'Integration Score': p['integration_score'],
            'Priority': p['recommendation']['priority'],
            'Departments': '; '.join(p['recommendation']['departments']),
        })

    buffer = io.StringIO()
    buffer.write(CSV_HEADER + '\n')
    if rows:
        df = pd.DataFrame(rows)
        df.to_csv(buffer, header=False, index=False,
                  quoting=csv.QUOTE_NONNUMERIC, lineterminator='\n')
    return buffer.getvalue()


def export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"INT_AI_Platforms_{today.isoformat()}.csv"


def get_department(department_id: str) -> Optional[Dict[str, Any]]:
    return DEPARTMENTS.get(department_id)


def platforms_for_department(department_id: str) -> List[Dict[str, Any]]:
    """
    Platforms relevant to a department: its primary and secondary platform
    first, then any platform whose recommendation names the department.
    """
    department = DEPARTMENTS.get(department_id)
    if not department:
        return []

    by_name = {p['name']: p for p in ENTERPRISE_PLATFORMS}
    ordered = []
    for key in ('primary_platform', 'secondary_platform'):
        platform = by_name.get(department.get(key))
        if platform and platform not in ordered:
            ordered.append(platform)

    dept_name = department['name'].lower()
    for platform in ENTERPRISE_PLATFORMS:
        if platform in ordered:
            continue
        named = [d.lower() for d in platform['recommendation']['departments']]
        if any(d in dept_name or dept_name in d for d in named):
            ordered.append(platform)
    return ordered


def capability_radar(platform_ids: List[str]) -> pd.DataFrame:
    """
    Long-form capability scores for a radar chart.

    Returns:
        DataFrame with columns platform, capability, score
    """
    records = []
    for pid in platform_ids:
        platform = get_platform(pid)
        if not platform:
            continue
        for key, label in CAPABILITY_LABELS.items():
            records.append({
                'platform': platform['name'],
                'capability': label,
                'score': platform['capabilities'].get(key, 0),
            })
    return pd.DataFrame(records, columns=['platform', 'capability', 'score'])


def comparison_table(platform_ids: List[str]) -> pd.DataFrame:
    """Side-by-side attribute table indexed by attribute, one column per platform."""
    columns = {}
    for pid in platform_ids:
        p = get_platform(pid)
        if not p:
            continue
        columns[p['name']] = {
            'Provider': p['provider'],
            'Model': p['model'],
            'Pricing': p['pricing'],
            'Context Window': p['context_window'],
            'Market Share': p['market_share'],
            'Compliance': ', '.join(p['compliance']),
            'Compliance Score': p['compliance_score'],
            'Integration Score': p['integration_score'],
            'ROI': p.get('roi', ''),
            'Implementation': p.get('implementation_time', ''),
            'Priority': p['recommendation']['priority'],
        }
    return pd.DataFrame(columns)
