"""
Governance Engine
=================
Roll-ups over AI usage logs, policies, bias scans and the audit trail.
"""

from typing import Any, Dict, List, Optional

import pandas as pd

from catalog.governance import AUDIT_LOG, BIAS_PASS_THRESHOLD, BIAS_SCANS, POLICIES, USAGE_LOGS
from rounding import round_half_up


def total_tokens(logs: Optional[List[Dict[str, Any]]] = None) -> int:
    logs = logs if logs is not None else USAGE_LOGS
    return sum(log['tokens'] for log in logs)


def average_compliance(policies: Optional[List[Dict[str, Any]]] = None) -> float:
    policies = policies if policies is not None else POLICIES
    if not policies:
        return 0.0
    return round_half_up(sum(p['compliance'] for p in policies) / len(policies), 1)


def warning_count(logs: Optional[List[Dict[str, Any]]] = None) -> int:
    logs = logs if logs is not None else USAGE_LOGS
    return sum(1 for log in logs if log['status'] == 'warning')


def average_bias_score(scans: Optional[List[Dict[str, Any]]] = None) -> float:
    scans = scans if scans is not None else BIAS_SCANS
    if not scans:
        return 0.0
    return round_half_up(sum(s['overall_score'] for s in scans) / len(scans), 1)


def bias_scan_passed(scan: Dict[str, Any]) -> bool:
    return scan['overall_score'] >= BIAS_PASS_THRESHOLD


def tokens_by_agent(logs: Optional[List[Dict[str, Any]]] = None) -> pd.DataFrame:
    """Token totals per agent, largest first."""
    logs = logs if logs is not None else USAGE_LOGS
    if not logs:
        return pd.DataFrame(columns=['agent_name', 'tokens'])
    df = pd.DataFrame(logs)
    return (
        df.groupby('agent_name', as_index=False)['tokens'].sum()
        .sort_values('tokens', ascending=False)
        .reset_index(drop=True)
    )


def filter_audit_log(
    entries: Optional[List[Dict[str, Any]]] = None,
    query: str = '',
    user: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Filter audit entries by free text (action or details) and exact user.

    Entries are returned newest first.
    """
    entries = entries if entries is not None else AUDIT_LOG
    result = list(entries)
    if query:
        needle = query.lower()
        result = [e for e in result if needle in e['action'].lower() or needle in e['details'].lower()]
    if user:
        result = [e for e in result if e['user'] == user]
    return sorted(result, key=lambda e: e['timestamp'], reverse=True)


def governance_summary() -> Dict[str, Any]:
    return {
        'total_tokens': total_tokens(),
        'active_policies': sum(1 for p in POLICIES if p['status'] == 'active'),
        'average_compliance': average_compliance(),
        'warnings': warning_count(),
        'average_bias_score': average_bias_score(),
    }
