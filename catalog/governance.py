"""
Sample AI governance records: usage logs, policies, bias scans and audit trail.
"""

from typing import Any, Dict, List

GOVERNED_AGENTS = ['Claude', 'GPT-4', 'Gemini']

USAGE_LOGS: List[Dict[str, Any]] = [
    {'id': '1', 'agent_name': 'Claude', 'action': 'Document Generation', 'tokens': 1250, 'created_date': '2025-01-20T10:30:00Z', 'user': 'john@company.com', 'status': 'success'},
    {'id': '2', 'agent_name': 'GPT-4', 'action': 'Code Review', 'tokens': 2100, 'created_date': '2025-01-20T09:15:00Z', 'user': 'sarah@company.com', 'status': 'success'},
    {'id': '3', 'agent_name': 'Gemini', 'action': 'Data Analysis', 'tokens': 890, 'created_date': '2025-01-19T16:45:00Z', 'user': 'mike@company.com', 'status': 'success'},
    {'id': '4', 'agent_name': 'Claude', 'action': 'Report Writing', 'tokens': 1800, 'created_date': '2025-01-19T14:20:00Z', 'user': 'john@company.com', 'status': 'success'},
    {'id': '5', 'agent_name': 'GPT-4', 'action': 'Translation', 'tokens': 650, 'created_date': '2025-01-19T11:00:00Z', 'user': 'lisa@company.com', 'status': 'warning'},
]

POLICIES: List[Dict[str, Any]] = [
    {'id': '1', 'name': 'Data Retention Policy', 'status': 'active', 'category': 'Data', 'last_updated': '2025-01-15', 'compliance': 95},
    {'id': '2', 'name': 'AI Usage Limits', 'status': 'active', 'category': 'Usage', 'last_updated': '2025-01-18', 'compliance': 100},
    {'id': '3', 'name': 'PII Protection', 'status': 'active', 'category': 'Privacy', 'last_updated': '2025-01-10', 'compliance': 98},
    {'id': '4', 'name': 'Model Access Control', 'status': 'active', 'category': 'Security', 'last_updated': '2025-01-20', 'compliance': 100},
    {'id': '5', 'name': 'Audit Trail Requirements', 'status': 'active', 'category': 'Compliance', 'last_updated': '2025-01-12', 'compliance': 92},
]

BIAS_SCANS: List[Dict[str, Any]] = [
    {
        'id': '1', 'scan_date': '2025-01-20', 'agent': 'All Agents',
        'overall_score': 92, 'gender_bias': 96, 'racial_bias': 94, 'age_bias': 90,
        'recommendations': ['Review age-related prompts', 'Update training data'],
    },
    {
        'id': '2', 'scan_date': '2025-01-13', 'agent': 'Claude',
        'overall_score': 95, 'gender_bias': 97, 'racial_bias': 96, 'age_bias': 93,
        'recommendations': ['Minor age bias in historical data'],
    },
    {
        'id': '3', 'scan_date': '2025-01-06', 'agent': 'GPT-4',
        'overall_score': 88, 'gender_bias': 92, 'racial_bias': 90, 'age_bias': 85,
        'recommendations': ['Review hiring-related outputs'],
    },
]

AUDIT_LOG: List[Dict[str, Any]] = [
    {'id': '1', 'action': 'Policy Updated', 'user': 'admin@company.com', 'timestamp': '2025-01-20T14:30:00Z', 'details': 'Updated Data Retention Policy'},
    {'id': '2', 'action': 'Bias Scan Completed', 'user': 'system', 'timestamp': '2025-01-20T12:00:00Z', 'details': 'Weekly automated scan'},
    {'id': '3', 'action': 'Access Revoked', 'user': 'admin@company.com', 'timestamp': '2025-01-19T16:45:00Z', 'details': 'Removed API access for deprecated key'},
    {'id': '4', 'action': 'New Policy Created', 'user': 'admin@company.com', 'timestamp': '2025-01-18T10:00:00Z', 'details': 'Created AI Usage Limits policy'},
    {'id': '5', 'action': 'User Access Granted', 'user': 'admin@company.com', 'timestamp': '2025-01-17T09:30:00Z', 'details': 'Added new team member access'},
]

# Bias scans at or above this score are shown as passing
BIAS_PASS_THRESHOLD = 90
