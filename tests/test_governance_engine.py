"""
Unit Tests for Governance Engine
================================
"""

from catalog.governance import BIAS_PASS_THRESHOLD
from governance_engine import (
    average_bias_score,
    average_compliance,
    bias_scan_passed,
    filter_audit_log,
    governance_summary,
    tokens_by_agent,
    total_tokens,
    warning_count,
)

LOGS = [
    {'agent_name': 'Claude', 'tokens': 1000, 'status': 'success'},
    {'agent_name': 'GPT-4', 'tokens': 2500, 'status': 'warning'},
    {'agent_name': 'Claude', 'tokens': 2000, 'status': 'success'},
]

AUDIT = [
    {'action': 'Policy Updated', 'user': 'admin', 'timestamp': '2025-01-18T10:00:00Z', 'details': 'Retention'},
    {'action': 'Access Revoked', 'user': 'admin', 'timestamp': '2025-01-20T10:00:00Z', 'details': 'Old key'},
    {'action': 'Bias Scan', 'user': 'system', 'timestamp': '2025-01-19T10:00:00Z', 'details': 'Weekly policy check'},
]


class TestUsage:
    """Tests for usage roll-ups."""

    def test_totals(self):
        """Test token total and warning count."""
        assert total_tokens(LOGS) == 5500
        assert warning_count(LOGS) == 1

    def test_tokens_by_agent_sorted(self):
        """Test per-agent totals largest first."""
        frame = tokens_by_agent(LOGS)
        assert list(frame['agent_name']) == ['Claude', 'GPT-4']
        assert list(frame['tokens']) == [3000, 2500]

    def test_tokens_by_agent_empty(self):
        """Test an empty log gives an empty frame."""
        frame = tokens_by_agent([])
        assert frame.empty
        assert list(frame.columns) == ['agent_name', 'tokens']


class TestPoliciesAndBias:
    """Tests for compliance and bias roll-ups."""

    def test_average_compliance(self):
        """Test rounding to one decimal."""
        assert average_compliance([{'compliance': 90}, {'compliance': 85}, {'compliance': 80}]) == 85.0
        assert average_compliance([]) == 0.0

    def test_bias_threshold(self):
        """Test the pass threshold is inclusive."""
        assert bias_scan_passed({'overall_score': BIAS_PASS_THRESHOLD})
        assert not bias_scan_passed({'overall_score': BIAS_PASS_THRESHOLD - 0.1})

    def test_average_bias(self):
        """Test average over scans."""
        assert average_bias_score([{'overall_score': 92}, {'overall_score': 87}]) == 89.5
        assert average_bias_score([]) == 0.0


class TestAuditLog:
    """Tests for audit log filtering."""

    def test_newest_first(self):
        """Test entries come back newest first."""
        result = filter_audit_log(AUDIT)
        assert [e['action'] for e in result] == ['Access Revoked', 'Bias Scan', 'Policy Updated']

    def test_query_matches_action_or_details(self):
        """Test free text covers both fields."""
        result = filter_audit_log(AUDIT, query='POLICY')
        assert [e['action'] for e in result] == ['Bias Scan', 'Policy Updated']

    def test_user_filter(self):
        """Test exact user match."""
        assert [e['action'] for e in filter_audit_log(AUDIT, user='system')] == ['Bias Scan']


class TestSummary:
    """Tests for the summary block."""

    def test_summary_keys(self):
        """Test the summary covers every headline metric."""
        summary = governance_summary()
        assert set(summary) == {'total_tokens', 'active_policies', 'average_compliance',
                                'warnings', 'average_bias_score'}
        assert summary['total_tokens'] > 0
