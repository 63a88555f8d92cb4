"""
Unit Tests for Symphony Engine
==============================
"""

import pytest

from catalog.symphony import AGENT_NAMES, METRIC_FALLBACKS, PHASE_NAMES
from symphony_engine import (
    agents_for_phase,
    dashboard_metrics,
    get_raci_role,
    network_graph,
    raci_counts,
    raci_frame,
)


class TestRACI:
    """Tests for RACI lookups."""

    def test_matrix_shape(self):
        """Test eleven agents across six phases."""
        frame = raci_frame()
        assert frame.shape == (11, 6)
        assert list(frame.index) == AGENT_NAMES
        assert list(frame.columns) == PHASE_NAMES

    def test_role_lookup(self):
        """Test single cell lookups."""
        assert get_raci_role('Strategist', 'Discovery') == 'A'
        assert get_raci_role('Strategist', 'Nowhere') is None
        assert get_raci_role('Nobody', 'Discovery') is None

    def test_counts(self):
        """Test every agent holds one role per phase."""
        counts = raci_counts('Discovery')
        assert counts == {'R': 1, 'A': 1, 'C': 4, 'I': 5}
        assert sum(counts.values()) == len(AGENT_NAMES)

    def test_agents_for_phase(self):
        """Test filtering by role."""
        assert agents_for_phase('Discovery', 'A') == ['Strategist']
        assert agents_for_phase('Evolution', 'R') == ['Analyst', 'Documenter']
        assert len(agents_for_phase('Delivery')) == len(AGENT_NAMES)


class TestNetwork:
    """Tests for the agent network graph."""

    def test_default_network(self):
        """Test agents sharing a phase are linked."""
        graph = network_graph()
        assert len(graph['nodes']) == 11
        pairs = {(e['source'], e['target']) for e in graph['edges']}
        assert ('Strategist', 'Researcher') in pairs
        assert len(pairs) == 5

    def test_nodes_on_unit_circle(self):
        """Test node coordinates lie on the unit circle."""
        for node in network_graph()['nodes']:
            assert node['x'] ** 2 + node['y'] ** 2 == pytest.approx(1, abs=1e-5)

    def test_empty_network(self):
        """Test no agents gives an empty graph."""
        assert network_graph([]) == {'nodes': [], 'edges': []}


class TestDashboardMetrics:
    """Tests for the metrics bar."""

    def test_fallbacks(self):
        """Test fixed values before initialization."""
        metrics = dashboard_metrics()
        assert metrics['tasks_completed'] == METRIC_FALLBACKS['tasks_completed']
        assert metrics['active_agents'] == 18
        assert metrics['avg_efficiency'] == 94.7
        assert metrics['total_agents'] == 11
        assert metrics['total_phases'] == 6
        assert metrics['completed_phases'] == 0

    def test_live_values(self):
        """Test averages and counts from live rows."""
        agents = [
            {'current_status': 'active', 'efficiency_score': 90, 'avg_response_time': 1.0},
            {'current_status': 'idle', 'efficiency_score': 81, 'avg_response_time': 2.0},
        ]
        phases = [
            {'status': 'complete', 'tasks_completed': 12},
            {'status': 'in-progress', 'tasks_completed': 4},
        ]
        metrics = dashboard_metrics(agents, phases)
        assert metrics['tasks_completed'] == 16
        assert metrics['active_agents'] == 1
        assert metrics['total_agents'] == 2
        assert metrics['avg_efficiency'] == 85.5
        assert metrics['avg_response_time'] == 1.5
        assert metrics['completed_phases'] == 1
        assert metrics['total_phases'] == 2
