"""
Symphony Engine
===============
RACI lookups, agent network graph and dashboard metrics for the Symphony
agent orchestration view.
"""

import math
from itertools import combinations
from typing import Any, Dict, List, Optional

import pandas as pd

from catalog.symphony import (
    AGENT_NAMES,
    DEFAULT_AGENTS,
    METRIC_FALLBACKS,
    PHASE_NAMES,
    RACI_MATRIX,
    RACI_ROLES,
)
from rounding import round_half_up


def get_raci_role(agent: str, phase: str) -> Optional[str]:
    return RACI_MATRIX.get(agent, {}).get(phase)


def raci_counts(phase: str) -> Dict[str, int]:
    """Number of agents holding each RACI role in a phase."""
    counts = {role: 0 for role in RACI_ROLES}
    for agent in AGENT_NAMES:
        role = get_raci_role(agent, phase)
        if role:
            counts[role] += 1
    return counts


def raci_frame() -> pd.DataFrame:
    """Agents x phases grid of RACI letters."""
    return pd.DataFrame(
        [[get_raci_role(agent, phase) or '' for phase in PHASE_NAMES] for agent in AGENT_NAMES],
        index=AGENT_NAMES,
        columns=PHASE_NAMES,
    )


def agents_for_phase(phase: str, role: Optional[str] = None) -> List[str]:
    return [
        agent for agent in AGENT_NAMES
        if get_raci_role(agent, phase) and (role is None or get_raci_role(agent, phase) == role)
    ]


def network_graph(agents: Optional[List[Dict[str, Any]]] = None) -> Dict[str, List[Dict[str, Any]]]:
    """
    Agents as nodes on a circle, with an edge between every pair of agents
    assigned to the same phase.

    Returns:
        Dict with ``nodes`` (name, phase, role_type, x, y) and ``edges``
        (source, target, phase)
    """
    agents = agents if agents is not None else DEFAULT_AGENTS
    count = len(agents)
    nodes = []
    for index, agent in enumerate(agents):
        angle = 2 * math.pi * index / count if count else 0
        nodes.append({
            'name': agent['name'],
            'phase': agent.get('phase'),
            'role_type': agent.get('role_type'),
            'x': round(math.cos(angle), 6),
            'y': round(math.sin(angle), 6),
        })

    edges = [
        {'source': a['name'], 'target': b['name'], 'phase': a.get('phase')}
        for a, b in combinations(agents, 2)
        if a.get('phase') is not None and a.get('phase') == b.get('phase')
    ]
    return {'nodes': nodes, 'edges': edges}


def _average(values: List[float]) -> float:
    return round_half_up(sum(values) / len(values), 1)


def dashboard_metrics(agents: Optional[List[Dict[str, Any]]] = None,
                      phases: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    """
    Metrics bar values from live agents and phases, with fixed fallbacks
    when nothing has been initialized yet.
    """
    agents = agents or []
    phases = phases or []

    tasks_completed = sum(p.get('tasks_completed') or 0 for p in phases) or METRIC_FALLBACKS['tasks_completed']
    active = sum(1 for a in agents if a.get('current_status') in ('active', 'busy')) or METRIC_FALLBACKS['active_agents']

    if agents:
        efficiency = _average([float(a.get('efficiency_score') or 0) for a in agents])
        response_time = _average([float(a.get('avg_response_time') or 0) for a in agents])
    else:
        efficiency = METRIC_FALLBACKS['avg_efficiency']
        response_time = METRIC_FALLBACKS['avg_response_time']

    return {
        'tasks_completed': tasks_completed,
        'active_agents': active,
        'total_agents': len(agents) or METRIC_FALLBACKS['total_agents'],
        'avg_efficiency': efficiency,
        'avg_response_time': response_time,
        'completed_phases': sum(1 for p in phases if p.get('status') == 'complete'),
        'total_phases': len(phases) or METRIC_FALLBACKS['total_phases'],
    }
