"""
Symphony agent network: 11 specialist agents, 6 delivery phases and the RACI
matrix tying them together.
"""

from typing import Any, Dict, List

AGENT_STATUSES = ['idle', 'active', 'busy', 'offline']
PHASE_STATUSES = ['pending', 'in-progress', 'complete']
TASK_STATUSES = ['pending', 'in-progress', 'complete', 'blocked']
TASK_PRIORITIES = ['low', 'medium', 'high', 'critical']

DEFAULT_AGENTS: List[Dict[str, Any]] = [
    {'name': 'Strategist', 'icon': 'Target', 'role_type': 'A', 'phase': 1, 'description': 'Defines project vision and goals', 'capabilities': ['Strategic Planning', 'Goal Setting', 'Vision Definition']},
    {'name': 'Researcher', 'icon': 'Search', 'role_type': 'R', 'phase': 1, 'description': 'Gathers data and market intelligence', 'capabilities': ['Data Analysis', 'Market Research', 'Trend Analysis']},
    {'name': 'Architect', 'icon': 'Brain', 'role_type': 'A', 'phase': 2, 'description': 'Designs system architecture', 'capabilities': ['System Design', 'Technical Planning', 'Integration']},
    {'name': 'Developer', 'icon': 'Settings', 'role_type': 'R', 'phase': 3, 'description': 'Builds and implements solutions', 'capabilities': ['Coding', 'Testing', 'Deployment']},
    {'name': 'Analyst', 'icon': 'BarChart', 'role_type': 'C', 'phase': 2, 'description': 'Analyzes performance metrics', 'capabilities': ['Data Analysis', 'Reporting', 'Optimization']},
    {'name': 'Communicator', 'icon': 'MessageSquare', 'role_type': 'I', 'phase': 4, 'description': 'Manages stakeholder communications', 'capabilities': ['Communication', 'Documentation', 'Presentations']},
    {'name': 'Validator', 'icon': 'Shield', 'role_type': 'R', 'phase': 5, 'description': 'Ensures quality and compliance', 'capabilities': ['QA Testing', 'Compliance', 'Validation']},
    {'name': 'Integrator', 'icon': 'Zap', 'role_type': 'R', 'phase': 3, 'description': 'Connects systems and workflows', 'capabilities': ['API Integration', 'Automation', 'Connectivity']},
    {'name': 'Coordinator', 'icon': 'Users', 'role_type': 'A', 'phase': 4, 'description': 'Orchestrates team activities', 'capabilities': ['Project Management', 'Scheduling', 'Resource Allocation']},
    {'name': 'Documenter', 'icon': 'FileText', 'role_type': 'C', 'phase': 6, 'description': 'Creates and maintains documentation', 'capabilities': ['Documentation', 'Knowledge Base', 'Training Materials']},
    {'name': 'Optimizer', 'icon': 'Bot', 'role_type': 'R', 'phase': 6, 'description': 'Improves efficiency continuously', 'capabilities': ['Performance Tuning', 'Process Improvement', 'Automation']},
]

DEFAULT_PHASES: List[Dict[str, Any]] = [
    {'phase_number': 1, 'name': 'Discovery', 'status': 'complete', 'progress': 100, 'tasks_total': 12, 'tasks_completed': 12},
    {'phase_number': 2, 'name': 'Design', 'status': 'complete', 'progress': 100, 'tasks_total': 8, 'tasks_completed': 8},
    {'phase_number': 3, 'name': 'Development', 'status': 'in-progress', 'progress': 68, 'tasks_total': 24, 'tasks_completed': 16},
    {'phase_number': 4, 'name': 'Delivery', 'status': 'pending', 'progress': 0, 'tasks_total': 10, 'tasks_completed': 0},
    {'phase_number': 5, 'name': 'Validation', 'status': 'pending', 'progress': 0, 'tasks_total': 15, 'tasks_completed': 0},
    {'phase_number': 6, 'name': 'Evolution', 'status': 'pending', 'progress': 0, 'tasks_total': 6, 'tasks_completed': 0},
]

AGENT_NAMES = [a['name'] for a in DEFAULT_AGENTS]
PHASE_NAMES = [p['name'] for p in DEFAULT_PHASES]

RACI_MATRIX: Dict[str, Dict[str, str]] = {
    'Strategist': {'Discovery': 'A', 'Design': 'C', 'Development': 'I', 'Delivery': 'C', 'Validation': 'I', 'Evolution': 'C'},
    'Researcher': {'Discovery': 'R', 'Design': 'C', 'Development': 'I', 'Delivery': 'I', 'Validation': 'C', 'Evolution': 'I'},
    'Architect': {'Discovery': 'C', 'Design': 'A', 'Development': 'C', 'Delivery': 'I', 'Validation': 'C', 'Evolution': 'I'},
    'Developer': {'Discovery': 'I', 'Design': 'C', 'Development': 'R', 'Delivery': 'C', 'Validation': 'R', 'Evolution': 'C'},
    'Analyst': {'Discovery': 'C', 'Design': 'R', 'Development': 'C', 'Delivery': 'I', 'Validation': 'C', 'Evolution': 'R'},
    'Communicator': {'Discovery': 'I', 'Design': 'I', 'Development': 'I', 'Delivery': 'R', 'Validation': 'I', 'Evolution': 'C'},
    'Validator': {'Discovery': 'I', 'Design': 'C', 'Development': 'C', 'Delivery': 'C', 'Validation': 'R', 'Evolution': 'C'},
    'Integrator': {'Discovery': 'I', 'Design': 'C', 'Development': 'R', 'Delivery': 'R', 'Validation': 'C', 'Evolution': 'I'},
    'Coordinator': {'Discovery': 'C', 'Design': 'I', 'Development': 'C', 'Delivery': 'A', 'Validation': 'I', 'Evolution': 'C'},
    'Documenter': {'Discovery': 'C', 'Design': 'C', 'Development': 'I', 'Delivery': 'C', 'Validation': 'C', 'Evolution': 'R'},
    'Optimizer': {'Discovery': 'I', 'Design': 'I', 'Development': 'C', 'Delivery': 'I', 'Validation': 'R', 'Evolution': 'A'},
}

RACI_ROLES = ['R', 'A', 'C', 'I']

ROLE_LABELS = {
    'R': 'Responsible',
    'A': 'Accountable',
    'C': 'Consulted',
    'I': 'Informed',
}

ROLE_DESCRIPTIONS = {
    'R': 'Responsible - Does the work',
    'A': 'Accountable - Owns the outcome',
    'C': 'Consulted - Provides input',
    'I': 'Informed - Kept in the loop',
}

ROLE_COLORS = {
    'R': '#22C55E',
    'A': '#D4A537',
    'C': '#3B82F6',
    'I': '#71717A',
}

# Shown on the metrics bar when no live data has been initialized yet
METRIC_FALLBACKS = {
    'tasks_completed': 2847,
    'active_agents': 18,
    'avg_efficiency': 94.7,
    'avg_response_time': 1.2,
    'total_phases': 6,
    'total_agents': 11,
}
