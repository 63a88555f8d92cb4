"""
Roadmap Engine
==============
Task filtering, progress roll-ups and CSV/JSON export for the ten-week
implementation plan, plus feature-area progress for the product tracker.

This module is unit-testable and can be used independently of Streamlit.
"""

import csv
import io
import json
from typing import Any, Dict, List, Optional

import pandas as pd

from catalog.roadmap import FEATURE_AREAS, PROJECT_METRICS, ROADMAP_PHASES, ROADMAP_TASKS
from rounding import round_half_up

CSV_FILENAME = 'INT_Inc_Implementation_Plan.csv'
JSON_FILENAME = 'INT_Inc_Implementation_Plan.json'
CSV_COLUMNS = ['Phase', 'Week', 'Task', 'Owner', 'Deliverable', 'Status', 'Dependencies', 'Effort_Hours']


def get_phase(phase_id: str) -> Optional[Dict[str, Any]]:
    return next((p for p in ROADMAP_PHASES if p['id'] == phase_id), None)


def get_owners(tasks: Optional[List[Dict[str, Any]]] = None) -> List[str]:
    tasks = tasks if tasks is not None else ROADMAP_TASKS
    return sorted({t['owner'] for t in tasks})


def filter_tasks(
    tasks: Optional[List[Dict[str, Any]]] = None,
    phase_id: Optional[str] = None,
    owner: Optional[str] = None,
    status: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Filter tasks; ``None`` or empty arguments leave that dimension open."""
    result = tasks if tasks is not None else ROADMAP_TASKS
    if phase_id:
        result = [t for t in result if t['phase_id'] == phase_id]
    if owner:
        result = [t for t in result if t['owner'] == owner]
    if status:
        result = [t for t in result if t['status'] == status]
    return list(result)


def task_progress(tasks: List[Dict[str, Any]]) -> float:
    """Percentage of tasks with status Complete, 0 for an empty list."""
    if not tasks:
        return 0.0
    completed = sum(1 for t in tasks if t['status'] == 'Complete')
    return completed / len(tasks) * 100


def phase_hours(tasks: Optional[List[Dict[str, Any]]] = None) -> Dict[str, int]:
    """Sum effort hours per phase id, keeping the roadmap phase order."""
    tasks = tasks if tasks is not None else ROADMAP_TASKS
    totals = {p['id']: 0 for p in ROADMAP_PHASES}
    for task in tasks:
        totals[task['phase_id']] = totals.get(task['phase_id'], 0) + task['effort_hours']
    return totals


def tasks_to_csv(tasks: Optional[List[Dict[str, Any]]] = None) -> str:
    """
    Serialize tasks to CSV with every cell quoted.

    Dependencies are joined with "; ". No trailing newline.
    """
    tasks = tasks if tasks is not None else ROADMAP_TASKS
    rows = []
    for task in tasks:
        phase = get_phase(task['phase_id'])
        rows.append([
            phase['name'] if phase else '',
            task['week'],
            task['task'],
            task['owner'],
            task['deliverable'],
            task['status'],
            '; '.join(task['dependencies']),
            str(task['effort_hours']),
        ])

    df = pd.DataFrame(rows, columns=CSV_COLUMNS)
    buffer = io.StringIO()
    df.to_csv(buffer, index=False, quoting=csv.QUOTE_ALL, lineterminator='\n')
    return buffer.getvalue().rstrip('\n')


def plan_to_json(tasks: Optional[List[Dict[str, Any]]] = None) -> str:
    data = {
        'project': PROJECT_METRICS,
        'phases': ROADMAP_PHASES,
        'tasks': tasks if tasks is not None else ROADMAP_TASKS,
    }
    return json.dumps(data, indent=2)


def feature_counts(areas: Optional[List[Dict[str, Any]]] = None) -> Dict[str, int]:
    areas = areas if areas is not None else FEATURE_AREAS
    features = [f for area in areas for f in area['features']]
    return {
        'total': len(features),
        'completed': sum(1 for f in features if f['status'] == 'completed'),
        'in_progress': sum(1 for f in features if f['status'] == 'in-progress'),
        'planned': sum(1 for f in features if f['status'] == 'planned'),
    }


def feature_progress(areas: Optional[List[Dict[str, Any]]] = None) -> int:
    """Completed features count fully, in-progress ones count half."""
    counts = feature_counts(areas)
    if counts['total'] == 0:
        return 0
    return round_half_up((counts['completed'] * 100 + counts['in_progress'] * 50) / counts['total'])


def area_progress(area: Dict[str, Any]) -> int:
    """Average of the per-feature progress values in one area."""
    features = area['features']
    if not features:
        return 0
    return round_half_up(sum(f['progress'] for f in features) / len(features))


def gantt_frame(phases: Optional[List[Dict[str, Any]]] = None) -> pd.DataFrame:
    """
    One row per phase for a plotly bar timeline.

    Columns: phase, category, start, duration, hours. ``start`` is zero-based
    so bars begin at week ``start_week``.
    """
    phases = phases if phases is not None else ROADMAP_PHASES
    records = [
        {
            'phase': p['name'],
            'category': p['category'],
            'start': p['start_week'] - 1,
            'duration': p['end_week'] - p['start_week'] + 1,
            'hours': p['total_hours'],
        }
        for p in phases
    ]
    return pd.DataFrame(records, columns=['phase', 'category', 'start', 'duration', 'hours'])
