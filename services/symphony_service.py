"""
Symphony Service
================
Business logic for the Symphony agent network: seeding default agents and
phases for a new user, and task management with status/priority validation.
"""

from datetime import datetime
from typing import List, Dict, Optional, Any

from catalog.symphony import (
    AGENT_STATUSES,
    DEFAULT_AGENTS,
    DEFAULT_PHASES,
    PHASE_STATUSES,
    TASK_PRIORITIES,
    TASK_STATUSES,
)


class SymphonyService:
    """
    Service for Symphony agents, phases and tasks.
    """

    def __init__(self, db_handler):
        self.db = db_handler

    def load(self, user_id: str) -> Dict[str, List[Dict[str, Any]]]:
        return {
            'agents': self.db.get_symphony_agents(user_id),
            'phases': self.db.get_symphony_phases(user_id),
            'tasks': self.db.get_symphony_tasks(user_id),
        }

    def initialize_defaults(self, user_id: str) -> bool:
        """
        Seed the six default phases, then the eleven default agents.

        Returns:
            True when both inserts succeed
        """
        phases = [{**phase, 'user_id': user_id} for phase in DEFAULT_PHASES]
        if not self.db.insert_symphony_rows('symphony_phases', phases):
            return False
        agents = [{**agent, 'user_id': user_id} for agent in DEFAULT_AGENTS]
        return self.db.insert_symphony_rows('symphony_agents', agents)

    def update_agent(self, agent_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        if 'current_status' in updates and updates['current_status'] not in AGENT_STATUSES:
            return None
        return self.db.update_symphony_row('symphony_agents', agent_id, updates)

    def update_phase(self, phase_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Update a phase; progress must stay within 0-100.
        """
        if 'status' in updates and updates['status'] not in PHASE_STATUSES:
            return None
        if 'progress' in updates and not 0 <= updates['progress'] <= 100:
            return None
        return self.db.update_symphony_row('symphony_phases', phase_id, updates)

    def create_task(
        self,
        user_id: str,
        title: str,
        description: str = '',
        priority: str = 'medium',
        agent_id: Optional[str] = None,
        phase_id: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        """
        Create a pending task.

        Returns:
            Created row or None if the title is empty or the priority unknown
        """
        if not title or not title.strip():
            return None
        if priority not in TASK_PRIORITIES:
            return None
        return self.db.create_symphony_task({
            'user_id': user_id,
            'title': title.strip(),
            'description': description,
            'priority': priority,
            'agent_id': agent_id,
            'phase_id': phase_id,
            'status': 'pending',
        })

    def update_task(self, task_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Validate status and priority; stamp completed_at when a task completes."""
        if 'status' in updates and updates['status'] not in TASK_STATUSES:
            return None
        if 'priority' in updates and updates['priority'] not in TASK_PRIORITIES:
            return None
        payload = dict(updates)
        if payload.get('status') == 'complete':
            payload.setdefault('completed_at', datetime.now().isoformat())
        return self.db.update_symphony_row('symphony_tasks', task_id, payload)

    def delete_task(self, task_id: str) -> bool:
        return self.db.delete_symphony_task(task_id)
