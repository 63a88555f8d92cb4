"""
Agent Network Tab
=================
Symphony agent orchestration: live metrics, the agent network graph, the
RACI matrix, phase progress and the task board.
"""

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from catalog.symphony import (
    AGENT_STATUSES,
    DEFAULT_AGENTS,
    PHASE_NAMES,
    PHASE_STATUSES,
    RACI_ROLES,
    ROLE_COLORS,
    ROLE_DESCRIPTIONS,
    TASK_PRIORITIES,
    TASK_STATUSES,
)
from components.ui_components import chart, download_button, metric_row, page_header, progress_bar, show_result
from linear_theme import COLORS, badge, empty_state
from services import SymphonyService
from symphony_engine import agents_for_phase, dashboard_metrics, network_graph, raci_counts, raci_frame


def _render_metrics(agents, phases):
    metrics = dashboard_metrics(agents, phases)
    metric_row([
        {'label': 'Tasks completed', 'value': f"{metrics['tasks_completed']:,}"},
        {'label': 'Active agents', 'value': metrics['active_agents'], 'subtitle': f"of {metrics['total_agents']}"},
        {'label': 'Avg efficiency', 'value': f"{metrics['avg_efficiency']}%"},
        {'label': 'Avg response', 'value': f"{metrics['avg_response_time']}s"},
        {'label': 'Phases complete', 'value': f"{metrics['completed_phases']}/{metrics['total_phases']}"},
    ])


def _render_network(agents):
    graph = network_graph(agents or DEFAULT_AGENTS)
    positions = {node['name']: (node['x'], node['y']) for node in graph['nodes']}

    edge_x, edge_y = [], []
    for edge in graph['edges']:
        x0, y0 = positions[edge['source']]
        x1, y1 = positions[edge['target']]
        edge_x += [x0, x1, None]
        edge_y += [y0, y1, None]

    fig = go.Figure()
    fig.add_scatter(x=edge_x, y=edge_y, mode='lines', hoverinfo='skip',
                    line=dict(color=COLORS['border_default'], width=1.5), showlegend=False)
    for role in RACI_ROLES:
        nodes = [n for n in graph['nodes'] if n['role_type'] == role]
        if not nodes:
            continue
        fig.add_scatter(
            x=[n['x'] for n in nodes], y=[n['y'] for n in nodes], mode='markers+text',
            text=[n['name'] for n in nodes], textposition='top center',
            customdata=[n['phase'] for n in nodes],
            hovertemplate='%{text}<br>Phase %{customdata}<extra></extra>',
            marker=dict(size=22, color=ROLE_COLORS[role], line=dict(color=COLORS['bg_base'], width=2)),
            name=ROLE_DESCRIPTIONS[role],
        )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False, scaleanchor='x')
    chart(fig, height=520, key='symphony_network')
    st.caption("Agents in the same phase are linked.")


def _render_raci():
    frame = raci_frame()
    codes = {role: i for i, role in enumerate(RACI_ROLES)}
    z = [[codes.get(v, None) for v in row] for row in frame.values]
    scale = []
    for i, role in enumerate(RACI_ROLES):
        scale += [[i / len(RACI_ROLES), ROLE_COLORS[role]], [(i + 1) / len(RACI_ROLES), ROLE_COLORS[role]]]

    fig = go.Figure(go.Heatmap(
        z=z, x=list(frame.columns), y=list(frame.index), text=frame.values, texttemplate='%{text}',
        colorscale=scale, zmin=-0.5, zmax=len(RACI_ROLES) - 0.5, showscale=False, xgap=2, ygap=2,
    ))
    fig.update_yaxes(autorange='reversed')
    chart(fig, height=480, key='symphony_raci')
    st.caption(' · '.join(ROLE_DESCRIPTIONS[r] for r in RACI_ROLES))

    phase = st.selectbox("Phase", PHASE_NAMES, key='symphony_raci_phase')
    counts = raci_counts(phase)
    cols = st.columns(len(RACI_ROLES))
    for col, role in zip(cols, RACI_ROLES):
        with col:
            st.markdown(f"**{ROLE_DESCRIPTIONS[role].split(' - ')[0]}** ({counts[role]})")
            for agent in agents_for_phase(phase, role):
                st.caption(agent)
    download_button("Export RACI (CSV)", frame.to_csv(index_label='Agent'), "raci-matrix.csv", key='raci_csv')


def _render_phases(service: SymphonyService, phases):
    if not phases:
        empty_state("No phases", "Initialize the network to track phase progress.")
        return
    for phase in sorted(phases, key=lambda p: p.get('phase_number', 0)):
        with st.expander(f"{phase['phase_number']}. {phase['name']} · {phase['status']}"):
            progress_bar(phase.get('progress', 0),
                         label=f"{phase.get('tasks_completed', 0)}/{phase.get('tasks_total', 0)} tasks")
            c1, c2, c3 = st.columns(3)
            with c1:
                status = st.selectbox("Status", PHASE_STATUSES, index=PHASE_STATUSES.index(phase['status'])
                                      if phase['status'] in PHASE_STATUSES else 0, key=f"symphony_ps_{phase['id']}")
            with c2:
                progress = st.slider("Progress", 0, 100, int(phase.get('progress') or 0), key=f"symphony_pp_{phase['id']}")
            with c3:
                st.write("")
                if st.button("Update", key=f"symphony_pu_{phase['id']}"):
                    show_result(service.update_phase(phase['id'], {'status': status, 'progress': progress}),
                                "Phase updated", "Invalid phase update")


def _render_agents(service: SymphonyService, agents):
    for agent in agents:
        c1, c2, c3 = st.columns([3, 2, 1])
        c1.markdown(f"**{agent['name']}** {badge(agent.get('current_status', 'idle'))} · "
                    f"{agent.get('description', '')}", unsafe_allow_html=True)
        current = agent.get('current_status', 'idle')
        status = c2.selectbox("Status", AGENT_STATUSES, key=f"symphony_as_{agent['id']}",
                              index=AGENT_STATUSES.index(current) if current in AGENT_STATUSES else 0,
                              label_visibility='collapsed')
        if c3.button("Set", key=f"symphony_au_{agent['id']}"):
            show_result(service.update_agent(agent['id'], {'current_status': status}), "Agent updated", "Invalid status")


def _render_tasks(service: SymphonyService, user_id: str, agents, phases, tasks):
    agent_names = {a['id']: a['name'] for a in agents}
    phase_names = {p['id']: p['name'] for p in phases}

    with st.form("symphony_new_task"):
        st.markdown("**New task**")
        title = st.text_input("Title")
        description = st.text_area("Description", height=80)
        c1, c2, c3 = st.columns(3)
        with c1:
            priority = st.selectbox("Priority", TASK_PRIORITIES, index=1)
        with c2:
            agent_id = st.selectbox("Agent", [None] + list(agent_names),
                                    format_func=lambda i: agent_names.get(i, 'Unassigned'))
        with c3:
            phase_id = st.selectbox("Phase", [None] + list(phase_names),
                                    format_func=lambda i: phase_names.get(i, 'No phase'))
        submitted = st.form_submit_button("Create task", type="primary")
    if submitted:
        created = service.create_task(user_id, title, description, priority, agent_id, phase_id)
        if show_result(created, "Task created", "A title is required"):
            st.rerun()

    if not tasks:
        st.caption("No tasks yet.")
        return

    status_filter = st.multiselect("Status", TASK_STATUSES, default=TASK_STATUSES, key='symphony_task_filter')
    visible = [t for t in tasks if t.get('status') in status_filter]
    for task in visible:
        c1, c2, c3 = st.columns([4, 2, 1])
        c1.markdown(f"**{task['title']}** {badge(task['priority'])} · "
                    f"{agent_names.get(task.get('agent_id'), 'Unassigned')}", unsafe_allow_html=True)
        status = c2.selectbox("Status", TASK_STATUSES, key=f"symphony_ts_{task['id']}",
                              index=TASK_STATUSES.index(task['status']) if task['status'] in TASK_STATUSES else 0,
                              label_visibility='collapsed')
        if status != task['status']:
            show_result(service.update_task(task['id'], {'status': status}), "Task updated", "Invalid status")
        if c3.button("🗑", key=f"symphony_td_{task['id']}"):
            if show_result(service.delete_task(task['id']), "Task deleted", "Delete failed"):
                st.rerun()

    frame = pd.DataFrame(visible).reindex(columns=['title', 'status', 'priority', 'agent_id', 'phase_id', 'created_at'])
    frame['agent_id'] = frame['agent_id'].map(lambda i: agent_names.get(i, ''))
    frame['phase_id'] = frame['phase_id'].map(lambda i: phase_names.get(i, ''))
    download_button("Export tasks (CSV)", frame.rename(columns={'agent_id': 'agent', 'phase_id': 'phase'}).to_csv(index=False),
                    "symphony-tasks.csv", key='symphony_tasks_csv')


def render_symphony_section(db, user_id: str):
    """Render the Agent network / RACI tab."""
    page_header("Agent Network", "Symphony agent orchestration and RACI", icon="🎼")
    service = SymphonyService(db)
    data = service.load(user_id) if user_id else {'agents': [], 'phases': [], 'tasks': []}
    agents, phases, tasks = data['agents'], data['phases'], data['tasks']

    _render_metrics(agents, phases)

    if user_id and not agents:
        st.info("No agents configured for your workspace yet.")
        if st.button("Initialize default agents and phases", type="primary"):
            if show_result(service.initialize_defaults(user_id), "Network initialized", "Initialization failed"):
                st.rerun()

    network_tab, raci_tab, phases_tab, tasks_tab = st.tabs(["Network", "RACI matrix", "Phases & agents", "Tasks"])
    with network_tab:
        _render_network(agents)
    with raci_tab:
        _render_raci()
    with phases_tab:
        _render_phases(service, phases)
        if agents:
            st.markdown("#### Agents")
            _render_agents(service, agents)
    with tasks_tab:
        _render_tasks(service, user_id, agents, phases, tasks)
