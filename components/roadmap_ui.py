"""
Implementation Plan Tab
=======================
Ten-week rollout: phase timeline, task table with filters, CSV/JSON export
and product feature progress.
"""

import pandas as pd
import plotly.express as px
import streamlit as st

from catalog.roadmap import CATEGORY_COLORS, FEATURE_AREAS, PROJECT_METRICS, ROADMAP_PHASES, TASK_STATUSES
from components.ui_components import chart, download_button, metric_row, page_header, progress_bar
from linear_theme import badge
from roadmap_engine import (
    CSV_FILENAME,
    JSON_FILENAME,
    area_progress,
    feature_counts,
    feature_progress,
    filter_tasks,
    gantt_frame,
    get_owners,
    phase_hours,
    plan_to_json,
    task_progress,
    tasks_to_csv,
)


def _render_timeline():
    frame = gantt_frame()
    fig = px.bar(
        frame, x='duration', y='phase', base='start', color='category', orientation='h',
        color_discrete_map=CATEGORY_COLORS, hover_data={'hours': True, 'start': False},
        labels={'duration': 'Weeks', 'phase': ''},
    )
    fig.update_yaxes(autorange='reversed')
    fig.update_xaxes(range=[0, PROJECT_METRICS['total_weeks']], dtick=1)
    chart(fig, height=380, key='roadmap_gantt')

    hours = phase_hours()
    for phase in ROADMAP_PHASES:
        with st.expander(f"{phase['name']} · weeks {phase['start_week']}-{phase['end_week']} · "
                         f"{hours.get(phase['id'], 0)} h"):
            st.write(phase['description'])
            st.caption(f"Team: {', '.join(phase['team'])}")
            c1, c2 = st.columns(2)
            with c1:
                st.markdown("**Key deliverables**")
                for item in phase['key_deliverables']:
                    st.markdown(f"- {item}")
            with c2:
                st.markdown("**Critical success factors**")
                for item in phase['critical_success_factors']:
                    st.markdown(f"- {item}")


def _render_tasks():
    c1, c2, c3 = st.columns(3)
    with c1:
        phase_id = st.selectbox("Phase", [''] + [p['id'] for p in ROADMAP_PHASES],
                                format_func=lambda pid: next((p['short_name'] for p in ROADMAP_PHASES if p['id'] == pid), 'All phases'))
    with c2:
        owner = st.selectbox("Owner", [''] + get_owners(), format_func=lambda o: o or 'All owners')
    with c3:
        status = st.selectbox("Status", [''] + TASK_STATUSES, format_func=lambda s: s or 'All statuses')

    tasks = filter_tasks(phase_id=phase_id, owner=owner, status=status)
    progress_bar(task_progress(tasks), label=f"{len(tasks)} tasks complete")

    if tasks:
        frame = pd.DataFrame(tasks)[['week', 'task', 'owner', 'deliverable', 'status', 'effort_hours']]
        st.dataframe(frame, use_container_width=True, hide_index=True)
    else:
        st.caption("No tasks match the filters.")

    c1, c2 = st.columns(2)
    with c1:
        download_button("Export plan (CSV)", tasks_to_csv(), CSV_FILENAME, key='roadmap_csv')
    with c2:
        download_button("Export plan (JSON)", plan_to_json(), JSON_FILENAME, mime='application/json', key='roadmap_json')


def _render_features():
    counts = feature_counts()
    metric_row([
        {'label': 'Overall progress', 'value': f"{feature_progress()}%"},
        {'label': 'Completed', 'value': counts['completed']},
        {'label': 'In progress', 'value': counts['in_progress']},
        {'label': 'Planned', 'value': counts['planned']},
    ])
    for area in FEATURE_AREAS:
        st.markdown(f"#### {area['name']}")
        progress_bar(area_progress(area))
        for feature in area['features']:
            st.markdown(f"{badge(feature['status'])} {feature['name']} · {feature['progress']}%",
                        unsafe_allow_html=True)


def render_roadmap_section(db=None, user_id: str = None):
    """Render the Implementation Plan tab."""
    page_header("Implementation Plan", f"{PROJECT_METRICS['start_date']} to {PROJECT_METRICS['end_date']}", icon="🗺️")
    metric_row([
        {'label': 'Duration', 'value': f"{PROJECT_METRICS['total_weeks']} weeks"},
        {'label': 'Effort', 'value': f"{PROJECT_METRICS['total_hours']} h"},
        {'label': 'Team', 'value': PROJECT_METRICS['team_size']},
        {'label': 'Budget', 'value': PROJECT_METRICS['budget_range']},
    ])

    timeline_tab, tasks_tab, features_tab = st.tabs(["Timeline", "Tasks", "Feature progress"])
    with timeline_tab:
        _render_timeline()
    with tasks_tab:
        _render_tasks()
    with features_tab:
        _render_features()
