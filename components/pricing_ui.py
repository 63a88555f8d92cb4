"""
Pricing Toolkit Tab
===================
ROI calculator with three-year projection and saved calculations, the
pricing page savings widget, plan feature comparison, and the sales
toolkit (objection handling, data triage matrix, department ROI, pilot
budget, elevator pitch).
"""

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from catalog.platforms import ENTERPRISE_PLATFORMS
from catalog.pricing import (
    DATA_TRIAGE_MATRIX,
    DEFAULT_ROI_INPUTS,
    DEPARTMENT_ROI,
    ELEVATOR_PITCH,
    FEATURE_COMPARISON,
    KEY_NUMBERS,
    MAX_PAYBACK_MONTHS,
    OBJECTIONS,
    PILOT_BUDGET,
    PITCH_PHRASES,
    PRICING_TIERS,
    TRIAGE_LEVEL_COLORS,
)
from components.ui_components import chart, download_button, metric_row, page_header, show_result
from linear_theme import COLORS, format_currency
from pricing_engine import calculate_roi, projection_frame, widget_savings
from services import ROIService, SessionManager

ROI_FIELDS = [
    ('employees', "Employees", 1),
    ('average_salary', "Average salary ($)", 1000),
    ('adoption_percentage', "Adoption (%)", 5),
    ('weekly_productivity_gain', "Hours saved per week", 1),
    ('annual_platform_cost', "Annual platform cost ($)", 1000),
    ('training_cost', "Training cost ($)", 1000),
]


def _render_roi_calculator(service: ROIService, user_id: str):
    inputs = SessionManager.get_or_create(SessionManager.ROI_INPUTS, lambda: dict(DEFAULT_ROI_INPUTS))

    cols = st.columns(3)
    for i, (key, label, step) in enumerate(ROI_FIELDS):
        with cols[i % 3]:
            max_value = 100.0 if key == 'adoption_percentage' else None
            inputs[key] = st.number_input(label, min_value=0.0, max_value=max_value,
                                          value=float(inputs[key]), step=float(step), key=f"roi_{key}")
    SessionManager.set(SessionManager.ROI_INPUTS, inputs)

    result = calculate_roi(inputs)
    payback = result['payback_months']
    metric_row([
        {'label': 'Annual value', 'value': format_currency(result['annual_productivity_value'])},
        {'label': 'Total cost', 'value': format_currency(result['total_cost'])},
        {'label': 'Net benefit', 'value': format_currency(result['net_benefit'])},
        {'label': 'ROI', 'value': f"{result['roi_percentage']:.0f}%"},
        {'label': 'Payback', 'value': 'Never' if payback >= MAX_PAYBACK_MONTHS else f"{payback:.1f} mo"},
    ])
    st.caption(f"Hourly rate {format_currency(result['hourly_rate'])} (salary / 2,080 h) · 48 working weeks")

    frame = projection_frame(inputs)
    fig = go.Figure()
    fig.add_bar(x=frame['year'], y=frame['cumulative_benefit'], name='Cumulative benefit',
                marker_color=COLORS['success'])
    fig.add_bar(x=frame['year'], y=frame['cumulative_cost'], name='Cumulative cost', marker_color=COLORS['error'])
    fig.add_scatter(x=frame['year'], y=frame['net_value'], name='Net value', mode='lines+markers',
                    line=dict(color=COLORS['accent']))
    fig.update_layout(barmode='group', xaxis=dict(tickmode='array', tickvals=[1, 2, 3], title='Year'))
    chart(fig, height=360, key='roi_projection')
    download_button("Export projection (CSV)", frame.to_csv(index=False), "roi-projection.csv", key='roi_csv')

    st.markdown("#### Save calculation")
    c1, c2 = st.columns([2, 3])
    with c1:
        name = st.text_input("Name", key='roi_name')
    with c2:
        platform_ids = st.multiselect("Platforms", [p['id'] for p in ENTERPRISE_PLATFORMS],
                                      format_func=lambda pid: next(p['name'] for p in ENTERPRISE_PLATFORMS if p['id'] == pid))
    if st.button("Save", type="primary", disabled=not user_id):
        show_result(service.save_calculation(user_id, name, inputs, platform_ids),
                    f"Saved '{name}'", "Enter a name; all inputs must be zero or more")

    saved = service.list_calculations(user_id) if user_id else []
    if saved:
        st.markdown("#### Saved calculations")
        for calc in saved:
            outputs = calc.get('outputs') or {}
            c1, c2, c3 = st.columns([4, 1, 1])
            c1.markdown(f"**{calc['name']}** · ROI {outputs.get('roi_percentage', 0):.0f}% · "
                        f"net {format_currency(outputs.get('net_benefit', 0))}")
            if c2.button("Load", key=f"roi_load_{calc['id']}"):
                SessionManager.set(SessionManager.ROI_INPUTS, {**DEFAULT_ROI_INPUTS, **(calc.get('inputs') or {})})
                for key, _, _ in ROI_FIELDS:
                    st.session_state.pop(f"roi_{key}", None)
                st.rerun()
            if c3.button("Delete", key=f"roi_del_{calc['id']}"):
                if show_result(service.delete_calculation(calc['id'], user_id), "Deleted", "Delete failed"):
                    st.rerun()


def _render_widget():
    c1, c2 = st.columns(2)
    with c1:
        team_size = st.slider("Team size", 1, 500, 25)
    with c2:
        spend = st.slider("Current monthly AI tool spend ($)", 0, 20000, 2000, step=100)

    savings = widget_savings(team_size, spend)
    metric_row([
        {'label': 'Recommended plan', 'value': savings['recommended_tier'],
         'subtitle': f"{format_currency(savings['tier_cost'])}/mo"},
        {'label': 'Monthly savings', 'value': format_currency(savings['total_monthly_savings'])},
        {'label': 'Annual savings', 'value': format_currency(savings['annual_savings'])},
        {'label': 'ROI', 'value': f"{savings['roi']}%"},
    ])
    st.caption(f"Productivity {format_currency(savings['productivity_savings'])} + consolidation "
               f"{format_currency(savings['consolidation_savings'])} · {savings['hours_saved_total']} hours saved a month")


def _cell(value):
    if value is True:
        return '✓'
    if value is False:
        return '-'
    return value


def _render_plans():
    frame = pd.DataFrame(FEATURE_COMPARISON)
    for tier in PRICING_TIERS:
        frame[tier] = frame[tier].map(_cell)
    for category, rows in frame.groupby('category', sort=False):
        st.markdown(f"#### {category}")
        st.dataframe(rows.drop(columns='category').rename(columns=str.title),
                     use_container_width=True, hide_index=True)


def _render_sales_toolkit():
    metric_row([{'label': n['label'], 'value': n['value']} for n in KEY_NUMBERS])

    st.markdown("#### Objection handling")
    for item in OBJECTIONS:
        with st.expander(item['objection']):
            st.write(item['response'])
            st.caption(item['data_point'])

    st.markdown("#### Data triage matrix")
    triage = pd.DataFrame(DATA_TRIAGE_MATRIX)
    st.dataframe(
        triage.style.apply(lambda col: [f"color: {TRIAGE_LEVEL_COLORS[v]}; font-weight: 600" for v in col],
                           subset=['level']),
        use_container_width=True, hide_index=True,
    )

    st.markdown("#### Department ROI")
    st.dataframe(pd.DataFrame(DEPARTMENT_ROI), use_container_width=True, hide_index=True)

    st.markdown("#### Pilot budget")
    for row in PILOT_BUDGET:
        text = f"{row['item']}: {row['cost']}"
        st.markdown(f"**{text}**" if row['is_total'] else f"- {text}")

    st.markdown("#### Elevator pitch")
    st.text_area("Pitch", ELEVATOR_PITCH, height=260, label_visibility='collapsed')
    for phrase in PITCH_PHRASES:
        st.markdown(f"- **{phrase['phrase']}**: {phrase['note']}")


def render_pricing_section(db, user_id: str):
    """Render the Pricing toolkit tab."""
    page_header("Pricing Toolkit", "ROI, plan comparison and sales enablement", icon="💰")
    roi_tab, widget_tab, plans_tab, sales_tab = st.tabs(["ROI calculator", "Savings widget", "Plans", "Sales toolkit"])
    with roi_tab:
        _render_roi_calculator(ROIService(db), user_id)
    with widget_tab:
        _render_widget()
    with plans_tab:
        _render_plans()
    with sales_tab:
        _render_sales_toolkit()
