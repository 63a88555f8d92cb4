"""
Governance Tab
==============
AI usage monitoring, policy compliance, bias scans and the audit trail.
"""

import pandas as pd
import plotly.express as px
import streamlit as st

from catalog.governance import AUDIT_LOG, BIAS_SCANS, POLICIES, USAGE_LOGS
from components.ui_components import chart, download_button, metric_row, page_header, progress_bar
from governance_engine import bias_scan_passed, filter_audit_log, governance_summary, tokens_by_agent
from linear_theme import badge


def render_governance_section(db=None, user_id: str = None):
    """Render the Governance tab (static sample data; db and user are unused)."""
    page_header("AI Governance", "Usage, policy compliance, bias monitoring and audit trail", icon="🛡️")

    summary = governance_summary()
    metric_row([
        {'label': 'Tokens used', 'value': f"{summary['total_tokens']:,}"},
        {'label': 'Active policies', 'value': summary['active_policies']},
        {'label': 'Avg. compliance', 'value': f"{summary['average_compliance']}%"},
        {'label': 'Warnings', 'value': summary['warnings']},
        {'label': 'Avg. bias score', 'value': summary['average_bias_score']},
    ])

    usage_tab, policy_tab, bias_tab, audit_tab = st.tabs(["Usage", "Policies", "Bias scans", "Audit log"])

    with usage_tab:
        by_agent = tokens_by_agent()
        if not by_agent.empty:
            chart(px.bar(by_agent, x='agent_name', y='tokens', labels={'agent_name': 'Agent', 'tokens': 'Tokens'}),
                  height=320, key='gov_tokens')
        logs = pd.DataFrame(USAGE_LOGS)[['created_date', 'agent_name', 'action', 'user', 'tokens', 'status']]
        st.dataframe(logs, use_container_width=True, hide_index=True)

    with policy_tab:
        for policy in POLICIES:
            c1, c2 = st.columns([3, 2])
            with c1:
                st.markdown(f"**{policy['name']}** {badge(policy['status'])}", unsafe_allow_html=True)
                st.caption(f"{policy['category']} · updated {policy['last_updated']}")
            with c2:
                progress_bar(policy['compliance'], label='Compliance')

    with bias_tab:
        for scan in BIAS_SCANS:
            passed = bias_scan_passed(scan)
            st.markdown(
                f"**{scan['agent']}** · {scan['scan_date']} · score {scan['overall_score']} "
                f"{badge('Pass' if passed else 'Review', 'success' if passed else 'warning')}",
                unsafe_allow_html=True,
            )
            dims = pd.DataFrame({
                'dimension': ['Gender', 'Racial', 'Age'],
                'score': [scan['gender_bias'], scan['racial_bias'], scan['age_bias']],
            })
            chart(px.bar(dims, x='score', y='dimension', orientation='h', range_x=[0, 100]),
                  height=200, key=f"bias_{scan['id']}")
            for rec in scan['recommendations']:
                st.caption(f"• {rec}")

    with audit_tab:
        c1, c2 = st.columns([3, 1])
        with c1:
            query = st.text_input("Search audit log", placeholder="Action or details")
        with c2:
            users = sorted({e['user'] for e in AUDIT_LOG})
            user = st.selectbox("User", ['All'] + users)
        entries = filter_audit_log(query=query, user=None if user == 'All' else user)
        if entries:
            frame = pd.DataFrame(entries)[['timestamp', 'action', 'user', 'details']]
            st.dataframe(frame, use_container_width=True, hide_index=True)
            download_button("Export audit log (CSV)", frame.to_csv(index=False), "ai-audit-log.csv", key='audit_csv')
        else:
            st.caption("No audit entries match.")
