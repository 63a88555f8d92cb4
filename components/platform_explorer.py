"""
Enterprise Platform Explorer
============================
Search, filter and sort the enterprise AI platform catalog, compare up to
four platforms side by side, browse department recommendations and export
the current view to CSV.
"""

import plotly.express as px
import streamlit as st

from catalog.platforms import AI_WINS, BENCHMARKS, DEPARTMENTS, ENGAGEMENT_CONFIG, PRIORITY_LEVELS
from components.ui_components import bullet_list, chart, download_button, metric_row, page_header
from linear_theme import badge
from platform_engine import (
    MAX_COMPARED_PLATFORMS,
    SORT_OPTIONS,
    capability_radar,
    comparison_table,
    export_filename,
    filter_platforms,
    get_department,
    get_providers,
    platforms_for_department,
    platforms_to_csv,
    toggle_comparison,
)
from services import SessionManager


def _render_platform_card(platform, compared):
    with st.container(border=True):
        st.markdown(
            f"**{platform['name']}** {badge(platform['recommendation']['priority'], 'info')}",
            unsafe_allow_html=True,
        )
        st.caption(f"{platform['provider']} · {platform['model']} · {platform['category']}")
        st.write(platform['focus'])
        c1, c2, c3 = st.columns(3)
        c1.metric("Market share", platform['market_share'])
        c2.metric("Pricing", platform['pricing'])
        c3.metric("Context", platform['context_window'])
        st.caption(f"Compliance: {', '.join(platform['compliance'])}")
        st.caption(platform['verdict'])

        in_comparison = platform['id'] in compared
        full = len(compared) >= MAX_COMPARED_PLATFORMS and not in_comparison
        label = "Remove from comparison" if in_comparison else "Add to comparison"
        if st.button(label, key=f"cmp_{platform['id']}", disabled=full, use_container_width=True):
            SessionManager.set(SessionManager.COMPARED_PLATFORMS, toggle_comparison(compared, platform['id']))
            st.rerun()


def _render_catalog():
    c1, c2, c3, c4 = st.columns([3, 2, 2, 2])
    with c1:
        query = st.text_input("Search platforms", placeholder="Name, provider, model or focus")
    with c2:
        providers = st.multiselect("Provider", get_providers())
    with c3:
        priority = st.selectbox("Priority", [''] + PRIORITY_LEVELS, format_func=lambda p: p or 'All')
    with c4:
        sort_by = st.selectbox("Sort by", list(SORT_OPTIONS), format_func=SORT_OPTIONS.get)

    platforms = filter_platforms(query=query, providers=providers, priority=priority, sort_by=sort_by)
    compared = SessionManager.get(SessionManager.COMPARED_PLATFORMS, [])

    st.caption(f"{len(platforms)} platforms · {len(compared)}/{MAX_COMPARED_PLATFORMS} selected for comparison")
    download_button("Export to CSV", platforms_to_csv(platforms), export_filename(), key='platforms_csv')

    if not platforms:
        st.info("No platforms match your filters.")
        return

    cols = st.columns(2)
    for i, platform in enumerate(platforms):
        with cols[i % 2]:
            _render_platform_card(platform, compared)


def _render_comparison():
    compared = SessionManager.get(SessionManager.COMPARED_PLATFORMS, [])
    if len(compared) < 2:
        st.info("Select at least two platforms in the catalog to compare them.")
        return

    radar = capability_radar(compared)
    fig = px.line_polar(radar, r='score', theta='capability', color='platform', line_close=True, range_r=[0, 10])
    fig.update_traces(fill='toself', opacity=0.6)
    chart(fig, height=460, key='platform_radar')
    st.dataframe(comparison_table(compared), use_container_width=True)

    if st.button("Clear comparison"):
        SessionManager.set(SessionManager.COMPARED_PLATFORMS, [])
        st.rerun()


def _render_departments():
    department_id = st.selectbox("Department", list(DEPARTMENTS), format_func=lambda d: DEPARTMENTS[d]['name'])
    department = get_department(department_id)

    metric_row([
        {'label': 'Team size', 'value': department['team_size']},
        {'label': 'Primary platform', 'value': department['primary_platform']},
        {'label': 'Secondary platform', 'value': department['secondary_platform']},
    ])

    st.markdown("#### Use cases")
    for use_case in department['use_cases']:
        st.markdown(f"**{use_case['title']}** · {use_case['platform']} · _{use_case['roi']}_")
        st.caption(use_case['description'])

    st.markdown("#### Recommended platforms")
    bullet_list([p['name'] for p in platforms_for_department(department_id)], empty='No platforms recommended')

    wins = AI_WINS.get(department_id, [])
    if wins:
        st.markdown("#### Quick AI wins")
        for win in wins:
            st.markdown(f"{win['id']}. **{win['title']}** ({win['tool']}): {win['description']} · "
                        f"{win['hours']} h/month saved · {win['improvement']}")


def _render_benchmarks():
    investment = ENGAGEMENT_CONFIG['investment']
    metric_row([
        {'label': 'Team size', 'value': ENGAGEMENT_CONFIG['team_size']},
        {'label': 'Year 1 investment', 'value': f"${investment['year1']:,}"},
        {'label': 'Breakeven', 'value': investment['breakeven']},
        {'label': '3-year ROI', 'value': investment['roi_3_year']},
    ])
    st.caption(ENGAGEMENT_CONFIG['strategy'])
    for benchmark in BENCHMARKS.values():
        with st.expander(benchmark['source']):
            for label, value in benchmark['metrics'].items():
                st.markdown(f"- **{label}:** {value}")
            st.markdown(f"[Source]({benchmark['url']})")


def render_platform_explorer(db=None, user_id: str = None):
    """Render the Enterprise Platform explorer tab."""
    page_header("Enterprise AI Platforms", "Compare the enterprise AI platform landscape", icon="🏢")
    catalog_tab, compare_tab, dept_tab, bench_tab = st.tabs(
        ["Catalog", "Compare", "By department", "Benchmarks"]
    )
    with catalog_tab:
        _render_catalog()
    with compare_tab:
        _render_comparison()
    with dept_tab:
        _render_departments()
    with bench_tab:
        _render_benchmarks()
