"""
Deal Comparison Tab
===================
Deal sourcing preferences (with AI onboarding suggestions), side-by-side
comparison of up to four deals with best-value highlighting, and fit
analysis against the investor's criteria.
"""

from copy import deepcopy

import pandas as pd
import plotly.express as px
import streamlit as st

from catalog.deals import (
    COMPARISON_CATEGORIES,
    DEAL_STAGES,
    DEAL_STRUCTURES,
    DEFAULT_DEAL_SOURCING,
    EXPERIENCE_LEVELS,
    INDUSTRIES,
    INVESTOR_ROLES,
    MAX_COMPARED_DEALS,
    REGIONS,
    RISK_TOLERANCES,
    SAMPLE_DEALS,
)
from components.ai_assistant import AIAssistant
from components.ui_components import bullet_list, chart, download_button, info_card, page_header
from deal_engine import (
    analyze_fit,
    best_deal_id,
    comparison_frame,
    filter_criteria,
    format_value,
    get_deals,
    get_nested_value,
    toggle_deal,
)
from linear_theme import badge, format_currency
from services import SessionManager


def _label(value: str) -> str:
    return value.replace('_', ' ').title()


def _get_sourcing():
    return SessionManager.get_or_create(SessionManager.DEAL_SOURCING, lambda: deepcopy(DEFAULT_DEAL_SOURCING))


def _apply_suggestions(suggestions):
    """Copy AI/fallback suggestions into the sourcing preferences, keeping only known options."""
    sourcing = _get_sourcing()
    sourcing['target_industries'] = [i for i in suggestions.get('industries', []) if i in INDUSTRIES]
    sourcing['preferred_deal_structures'] = [s for s in suggestions.get('dealStructures', []) if s in DEAL_STRUCTURES]
    sourcing['deal_stages'] = [s for s in suggestions.get('stages', []) if s in DEAL_STAGES]
    sourcing['regions'] = [r for r in suggestions.get('regions', []) if r in REGIONS]
    if suggestions.get('riskTolerance') in RISK_TOLERANCES:
        sourcing['risk_tolerance'] = suggestions['riskTolerance']
    investment = suggestions.get('investmentRange') or {}
    if 'min' in investment and 'max' in investment:
        sourcing['investment_size_range'] = {
            'min': int(investment['min']), 'max': int(investment['max']), 'currency': 'USD',
        }
    SessionManager.set(SessionManager.DEAL_SOURCING, sourcing)


def _render_onboarding():
    st.markdown("#### Personalize with AI")
    c1, c2 = st.columns(2)
    with c1:
        role = st.selectbox("Your role", INVESTOR_ROLES, format_func=_label)
    with c2:
        experience = st.selectbox("Experience level", EXPERIENCE_LEVELS, index=1, format_func=_label)

    if st.button("Get suggestions", type="primary"):
        sourcing = _get_sourcing()
        existing = {
            'targetIndustries': sourcing['target_industries'],
            'riskTolerance': sourcing['risk_tolerance'],
        }
        with st.spinner("Generating suggestions..."):
            suggestions, source = AIAssistant().onboarding_suggestions(role, experience, existing)
        if suggestions is None:
            st.session_state.pop('onboarding_suggestions', None)
        else:
            st.session_state['onboarding_suggestions'] = (suggestions, source)

    result = st.session_state.get('onboarding_suggestions')
    if result:
        suggestions, source = result
        note = 'AI-generated' if source == 'ai' else 'Standard suggestions for your profile'
        info_card(note, suggestions.get('reasoning', ''))
        c1, c2, c3 = st.columns(3)
        with c1:
            st.markdown("**Industries**")
            bullet_list(suggestions.get('industries', []))
        with c2:
            st.markdown("**Stages**")
            bullet_list(suggestions.get('stages', []))
        with c3:
            st.markdown("**Structures**")
            bullet_list(suggestions.get('dealStructures', []))
        investment = suggestions.get('investmentRange') or {}
        if investment:
            st.caption(f"Suggested range: {format_currency(investment.get('min', 0))} - "
                       f"{format_currency(investment.get('max', 0))} · risk: {_label(suggestions.get('riskTolerance', ''))}")
        st.markdown("**Tips**")
        bullet_list(suggestions.get('tips', []))
        if st.button("Apply to my preferences"):
            _apply_suggestions(suggestions)
            st.success("Preferences updated")


def _render_preferences():
    sourcing = _get_sourcing()
    sourcing['target_industries'] = st.multiselect("Target industries", INDUSTRIES, default=sourcing['target_industries'])
    sourcing['deal_stages'] = st.multiselect("Deal stages", DEAL_STAGES, default=sourcing['deal_stages'])
    sourcing['preferred_deal_structures'] = st.multiselect(
        "Deal structures", DEAL_STRUCTURES, default=sourcing['preferred_deal_structures'])
    sourcing['regions'] = st.multiselect("Regions", REGIONS, default=sourcing['regions'])
    sourcing['risk_tolerance'] = st.select_slider("Risk tolerance", RISK_TOLERANCES,
                                                  value=sourcing['risk_tolerance'], format_func=_label)
    c1, c2 = st.columns(2)
    size = sourcing['investment_size_range']
    with c1:
        size['min'] = st.number_input("Min investment ($)", min_value=0, value=int(size['min']), step=25000)
    with c2:
        size['max'] = st.number_input("Max investment ($)", min_value=0, value=int(size['max']), step=25000)
    SessionManager.set(SessionManager.DEAL_SOURCING, sourcing)


def _render_deal_picker():
    selected = SessionManager.get(SessionManager.SELECTED_DEALS, [])
    st.caption(f"{len(selected)}/{MAX_COMPARED_DEALS} deals selected")
    cols = st.columns(3)
    for i, deal in enumerate(SAMPLE_DEALS):
        with cols[i % 3]:
            with st.container(border=True):
                trending = badge('Trending', 'warning') if deal.get('trending') else ''
                st.markdown(f"**{deal['name']}** {trending}", unsafe_allow_html=True)
                st.caption(f"{deal['industry']} · {deal['stage']} · {format_currency(deal['amount'])}")
                st.write(deal['description'])
                chosen = deal['id'] in selected
                full = len(selected) >= MAX_COMPARED_DEALS and not chosen
                if st.button("Remove" if chosen else "Compare", key=f"deal_{deal['id']}",
                             disabled=full, use_container_width=True):
                    SessionManager.set(SessionManager.SELECTED_DEALS, toggle_deal(selected, deal['id']))
                    st.rerun()


def _render_comparison():
    deals = get_deals(SessionManager.get(SessionManager.SELECTED_DEALS, []))
    if len(deals) < 2:
        st.info("Select at least two deals to compare.")
        return

    category = st.radio("Criteria", COMPARISON_CATEGORIES, horizontal=True, format_func=_label)
    criteria = filter_criteria(category)
    frame = comparison_frame(deals, category)

    names = {deal['id']: deal['name'] for deal in deals}
    best = {c['label']: names.get(best_deal_id(c, deals)) for c in criteria}

    def _highlight(row):
        winner = best.get(row.name)
        return ['font-weight: 600; color: #22C55E' if col == winner else '' for col in row.index]

    st.dataframe(frame.style.apply(_highlight, axis=1), use_container_width=True)
    download_button("Export comparison (CSV)", frame.to_csv(index_label='Criterion'), "deal-comparison.csv",
                    key='deals_csv')

    numeric = [c for c in criteria if c['format'] in ('currency', 'number', 'percentage', 'match')]
    if numeric:
        metric = st.selectbox("Chart metric", numeric, format_func=lambda c: c['label'])
        data = pd.DataFrame({
            'deal': [d['name'] for d in deals],
            'value': [get_nested_value(d, metric['key']) for d in deals],
        }).dropna()
        if not data.empty:
            chart(px.bar(data, x='deal', y='value', labels={'value': metric['label'], 'deal': ''}),
                  height=300, key='deals_chart')


def _render_fit():
    sourcing = _get_sourcing()
    deals = get_deals(SessionManager.get(SessionManager.SELECTED_DEALS, [])) or SAMPLE_DEALS
    for deal in deals:
        fit = analyze_fit(deal, sourcing)
        with st.container(border=True):
            st.markdown(
                f"**{deal['name']}** · fit {fit['fit_percentage']:.0f}% {badge(fit['risk_level'] + ' risk')}",
                unsafe_allow_html=True,
            )
            checks = [
                f"{'✅' if fit[k] else '⚠️'} {label}"
                for k, label in (('industry', 'Industry'), ('stage', 'Stage'), ('size', 'Deal size'), ('risk', 'Risk'))
            ]
            st.caption(' · '.join(checks))
            st.caption(f"Amount {format_value(deal['amount'], 'currency')} · match {format_value(deal['match'], 'match')}")


def render_deals_section(db=None, user_id: str = None):
    """Render the Deal comparison tab."""
    page_header("Deal Comparison", "Compare opportunities against your sourcing criteria", icon="🤝")
    prefs_tab, deals_tab, compare_tab, fit_tab = st.tabs(["Preferences", "Deals", "Compare", "Fit analysis"])
    with prefs_tab:
        _render_onboarding()
        st.markdown("---")
        _render_preferences()
    with deals_tab:
        _render_deal_picker()
    with compare_tab:
        _render_comparison()
    with fit_tab:
        _render_fit()
