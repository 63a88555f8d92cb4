"""
AI Assessment Tab
=================
Two ways to measure AI readiness:

- Quick wizard: five steps (organization, current usage, technical
  readiness, budget/timeline, results) producing a 0-100 readiness score and
  tiered platform recommendations.
- Enhanced assessment: seven weighted dimensions with a question bank,
  dimension radar, prioritized recommendations, a phased roadmap and
  platform matches.

Both results can be saved to ``ai_assessments``.
"""

import json

import plotly.graph_objects as go
import streamlit as st

from assessment_engine import SCORE_LEVELS, EnhancedAssessment, dimension_scores_to_csv
from catalog.readiness import (
    AI_TOOLS,
    BUDGET_RANGES,
    DEPLOYMENT_PREFERENCES,
    IMPLEMENTATION_TIMELINES,
    INDUSTRIES,
    PRIMARY_OBJECTIVES,
    PROFICIENCY_LEVELS,
    ROI_TIMELINES,
    SECURITY_REQUIREMENTS,
    WIZARD_STEPS,
)
from components.ui_components import bullet_list, chart, download_button, info_card, metric_row, page_header, show_result
from linear_theme import COLORS, badge
from platform_engine import get_platform
from readiness_wizard import ReadinessWizard
from services import AssessmentService, SessionManager


def _platform_names(platform_ids):
    names = []
    for platform_id in platform_ids:
        platform = get_platform(platform_id)
        names.append(platform['name'] if platform else platform_id)
    return names


# =============================================================================
# QUICK WIZARD
# =============================================================================

def _render_wizard_step(wizard: ReadinessWizard):
    answers = wizard.answers
    step = wizard.current_step

    if step == 0:
        profile = answers['organization_profile']
        size = st.number_input("Company size (employees)", min_value=1, value=int(profile['company_size']), step=10)
        industry = st.selectbox(
            "Industry", [''] + INDUSTRIES,
            index=([''] + INDUSTRIES).index(profile['industry']) if profile['industry'] in INDUSTRIES else 0,
        )
        maturity = st.slider("Digital maturity", 1, 5, int(profile['digital_maturity']))
        objectives = st.multiselect("Primary objectives", PRIMARY_OBJECTIVES, default=profile['primary_objectives'])
        wizard.update('organization_profile', company_size=size, industry=industry,
                      digital_maturity=maturity, primary_objectives=objectives)

    elif step == 1:
        usage = answers['current_ai_usage']
        tools = st.multiselect("AI tools in use", AI_TOOLS, default=usage['current_tools'])
        budget_pct = st.slider("Share of IT budget spent on AI (%)", 0, 50, int(usage['ai_budget_percentage']))
        proficiency = st.radio("Team AI proficiency", PROFICIENCY_LEVELS,
                               index=PROFICIENCY_LEVELS.index(usage['team_proficiency']), horizontal=True)
        success = st.slider("Past AI project success rate (%)", 0, 100, int(usage['past_project_success']))
        wizard.update('current_ai_usage', current_tools=tools, ai_budget_percentage=budget_pct,
                      team_proficiency=proficiency, past_project_success=success)

    elif step == 2:
        tech = answers['technical_readiness']
        data_infra = st.slider("Data infrastructure maturity", 1, 5, int(tech['data_infrastructure']))
        api = st.slider("API readiness", 1, 5, int(tech['api_readiness']))
        security = st.multiselect("Security / compliance requirements", SECURITY_REQUIREMENTS,
                                  default=tech['security_requirements'])
        deployment = st.radio("Deployment preference", DEPLOYMENT_PREFERENCES,
                              index=DEPLOYMENT_PREFERENCES.index(tech['deployment_preference']), horizontal=True)
        wizard.update('technical_readiness', data_infrastructure=data_infra, api_readiness=api,
                      security_requirements=security, deployment_preference=deployment)

    elif step == 3:
        budget = answers['budget_timeline']
        budget_range = st.selectbox("Budget range", BUDGET_RANGES, index=BUDGET_RANGES.index(budget['budget_range']))
        timeline = st.selectbox("Implementation timeline", IMPLEMENTATION_TIMELINES,
                                index=IMPLEMENTATION_TIMELINES.index(budget['implementation_timeline']))
        roi = st.selectbox("Expected ROI timeline", ROI_TIMELINES,
                           index=ROI_TIMELINES.index(budget['expected_roi_timeline']))
        change = st.slider("Change management readiness", 1, 5, int(budget['change_management_readiness']))
        wizard.update('budget_timeline', budget_range=budget_range, implementation_timeline=timeline,
                      expected_roi_timeline=roi, change_management_readiness=change)


def _render_wizard_results(wizard: ReadinessWizard, service: AssessmentService, user_id: str):
    score = wizard.readiness_score()
    recs = wizard.recommendations()

    fig = go.Figure(go.Indicator(
        mode='gauge+number',
        value=score,
        title={'text': 'AI Readiness Score'},
        gauge={'axis': {'range': [0, 100]}, 'bar': {'color': COLORS['accent']}},
    ))
    chart(fig, height=280, key='wizard_gauge')
    info_card("Overall assessment", recs['overall_assessment'])

    cols = st.columns(3)
    for col, (title, key) in zip(cols, [
        ("Tier 1 - Best fit", 'tier1_platforms'),
        ("Tier 2 - Good fit", 'tier2_platforms'),
        ("Tier 3 - Consider later", 'tier3_platforms'),
    ]):
        with col:
            st.markdown(f"**{title}**")
            bullet_list(_platform_names(recs[key]), empty='No platforms in this tier')

    st.markdown("**Action items**")
    bullet_list(recs['action_items'])

    c1, c2 = st.columns(2)
    with c1:
        if st.button("Save assessment", type="primary", use_container_width=True, key='wizard_save'):
            show_result(service.save_wizard(user_id, wizard.to_record(user_id)),
                        "Assessment saved", "Could not save assessment")
    with c2:
        download_button("Download results (JSON)", json.dumps(wizard.to_record(user_id), indent=2),
                        "ai-readiness-results.json", mime='application/json', key='wizard_json')


def render_readiness_wizard(service: AssessmentService, user_id: str):
    wizard = SessionManager.get_or_create(SessionManager.READINESS_WIZARD, ReadinessWizard)

    st.progress(wizard.current_step / (len(WIZARD_STEPS) - 1),
                text=f"Step {wizard.current_step + 1} of {len(WIZARD_STEPS)}: {wizard.step_name}")

    if wizard.current_step < len(WIZARD_STEPS) - 1:
        _render_wizard_step(wizard)
    else:
        _render_wizard_results(wizard, service, user_id)

    c1, c2, c3 = st.columns(3)
    with c1:
        if st.button("Back", disabled=wizard.current_step == 0, use_container_width=True, key='wizard_back'):
            wizard.previous_step()
            st.rerun()
    with c2:
        if st.button("Start over", use_container_width=True, key='wizard_reset'):
            wizard.reset()
            st.rerun()
    with c3:
        last = wizard.current_step == len(WIZARD_STEPS) - 1
        if st.button("Next", type="primary", disabled=last, use_container_width=True, key='wizard_next'):
            wizard.next_step()
            st.rerun()


# =============================================================================
# ENHANCED ASSESSMENT
# =============================================================================

def _question_input(question, current):
    """Render the widget for one question and return its value (None while unanswered)."""
    qtype = question['type']
    key = f"q_{question['id']}"
    options = question['options']
    labels = {o['value']: o['label'] for o in options}

    if qtype == 'single':
        values = [o['value'] for o in options]
        index = values.index(current) if current in values else None
        return st.radio(question['question'], values, index=index, format_func=labels.get, key=key)
    if qtype == 'multiple':
        return st.multiselect(question['question'], [o['value'] for o in options],
                              default=current or [], format_func=labels.get, key=key)
    if qtype in ('slider', 'rating'):
        low = int(question.get('min_value') or 0)
        high = int(question.get('max_value') or 100)
        return st.slider(question['question'], low, high, int(current if current is not None else low), key=key)
    return st.text_area(question['question'], value=current or '', key=key)


def _render_assessment_results(assessment: EnhancedAssessment, service: AssessmentService, user_id: str):
    result = assessment.build_result()
    dimension_scores = result['dimension_scores']
    level = SCORE_LEVELS[max(dimension_scores, key=lambda d: d['percentage'])['level']] if dimension_scores else None

    metric_row([
        {'label': 'Overall score', 'value': f"{result['total_score']}/100"},
        {'label': 'Dimensions scored', 'value': len(dimension_scores)},
        {'label': 'Recommendations', 'value': len(result['recommendations'])},
        {'label': 'Strongest level', 'value': level['label'] if level else '—'},
    ])

    if dimension_scores:
        names = [d['dimension_name'] for d in dimension_scores]
        values = [d['percentage'] for d in dimension_scores]
        fig = go.Figure(go.Scatterpolar(r=values + values[:1], theta=names + names[:1], fill='toself', name='Score'))
        fig.update_layout(polar=dict(radialaxis=dict(range=[0, 100])), showlegend=False)
        chart(fig, height=420, key='assessment_radar')

        for ds in dimension_scores:
            with st.expander(f"{ds['dimension_name']}: {ds['percentage']}%"):
                st.markdown(badge(SCORE_LEVELS[ds['level']]['label']), unsafe_allow_html=True)
                c1, c2 = st.columns(2)
                with c1:
                    st.markdown("**Strengths**")
                    bullet_list(ds['strengths'])
                with c2:
                    st.markdown("**Gaps**")
                    bullet_list(ds['gaps'])

    tab_recs, tab_roadmap, tab_platforms = st.tabs(["Recommendations", "Roadmap", "Platform matches"])
    with tab_recs:
        if not result['recommendations']:
            st.success("No critical or developing dimensions. Focus on scaling.")
        for rec in result['recommendations']:
            st.markdown(f"{badge(rec['priority'])} **{rec['title']}**", unsafe_allow_html=True)
            st.caption(rec['description'])
            bullet_list(rec['action_items'])
    with tab_roadmap:
        for item in result['roadmap_items']:
            with st.expander(f"Phase {item['phase']}: {item['title']} (weeks {item['start_week']}-{item['end_week']})"):
                st.write(item['description'])
                bullet_list(item['milestones'])
                st.caption(f"Estimated cost: {item['estimated_cost']}")
    with tab_platforms:
        for match in result['platform_matches']:
            st.markdown(f"**{match['platform_name']}** · {match['match_score']} pts · {match['estimated_roi']}")
            bullet_list(match['match_reasons'])

    c1, c2 = st.columns(2)
    with c1:
        if st.button("Save assessment", type="primary", use_container_width=True, key='enhanced_save'):
            show_result(service.save_enhanced(user_id, result), "Assessment saved", "Answer at least one question first")
    with c2:
        download_button("Download dimension scores (CSV)", dimension_scores_to_csv(dimension_scores),
                        "ai-readiness-dimensions.csv", key='enhanced_csv')


def render_enhanced_assessment(service: AssessmentService, user_id: str):
    assessment = SessionManager.get(SessionManager.ASSESSMENT)
    if assessment is None:
        kind = st.radio("Assessment type", ['external', 'internal'], horizontal=True,
                        format_func=lambda t: 'Client (external)' if t == 'external' else 'Internal team')
        if st.button("Begin assessment", type="primary"):
            SessionManager.set(SessionManager.ASSESSMENT, EnhancedAssessment(kind))
            st.rerun()
        return

    with st.expander("Organization", expanded=not assessment.organization_name):
        name = st.text_input("Organization name", value=assessment.organization_name)
        email = st.text_input("Contact email", value=assessment.contact_email)
        assessment.set_organization_info(name, email)
        other = 'internal' if assessment.assessment_type == 'external' else 'external'
        if st.button(f"Switch to {other} assessment", help="Clears the answers given so far"):
            assessment.set_assessment_type(other)
            st.rerun()

    st.progress(assessment.progress_percentage / 100,
                text=f"{assessment.answered_questions} of {assessment.total_questions} questions answered")

    if assessment.is_complete:
        _render_assessment_results(assessment, service, user_id)
        if st.button("Start a new assessment"):
            SessionManager.delete(SessionManager.ASSESSMENT)
            st.rerun()
        return

    dimension = assessment.current_dimension
    question = assessment.current_question
    if dimension and question:
        st.markdown(f"#### {dimension['name']}")
        st.caption(dimension['description'])
        current = assessment.get_response(question['id'])
        value = _question_input(question, current['value'] if current else None)
        if question.get('help_text'):
            st.caption(question['help_text'])

        c1, c2 = st.columns(2)
        with c1:
            if st.button("Previous", use_container_width=True, key='assessment_prev'):
                assessment.previous_question()
                st.rerun()
        with c2:
            if st.button("Next", type="primary", use_container_width=True, key='assessment_next'):
                if value is None or value == '' or value == []:
                    if question.get('required'):
                        st.warning("Please answer this question to continue.")
                        return
                else:
                    assessment.answer(question['id'], value)
                assessment.next_question()
                st.rerun()


def render_assessment_section(db, user_id: str):
    """Render the AI Assessment tab."""
    page_header("AI Assessment", "Measure AI readiness and get platform recommendations", icon="🧭")
    service = AssessmentService(db)

    quick, enhanced, history = st.tabs(["Quick readiness wizard", "Enhanced assessment", "Saved assessments"])
    with quick:
        render_readiness_wizard(service, user_id)
    with enhanced:
        render_enhanced_assessment(service, user_id)
    with history:
        saved = service.list_assessments(user_id)
        if not saved:
            st.caption("No saved assessments yet.")
        for row in saved:
            org = (row.get('organization_profile') or {}).get('name') or row.get('created_at', '')[:10]
            c1, c2 = st.columns([4, 1])
            with c1:
                st.markdown(f"**{org or 'Assessment'}** · score {row.get('readiness_score')}")
            with c2:
                if st.button("Delete", key=f"del_assessment_{row['id']}"):
                    service.delete_assessment(row['id'], user_id)
                    st.rerun()
