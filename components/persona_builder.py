"""
Persona Builder Tab
===================
Two views:

- Client personas: the buyer profiles INT sells to, with ranked AI tool
  recommendations, related services and case studies.
- Employee personas: build a profile (manually or AI-generated), split the
  role into "hats" with time allocation, and generate ecosystem prompts
  (Claude, Copilot, Gemini) that are versioned in ``ecosystem_exports``.
"""

import streamlit as st

from catalog.personas import (
    AI_INTERACTION_STYLES,
    CLIENT_PERSONAS,
    COMMON_TOOLS,
    COMMUNICATION_STYLE_OPTIONS,
    DEFAULT_COMMUNICATION_STYLE,
    DEFAULT_WORK_PREFERENCES,
    ECOSYSTEMS,
    EMPLOYEE_DEPARTMENTS,
    PERSONA_STATUSES,
    RESPONSE_LENGTHS,
    TONES,
    WORK_PREFERENCE_OPTIONS,
)
from components.ai_assistant import AIAssistant
from components.ui_components import bullet_list, download_button, page_header, progress_bar, show_result
from linear_theme import badge, empty_state
from persona_engine import (
    MAX_HAT_ALLOCATION,
    export_filename,
    get_ai_tool_recommendations,
    get_client_persona,
    get_related_case_studies,
    get_related_services,
    total_hat_allocation,
    validate_generation_request,
)
from services import PersonaService, SessionManager


def _label(value: str) -> str:
    return value.replace('_', ' ').title()


def _lines(raw: str):
    return [line.strip() for line in raw.splitlines() if line.strip()]


# =============================================================================
# CLIENT PERSONAS
# =============================================================================

def _render_client_personas():
    persona_id = st.selectbox("Client persona", [p['id'] for p in CLIENT_PERSONAS],
                              format_func=lambda pid: get_client_persona(pid)['title'])
    persona = get_client_persona(persona_id)

    st.markdown(f"### {persona['title']} ({persona['role']})")
    st.caption(f"{', '.join(persona['industry'])} · {persona['company_size']} · "
               f"budget {persona['budget_tier']} · {persona['decision_authority']}")

    c1, c2 = st.columns(2)
    with c1:
        st.markdown("**Goals**")
        bullet_list(persona['goals'])
        st.markdown("**Success metrics**")
        bullet_list(persona['success_metrics'])
    with c2:
        st.markdown("**Pain points**")
        bullet_list(persona['pain_points'])
        st.markdown("**AI use cases**")
        bullet_list(persona.get('ai_use_cases', []))

    st.markdown("#### Recommended AI tools")
    for rec in get_ai_tool_recommendations(persona_id):
        with st.container(border=True):
            st.markdown(f"**{rec['platform_name']}** {badge(rec['ecosystem'], 'info')} · relevance {rec['relevance_score']}",
                        unsafe_allow_html=True)
            st.caption(rec['rationale'])
            st.caption('Use cases: ' + ', '.join(rec['use_cases']))

    services_col, cases_col = st.columns(2)
    with services_col:
        st.markdown("#### Related services")
        services = get_related_services(persona_id)
        if not services:
            st.caption("None")
        for service in services:
            st.markdown(f"**{service['name']}**: {service['short_description']}")
    with cases_col:
        st.markdown("#### Case studies")
        cases = get_related_case_studies(persona_id)
        if not cases:
            st.caption("None")
        for case in cases:
            with st.expander(f"{case['title']} · {case['industry']}"):
                st.markdown(f"**Problem:** {case['problem']}")
                st.markdown(f"**Solution:** {case['solution']}")
                st.markdown(f"**Outcome:** {case['outcome']}")
                st.caption(' · '.join(f"{m['name']} {m['value']}" for m in case.get('metrics', [])))


# =============================================================================
# EMPLOYEE PERSONAS
# =============================================================================

def _persona_form(key: str, persona=None, suggested=None):
    """Persona fields; ``suggested`` pre-fills from an AI draft. Returns a dict or None until submitted."""
    base = {**(persona or {}), **(suggested or {})}
    comm = {**DEFAULT_COMMUNICATION_STYLE, **(base.get('communication_style') or {})}
    work = {**DEFAULT_WORK_PREFERENCES, **(base.get('work_preferences') or {})}

    with st.form(key):
        c1, c2, c3 = st.columns(3)
        with c1:
            name = st.text_input("Name", value=base.get('name', ''))
        with c2:
            job_title = st.text_input("Job title", value=base.get('job_title') or '')
        with c3:
            department = st.selectbox(
                "Department", EMPLOYEE_DEPARTMENTS,
                index=EMPLOYEE_DEPARTMENTS.index(base['department']) if base.get('department') in EMPLOYEE_DEPARTMENTS else 0,
            )

        st.markdown("**Communication style**")
        cols = st.columns(len(COMMUNICATION_STYLE_OPTIONS))
        communication_style = {}
        for col, (field, options) in zip(cols, COMMUNICATION_STYLE_OPTIONS.items()):
            with col:
                keys = list(options)
                communication_style[field] = st.selectbox(
                    _label(field), keys, index=keys.index(comm[field]) if comm[field] in keys else 0,
                    format_func=lambda k, o=options: o[k]['label'],
                )

        st.markdown("**Work preferences**")
        cols = st.columns(len(WORK_PREFERENCE_OPTIONS))
        work_preferences = {}
        for col, (field, options) in zip(cols, WORK_PREFERENCE_OPTIONS.items()):
            with col:
                work_preferences[field] = st.selectbox(
                    _label(field), options, index=options.index(work[field]) if work[field] in options else 0,
                    format_func=_label,
                )

        c1, c2 = st.columns(2)
        with c1:
            skills = st.text_area("Skills (one per line)", value='\n'.join(base.get('skills') or []))
            pain_points = st.text_area("Pain points (one per line)", value='\n'.join(base.get('pain_points') or []))
        with c2:
            expertise = st.text_area("Expertise areas (one per line)", value='\n'.join(base.get('expertise_areas') or []))
            goals = st.text_area("Goals (one per line)", value='\n'.join(base.get('goals') or []))
        tools = st.multiselect("Tools used", sorted(set(COMMON_TOOLS) | set(base.get('tools_used') or [])),
                               default=base.get('tools_used') or [])

        c1, c2, c3, c4 = st.columns(4)
        with c1:
            style = st.selectbox("AI interaction style", AI_INTERACTION_STYLES,
                                 index=AI_INTERACTION_STYLES.index(base.get('ai_interaction_style', 'balanced'))
                                 if base.get('ai_interaction_style') in AI_INTERACTION_STYLES else 1)
        with c2:
            length = st.selectbox("Response length", RESPONSE_LENGTHS,
                                  index=RESPONSE_LENGTHS.index(base['preferred_response_length'])
                                  if base.get('preferred_response_length') in RESPONSE_LENGTHS else 1)
        with c3:
            tone = st.selectbox("Tone", TONES, index=TONES.index(base['preferred_tone'])
                                if base.get('preferred_tone') in TONES else 1)
        with c4:
            status = st.selectbox("Status", PERSONA_STATUSES, index=PERSONA_STATUSES.index(base['status'])
                                  if base.get('status') in PERSONA_STATUSES else 0)

        submitted = st.form_submit_button("Save persona", type="primary")

    if not submitted:
        return None
    return {
        'name': name,
        'job_title': job_title,
        'department': department,
        'communication_style': communication_style,
        'work_preferences': work_preferences,
        'skills': _lines(skills),
        'expertise_areas': _lines(expertise),
        'pain_points': _lines(pain_points),
        'goals': _lines(goals),
        'tools_used': tools,
        'ai_interaction_style': style,
        'preferred_response_length': length,
        'preferred_tone': tone,
        'status': status,
    }


def _render_generate(assistant: AIAssistant):
    with st.expander("✨ Generate a draft with AI", expanded=False):
        c1, c2 = st.columns(2)
        with c1:
            job_title = st.text_input("Job title", key='persona_gen_title')
        with c2:
            department = st.selectbox("Department", EMPLOYEE_DEPARTMENTS, key='persona_gen_department')
        context = st.text_area("Additional context", key='persona_gen_context')
        if st.button("Generate", disabled=not assistant.is_available()):
            error = validate_generation_request(job_title, department, context)
            if error:
                st.error(error)
            else:
                with st.spinner("Generating persona..."):
                    draft = assistant.generate_persona(job_title, department, context or None)
                if draft:
                    st.session_state['persona_draft'] = {**draft, 'job_title': job_title, 'department': department}
                    st.success("Draft ready; review it in the form below")
        if not assistant.is_available():
            st.caption("Configure `[ai_gateway]` in secrets to enable generation.")


def _render_hats(service: PersonaService, user_id: str, persona, assistant: AIAssistant):
    hats = service.list_hats(persona['id'])
    allocated = total_hat_allocation(hats)
    progress_bar(allocated, label="Time allocated")

    for hat in hats:
        with st.expander(f"🎩 {hat['name']} · {hat.get('time_percentage', 0)}%"):
            if hat.get('description'):
                st.write(hat['description'])
            bullet_list(hat.get('responsibilities') or [], empty='No responsibilities listed')
            new_pct = st.number_input("Time %", 0, MAX_HAT_ALLOCATION, int(hat.get('time_percentage') or 0),
                                      key=f"persona_hat_pct_{hat['id']}")
            c1, c2, c3 = st.columns(3)
            with c1:
                if st.button("Update", key=f"persona_hat_upd_{hat['id']}"):
                    show_result(service.update_hat(hat['id'], persona['id'], {'time_percentage': int(new_pct)}),
                                "Hat updated", f"Total allocation would exceed {MAX_HAT_ALLOCATION}%")
            with c2:
                if st.button("Delete", key=f"persona_hat_del_{hat['id']}"):
                    if show_result(service.delete_hat(hat['id']), "Hat removed", "Delete failed"):
                        st.rerun()
            with c3:
                suggest = st.button("AI suggestions", key=f"persona_hat_ai_{hat['id']}",
                                    disabled=not assistant.is_available())
            if suggest:
                with st.spinner("Analyzing role..."):
                    suggestions = assistant.generate_prompt('hat_suggestions', persona, hat=hat)
                if suggestions:
                    for field, items in suggestions.items():
                        if items:
                            st.markdown(f"**{_label(field)}**")
                            bullet_list([i if isinstance(i, str) else str(i) for i in items])

    with st.form(f"persona_hat_add_{persona['id']}"):
        st.markdown("**Add a hat**")
        name = st.text_input("Hat name")
        description = st.text_input("Description")
        responsibilities = st.text_area("Responsibilities (one per line)")
        pct = st.number_input("Time %", 0, MAX_HAT_ALLOCATION, min(20, MAX_HAT_ALLOCATION - allocated))
        added = st.form_submit_button("Add hat")
    if added:
        created = service.add_hat(user_id, persona['id'], {
            'name': name,
            'description': description or None,
            'responsibilities': _lines(responsibilities),
            'time_percentage': int(pct),
        })
        if show_result(created, f"Added '{name}'",
                       f"A name is required and total allocation must stay at or under {MAX_HAT_ALLOCATION}%"):
            st.rerun()
    return hats


def _render_exports(service: PersonaService, user_id: str, persona, hats, assistant: AIAssistant):
    ecosystem = st.radio("Ecosystem", list(ECOSYSTEMS), horizontal=True,
                         format_func=lambda e: ECOSYSTEMS[e]['label'], key='persona_ecosystem')
    st.caption(ECOSYSTEMS[ecosystem]['description'])

    prompt_key = f"{persona['id']}:{ecosystem}"
    if st.button("Generate prompt", type="primary", disabled=not assistant.is_available()):
        with st.spinner(f"Writing {ECOSYSTEMS[ecosystem]['label']} prompt..."):
            content = assistant.generate_prompt(ecosystem, persona, hats=hats)
        if content:
            SessionManager.set_generated_prompt(prompt_key, content)

    content = SessionManager.get_generated_prompt(prompt_key)
    if content:
        content = st.text_area("Generated prompt", value=content, height=320, key=f"persona_prompt_{prompt_key}")
        c1, c2 = st.columns(2)
        with c1:
            if st.button("Save export", use_container_width=True):
                saved = service.save_export(user_id, persona, ecosystem, content)
                show_result(saved, f"Saved version {saved['version']}" if saved else '', "Could not save the export")
        with c2:
            download_button("Download", content, export_filename(persona['name'], ecosystem),
                            mime='text/plain', key=f"persona_dl_{prompt_key}")

    exports = service.list_exports(persona['id'])
    if exports:
        st.markdown("#### Saved exports")
        for export in exports:
            st.markdown(f"- {export['name']} · v{export['version']} {badge(export['ecosystem'], 'info')}",
                        unsafe_allow_html=True)


def _render_employee_personas(service: PersonaService, user_id: str):
    assistant = AIAssistant()
    personas = service.list_personas(user_id)

    options = ['__new__'] + [p['id'] for p in personas]
    active = SessionManager.get(SessionManager.ACTIVE_PERSONA_ID)
    persona_id = st.selectbox(
        "Persona", options, index=options.index(active) if active in options else 0,
        format_func=lambda pid: '➕ New persona' if pid == '__new__'
        else next(p['name'] for p in personas if p['id'] == pid),
    )

    if persona_id == '__new__':
        _render_generate(assistant)
        data = _persona_form('persona_new', suggested=st.session_state.get('persona_draft'))
        if data is not None:
            created = service.create_persona(user_id, data)
            if show_result(created, f"Created '{data['name']}'", "A name is required"):
                st.session_state.pop('persona_draft', None)
                SessionManager.set(SessionManager.ACTIVE_PERSONA_ID, created['id'])
                st.rerun()
        if not personas:
            empty_state("No personas yet", "Create one above or generate a draft with AI.")
        return

    SessionManager.set(SessionManager.ACTIVE_PERSONA_ID, persona_id)
    persona = service.get_persona(persona_id)
    if not persona:
        st.error("Persona not found")
        return

    profile_tab, hats_tab, exports_tab = st.tabs(["Profile", "Hats", "Ecosystem prompts"])
    with profile_tab:
        data = _persona_form(f"persona_edit_{persona_id}", persona=persona)
        if data is not None:
            show_result(service.update_persona(persona_id, data), "Persona saved", "Invalid name or status")
        if st.button("Delete persona"):
            if show_result(service.delete_persona(persona_id), "Persona deleted", "Delete failed"):
                SessionManager.delete(SessionManager.ACTIVE_PERSONA_ID)
                st.rerun()
    with hats_tab:
        hats = _render_hats(service, user_id, persona, assistant)
    with exports_tab:
        _render_exports(service, user_id, persona, hats, assistant)


def render_persona_builder(db, user_id: str):
    """Render the Persona builder tab."""
    page_header("Persona Builder", "Client buyer profiles and employee AI personas", icon="🧑‍💼")
    client_tab, employee_tab = st.tabs(["Client personas", "Employee personas"])
    with client_tab:
        _render_client_personas()
    with employee_tab:
        _render_employee_personas(PersonaService(db), user_id)
