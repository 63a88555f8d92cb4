"""
INT AI Consulting Dashboard
===========================
Main application entry point.

Sections:
1. AI Assessment - Readiness wizard and enhanced assessment
2. Governance - Usage, policies, bias scans and audit log
3. Enterprise Platforms - Platform explorer and comparison
4. Implementation Plan - Ten-week rollout
5. Microsoft Ecosystem - Copilot, Power Platform and Azure AI
6. Deal Comparison - Sourcing preferences and side-by-side deals
7. Knowledge Base - Searchable document library
8. Persona Builder - Client and employee personas
9. Pricing Toolkit - ROI calculator and sales enablement
10. Agent Network - Symphony agents and RACI
"""

import streamlit as st
from datetime import datetime

# =============================================================================
# PAGE CONFIGURATION
# =============================================================================

st.set_page_config(
    page_title="INT - AI Consulting Dashboard",
    page_icon="🧭",
    layout="wide",
    initial_sidebar_state="expanded"
)

# =============================================================================
# IMPORTS
# =============================================================================

# Database connector
from db_connector import SupabaseHandler
from linear_theme import COLORS, apply_theme
from services import SessionManager
from supabase_utils import get_user_id

try:
    from components.assessment_ui import render_assessment_section
    ASSESSMENT_AVAILABLE = True
except ImportError:
    ASSESSMENT_AVAILABLE = False

try:
    from components.governance_ui import render_governance_section
    GOVERNANCE_AVAILABLE = True
except ImportError:
    GOVERNANCE_AVAILABLE = False

try:
    from components.platform_explorer import render_platform_explorer
    PLATFORMS_AVAILABLE = True
except ImportError:
    PLATFORMS_AVAILABLE = False

try:
    from components.roadmap_ui import render_roadmap_section
    ROADMAP_AVAILABLE = True
except ImportError:
    ROADMAP_AVAILABLE = False

try:
    from components.microsoft_ecosystem import render_microsoft_section
    MICROSOFT_AVAILABLE = True
except ImportError:
    MICROSOFT_AVAILABLE = False

try:
    from components.deals_ui import render_deals_section
    DEALS_AVAILABLE = True
except ImportError:
    DEALS_AVAILABLE = False

try:
    from components.knowledge_base import render_knowledge_base
    KNOWLEDGE_BASE_AVAILABLE = True
except ImportError:
    KNOWLEDGE_BASE_AVAILABLE = False

try:
    from components.persona_builder import render_persona_builder
    PERSONAS_AVAILABLE = True
except ImportError:
    PERSONAS_AVAILABLE = False

try:
    from components.pricing_ui import render_pricing_section
    PRICING_AVAILABLE = True
except ImportError:
    PRICING_AVAILABLE = False

try:
    from components.symphony_ui import render_symphony_section
    SYMPHONY_AVAILABLE = True
except ImportError:
    SYMPHONY_AVAILABLE = False


# (id, label, available, renderer); renderers take (db, user_id)
SECTIONS = [
    ('assessment', 'AI Assessment', ASSESSMENT_AVAILABLE,
     render_assessment_section if ASSESSMENT_AVAILABLE else None),
    ('governance', 'Governance', GOVERNANCE_AVAILABLE,
     render_governance_section if GOVERNANCE_AVAILABLE else None),
    ('platforms', 'Enterprise Platforms', PLATFORMS_AVAILABLE,
     render_platform_explorer if PLATFORMS_AVAILABLE else None),
    ('roadmap', 'Implementation Plan', ROADMAP_AVAILABLE,
     render_roadmap_section if ROADMAP_AVAILABLE else None),
    ('microsoft', 'Microsoft Ecosystem', MICROSOFT_AVAILABLE,
     render_microsoft_section if MICROSOFT_AVAILABLE else None),
    ('deals', 'Deal Comparison', DEALS_AVAILABLE,
     render_deals_section if DEALS_AVAILABLE else None),
    ('knowledge', 'Knowledge Base', KNOWLEDGE_BASE_AVAILABLE,
     render_knowledge_base if KNOWLEDGE_BASE_AVAILABLE else None),
    ('personas', 'Persona Builder', PERSONAS_AVAILABLE,
     render_persona_builder if PERSONAS_AVAILABLE else None),
    ('pricing', 'Pricing Toolkit', PRICING_AVAILABLE,
     render_pricing_section if PRICING_AVAILABLE else None),
    ('symphony', 'Agent Network', SYMPHONY_AVAILABLE,
     render_symphony_section if SYMPHONY_AVAILABLE else None),
]

DEFAULT_SECTION = 'assessment'


def init_session_state():
    """Initialize session state variables."""
    SessionManager.get_or_create(SessionManager.DB_HANDLER, SupabaseHandler)
    SessionManager.get_or_create(SessionManager.CURRENT_SECTION, lambda: DEFAULT_SECTION)


def render_navigation():
    """Render the main navigation in the sidebar."""
    st.sidebar.markdown(f"""
    <div style="padding: 0.5rem 0 1rem 0;">
        <div style="color: {COLORS['text_primary']}; font-weight: 600; font-size: 1.1rem;">INT</div>
        <div style="color: {COLORS['text_tertiary']}; font-size: 0.8rem;">AI Consulting Dashboard</div>
    </div>
    """, unsafe_allow_html=True)
    st.sidebar.markdown("### Navigation")

    for section_id, label, available, _ in SECTIONS:
        if not available:
            continue

        if SessionManager.get(SessionManager.CURRENT_SECTION) == section_id:
            st.sidebar.markdown(f"""
            <div style="
                background-color: {COLORS['border_subtle']};
                border-left: 2px solid {COLORS['accent']};
                padding: 0.5rem 1rem;
                margin: 0.25rem 0;
                color: {COLORS['text_primary']};
                font-weight: 500;
                font-size: 0.875rem;
            ">{label}</div>
            """, unsafe_allow_html=True)
        elif st.sidebar.button(label, key=f"nav_{section_id}", use_container_width=True):
            SessionManager.set(SessionManager.CURRENT_SECTION, section_id)
            st.rerun()


def render_module_status():
    with st.sidebar.expander("Module Status"):
        for _, label, available, _ in SECTIONS:
            status = "Active" if available else "Inactive"
            color = COLORS['success'] if available else COLORS['neutral']
            st.markdown(f"<span style='color: {color};'>●</span> {label}: {status}", unsafe_allow_html=True)


def main():
    """Main application entry point."""
    init_session_state()
    apply_theme()

    render_navigation()
    render_module_status()

    user_id = get_user_id()
    st.sidebar.markdown("---")
    st.sidebar.caption(f"User: {user_id[:8]}..." if user_id else "Not signed in")
    st.sidebar.markdown(
        f"<div style='text-align: center; color: {COLORS['text_tertiary']}; font-size: 0.75rem;'>"
        f"v1.0 | {datetime.now().strftime('%Y-%m-%d')}"
        f"</div>",
        unsafe_allow_html=True
    )

    renderers = {section_id: render for section_id, _, available, render in SECTIONS if available}
    render = renderers.get(SessionManager.get(SessionManager.CURRENT_SECTION))
    if render is None:
        st.error("This section is not available.")
        return
    render(SessionManager.get(SessionManager.DB_HANDLER), user_id)


if __name__ == "__main__":
    main()
