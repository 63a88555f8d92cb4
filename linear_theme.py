"""
INT AI Consulting Dashboard - Linear Theme
==========================================
Dark, low-contrast theme shared by every tab, plus small HTML helpers
(badges, stat cards, empty states) and a plotly layout that matches it.
"""

import streamlit as st
from typing import Any, Dict, Optional

# =============================================================================
# COLOR SYSTEM
# =============================================================================

COLORS = {
    # Backgrounds (darkest to lightest)
    'bg_base': '#09090B',
    'bg_elevated': '#0F0F11',
    'bg_surface': '#18181B',
    'bg_hover': '#1F1F23',

    # Borders
    'border_subtle': '#27272A',
    'border_default': '#3F3F46',

    # Text
    'text_primary': '#FAFAFA',
    'text_secondary': '#A1A1AA',
    'text_tertiary': '#71717A',

    # INT indigo accent
    'accent': '#6366F1',
    'accent_hover': '#818CF8',
    'accent_muted': 'rgba(99, 102, 241, 0.15)',

    # Status
    'success': '#22C55E',
    'warning': '#F59E0B',
    'error': '#EF4444',
    'info': '#3B82F6',
    'neutral': '#71717A',
}

# Series colors for plotly traces, accent first
CHART_SEQUENCE = ['#6366F1', '#22C55E', '#F59E0B', '#3B82F6', '#EC4899', '#14B8A6', '#A855F7', '#EF4444']

# Status / priority strings used across the catalogs -> badge variant
STATUS_VARIANTS: Dict[str, str] = {
    'completed': 'success',
    'complete': 'success',
    'success': 'success',
    'active': 'success',
    'compliant': 'success',
    'in-progress': 'info',
    'in_progress': 'info',
    'busy': 'info',
    'planned': 'neutral',
    'pending': 'neutral',
    'idle': 'neutral',
    'draft': 'neutral',
    'warning': 'warning',
    'review': 'warning',
    'blocked': 'error',
    'offline': 'error',
    'critical': 'error',
    'high': 'warning',
    'medium': 'info',
    'low': 'neutral',
}

# =============================================================================
# MAIN THEME CSS
# =============================================================================

LINEAR_CSS = f"""
<style>
@import url('https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap');

:root {{
    --bg-base: {COLORS['bg_base']};
    --bg-surface: {COLORS['bg_surface']};
    --border-subtle: {COLORS['border_subtle']};
    --text-primary: {COLORS['text_primary']};
    --text-secondary: {COLORS['text_secondary']};
    --accent: {COLORS['accent']};
    --accent-hover: {COLORS['accent_hover']};
}}

html, body, [data-testid="stAppViewContainer"] {{
    font-family: 'Inter', -apple-system, BlinkMacSystemFont, sans-serif !important;
    background-color: var(--bg-base) !important;
    color: var(--text-secondary) !important;
}}

.block-container {{
    padding: 2rem 3rem !important;
    max-width: 1400px !important;
}}

h1, h2, h3, h4,
.stMarkdown h1, .stMarkdown h2, .stMarkdown h3 {{
    color: var(--text-primary) !important;
    font-weight: 600 !important;
    letter-spacing: -0.02em !important;
}}

[data-testid="stSidebar"] {{
    background-color: {COLORS['bg_elevated']} !important;
    border-right: 1px solid var(--border-subtle) !important;
}}

[data-testid="stMetric"] {{
    background: var(--bg-surface) !important;
    border: 1px solid var(--border-subtle) !important;
    border-radius: 8px !important;
    padding: 1rem !important;
}}

.stButton > button[kind="primary"] {{
    background: var(--accent) !important;
    border: none !important;
}}

.stButton > button[kind="primary"]:hover {{
    background: var(--accent-hover) !important;
}}

.stTabs [aria-selected="true"] {{
    color: var(--text-primary) !important;
    border-bottom-color: var(--accent) !important;
}}

hr {{
    border: none !important;
    border-top: 1px solid var(--border-subtle) !important;
}}

#MainMenu {{visibility: hidden;}}
footer {{visibility: hidden;}}
</style>
"""


def apply_theme():
    """Inject the theme CSS into the current page."""
    st.markdown(LINEAR_CSS, unsafe_allow_html=True)


def style_figure(fig, height: Optional[int] = None):
    """
    Apply the dark layout to a plotly figure.

    Returns the same figure so calls can be chained into st.plotly_chart.
    """
    fig.update_layout(
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor='rgba(0,0,0,0)',
        font=dict(family='Inter, sans-serif', color=COLORS['text_secondary']),
        colorway=CHART_SEQUENCE,
        margin=dict(l=20, r=20, t=40, b=20),
        legend=dict(bgcolor='rgba(0,0,0,0)'),
    )
    fig.update_xaxes(gridcolor=COLORS['border_subtle'], zerolinecolor=COLORS['border_subtle'])
    fig.update_yaxes(gridcolor=COLORS['border_subtle'], zerolinecolor=COLORS['border_subtle'])
    if height:
        fig.update_layout(height=height)
    return fig


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def format_currency(value: float, prefix: str = '$') -> str:
    """Format number as currency."""
    if abs(value) >= 1_000_000_000:
        return f"{prefix}{value / 1_000_000_000:.1f}B"
    elif abs(value) >= 1_000_000:
        return f"{prefix}{value / 1_000_000:.1f}M"
    elif abs(value) >= 1_000:
        return f"{prefix}{value / 1_000:.1f}K"
    else:
        return f"{prefix}{value:,.0f}"


def status_variant(status: str) -> str:
    return STATUS_VARIANTS.get(str(status).lower(), 'neutral')


def badge(text: str, variant: Optional[str] = None) -> str:
    """Badge HTML; the variant defaults to the one mapped from the text itself."""
    color = COLORS.get(variant or status_variant(text), COLORS['neutral'])
    return (
        f'<span style="background: {color}22; color: {color}; padding: 0.2rem 0.5rem; '
        f'border-radius: 4px; font-size: 0.75rem; font-weight: 500;">{text}</span>'
    )


def stat_card(title: str, value: Any, subtitle: str = None) -> str:
    subtitle_html = (
        f'<div style="color: {COLORS["text_tertiary"]}; font-size: 0.8rem;">{subtitle}</div>' if subtitle else ''
    )
    return f'''
    <div style="background: {COLORS["bg_surface"]}; padding: 1rem; border-radius: 8px; border: 1px solid {COLORS["border_subtle"]};">
        <div style="color: {COLORS["text_tertiary"]}; font-size: 0.85rem; margin-bottom: 0.4rem;">{title}</div>
        <div style="color: {COLORS["text_primary"]}; font-size: 1.5rem; font-weight: 600;">{value}</div>
        {subtitle_html}
    </div>
    '''


def empty_state(title: str, description: str = None) -> None:
    """Render a centered placeholder for lists with nothing in them."""
    description_html = f'<div>{description}</div>' if description else ''
    st.markdown(f'''
    <div style="text-align: center; padding: 3rem 2rem; color: {COLORS["text_tertiary"]};">
        <div style="font-size: 1.25rem; font-weight: 600; color: {COLORS["text_primary"]}; margin-bottom: 0.5rem;">{title}</div>
        {description_html}
    </div>
    ''', unsafe_allow_html=True)
