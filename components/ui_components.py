"""
INT AI Consulting Dashboard - UI Components
===========================================
Reusable Streamlit building blocks shared by the tab renderers.
"""

import streamlit as st
from typing import List, Dict, Any, Optional

from linear_theme import COLORS, stat_card, style_figure

# =============================================================================
# LAYOUT COMPONENTS
# =============================================================================

def page_header(title: str, subtitle: str = None, icon: str = None):
    """
    Render a page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional description text
        icon: Optional emoji shown before the title
    """
    heading = f"{icon} {title}" if icon else title
    subtitle_html = (
        f'<p style="color: {COLORS["text_tertiary"]}; margin: 0; font-size: 0.95rem;">{subtitle}</p>'
        if subtitle else ''
    )
    st.markdown(f'''
    <div style="margin-bottom: 1.5rem;">
        <h1 style="font-size: 1.875rem; font-weight: 700; color: {COLORS['text_primary']};
                   margin: 0 0 0.25rem 0; letter-spacing: -0.02em;">{heading}</h1>
        {subtitle_html}
    </div>
    ''', unsafe_allow_html=True)


def metric_row(metrics: List[Dict[str, Any]], columns: int = None):
    """
    Render a row of metric cards.

    Args:
        metrics: Dicts with keys label, value and optional subtitle
        columns: Number of columns (defaults to one per metric)
    """
    columns = columns or max(len(metrics), 1)
    cols = st.columns(columns)
    for i, metric in enumerate(metrics):
        with cols[i % columns]:
            st.markdown(
                stat_card(metric['label'], metric['value'], subtitle=metric.get('subtitle')),
                unsafe_allow_html=True,
            )


def info_card(title: str, content: str, variant: str = 'info'):
    color = COLORS.get(variant, COLORS['info'])
    st.markdown(f'''
    <div style="background: {color}11; border-left: 3px solid {color}; border-radius: 6px;
                padding: 0.9rem 1rem; margin-bottom: 0.75rem;">
        <div style="color: {COLORS['text_primary']}; font-weight: 600; margin-bottom: 0.25rem;">{title}</div>
        <div style="color: {COLORS['text_secondary']}; font-size: 0.9rem;">{content}</div>
    </div>
    ''', unsafe_allow_html=True)


def progress_bar(value: float, label: str = None):
    """Progress bar for a 0-100 value with an optional caption."""
    value = min(max(float(value or 0), 0.0), 100.0)
    st.progress(value / 100, text=f"{label}: {value:.0f}%" if label else f"{value:.0f}%")


def bullet_list(items: List[str], empty: str = 'None'):
    if not items:
        st.caption(empty)
        return
    st.markdown('\n'.join(f"- {item}" for item in items))


# =============================================================================
# CHARTS AND DOWNLOADS
# =============================================================================

def chart(fig, height: Optional[int] = None, key: str = None):
    """Theme and render a plotly figure at full width."""
    st.plotly_chart(style_figure(fig, height=height), use_container_width=True, key=key)


def download_button(label: str, data: str, file_name: str, mime: str = 'text/csv', key: str = None):
    """
    Download button for generated exports.

    Args:
        label: Button label
        data: File contents
        file_name: Suggested file name
        mime: MIME type (CSV by default)
        key: Widget key
    """
    st.download_button(label, data=data, file_name=file_name, mime=mime, key=key, use_container_width=True)


# =============================================================================
# FEEDBACK
# =============================================================================

def show_result(ok: Any, success: str, failure: str) -> bool:
    """Report a service call outcome; returns whether it succeeded."""
    if ok:
        st.success(success)
        return True
    st.error(failure)
    return False
