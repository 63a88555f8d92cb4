"""
Microsoft Ecosystem Deep-Dive
=============================
Product catalog by category, product relationships, licensing cost
estimator, Frontier Firm readiness and MCP capabilities.
"""

import plotly.graph_objects as go
import streamlit as st

from catalog.microsoft import FRONTIER_FIRM_STATS, LICENSING_OPTIONS, MCP_CAPABILITIES
from components.ui_components import bullet_list, chart, download_button, metric_row, page_header
from ecosystem_engine import (
    estimate_licensing_cost,
    get_categories,
    get_product_by_id,
    get_products_by_category,
    get_related_products,
    relationships_frame,
)
from linear_theme import badge, format_currency


def _render_products():
    category = st.radio("Category", get_categories(), horizontal=True)
    for product in get_products_by_category(category):
        with st.expander(product['name']):
            st.write(product['description'])
            c1, c2 = st.columns(2)
            with c1:
                st.markdown("**Key features**")
                bullet_list(product['key_features'])
            with c2:
                st.markdown("**AI capabilities**")
                bullet_list(product['ai_capabilities'])
            st.markdown(f"**Pricing model:** {product['pricing']['model']}")
            for tier in product['pricing']['tiers']:
                st.markdown(f"- {tier['name']}: {tier['price']}")
            if product.get('mcp_support'):
                st.markdown(badge('MCP supported', 'success'), unsafe_allow_html=True)

            related = get_related_products(product['id'])
            if related:
                st.markdown("**Related products**")
                for item in related:
                    st.markdown(f"- {item['name']} ({item['relationship_type']}): {item['relationship_description']}")


def _render_relationships():
    frame = relationships_frame()
    labels = sorted(set(frame['source']) | set(frame['target']))
    index = {label: i for i, label in enumerate(labels)}
    fig = go.Figure(go.Sankey(
        node=dict(label=labels, pad=18, thickness=14),
        link=dict(
            source=[index[s] for s in frame['source']],
            target=[index[t] for t in frame['target']],
            value=[1] * len(frame),
            label=list(frame['type']),
        ),
    ))
    chart(fig, height=460, key='ms_sankey')
    st.dataframe(frame, use_container_width=True, hide_index=True)


def _render_licensing():
    c1, c2 = st.columns(2)
    with c1:
        option_id = st.selectbox("Licensing option", [o['id'] for o in LICENSING_OPTIONS],
                                 format_func=lambda oid: next(o['name'] for o in LICENSING_OPTIONS if o['id'] == oid))
    with c2:
        seats = st.number_input("Seats", min_value=0, value=25, step=5)

    estimate = estimate_licensing_cost(option_id, int(seats))
    option = next(o for o in LICENSING_OPTIONS if o['id'] == option_id)
    if estimate['monthly'] is None:
        st.info(f"{option['name']} is priced {option['price']}; contact Microsoft for a quote.")
    else:
        metric_row([
            {'label': 'Unit price', 'value': option['price'], 'subtitle': 'per user' if option['per_user'] else 'flat'},
            {'label': 'Monthly', 'value': format_currency(estimate['monthly'])},
            {'label': 'Annual', 'value': format_currency(estimate['annual'])},
        ])
    st.markdown("**Includes**")
    bullet_list(option.get('includes', []))
    for add_on in option.get('add_ons', []):
        st.caption(f"Add-on: {add_on['name']} · {add_on['price']}")


def _render_frontier():
    metric_row([
        {'label': 'Productivity gain', 'value': FRONTIER_FIRM_STATS['productivity_gain']},
        {'label': 'Adoption rate', 'value': FRONTIER_FIRM_STATS['adoption_rate']},
        {'label': 'ROI timeline', 'value': FRONTIER_FIRM_STATS['roi_timeline']},
    ])
    for pillar in FRONTIER_FIRM_STATS['key_pillars']:
        st.markdown(f"**{pillar['name']}**: {pillar['description']}")

    st.markdown("#### Readiness checklist")
    checked = [st.checkbox(item, key=f"frontier_{i}") for i, item in enumerate(FRONTIER_FIRM_STATS['readiness_checklist'])]
    st.progress(sum(checked) / len(checked), text=f"{sum(checked)} of {len(checked)} ready")

    st.markdown("#### Model Context Protocol")
    st.caption(MCP_CAPABILITIES['description'])
    supported = [get_product_by_id(pid) for pid in MCP_CAPABILITIES['supported_products']]
    st.markdown("Supported in: " + ', '.join(p['name'] for p in supported if p))
    for server in MCP_CAPABILITIES['servers']:
        st.markdown(f"- **{server['name']}**: {server['capability']}")
    download_button("Export relationships (CSV)", relationships_frame().to_csv(index=False),
                    "microsoft-product-relationships.csv", key='ms_rel_csv')


def render_microsoft_section(db=None, user_id: str = None):
    """Render the Microsoft ecosystem tab."""
    page_header("Microsoft AI Ecosystem", "Copilot, Power Platform, Azure AI and how they fit together", icon="🪟")
    products_tab, map_tab, licensing_tab, frontier_tab = st.tabs(
        ["Products", "Ecosystem map", "Licensing", "Frontier Firm & MCP"]
    )
    with products_tab:
        _render_products()
    with map_tab:
        _render_relationships()
    with licensing_tab:
        _render_licensing()
    with frontier_tab:
        _render_frontier()
