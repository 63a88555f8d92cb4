"""
Ecosystem Engine
================
Lookups over the Microsoft product catalog: products, categories, product
relationships and licensing cost estimates.

This module is unit-testable and can be used independently of Streamlit.
"""

import re
from typing import Any, Dict, List, Optional

import pandas as pd

from catalog.microsoft import LICENSING_OPTIONS, MICROSOFT_PRODUCTS, PRODUCT_RELATIONSHIPS

_PRICE_PATTERN = re.compile(r'\$([\d,]+(?:\.\d+)?)')


def get_product_by_id(product_id: str) -> Optional[Dict[str, Any]]:
    return next((p for p in MICROSOFT_PRODUCTS if p['id'] == product_id), None)


def get_products_by_category(category: str) -> List[Dict[str, Any]]:
    return [p for p in MICROSOFT_PRODUCTS if p['category'] == category]


def get_categories() -> List[str]:
    """Distinct product categories in catalog order."""
    seen = []
    for product in MICROSOFT_PRODUCTS:
        if product['category'] not in seen:
            seen.append(product['category'])
    return seen


def get_related_products(product_id: str) -> List[Dict[str, Any]]:
    """
    Products linked to ``product_id`` at either end of a relationship.

    Each entry is the related product plus ``relationship_type`` and
    ``relationship_description``. Ids with no catalog entry are dropped.
    """
    related = []
    for rel in PRODUCT_RELATIONSHIPS:
        if rel['source'] == product_id:
            other_id = rel['target']
        elif rel['target'] == product_id:
            other_id = rel['source']
        else:
            continue
        product = get_product_by_id(other_id)
        if product is None:
            continue
        related.append({
            **product,
            'relationship_type': rel['relationship_type'],
            'relationship_description': rel['description'],
        })
    return related


def parse_price(price: str) -> Optional[float]:
    """Extract the first dollar amount from a price label; None when absent."""
    match = _PRICE_PATTERN.search(price or '')
    if not match:
        return None
    return float(match.group(1).replace(',', ''))


def estimate_licensing_cost(option_id: str, seats: int) -> Optional[Dict[str, Any]]:
    """
    Estimate monthly and annual cost of a licensing option.

    Args:
        option_id: LICENSING_OPTIONS id
        seats: Number of users; ignored for flat-priced options

    Returns:
        Dict with option, seats, unit_price, monthly and annual (monthly and
        annual are None for variable pricing), or None for an unknown option

    Raises:
        ValueError: If seats is negative
    """
    if seats < 0:
        raise ValueError("seats must be non-negative")

    option = next((o for o in LICENSING_OPTIONS if o['id'] == option_id), None)
    if option is None:
        return None

    unit_price = parse_price(option['price'])
    if unit_price is None:
        monthly = None
    elif option['per_user']:
        monthly = unit_price * seats
    else:
        monthly = unit_price

    return {
        'option': option['name'],
        'seats': seats,
        'unit_price': unit_price,
        'monthly': monthly,
        'annual': monthly * 12 if monthly is not None else None,
    }


def relationships_frame() -> pd.DataFrame:
    """Relationship edges with product names resolved, for the ecosystem map."""
    names = {p['id']: p['name'] for p in MICROSOFT_PRODUCTS}
    rows = [
        {
            'source': names.get(rel['source'], rel['source']),
            'target': names.get(rel['target'], rel['target']),
            'type': rel['relationship_type'],
            'description': rel['description'],
        }
        for rel in PRODUCT_RELATIONSHIPS
    ]
    return pd.DataFrame(rows, columns=['source', 'target', 'type', 'description'])
