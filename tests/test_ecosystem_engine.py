"""
Unit Tests for Ecosystem Engine
===============================
"""

import pytest

from catalog.microsoft import MICROSOFT_PRODUCTS, PRODUCT_RELATIONSHIPS
from ecosystem_engine import (
    estimate_licensing_cost,
    get_categories,
    get_product_by_id,
    get_products_by_category,
    get_related_products,
    parse_price,
    relationships_frame,
)


class TestProducts:
    """Tests for product lookups."""

    def test_lookup(self):
        """Test lookup by id."""
        assert get_product_by_id('dataverse')['category'] == 'Data Platform'
        assert get_product_by_id('nope') is None

    def test_categories_in_catalog_order(self):
        """Test distinct categories keep first-seen order."""
        categories = get_categories()
        assert categories[0] == MICROSOFT_PRODUCTS[0]['category']
        assert len(categories) == len(set(categories))

    def test_products_by_category(self):
        """Test the low-code group."""
        ids = [p['id'] for p in get_products_by_category('Low-Code')]
        assert ids == ['power-automate', 'power-apps', 'power-pages', 'power-bi']

    def test_related_products_both_directions(self):
        """Test relationships are followed from either end."""
        related = {p['id']: p['relationship_type'] for p in get_related_products('copilot-studio')}
        assert related == {
            'dataverse': 'powers',
            'power-automate': 'integrates',
            'agent-365': 'extends',
            'azure-ai-foundry': 'powers',
        }

    def test_relationships_frame_uses_names(self):
        """Test product ids are resolved to names."""
        frame = relationships_frame()
        assert len(frame) == len(PRODUCT_RELATIONSHIPS)
        assert frame.iloc[0]['source'] == get_product_by_id('copilot-studio')['name']


class TestLicensing:
    """Tests for licensing cost estimates."""

    @pytest.mark.parametrize("label,amount", [
        ('$30', 30.0),
        ('$1,234.50', 1234.5),
        ('$200/tenant/month', 200.0),
        ('Variable', None),
        ('', None),
    ])
    def test_parse_price(self, label, amount):
        """Test the first dollar amount is extracted."""
        assert parse_price(label) == amount

    def test_per_user_option(self):
        """Test per-user pricing multiplies by seats."""
        estimate = estimate_licensing_cost('m365-copilot', 100)
        assert estimate['unit_price'] == 30.0
        assert estimate['monthly'] == 3000.0
        assert estimate['annual'] == 36000.0

    def test_flat_option_ignores_seats(self):
        """Test flat pricing does not scale with seats."""
        estimate = estimate_licensing_cost('copilot-studio-standalone', 500)
        assert estimate['monthly'] == 200.0
        assert estimate['annual'] == 2400.0

    def test_variable_pricing(self):
        """Test usage-based pricing has no estimate."""
        estimate = estimate_licensing_cost('azure-openai-payg', 10)
        assert estimate['unit_price'] is None
        assert estimate['monthly'] is None
        assert estimate['annual'] is None

    def test_unknown_option(self):
        """Test unknown options return None."""
        assert estimate_licensing_cost('nope', 10) is None

    def test_negative_seats(self):
        """Test negative seat counts are rejected."""
        with pytest.raises(ValueError):
            estimate_licensing_cost('m365-copilot', -1)
