"""
Unit Tests for Deal Engine
==========================
"""

import pytest

from catalog.deals import COMPARISON_CRITERIA, MAX_COMPARED_DEALS, SAMPLE_DEALS
from deal_engine import (
    MISSING,
    analyze_fit,
    best_deal_id,
    comparison_frame,
    filter_criteria,
    format_value,
    get_deals,
    get_nested_value,
    risk_level,
    toggle_deal,
)


def _criterion(criterion_id):
    return next(c for c in COMPARISON_CRITERIA if c['id'] == criterion_id)


def _deal(deal_id):
    return next(d for d in SAMPLE_DEALS if d['id'] == deal_id)


class TestValues:
    """Tests for value lookup and formatting."""

    def test_nested_value(self):
        """Test dotted paths and missing parts."""
        deal = _deal('1')
        assert get_nested_value(deal, 'metrics.runway') == 18
        assert get_nested_value(deal, 'metrics.unknown') is None
        assert get_nested_value(deal, 'name.first') is None

    @pytest.mark.parametrize("value,fmt,expected", [
        (5000000, 'currency', '$5.0M'),
        (250000, 'currency', '$250K'),
        (500, 'currency', '$500'),
        (75, 'percentage', '75%'),
        (95, 'match', '95%'),
        (1200, 'number', '1,200'),
        (True, 'boolean', 'Yes'),
        (False, 'boolean', 'No'),
        ('2021-03-15', 'date', 'Mar 2021'),
        ('soon', 'date', 'soon'),
        ('Series A', 'text', 'Series A'),
        (None, 'currency', MISSING),
    ])
    def test_format_value(self, value, fmt, expected):
        """Test display formatting per criterion format."""
        assert format_value(value, fmt) == expected

    def test_filter_criteria(self):
        """Test category filtering."""
        assert len(filter_criteria()) == len(COMPARISON_CRITERIA)
        assert {c['category'] for c in filter_criteria('metrics')} == {'metrics'}


class TestBestDeal:
    """Tests for best value highlighting."""

    def test_highest_revenue(self):
        """Test the largest revenue wins."""
        assert best_deal_id(_criterion('revenue'), SAMPLE_DEALS) == '4'

    def test_lower_is_better_not_ranked(self):
        """Test burn rate is not highlighted."""
        assert best_deal_id(_criterion('burn_rate'), SAMPLE_DEALS) is None

    def test_booleans_not_ranked(self):
        """Test boolean criteria have no best value."""
        assert best_deal_id(_criterion('previous_exits'), SAMPLE_DEALS) is None

    def test_missing_values_skipped(self):
        """Test deals without the value are ignored."""
        deals = [{'id': 'a', 'metrics': {}}, {'id': 'b', 'metrics': {'revenue': 10}}]
        assert best_deal_id(_criterion('revenue'), deals) == 'b'
        assert best_deal_id(_criterion('revenue'), []) is None


class TestSelection:
    """Tests for deal selection."""

    def test_toggle_limit(self):
        """Test at most four deals are compared."""
        selected = []
        for deal in SAMPLE_DEALS:
            selected = toggle_deal(selected, deal['id'])
        assert len(selected) == MAX_COMPARED_DEALS
        assert toggle_deal(selected, '1') == selected[1:]

    def test_get_deals_catalog_order(self):
        """Test selected deals come back in catalog order."""
        assert [d['id'] for d in get_deals(['3', '1'])] == ['1', '3']


class TestFit:
    """Tests for risk level and fit analysis."""

    @pytest.mark.parametrize("deal_id,level", [('1', 'medium'), ('2', 'low'), ('3', 'medium'), ('4', 'medium')])
    def test_risk_level(self, deal_id, level):
        """Test runway and margin thresholds."""
        assert risk_level(_deal(deal_id)) == level

    def test_short_runway_is_high_risk(self):
        """Test runway under a year."""
        assert risk_level({'metrics': {'runway': 6, 'gross_margin': 80}}) == 'high'

    def test_default_sourcing(self):
        """Test size fails the default range for a 5M deal."""
        fit = analyze_fit(_deal('1'))
        assert fit['industry'] and fit['stage'] and fit['risk']
        assert fit['size'] is False
        assert fit['fit_count'] == 3
        assert fit['fit_percentage'] == 75.0

    def test_conservative_needs_low_risk(self):
        """Test conservative investors only accept low risk."""
        sourcing = {
            'target_industries': ['Healthcare & Life Sciences'],
            'deal_stages': ['Series B'],
            'investment_size_range': {'min': 10000000, 'max': 20000000},
            'risk_tolerance': 'conservative',
        }
        assert analyze_fit(_deal('2'), sourcing)['fit_percentage'] == 100.0
        assert analyze_fit(_deal('1'), sourcing)['risk'] is False


class TestComparisonFrame:
    """Tests for the comparison grid."""

    def test_shape_and_labels(self):
        """Test one row per criterion and one column per deal."""
        frame = comparison_frame(get_deals(['1', '2']), 'metrics')
        assert list(frame.columns) == ['TechVenture AI', 'HealthCore Systems']
        assert frame.loc['Revenue', 'TechVenture AI'] == '$1.2M'
        assert frame.loc['Runway (months)', 'HealthCore Systems'] == '24'
