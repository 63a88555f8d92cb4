"""
Unit Tests for Rounding Helpers
===============================
"""

import pytest

from rounding import round_half_up


class TestRoundHalfUp:
    """Tests for half-up rounding."""

    @pytest.mark.parametrize("value,expected", [
        (10.5, 11), (2.5, 3), (0.5, 1), (10.49, 10), (70.0, 70),
    ])
    def test_whole_numbers(self, value, expected):
        """Test halves go up where built-in round would go to even."""
        assert round_half_up(value) == expected
        assert isinstance(round_half_up(value), int)

    def test_one_decimal(self):
        """Test rounding to tenths."""
        assert round_half_up(0.25, 1) == 0.3
        assert round_half_up(94.66, 1) == 94.7
        assert round_half_up(2 / 3, 1) == 0.7
