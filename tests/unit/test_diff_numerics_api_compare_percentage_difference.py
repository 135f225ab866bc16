"""Unit tests for diff_numerics.api.compare.percentage_difference module."""

import pytest

from diff_numerics.api.compare.percentage_difference import BIG, percentage_difference

pytestmark = pytest.mark.unit

TOL = 1e-2
THR = 1e-6


class TestPercentageDifference:
    """Test percentage_difference function."""

    @pytest.mark.parametrize("v1,v2", [(0.0, 0.0), (1e-7, -5e-7), (9e-7, 0.0)])
    def test_both_below_threshold(self, v1, v2):
        assert percentage_difference(v1, v2, TOL, THR) == 0.0

    @pytest.mark.parametrize("v1,v2", [(1.0, 1e-8), (1e-6, 0.0), (-3.0, 0.0)])
    def test_one_below_threshold(self, v1, v2):
        assert percentage_difference(v1, v2, TOL, THR) == BIG
        assert percentage_difference(v2, v1, TOL, THR) == BIG

    @pytest.mark.parametrize("value", [1.0, -2.5, 1e300, 1e-6])
    def test_equal_values(self, value):
        assert percentage_difference(value, value, TOL, THR) == 0.0

    def test_relative_difference_in_percent(self):
        assert percentage_difference(2.0, 2.01, 1e-4, THR) == pytest.approx(0.4975124378, rel=1e-9)

    def test_below_tolerance_collapses_to_zero(self):
        # 0.4975% < 1%
        assert percentage_difference(2.0, 2.01, TOL, THR) == 0.0

    def test_opposite_signs(self):
        assert percentage_difference(-1.0, 1.0, TOL, THR) == pytest.approx(200.0)

    @pytest.mark.parametrize("v1,v2", [(1.0, 1.5), (-4.0, 3.0), (1e-3, 2e-3), (7.0, 1e-9)])
    def test_symmetric(self, v1, v2):
        assert percentage_difference(v1, v2, 1e-4, THR) == percentage_difference(v2, v1, 1e-4, THR)

    def test_zero_threshold_exact_zeros(self):
        assert percentage_difference(0.0, 0.0, TOL, 0.0) == 0.0

    def test_zero_threshold_zero_against_value(self):
        assert percentage_difference(0.0, 1.0, TOL, 0.0) == pytest.approx(100.0)

    @pytest.mark.parametrize("v1,v2", [(float("inf"), 1.0), (float("nan"), 1.0), (float("inf"), float("-inf"))])
    def test_non_finite_mismatch(self, v1, v2):
        assert percentage_difference(v1, v2, TOL, THR) == BIG
        assert percentage_difference(v2, v1, TOL, THR) == BIG

    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_non_finite_match(self, value):
        assert percentage_difference(value, value, TOL, THR) == 0.0

    @pytest.mark.parametrize("v1,v2", [(1e308, -1e308), (-1.7e308, 1.7e308)])
    def test_overflowing_difference_reports_big(self, v1, v2):
        assert percentage_difference(v1, v2, TOL, THR) == BIG
