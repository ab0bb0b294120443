"""
Unit tests for the dashboard statistics fold.
"""
import pytest

from pharmacy_admin.services.statistics import compute_statistics, order_total, round_half_up


@pytest.mark.unit
class TestOrderTotal:

    def test_stored_total(self):
        assert order_total({"total": 100, "items": [{"price": 1, "qty": 1}]}) == 100

    def test_items_when_no_total(self):
        assert order_total({"items": [{"price": 10, "qty": 2}, {"price": 2.5, "qty": 4}]}) == 30

    def test_zero_total_falls_back_to_items(self):
        assert order_total({"total": 0, "items": [{"price": 5, "qty": 1}]}) == 5

    def test_neither_total_nor_items(self):
        assert order_total({"status": "pending"}) == 0

    def test_numeric_strings(self):
        assert order_total({"total": "42.5"}) == 42.5
        assert order_total({"items": [{"price": "3", "qty": "2"}]}) == 6


@pytest.mark.unit
class TestComputeStatistics:

    def test_empty_collections(self):
        assert compute_statistics([], []) == {
            "totalProducts": 0,
            "totalOrders": 0,
            "totalSales": 0,
            "pendingOrders": 0,
            "completedOrders": 0,
            "averageOrderValue": 0,
            "productsWithDiscount": 0,
        }

    def test_totals_and_average(self):
        """Test a stored total and an items-derived total together."""
        orders = [{"total": 100}, {"items": [{"price": 10, "qty": 2}]}]

        stats = compute_statistics([], orders)

        assert stats["totalSales"] == 120
        assert stats["averageOrderValue"] == 60
        assert stats["totalOrders"] == 2

    def test_status_counts(self):
        orders = [{"status": "pending"}, {"status": "pending"}, {"status": "completed"}, {"status": "cancelled"}]

        stats = compute_statistics([], orders)

        assert stats["pendingOrders"] == 2
        assert stats["completedOrders"] == 1

    def test_products_with_discount(self):
        products = [{"discount": 10}, {"discount": 0}, {"discount": "5"}, {"discount": -3}, {"name": "plain"}]

        stats = compute_statistics(products, [])

        assert stats["totalProducts"] == 5
        assert stats["productsWithDiscount"] == 2

    def test_rounding_half_up(self):
        """Test that sales and averages round .5 upwards."""
        stats = compute_statistics([], [{"total": 0.5}, {"total": 2}])

        assert stats["totalSales"] == 3
        assert stats["averageOrderValue"] == 1

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(2.49) == 2


@pytest.mark.unit
class TestNonFiniteValues:
    """Free-form orders may carry values that are not usable numbers."""

    @pytest.mark.parametrize("total", ["NaN", "Infinity", "-inf", "1e999"])
    def test_non_finite_total_counts_as_zero(self, total):
        assert order_total({"total": total}) == 0

    def test_non_finite_total_falls_back_to_items(self):
        assert order_total({"total": "NaN", "items": [{"price": 4, "qty": 2}]}) == 8

    def test_huge_totals_do_not_break_statistics(self):
        """Test that totals overflowing when summed still give a result."""
        stats = compute_statistics([], [{"total": 1e308}, {"total": 1e308}])

        assert stats["totalOrders"] == 2
        assert stats["totalSales"] == 0
        assert stats["averageOrderValue"] == 0

    def test_overflowing_item_product(self):
        assert order_total({"items": [{"price": 1e308, "qty": 10}]}) == 0

    def test_huge_integer(self):
        assert order_total({"total": 10 ** 400}) == 0

    def test_non_finite_discount(self):
        stats = compute_statistics([{"discount": "Infinity"}, {"discount": "NaN"}, {"discount": 5}], [])

        assert stats["productsWithDiscount"] == 1

    def test_booleans_are_numbers(self):
        assert order_total({"items": [{"price": 3, "qty": True}]}) == 3
