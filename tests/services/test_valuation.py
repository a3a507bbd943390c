"""
Tests for straight-line depreciation.
"""

from datetime import date
from decimal import Decimal

from asset_tracker.services.valuation import depreciate


TODAY = date(2025, 1, 1)


class TestDepreciate:

    def test_no_acquisition_date_means_no_depreciation(self):
        assert depreciate(Decimal("1000"), None, 5, TODAY) == (
            Decimal("0.00"), Decimal("1000.00"),
        )

    def test_acquired_today_keeps_full_value(self):
        assert depreciate(Decimal("1000"), TODAY, 5, TODAY) == (
            Decimal("0.00"), Decimal("1000.00"),
        )

    def test_past_economic_life_stops_at_residual_floor(self):
        accumulated, residual = depreciate(
            Decimal("1000"), date(2000, 1, 1), 5, TODAY
        )
        assert accumulated == Decimal("900.00")
        assert residual == Decimal("100.00")

    def test_halfway_through_life(self):
        # 730 days is just under 24 average-length months of a 48 month life
        accumulated, residual = depreciate(
            Decimal("1000"), date(2023, 1, 2), 4, TODAY
        )
        assert Decimal("440") < accumulated < Decimal("450")
        assert accumulated + residual == Decimal("1000.00")

    def test_life_shorter_than_a_year_counts_as_one_year(self):
        short, _ = depreciate(Decimal("1200"), date(2024, 7, 1), 0, TODAY)
        one_year, _ = depreciate(Decimal("1200"), date(2024, 7, 1), 1, TODAY)
        assert short == one_year

    def test_future_acquisition_date_has_not_depreciated(self):
        assert depreciate(Decimal("500"), date(2026, 1, 1), 5, TODAY)[0] == Decimal("0.00")

    def test_zero_price(self):
        assert depreciate(Decimal("0"), date(2000, 1, 1), 5, TODAY) == (
            Decimal("0.00"), Decimal("0.00"),
        )
