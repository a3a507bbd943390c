"""
Asset valuation — straight-line depreciation.

An asset loses value evenly over its economic life, but never
drops below a residual floor of 10% of its acquisition price.
Age is counted in average-length months from the acquisition
date; an economic life shorter than a year is treated as one
year. An asset with no acquisition date has not depreciated.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP

RESIDUAL_FLOOR = Decimal("0.10")
DAYS_PER_MONTH = Decimal("30.44")
CENTS = Decimal("0.01")


def depreciate(
    price: Decimal,
    acquired_on: date | None,
    economic_life_years: int,
    as_of: date,
) -> tuple[Decimal, Decimal]:
    """Return (accumulated_depreciation, residual_value) as of a date."""
    price = Decimal(price)
    if acquired_on is None or price <= 0:
        return Decimal("0.00"), price.quantize(CENTS, ROUND_HALF_UP)

    age_months = max(Decimal(0), Decimal((as_of - acquired_on).days) / DAYS_PER_MONTH)
    life_months = max(12, economic_life_years * 12)
    rate = min(Decimal(1), age_months / life_months)

    floor = price * RESIDUAL_FLOOR
    accumulated = ((price - floor) * rate).quantize(CENTS, ROUND_HALF_UP)
    return accumulated, (price - accumulated).quantize(CENTS, ROUND_HALF_UP)
