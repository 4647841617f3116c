import math
from decimal import Decimal

import pytest

from finance.bands import SDLT_BANDS
from finance.errors import CalculationError, InvalidInputError, MissingInputError
from finance.taxes import calculate_sdlt, describe_sdlt


@pytest.mark.parametrize(
    "price, expected",
    [
        (0, 0.0),
        (100_000, 0.0),
        (125_000, 0.0),
        (125_001, 0.02),
        (250_000, 2_500.0),
        (300_000, 5_000.0),
        (925_000, 36_250.0),
        (1_000_000, 43_750.0),
        (1_500_000, 93_750.0),
        (2_000_000, 153_750.0),
    ],
)
def test_known_values(price, expected):
    assert calculate_sdlt(price).total == pytest.approx(expected)


def test_one_million_band_by_band():
    res = calculate_sdlt(1_000_000)
    assert [s.tax for s in res.breakdown] == pytest.approx([0.0, 2_500.0, 33_750.0, 7_500.0])
    assert [s.taxable for s in res.breakdown] == pytest.approx([125_000, 125_000, 675_000, 75_000])


def test_zero_has_empty_breakdown():
    res = calculate_sdlt(0)
    assert res.total == 0
    assert res.breakdown == ()
    assert res.rounded_total == Decimal("0.00")


def test_threshold_value_stops_at_lower_band():
    res = calculate_sdlt(250_000)
    assert len(res.breakdown) == 2
    assert res.breakdown[-1].band.rate == 0.02


def test_bands_above_price_contribute_nothing():
    res = calculate_sdlt(200_000)
    assert [s.band for s in res.breakdown] == list(SDLT_BANDS[:2])


@pytest.mark.parametrize("price", [0, 1, 124_999.99, 125_000, 250_000, 410_500.5, 1_000_000, 3_333_333.33])
def test_total_is_sum_of_breakdown(price):
    res = calculate_sdlt(price)
    assert res.total == sum(s.tax for s in res.breakdown)


def test_non_negative_and_monotonic():
    prices = [i * 12_500.0 for i in range(0, 200)]
    totals = [calculate_sdlt(p).total for p in prices]
    assert all(t >= 0 for t in totals)
    assert all(a <= b for a, b in zip(totals, totals[1:]))


@pytest.mark.parametrize("band", SDLT_BANDS)
def test_marginal_rate_inside_band(band):
    lo = band.lower_bound + 1_000
    hi = lo + 10_000
    if not band.is_unbounded:
        hi = min(hi, band.upper_bound - 1_000)
    slope = (calculate_sdlt(hi).total - calculate_sdlt(lo).total) / (hi - lo)
    assert slope == pytest.approx(band.rate)


def test_idempotent():
    a = calculate_sdlt(654_321.12)
    b = calculate_sdlt(654_321.12)
    assert a == b
    assert a.total.hex() == b.total.hex()


def test_accepts_decimal_and_int():
    assert calculate_sdlt(Decimal("250000")).total == pytest.approx(2_500.0)
    assert calculate_sdlt(250_000).property_value == 250_000.0


def test_missing_input():
    with pytest.raises(MissingInputError) as exc:
        calculate_sdlt(None)
    assert exc.value.message == "Property value is missing."


@pytest.mark.parametrize("bad", [-1, -0.01, math.nan, math.inf, -math.inf, "250000", True, [1], 10**400, Decimal("sNaN")])
def test_invalid_input(bad):
    with pytest.raises(InvalidInputError):
        calculate_sdlt(bad)


def test_errors_are_distinct_calculation_errors():
    assert issubclass(MissingInputError, CalculationError)
    assert issubclass(InvalidInputError, CalculationError)
    assert not issubclass(MissingInputError, InvalidInputError)
    assert issubclass(InvalidInputError, ValueError)


def test_rounding_happens_once_on_total():
    # 125,000.25 taxes 0.25 at 2% = 0.005: rounds half up to 0.01
    res = calculate_sdlt(125_000.25)
    assert res.rounded_total == Decimal("0.01")


def test_describe_sdlt():
    assert describe_sdlt(calculate_sdlt(250_000)) == "SDLT for £250,000.00 is £2,500.00"
    assert describe_sdlt(calculate_sdlt(1_000_000)) == "SDLT for £1,000,000.00 is £43,750.00"
