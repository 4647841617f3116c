import math
from decimal import Decimal
from numbers import Real
from typing import Tuple

from finance.bands import SDLT_BANDS
from finance.errors import InvalidInputError, MissingInputError
from finance.money import format_gbp
from models import BandSlice, TaxBand, TaxResult


def _validate_value(property_value) -> float:
    if property_value is None:
        raise MissingInputError()
    if isinstance(property_value, bool) or not isinstance(property_value, (Real, Decimal)):
        raise InvalidInputError(property_value, "not a number")
    try:
        p = float(property_value)
    except (OverflowError, ValueError):
        raise InvalidInputError(property_value, "must be finite") from None
    if not math.isfinite(p):
        raise InvalidInputError(property_value, "must be finite")
    if p < 0:
        raise InvalidInputError(property_value, "must not be negative")
    return p


def calculate_sdlt(property_value, bands: Tuple[TaxBand, ...] = SDLT_BANDS) -> TaxResult:
    """
    SDLT on a residential purchase, marginal bands.

    Only the portion of the price inside each [lower, upper) band is taxed at
    that band's rate. The default schedule is built from config.SDLT_BANDS.

    Raises MissingInputError for None and InvalidInputError for anything
    that is not a finite, non-negative number.

    Returns: TaxResult with the UNROUNDED total and one slice per band the
    price reaches into. Round with round_money() on the total only.
    """
    p = _validate_value(property_value)
    breakdown = []
    tax = 0.0
    for band in bands:
        portion = min(p, band.upper_bound) - band.lower_bound
        if portion <= 0:
            break
        contribution = portion * band.rate
        breakdown.append(BandSlice(band=band, taxable=portion, tax=contribution))
        tax += contribution
    return TaxResult(property_value=p, total=tax, breakdown=tuple(breakdown))


def describe_sdlt(result: TaxResult) -> str:
    return f"SDLT for {format_gbp(result.property_value)} is {format_gbp(result.total)}"
