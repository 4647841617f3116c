import math
from typing import Iterable, Tuple

from config import SDLT_BANDS as _SDLT_TABLE
from models import TaxBand


def build_schedule(table: Iterable[Tuple[float, float]]) -> Tuple[TaxBand, ...]:
    """
    Build a contiguous band schedule from (upper threshold, rate) pairs.

    Each band starts where the previous one stopped and the first starts at 0,
    so the schedule covers [0, inf) with no gaps or overlaps. The last
    threshold must be float("inf").

    Raises ValueError for an empty table, thresholds that do not strictly
    increase, a rate outside [0, 1), or a bounded final band.
    """
    bands = []
    lower = 0.0
    for upper, rate in table:
        upper = float(upper)
        rate = float(rate)
        if math.isnan(upper) or upper <= lower:
            raise ValueError(f"band thresholds must increase: {upper} after {lower}")
        if not 0.0 <= rate < 1.0:
            raise ValueError(f"band rate must be in [0, 1): {rate}")
        bands.append(TaxBand(lower_bound=lower, upper_bound=upper, rate=rate))
        lower = upper
    if not bands:
        raise ValueError("band table is empty")
    if not bands[-1].is_unbounded:
        raise ValueError("final band must be unbounded")
    return tuple(bands)


def with_surcharge(bands: Tuple[TaxBand, ...], surcharge: float) -> Tuple[TaxBand, ...]:
    """
    Higher-rate schedule: HMRC adds the surcharge (e.g. +5 points for an
    additional dwelling) to every band, keeping the thresholds.
    """
    surcharge = float(surcharge)
    if math.isnan(surcharge) or surcharge < 0:
        raise ValueError(f"surcharge must be >= 0: {surcharge}")
    if surcharge == 0:
        return bands
    return build_schedule((b.upper_bound, b.rate + surcharge) for b in bands)


def band_for(value: float, bands: Tuple[TaxBand, ...]) -> TaxBand:
    for band in bands:
        if band.contains(value):
            return band
    raise ValueError(f"{value} is outside the band schedule")


def band_label(band: TaxBand, cur: str = "£") -> str:
    if band.is_unbounded:
        return f"{cur}{band.lower_bound:,.0f}+"
    return f"{cur}{band.lower_bound:,.0f}–{cur}{band.upper_bound:,.0f}"


SDLT_BANDS = build_schedule(_SDLT_TABLE)
