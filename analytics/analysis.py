import numpy as np
import pandas as pd

from config import CURRENCY_SYMBOL
from finance.bands import SDLT_BANDS, band_for, band_label
from finance.taxes import calculate_sdlt
from models import TaxResult


def marginal_rate(value: float, bands=SDLT_BANDS) -> float:
    """Rate on the next pound; a value sitting on a threshold takes the upper band's rate."""
    return band_for(float(value), bands).rate


def breakdown_dataframe(result: TaxResult) -> pd.DataFrame:
    """One row per band the price reaches into, for tables and charts."""
    rows = [
        {
            "Band": band_label(s.band, CURRENCY_SYMBOL),
            "From": s.band.lower_bound,
            "To": s.band.upper_bound,
            "Rate": s.band.rate,
            "Taxable": s.taxable,
            "Tax": s.tax,
        }
        for s in result.breakdown
    ]
    return pd.DataFrame(rows, columns=["Band", "From", "To", "Rate", "Taxable", "Tax"])


def sdlt_profile_dataframe(max_price: float = 2_000_000.0, points: int = 201, bands=SDLT_BANDS) -> pd.DataFrame:
    """Total, effective and marginal rate over an evenly spaced price grid [0, max_price]."""
    if points < 2:
        raise ValueError("points must be >= 2")
    prices = np.linspace(0.0, float(max_price), points)
    totals = np.array([calculate_sdlt(float(p), bands).total for p in prices])
    effective = np.divide(totals, prices, out=np.zeros_like(totals), where=prices > 0)
    marginal = np.array([marginal_rate(p, bands) for p in prices])
    return pd.DataFrame({
        "Price": prices,
        "SDLT": totals,
        "Effective rate": effective,
        "Marginal rate": marginal,
    })
