import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from finance.money import round_money


@dataclass(frozen=True)
class TaxBand:
    lower_bound: float
    upper_bound: float  # float("inf") for the top band
    rate: float

    @property
    def width(self) -> float:
        return self.upper_bound - self.lower_bound

    @property
    def is_unbounded(self) -> bool:
        return math.isinf(self.upper_bound)

    def contains(self, value: float) -> bool:
        """Half-open [lower, upper) membership."""
        return self.lower_bound <= value < self.upper_bound


@dataclass(frozen=True)
class BandSlice:
    band: TaxBand
    taxable: float
    tax: float  # unrounded


@dataclass(frozen=True)
class TaxResult:
    property_value: float
    total: float
    breakdown: Tuple[BandSlice, ...] = ()

    @property
    def rounded_total(self) -> Decimal:
        """Total rounded once to pence"""
        return round_money(self.total)

    @property
    def effective_rate(self) -> float:
        if self.property_value <= 0:
            return 0.0
        return self.total / self.property_value


class SdltRequest(BaseModel):
    """Input record for the SDLT tool; its JSON schema is the tool's input schema."""

    model_config = ConfigDict(strict=True)

    property_value: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Purchase price of the residential property in pounds",
    )
