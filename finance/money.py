from decimal import Decimal

from config import CURRENCY_SYMBOL, MONEY_PLACES, ROUNDING


def round_money(amount: float) -> Decimal:
    """Round to pence. Apply once, to a final total; never per band."""
    exp = Decimal(1).scaleb(-MONEY_PLACES)
    return Decimal(repr(float(amount))).quantize(exp, rounding=ROUNDING)


def format_gbp(amount: float) -> str:
    return f"{CURRENCY_SYMBOL}{round_money(amount):,.{MONEY_PLACES}f}"
