from decimal import ROUND_HALF_UP

# Residential SDLT (England & NI), main residence, from Apr 1, 2025.
# Each entry is (upper threshold, marginal rate); lower bound is the previous threshold.
SDLT_BANDS = [
    (125_000, 0.00),
    (250_000, 0.02),
    (925_000, 0.05),
    (1_500_000, 0.10),
    (float("inf"), 0.12),
]

# Higher-rate uplifts, added as percentage points to every band
SURCHARGES = {
    "none": 0.0,
    "additional_dwelling": 0.05,  # from 31 Oct 2024
    "non_resident": 0.02,
    "additional_and_non_resident": 0.07,
}

CURRENCY_SYMBOL = "£"
MONEY_PLACES = 2
ROUNDING = ROUND_HALF_UP

SERVER_INFO = {
    "name": "sdlt-calculator",
    "version": "0.1.0",
    "instructions": "This server provides a calculator tool to work out UK SDLT",
}

DEFAULT_VALUES = {
    "price": 425000.0,
    "surcharge": 0.0,  # percentage
    "profile_max_price": 2_000_000.0,
    "profile_points": 201,
}
