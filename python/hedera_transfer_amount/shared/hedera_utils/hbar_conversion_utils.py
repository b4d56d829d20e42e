from decimal import Decimal, ROUND_HALF_UP

HBAR_DENOM = "HBAR"
HBAR_DECIMALS = 8
TINYBARS_PER_HBAR = 10**HBAR_DECIMALS


def to_hbar(tinybars: Decimal) -> Decimal:
    """
    Converts a tinybar amount to an hbar amount.
    """
    return Decimal(tinybars) / Decimal(TINYBARS_PER_HBAR)


def to_tinybars(hbar: Decimal) -> int:
    tinybars = Decimal(hbar) * Decimal(TINYBARS_PER_HBAR)
    # Round to the nearest integer using Decimal's rounding
    tinybars_rounded = tinybars.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(tinybars_rounded)


# Withheld from "max" on HBAR so the account can still pay transaction fees
DEFAULT_HBAR_FEE_RESERVE_TINYBARS: int = to_tinybars(Decimal("0.1"))
