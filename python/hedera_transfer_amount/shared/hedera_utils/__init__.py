from .decimals_utils import to_base_unit, to_display_unit, to_display_string
from .hbar_conversion_utils import (
    to_hbar,
    to_tinybars,
    HBAR_DENOM,
    HBAR_DECIMALS,
    TINYBARS_PER_HBAR,
    DEFAULT_HBAR_FEE_RESERVE_TINYBARS,
)

__all__ = [
    "to_base_unit",
    "to_display_unit",
    "to_display_string",
    "to_hbar",
    "to_tinybars",
    "HBAR_DENOM",
    "HBAR_DECIMALS",
    "TINYBARS_PER_HBAR",
    "DEFAULT_HBAR_FEE_RESERVE_TINYBARS",
]
