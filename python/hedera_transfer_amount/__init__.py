__all__ = [
    "Configuration",
    "Context",
    "load_context_from_env",
    "AmountInputController",
    "AmountInputGuard",
    "MaxAmountCalculator",
    "BalanceDisplayResolver",
    "EditKind",
    "EditProposal",
    "AssetMetadata",
    "ChainInfo",
    "Present",
    "Absent",
    "ABSENT",
    "present",
    "from_optional",
]

# Re-export the public API from the shared package
from .shared import (
    Configuration,
    Context,
    load_context_from_env,
    AmountInputController,
    EditKind,
    Present,
    Absent,
    ABSENT,
    present,
    from_optional,
)
from .shared.hedera_utils.amount_input_guard import AmountInputGuard
from .shared.hedera_utils.max_amount_calculator import MaxAmountCalculator
from .shared.hedera_utils.balance_display_resolver import BalanceDisplayResolver
from .shared.parameter_schemas import EditProposal, AssetMetadata, ChainInfo
