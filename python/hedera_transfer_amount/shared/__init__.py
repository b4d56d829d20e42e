__all__ = [
    "Configuration",
    "Context",
    "load_context_from_env",
    "AmountInputController",
    "EditKind",
    "Present",
    "Absent",
    "ABSENT",
    "present",
    "from_optional",
    "BalanceDisplay",
    "BalanceDisplayState",
]

from .configuration import Configuration, Context, load_context_from_env
from .models import (
    EditKind,
    Present,
    Absent,
    ABSENT,
    present,
    from_optional,
    BalanceDisplay,
    BalanceDisplayState,
)
from .amount_input_controller import AmountInputController
