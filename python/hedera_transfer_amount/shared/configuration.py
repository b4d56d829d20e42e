import os
from decimal import Decimal, InvalidOperation
from typing import Optional

from dotenv import load_dotenv

from .hedera_utils.hbar_conversion_utils import (
    DEFAULT_HBAR_FEE_RESERVE_TINYBARS,
    to_tinybars,
)

SUPPORTED_LEDGERS = ("mainnet", "testnet", "previewnet")


class Context:
    def __init__(
            self,
            native_reserve: int = DEFAULT_HBAR_FEE_RESERVE_TINYBARS,
            ledger: str = "testnet",
            loading_placeholder: str = "...",
    ):
        if native_reserve < 0:
            raise ValueError(f"Invalid native reserve: {native_reserve}")
        if ledger not in SUPPORTED_LEDGERS:
            raise ValueError(f"Unsupported ledger: {ledger}")

        # Tinybars withheld from "max" when transferring HBAR
        self.native_reserve = native_reserve

        self.ledger = ledger

        # Shown in the balance label while the balance is being fetched
        self.loading_placeholder = loading_placeholder


class Configuration:
    def __init__(
            self,
            context: Optional[Context] = None,
    ):
        self.context = context or Context()


def load_context_from_env(env_file: Optional[str] = None) -> Context:
    """
    Build a Context from environment variables, loading ``.env`` first.

    HEDERA_NETWORK            ledger name, defaults to "testnet"
    NATIVE_FEE_RESERVE_HBAR   fee reserve in HBAR (display units), defaults to 0.1
    """
    load_dotenv(env_file)

    ledger = os.environ.get("HEDERA_NETWORK", "testnet").strip().lower()

    raw_reserve = os.environ.get("NATIVE_FEE_RESERVE_HBAR")
    if raw_reserve is None or raw_reserve.strip() == "":
        return Context(ledger=ledger)

    try:
        reserve = to_tinybars(Decimal(raw_reserve.strip()))
    except InvalidOperation as e:
        raise ValueError(f"Invalid NATIVE_FEE_RESERVE_HBAR: {raw_reserve}") from e

    return Context(native_reserve=reserve, ledger=ledger)
