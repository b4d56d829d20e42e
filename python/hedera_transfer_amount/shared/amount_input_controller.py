from __future__ import annotations

import logging
from typing import Any, Optional, Union, cast

from hiero_sdk_python import AccountId

from .configuration import Context
from .hedera_utils.amount_input_guard import AmountInputGuard
from .hedera_utils.amount_parameter_normalizer import AmountParameterNormaliser
from .hedera_utils.balance_display_resolver import BalanceDisplayResolver
from .hedera_utils.max_amount_calculator import MaxAmountCalculator
from .models import (
    ABSENT,
    Absent,
    BalanceDisplay,
    Maybe,
    Present,
    from_optional,
    present,
)
from .parameter_schemas import AssetMetadata, ChainInfo, EditProposal
from .providers import IAssetMetadataProvider, IBalanceProvider, IFormFieldSink

logger = logging.getLogger(__name__)


class AmountInputController:
    """
    Connects the amount field of a transfer form to the guard, the max-amount
    calculator and the balance label.

    Typed text and the "max" value both reach the form through
    ``IFormFieldSink.set_amount`` so downstream state cannot tell them apart.
    """

    def __init__(self, sink: IFormFieldSink, context: Optional[Context] = None):
        self.sink = sink
        self.context = context or Context()
        self.max_decimals = 0

    def select_asset(self, asset: Maybe[AssetMetadata]) -> None:
        # no asset selected means no fractional digits are allowed
        self.max_decimals = asset.value.decimals if isinstance(asset, Present) else 0

    def select_denom(
        self, provider: IAssetMetadataProvider, denom: Optional[str]
    ) -> Maybe[AssetMetadata]:
        """Look up the selected asset and adopt its precision."""
        asset = ABSENT if denom is None else present(provider.get_asset_metadata(denom))
        self.select_asset(asset)
        return asset

    def before_input(self, proposal: Union[EditProposal, dict[str, Any]]) -> bool:
        """Return False when the host must suppress the pending edit."""
        parsed = cast(
            EditProposal,
            AmountParameterNormaliser.parse_params_with_schema(proposal, EditProposal),
        )
        return AmountInputGuard.decide(parsed, self.max_decimals)

    def commit(self, text: str) -> None:
        self.sink.set_amount(text)

    def use_max(
        self,
        chain: Maybe[ChainInfo],
        asset: Maybe[AssetMetadata],
        balance: Maybe[int],
    ) -> Optional[str]:
        """Fill the field with the largest transferable amount.

        Does nothing and returns None unless chain, asset and balance are all known.
        """
        if isinstance(chain, Absent):
            logger.debug("Ignoring max amount request: no chain selected")
            return None
        if isinstance(asset, Absent):
            logger.debug("Ignoring max amount request: no asset selected")
            return None
        if isinstance(balance, Absent):
            logger.debug("Ignoring max amount request: balance not loaded")
            return None

        is_native = chain.value.is_native(asset.value)
        value = MaxAmountCalculator.compute_max(
            balance.value,
            asset.value.decimals,
            is_native,
            self.context.native_reserve,
        )
        logger.debug(
            "Max amount for %s: %s (native=%s, reserve=%d)",
            asset.value.denom,
            value,
            is_native,
            self.context.native_reserve,
        )
        self.commit(value)
        return value

    def balance_display(
        self,
        chain: Maybe[ChainInfo],
        asset: Maybe[AssetMetadata],
        balance: Maybe[int],
    ) -> BalanceDisplay:
        return BalanceDisplayResolver.resolve(
            chain, asset, balance, self.context.loading_placeholder
        )

    async def load_balance(
        self,
        provider: IBalanceProvider,
        chain: Maybe[ChainInfo],
        account_id: Union[AccountId, str, None],
        asset: Maybe[AssetMetadata],
    ) -> Maybe[int]:
        """Ask the provider once for the spendable balance of the selected asset."""
        if isinstance(chain, Absent) or isinstance(asset, Absent) or account_id is None:
            return ABSENT

        if isinstance(account_id, str):
            account_id = AccountId.from_string(account_id)

        raw_balance = await provider.get_balance(
            chain.value, account_id, asset.value.denom
        )
        if raw_balance is None:
            logger.debug(
                "Balance of %s for %s not resolved yet", asset.value.denom, account_id
            )
        else:
            logger.info(
                "Loaded balance of %s for %s on %s",
                asset.value.denom,
                account_id,
                chain.value.ledger,
            )
        return from_optional(raw_balance)
