from hedera_transfer_amount.shared.hedera_utils.decimals_utils import to_display_string
from hedera_transfer_amount.shared.models import (
    Absent,
    BalanceDisplay,
    BalanceDisplayState,
    Maybe,
)
from hedera_transfer_amount.shared.parameter_schemas import AssetMetadata, ChainInfo

DEFAULT_LOADING_PLACEHOLDER = "..."


class BalanceDisplayResolver:
    """Chooses what the balance label shows for the selected asset.

    - no chain or asset selected: "0"
    - selection known but balance still loading: the loading placeholder
    - balance known: the balance at the asset's precision, no reserve applied
    """

    @staticmethod
    def resolve(
        chain: Maybe[ChainInfo],
        asset: Maybe[AssetMetadata],
        balance: Maybe[int],
        loading_placeholder: str = DEFAULT_LOADING_PLACEHOLDER,
    ) -> BalanceDisplay:
        if isinstance(chain, Absent) or isinstance(asset, Absent):
            return BalanceDisplay(BalanceDisplayState.ZERO, "0")
        if isinstance(balance, Absent):
            return BalanceDisplay(BalanceDisplayState.LOADING, loading_placeholder)

        text = to_display_string(balance.value, asset.value.decimals)
        return BalanceDisplay(BalanceDisplayState.READY, text)
