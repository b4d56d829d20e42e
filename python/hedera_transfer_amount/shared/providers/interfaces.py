from abc import ABC, abstractmethod
from typing import Optional

from hiero_sdk_python import AccountId

from hedera_transfer_amount.shared.parameter_schemas import AssetMetadata, ChainInfo


class IAssetMetadataProvider(ABC):

    @abstractmethod
    def get_asset_metadata(self, denom: str) -> AssetMetadata:
        pass


class IBalanceProvider(ABC):

    @abstractmethod
    async def get_balance(
        self, chain: ChainInfo, account_id: AccountId, denom: str
    ) -> Optional[int]:
        """Spendable balance in base units, or None while it cannot be resolved."""
        pass


class IFormFieldSink(ABC):

    @abstractmethod
    def set_amount(self, value: str) -> None:
        """Propagate the amount field value into the shared form state."""
        pass
