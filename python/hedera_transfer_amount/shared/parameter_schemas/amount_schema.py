from typing import Optional, Annotated

from hiero_sdk_python import TokenId
from pydantic import BaseModel, Field

from hedera_transfer_amount.shared.hedera_utils.hbar_conversion_utils import (
    HBAR_DENOM,
)
from hedera_transfer_amount.shared.models import EditKind


class EditProposal(BaseModel):
    current_text: Annotated[
        str, Field(description="Text currently accepted in the amount field.")
    ] = ""
    inserted_fragment: Annotated[
        Optional[str],
        Field(description="Text the user is about to insert. None for deletions."),
    ] = None
    edit_kind: Annotated[
        EditKind, Field(description='Kind of edit: "insert" or "delete".')
    ] = EditKind.INSERT
    proposed_text: Annotated[
        Optional[str],
        Field(
            description=(
                "Text already reduced by the editing surface. Only meaningful for "
                "deletions; insertions always append the fragment to current_text."
            )
        ),
    ] = None

    def proposed(self) -> str:
        """Text the field would hold if the edit were committed."""
        if self.edit_kind == EditKind.DELETE:
            if self.proposed_text is not None:
                return self.proposed_text
            return self.current_text
        return self.current_text + (self.inserted_fragment or "")


class AssetMetadata(BaseModel):
    denom: Annotated[
        str,
        Field(description='"HBAR" for the native asset or an HTS token id (e.g. "0.0.xxxx").'),
    ]
    symbol: Annotated[
        Optional[str], Field(description="Ticker symbol shown next to the balance.")
    ] = None
    decimals: Annotated[
        int, Field(ge=0, description="Number of fractional digits the asset supports.")
    ] = 0

    def token_id(self) -> Optional[TokenId]:
        if self.denom.upper() == HBAR_DENOM:
            return None
        return TokenId.from_string(self.denom)


class ChainInfo(BaseModel):
    ledger: Annotated[
        str, Field(description='Hedera network: "mainnet", "testnet" or "previewnet".')
    ] = "testnet"
    native_denom: Annotated[
        str, Field(description="Denomination of the native gas asset.")
    ] = HBAR_DENOM

    def is_native(self, asset: AssetMetadata) -> bool:
        return asset.denom.upper() == self.native_denom.upper()


class ComputeMaxParameters(BaseModel):
    raw_balance: Annotated[
        int, Field(ge=0, description="Spendable balance in base units.")
    ]
    decimals: Annotated[
        int, Field(ge=0, description="Decimal precision of the asset.")
    ]
    is_native_reserved: Annotated[
        bool,
        Field(description="True when the asset is the chain's native gas asset."),
    ] = False
    reserve: Annotated[
        int, Field(ge=0, description="Base units withheld for fees on the native asset.")
    ] = 0

