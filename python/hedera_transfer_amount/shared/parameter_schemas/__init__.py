from .amount_schema import (
    EditProposal,
    AssetMetadata,
    ChainInfo,
    ComputeMaxParameters,
)

__all__ = [
    "EditProposal",
    "AssetMetadata",
    "ChainInfo",
    "ComputeMaxParameters",
]
