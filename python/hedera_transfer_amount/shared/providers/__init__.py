from .interfaces import IAssetMetadataProvider, IBalanceProvider, IFormFieldSink

__all__ = ["IAssetMetadataProvider", "IBalanceProvider", "IFormFieldSink"]
