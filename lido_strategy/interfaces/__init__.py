"""Protocol interfaces for the strategy contract client."""
from .chain import CosmWasmClient, SigningCosmWasmClient, is_signing_client

__all__ = ["CosmWasmClient", "SigningCosmWasmClient", "is_signing_client"]
