"""Chain client protocols — CosmWasm query/execute abstraction."""
from typing import Any, Protocol

from ..models import ExecuteResult, InstantiateResult


class CosmWasmClient(Protocol):
    """Read-only interface for CosmWasm smart-contract queries."""

    async def query_contract_smart(
        self, address: str, query_msg: dict[str, Any]
    ) -> Any: ...


class SigningCosmWasmClient(CosmWasmClient, Protocol):
    """Interface for handles that can also sign and broadcast contract txs.

    Sequence/nonce ordering between concurrent ``execute`` and
    ``instantiate`` calls is the implementation's responsibility.
    """

    async def execute(
        self,
        sender_address: str,
        contract_address: str,
        msg: dict[str, Any],
        fee: Any,
        memo: str | None = None,
        funds: list[dict[str, str]] | None = None,
    ) -> ExecuteResult: ...

    async def instantiate(
        self,
        sender_address: str,
        code_id: int,
        msg: dict[str, Any],
        label: str,
        fee: Any,
        options: dict[str, Any] | None = None,
    ) -> InstantiateResult: ...


def is_signing_client(client: object) -> bool:
    """Return True when ``client`` exposes a callable ``execute``."""
    return callable(getattr(client, "execute", None))
