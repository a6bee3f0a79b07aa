"""Typed client for the lidoStrategy contract."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .errors import NotSigningClientError
from .interfaces.chain import CosmWasmClient, SigningCosmWasmClient, is_signing_client
from .models import (
    CalcDepositArgs,
    CalcWithdrawArgs,
    Coin,
    ConfigResponse,
    ExecuteResult,
    Fee,
    IdealDelegation,
    InstantiateMsg,
    InstantiateResult,
    StdFee,
    UpdateConfigArgs,
)

logger = logging.getLogger(__name__)


def _coin_payload(coins: Sequence[Coin | dict[str, str]]) -> list[dict[str, str]]:
    return [c.to_dict() if isinstance(c, Coin) else c for c in coins]


def _fee_payload(fee: Fee | dict[str, Any]) -> Any:
    if isinstance(fee, StdFee):
        return fee.to_dict()
    return fee


class LidoStrategyClient:
    """Thin wrapper over a CosmWasm handle bound to one strategy contract.

    ``client`` may be read-only or signing-capable; mutating methods check
    which one it is on every call.
    """

    def __init__(
        self, client: CosmWasmClient | SigningCosmWasmClient, contract_address: str
    ) -> None:
        self._client = client
        self._contract_address = contract_address

    @property
    def client(self) -> CosmWasmClient | SigningCosmWasmClient:
        return self._client

    @property
    def contract_address(self) -> str:
        return self._contract_address

    @staticmethod
    async def instantiate(
        client: SigningCosmWasmClient,
        sender: str,
        code_id: int,
        init_msg: InstantiateMsg,
        label: str,
        init_coins: Sequence[Coin | dict[str, str]] | None = None,
        fee: Fee | dict[str, Any] = "auto",
    ) -> InstantiateResult:
        """Create a new strategy contract from ``code_id``.

        Funds are attached only when ``init_coins`` is non-empty.
        """
        options: dict[str, Any] = {}
        if init_coins:
            options["funds"] = _coin_payload(init_coins)

        logger.debug("Instantiating code %s as %r from %s", code_id, label, sender)
        return await client.instantiate(
            sender, code_id, init_msg.to_dict(), label, _fee_payload(fee), options
        )

    async def _query(self, msg: dict[str, Any]) -> Any:
        logger.debug("Query %s: %s", self._contract_address, msg)
        return await self._client.query_contract_smart(self._contract_address, msg)

    async def query_calc_deposit(self, args: CalcDepositArgs) -> list[IdealDelegation]:
        """Ideal per-validator stakes after depositing ``args.deposit``."""
        result = await self._query({"calc_deposit": args.to_dict()})
        return [IdealDelegation.from_dict(item) for item in result]

    async def query_calc_withdraw(
        self, args: CalcWithdrawArgs
    ) -> list[IdealDelegation]:
        """Ideal per-validator stakes after withdrawing ``args.withdraw``."""
        result = await self._query({"calc_withdraw": args.to_dict()})
        return [IdealDelegation.from_dict(item) for item in result]

    async def query_config(self) -> ConfigResponse:
        result = await self._query({"config": {}})
        return ConfigResponse.from_dict(result)

    async def update_config(
        self,
        sender: str,
        args: UpdateConfigArgs,
        fee: Fee | dict[str, Any] | None = None,
        memo: str | None = None,
        funds: Sequence[Coin | dict[str, str]] | None = None,
    ) -> ExecuteResult:
        """Patch the stored contract config. Fields left as None are kept."""
        if not is_signing_client(self._client):
            raise NotSigningClientError()

        msg = {"update_config": args.to_dict()}
        logger.debug("Execute %s from %s: %s", self._contract_address, sender, msg)
        return await self._client.execute(  # type: ignore[union-attr]
            sender,
            self._contract_address,
            msg,
            _fee_payload(fee or "auto"),
            memo,
            _coin_payload(funds) if funds is not None else None,
        )
