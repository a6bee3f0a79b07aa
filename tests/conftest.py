"""Shared test fixtures, fake chain handles and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any

import pytest

from lido_strategy.config import AppConfig, ChainConfig, ContractConfig
from lido_strategy.models import (
    Delegation,
    ExecuteResult,
    InstantiateMsg,
    InstantiateResult,
)


# ---------------------------------------------------------------------------
# Fake chain handles
# ---------------------------------------------------------------------------


class FakeQueryClient:
    """Read-only handle that records every call."""

    def __init__(self, response: Any = None) -> None:
        self.response = response
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    async def query_contract_smart(self, address: str, query_msg: dict[str, Any]) -> Any:
        self.calls.append(("query_contract_smart", (address, query_msg)))
        return self.response


class FakeSigningClient(FakeQueryClient):
    """Signing-capable handle that records every call."""

    async def execute(self, *args: Any) -> ExecuteResult:
        self.calls.append(("execute", args))
        return ExecuteResult(transaction_hash="ABCDEF", height=42, gas_used=90000)

    async def instantiate(self, *args: Any) -> InstantiateResult:
        self.calls.append(("instantiate", args))
        return InstantiateResult(
            contract_address="neutron1new", transaction_hash="FEDCBA", height=43
        )


@pytest.fixture()
def query_client() -> FakeQueryClient:
    return FakeQueryClient()


@pytest.fixture()
def signing_client() -> FakeSigningClient:
    return FakeSigningClient()


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_chain_config() -> ChainConfig:
    return ChainConfig(
        rpc_endpoints=(
            "https://lcd1.example.com",
            "https://lcd2.example.com",
            "https://lcd3.example.com",
        ),
        rpc_timeout=5,
    )


@pytest.fixture()
def sample_app_config(sample_chain_config: ChainConfig) -> AppConfig:
    return AppConfig(
        chain=sample_chain_config,
        contract=ContractConfig(address="neutron1strategy"),
    )


SAMPLE_YAML = textwrap.dedent("""\
    chain:
      rpc_endpoints: ["https://lcd.example.com"]
      rpc_timeout: 10
    contract:
      address: "neutron1strategy"
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


# ---------------------------------------------------------------------------
# Contract data
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_delegations() -> tuple[Delegation, ...]:
    return (
        Delegation(stake="1000", valoper_address="cosmosvaloper1aaa", weight=2),
        Delegation(stake="0", valoper_address="cosmosvaloper1bbb", weight=1),
    )


@pytest.fixture()
def sample_instantiate_msg() -> InstantiateMsg:
    return InstantiateMsg(
        core_address="neutron1core",
        denom="uatom",
        distribution_address="neutron1distribution",
        puppeteer_address="neutron1puppeteer",
        validator_set_address="neutron1validatorset",
    )


@pytest.fixture()
def sample_ideal_delegations() -> list[dict[str, Any]]:
    return [
        {
            "current_stake": "1000",
            "ideal_stake": "123456789012345678901234567890",
            "stake_change": "123456789012345678901234566890",
            "valoper_address": "cosmosvaloper1aaa",
            "weight": 2,
        },
        {
            "current_stake": "0",
            "ideal_stake": "500",
            "stake_change": "500",
            "valoper_address": "cosmosvaloper1bbb",
            "weight": 1,
        },
    ]
