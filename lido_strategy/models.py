"""Contract message and response shapes — all frozen (immutable).

``Uint128`` values travel as base-10 strings and are never converted to
numbers here, so the full 128-bit range survives consumers that parse JSON
numbers as floats.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Union

Uint128 = str

UINT128_MAX = 2**128 - 1


def is_uint128(value: str) -> bool:
    """Check that ``value`` is a decimal string within the u128 range."""
    if not isinstance(value, str) or not value.isascii() or not value.isdigit():
        return False
    return int(value) <= UINT128_MAX


# ---------------------------------------------------------------------------
# Chain primitives
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Coin:
    denom: str
    amount: Uint128

    def to_dict(self) -> dict[str, str]:
        return {"denom": self.denom, "amount": self.amount}


@dataclass(frozen=True)
class StdFee:
    """Explicit transaction fee."""

    amount: tuple[Coin, ...]
    gas: str
    granter: str | None = None
    payer: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "amount": [c.to_dict() for c in self.amount],
            "gas": self.gas,
        }
        if self.granter is not None:
            out["granter"] = self.granter
        if self.payer is not None:
            out["payer"] = self.payer
        return out


Fee = Union[StdFee, Literal["auto"], float]


@dataclass(frozen=True)
class ExecuteResult:
    transaction_hash: str
    height: int
    gas_used: int = 0
    gas_wanted: int = 0
    logs: tuple[dict[str, Any], ...] = ()


@dataclass(frozen=True)
class InstantiateResult:
    contract_address: str
    transaction_hash: str
    height: int
    gas_used: int = 0
    gas_wanted: int = 0
    logs: tuple[dict[str, Any], ...] = ()


# ---------------------------------------------------------------------------
# Contract messages
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class InstantiateMsg:
    """Configuration used once when the strategy contract is created."""

    core_address: str
    denom: str
    distribution_address: str
    puppeteer_address: str
    validator_set_address: str

    def to_dict(self) -> dict[str, str]:
        return {
            "core_address": self.core_address,
            "denom": self.denom,
            "distribution_address": self.distribution_address,
            "puppeteer_address": self.puppeteer_address,
            "validator_set_address": self.validator_set_address,
        }


@dataclass(frozen=True)
class Delegation:
    """Current stake of one validator."""

    stake: Uint128
    valoper_address: str
    weight: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "stake": self.stake,
            "valoper_address": self.valoper_address,
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Delegation:
        return cls(
            stake=raw["stake"],
            valoper_address=raw["valoper_address"],
            weight=raw["weight"],
        )


@dataclass(frozen=True)
class IdealDelegation:
    """Rebalancing target for one validator, as computed by the contract."""

    current_stake: Uint128
    ideal_stake: Uint128
    stake_change: Uint128
    valoper_address: str
    weight: int

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> IdealDelegation:
        return cls(
            current_stake=raw["current_stake"],
            ideal_stake=raw["ideal_stake"],
            stake_change=raw["stake_change"],
            valoper_address=raw["valoper_address"],
            weight=raw["weight"],
        )


@dataclass(frozen=True)
class CalcDepositArgs:
    delegations: tuple[Delegation, ...]
    deposit: Uint128

    def to_dict(self) -> dict[str, Any]:
        return {
            "delegations": [d.to_dict() for d in self.delegations],
            "deposit": self.deposit,
        }


@dataclass(frozen=True)
class CalcWithdrawArgs:
    delegations: tuple[Delegation, ...]
    withdraw: Uint128

    def to_dict(self) -> dict[str, Any]:
        return {
            "delegations": [d.to_dict() for d in self.delegations],
            "withdraw": self.withdraw,
        }


@dataclass(frozen=True)
class UpdateConfigArgs:
    """Partial config update. ``None`` leaves the stored value unchanged."""

    core_address: str | None = None
    denom: str | None = None
    distribution_address: str | None = None
    puppeteer_address: str | None = None
    validator_set_address: str | None = None

    def to_dict(self) -> dict[str, str]:
        # "" is a real value, only None is dropped
        return {
            name: value
            for name, value in (
                ("core_address", self.core_address),
                ("denom", self.denom),
                ("distribution_address", self.distribution_address),
                ("puppeteer_address", self.puppeteer_address),
                ("validator_set_address", self.validator_set_address),
            )
            if value is not None
        }


@dataclass(frozen=True)
class ConfigResponse:
    core_address: str
    denom: str
    distribution_address: str
    puppeteer_address: str
    validator_set_address: str

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ConfigResponse:
        return cls(
            core_address=raw["core_address"],
            denom=raw["denom"],
            distribution_address=raw["distribution_address"],
            puppeteer_address=raw["puppeteer_address"],
            validator_set_address=raw["validator_set_address"],
        )
