"""Typed async client for the lidoStrategy CosmWasm contract."""
from .client import LidoStrategyClient
from .errors import NotSigningClientError
from .models import (
    CalcDepositArgs,
    CalcWithdrawArgs,
    Coin,
    ConfigResponse,
    Delegation,
    ExecuteResult,
    IdealDelegation,
    InstantiateMsg,
    InstantiateResult,
    StdFee,
    UpdateConfigArgs,
)

__all__ = [
    "CalcDepositArgs",
    "CalcWithdrawArgs",
    "Coin",
    "ConfigResponse",
    "Delegation",
    "ExecuteResult",
    "IdealDelegation",
    "InstantiateMsg",
    "InstantiateResult",
    "LidoStrategyClient",
    "NotSigningClientError",
    "StdFee",
    "UpdateConfigArgs",
]
