"""
lending_sim - deterministic simulation of asset-backed lending contracts

Four cooperating contracts (asset registration, lender verification, loan
management, collateral monitoring) share one in-memory storage and an
explicit transaction context.

Usage:
    from lending_sim import SimulationEnvironment

    env = SimulationEnvironment()
    lenders = env.load_contract("lender-verification")

    env.set_contract_owner("ST1OWNER")
    env.set_tx_sender("ST1OWNER")
    result = lenders.register_lender("ST2LENDER", "Finance Corp", "FIN12345")
    assert result.success
"""

from lending_sim.config import ScenarioConfig, SimulationConfig
from lending_sim.context import TxContext
from lending_sim.contracts import (
    AssetRegistration,
    CollateralMonitoring,
    Contract,
    ContractName,
    LenderVerification,
    LoanManagement,
)
from lending_sim.environment import ContractHandle, SimulationEnvironment
from lending_sim.exceptions import (
    ConfigurationError,
    ContractCallError,
    LendingSimError,
    UnknownContractError,
)
from lending_sim.models import (
    Asset,
    AssetStatus,
    Collateral,
    CollateralStatus,
    ErrorCode,
    Inspection,
    LenderRecord,
    Loan,
    LoanStatus,
    Payment,
    PaymentStatus,
    Result,
)
from lending_sim.registry import ContractRegistry
from lending_sim.store import Storage

__version__ = "0.1.0"

__all__ = [
    "Asset",
    "AssetRegistration",
    "AssetStatus",
    "Collateral",
    "CollateralMonitoring",
    "CollateralStatus",
    "ConfigurationError",
    "Contract",
    "ContractCallError",
    "ContractHandle",
    "ContractName",
    "ContractRegistry",
    "ErrorCode",
    "Inspection",
    "LenderRecord",
    "LenderVerification",
    "LendingSimError",
    "Loan",
    "LoanManagement",
    "LoanStatus",
    "Payment",
    "PaymentStatus",
    "Result",
    "ScenarioConfig",
    "SimulationConfig",
    "SimulationEnvironment",
    "Storage",
    "TxContext",
    "UnknownContractError",
]
