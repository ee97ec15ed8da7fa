"""The four simulated contracts."""

from lending_sim.contracts.asset_registration import AssetRegistration
from lending_sim.contracts.base import Contract, ContractName
from lending_sim.contracts.collateral_monitoring import CollateralMonitoring
from lending_sim.contracts.lender_verification import LenderVerification
from lending_sim.contracts.loan_management import LoanManagement

__all__ = [
    "AssetRegistration",
    "CollateralMonitoring",
    "Contract",
    "ContractName",
    "LenderVerification",
    "LoanManagement",
]
