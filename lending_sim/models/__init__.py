"""Record models and result types for the simulated contracts."""

from lending_sim.models.asset import Asset
from lending_sim.models.base import ErrorCode, Result
from lending_sim.models.collateral import UNKNOWN_CONDITION, Collateral, Inspection
from lending_sim.models.enums import AssetStatus, CollateralStatus, LoanStatus, PaymentStatus
from lending_sim.models.lender import LenderRecord
from lending_sim.models.loan import Loan, Payment

__all__ = [
    "Asset",
    "AssetStatus",
    "Collateral",
    "CollateralStatus",
    "ErrorCode",
    "Inspection",
    "LenderRecord",
    "Loan",
    "LoanStatus",
    "Payment",
    "PaymentStatus",
    "Result",
    "UNKNOWN_CONDITION",
]
