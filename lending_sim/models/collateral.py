"""Collateral and inspection models for the collateral monitoring contract."""

from dataclasses import dataclass

from lending_sim.models.enums import CollateralStatus

# Condition recorded before any inspection has happened
UNKNOWN_CONDITION = "unknown"


@dataclass
class Collateral:
    """Asset pledged against an active loan, keyed by asset id."""

    loan_id: int
    status: CollateralStatus = CollateralStatus.ACTIVE
    last_inspection_date: int = 0  # 0 means never inspected
    condition: str = UNKNOWN_CONDITION


@dataclass(frozen=True)
class Inspection:
    """Inspection report, keyed by ``(asset_id, inspection_id)``."""

    inspector: str
    date: int
    condition: str
    notes: str
