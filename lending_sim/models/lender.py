"""Lender model for the lender verification contract."""

from dataclasses import dataclass


@dataclass
class LenderRecord:
    """Verified lender entry, keyed by principal."""

    name: str
    license_id: str
    verification_date: int  # Block height at registration
    is_active: bool = True
