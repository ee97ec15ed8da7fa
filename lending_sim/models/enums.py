"""Enumeration types for contract records."""

from enum import Enum


class AssetStatus(str, Enum):
    AVAILABLE = "available"
    COLLATERALIZED = "collateralized"


class LoanStatus(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"


class PaymentStatus(str, Enum):
    COMPLETED = "completed"


class CollateralStatus(str, Enum):
    ACTIVE = "active"
    RELEASED = "released"
