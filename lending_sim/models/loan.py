"""Loan models for the loan management contract."""

from dataclasses import dataclass

from lending_sim.models.enums import LoanStatus, PaymentStatus


@dataclass
class Loan:
    """Loan contract entity."""

    lender: str
    borrower: str
    asset_id: int
    principal_amount: int
    interest_rate: int
    term_length: int  # In blocks
    start_date: int
    end_date: int
    total_payments: int
    status: LoanStatus = LoanStatus.ACTIVE
    payments_made: int = 0

    @property
    def remaining_payments(self) -> int:
        return self.total_payments - self.payments_made


@dataclass(frozen=True)
class Payment:
    """Recorded loan payment, keyed by ``(loan_id, payment_number)``."""

    amount: int
    date: int
    status: PaymentStatus = PaymentStatus.COMPLETED
