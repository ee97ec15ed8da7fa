"""Loan management contract."""

from __future__ import annotations

import logging
from dataclasses import replace

from lending_sim.context import TxContext
from lending_sim.contracts.asset_registration import AssetRegistration
from lending_sim.contracts.base import Contract, ContractName
from lending_sim.contracts.collateral_monitoring import CollateralMonitoring
from lending_sim.contracts.lender_verification import LenderVerification
from lending_sim.models import AssetStatus, Loan, LoanStatus, Payment, PaymentStatus, Result
from lending_sim.models.base import INVALID_STATE, NOT_FOUND, OK, UNAUTHORIZED, UNVERIFIED_LENDER
from lending_sim.store import Storage

LOANS = "loans"
PAYMENTS = "payments"
LAST_LOAN_ID = "last-loan-id"


class LoanManagement(Contract):
    """Asset-backed loans issued by verified lenders.

    Creating a loan hands the asset to the borrower, marks it
    collateralized and registers it with collateral monitoring.  Closing
    the loan, explicitly or by the final payment, makes the asset
    available again and releases the collateral.

    Parameters
    ----------
    storage : Storage
        Shared storage.
    assets : AssetRegistration
        Asset registry used to look up, transfer and flag assets.
    lenders : LenderVerification
        Lender registry gating ``create_loan``.
    collateral : CollateralMonitoring
        Collateral tracker notified on loan creation and closure.
    """

    name = ContractName.LOAN_MANAGEMENT.value
    operations = ("create_loan", "get_loan", "make_payment", "get_payment", "close_loan")

    def __init__(
        self,
        storage: Storage,
        assets: AssetRegistration,
        lenders: LenderVerification,
        collateral: CollateralMonitoring,
    ) -> None:
        super().__init__(storage)
        self.link(assets=assets, lenders=lenders, collateral=collateral)

    def link(
        self,
        assets: AssetRegistration | None = None,
        lenders: LenderVerification | None = None,
        collateral: CollateralMonitoring | None = None,
    ) -> None:
        """Replace any of the contracts this one calls into."""
        if assets is not None:
            self.assets = assets
        if lenders is not None:
            self.lenders = lenders
        if collateral is not None:
            self.collateral = collateral

    def create_loan(
        self,
        ctx: TxContext,
        borrower: str,
        asset_id: int,
        principal_amount: int,
        interest_rate: int,
        term_length: int,
        total_payments: int,
    ) -> Result:
        """Open a loan from the sender (the lender) to ``borrower``.

        Returns the new loan id.
        """
        inner = ctx.as_caller(self.name)

        if not self.lenders.is_verified_lender(inner, ctx.sender).value:
            return UNVERIFIED_LENDER
        asset = self.assets.get_asset(inner, asset_id)
        if not asset.success:
            return NOT_FOUND
        # One active loan per asset
        if asset.value.status == AssetStatus.COLLATERALIZED:
            return INVALID_STATE
        if total_payments <= 0:
            return INVALID_STATE

        loan_id = self.storage.next_id(LAST_LOAN_ID)
        self.storage.map_set(
            LOANS,
            loan_id,
            Loan(
                lender=ctx.sender,
                borrower=borrower,
                asset_id=asset_id,
                principal_amount=principal_amount,
                interest_rate=interest_rate,
                term_length=term_length,
                start_date=ctx.block_height,
                end_date=ctx.block_height + term_length,
                total_payments=total_payments,
                status=LoanStatus.ACTIVE,
                payments_made=0,
            ),
        )
        self._log(ctx, "Loan %d opened: %s -> %s on asset %d", loan_id, ctx.sender, borrower, asset_id)

        self._check_effect(ctx, "transfer-asset", self.assets.transfer_asset(inner, asset_id, borrower))
        self._check_effect(
            ctx,
            "update-asset-status",
            self.assets.update_asset_status(inner, asset_id, AssetStatus.COLLATERALIZED),
        )
        self._check_effect(
            ctx,
            "register-collateral",
            self.collateral.register_collateral(inner, asset_id, loan_id),
        )
        return Result.ok(loan_id)

    def get_loan(self, ctx: TxContext, loan_id: int) -> Result:
        loan = self.storage.map_get(LOANS, loan_id)
        if loan is None:
            return NOT_FOUND
        return Result.ok(replace(loan))

    def make_payment(self, ctx: TxContext, loan_id: int, amount: int) -> Result:
        """Record the borrower's next payment.

        The payment that reaches ``total_payments`` closes the loan.
        """
        loan = self.storage.map_get(LOANS, loan_id)
        if loan is None:
            return NOT_FOUND
        if ctx.sender != loan.borrower:
            return UNAUTHORIZED
        if loan.status != LoanStatus.ACTIVE:
            return INVALID_STATE

        payment_number = loan.payments_made + 1
        if payment_number > loan.total_payments:
            return INVALID_STATE

        self.storage.map_set(
            PAYMENTS,
            (loan_id, payment_number),
            Payment(amount=amount, date=ctx.block_height, status=PaymentStatus.COMPLETED),
        )
        loan.payments_made = payment_number
        self._log(ctx, "Loan %d payment %d/%d", loan_id, payment_number, loan.total_payments)

        if payment_number == loan.total_payments:
            self._check_effect(ctx, "close-loan", self.close_loan(ctx, loan_id))
        return OK

    def get_payment(self, ctx: TxContext, loan_id: int, payment_number: int) -> Result:
        payment = self.storage.map_get(PAYMENTS, (loan_id, payment_number))
        if payment is None:
            return NOT_FOUND
        return Result.ok(payment)

    def close_loan(self, ctx: TxContext, loan_id: int) -> Result:
        loan = self.storage.map_get(LOANS, loan_id)
        if loan is None:
            return NOT_FOUND
        if ctx.sender not in (loan.lender, loan.borrower):
            return UNAUTHORIZED
        if loan.status != LoanStatus.ACTIVE:
            return INVALID_STATE

        loan.status = LoanStatus.CLOSED
        self._log(ctx, "Loan %d closed after %d payments", loan_id, loan.payments_made)

        inner = ctx.as_caller(self.name)
        pledge = self.collateral.get_collateral(inner, loan.asset_id)
        if not pledge.success or pledge.value.loan_id != loan_id:
            self._log(ctx, "Loan %d no longer holds asset %d", loan_id, loan.asset_id, level=logging.WARNING)
            return OK

        self._check_effect(
            ctx,
            "update-asset-status",
            self.assets.update_asset_status(inner, loan.asset_id, AssetStatus.AVAILABLE),
        )
        self._check_effect(ctx, "release-collateral", self.collateral.release_collateral(inner, loan.asset_id))
        return OK
