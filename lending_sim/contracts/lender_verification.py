"""Lender verification contract."""

from __future__ import annotations

from dataclasses import replace

from lending_sim.context import TxContext
from lending_sim.contracts.base import Contract, ContractName
from lending_sim.models import LenderRecord, Result
from lending_sim.models.base import NOT_FOUND, OK, UNAUTHORIZED

VERIFIED_LENDERS = "verified-lenders"


class LenderVerification(Contract):
    """Owner-curated list of licensed lenders.

    Registration, deactivation and reactivation are reserved to the
    contract owner; the owner check runs before any other validation.
    """

    name = ContractName.LENDER_VERIFICATION.value
    operations = (
        "register_lender",
        "get_lender_data",
        "is_verified_lender",
        "deactivate_lender",
        "reactivate_lender",
    )

    def register_lender(self, ctx: TxContext, lender: str, name: str, license_id: str) -> Result:
        """Register or re-register ``lender`` as an active verified lender."""
        if not ctx.is_owner:
            return UNAUTHORIZED

        self.storage.map_set(
            VERIFIED_LENDERS,
            lender,
            LenderRecord(
                name=name,
                license_id=license_id,
                verification_date=ctx.block_height,
                is_active=True,
            ),
        )
        self._log(ctx, "Verified lender %s (%s)", lender, license_id)
        return OK

    def get_lender_data(self, ctx: TxContext, lender: str) -> Result:
        record = self.storage.map_get(VERIFIED_LENDERS, lender)
        if record is None:
            return NOT_FOUND
        return Result.ok(replace(record))

    def is_verified_lender(self, ctx: TxContext, lender: str) -> Result:
        """Return whether ``lender`` is registered and active.

        Unknown principals yield ``False`` rather than a not-found error.
        """
        record = self.storage.map_get(VERIFIED_LENDERS, lender)
        return Result.ok(record is not None and record.is_active)

    def deactivate_lender(self, ctx: TxContext, lender: str) -> Result:
        return self._set_active(ctx, lender, False)

    def reactivate_lender(self, ctx: TxContext, lender: str) -> Result:
        return self._set_active(ctx, lender, True)

    def _set_active(self, ctx: TxContext, lender: str, active: bool) -> Result:
        if not ctx.is_owner:
            return UNAUTHORIZED

        record = self.storage.map_get(VERIFIED_LENDERS, lender)
        if record is None:
            return NOT_FOUND

        record.is_active = active
        self._log(ctx, "Lender %s %s", lender, "reactivated" if active else "deactivated")
        return OK
