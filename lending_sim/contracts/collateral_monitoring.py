"""Collateral monitoring contract."""

from __future__ import annotations

from dataclasses import replace

from lending_sim.context import TxContext
from lending_sim.contracts.base import Contract, ContractName
from lending_sim.models import Collateral, CollateralStatus, Inspection, Result
from lending_sim.models.base import INVALID_STATE, NOT_FOUND, OK, UNAUTHORIZED

COLLATERALS = "collaterals"
INSPECTIONS = "inspections"
INSPECTION_COUNTS = "asset-inspection-count"


class CollateralMonitoring(Contract):
    """Tracks pledged assets and their inspection history.

    Collateral is registered and released only through the loan
    management contract; anyone may record an inspection while the
    collateral is active.
    """

    name = ContractName.COLLATERAL_MONITORING.value
    operations = (
        "register_collateral",
        "get_collateral",
        "record_inspection",
        "get_inspection",
        "release_collateral",
        "get_inspection_count",
    )

    def register_collateral(self, ctx: TxContext, asset_id: int, loan_id: int) -> Result:
        if not self._called_by_loan_management(ctx):
            return UNAUTHORIZED

        self.storage.map_set(COLLATERALS, asset_id, Collateral(loan_id=loan_id))
        self.storage.map_set(INSPECTION_COUNTS, asset_id, 0)
        self._log(ctx, "Collateral registered for asset %d (loan %d)", asset_id, loan_id)
        return OK

    def get_collateral(self, ctx: TxContext, asset_id: int) -> Result:
        collateral = self.storage.map_get(COLLATERALS, asset_id)
        if collateral is None:
            return NOT_FOUND
        return Result.ok(replace(collateral))

    def record_inspection(self, ctx: TxContext, asset_id: int, condition: str, notes: str) -> Result:
        """Append an inspection report and refresh the collateral's condition.

        Returns the new inspection id.
        """
        collateral = self.storage.map_get(COLLATERALS, asset_id)
        if collateral is None:
            return NOT_FOUND
        if collateral.status != CollateralStatus.ACTIVE:
            return INVALID_STATE

        inspection_id = self.storage.map_get(INSPECTION_COUNTS, asset_id) or 0
        inspection_id += 1
        self.storage.map_set(
            INSPECTIONS,
            (asset_id, inspection_id),
            Inspection(
                inspector=ctx.sender,
                date=ctx.block_height,
                condition=condition,
                notes=notes,
            ),
        )
        self.storage.map_set(INSPECTION_COUNTS, asset_id, inspection_id)

        collateral.last_inspection_date = ctx.block_height
        collateral.condition = condition
        self._log(ctx, "Inspection %d on asset %d: %s", inspection_id, asset_id, condition)
        return Result.ok(inspection_id)

    def get_inspection(self, ctx: TxContext, asset_id: int, inspection_id: int) -> Result:
        inspection = self.storage.map_get(INSPECTIONS, (asset_id, inspection_id))
        if inspection is None:
            return NOT_FOUND
        return Result.ok(inspection)

    def release_collateral(self, ctx: TxContext, asset_id: int) -> Result:
        # Releasing an already released record is allowed
        if not self._called_by_loan_management(ctx):
            return UNAUTHORIZED

        collateral = self.storage.map_get(COLLATERALS, asset_id)
        if collateral is None:
            return NOT_FOUND

        collateral.status = CollateralStatus.RELEASED
        self._log(ctx, "Collateral released for asset %d", asset_id)
        return OK

    def get_inspection_count(self, ctx: TxContext, asset_id: int) -> Result:
        return Result.ok(self.storage.map_get(INSPECTION_COUNTS, asset_id) or 0)

    @staticmethod
    def _called_by_loan_management(ctx: TxContext) -> bool:
        return ctx.contract_caller == ContractName.LOAN_MANAGEMENT.value
