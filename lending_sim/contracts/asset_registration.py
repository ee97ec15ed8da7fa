"""Asset registration contract."""

from __future__ import annotations

from dataclasses import replace

from lending_sim.context import TxContext
from lending_sim.contracts.base import Contract, ContractName
from lending_sim.models import Asset, AssetStatus, Result
from lending_sim.models.base import INVALID_STATE, NOT_FOUND, OK, UNAUTHORIZED

ASSETS = "assets"
LAST_ASSET_ID = "last-asset-id"


class AssetRegistration(Contract):
    """Registry of physical assets and their owners.

    Owners may update status and transfer their assets.  Calls issued by
    the loan management contract act as the custodian of a pledged asset
    and pass the ownership check.
    """

    name = ContractName.ASSET_REGISTRATION.value
    operations = ("register_asset", "get_asset", "update_asset_status", "transfer_asset")

    def register_asset(
        self,
        ctx: TxContext,
        name: str,
        description: str,
        serial_number: str,
        manufacturer: str,
        manufacture_date: int,
        value: int,
    ) -> Result:
        """Register a new asset owned by the sender and return its id."""
        asset_id = self.storage.next_id(LAST_ASSET_ID)
        self.storage.map_set(
            ASSETS,
            asset_id,
            Asset(
                owner=ctx.sender,
                name=name,
                description=description,
                serial_number=serial_number,
                manufacturer=manufacturer,
                manufacture_date=manufacture_date,
                value=value,
                status=AssetStatus.AVAILABLE,
            ),
        )
        self._log(ctx, "Registered asset %d (%s)", asset_id, serial_number)
        return Result.ok(asset_id)

    def get_asset(self, ctx: TxContext, asset_id: int) -> Result:
        asset = self.storage.map_get(ASSETS, asset_id)
        if asset is None:
            return NOT_FOUND
        return Result.ok(replace(asset))

    def update_asset_status(self, ctx: TxContext, asset_id: int, new_status: AssetStatus | str) -> Result:
        asset = self.storage.map_get(ASSETS, asset_id)
        if asset is None:
            return NOT_FOUND
        if not self._may_modify(ctx, asset):
            return UNAUTHORIZED

        try:
            status = AssetStatus(new_status)
        except ValueError:
            return INVALID_STATE

        asset.status = status
        self._log(ctx, "Asset %d status -> %s", asset_id, asset.status.value)
        return OK

    def transfer_asset(self, ctx: TxContext, asset_id: int, new_owner: str) -> Result:
        asset = self.storage.map_get(ASSETS, asset_id)
        if asset is None:
            return NOT_FOUND
        if not self._may_modify(ctx, asset):
            return UNAUTHORIZED

        previous_owner = asset.owner
        asset.owner = new_owner
        self._log(ctx, "Asset %d transferred %s -> %s", asset_id, previous_owner, new_owner)
        return OK

    @staticmethod
    def _may_modify(ctx: TxContext, asset: Asset) -> bool:
        return (
            ctx.sender == asset.owner
            or ctx.contract_caller == ContractName.LOAN_MANAGEMENT.value
        )
