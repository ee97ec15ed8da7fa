"""Tests for the asset registration contract."""

from helpers import BORROWER, STRANGER, register_sample_asset
from lending_sim import AssetStatus, ContractHandle, ContractName, ErrorCode, SimulationEnvironment


class TestRegisterAsset:
    """Tests for register_asset / get_asset."""

    def test_register_asset(self, env: SimulationEnvironment, assets: ContractHandle) -> None:
        """Sender becomes owner and the asset starts available."""
        asset_id = register_sample_asset(env, assets)

        asset = assets.get_asset(asset_id).value
        assert asset_id == 1
        assert asset.owner == BORROWER
        assert asset.name == "Excavator X200"
        assert asset.serial_number == "SN-12345"
        assert asset.manufacture_date == 20200115
        assert asset.value == 150_000
        assert asset.status == AssetStatus.AVAILABLE

    def test_ids_are_sequential(self, env: SimulationEnvironment, assets: ContractHandle) -> None:
        ids = [register_sample_asset(env, assets) for _ in range(3)]
        assert ids == [1, 2, 3]

    def test_get_missing_asset(self, assets: ContractHandle) -> None:
        result = assets.get_asset(99)
        assert result.success is False
        assert result.error == ErrorCode.NOT_FOUND


class TestUpdateAssetStatus:
    """Tests for update_asset_status."""

    def test_owner_updates_status(self, env: SimulationEnvironment, assets: ContractHandle) -> None:
        asset_id = register_sample_asset(env, assets)

        result = assets.update_asset_status(asset_id, "collateralized")

        assert result.success is True
        assert result.value is None
        assert assets.get_asset(asset_id).value.status == AssetStatus.COLLATERALIZED

    def test_non_owner_is_403(self, env: SimulationEnvironment, assets: ContractHandle) -> None:
        asset_id = register_sample_asset(env, assets)
        env.set_tx_sender(STRANGER)

        result = assets.update_asset_status(asset_id, AssetStatus.COLLATERALIZED)

        assert result.error == ErrorCode.UNAUTHORIZED
        assert assets.get_asset(asset_id).value.status == AssetStatus.AVAILABLE

    def test_missing_asset_is_404(self, assets: ContractHandle) -> None:
        assert assets.update_asset_status(5, AssetStatus.AVAILABLE).error == ErrorCode.NOT_FOUND

    def test_unknown_status_is_400(self, env: SimulationEnvironment, assets: ContractHandle) -> None:
        asset_id = register_sample_asset(env, assets)
        assert assets.update_asset_status(asset_id, "stolen").error == ErrorCode.INVALID_STATE


class TestTransferAsset:
    """Tests for transfer_asset."""

    def test_owner_transfers(self, env: SimulationEnvironment, assets: ContractHandle) -> None:
        asset_id = register_sample_asset(env, assets)

        assert assets.transfer_asset(asset_id, STRANGER).success is True
        assert assets.get_asset(asset_id).value.owner == STRANGER

        # Previous owner lost control
        assert assets.transfer_asset(asset_id, BORROWER).error == ErrorCode.UNAUTHORIZED

    def test_non_owner_is_403(self, env: SimulationEnvironment, assets: ContractHandle) -> None:
        asset_id = register_sample_asset(env, assets)
        env.set_tx_sender(STRANGER)

        assert assets.transfer_asset(asset_id, STRANGER).error == ErrorCode.UNAUTHORIZED
        assert assets.get_asset(asset_id).value.owner == BORROWER

    def test_missing_asset_is_404(self, assets: ContractHandle) -> None:
        assert assets.transfer_asset(1, STRANGER).error == ErrorCode.NOT_FOUND

    def test_loan_management_caller_acts_as_custodian(
        self, env: SimulationEnvironment, assets: ContractHandle
    ) -> None:
        """Calls issued through loan management pass the ownership check."""
        asset_id = register_sample_asset(env, assets)
        env.set_tx_sender(STRANGER)
        env.set_contract_caller(ContractName.LOAN_MANAGEMENT)

        assert assets.transfer_asset(asset_id, STRANGER).success is True
        assert assets.get_asset(asset_id).value.owner == STRANGER
