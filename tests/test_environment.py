"""Tests for the simulation environment, registry and context."""

import pytest

from helpers import BORROWER, LENDER, OWNER, register_sample_asset
from lending_sim import (
    AssetRegistration,
    ConfigurationError,
    ContractHandle,
    ContractName,
    LoanManagement,
    Result,
    SimulationConfig,
    SimulationEnvironment,
    TxContext,
    UnknownContractError,
)


class TestTxContext:
    """Tests for TxContext."""

    def test_defaults(self) -> None:
        ctx = TxContext()
        assert ctx.sender is None
        assert ctx.contract_owner is None
        assert ctx.contract_caller is None
        assert ctx.block_height == 1

    def test_as_caller_copies(self) -> None:
        ctx = TxContext(sender=LENDER, block_height=9)
        inner = ctx.as_caller("loan-management")

        assert inner.contract_caller == "loan-management"
        assert inner.sender == LENDER
        assert inner.block_height == 9
        assert ctx.contract_caller is None

    def test_is_owner(self) -> None:
        assert TxContext(sender=OWNER, contract_owner=OWNER).is_owner is True
        assert TxContext(sender=LENDER, contract_owner=OWNER).is_owner is False
        assert TxContext().is_owner is False


class TestControlSurface:
    """Tests for the setters, reset and block height control."""

    def test_setters_update_context(self, env: SimulationEnvironment) -> None:
        env.set_tx_sender(LENDER)
        env.set_contract_owner(OWNER)
        env.set_contract_caller(ContractName.LOAN_MANAGEMENT)
        env.set_block_height(77)

        assert env.context == TxContext(
            sender=LENDER,
            contract_owner=OWNER,
            contract_caller="loan-management",
            block_height=77,
        )

    def test_advance_blocks(self, env: SimulationEnvironment) -> None:
        assert env.advance_blocks() == 2
        assert env.advance_blocks(10) == 12
        with pytest.raises(ValueError):
            env.advance_blocks(-1)

    def test_reset(self, env: SimulationEnvironment, assets: ContractHandle) -> None:
        register_sample_asset(env, assets)
        env.set_contract_owner(OWNER)
        env.set_block_height(500)

        env.reset()

        assert env.context == TxContext()
        assert env.storage.maps == {}
        assert env.storage.vars == {}
        # Handles survive reset and ids restart at 1
        assert register_sample_asset(env, assets) == 1

    def test_reset_restores_configured_defaults(self) -> None:
        env = SimulationEnvironment(SimulationConfig(contract_owner=OWNER, initial_block_height=100))
        env.set_block_height(900)
        env.set_contract_owner(LENDER)

        env.reset()

        assert env.context.contract_owner == OWNER
        assert env.context.block_height == 100


class TestLoadContract:
    """Tests for load_contract and ContractHandle."""

    @pytest.mark.parametrize(
        "name_or_path",
        [
            "loan-management",
            "./contracts/loan-management.clar",
            "contracts\\loan-management.clar",
            ContractName.LOAN_MANAGEMENT,
        ],
    )
    def test_accepts_names_and_paths(self, env: SimulationEnvironment, name_or_path: str) -> None:
        handle = env.load_contract(name_or_path)
        assert handle.name == "loan-management"
        assert isinstance(handle.contract, LoanManagement)

    def test_unknown_contract(self, env: SimulationEnvironment) -> None:
        with pytest.raises(UnknownContractError):
            env.load_contract("./contracts/token.clar")

    def test_unknown_operation(self, assets: ContractHandle) -> None:
        with pytest.raises(AttributeError):
            assets.mint_tokens

    def test_internal_methods_not_exposed(self, loans: ContractHandle) -> None:
        with pytest.raises(AttributeError):
            loans.link

    def test_dir_lists_operations(self, loans: ContractHandle) -> None:
        assert {"create_loan", "make_payment", "close_loan"} <= set(dir(loans))

    def test_call_by_name(self, env: SimulationEnvironment) -> None:
        result = env.call("lender-verification", "is_verified_lender", LENDER)
        assert result == Result.ok(False)


class TestLinkContracts:
    """Tests for link_contracts."""

    def test_replacement_is_used_by_loan_management(
        self,
        env: SimulationEnvironment,
        assets: ContractHandle,
        loans: ContractHandle,
        verified_lender: str,
    ) -> None:
        """Loan management calls whichever asset registry is linked last."""
        calls = []

        class RecordingAssets(AssetRegistration):
            def get_asset(self, ctx: TxContext, asset_id: int) -> Result:
                calls.append((ctx.contract_caller, asset_id))
                return super().get_asset(ctx, asset_id)

        env.link_contracts({"asset-registration": RecordingAssets(env.storage)})
        asset_id = register_sample_asset(env, assets)
        env.set_tx_sender(verified_lender)

        assert loans.create_loan(BORROWER, asset_id, 1_000, 100, 10, 1).success
        assert calls == [("loan-management", asset_id)]

    def test_link_accepts_handles(self, env: SimulationEnvironment, assets: ContractHandle) -> None:
        original = assets.contract
        env.link_contracts({"asset-registration-copy": assets})

        assert env.registry.get("asset-registration-copy") is original

    def test_wrong_type_rejected(self, env: SimulationEnvironment) -> None:
        with pytest.raises(ConfigurationError):
            env.link_contracts({"loan-management": AssetRegistration(env.storage)})

    def test_reset_restores_default_wiring(self, env: SimulationEnvironment) -> None:
        replacement = AssetRegistration(env.storage)
        env.link_contracts({"asset-registration": replacement})

        env.reset()

        assert env.registry.get("asset-registration") is not replacement
        assert env.registry.get("loan-management").assets is env.registry.get("asset-registration")


class TestDumpState:
    """Tests for dump_state."""

    def test_dump_state(self, env: SimulationEnvironment, loans: ContractHandle, active_loan: int) -> None:
        state = env.dump_state()

        assert state["context"]["sender"] == LENDER
        assert state["vars"] == {"last-asset-id": 1, "last-loan-id": 1}
        assert state["maps"]["loans"]["1"]["status"] == "active"
        assert state["maps"]["assets"]["1"]["status"] == "collateralized"
        assert state["maps"]["collaterals"]["1"]["condition"] == "unknown"
        assert state["nfts"] == {}
