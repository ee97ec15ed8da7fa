"""Pytest configuration and fixtures."""

import pytest

from helpers import BORROWER, LENDER, OWNER, register_sample_asset
from lending_sim import ContractHandle, SimulationEnvironment


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def env() -> SimulationEnvironment:
    """Fresh environment for each test."""
    return SimulationEnvironment()


@pytest.fixture
def assets(env: SimulationEnvironment) -> ContractHandle:
    return env.load_contract("./contracts/asset-registration.clar")


@pytest.fixture
def lenders(env: SimulationEnvironment) -> ContractHandle:
    return env.load_contract("./contracts/lender-verification.clar")


@pytest.fixture
def loans(env: SimulationEnvironment) -> ContractHandle:
    return env.load_contract("./contracts/loan-management.clar")


@pytest.fixture
def collateral(env: SimulationEnvironment) -> ContractHandle:
    return env.load_contract("./contracts/collateral-monitoring.clar")


@pytest.fixture
def verified_lender(env: SimulationEnvironment, lenders: ContractHandle) -> str:
    """Register LENDER as verified with OWNER as contract owner."""
    env.set_contract_owner(OWNER)
    env.set_tx_sender(OWNER)
    assert lenders.register_lender(LENDER, "Finance Corp", "FIN12345").success
    return LENDER


@pytest.fixture
def active_loan(
    env: SimulationEnvironment,
    assets: ContractHandle,
    loans: ContractHandle,
    verified_lender: str,
) -> int:
    """Open a two-payment loan from LENDER to BORROWER on a fresh asset."""
    asset_id = register_sample_asset(env, assets)
    env.set_tx_sender(verified_lender)
    result = loans.create_loan(BORROWER, asset_id, 100_000, 500, 100, 2)
    assert result.success
    return result.value
