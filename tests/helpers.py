"""Shared principals and setup helpers for contract tests."""

from lending_sim import ContractHandle, SimulationEnvironment

OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
LENDER = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
BORROWER = "ST3NBRSFKX28FQ2ZJ1MAKX58HKHSDGNV5N7R21XCP"
INSPECTOR = "ST2JHG361ZXG51QTKY2NQCVBPPRRE2KZB1HR05NNC"
STRANGER = "ST3AM1A56AK2C1XAFJ4115ZSV26EB49BVQ10MGCS0"


def register_sample_asset(
    env: SimulationEnvironment,
    assets: ContractHandle,
    owner: str = BORROWER,
) -> int:
    """Register an asset as ``owner`` and return its id."""
    env.set_tx_sender(owner)
    result = assets.register_asset(
        "Excavator X200",
        "Tracked excavator",
        "SN-12345",
        "Heavy Co",
        20200115,
        150_000,
    )
    assert result.success
    return result.value
