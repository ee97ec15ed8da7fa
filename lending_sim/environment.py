"""Simulation environment: storage, transaction context and contract wiring.

Usage::

    env = SimulationEnvironment()
    lenders = env.load_contract("lender-verification")
    loans = env.load_contract("./contracts/loan-management.clar")

    env.set_contract_owner("ST1OWNER")
    env.set_tx_sender("ST1OWNER")
    lenders.register_lender("ST2LENDER", "Finance Corp", "FIN12345")

    env.set_tx_sender("ST2LENDER")
    result = loans.create_loan("ST3BORROWER", 1, 50_000, 5, 1_000, 12)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any

from lending_sim.config import SimulationConfig
from lending_sim.context import TxContext
from lending_sim.contracts import (
    AssetRegistration,
    CollateralMonitoring,
    Contract,
    ContractName,
    LenderVerification,
    LoanManagement,
)
from lending_sim.exceptions import UnknownContractError
from lending_sim.models import Result
from lending_sim.registry import ContractRegistry, contract_name_from_path
from lending_sim.serialization import serialize_key, serialize_value, to_dict
from lending_sim.store import Storage

logger = logging.getLogger(__name__)

CONTRACT_TYPES: dict[str, type[Contract]] = {
    ContractName.ASSET_REGISTRATION.value: AssetRegistration,
    ContractName.LENDER_VERIFICATION.value: LenderVerification,
    ContractName.LOAN_MANAGEMENT.value: LoanManagement,
    ContractName.COLLATERAL_MONITORING.value: CollateralMonitoring,
}


class ContractHandle:
    """Callable surface of one contract bound to an environment.

    Operations are resolved through the environment's registry on every
    call and receive the environment's current :class:`TxContext`, so a
    handle keeps working across ``reset()`` and ``link_contracts()``.
    """

    def __init__(self, env: SimulationEnvironment, name: str) -> None:
        self._env = env
        self.name = name

    @property
    def contract(self) -> Contract:
        return self._env.registry.get(self.name)

    def __getattr__(self, operation: str) -> Callable[..., Result]:
        if operation.startswith("_"):
            raise AttributeError(operation)
        contract = self.contract
        if operation not in contract.operations:
            raise AttributeError(f"{self.name} has no operation {operation!r}")

        def call(*args: Any, **kwargs: Any) -> Result:
            return self._env.call(self.name, operation, *args, **kwargs)

        call.__name__ = operation
        return call

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self.contract.operations))

    def __repr__(self) -> str:
        return f"<ContractHandle {self.name!r}>"


class SimulationEnvironment:
    """In-memory stand-in for a chain running the lending contracts.

    Holds the shared :class:`Storage`, the current transaction context
    and the contract registry.  The four contracts are deployed on
    construction and again on every ``reset()``; loan management receives
    the other three by injection.

    Parameters
    ----------
    config : SimulationConfig | None
        Supplies the default contract owner and initial block height.
    """

    def __init__(self, config: SimulationConfig | None = None) -> None:
        self.config = config or SimulationConfig()
        self.storage = Storage()
        self.registry = ContractRegistry(CONTRACT_TYPES)
        self.context = self._default_context()
        self._deploy()

    def _default_context(self) -> TxContext:
        return TxContext(
            contract_owner=self.config.contract_owner,
            block_height=self.config.initial_block_height,
        )

    def _deploy(self) -> None:
        assets = AssetRegistration(self.storage)
        lenders = LenderVerification(self.storage)
        collateral = CollateralMonitoring(self.storage)
        loans = LoanManagement(self.storage, assets=assets, lenders=lenders, collateral=collateral)

        self.registry.clear()
        self.registry.link(
            {
                assets.name: assets,
                lenders.name: lenders,
                collateral.name: collateral,
                loans.name: loans,
            }
        )

    def _rewire(self) -> None:
        """Point loan management at the currently registered dependencies."""
        loans = self.registry.get(ContractName.LOAN_MANAGEMENT)
        loans.link(
            assets=self.registry.get(ContractName.ASSET_REGISTRATION),
            lenders=self.registry.get(ContractName.LENDER_VERIFICATION),
            collateral=self.registry.get(ContractName.COLLATERAL_MONITORING),
        )

    # Environment control surface
    def reset(self) -> None:
        """Clear storage, restore the default context and redeploy contracts."""
        self.storage.reset()
        self.context = self._default_context()
        self._deploy()
        logger.debug("Environment reset")

    def set_tx_sender(self, principal: str | None) -> None:
        self.context = replace(self.context, sender=principal)

    def set_contract_owner(self, principal: str | None) -> None:
        self.context = replace(self.context, contract_owner=principal)

    def set_contract_caller(self, contract_name: str | None) -> None:
        if isinstance(contract_name, ContractName):
            contract_name = contract_name.value
        self.context = replace(self.context, contract_caller=contract_name)

    def set_block_height(self, height: int) -> None:
        self.context = replace(self.context, block_height=height)

    def advance_blocks(self, count: int = 1) -> int:
        """Move the block height forward and return the new height."""
        if count < 0:
            raise ValueError("Block height cannot move backwards")
        self.set_block_height(self.context.block_height + count)
        return self.context.block_height

    def link_contracts(self, contracts: Mapping[str, Contract | ContractHandle]) -> None:
        """Merge contracts into the registry; last write wins per name."""
        resolved = {
            name: target.contract if isinstance(target, ContractHandle) else target
            for name, target in contracts.items()
        }
        self.registry.link(resolved)
        self._rewire()

    def load_contract(self, name_or_path: str) -> ContractHandle:
        """Return a handle for a contract name or ``.clar`` source path."""
        if isinstance(name_or_path, ContractName):
            name = name_or_path.value
        else:
            name = contract_name_from_path(name_or_path)
        if name not in self.registry:
            raise UnknownContractError(f"Contract {name!r} is not registered")
        return ContractHandle(self, name)

    def call(self, contract_name: str, operation: str, *args: Any, **kwargs: Any) -> Result:
        """Invoke ``operation`` on a registered contract with the current context."""
        contract = self.registry.get(contract_name)
        if operation not in contract.operations:
            raise AttributeError(f"{contract.name} has no operation {operation!r}")

        result = getattr(contract, operation)(self.context, *args, **kwargs)
        logger.debug(
            "%s.%s by %s at block %d -> %s",
            contract.name,
            operation,
            self.context.sender,
            self.context.block_height,
            "ok" if result.success else int(result.error),
        )
        return result

    def dump_state(self) -> dict[str, Any]:
        """Return context and storage as JSON-ready data."""
        return {
            "context": to_dict(self.context),
            "maps": {
                map_name: {
                    serialize_key(key): serialize_value(record)
                    for key, record in self.storage.map_items(map_name)
                }
                for map_name in self.storage.maps
            },
            "vars": serialize_value(self.storage.vars),
            "nfts": serialize_value(self.storage.nfts),
        }
