"""Base class shared by the simulated contracts."""

from __future__ import annotations

import logging
from abc import ABC
from enum import Enum
from typing import Any

from lending_sim.context import TxContext
from lending_sim.models import Result
from lending_sim.store import Storage


class ContractName(str, Enum):
    ASSET_REGISTRATION = "asset-registration"
    LENDER_VERIFICATION = "lender-verification"
    LOAN_MANAGEMENT = "loan-management"
    COLLATERAL_MONITORING = "collateral-monitoring"


class Contract(ABC):
    """Base class for all simulated contracts.

    Each contract owns a fixed set of maps inside the shared
    :class:`Storage` and receives the transaction context explicitly on
    every operation.

    Parameters
    ----------
    storage : Storage
        Storage shared with the other contracts of the environment.
    """

    name: str = ""
    operations: tuple[str, ...] = ()

    def __init__(self, storage: Storage) -> None:
        self.storage = storage
        self.logger = logging.getLogger(f"lending_sim.contracts.{self.name}")

    def _log(self, ctx: TxContext, msg: str, *args: Any, level: int = logging.DEBUG) -> None:
        self.logger.log(
            level,
            msg,
            *args,
            extra={"contract": self.name, "sender": ctx.sender, "block_height": ctx.block_height},
        )

    def _check_effect(self, ctx: TxContext, effect: str, result: Result) -> None:
        """Log a nested effect that did not succeed.

        Effects run after validation and are not unwound on failure.
        """
        if not result.success:
            self._log(
                ctx,
                "%s failed with error %s",
                effect,
                int(result.error),
                level=logging.WARNING,
            )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
