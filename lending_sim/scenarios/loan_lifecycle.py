"""Loan lifecycle scenario driving all four contracts end to end."""

from __future__ import annotations

import logging
import random
from collections import Counter
from typing import Any

from lending_sim.config import ScenarioConfig, SimulationConfig
from lending_sim.contracts.asset_registration import ASSETS
from lending_sim.contracts.collateral_monitoring import COLLATERALS, INSPECTIONS
from lending_sim.contracts.loan_management import LOANS, PAYMENTS
from lending_sim.environment import SimulationEnvironment
from lending_sim.generators import AssetGenerator, LenderGenerator, PrincipalPool

logger = logging.getLogger(__name__)

CONDITIONS = ["excellent", "good", "fair", "worn", "damaged"]


class LoanLifecycleScenario:
    """Run a seeded portfolio of asset-backed loans through their lifecycle.

    This scenario:
    - Registers verified lenders as the contract owner, optionally
      deactivating a share of them
    - Lets each borrower register one asset
    - Opens loans from random lenders against borrower assets
    - Records collateral inspections while loans are active
    - Repays loans in full, or closes a share of them early

    Loans requested by deactivated lenders are rejected by the contracts
    and counted in the summary.  The same seed always produces the same
    final state.
    """

    def __init__(
        self,
        num_lenders: int = 3,
        num_borrowers: int = 10,
        num_loans: int = 8,
        max_payments: int = 6,
        inspections_per_loan: int = 2,
        early_close_rate: float = 0.25,
        inactive_lender_rate: float = 0.0,
        blocks_per_step: int = 10,
        seed: int | None = None,
        *,
        config: ScenarioConfig | None = None,
        sim_config: SimulationConfig | None = None,
    ) -> None:
        """Initialize loan lifecycle scenario.

        Parameters
        ----------
        num_lenders : int
            Number of lenders registered by the contract owner.
        num_borrowers : int
            Number of borrowers, each registering one asset.
        num_loans : int
            Loans to request; capped at ``num_borrowers``.
        max_payments : int
            Upper bound for ``total_payments`` per loan.
        inspections_per_loan : int
            Inspections recorded on each collateral while active.
        early_close_rate : float
            Share of loans closed by the lender before full repayment.
        inactive_lender_rate : float
            Share of lenders deactivated before loans are requested.
        blocks_per_step : int
            Blocks advanced between consecutive actions.
        seed : int | None
            Random seed for reproducibility. Defaults to ``sim_config.seed``.
        config : ScenarioConfig | None
            Optional scenario configuration, defaulting to
            ``sim_config.scenario``. If set, overrides the keyword sizes and
            rates above.
        sim_config : SimulationConfig | None
            Environment configuration (initial block height, locale, seed).
        """
        sim_config = sim_config or SimulationConfig(seed=seed)
        if config is None:
            config = sim_config.scenario
        if seed is None:
            seed = sim_config.seed

        if config is not None:
            num_lenders = config.num_lenders
            num_borrowers = config.num_borrowers
            num_loans = config.num_loans
            max_payments = config.max_payments
            inspections_per_loan = config.inspections_per_loan
            early_close_rate = config.early_close_rate
            inactive_lender_rate = config.inactive_lender_rate
            blocks_per_step = config.blocks_per_step

        self.config = config
        self.sim_config = sim_config
        self.num_lenders = num_lenders
        self.num_borrowers = num_borrowers
        self.num_loans = min(num_loans, num_borrowers)
        self.max_payments = max_payments
        self.inspections_per_loan = inspections_per_loan
        self.early_close_rate = early_close_rate
        self.inactive_lender_rate = inactive_lender_rate
        self.blocks_per_step = blocks_per_step
        self.seed = seed

        self._rng = random.Random(seed)
        locale = self.sim_config.locale
        self._pool = PrincipalPool(locale=locale, seed=seed)
        self._lender_gen = LenderGenerator(seed=seed, locale=locale, pool=self._pool)
        self._asset_gen = AssetGenerator(seed=seed, locale=locale, pool=self._pool)

        self.env = SimulationEnvironment(self.sim_config)
        self.rejected_loans = 0

    def run(self) -> SimulationEnvironment:
        """Execute the scenario.

        Returns
        -------
        SimulationEnvironment
            Environment holding the final state.
        """
        logger.info(
            "Starting loan lifecycle scenario: %d lenders, %d borrowers, %d loans",
            self.num_lenders,
            self.num_borrowers,
            self.num_loans,
        )
        env = self.env
        lenders_contract = env.load_contract("lender-verification")
        assets_contract = env.load_contract("asset-registration")
        loans_contract = env.load_contract("loan-management")
        collateral_contract = env.load_contract("collateral-monitoring")

        owner = self._pool.principal()
        env.set_contract_owner(owner)
        env.set_tx_sender(owner)

        lenders = []
        for _ in range(self.num_lenders):
            principal, name, license_id = self._lender_gen.generate()
            lenders_contract.register_lender(principal, name, license_id).unwrap()
            lenders.append(principal)

        for principal in lenders[: int(len(lenders) * self.inactive_lender_rate)]:
            lenders_contract.deactivate_lender(principal).unwrap()

        logger.info("Registered %d lenders", len(lenders))

        borrowers = []
        for _ in range(self.num_borrowers):
            borrower = self._pool.principal()
            env.set_tx_sender(borrower)
            asset_id = assets_contract.register_asset(**self._asset_gen.generate()).unwrap()
            borrowers.append((borrower, asset_id))

        logger.info("Registered %d assets", len(borrowers))

        inspector = self._pool.principal()
        opened: list[tuple[int, str, str, int]] = []
        candidates = borrowers[: self.num_loans] if lenders else []
        for borrower, asset_id in candidates:
            lender = self._rng.choice(lenders)
            total_payments = self._rng.randint(1, self.max_payments)
            asset_value = assets_contract.get_asset(asset_id).unwrap().value

            env.advance_blocks(self.blocks_per_step)
            env.set_tx_sender(lender)
            result = loans_contract.create_loan(
                borrower,
                asset_id,
                int(asset_value * self._rng.uniform(0.5, 0.8)),
                self._rng.randint(300, 1500),  # basis points
                total_payments * self.blocks_per_step,
                total_payments,
            )
            if not result.success:
                self.rejected_loans += 1
                logger.debug("Loan for asset %d rejected with error %d", asset_id, int(result.error))
                continue
            opened.append((result.value, lender, borrower, asset_id))

        logger.info("Opened %d loans (%d rejected)", len(opened), self.rejected_loans)

        for loan_id, lender, borrower, asset_id in opened:
            env.set_tx_sender(inspector)
            for _ in range(self.inspections_per_loan):
                env.advance_blocks(self.blocks_per_step)
                collateral_contract.record_inspection(
                    asset_id,
                    self._rng.choice(CONDITIONS),
                    f"Routine inspection of asset {asset_id}",
                ).unwrap()

            loan = loans_contract.get_loan(loan_id).unwrap()
            close_early = self._rng.random() < self.early_close_rate
            payments = (
                self._rng.randint(0, loan.total_payments - 1) if close_early else loan.total_payments
            )
            installment = max(1, loan.principal_amount // loan.total_payments)

            env.set_tx_sender(borrower)
            for _ in range(payments):
                env.advance_blocks(self.blocks_per_step)
                loans_contract.make_payment(loan_id, installment).unwrap()

            if close_early:
                env.set_tx_sender(lender)
                loans_contract.close_loan(loan_id).unwrap()

        logger.info("Scenario finished at block %d", env.context.block_height)
        return env

    def get_summary(self) -> dict[str, Any]:
        """Return portfolio statistics for the final state."""
        storage = self.env.storage
        loans = storage.map_values(LOANS)
        return {
            "total_loans": len(loans),
            "rejected_loans": self.rejected_loans,
            "total_principal": sum(loan.principal_amount for loan in loans),
            "total_payments": len(storage.map_values(PAYMENTS)),
            "total_inspections": len(storage.map_values(INSPECTIONS)),
            "loan_status_distribution": dict(Counter(loan.status.value for loan in loans)),
            "collateral_status_distribution": dict(
                Counter(c.status.value for c in storage.map_values(COLLATERALS))
            ),
            "asset_status_distribution": dict(
                Counter(a.status.value for a in storage.map_values(ASSETS))
            ),
            "block_height": self.env.context.block_height,
        }
