#!/usr/bin/env python3
"""Run the loan lifecycle scenario and print the result as JSON.

The scenario registers lenders and assets, opens loans, records
collateral inspections and repays or closes every loan inside a fresh
simulation environment.  Runs are deterministic for a given seed.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lending_sim.config import ScenarioConfig, SimulationConfig
from lending_sim.logging import setup_logging
from lending_sim.scenarios import LoanLifecycleScenario

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Simulate asset-backed loans across the lending contracts"
    )
    parser.add_argument(
        "--lenders",
        type=int,
        default=3,
        help="Number of verified lenders (default: 3)",
    )
    parser.add_argument(
        "--borrowers",
        type=int,
        default=10,
        help="Number of borrowers, one asset each (default: 10)",
    )
    parser.add_argument(
        "--loans",
        type=int,
        default=8,
        help="Number of loans to request (default: 8)",
    )
    parser.add_argument(
        "--max-payments",
        type=int,
        default=6,
        help="Maximum number of payments per loan (default: 6)",
    )
    parser.add_argument(
        "--inspections",
        type=int,
        default=2,
        help="Inspections recorded per loan (default: 2)",
    )
    parser.add_argument(
        "--early-close-rate",
        type=float,
        default=0.25,
        help="Share of loans closed before full repayment (default: 0.25)",
    )
    parser.add_argument(
        "--inactive-lender-rate",
        type=float,
        default=0.0,
        help="Share of lenders deactivated before lending (default: 0.0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: SEED env var)",
    )
    parser.add_argument(
        "--dump-state",
        action="store_true",
        help="Print the full contract storage instead of the summary",
    )

    args = parser.parse_args()

    sim_config = SimulationConfig.from_env()
    if args.seed is not None:
        sim_config.seed = args.seed
    setup_logging(sim_config.log_level, sim_config.log_format)

    scenario_config = ScenarioConfig(
        name="loan-lifecycle",
        num_lenders=args.lenders,
        num_borrowers=args.borrowers,
        num_loans=args.loans,
        max_payments=args.max_payments,
        inspections_per_loan=args.inspections,
        early_close_rate=args.early_close_rate,
        inactive_lender_rate=args.inactive_lender_rate,
    )
    sim_config.scenario = scenario_config

    scenario = LoanLifecycleScenario(sim_config=sim_config)
    env = scenario.run()

    output = env.dump_state() if args.dump_state else scenario.get_summary()
    print(json.dumps(output, indent=2, ensure_ascii=False))
    logger.info("Done")


if __name__ == "__main__":
    main()
