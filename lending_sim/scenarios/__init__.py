"""Scenarios driving the simulated lending contracts."""

from lending_sim.scenarios.loan_lifecycle import LoanLifecycleScenario

__all__ = ["LoanLifecycleScenario"]
