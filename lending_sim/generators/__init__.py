"""Faker-backed generators for scenario actors and assets."""

from lending_sim.generators.asset import AssetGenerator
from lending_sim.generators.lender import LenderGenerator
from lending_sim.generators.pool import PrincipalPool, generate_principal

__all__ = ["AssetGenerator", "LenderGenerator", "PrincipalPool", "generate_principal"]
