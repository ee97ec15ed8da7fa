"""Pre-generated value pools for fast scenario generation.

Usage::

    pool = PrincipalPool(seed=42)
    lender = pool.principal()   # "ST..." address, unique per pool
    name = pool.company()       # random.choice from 500 company names
"""

from __future__ import annotations

import random

from faker import Faker

# Crockford base32 alphabet used by Stacks c32 addresses
C32_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
PRINCIPAL_PREFIX = "ST"
PRINCIPAL_BODY_LENGTH = 39


def generate_principal(rng: random.Random) -> str:
    """Generate a testnet-style standard principal (``ST`` + 39 c32 chars)."""
    body = "".join(rng.choice(C32_ALPHABET) for _ in range(PRINCIPAL_BODY_LENGTH))
    return f"{PRINCIPAL_PREFIX}{body}"


class PrincipalPool:
    """Pre-generated pools of Faker values for fast random selection.

    Principals are drawn without repetition so every actor in a scenario
    gets a distinct identity.

    Parameters
    ----------
    locale : str
        Faker locale (default ``en_US``).
    seed : int | None
        Random seed for reproducibility.
    pool_sizes : dict[str, int] | None
        Override default pool sizes per field.
    """

    DEFAULT_SIZES: dict[str, int] = {
        "name": 500,
        "company": 500,
    }

    def __init__(
        self,
        locale: str = "en_US",
        seed: int | None = None,
        pool_sizes: dict[str, int] | None = None,
    ) -> None:
        sizes = {**self.DEFAULT_SIZES, **(pool_sizes or {})}
        fake = Faker(locale)
        if seed is not None:
            fake.seed_instance(seed)
        self._rng = random.Random(seed)

        self._names: list[str] = [fake.name() for _ in range(sizes["name"])]
        self._companies: list[str] = [fake.company() for _ in range(sizes["company"])]
        self._issued: set[str] = set()

    def principal(self) -> str:
        """Return a principal not previously issued by this pool."""
        while True:
            candidate = generate_principal(self._rng)
            if candidate not in self._issued:
                self._issued.add(candidate)
                return candidate

    def name(self) -> str:
        """Return a random full name."""
        return self._rng.choice(self._names)

    def company(self) -> str:
        """Return a random company name."""
        return self._rng.choice(self._companies)
