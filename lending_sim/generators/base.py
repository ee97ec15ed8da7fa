"""Base generator class for all data generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker

from lending_sim.generators.pool import PrincipalPool


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides common initialization: Faker instance creation,
    seed-based reproducibility and a shared :class:`PrincipalPool`.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    pool : PrincipalPool | None
        Shared value pool.  Generators in one scenario should share a
        pool so principals stay unique across them.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        pool: PrincipalPool | None = None,
    ) -> None:
        self.fake = Faker(locale)
        self.pool = pool or PrincipalPool(locale=locale, seed=seed)
        self.rng = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
