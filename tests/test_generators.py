"""Tests for data generators."""

import random

from lending_sim.generators import AssetGenerator, LenderGenerator, PrincipalPool, generate_principal
from lending_sim.generators.pool import C32_ALPHABET


class TestPrincipalPool:
    """Tests for PrincipalPool."""

    def test_principal_format(self) -> None:
        principal = generate_principal(random.Random(1))

        assert principal.startswith("ST")
        assert len(principal) == 41
        assert set(principal[2:]) <= set(C32_ALPHABET)

    def test_principals_unique(self, seed: int) -> None:
        pool = PrincipalPool(seed=seed, pool_sizes={"name": 10, "company": 10})
        principals = [pool.principal() for _ in range(50)]

        assert len(set(principals)) == 50

    def test_seeded_pools_match(self, seed: int) -> None:
        first = PrincipalPool(seed=seed, pool_sizes={"name": 10, "company": 10})
        second = PrincipalPool(seed=seed, pool_sizes={"name": 10, "company": 10})

        assert [first.principal() for _ in range(5)] == [second.principal() for _ in range(5)]
        assert first.company() == second.company()
        assert first.name() == second.name()


class TestAssetGenerator:
    """Tests for AssetGenerator."""

    def test_generate_asset(self, seed: int) -> None:
        asset = AssetGenerator(seed=seed).generate()

        assert set(asset) == {
            "name",
            "description",
            "serial_number",
            "manufacturer",
            "manufacture_date",
            "value",
        }
        assert asset["serial_number"].startswith("SN-")
        assert asset["manufacturer"] in asset["name"]
        assert 20100101 <= asset["manufacture_date"] <= 20241231
        assert 5_000 <= asset["value"] <= 500_000
        assert asset["value"] % 100 == 0

    def test_generate_batch(self, seed: int) -> None:
        batch = AssetGenerator(seed=seed).generate_batch(5)
        assert len(batch) == 5

    def test_reproducible(self, seed: int) -> None:
        assert AssetGenerator(seed=seed).generate() == AssetGenerator(seed=seed).generate()


class TestLenderGenerator:
    """Tests for LenderGenerator."""

    def test_generate_lender(self, seed: int) -> None:
        principal, name, license_id = LenderGenerator(seed=seed).generate()

        assert principal.startswith("ST")
        assert name.split()[-1] in LenderGenerator.SUFFIXES
        assert license_id.startswith("FIN")
        assert len(license_id) == 8

    def test_shared_pool_keeps_principals_unique(self, seed: int) -> None:
        pool = PrincipalPool(seed=seed, pool_sizes={"name": 10, "company": 10})
        gen_a = LenderGenerator(seed=seed, pool=pool)
        gen_b = LenderGenerator(seed=seed, pool=pool)

        assert gen_a.generate()[0] != gen_b.generate()[0]
