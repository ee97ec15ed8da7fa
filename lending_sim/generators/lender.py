"""Lender generator producing ``register_lender`` arguments."""

from lending_sim.generators.base import BaseGenerator


class LenderGenerator(BaseGenerator):
    """Generate synthetic licensed lenders."""

    SUFFIXES = ["Capital", "Finance", "Credit", "Lending", "Leasing"]

    def generate(self) -> tuple[str, str, str]:
        """Generate a lender.

        Returns
        -------
        tuple[str, str, str]
            Principal, display name and license id.
        """
        principal = self.pool.principal()
        company = self.pool.company().split(",")[0]
        name = f"{company} {self.rng.choice(self.SUFFIXES)}"
        license_id = self.fake.bothify("FIN#####")
        return principal, name, license_id
