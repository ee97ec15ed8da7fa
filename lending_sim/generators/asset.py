"""Asset generator producing ``register_asset`` arguments."""

from datetime import date
from typing import Any

from lending_sim.generators.base import BaseGenerator


class AssetGenerator(BaseGenerator):
    """Generate synthetic equipment assets."""

    CATEGORIES = [
        "Excavator",
        "Forklift",
        "Tractor",
        "CNC Mill",
        "Generator",
        "Delivery Van",
        "Crane",
        "Bulldozer",
    ]

    # Appraised value range in whole currency units
    VALUE_RANGE = (5_000, 500_000)
    EARLIEST_MANUFACTURE = date(2010, 1, 1)
    LATEST_MANUFACTURE = date(2024, 12, 31)

    def generate(self) -> dict[str, Any]:
        """Generate keyword arguments for ``register_asset``.

        Returns
        -------
        dict[str, Any]
            ``name``, ``description``, ``serial_number``, ``manufacturer``,
            ``manufacture_date`` and ``value``.
        """
        category = self.rng.choice(self.CATEGORIES)
        manufacturer = self.pool.company()
        model = self.fake.bothify("??-###").upper()
        manufacture_date = self.fake.date_between(
            start_date=self.EARLIEST_MANUFACTURE,
            end_date=self.LATEST_MANUFACTURE,
        )

        return {
            "name": f"{manufacturer} {category} {model}",
            "description": self.fake.sentence(nb_words=8),
            "serial_number": self.fake.bothify("SN-????-#######").upper(),
            "manufacturer": manufacturer,
            # Stored as YYYYMMDD to keep records integer-typed
            "manufacture_date": int(manufacture_date.strftime("%Y%m%d")),
            "value": self.rng.randint(*self.VALUE_RANGE) // 100 * 100,
        }

    def generate_batch(self, count: int) -> list[dict[str, Any]]:
        return [self.generate() for _ in range(count)]
