"""Asset model for the asset registration contract."""

from dataclasses import dataclass

from lending_sim.models.enums import AssetStatus


@dataclass
class Asset:
    """Registered physical asset that can be pledged against a loan."""

    owner: str
    name: str
    description: str
    serial_number: str
    manufacturer: str
    manufacture_date: int
    value: int
    status: AssetStatus = AssetStatus.AVAILABLE
