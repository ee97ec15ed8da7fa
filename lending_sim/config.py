"""Configuration management for lending-sim."""

from dataclasses import dataclass

from lending_sim.exceptions import ConfigurationError


@dataclass
class ScenarioConfig:
    """Configuration for scenario execution."""

    name: str
    num_lenders: int = 3
    num_borrowers: int = 10
    num_loans: int = 8
    max_payments: int = 6
    inspections_per_loan: int = 2
    early_close_rate: float = 0.25
    inactive_lender_rate: float = 0.0
    blocks_per_step: int = 10


@dataclass
class SimulationConfig:
    """Main configuration for lending-sim."""

    contract_owner: str | None = None
    initial_block_height: int = 1
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None
    locale: str = "en_US"
    scenario: ScenarioConfig | None = None

    @classmethod
    def from_env(cls) -> "SimulationConfig":
        """Create config from environment variables."""
        import os

        return cls(
            contract_owner=os.getenv("LENDING_SIM_CONTRACT_OWNER") or None,
            initial_block_height=_int_env("LENDING_SIM_BLOCK_HEIGHT", "1"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            seed=_int_env("SEED", None),
            locale=os.getenv("FAKER_LOCALE", "en_US"),
        )


def _int_env(name: str, default: str | None) -> int | None:
    """Read an integer environment variable."""
    import os

    raw = os.getenv(name, default)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
