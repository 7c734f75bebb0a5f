"""Configuration management for sepa-writer."""

from dataclasses import dataclass

from sepa_writer.exceptions import ConfigurationError
from sepa_writer.models.enums import ChargeBearer, SepaSchema


@dataclass
class SepaConfig:
    """Document defaults and runtime settings."""

    currency: str = "EUR"
    schema: SepaSchema = SepaSchema.PAIN_001_001_03
    charge_bearer: ChargeBearer = ChargeBearer.DEBT
    international: bool = False
    pretty_print: bool = False
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "SepaConfig":
        """Create config from environment variables."""
        import os

        schema_str = os.getenv("SEPA_SCHEMA", SepaSchema.PAIN_001_001_03.value)
        try:
            schema = SepaSchema(schema_str)
        except ValueError as e:
            raise ConfigurationError(f"Unknown SEPA_SCHEMA: {schema_str}") from e

        charge_bearer_str = os.getenv("SEPA_CHARGE_BEARER", ChargeBearer.DEBT.value).upper()
        try:
            charge_bearer = ChargeBearer(charge_bearer_str)
        except ValueError as e:
            raise ConfigurationError(f"Unknown SEPA_CHARGE_BEARER: {charge_bearer_str}") from e

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as e:
            raise ConfigurationError(f"SEED must be an integer, got {seed_str}") from e

        return cls(
            currency=os.getenv("SEPA_CURRENCY", "EUR").upper(),
            schema=schema,
            charge_bearer=charge_bearer,
            international=os.getenv("SEPA_INTERNATIONAL", "false").lower() == "true",
            pretty_print=os.getenv("SEPA_PRETTY_PRINT", "false").lower() == "true",
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
