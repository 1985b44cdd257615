"""
Merkle Prover - Configuration
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    # Application
    APP_NAME: str = "Merkle Prover"
    VERSION: str = "1.0.0"
    ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Proof job
    SAMPLE_RECORDS: list[str] = Field(default_factory=lambda: ["item1", "item2", "item3"])
    PROOF_TARGET: str = "item1"
    PROOF_OUTPUT_PATH: str = "merkle_proof.txt"

    # Metrics
    METRICS_ENABLED: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
