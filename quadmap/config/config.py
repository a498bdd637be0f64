"""Configuration management."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from ``QUADMAP_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="QUADMAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    # Generation defaults
    default_ring_count: int = Field(default=10, ge=1, description="Default hex ring count")
    default_lattice_spacing: float = Field(default=40.0, gt=0, allow_inf_nan=False, description="Default lattice spacing")
    default_random_seed: int = Field(default=0, description="Default PRNG seed")
    default_relaxation_iterations: int = Field(default=500, ge=0, description="Default relaxation passes")
    default_relaxation_strength: float = Field(default=0.08, gt=0, le=1, description="Default relaxation strength")

    # Limits (pair merging is quadratic in the triangle count)
    max_ring_count: int = Field(default=15, ge=1, description="Largest ring count the API accepts")
    max_relaxation_iterations: int = Field(default=5000, ge=0, description="Most relaxation passes the API accepts")

    def default_params(self) -> dict:
        """Generation defaults keyed by parameter name."""
        return {
            "ring_count": self.default_ring_count,
            "lattice_spacing": self.default_lattice_spacing,
            "random_seed": self.default_random_seed,
            "relaxation_iterations": self.default_relaxation_iterations,
            "relaxation_strength": self.default_relaxation_strength,
        }


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
