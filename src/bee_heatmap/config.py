"""
Application settings.

Values come from ``BEE_HEATMAP_*`` environment variables or a ``.env`` file.
Settings are read once at startup and shared, immutable, by every request.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bee_heatmap.errors import InvalidResolution
from bee_heatmap.schemas import FilterPolicy, TemperatureMode


class Settings(BaseSettings):
    """Process-wide configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BEE_HEATMAP_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    app_name: str = "bee-heatmap"
    app_env: str = "development"
    debug: bool = False

    # Default center for the CLI (Madrid area)
    lat: float = Field(default=40.0, ge=-90, le=90)
    lon: float = Field(default=-3.0, ge=-180, le=180)
    api_port: int = 3000

    # Grid
    buffer_deg: float = Field(default=0.5, gt=0)
    grid_resolution: int = 15

    # Temperatures. Sequential mode takes roughly resolution**2 * delay.
    temperature_mode: TemperatureMode = TemperatureMode.SEQUENTIAL
    request_delay_ms: int = Field(default=1500, ge=0)
    fallback_temperature_c: float = 25.0

    # Filtering and fusion
    filter_policy: FilterPolicy = FilterPolicy.EXTENDED
    min_weight: float = Field(default=0.05, ge=0, le=1)
    fuse_observations: bool = True
    observation_tolerance_deg: float = Field(default=0.001, gt=0)

    # Upstream timeouts (seconds)
    vegetation_timeout_s: float = Field(default=25.0, gt=0)
    temperature_timeout_s: float = Field(default=15.0, gt=0)
    observation_timeout_s: float = Field(default=20.0, gt=0)

    # GLOBE query. The upstream cannot filter by bbox, only by country.
    globe_country_code: str = "USA"
    globe_protocol: str = "vegatation_covers"
    globe_start_date: str = "2023-05-05"
    globe_end_date: str = "2025-05-05"

    @field_validator("grid_resolution")
    @classmethod
    def _check_resolution(cls, value: int) -> int:
        if value < 2:
            raise InvalidResolution(f"grid_resolution must be >= 2, got {value}")
        return value

    @property
    def request_delay_s(self) -> float:
        return self.request_delay_ms / 1000

    @property
    def grid_size(self) -> int:
        """Total number of grid points per request."""
        return self.grid_resolution**2


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
