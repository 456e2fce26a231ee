"""
Configuration settings for Parse Bench.

Uses Pydantic Settings to load environment variables for logging, input
generation and the per-scenario fallback/timing policies. The two scenarios
deliberately keep independent fallback values and timing windows.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

TimingModeName = Literal["parse-only", "full-pipeline"]


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Input generation
    benchmark_seed: int = Field(1, alias="BENCHMARK_SEED")
    benchmark_count: int = Field(50_000, ge=0, alias="BENCHMARK_COUNT")
    benchmark_sweep_points: int = Field(10, ge=1, alias="BENCHMARK_SWEEP_POINTS")
    benchmark_sweep_step: float = Field(0.1, gt=0.0, le=1.0, alias="BENCHMARK_SWEEP_STEP")
    benchmark_bad_prefix: str = Field("X", min_length=1, alias="BENCHMARK_BAD_PREFIX")

    # Scenario policies
    primitive_fallback: int = Field(-1, alias="PRIMITIVE_FALLBACK")
    record_fallback: int = Field(0, alias="RECORD_FALLBACK")
    primitive_timing_mode: TimingModeName = Field("full-pipeline", alias="PRIMITIVE_TIMING_MODE")
    record_timing_mode: TimingModeName = Field("parse-only", alias="RECORD_TIMING_MODE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "TimingModeName", "get_settings"]
