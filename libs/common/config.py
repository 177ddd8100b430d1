"""Configuration management for the sine sequence explorer.

This module centralizes environment-driven configuration for every component
of the explorer (dataset generation, browsing, train/validation splitting and
export). It builds on ``pydantic_settings.BaseSettings`` so configuration can
be provided via environment variables, ``.env`` files, or defaults.

Highlights
- Strongly-typed settings with the defaults of the interactive demo
- One place to discover the environment variables that drive generation
- ``GenerationConfig.from_settings`` turns settings into an immutable value

Usage
- Inject the appropriate config in your entrypoint:
  ``config = ExplorerConfig()``
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class for all components.

    Parameters are read from the process environment using the upper-cased
    field name (``ml_log_level`` -> ``ML_LOG_LEVEL``). Empty values are
    ignored so an unset seed in ``.env`` falls back to its default.

    Notes
    - Add new shared settings here so downstream components inherit them.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    # Environment
    ml_env: str = Field(default="local")

    # Logging
    ml_log_level: str = Field(default="INFO")
    ml_log_format: str = Field(default="json")


class ExplorerConfig(BaseConfig):
    """Configuration for the dataset explorer.

    Generation defaults match the browser demo the explorer grew out of:
    1000 curves of 50 input points, amplitude in ``[0.5, 1.5]``, frequency in
    ``[0.5, 2.0]`` and Gaussian noise with standard deviation 0.05.
    """

    # Generation
    ml_sine_num_samples: int = Field(default=1000)
    ml_sine_seq_len: int = Field(default=50)
    ml_sine_amp_min: float = Field(default=0.5)
    ml_sine_amp_max: float = Field(default=1.5)
    ml_sine_freq_min: float = Field(default=0.5)
    ml_sine_freq_max: float = Field(default=2.0)
    ml_sine_noise_std: float = Field(default=0.05)
    ml_sine_seed: Optional[int] = Field(default=None)

    # Browsing
    ml_sine_show_count: int = Field(default=3)
    ml_sine_max_show_count: int = Field(default=10)

    # Train/validation split
    ml_sine_val_split: float = Field(default=0.1)
    ml_sine_val_subset_count: int = Field(default=10)

    # Export
    ml_sine_output_dir: str = Field(default="data")

