"""Generation parameters for synthetic sine sequence datasets."""

import math
from dataclasses import asdict, dataclass
from numbers import Integral, Real
from typing import Any, Dict, Optional

from libs.common.config import ExplorerConfig


class InvalidConfiguration(ValueError):
    """Generation or split parameters are inconsistent."""


def _require_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")


def _require_finite(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise InvalidConfiguration(f"{name} must be a finite number, got {value!r}")


@dataclass(frozen=True)
class GenerationConfig:
    """Immutable description of one dataset generation.

    Parameters
    - num_samples: Number of curves; ``0`` produces an empty dataset
    - seq_len: Input prefix length; every curve holds ``seq_len + 1`` points
    - amp_min, amp_max: Uniform amplitude range
    - freq_min, freq_max: Uniform frequency range
    - noise_std: Standard deviation of the additive Gaussian noise
    - seed: Seed of the random source; ``None`` gives a non-reproducible run
    """
    num_samples: int = 1000
    seq_len: int = 50
    amp_min: float = 0.5
    amp_max: float = 1.5
    freq_min: float = 0.5
    freq_max: float = 2.0
    noise_std: float = 0.05
    seed: Optional[int] = None

    def __post_init__(self):
        _require_int("num_samples", self.num_samples)
        _require_int("seq_len", self.seq_len)
        if self.seed is not None:
            _require_int("seed", self.seed)
        for name in ("amp_min", "amp_max", "freq_min", "freq_max", "noise_std"):
            _require_finite(name, getattr(self, name))

        if self.num_samples < 0:
            raise InvalidConfiguration(f"num_samples must be >= 0, got {self.num_samples}")
        if self.seq_len < 1:
            raise InvalidConfiguration(f"seq_len must be >= 1, got {self.seq_len}")
        if self.amp_min > self.amp_max:
            raise InvalidConfiguration(
                f"amp_min ({self.amp_min}) must not exceed amp_max ({self.amp_max})"
            )
        if self.freq_min > self.freq_max:
            raise InvalidConfiguration(
                f"freq_min ({self.freq_min}) must not exceed freq_max ({self.freq_max})"
            )
        if self.noise_std < 0:
            raise InvalidConfiguration(f"noise_std must be >= 0, got {self.noise_std}")

    @property
    def total_points(self) -> int:
        """Points per curve: the input prefix plus the target."""
        return self.seq_len + 1

    @classmethod
    def from_settings(cls, settings: ExplorerConfig, **overrides: Any) -> "GenerationConfig":
        """Build a config from environment-driven settings.

        ``overrides`` replace individual fields (``num_samples``, ``seed``, ...).
        Validation applies to the merged values.
        """
        values = {
            "num_samples": settings.ml_sine_num_samples,
            "seq_len": settings.ml_sine_seq_len,
            "amp_min": settings.ml_sine_amp_min,
            "amp_max": settings.ml_sine_amp_max,
            "freq_min": settings.ml_sine_freq_min,
            "freq_max": settings.ml_sine_freq_max,
            "noise_std": settings.ml_sine_noise_std,
            "seed": settings.ml_sine_seed,
        }
        values.update(overrides)
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)
