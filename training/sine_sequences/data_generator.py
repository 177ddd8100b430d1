"""Synthetic sine sequence datasets for sequence-to-one models.

Every curve is ``amplitude * sin(2*pi*frequency*x + phase)`` plus Gaussian
noise, sampled on ``seq_len + 1`` x-coordinates evenly spaced over
``[-1.5, 1.0]``. The first ``seq_len`` values are the model input and the
last value is the prediction target.

``generate_sine_dataset`` is a pure function of its ``GenerationConfig``: with
a seed, two calls return identical datasets. ``SineDataGenerator`` wraps it
with logging, and ``save_dataset`` writes a dataset to Parquet plus an
``.npz`` of learner-shaped arrays.
"""

import math
import os
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import structlog

from libs.common.logging import log_performance
from .config import GenerationConfig
from .random_source import RandomSource, create_random_source
from .sampling import sample_gaussian, sample_uniform

logger = structlog.get_logger("data_generator")

X_START = -1.5
X_END = 1.0


def _frozen(values) -> np.ndarray:
    array = np.asarray(values, dtype=np.float64)
    array.setflags(write=False)
    return array


def build_x_coordinates(seq_len: int) -> List[float]:
    """Shared x-coordinates: ``seq_len + 1`` points from -1.5 to 1.0 inclusive."""
    return [X_START + (i / seq_len) * (X_END - X_START) for i in range(seq_len + 1)]


@dataclass(frozen=True, eq=False)
class SineDataset:
    """One generated collection of curves.

    Attributes
    - config: The configuration that produced the dataset
    - x_full: Shared x-coordinates, shape ``(seq_len + 1,)``
    - curves: Noisy curve values, shape ``(num_samples, seq_len + 1)``
    - amplitudes, frequencies, phases: Pre-noise draws, shape ``(num_samples,)``

    All arrays are read-only.
    """
    config: GenerationConfig
    x_full: np.ndarray
    curves: np.ndarray
    amplitudes: np.ndarray
    frequencies: np.ndarray
    phases: np.ndarray

    @property
    def num_samples(self) -> int:
        return self.curves.shape[0]

    @property
    def seq_len(self) -> int:
        return self.x_full.shape[0] - 1

    def __len__(self) -> int:
        return self.num_samples

    @property
    def inputs(self) -> np.ndarray:
        """Input prefixes, shape ``(num_samples, seq_len)``."""
        return self.curves[:, :self.seq_len]

    @property
    def targets(self) -> np.ndarray:
        """Targets, shape ``(num_samples,)``."""
        return self.curves[:, self.seq_len]

    def as_learner_arrays(self, dtype=np.float32) -> Tuple[np.ndarray, np.ndarray]:
        """Inputs as ``(num_samples, seq_len, 1)`` and targets as ``(num_samples, 1)``."""
        xs = self.inputs.astype(dtype).reshape(self.num_samples, self.seq_len, 1)
        ys = self.targets.astype(dtype).reshape(self.num_samples, 1)
        return xs, ys

    def to_frame(self) -> pd.DataFrame:
        """Long-format frame with one row per curve point."""
        total_points = self.seq_len + 1
        positions = np.arange(total_points)
        return pd.DataFrame({
            "sample": np.repeat(np.arange(self.num_samples), total_points),
            "position": np.tile(positions, self.num_samples),
            "x": np.tile(self.x_full, self.num_samples),
            "y": self.curves.reshape(-1),
            "is_target": np.tile(positions == self.seq_len, self.num_samples),
        })


def generate_sine_dataset(
    config: GenerationConfig,
    source: Optional[RandomSource] = None
) -> SineDataset:
    """Generate a dataset of noisy sine curves.

    Draws happen in a fixed order per sample (amplitude, frequency, phase,
    then one Gaussian draw per point), which is what makes seeded runs
    reproducible.

    Parameters
    - config: Validated generation parameters
    - source: Random source to consume; defaults to one built from ``config.seed``
    """
    if source is None:
        source = create_random_source(config.seed)

    x_full = build_x_coordinates(config.seq_len)
    curves = []
    amplitudes = []
    frequencies = []
    phases = []

    for _ in range(config.num_samples):
        amp = sample_uniform(source, config.amp_min, config.amp_max)
        freq = sample_uniform(source, config.freq_min, config.freq_max)
        phase = source.next() * math.pi * 2

        curve = []
        for x in x_full:
            value = amp * math.sin(2 * math.pi * freq * x + phase)
            curve.append(value + sample_gaussian(source, 0.0, config.noise_std))

        curves.append(curve)
        amplitudes.append(amp)
        frequencies.append(freq)
        phases.append(phase)

    curve_array = np.asarray(curves, dtype=np.float64).reshape(config.num_samples, config.total_points)
    curve_array.setflags(write=False)

    return SineDataset(
        config=config,
        x_full=_frozen(x_full),
        curves=curve_array,
        amplitudes=_frozen(amplitudes),
        frequencies=_frozen(frequencies),
        phases=_frozen(phases),
    )


class SineDataGenerator:
    """Generate synthetic sine sequence datasets."""

    def __init__(self, config: Optional[GenerationConfig] = None):
        """Keep a default config; ``generate`` may override it per call."""
        self.config = config or GenerationConfig()

    def generate(self, config: Optional[GenerationConfig] = None) -> SineDataset:
        """Generate a dataset from ``config`` or the default config."""
        config = config or self.config

        started = time.perf_counter()
        dataset = generate_sine_dataset(config)
        duration_ms = (time.perf_counter() - started) * 1000

        logger.info("Generated sine dataset",
                    samples=dataset.num_samples,
                    seq_len=dataset.seq_len,
                    seeded=config.seed is not None,
                    noise_std=config.noise_std)
        log_performance("generate_sine_dataset", duration_ms,
                        samples=dataset.num_samples, seq_len=dataset.seq_len)
        return dataset


def save_dataset(dataset: SineDataset, output_path: str = "data/sine_dataset.parquet") -> Dict[str, str]:
    """Write a dataset to disk.

    The long-format frame goes to ``output_path`` (Parquet) and the
    learner-shaped arrays plus ``x_full`` go next to it with an ``.npz``
    suffix.

    Returns
    - Mapping of ``frame``/``arrays`` to the written paths
    """
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    frame_path = output_path
    arrays_path = os.path.splitext(output_path)[0] + ".npz"

    dataset.to_frame().to_parquet(frame_path, index=False)
    xs, ys = dataset.as_learner_arrays()
    np.savez(arrays_path, xs=xs, ys=ys, x_full=dataset.x_full)

    logger.info("Saved dataset", frame=frame_path, arrays=arrays_path,
                samples=dataset.num_samples, seq_len=dataset.seq_len)
    return {"frame": frame_path, "arrays": arrays_path}
