"""Synthetic sine sequence datasets and their exploration session.

Contains:
- ``random_source.py``: seeded (mulberry32) and ambient uniform sources.
- ``sampling.py``: uniform and Box-Muller Gaussian samplers.
- ``config.py``: the immutable ``GenerationConfig`` and ``InvalidConfiguration``.
- ``data_generator.py``: curve generation, ``SineDataset`` and export.
- ``session.py``: browsing and train/validation splitting for one user.
- ``generate.py``: command-line entrypoint.

Guidance:
- Pass an explicit seed to get bit-identical datasets across runs.
"""

from .config import GenerationConfig, InvalidConfiguration
from .data_generator import SineDataGenerator, SineDataset, generate_sine_dataset, save_dataset
from .random_source import AmbientRandomSource, Mulberry32Source, RandomSource, create_random_source
from .sampling import sample_gaussian, sample_uniform
from .session import DatasetNotGenerated, ExplorerSession, SampleView, TrainValidationSplit

__all__ = [
    "GenerationConfig",
    "InvalidConfiguration",
    "SineDataGenerator",
    "SineDataset",
    "generate_sine_dataset",
    "save_dataset",
    "AmbientRandomSource",
    "Mulberry32Source",
    "RandomSource",
    "create_random_source",
    "sample_gaussian",
    "sample_uniform",
    "DatasetNotGenerated",
    "ExplorerSession",
    "SampleView",
    "TrainValidationSplit",
]
