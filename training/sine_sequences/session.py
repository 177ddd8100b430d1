"""Interactive exploration state for one user.

``ExplorerSession`` owns the current dataset and the browsing window, and
prepares train/validation arrays for an external learner. It is created and
passed around by whatever drives the exploration (a UI, a notebook, the
CLI); nothing here is module-level state.
"""

import math
import uuid
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from libs.common.config import ExplorerConfig
from libs.common.logging import ServiceLogger
from .config import GenerationConfig, InvalidConfiguration
from .data_generator import SineDataGenerator, SineDataset
from .random_source import RandomSource, create_random_source

INITIAL_SHOW_COUNT = 3


class DatasetNotGenerated(RuntimeError):
    """The session has no dataset yet."""


@dataclass(frozen=True, eq=False)
class SampleView:
    """Plot-ready data for one curve: input points plus the target point."""
    index: int
    x_input: np.ndarray
    y_input: np.ndarray
    x_target: float
    y_target: float


@dataclass(frozen=True, eq=False)
class TrainValidationSplit:
    """Learner-shaped arrays for training and validation.

    ``val_subset_*`` is a fixed prefix of the validation set kept aside for
    prediction-vs-target comparisons after each epoch.
    """
    train_inputs: np.ndarray
    train_targets: np.ndarray
    val_inputs: np.ndarray
    val_targets: np.ndarray
    val_subset_inputs: np.ndarray
    val_subset_targets: np.ndarray

    @property
    def train_count(self) -> int:
        return self.train_inputs.shape[0]

    @property
    def val_count(self) -> int:
        return self.val_inputs.shape[0]


class ExplorerSession:
    """Current dataset plus browsing position."""

    def __init__(self, config: Optional[ExplorerConfig] = None):
        self.config = config or ExplorerConfig()
        self.session_id = uuid.uuid4().hex[:8]
        self.logger = ServiceLogger("explorer_session", session_id=self.session_id)
        self.generator = SineDataGenerator()
        self.dataset: Optional[SineDataset] = None
        self.start_index = 0
        self.show_count = self.config.ml_sine_show_count

    def _require_dataset(self) -> SineDataset:
        if self.dataset is None:
            raise DatasetNotGenerated("Generate dataset first")
        return self.dataset

    def _clamp_count(self, count: int) -> int:
        return min(self.config.ml_sine_max_show_count, max(1, count))

    def generate(self, config: Optional[GenerationConfig] = None) -> SineDataset:
        """Generate a dataset and make it current, discarding the previous one.

        The browsing window goes back to the first curves.
        Without ``config`` the defaults are built from the session settings.
        """
        if config is None:
            config = GenerationConfig.from_settings(self.config)
        dataset = self.generator.generate(config)
        replaced = self.dataset is not None
        self.dataset = dataset
        self.start_index = 0

        self.logger.info("Dataset ready", replaced=replaced, info=self.describe())
        return dataset

    def describe(self) -> str:
        """Short dataset summary."""
        if self.dataset is None:
            return "No dataset"
        return f"samples={self.dataset.num_samples} seqLen={self.dataset.seq_len}"

    def view(self, start: Optional[int] = None, count: Optional[int] = None) -> List[SampleView]:
        """Curves ``start .. start + count - 1``, wrapping past the last curve.

        ``count`` is clamped to ``[1, max_show_count]``. Both arguments are
        remembered as the current window.
        """
        dataset = self._require_dataset()
        if start is not None:
            self.start_index = max(0, start)
        if count is not None:
            self.show_count = count
        return self._window(dataset, self.start_index, self._clamp_count(self.show_count))

    def _window(self, dataset: SineDataset, start: int, count: int) -> List[SampleView]:
        if dataset.num_samples == 0:
            return []

        seq_len = dataset.seq_len
        views = []
        for i in range(count):
            idx = (start + i) % dataset.num_samples
            curve = dataset.curves[idx]
            views.append(SampleView(
                index=idx,
                x_input=dataset.x_full[:seq_len],
                y_input=curve[:seq_len],
                x_target=float(dataset.x_full[seq_len]),
                y_target=float(curve[seq_len]),
            ))
        return views

    def initial_view(self) -> List[SampleView]:
        """Window shown right after generation: at most three curves."""
        dataset = self._require_dataset()
        self.start_index = 0
        count = min(INITIAL_SHOW_COUNT, self._clamp_count(self.show_count))
        return self._window(dataset, 0, count)

    def next_page(self) -> List[SampleView]:
        return self.view(self.start_index + self._clamp_count(self.show_count))

    def previous_page(self) -> List[SampleView]:
        return self.view(max(0, self.start_index - self._clamp_count(self.show_count)))

    def random_page(self, source: Optional[RandomSource] = None) -> List[SampleView]:
        """Jump to a random window that fits inside the dataset."""
        dataset = self._require_dataset()
        source = source or create_random_source()
        max_start = max(0, dataset.num_samples - self._clamp_count(self.show_count))
        return self.view(int(math.floor(source.next() * (max_start + 1))))

    def split(
        self,
        val_split: Optional[float] = None,
        val_subset_count: Optional[int] = None
    ) -> TrainValidationSplit:
        """Split the current dataset into leading training and trailing validation curves.

        ``val_count = max(1, floor(N * val_split))``; at least one training
        curve must remain.
        """
        dataset = self._require_dataset()
        if val_split is None:
            val_split = self.config.ml_sine_val_split
        if val_subset_count is None:
            val_subset_count = self.config.ml_sine_val_subset_count

        if not 0.0 < val_split < 1.0:
            raise InvalidConfiguration(f"val_split must lie in (0, 1), got {val_split}")
        if val_subset_count < 0:
            raise InvalidConfiguration(f"val_subset_count must be >= 0, got {val_subset_count}")

        total = dataset.num_samples
        val_count = max(1, int(math.floor(total * val_split)))
        train_count = total - val_count
        if train_count < 1:
            raise InvalidConfiguration(
                f"{total} samples leave no training data with val_split={val_split}"
            )

        xs, ys = dataset.as_learner_arrays()
        subset = min(val_subset_count, val_count)
        split = TrainValidationSplit(
            train_inputs=xs[:train_count],
            train_targets=ys[:train_count],
            val_inputs=xs[train_count:],
            val_targets=ys[train_count:],
            val_subset_inputs=xs[train_count:train_count + subset],
            val_subset_targets=ys[train_count:train_count + subset],
        )

        self.logger.info("Dataset split",
                         train_size=split.train_count,
                         val_size=split.val_count,
                         val_subset_size=subset)
        return split
