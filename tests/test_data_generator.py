"""Tests for sine sequence dataset generation."""

import dataclasses
import math

import numpy as np
import pytest
from training.sine_sequences.config import GenerationConfig, InvalidConfiguration
from training.sine_sequences.data_generator import (
    SineDataGenerator,
    build_x_coordinates,
    generate_sine_dataset,
)
from training.sine_sequences.random_source import Mulberry32Source
from training.sine_sequences.sampling import sample_gaussian, sample_uniform


@pytest.fixture
def config():
    return GenerationConfig(num_samples=30, seq_len=12, seed=42)


@pytest.fixture
def dataset(config):
    return generate_sine_dataset(config)


class TestGenerationConfig:
    """Validation of generation parameters."""

    def test_defaults(self):
        config = GenerationConfig()
        assert config.num_samples == 1000
        assert config.seq_len == 50
        assert config.total_points == 51
        assert config.seed is None

    @pytest.mark.parametrize("overrides", [
        {"num_samples": -1},
        {"seq_len": 0},
        {"seq_len": -5},
        {"amp_min": 2.0, "amp_max": 1.0},
        {"freq_min": 3.0, "freq_max": 2.0},
        {"noise_std": -0.01},
        {"amp_min": float("nan")},
        {"freq_max": float("inf")},
        {"seq_len": 2.5},
        {"num_samples": True},
        {"seed": "abc"},
        {"noise_std": "0.1"},
    ])
    def test_invalid_values_rejected(self, overrides):
        with pytest.raises(InvalidConfiguration):
            GenerationConfig(**overrides)

    def test_invalid_configuration_is_value_error(self):
        with pytest.raises(ValueError):
            GenerationConfig(seq_len=0)

    def test_immutable(self):
        config = GenerationConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.seq_len = 3

    def test_to_dict(self):
        config = GenerationConfig(num_samples=2, seq_len=4, seed=42)
        assert config.to_dict()["seed"] == 42
        assert config.to_dict()["seq_len"] == 4


class TestXCoordinates:

    def test_endpoints_and_spacing(self):
        xs = np.array(build_x_coordinates(20))
        assert len(xs) == 21
        assert xs[0] == -1.5
        assert xs[-1] == 1.0
        assert np.all(np.diff(xs) > 0)
        assert np.allclose(np.diff(xs), 2.5 / 20)

    def test_single_step(self):
        assert build_x_coordinates(1) == [-1.5, 1.0]


class TestGenerateSineDataset:

    def test_deterministic_with_seed(self, config):
        first = generate_sine_dataset(config)
        second = generate_sine_dataset(config)
        assert np.array_equal(first.curves, second.curves)
        assert np.array_equal(first.x_full, second.x_full)
        assert np.array_equal(first.phases, second.phases)

    def test_different_seeds_differ(self, config):
        other = dataclasses.replace(config, seed=43)
        assert not np.array_equal(
            generate_sine_dataset(config).curves,
            generate_sine_dataset(other).curves,
        )

    def test_unseeded_runs_differ(self):
        config = GenerationConfig(num_samples=5, seq_len=10)
        first = generate_sine_dataset(config)
        second = generate_sine_dataset(config)
        assert first.curves.shape == (5, 11)
        assert not np.array_equal(first.curves, second.curves)

    def test_shapes(self, dataset):
        assert dataset.num_samples == 30
        assert len(dataset) == 30
        assert dataset.seq_len == 12
        assert dataset.x_full.shape == (13,)
        assert dataset.curves.shape == (30, 13)
        assert dataset.inputs.shape == (30, 12)
        assert dataset.targets.shape == (30,)

        xs, ys = dataset.as_learner_arrays()
        assert xs.shape == (30, 12, 1)
        assert ys.shape == (30, 1)
        assert xs.dtype == np.float32
        assert np.allclose(xs[:, :, 0], dataset.inputs)
        assert np.allclose(ys[:, 0], dataset.targets)

    def test_inputs_and_targets_partition_curves(self, dataset):
        assert np.array_equal(dataset.inputs, dataset.curves[:, :-1])
        assert np.array_equal(dataset.targets, dataset.curves[:, -1])

    def test_drawn_parameters_in_range(self):
        config = GenerationConfig(num_samples=200, seq_len=5, amp_min=0.2, amp_max=0.7,
                                  freq_min=1.5, freq_max=4.0, seed=3)
        dataset = generate_sine_dataset(config)
        assert np.all((dataset.amplitudes >= 0.2) & (dataset.amplitudes <= 0.7))
        assert np.all((dataset.frequencies >= 1.5) & (dataset.frequencies <= 4.0))
        assert np.all((dataset.phases >= 0.0) & (dataset.phases < 2 * math.pi))

    def test_noiseless_curves_follow_drawn_parameters(self):
        config = GenerationConfig(num_samples=25, seq_len=16, noise_std=0.0, seed=11)
        dataset = generate_sine_dataset(config)

        expected = dataset.amplitudes[:, None] * np.sin(
            2 * np.pi * dataset.frequencies[:, None] * dataset.x_full[None, :]
            + dataset.phases[:, None]
        )
        assert np.allclose(dataset.curves, expected, atol=1e-12)

    def test_noise_is_added(self):
        noisy = generate_sine_dataset(GenerationConfig(num_samples=50, seq_len=20, noise_std=0.3, seed=5))
        clean = noisy.amplitudes[:, None] * np.sin(
            2 * np.pi * noisy.frequencies[:, None] * noisy.x_full[None, :] + noisy.phases[:, None]
        )
        residual = noisy.curves - clean
        assert abs(residual.std() - 0.3) < 0.03

    def test_degenerate_ranges_keep_draw_sequence(self):
        pinned = GenerationConfig(num_samples=4, seq_len=6, amp_min=1.0, amp_max=1.0, seed=8)
        ranged = GenerationConfig(num_samples=4, seq_len=6, amp_min=0.5, amp_max=1.5, seed=8)

        pinned_dataset = generate_sine_dataset(pinned)
        assert np.all(pinned_dataset.amplitudes == 1.0)
        assert np.array_equal(pinned_dataset.phases, generate_sine_dataset(ranged).phases)

    def test_empty_dataset(self):
        dataset = generate_sine_dataset(GenerationConfig(num_samples=0, seq_len=7, seed=1))
        assert dataset.num_samples == 0
        assert dataset.curves.shape == (0, 8)
        assert dataset.inputs.shape == (0, 7)
        assert dataset.targets.shape == (0,)
        assert dataset.x_full.shape == (8,)

        xs, ys = dataset.as_learner_arrays()
        assert xs.shape == (0, 7, 1)
        assert ys.shape == (0, 1)

    def test_single_sample_single_step(self):
        dataset = generate_sine_dataset(GenerationConfig(num_samples=1, seq_len=1, seed=1))
        assert dataset.curves.shape == (1, 2)
        assert dataset.x_full.tolist() == [-1.5, 1.0]

    def test_explicit_source_is_consumed(self):
        config = GenerationConfig(num_samples=3, seq_len=4, seed=99)
        source = Mulberry32Source(99)
        from_source = generate_sine_dataset(config, source)
        assert np.array_equal(from_source.curves, generate_sine_dataset(config).curves)
        assert source.state != 99

    def test_arrays_are_read_only(self, dataset):
        with pytest.raises(ValueError):
            dataset.curves[0, 0] = 1.0
        with pytest.raises(ValueError):
            dataset.x_full[0] = 0.0
        with pytest.raises(dataclasses.FrozenInstanceError):
            dataset.curves = None

    def test_to_frame(self, dataset):
        frame = dataset.to_frame()
        assert len(frame) == 30 * 13
        assert list(frame.columns) == ["sample", "position", "x", "y", "is_target"]
        assert frame["is_target"].sum() == 30

        targets = frame[frame["is_target"]].sort_values("sample")
        assert np.allclose(targets["y"].to_numpy(), dataset.targets)
        assert np.all(targets["x"].to_numpy() == 1.0)


class TestSeededScenario:
    """Two pinned-amplitude, pinned-frequency noiseless curves from seed 42."""

    @pytest.fixture
    def scenario(self):
        config = GenerationConfig(num_samples=2, seq_len=4, amp_min=1, amp_max=1,
                                  freq_min=1, freq_max=1, noise_std=0, seed=42)
        return generate_sine_dataset(config)

    def test_x_coordinates(self, scenario):
        assert scenario.x_full.tolist() == [-1.5, -0.875, -0.25, 0.375, 1.0]

    def test_curves_replay_from_source(self, scenario):
        source = Mulberry32Source(42)
        for s in range(2):
            sample_uniform(source, 1, 1)
            sample_uniform(source, 1, 1)
            phase = source.next() * math.pi * 2
            for _ in range(5):
                sample_gaussian(source, 0, 0)

            assert scenario.phases[s] == phase
            assert len(scenario.curves[s]) == 5
            for i, x in enumerate(scenario.x_full):
                assert scenario.curves[s][i] == pytest.approx(math.sin(2 * math.pi * x + phase), abs=1e-12)

    def test_phases_differ_between_samples(self, scenario):
        assert scenario.phases[0] != scenario.phases[1]
        assert not np.array_equal(scenario.curves[0], scenario.curves[1])


def test_seeded_noisy_dataset_reference_values():
    dataset = generate_sine_dataset(GenerationConfig(num_samples=3, seq_len=6, seed=42))
    assert dataset.curves.shape == (3, 7)
    assert dataset.curves[0][0] == pytest.approx(0.6324691674481172, abs=1e-12)
    assert dataset.curves[-1][-1] == pytest.approx(0.8664328381849822, abs=1e-12)


def test_generator_uses_default_config():
    generator = SineDataGenerator(GenerationConfig(num_samples=3, seq_len=4, seed=2))
    dataset = generator.generate()
    assert dataset.curves.shape == (3, 5)

    override = generator.generate(GenerationConfig(num_samples=1, seq_len=2, seed=2))
    assert override.curves.shape == (1, 3)
