"""Command-line entrypoint for generating sine sequence datasets.

Run: python -m training.sine_sequences.generate --num-samples 200 --seed 42
"""

import argparse
import os
import sys
from typing import List, Optional

import structlog

from libs.common.config import ExplorerConfig
from libs.common.logging import LOG_FORMATS, configure_logging
from training.sine_sequences.config import GenerationConfig, InvalidConfiguration
from training.sine_sequences.data_generator import save_dataset
from training.sine_sequences.session import ExplorerSession

logger = structlog.get_logger("generate")

EXIT_INVALID_CONFIGURATION = 2


def build_parser(config: ExplorerConfig) -> argparse.ArgumentParser:
    """Argument parser whose defaults come from ``config``."""
    parser = argparse.ArgumentParser(description="Generate a synthetic sine sequence dataset")
    parser.add_argument("--num-samples", type=int, default=config.ml_sine_num_samples)
    parser.add_argument("--seq-len", type=int, default=config.ml_sine_seq_len)
    parser.add_argument("--amp-min", type=float, default=config.ml_sine_amp_min)
    parser.add_argument("--amp-max", type=float, default=config.ml_sine_amp_max)
    parser.add_argument("--freq-min", type=float, default=config.ml_sine_freq_min)
    parser.add_argument("--freq-max", type=float, default=config.ml_sine_freq_max)
    parser.add_argument("--noise-std", type=float, default=config.ml_sine_noise_std)
    parser.add_argument("--seed", type=int, default=config.ml_sine_seed,
                        help="Omit for a non-reproducible dataset")
    parser.add_argument("--val-split", type=float, default=config.ml_sine_val_split)
    parser.add_argument("--output", default=os.path.join(config.ml_sine_output_dir, "sine_dataset.parquet"),
                        help="Parquet path; learner arrays are written next to it as .npz")
    parser.add_argument("--no-save", action="store_true", help="Generate and summarize only")
    parser.add_argument("--log-level", default=config.ml_log_level)
    parser.add_argument("--log-format", default=config.ml_log_format, choices=LOG_FORMATS)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Generate, summarize and optionally save a dataset."""
    config = ExplorerConfig()
    args = build_parser(config).parse_args(argv)

    configure_logging("generate", args.log_level, args.log_format)

    try:
        generation_config = GenerationConfig.from_settings(
            config,
            num_samples=args.num_samples,
            seq_len=args.seq_len,
            amp_min=args.amp_min,
            amp_max=args.amp_max,
            freq_min=args.freq_min,
            freq_max=args.freq_max,
            noise_std=args.noise_std,
            seed=args.seed,
        )
    except InvalidConfiguration as e:
        logger.error("Invalid generation configuration", error=str(e))
        return EXIT_INVALID_CONFIGURATION

    session = ExplorerSession(config)
    dataset = session.generate(generation_config)
    logger.info("Dataset summary", info=session.describe(), config=generation_config.to_dict())

    if dataset.num_samples > 1:
        try:
            split = session.split(args.val_split)
        except InvalidConfiguration as e:
            logger.warning("Skipping train/validation summary", error=str(e))
        else:
            logger.info("Train/validation sizes",
                        train_size=split.train_count,
                        val_size=split.val_count)

    if not args.no_save:
        paths = save_dataset(dataset, args.output)
        logger.info("Generation completed", **paths)
    else:
        logger.info("Generation completed")

    return 0


if __name__ == "__main__":
    sys.exit(main())
