"""Training data package.

Synthetic sequence datasets for model experimentation live here; the models
that consume them are external.

Highlights:
- Sine sequence generation lives in `training.sine_sequences`.

Typical usage:
- from training.sine_sequences import GenerationConfig, generate_sine_dataset
"""
