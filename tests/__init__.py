"""Tests for the sine sequence explorer.

Unit tests cover configuration, random sources, generation and the
exploration session; ``tests/integration`` exercises export and the CLI.
"""
