"""Integration test suite for end-to-end flows.

Generates datasets through the CLI and the export helpers and reads the
written files back.
"""
