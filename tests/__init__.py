"""
Test suite for PyNoiseGraph package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for the noise primitive, modules, graph descriptions, rasters and CLI
- Integration tests for complete sampling workflows

Run with: pytest
"""
