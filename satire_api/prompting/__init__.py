"""Prompting package.

This package contains deterministic instruction-construction helpers used by the
core orchestration layer. It does not perform normalization, model invocation,
or output validation.
"""
