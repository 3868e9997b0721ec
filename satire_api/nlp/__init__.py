"""NLP utilities for request normalization and lightweight classification.

Module scope:
- Language tag resolution and per-language data (`language_registry`).
- Raw field normalization into a canonical request (`input_normalizer`).
- Keyword topic classification for fallback labels (`topic_classifier`).

Determinism profile:
- Fully deterministic, rule-based logic. No model calls.
"""
