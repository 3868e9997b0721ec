"""Core orchestration package.

Architectural role:
    Exposes the request-orchestration layer that sits between API/CLI entrypoints
    and lower-level subsystems (normalization, prompting, LLM adapters, fallback).

Composition:
    - `engine`: Main control-flow implementation for request processing.
    - `types`: Request-scoped data contracts.
    - `errors`: Error taxonomy.

Determinism and side effects:
    Package import itself is deterministic and side-effect free.
"""
