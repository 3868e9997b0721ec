"""LLM access package.

Architectural role:
    Provides provider configuration, the upstream transport, and the
    deadline-bounded generation wrapper used by the orchestration layer.

Module split:
    - `provider_config`: environment-driven provider, model and service settings.
    - `client`: OpenAI-compatible HTTP transport (`TextGenerator` capability).
    - `service`: single-attempt, deadline-bounded generation and output parsing.
"""
