"""Local fallback package.

Scope:
    Template tables and the `FallbackGenerator` used whenever upstream
    generation is unavailable, times out, errors, or returns unusable content.

Non-goals:
    - No network access.
    - No persistence across requests.
"""
