"""Satire service API adapter package.

Architectural role:
- Defines the external interaction boundary for HTTP and CLI interfaces.
- Performs transport-level decoding and response shaping.
- Delegates orchestration to the core layer.
"""
