"""Satire generation service.

Turns a short phrase plus language/length/style hints into a one-line
satirical statement and a category label, using a deadline-bounded upstream
model call with a local fallback.
"""
