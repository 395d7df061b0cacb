"""
Core utilities shared across the posts API.

This package hosts configuration helpers (env vars) and cross-cutting setup
such as logging. Routers and repositories depend on these primitives instead
of reading the environment themselves.
"""
