"""
High-level use cases for the posts API.

Routers (FastAPI endpoints) call these services instead of opening sessions or
touching repositories directly.
"""
