"""
Persistence adapters.

Repositories encapsulate how posts are stored and retrieved. Services depend
on them instead of opening database sessions directly.
"""
