"""
Reactive primitives.

Observable cells, read-only views, derived cells and lifetime scopes.
"""
