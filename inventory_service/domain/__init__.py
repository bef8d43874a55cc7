"""
Domain layer package.

Contains entities, row shapes, port interfaces and storage errors.
No framework imports, no IO, no side effects.
"""
