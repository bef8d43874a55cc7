"""
Application layer for the inventory bounded context.

One service per resource, each behind an ABC in ``contracts``.
"""
