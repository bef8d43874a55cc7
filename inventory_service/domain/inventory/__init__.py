"""
Domain layer for the inventory bounded context.
"""
