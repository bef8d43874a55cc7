"""
SQLAlchemy adapters for the inventory bounded context.
"""
