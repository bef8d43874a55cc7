"""
Centralized error handling.
"""
