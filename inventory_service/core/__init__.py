"""
Core package: settings and the application context.
"""
