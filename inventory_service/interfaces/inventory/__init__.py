"""
HTTP routes for persons, items and invoices.
"""
