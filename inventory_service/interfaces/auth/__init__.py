"""
HTTP route for bearer token issuance.
"""
