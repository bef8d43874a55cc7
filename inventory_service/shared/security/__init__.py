"""
Security concerns: token codec, bearer auth, secure headers, rate limiting.
"""
