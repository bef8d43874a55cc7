"""
Shared module package.

Contains cross-cutting concerns:
- Error handling and mapping
- Security (tokens, bearer auth, headers, rate limiting)
- Logging configuration
"""
