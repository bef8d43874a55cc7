"""
Application layer package.

Contains the services that validate input, call repository ports and
convert rows into entities. Depends on domain ports, never on
infrastructure.
"""
