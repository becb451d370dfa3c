"""
Shared utilities for the external integrations.

- http.py - ``requests`` session factory with retry and default timeout
"""
