"""
Core utilities shared across the Personas API.

This package hosts configuration helpers (env vars), logging setup and
cross-cutting HTTP concerns such as the CORS middleware.
"""
