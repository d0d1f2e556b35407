"""
API layer for the User Service.

Exposes HTTP endpoints under the configurable API prefix (default /api/v1).
"""
