"""
User Service — root package.

This package contains the FastAPI app entry point (main.py), API routes,
the User domain model and repository contract, use cases, MongoDB
infrastructure and the dependency injection container.
"""
