"""
Product Catalog API - root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic, MongoDB infrastructure and a small async client for the API.
"""
