"""
API layer for the Product Catalog.

Exposes HTTP endpoints under /api/v1 (auth, products).
"""
