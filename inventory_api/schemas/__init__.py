"""Pydantic Schemas - request/response validation for API endpoints.

Design Decisions:
    - Separate from core/product: schemas are API contracts, dataclasses are the domain
"""
