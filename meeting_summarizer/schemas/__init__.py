"""Pydantic Schemas - request/response shapes for the API endpoints.

Invariants:
    - Schemas check types only; blank/missing semantics live in core/enforce_input.py
"""
