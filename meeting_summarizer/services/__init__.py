"""Service Layer - orchestrates validation, external calls, and error conversion.

Invariants:
    - Services own the check order: fields, then credentials, then the external call
    - Infrastructure errors never escape a service; they become generic delivery errors
"""
