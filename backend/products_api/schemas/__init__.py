"""Pydantic Schemas - response envelopes and API documentation models.

Invariants:
    - Schemas describe the API contract; models/ describe persistence
"""
