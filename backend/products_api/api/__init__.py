"""API Layer - FastAPI routes, request rules, error shaping and handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON: {"data": ...}, {"errors": [...]} or {"error": ...}
"""
