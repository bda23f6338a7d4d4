"""Infrastructure Layer - database lifecycle and logging.

Invariants:
    - Infrastructure never imports from api/
    - SQLAlchemy exceptions are mapped to DatabaseError before leaving this layer
"""
