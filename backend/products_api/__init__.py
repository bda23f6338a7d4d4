"""Products API Package - REST catalog of products.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
