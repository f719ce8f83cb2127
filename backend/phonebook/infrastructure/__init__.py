"""Infrastructure Layer — MongoDB access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from the api/ layer
    - Every driver failure is mapped to a PhonebookError before leaving this package
"""
