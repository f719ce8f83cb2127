"""Service Layer — orchestrates validation and persistence.

Invariants:
    - Services receive their repository explicitly (constructor injection)
    - Routes and the CLI call services, never repositories directly
"""
