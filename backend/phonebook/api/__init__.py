"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All JSON endpoints return a Person, a list of Persons, or {"error": ...}

Design Decisions:
    - Thin routes delegate to PhonebookService
"""
