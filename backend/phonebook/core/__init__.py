"""Core Layer — pure domain rules for Person records.

Invariants:
    - No IO: nothing in core/ talks to MongoDB, HTTP or the filesystem
    - Repository access only through the Protocols in repository_protocols.py
"""
