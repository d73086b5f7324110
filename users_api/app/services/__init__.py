"""
Service layer abstraction.

The user store encapsulates all access to user records so that the
in‑memory list could be swapped for another backend without changing
API handlers.
"""
