"""
Application package initializer.

This package contains the entrypoint for the API and its submodules:
``core`` (settings, logging, error rendering), ``schemas`` (the user
record shape and payload validation), ``services`` (the in‑memory user
store) and ``api`` (the routes).
"""
