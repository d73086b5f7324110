"""
API package containing the HTTP routes.

The top‑level ``router`` in :mod:`.router` mounts the domain routers
defined in ``endpoints`` under the ``/api`` prefix.
"""
