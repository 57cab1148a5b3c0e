"""API route handlers.

- auth: token refresh endpoint
- root: greeting endpoints on ``/``
"""
