"""Stub HTTP Service Application Package.

- routers: API route handlers
- utils: request body parsing and logging
"""

__version__ = "0.1.0"
