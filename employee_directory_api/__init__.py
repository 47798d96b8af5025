"""
Top-level package for the Employee Directory API.

All functionality lives in submodules under ``app``: the application
factory in ``app.main``, the catalog and record source in
``app.services``, and the HTTP routes in ``app.api``.
"""

__all__ = []
