"""
Version 1 of the API.

This subpackage bundles the read-only directory endpoints.  Breaking
changes should go into a new version subpackage (e.g. ``v2``).
"""
