"""
Application package initializer.

The package is organised into small pieces: ``core`` holds settings and
logging, ``models`` the in-memory employee entity, ``schemas`` the
Pydantic payloads, ``services`` the catalog, and ``api`` the versioned
routers.  ``create_app`` builds a ready-to-serve application with its
catalog already loaded.
"""

from .main import create_app  # noqa: F401
