"""
Domain entities held in memory by the service layer.

Entities are plain dataclasses, kept apart from the Pydantic schemas
so that the API representation can change without touching the
catalog.
"""
