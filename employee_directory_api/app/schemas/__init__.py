"""
Pydantic schema definitions for API payloads.

Schemas describe the raw records read from the employee document and
the response bodies returned by the API.  They are separated from the
domain entities to decouple API representation from the catalog.
"""
