"""
Service layer abstraction.

Each service encapsulates business logic for one concern: reading the
employee document, normalizing raw records and answering directory
queries against the in-memory catalog.  API handlers only call into
this layer and never touch raw records themselves.
"""
