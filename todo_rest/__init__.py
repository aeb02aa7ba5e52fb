"""REST CRUD service for a single ``todos`` table."""

__version__ = "0.1.0"
