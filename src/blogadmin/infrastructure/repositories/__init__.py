"""SQLAlchemy-backed repository adapters."""
