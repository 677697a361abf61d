"""Database Declarative Base - shared by ORM models and the session manager."""
