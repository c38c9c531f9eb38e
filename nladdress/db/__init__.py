"""
Database Module
-------------
Handles database connections, ORM models, and database operations.
Uses SQLAlchemy for the record store the batch geocoding job reads from and writes to.
"""
