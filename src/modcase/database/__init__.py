"""
Database package for Modcase.

Public API:
    - Database: Coordinator owning the SQLite connection and schema lifecycle
    - ConnectionManager: Single long-lived aiosqlite connection with serialised writes
    - SchemaManager: Table and index creation
"""
