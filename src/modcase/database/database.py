"""
Database initialization and lifecycle for SQLite.

The Database class owns the connection manager and creates the schema. The audit log
and note store services are built on top of its ``connection_manager``.
"""

from __future__ import annotations

from pathlib import Path

from modcase.database.db_connection import ConnectionManager
from modcase.database.db_schema import SchemaManager
from modcase.util.logger import get_logger

logger = get_logger("database")


class Database:
    """
    Central database coordinator.

    Lifecycle:
        1. Call initialize() at program startup
        2. Hand ``connection_manager`` to the services that need it
        3. Call shutdown() at program end
    """

    def __init__(self, db_path: Path):
        """
        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = db_path
        self.connection_manager = ConnectionManager()
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> bool:
        """
        Open the database and create the schema.

        Returns:
            True if initialization succeeded, False otherwise
        """
        if self._initialized:
            logger.debug("[DATABASE] Already initialized, skipping")
            return True

        try:
            await self.connection_manager.open(self.db_path)
            async with self.connection_manager.read() as db:
                await SchemaManager.initialize_schema(db)
        except Exception as e:
            logger.error("[DATABASE] Database initialization failed: %s", e)
            await self.connection_manager.close()
            return False

        self._initialized = True
        logger.info("[DATABASE] Database initialized at %s", self.db_path)
        return True

    async def shutdown(self) -> None:
        """Close the connection. Safe to call when not initialized."""
        if not self._initialized:
            return

        await self.connection_manager.close()
        self._initialized = False
        logger.info("[DATABASE] Database shutdown complete")
