"""
Database schema initialization.

Handles creation of tables, indexes, and schema version tracking.
"""

import aiosqlite
from modcase.util.logger import get_logger

logger = get_logger("database_schema")

SCHEMA_VERSION = 1


class SchemaManager:
    """Creates the audit case and moderation note tables."""

    @staticmethod
    async def initialize_schema(db: aiosqlite.Connection) -> None:
        """
        Create all database tables and indexes if they do not exist yet.

        Args:
            db: Open database connection
        """
        await SchemaManager._create_tables(db)
        await SchemaManager._create_indexes(db)
        await SchemaManager._update_schema_version(db)
        await db.commit()
        logger.info("[SCHEMA] Database schema initialized")

    @staticmethod
    async def _create_tables(db: aiosqlite.Connection) -> None:
        """Create all required database tables."""
        # Case numbers are allocated per guild, starting at 1
        await db.execute("""
            CREATE TABLE IF NOT EXISTS audit_cases (
                guild_id INTEGER NOT NULL,
                case_number INTEGER NOT NULL,
                target_id INTEGER NOT NULL,
                moderator_id INTEGER NOT NULL,
                action TEXT NOT NULL,
                reason TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                PRIMARY KEY (guild_id, case_number)
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS mod_notes (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                guild_id INTEGER NOT NULL,
                target_id INTEGER NOT NULL,
                author_id INTEGER NOT NULL,
                note_type TEXT NOT NULL,
                reason TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS schema_version (
                version INTEGER PRIMARY KEY,
                applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

    @staticmethod
    async def _create_indexes(db: aiosqlite.Connection) -> None:
        """Create lookup indexes."""
        await db.execute("CREATE INDEX IF NOT EXISTS idx_audit_cases_target ON audit_cases(guild_id, target_id)")
        await db.execute("CREATE INDEX IF NOT EXISTS idx_mod_notes_target ON mod_notes(guild_id, target_id)")

    @staticmethod
    async def _update_schema_version(db: aiosqlite.Connection) -> None:
        """Update schema version tracking."""
        await db.execute("INSERT OR IGNORE INTO schema_version (version) VALUES (?)", (SCHEMA_VERSION,))
