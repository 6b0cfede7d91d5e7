"""
Persistent storage for moderation notes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import aiosqlite


@dataclass
class ModNoteRow:
    """A single row from the ``mod_notes`` table."""
    guild_id: int
    target_id: int
    author_id: int
    note_type: str
    reason: str
    created_at: Optional[str] = None


class ModNoteRepo:
    """Low-level CRUD for the ``mod_notes`` table."""

    @staticmethod
    async def insert(conn: aiosqlite.Connection, row: ModNoteRow) -> None:
        await conn.execute(
            """
            INSERT INTO mod_notes (guild_id, target_id, author_id, note_type, reason)
            VALUES (?, ?, ?, ?, ?)
            """,
            (row.guild_id, row.target_id, row.author_id, row.note_type, row.reason),
        )

    @staticmethod
    async def list_for_target(conn: aiosqlite.Connection, guild_id: int, target_id: int) -> List[ModNoteRow]:
        """Return the notes of a member, oldest first."""
        cursor = await conn.execute(
            "SELECT guild_id, target_id, author_id, note_type, reason, created_at "
            "FROM mod_notes WHERE guild_id = ? AND target_id = ? ORDER BY id ASC",
            (guild_id, target_id),
        )
        rows = await cursor.fetchall()
        return [ModNoteRow(*row) for row in rows]
