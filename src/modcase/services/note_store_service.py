"""Moderation note store backed by the ``mod_notes`` table."""

from __future__ import annotations

from datetime import datetime
from typing import List

from modcase.database.db_connection import ConnectionManager
from modcase.datatypes.action_datatypes import Note, NoteType
from modcase.datatypes.discord_datatypes import GuildID, UserID
from modcase.repositories.mod_note_repo import ModNoteRepo, ModNoteRow
from modcase.util.logger import get_logger

logger = get_logger("note_store_service")


class NoteStoreService:
    """Adds and lists moderation notes."""

    def __init__(self, connection_manager: ConnectionManager) -> None:
        self._connections = connection_manager

    async def add(
        self,
        reason: str,
        note_type: NoteType,
        target_id: UserID,
        guild_id: GuildID,
        author_id: UserID,
    ) -> None:
        async with self._connections.transaction() as conn:
            await ModNoteRepo.insert(
                conn,
                ModNoteRow(
                    guild_id=guild_id.to_int(),
                    target_id=target_id.to_int(),
                    author_id=author_id.to_int(),
                    note_type=note_type.value,
                    reason=reason,
                ),
            )
        logger.debug("[NOTE STORE] Added %s note for user %s in guild %s", note_type, target_id, guild_id)

    async def list_notes(self, guild_id: GuildID, target_id: UserID) -> List[Note]:
        """Return the notes recorded for a member, oldest first."""
        async with self._connections.read() as conn:
            rows = await ModNoteRepo.list_for_target(conn, guild_id.to_int(), target_id.to_int())
        return [
            Note(
                target_id=UserID(row.target_id),
                guild_id=GuildID(row.guild_id),
                author_id=UserID(row.author_id),
                reason=row.reason,
                note_type=NoteType(row.note_type),
                created_at=datetime.fromisoformat(row.created_at) if row.created_at else None,
            )
            for row in rows
        ]
