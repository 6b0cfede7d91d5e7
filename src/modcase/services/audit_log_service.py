"""Audit log backed by the ``audit_cases`` table."""

from __future__ import annotations

from typing import Optional

from modcase.database.db_connection import ConnectionManager
from modcase.datatypes.action_datatypes import ActionType, AuditRecord
from modcase.datatypes.discord_datatypes import GuildID, UserID
from modcase.repositories.audit_case_repo import AuditCaseRepo, AuditCaseRow
from modcase.util.logger import get_logger

logger = get_logger("audit_log_service")


class AuditLogService:
    """Appends audit records, allocating a case number monotonic per guild."""

    def __init__(self, connection_manager: ConnectionManager) -> None:
        self._connections = connection_manager

    async def append(self, record: AuditRecord) -> int:
        """Store ``record`` under the next case number of its guild.

        The case number is allocated and inserted inside one write transaction, so
        concurrent appends to the same guild never share a number. The allocated number
        is also written back to ``record.case_number``.

        Returns:
            The allocated case number.
        """
        guild_id = record.guild_id.to_int()
        async with self._connections.transaction() as conn:
            case_number = await AuditCaseRepo.next_case_number(conn, guild_id)
            await AuditCaseRepo.insert(
                conn,
                AuditCaseRow(
                    guild_id=guild_id,
                    case_number=case_number,
                    target_id=record.target_id.to_int(),
                    moderator_id=record.moderator_id.to_int(),
                    action=record.action.value,
                    reason=record.reason,
                ),
            )

        record.case_number = case_number
        logger.debug("[AUDIT LOG] Appended case %d in guild %s", case_number, guild_id)
        return case_number

    async def current_case_number(self, guild_id: GuildID) -> int:
        """Return the latest case number of the guild (0 if none were recorded)."""
        async with self._connections.read() as conn:
            return await AuditCaseRepo.latest_case_number(conn, guild_id.to_int())

    async def get_case(self, guild_id: GuildID, case_number: int) -> Optional[AuditRecord]:
        async with self._connections.read() as conn:
            row = await AuditCaseRepo.get(conn, guild_id.to_int(), case_number)
        if row is None:
            return None
        return AuditRecord(
            guild_id=GuildID(row.guild_id),
            target_id=UserID(row.target_id),
            moderator_id=UserID(row.moderator_id),
            reason=row.reason,
            action=ActionType(row.action),
            case_number=row.case_number,
        )
