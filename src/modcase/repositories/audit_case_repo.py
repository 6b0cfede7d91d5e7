"""
Persistent storage for audit cases.

Case numbers are scoped to a guild; callers allocate the next one with
:meth:`AuditCaseRepo.next_case_number` inside the same write transaction that inserts it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import aiosqlite


@dataclass
class AuditCaseRow:
    """A single row from the ``audit_cases`` table."""
    guild_id: int
    case_number: int
    target_id: int
    moderator_id: int
    action: str
    reason: str
    created_at: Optional[str] = None


class AuditCaseRepo:
    """Low-level CRUD for the ``audit_cases`` table."""

    @staticmethod
    async def next_case_number(conn: aiosqlite.Connection, guild_id: int) -> int:
        """Return the case number the next case of ``guild_id`` should use."""
        cursor = await conn.execute(
            "SELECT COALESCE(MAX(case_number), 0) + 1 FROM audit_cases WHERE guild_id = ?",
            (guild_id,),
        )
        row = await cursor.fetchone()
        return int(row[0])

    @staticmethod
    async def insert(conn: aiosqlite.Connection, row: AuditCaseRow) -> None:
        await conn.execute(
            """
            INSERT INTO audit_cases (guild_id, case_number, target_id, moderator_id, action, reason)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (row.guild_id, row.case_number, row.target_id, row.moderator_id, row.action, row.reason),
        )

    @staticmethod
    async def latest_case_number(conn: aiosqlite.Connection, guild_id: int) -> int:
        """Return the highest case number of the guild, 0 when it has none."""
        cursor = await conn.execute(
            "SELECT COALESCE(MAX(case_number), 0) FROM audit_cases WHERE guild_id = ?",
            (guild_id,),
        )
        row = await cursor.fetchone()
        return int(row[0])

    @staticmethod
    async def get(conn: aiosqlite.Connection, guild_id: int, case_number: int) -> Optional[AuditCaseRow]:
        cursor = await conn.execute(
            "SELECT guild_id, case_number, target_id, moderator_id, action, reason, created_at "
            "FROM audit_cases WHERE guild_id = ? AND case_number = ?",
            (guild_id, case_number),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return AuditCaseRow(*row)
