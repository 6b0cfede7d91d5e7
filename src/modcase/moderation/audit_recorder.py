"""Writes the audit case and the moderation note of an applied kick."""

from __future__ import annotations

import asyncio
from typing import Coroutine, Optional, Set

from modcase.datatypes.action_datatypes import ActionType, AuditRecord, ModerationRequest, NoteType
from modcase.moderation.guild_logger import GuildLogger
from modcase.services.audit_log_service import AuditLogService
from modcase.services.note_store_service import NoteStoreService
from modcase.util.logger import get_logger

logger = get_logger("audit_recorder")


class AuditRecorder:
    """Emits audit and note writes for the workflow.

    Write failures are logged here and never reach the workflow; durability is the
    concern of the audit log and note store. The reporter only schedules writes
    (:meth:`schedule_case`, :meth:`schedule_note`) so the moderator's reply never waits
    on SQLite; :meth:`flush` awaits whatever is still pending.
    """

    def __init__(
        self,
        audit_log: AuditLogService,
        note_store: NoteStoreService,
        guild_logger: Optional[GuildLogger] = None,
    ) -> None:
        self.audit_log = audit_log
        self.note_store = note_store
        self.guild_logger = guild_logger
        self._active_writes: Set[asyncio.Task] = set()

    def schedule_case(self, request: ModerationRequest, target_label: str, moderator_label: str) -> asyncio.Task:
        """Run :meth:`record_case` in the background."""
        return self._track(self.record_case(request, target_label, moderator_label))

    def schedule_note(self, request: ModerationRequest) -> asyncio.Task:
        """Run :meth:`record_note` in the background."""
        return self._track(self.record_note(request))

    def _track(self, write: Coroutine) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(write)
        self._active_writes.add(task)

        def _cleanup(completed: asyncio.Task) -> None:
            self._active_writes.discard(completed)
            if not completed.cancelled() and completed.exception() is not None:
                logger.error("[AUDIT] Background write failed", exc_info=completed.exception())

        task.add_done_callback(_cleanup)
        return task

    async def flush(self) -> None:
        """Await any pending audit and note writes."""
        pending = list(self._active_writes)
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    async def record_case(
        self,
        request: ModerationRequest,
        target_label: str,
        moderator_label: str,
    ) -> Optional[int]:
        """Append the kick to the audit log and render it to the log channel.

        Returns:
            The allocated case number, or ``None`` if the write failed.
        """
        record = AuditRecord(
            guild_id=request.guild_id,
            target_id=request.target_id,
            moderator_id=request.invoker_id,
            reason=request.reason,
            action=ActionType.KICK,
        )
        try:
            case_number = await self.audit_log.append(record)
        except Exception:
            logger.exception(
                "[AUDIT] Failed to record kick of user %s in guild %s", request.target_id, request.guild_id
            )
            return None

        logger.info(
            "[AUDIT] Case %d: user %s kicked from guild %s by %s",
            case_number,
            request.target_id,
            request.guild_id,
            request.invoker_id,
        )
        if self.guild_logger is not None:
            await self.guild_logger.log_case(record, target_label, moderator_label)
        return case_number

    async def record_note(self, request: ModerationRequest) -> bool:
        """Attach a warn note with the kick reason to the target."""
        try:
            await self.note_store.add(
                request.reason,
                NoteType.WARN,
                request.target_id,
                request.guild_id,
                request.invoker_id,
            )
        except Exception:
            logger.exception(
                "[AUDIT] Failed to add note for user %s in guild %s", request.target_id, request.guild_id
            )
            return False
        return True
