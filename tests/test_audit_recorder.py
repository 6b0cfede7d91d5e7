from unittest.mock import AsyncMock

import pytest

from modcase.datatypes.action_datatypes import ActionType, ModerationRequest, NoteType
from modcase.datatypes.discord_datatypes import GuildID, UserID
from modcase.moderation.audit_recorder import AuditRecorder

pytestmark = pytest.mark.asyncio

REQUEST = ModerationRequest(UserID(10), GuildID(500), UserID(20), "spamming")


async def test_record_case_appends_and_logs_to_channel(audit_log, note_store):
    guild_logger = AsyncMock()
    recorder = AuditRecorder(audit_log, note_store, guild_logger)

    case_number = await recorder.record_case(REQUEST, "spammer", "mod")

    assert case_number == 1
    stored = await audit_log.get_case(GuildID(500), 1)
    assert stored.target_id == UserID(20)
    assert stored.moderator_id == UserID(10)
    assert stored.action is ActionType.KICK
    record, target_label, moderator_label = guild_logger.log_case.await_args.args
    assert record.case_number == 1
    assert (target_label, moderator_label) == ("spammer", "mod")


async def test_record_case_failure_is_swallowed(note_store):
    audit_log = AsyncMock()
    audit_log.append.side_effect = RuntimeError("database is locked")
    guild_logger = AsyncMock()
    recorder = AuditRecorder(audit_log, note_store, guild_logger)

    assert await recorder.record_case(REQUEST, "spammer", "mod") is None
    guild_logger.log_case.assert_not_awaited()


async def test_record_note_adds_warn_note(audit_log, note_store):
    recorder = AuditRecorder(audit_log, note_store)

    assert await recorder.record_note(REQUEST) is True

    notes = await note_store.list_notes(GuildID(500), UserID(20))
    assert len(notes) == 1
    assert notes[0].note_type is NoteType.WARN
    assert notes[0].reason == "spamming"
    assert notes[0].author_id == UserID(10)


async def test_record_note_failure_is_swallowed(audit_log):
    note_store = AsyncMock()
    note_store.add.side_effect = RuntimeError("disk full")
    recorder = AuditRecorder(audit_log, note_store)

    assert await recorder.record_note(REQUEST) is False


async def test_scheduled_writes_complete_on_flush(audit_log, note_store):
    recorder = AuditRecorder(audit_log, note_store)

    case_task = recorder.schedule_case(REQUEST, "spammer", "mod")
    note_task = recorder.schedule_note(REQUEST)
    await recorder.flush()

    assert case_task.result() == 1
    assert note_task.result() is True
    assert await audit_log.current_case_number(GuildID(500)) == 1
    assert len(await note_store.list_notes(GuildID(500), UserID(20))) == 1


async def test_flush_waits_for_failed_background_write(note_store):
    audit_log = AsyncMock()
    audit_log.append.side_effect = RuntimeError("database is locked")
    recorder = AuditRecorder(audit_log, note_store)

    task = recorder.schedule_case(REQUEST, "spammer", "mod")
    await recorder.flush()

    assert task.done()
    assert task.result() is None


async def test_flush_without_pending_writes(audit_log, note_store):
    await AuditRecorder(audit_log, note_store).flush()
