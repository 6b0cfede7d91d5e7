import asyncio

import pytest

from modcase.database.database import Database
from modcase.datatypes.action_datatypes import AuditRecord, NoteType
from modcase.datatypes.discord_datatypes import GuildID, UserID

pytestmark = pytest.mark.asyncio


def make_record(guild_id=500, target_id=20, reason="spam"):
    return AuditRecord(GuildID(guild_id), UserID(target_id), UserID(10), reason)


async def test_schema_tables_exist(database):
    async with database.connection_manager.read() as conn:
        cursor = await conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
        tables = {row[0] for row in await cursor.fetchall()}
    assert {"audit_cases", "mod_notes", "schema_version"} <= tables


async def test_initialize_is_idempotent(database):
    assert database.initialized
    assert await database.initialize()


async def test_initialize_failure_returns_false(tmp_path):
    # A directory cannot be opened as a database file
    db = Database(tmp_path)
    assert await db.initialize() is False
    assert not db.initialized


async def test_case_numbers_are_monotonic_per_guild(audit_log):
    first = await audit_log.append(make_record())
    second = await audit_log.append(make_record(target_id=21))
    other_guild = await audit_log.append(make_record(guild_id=600))

    assert (first, second, other_guild) == (1, 2, 1)
    assert await audit_log.current_case_number(GuildID(500)) == 2
    assert await audit_log.current_case_number(GuildID(700)) == 0


async def test_concurrent_appends_get_distinct_numbers(audit_log):
    numbers = await asyncio.gather(*(audit_log.append(make_record(target_id=i)) for i in range(20, 30)))

    assert sorted(numbers) == list(range(1, 11))


async def test_append_sets_case_number_on_record(audit_log):
    record = make_record()
    await audit_log.append(record)
    assert record.case_number == 1


async def test_get_case(audit_log):
    await audit_log.append(make_record(reason="raiding"))

    stored = await audit_log.get_case(GuildID(500), 1)
    assert stored.reason == "raiding"
    assert stored.case_number == 1
    assert await audit_log.get_case(GuildID(500), 2) is None


async def test_notes_are_listed_oldest_first(note_store):
    await note_store.add("first", NoteType.WARN, UserID(20), GuildID(500), UserID(10))
    await note_store.add("second", NoteType.NORMAL, UserID(20), GuildID(500), UserID(11))
    await note_store.add("elsewhere", NoteType.WARN, UserID(20), GuildID(600), UserID(10))

    notes = await note_store.list_notes(GuildID(500), UserID(20))

    assert [note.reason for note in notes] == ["first", "second"]
    assert notes[1].note_type is NoteType.NORMAL
    assert notes[0].created_at is not None
