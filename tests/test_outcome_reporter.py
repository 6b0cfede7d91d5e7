"""The (notification, action) outcome matrix."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from modcase.datatypes.action_datatypes import ModerationRequest
from modcase.datatypes.discord_datatypes import GuildID, UserID
from modcase.datatypes.outcome_datatypes import Applied, Delivered, Failed, Undeliverable
from modcase.moderation.audit_recorder import AuditRecorder
from modcase.moderation.invoker_feedback import InvokerFeedback
from modcase.moderation.outcome_reporter import OutcomeReporter, ReportContext

from fakes import FakeChannel, FakeMessage, FakePlatform

MODERATOR_ID = 10


def make_reporter(recorder=None):
    platform = FakePlatform()
    recorder = recorder or MagicMock()
    reporter = OutcomeReporter(platform, recorder)
    context = ReportContext(
        request=ModerationRequest(UserID(MODERATOR_ID), GuildID(500), UserID(20), "spamming"),
        target_label="spammer",
        moderator_label="mod",
        notice=discord.Embed(title="notice"),
        feedback=InvokerFeedback(platform, FakeChannel(MODERATOR_ID)),
    )
    return platform, recorder, reporter, context


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "notification, action, expect_case, expect_note",
    [
        (Delivered(FakeMessage(20)), Applied(), True, True),
        (Delivered(FakeMessage(20)), Failed(RuntimeError("nope")), False, False),
        (Undeliverable(RuntimeError("dm closed")), Applied(), True, False),
        (Undeliverable(RuntimeError("dm closed")), Failed(RuntimeError("nope")), False, False),
    ],
)
async def test_side_effects_follow_outcome_matrix(notification, action, expect_case, expect_note):
    platform, recorder, reporter, context = make_reporter()

    await reporter.report(context, notification, action)

    assert recorder.schedule_case.call_count == int(expect_case)
    assert recorder.schedule_note.call_count == int(expect_note)
    assert len(platform.messages_to(MODERATOR_ID)) == 1


@pytest.mark.asyncio
async def test_failed_kick_deletes_delivered_notice_once():
    platform, _, reporter, context = make_reporter()
    notice_message = FakeMessage(20)

    await reporter.report(context, Delivered(notice_message), Failed(RuntimeError("Missing Permissions")))

    assert platform.deleted == [notice_message]
    reply = platform.messages_to(MODERATOR_ID)[0]
    assert reply.content.startswith("Kick failed spammer\nRuntimeError: Missing Permissions.")
    assert reply.embed is context.notice


@pytest.mark.asyncio
async def test_notice_deletion_failure_still_reports():
    platform, _, reporter, context = make_reporter()
    platform.delete_error = RuntimeError("Unknown Message")

    await reporter.report(context, Delivered(FakeMessage(20)), Failed(RuntimeError("nope")))

    assert len(platform.deleted) == 1
    assert "has been deleted" in platform.messages_to(MODERATOR_ID)[0].content


@pytest.mark.asyncio
async def test_applied_with_delivered_notice_echoes_notice():
    platform, recorder, reporter, context = make_reporter()

    await reporter.report(context, Delivered(FakeMessage(20)), Applied())

    recorder.schedule_case.assert_called_once_with(context.request, "spammer", "mod")
    recorder.schedule_note.assert_called_once_with(context.request)
    reply = platform.messages_to(MODERATOR_ID)[0]
    assert reply.content == "Kicked spammer.\n\nThe following message was sent to the user:"
    assert reply.embed is context.notice


@pytest.mark.asyncio
async def test_undeliverable_applied_message_names_dm_cause():
    platform, _, reporter, context = make_reporter()

    await reporter.report(context, Undeliverable(RuntimeError("dm closed")), Applied())

    reply = platform.messages_to(MODERATOR_ID)[0]
    assert reply.content.startswith("Kicked spammer.")
    assert reply.content.endswith("RuntimeError: dm closed")
    assert reply.embed is None
    assert platform.deleted == []


@pytest.mark.asyncio
async def test_unexpected_outcome_pair_raises():
    _, _, reporter, context = make_reporter()

    with pytest.raises(TypeError):
        await reporter.report(context, "delivered", "applied")


@pytest.mark.asyncio
async def test_reply_is_sent_while_audit_write_is_pending():
    release = asyncio.Event()
    appended = []

    async def slow_append(record):
        await release.wait()
        appended.append(record)
        return 1

    note_store = AsyncMock()
    recorder = AuditRecorder(SimpleNamespace(append=slow_append), note_store)
    platform, _, reporter, context = make_reporter(recorder)

    await reporter.report(context, Delivered(FakeMessage(20)), Applied())

    assert len(platform.messages_to(MODERATOR_ID)) == 1
    assert appended == []

    release.set()
    await recorder.flush()

    assert len(appended) == 1
    note_store.add.assert_awaited_once()
