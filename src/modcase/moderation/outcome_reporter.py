"""
Turns the settled (notification, action) pair into a reply and side effects.

=============  =========  ==============================================  ==========================
Notification   Action     Reply to the invoker                            Side effects
=============  =========  ==============================================  ==========================
Delivered      Applied    Kicked, with a copy of the notice               audit case, warn note
Delivered      Failed     Kick failed, notice deleted                     notice deleted
Undeliverable  Applied    Kicked, unable to DM                            audit case
Undeliverable  Failed     Kick failed, unable to kick and unable to DM    none
=============  =========  ==============================================  ==========================

A note is only written when the member was demonstrably informed (Delivered/Applied).
Audit and note writes are scheduled on the recorder; the reply to the invoker does not
wait for them.
"""

from __future__ import annotations

from dataclasses import dataclass

import discord

from modcase.datatypes.action_datatypes import ModerationRequest
from modcase.datatypes.outcome_datatypes import (
    ActionOutcome,
    Applied,
    Delivered,
    Failed,
    NotificationOutcome,
    Undeliverable,
    describe_failure,
)
from modcase.moderation.audit_recorder import AuditRecorder
from modcase.moderation.invoker_feedback import InvokerFeedback
from modcase.moderation.platform import ModerationPlatform
from modcase.util.logger import get_logger

logger = get_logger("outcome_reporter")

KICKED_NOTICE_SENT = "Kicked {target}.\n\nThe following message was sent to the user:"
KICK_FAILED_NOTICE_DELETED = (
    "Kick failed {target}\n{cause}.\n\nThe notice sent to the user has been deleted:"
)
KICKED_DM_FAILED = (
    "Kicked {target}.\n\nUnable to DM the user, please inform the user manually, if possible.\n{cause}"
)
KICK_FAILED_DM_FAILED = (
    "Kick failed {target}.\n\nUnable to kick: {action_cause}.\n\nUnable to DM: {notify_cause}"
)


@dataclass(slots=True)
class ReportContext:
    """What the reporter needs besides the two outcomes."""
    request: ModerationRequest
    target_label: str
    moderator_label: str
    notice: discord.Embed
    feedback: InvokerFeedback


class OutcomeReporter:
    def __init__(self, platform: ModerationPlatform, recorder: AuditRecorder) -> None:
        self.platform = platform
        self.recorder = recorder

    async def report(
        self,
        context: ReportContext,
        notification: NotificationOutcome,
        action: ActionOutcome,
    ) -> None:
        target = context.target_label

        match notification, action:
            case Delivered(), Applied():
                self.recorder.schedule_case(context.request, target, context.moderator_label)
                self.recorder.schedule_note(context.request)
                await context.feedback.send(KICKED_NOTICE_SENT.format(target=target), embed=context.notice)

            case Delivered(message=notice_message), Failed(cause=cause):
                await self.delete_notice(notice_message)
                await context.feedback.send(
                    KICK_FAILED_NOTICE_DELETED.format(target=target, cause=describe_failure(cause)),
                    embed=context.notice,
                )

            case Undeliverable(cause=cause), Applied():
                self.recorder.schedule_case(context.request, target, context.moderator_label)
                await context.feedback.send(KICKED_DM_FAILED.format(target=target, cause=describe_failure(cause)))

            case Undeliverable(cause=notify_cause), Failed(cause=action_cause):
                await context.feedback.send(
                    KICK_FAILED_DM_FAILED.format(
                        target=target,
                        action_cause=describe_failure(action_cause),
                        notify_cause=describe_failure(notify_cause),
                    )
                )

            case _:
                raise TypeError(f"Unexpected outcome pair: {notification!r}, {action!r}")

    async def delete_notice(self, message: discord.Message) -> None:
        """Delete the delivered notice after a failed kick. Failure is only logged."""
        try:
            await self.platform.delete_message(message)
        except Exception as exc:
            logger.warning("[REPORTER] Could not delete kick notice: %s", describe_failure(exc))
