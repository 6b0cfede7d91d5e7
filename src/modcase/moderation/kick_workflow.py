"""
Kick workflow orchestrator.

One call to :meth:`KickWorkflow.handle` runs a kick invocation end to end::

    resolve -> authorize -> notify (settle) -> kick (settle) -> report

Each step returns a value (or raises a validation error before anything is mutated),
so failures travel as outcomes rather than cross-step exceptions. The notice is always
attempted before the kick, and the kick is always attempted once the notice settles,
whether or not it was delivered.

Invocations share no mutable state; concurrent kicks run independently.
"""

from __future__ import annotations

from typing import Optional

from modcase.configuration.app_configuration import DEFAULT_PERMISSION_NOTICE_DELETE_AFTER
from modcase.datatypes.action_datatypes import CommandInvocation
from modcase.datatypes.discord_datatypes import UserID
from modcase.moderation.action_executor import ActionExecutor
from modcase.moderation.audit_recorder import AuditRecorder
from modcase.moderation.authorization_gate import AuthorizationGate
from modcase.moderation.guild_logger import GuildLogger
from modcase.moderation.invoker_feedback import InvokerFeedback
from modcase.moderation.moderation_embed import build_kick_notice
from modcase.moderation.moderation_errors import ModerationRequestError
from modcase.moderation.notification_step import NotificationStep
from modcase.moderation.outcome_reporter import OutcomeReporter, ReportContext
from modcase.moderation.platform import ModerationPlatform
from modcase.moderation.target_resolver import TargetResolver
from modcase.services.audit_log_service import AuditLogService
from modcase.services.note_store_service import NoteStoreService
from modcase.util.format_utils import effective_name_and_username
from modcase.util.logger import get_logger

logger = get_logger("kick_workflow")

INSUFFICIENT_PRIVILEGE_FEEDBACK = "{mention} you need kick members permission to use this command!"
CANNOT_INTERACT_FEEDBACK = "You can't interact with this member."


class KickWorkflow:
    """Runs kick invocations against the injected platform and persistence services."""

    def __init__(
        self,
        platform: ModerationPlatform,
        audit_log: AuditLogService,
        note_store: NoteStoreService,
        guild_logger: Optional[GuildLogger] = None,
        permission_notice_delete_after: Optional[float] = DEFAULT_PERMISSION_NOTICE_DELETE_AFTER,
    ) -> None:
        self.platform = platform
        self.permission_notice_delete_after = permission_notice_delete_after
        self.resolver = TargetResolver()
        self.gate = AuthorizationGate(platform)
        self.notification = NotificationStep(platform)
        self.executor = ActionExecutor(platform)
        self.recorder = AuditRecorder(audit_log, note_store, guild_logger)
        self.reporter = OutcomeReporter(platform, self.recorder)

    async def handle(self, invocation: CommandInvocation) -> None:
        """Run one kick invocation. All feedback goes to the invoker's DMs."""
        feedback = await InvokerFeedback.open(self.platform, UserID.from_user(invocation.invoker))

        try:
            invoker = self.gate.check_context(invocation)

            if not self.gate.check_capability(invoker).allowed:
                await feedback.send(
                    INSUFFICIENT_PRIVILEGE_FEEDBACK.format(mention=invoker.mention),
                    delete_after=self.permission_notice_delete_after,
                )
                return

            request = self.resolver.resolve(invocation)
            target = self.gate.resolve_target(request)

            if not self.gate.check_target(invoker, target).allowed:
                await feedback.send(CANNOT_INTERACT_FEEDBACK)
                return
        except ModerationRequestError as exc:
            logger.info("[KICK WORKFLOW] Rejected kick by %s: %s", invocation.invoker.id, exc.feedback)
            await feedback.send(exc.feedback)
            return

        moderator_label = effective_name_and_username(invoker)
        notice = build_kick_notice(invocation.guild.name, invoker, request.reason)

        notification = await self.notification.notify(request, notice)
        action = await self.executor.execute(request)

        await self.reporter.report(
            ReportContext(
                request=request,
                target_label=effective_name_and_username(target),
                moderator_label=moderator_label,
                notice=notice,
                feedback=feedback,
            ),
            notification,
            action,
        )
