"""
Validation errors raised while building a kick request.

Each error carries the message shown to the invoking moderator. They never leave the
workflow: :class:`~modcase.moderation.kick_workflow.KickWorkflow` catches them, reports
``feedback`` to the invoker (when a private channel is available) and stops before any
remote mutating call is issued.
"""

from __future__ import annotations


class ModerationRequestError(Exception):
    """Base class for request-construction failures."""

    feedback: str = "Illegal argumentation."

    def __init__(self, feedback: str | None = None) -> None:
        if feedback is not None:
            self.feedback = feedback
        super().__init__(self.feedback)


class NotInGuildContext(ModerationRequestError):
    feedback = "This command only works in a guild."


class NoTargetMentioned(ModerationRequestError):
    feedback = "Illegal argumentation, you need to mention a user that is still in the server."


class MissingReason(ModerationRequestError):
    feedback = "No reason provided for this action."


class TargetNotInGuild(ModerationRequestError):
    feedback = "Illegal argumentation, you need to mention a user that is still in the server."
