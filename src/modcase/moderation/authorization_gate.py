"""
Authority checks run before any remote mutating call.

The gate answers three questions, in this order, as the workflow reaches them:

1. Was the command issued inside a guild? (``check_context``)
2. Does the invoker hold the *kick members* capability? (``check_capability``)
3. Does the invoker outrank the target? (``check_target``)

Context and membership problems are raised as validation errors; capability and
hierarchy problems come back as :class:`AuthorizationDecision` values.
"""

from __future__ import annotations

import discord

from modcase.datatypes.action_datatypes import CommandInvocation, ModerationRequest
from modcase.datatypes.outcome_datatypes import AuthorizationDecision
from modcase.moderation.moderation_errors import NotInGuildContext, TargetNotInGuild
from modcase.moderation.platform import ModerationPlatform
from modcase.util.logger import get_logger

logger = get_logger("authorization_gate")

KICK_CAPABILITY = "kick_members"


class AuthorizationGate:
    def __init__(self, platform: ModerationPlatform, capability: str = KICK_CAPABILITY) -> None:
        self.platform = platform
        self.capability = capability

    def check_context(self, invocation: CommandInvocation) -> discord.Member:
        """Return the invoker as a guild member.

        Raises:
            NotInGuildContext: The command was sent as a direct message.
        """
        if invocation.guild is None:
            raise NotInGuildContext()
        return invocation.invoker

    def check_capability(self, invoker: discord.Member) -> AuthorizationDecision:
        if not self.platform.has_capability(invoker, self.capability):
            logger.info("[AUTHORIZATION] %s lacks %s", invoker.id, self.capability)
            return AuthorizationDecision.INSUFFICIENT_PRIVILEGE
        return AuthorizationDecision.AUTHORIZED

    def resolve_target(self, request: ModerationRequest) -> discord.Member:
        """Look up the live member for the request's target.

        Raises:
            TargetNotInGuild: The target is no longer a member of the guild.
        """
        target = self.platform.get_member(request.guild_id, request.target_id)
        if target is None:
            raise TargetNotInGuild()
        return target

    def check_target(self, invoker: discord.Member, target: discord.Member) -> AuthorizationDecision:
        if not self.platform.can_act_on(invoker, target):
            logger.info("[AUTHORIZATION] %s cannot interact with %s", invoker.id, target.id)
            return AuthorizationDecision.CANNOT_INTERACT_WITH_TARGET
        return AuthorizationDecision.AUTHORIZED
