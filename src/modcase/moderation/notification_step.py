"""Delivers the kick notice to the target before the kick is applied."""

from __future__ import annotations

import discord

from modcase.datatypes.action_datatypes import ModerationRequest
from modcase.datatypes.outcome_datatypes import Delivered, NotificationOutcome, Undeliverable, describe_failure
from modcase.moderation.platform import ModerationPlatform
from modcase.util.logger import get_logger

logger = get_logger("notification_step")


class NotificationStep:
    """Opens a DM with the target and sends the notice embed.

    No timeout is applied here: the step settles when the platform call settles. Either
    way the result is an outcome value, so the kick that follows never depends on the
    target's DM settings.
    """

    def __init__(self, platform: ModerationPlatform) -> None:
        self.platform = platform

    async def notify(self, request: ModerationRequest, notice: discord.Embed) -> NotificationOutcome:
        try:
            channel = await self.platform.open_private_channel(request.target_id)
            message = await self.platform.send_message(channel, embed=notice)
        except Exception as exc:
            logger.warning(
                "[NOTIFICATION] Could not DM user %s in guild %s: %s",
                request.target_id,
                request.guild_id,
                describe_failure(exc),
            )
            return Undeliverable(exc)

        logger.debug("[NOTIFICATION] Kick notice delivered to user %s", request.target_id)
        return Delivered(message)
