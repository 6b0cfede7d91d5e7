"""Best-effort replies to the moderator who issued the command."""

from __future__ import annotations

from typing import Optional

import discord

from modcase.datatypes.discord_datatypes import UserID
from modcase.datatypes.outcome_datatypes import DeliveryResult, NotSent, Sent, describe_failure
from modcase.moderation.platform import ModerationPlatform
from modcase.util.logger import get_logger

logger = get_logger("invoker_feedback")


class InvokerFeedback:
    """Sends workflow feedback to the invoker's private channel.

    The channel is opened once per invocation. When it cannot be opened every reply of
    that invocation is dropped; :meth:`send` never raises.
    """

    def __init__(self, platform: ModerationPlatform, channel: Optional[discord.abc.Messageable]) -> None:
        self.platform = platform
        self.channel = channel

    @classmethod
    async def open(cls, platform: ModerationPlatform, invoker_id: UserID) -> "InvokerFeedback":
        try:
            channel = await platform.open_private_channel(invoker_id)
        except Exception as exc:
            logger.debug("[FEEDBACK] No private channel to invoker %s: %s", invoker_id, describe_failure(exc))
            channel = None
        return cls(platform, channel)

    @property
    def available(self) -> bool:
        return self.channel is not None

    async def send(
        self,
        content: Optional[str] = None,
        *,
        embed: Optional[discord.Embed] = None,
        delete_after: Optional[float] = None,
    ) -> DeliveryResult:
        if self.channel is None:
            return NotSent()
        try:
            message = await self.platform.send_message(
                self.channel, content, embed=embed, delete_after=delete_after
            )
        except Exception as exc:
            logger.warning("[FEEDBACK] Reply to invoker failed: %s", describe_failure(exc))
            return NotSent(exc)
        return Sent(message)
