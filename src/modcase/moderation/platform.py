"""
Chat-platform calls consumed by the kick workflow.

The workflow only talks to Discord through :class:`ModerationPlatform`, which keeps
every remote call in one place and lets tests substitute an in-memory fake.
:class:`DiscordPlatform` is the py-cord implementation used at runtime.

Every coroutine raises on failure (``discord.HTTPException`` and friends); the workflow
steps convert those exceptions into outcome values.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

import discord

from modcase.datatypes.discord_datatypes import GuildID, UserID
from modcase.util.logger import get_logger

logger = get_logger("moderation_platform")


@runtime_checkable
class ModerationPlatform(Protocol):
    async def open_private_channel(self, user_id: UserID) -> discord.abc.Messageable: ...

    async def send_message(
        self,
        channel: discord.abc.Messageable,
        content: Optional[str] = None,
        *,
        embed: Optional[discord.Embed] = None,
        delete_after: Optional[float] = None,
    ) -> discord.Message: ...

    async def delete_message(self, message: discord.Message) -> None: ...

    async def kick(self, guild_id: GuildID, target_id: UserID, reason: str) -> None: ...

    def get_member(self, guild_id: GuildID, user_id: UserID) -> Optional[discord.Member]: ...

    def has_capability(self, actor: discord.Member, capability: str) -> bool: ...

    def can_act_on(self, actor: discord.Member, target: discord.Member) -> bool: ...


class DiscordPlatform:
    """:class:`ModerationPlatform` backed by a connected py-cord bot."""

    def __init__(self, discord_bot_instance: discord.Client) -> None:
        self.bot = discord_bot_instance

    async def open_private_channel(self, user_id: UserID) -> discord.DMChannel:
        user = self.bot.get_user(user_id.to_int())
        if user is None:
            user = await self.bot.fetch_user(user_id.to_int())
        return user.dm_channel or await user.create_dm()

    async def send_message(
        self,
        channel: discord.abc.Messageable,
        content: Optional[str] = None,
        *,
        embed: Optional[discord.Embed] = None,
        delete_after: Optional[float] = None,
    ) -> discord.Message:
        return await channel.send(content=content, embed=embed, delete_after=delete_after)

    async def delete_message(self, message: discord.Message) -> None:
        await message.delete()

    async def kick(self, guild_id: GuildID, target_id: UserID, reason: str) -> None:
        guild = self.bot.get_guild(guild_id.to_int())
        if guild is None:
            raise LookupError(f"Guild {guild_id} is not available to the bot")
        await guild.kick(discord.Object(id=target_id.to_int()), reason=reason)

    def get_member(self, guild_id: GuildID, user_id: UserID) -> Optional[discord.Member]:
        guild = self.bot.get_guild(guild_id.to_int())
        if guild is None:
            return None
        return guild.get_member(user_id.to_int())

    def has_capability(self, actor: discord.Member, capability: str) -> bool:
        """Return True if ``actor`` holds the guild permission named ``capability``."""
        permissions = getattr(actor, "guild_permissions", None)
        return bool(getattr(permissions, capability, False))

    def can_act_on(self, actor: discord.Member, target: discord.Member) -> bool:
        """Return True if ``actor`` outranks ``target`` in the guild role hierarchy.

        The guild owner outranks everyone and can be acted on by no one; otherwise the
        actor's top role must be strictly higher than the target's.
        """
        owner_id = actor.guild.owner_id
        if actor.id == owner_id:
            return True
        if target.id == owner_id:
            return False
        return actor.top_role > target.top_role
