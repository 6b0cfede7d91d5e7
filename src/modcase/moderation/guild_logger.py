"""Posts audit cases to the guild's configured log channel."""

from __future__ import annotations

import discord

from modcase.configuration.app_configuration import AppConfig
from modcase.datatypes.action_datatypes import AuditRecord
from modcase.moderation.moderation_embed import build_case_log_embed
from modcase.util.logger import get_logger

logger = get_logger("guild_logger")


class GuildLogger:
    """Renders audit cases into the log channel set in ``guild_log_channels``.

    Guilds without a configured channel are skipped. Delivery failures are logged and
    otherwise ignored; the case itself is already stored by the audit log.
    """

    def __init__(self, discord_bot_instance: discord.Client, config: AppConfig) -> None:
        self.bot = discord_bot_instance
        self.config = config

    async def log_case(self, record: AuditRecord, target_label: str, moderator_label: str) -> bool:
        guild_id = record.guild_id.to_int()
        channel_id = self.config.log_channel_id(guild_id)
        if channel_id is None:
            logger.debug("[GUILD LOGGER] No log channel configured for guild %s", guild_id)
            return False

        channel = self.bot.get_channel(channel_id)
        if channel is None:
            logger.warning("[GUILD LOGGER] Log channel %s of guild %s not found", channel_id, guild_id)
            return False

        embed = build_case_log_embed(record.case_number, target_label, moderator_label, record.reason)
        try:
            await channel.send(embed=embed)
        except discord.Forbidden:
            logger.warning("[GUILD LOGGER] Cannot post to log channel %s: missing permissions", channel_id)
            return False
        except Exception as exc:
            logger.error("[GUILD LOGGER] Error posting case %s to channel %s: %s", record.case_number, channel_id, exc)
            return False
        return True
