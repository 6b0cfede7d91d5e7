"""Event listener Cog for Modcase.

This cog handles bot lifecycle events (on_ready) and command error handling.
"""

import discord
from discord.ext import commands

from modcase.util.logger import get_logger

logger = get_logger("events_listener_cog")


class EventsListenerCog(commands.Cog):
    """Cog containing bot lifecycle and command error handlers."""

    def __init__(self, discord_bot_instance):
        self.bot = discord_bot_instance
        logger.info("Events listener cog loaded")

    @commands.Cog.listener(name="on_ready")
    async def on_ready(self):
        """Log the connected identity and set the bot presence."""
        if self.bot.user:
            logger.info(f"Bot connected as {self.bot.user} (ID: {self.bot.user.id})")
            await self.bot.change_presence(
                status=discord.Status.online,
                activity=discord.Activity(type=discord.ActivityType.watching, name="for rule breakers"),
            )
        else:
            logger.warning("Bot partially connected, but user information not yet available.")

        logger.info("--==--==--==--==--==--==--==--==--==--==--==--==--==--==--==--==--")

    @commands.Cog.listener(name="on_command_error")
    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError):
        """Report command errors to the invoker; no error is fatal to the bot."""
        if isinstance(error, commands.CommandNotFound):
            return

        if isinstance(error, (commands.MissingRequiredArgument, commands.BadArgument)):
            message = f"Illegal argumentation: {error}"
        else:
            original = getattr(error, "original", error)
            logger.error(
                "Error in command %s: %s",
                ctx.command.qualified_name if ctx.command else "unknown",
                original,
                exc_info=original,
            )
            message = "An error occurred while running this command."

        try:
            await ctx.send(message)
        except discord.HTTPException as exc:
            logger.warning("Could not report command error to %s: %s", ctx.author.id, exc)


def setup(discord_bot_instance):
    """Register the events listener cog with the bot."""
    discord_bot_instance.add_cog(EventsListenerCog(discord_bot_instance))
