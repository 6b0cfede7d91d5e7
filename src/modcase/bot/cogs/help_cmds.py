"""Help cog: lists every registered text command."""

import discord
from discord.ext import commands

from modcase.moderation.moderation_embed import HelpEntry, build_help_embeds
from modcase.util.logger import get_logger

logger = get_logger("help_cog")


def help_entry_for(command: commands.Command) -> HelpEntry:
    """Describe ``command`` for the help listing."""
    required = getattr(command.cog, "required_permissions", {}).get(command.name, [])
    return HelpEntry(
        aliases=[command.name, *[alias for alias in command.aliases if alias.lower() != command.name]],
        syntax=command.usage,
        description=command.help,
        required_permissions=list(required),
    )


class HelpCog(commands.Cog):
    """Cog containing the help command."""

    def __init__(self, discord_bot_instance):
        self.discord_bot_instance = discord_bot_instance
        logger.info("Help cog loaded")

    @commands.command(name="help", aliases=["Help"], help="Show a list of commands")
    async def help_command(self, ctx: commands.Context):
        """Send the command list.

        In a guild channel this is reserved for members who can manage messages, to keep
        the listing out of public channels.
        """
        if ctx.guild is not None:
            permissions = getattr(ctx.author, "guild_permissions", None)
            if not getattr(permissions, "manage_messages", False):
                await ctx.send("The help command should be executed in private chat.")
                return

        commands_sorted = sorted(self.discord_bot_instance.commands, key=lambda command: command.name)
        for embed in build_help_embeds([help_entry_for(command) for command in commands_sorted]):
            await ctx.send(embed=embed)


def setup(discord_bot_instance):
    """Register the help cog with the bot."""
    discord_bot_instance.add_cog(HelpCog(discord_bot_instance))
