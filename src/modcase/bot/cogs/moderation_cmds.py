"""
Moderation cog: the ``kick`` and ``notes`` text commands.

``kick`` hands the raw invocation to :class:`~modcase.moderation.kick_workflow.KickWorkflow`,
which does its own permission checks so that rejections are reported to the moderator
over DM rather than in the public channel.

Usage
    !kick @user Spamming invite links in #general
    !notes @user
"""

import discord
from discord.ext import commands

from modcase.datatypes.action_datatypes import CommandInvocation
from modcase.datatypes.discord_datatypes import GuildID, UserID
from modcase.moderation.authorization_gate import KICK_CAPABILITY
from modcase.moderation.kick_workflow import KickWorkflow
from modcase.moderation.moderation_embed import build_notes_embed
from modcase.services.note_store_service import NoteStoreService
from modcase.util.format_utils import effective_name_and_username
from modcase.util.logger import get_logger

logger = get_logger("moderation_cog")

KICK_SYNTAX = "[User mention] [Reason~]"
KICK_DESCRIPTION = (
    "This command will kick the mentioned users and log this to the log channel. A reason is required."
)


class ModerationCommandsCog(commands.Cog):
    """Cog containing the manual moderation commands."""

    # Listed by the help command
    required_permissions = {
        "kick": [KICK_CAPABILITY],
        "notes": [KICK_CAPABILITY],
    }

    def __init__(self, discord_bot_instance, workflow: KickWorkflow, note_store: NoteStoreService):
        """
        Parameters
        ----------
        discord_bot_instance:
            Active bot instance the cog is attached to.
        workflow:
            Kick workflow that handles every ``kick`` invocation.
        note_store:
            Note store read by ``notes``.
        """
        self.discord_bot_instance = discord_bot_instance
        self.workflow = workflow
        self.note_store = note_store
        logger.info("Moderation cog loaded")

    @commands.command(name="kick", aliases=["Kick"], usage=KICK_SYNTAX, help=KICK_DESCRIPTION)
    async def kick(self, ctx: commands.Context, *, arguments: str = ""):
        """Kick the first mentioned member with the reason that follows the mention."""
        invocation = CommandInvocation(
            invoker=ctx.author,
            guild=ctx.guild,
            mentioned_user_ids=[UserID.from_user(user) for user in ctx.message.mentions],
            arguments=arguments,
        )
        await self.workflow.handle(invocation)

    @commands.command(name="notes", aliases=["Notes"], usage="[User mention]", help="Show the moderation notes of a member.")
    async def notes(self, ctx: commands.Context, member: discord.Member):
        """DM the invoker the notes recorded for ``member``."""
        if ctx.guild is None:
            await ctx.send("This command only works in a guild.")
            return
        if not self.workflow.platform.has_capability(ctx.author, KICK_CAPABILITY):
            await ctx.send(f"{ctx.author.mention} you need kick members permission to use this command!")
            return

        notes = await self.note_store.list_notes(GuildID.from_guild(ctx.guild), UserID.from_user(member))
        embed = build_notes_embed(effective_name_and_username(member), notes)
        try:
            await ctx.author.send(embed=embed)
        except discord.HTTPException as exc:
            logger.warning("Could not DM notes to %s: %s", ctx.author.id, exc)
            await ctx.send(f"{ctx.author.mention} I could not DM you, please enable direct messages.")


def setup(discord_bot_instance, workflow: KickWorkflow, note_store: NoteStoreService):
    """Register the moderation cog with the bot."""
    discord_bot_instance.add_cog(ModerationCommandsCog(discord_bot_instance, workflow, note_store))
