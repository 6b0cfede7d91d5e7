"""
Embed builders for the kick notice, the audit log channel, notes and help.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Union

import discord

from modcase.datatypes.action_datatypes import Note
from modcase.util.format_utils import effective_name_and_username, humanize_timestamp

# Discord refuses embeds with more than 25 fields
MAX_EMBED_FIELDS = 25


def build_kick_notice(
    guild_name: str,
    moderator: Union[discord.Member, discord.User],
    reason: str,
) -> discord.Embed:
    """
    Create the notice DMed to a member before they are kicked.

    Args:
        guild_name: Name of the guild the member is kicked from
        moderator: Moderator issuing the kick
        reason: Reason given by the moderator

    Returns:
        discord.Embed: Formatted embed
    """
    moderator_label = effective_name_and_username(moderator)
    avatar = getattr(moderator, "display_avatar", None)
    embed = discord.Embed(
        title=f"{guild_name}: You have been kicked by {moderator_label}",
        description=f"Reason: {reason}",
        color=discord.Color.red(),
    )
    if avatar is not None:
        embed.set_author(name=moderator_label, icon_url=avatar.url)
    else:
        embed.set_author(name=moderator_label)
    return embed


def build_case_log_embed(case_number: int, target_label: str, moderator_label: str, reason: str) -> discord.Embed:
    """Create the audit log channel entry for a kick case."""
    embed = discord.Embed(
        title=f"User kicked | Case: {case_number}",
        color=discord.Color.red(),
    )
    embed.add_field(name="User", value=target_label, inline=True)
    embed.add_field(name="Moderator", value=moderator_label, inline=True)
    embed.add_field(name="Reason", value=reason, inline=False)
    return embed


def build_notes_embed(target_label: str, notes: Sequence[Note]) -> discord.Embed:
    """List the moderation notes of a member, most recent last."""
    embed = discord.Embed(title=f"Notes for {target_label}", color=discord.Color.orange())
    if not notes:
        embed.description = "No notes recorded."
        return embed

    shown = list(notes)[-MAX_EMBED_FIELDS:]
    for note in shown:
        when = humanize_timestamp(note.created_at) if note.created_at else "unknown time"
        embed.add_field(
            name=f"{note.note_type.value.upper()} | {when}",
            value=f"{note.reason}\nBy: <@{note.author_id}>",
            inline=False,
        )
    if len(shown) < len(notes):
        embed.set_footer(text=f"Showing the last {len(shown)} of {len(notes)} notes")
    return embed


@dataclass(slots=True)
class HelpEntry:
    """One command as listed by the help command."""
    aliases: List[str]
    syntax: str | None
    description: str | None
    required_permissions: List[str]

    @property
    def title(self) -> str:
        names = ", ".join(self.aliases)
        return f"{names} {self.syntax}" if self.syntax else names

    @property
    def body(self) -> str:
        text = self.description or "No description available."
        if self.required_permissions:
            text += f"\nRequires server permissions: {', '.join(self.required_permissions)}"
        return text


def build_help_embeds(entries: Sequence[HelpEntry]) -> List[discord.Embed]:
    """Render help entries, starting a new embed every 25 fields."""
    embeds = [discord.Embed(title="Help")]
    for entry in entries:
        if len(embeds[-1].fields) >= MAX_EMBED_FIELDS:
            embeds.append(discord.Embed(title=f"Help part {len(embeds) + 1}"))
        embeds[-1].add_field(name=entry.title, value=entry.body, inline=False)
    return embeds
