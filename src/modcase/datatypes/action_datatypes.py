"""
Action types and data structures for the kick workflow.

This module defines the ActionType and NoteType enums and the dataclasses that flow
through the workflow: the raw :class:`CommandInvocation` handed over by the command
layer, the validated :class:`ModerationRequest`, and the :class:`AuditRecord` and
:class:`Note` write requests emitted once the kick has been applied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Union

import discord

from modcase.datatypes.discord_datatypes import GuildID, UserID
from modcase.moderation.moderation_errors import MissingReason


class ActionType(Enum):
    """Enumeration of moderation actions recorded in the audit log."""

    KICK = "kick"

    def __str__(self) -> str:
        return self.value


class NoteType(Enum):
    """Kind of moderation note attached to a member."""

    NORMAL = "normal"
    WARN = "warn"

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class CommandInvocation:
    """Raw invocation context passed in by the command-dispatch layer.

    Attributes:
        invoker: The user or member who issued the command
        guild: Guild the command was issued in, ``None`` for direct messages
        mentioned_user_ids: Users mentioned in the invoking message, in message order
        arguments: Argument text following the command name
    """
    invoker: Union[discord.Member, discord.User]
    guild: Optional[discord.Guild]
    mentioned_user_ids: List[UserID] = field(default_factory=list)
    arguments: str = ""


@dataclass(slots=True, frozen=True)
class ModerationRequest:
    """A validated kick request.

    ``reason`` must be non-empty: an empty reason is a construction failure
    (:class:`MissingReason`), never a downstream error.
    """
    invoker_id: UserID
    guild_id: GuildID
    target_id: UserID
    reason: str

    def __post_init__(self) -> None:
        if not self.reason or not self.reason.strip():
            raise MissingReason()


@dataclass(slots=True)
class AuditRecord:
    """Audit log entry for an applied moderation action.

    Attributes:
        guild_id: Guild the action was applied in
        target_id: Member the action was applied to
        moderator_id: Moderator who issued the action
        reason: Reason given by the moderator
        action: Type of action applied
        case_number: Allocated by the audit log on append (monotonic per guild)
    """
    guild_id: GuildID
    target_id: UserID
    moderator_id: UserID
    reason: str
    action: ActionType = ActionType.KICK
    case_number: Optional[int] = None


@dataclass(slots=True)
class Note:
    """A moderation note attached to a member of a guild."""
    target_id: UserID
    guild_id: GuildID
    author_id: UserID
    reason: str
    note_type: NoteType = NoteType.WARN
    created_at: Optional[datetime] = None
