"""Builds a ModerationRequest from the raw command arguments."""

from __future__ import annotations

import re
from typing import Optional, Tuple

from modcase.datatypes.action_datatypes import CommandInvocation, ModerationRequest
from modcase.datatypes.discord_datatypes import GuildID, UserID
from modcase.moderation.moderation_errors import NoTargetMentioned, NotInGuildContext

# <@id> for plain mentions, <@!id> for nickname mentions
MENTION_PATTERN = re.compile(r"<@!?(\d+)>")


class TargetResolver:
    """Extracts the target and the reason from a kick invocation.

    The target is the user mentioned by the first argument token, and the reason is the
    text after that token. Further mentions are left in the reason. The mention list of
    the message is unordered, so it is only used to confirm that the leading token is a
    real mention.
    """

    def resolve(self, invocation: CommandInvocation) -> ModerationRequest:
        """
        Raises:
            NotInGuildContext: The invocation did not come from a guild.
            NoTargetMentioned: The arguments do not start with a mention of a mentioned user.
            MissingReason: Nothing follows the mention.
        """
        if invocation.guild is None:
            raise NotInGuildContext()

        target_id, reason = self.split_mention(invocation.arguments)
        if target_id is None or target_id not in invocation.mentioned_user_ids:
            raise NoTargetMentioned()

        return ModerationRequest(
            invoker_id=UserID.from_user(invocation.invoker),
            guild_id=GuildID.from_guild(invocation.guild),
            target_id=target_id,
            reason=reason,
        )

    @staticmethod
    def split_mention(arguments: str) -> Tuple[Optional[UserID], str]:
        """Split ``arguments`` into the leading mention and the stripped rest.

        Returns ``(None, rest)`` when the first token is not a user mention.
        """
        parts = (arguments or "").strip().split(maxsplit=1)
        if not parts:
            return None, ""
        rest = parts[1].strip() if len(parts) > 1 else ""
        match = MENTION_PATTERN.fullmatch(parts[0])
        if match is None:
            return None, rest
        return UserID(match.group(1)), rest
