from datetime import datetime, timezone
from typing import Union

import discord


def effective_name_and_username(member: Union[discord.Member, discord.User]) -> str:
    """Return ``"Nickname (username)"`` for a member, or just the username.

    The nickname part is dropped when it is the same as the username or the member has
    no guild nickname.

    Args:
        member: Member or user to describe.

    Returns:
        Display label used in kick notices and audit embeds.
    """
    username = str(member)
    display_name = getattr(member, "display_name", None) or username
    if display_name == getattr(member, "name", username):
        return username
    return f"{display_name} ({username})"


def humanize_timestamp(value: datetime) -> str:
    """Return a human-readable timestamp (YYYY-MM-DD HH:MM:SS) in UTC.

    Naive datetimes (as returned by SQLite ``CURRENT_TIMESTAMP``) are assumed to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%d %H:%M:%S UTC")
