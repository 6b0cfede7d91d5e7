"""
Type-safe wrapper classes for Discord identifiers.

This module provides type-safe wrappers for Discord snowflake IDs so user and guild IDs
cannot be mixed up when they flow through the moderation workflow and into the database.
"""

from __future__ import annotations

from typing import Union

import discord


class Snowflake:
    """
    Base wrapper for a Discord snowflake ID.

    Discord snowflakes are 64-bit integers, but are often stored/transmitted as strings
    for JSON compatibility. Subclasses only differ in their name, which keeps a
    ``UserID`` from comparing equal to a ``GuildID`` with the same value.

    Attributes:
        _value (str): The snowflake ID stored as a string.

    Example:
        >>> uid = UserID(123456789012345678)
        >>> uid.to_int()
        123456789012345678
        >>> str(uid)
        '123456789012345678'
    """

    __slots__ = ("_value",)

    def __init__(self, value: Union[str, int, "Snowflake"]) -> None:
        """
        Initialize from a string, int, or another wrapper of the same kind.

        Args:
            value: The snowflake ID as a string, int, or wrapper.

        Raises:
            ValueError: If the value cannot be converted to a valid snowflake.
        """
        if isinstance(value, type(self)):
            self._value = value._value
        elif isinstance(value, bool):
            raise ValueError(f"Cannot create {type(self).__name__} from bool: {value}")
        elif isinstance(value, int):
            self._value = str(value)
        elif isinstance(value, str):
            self._value = str(int(value.strip()))
        else:
            raise ValueError(f"Cannot create {type(self).__name__} from {type(value).__name__}: {value}")

    def to_int(self) -> int:
        """
        Convert to an integer for Discord API calls.

        Returns:
            int: The snowflake ID as an integer.
        """
        return int(self._value)

    def __int__(self) -> int:
        return int(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Snowflake):
            return type(self) is type(other) and self._value == other._value
        if isinstance(other, str):
            return self._value == other
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))


class UserID(Snowflake):
    """Snowflake ID of a Discord user or member."""

    __slots__ = ()

    @classmethod
    def from_user(cls, user: Union[discord.Member, discord.User]) -> "UserID":
        """Create a UserID from a Discord Member or User object."""
        return cls(user.id)


class GuildID(Snowflake):
    """Snowflake ID of a Discord guild."""

    __slots__ = ()

    @classmethod
    def from_guild(cls, guild: discord.Guild) -> "GuildID":
        """Create a GuildID from a Discord Guild object."""
        return cls(guild.id)
