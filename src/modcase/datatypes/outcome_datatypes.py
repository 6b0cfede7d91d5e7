"""
Tagged outcome values produced by the kick workflow steps.

Every remote call made by the workflow settles into one of these values instead of
raising past its step. The orchestrator pattern-matches on them to pick the reply and
side effects for the invoker.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

import discord


class AuthorizationDecision(Enum):
    """Result of checking the invoker's authority over the target."""

    AUTHORIZED = "authorized"
    INSUFFICIENT_PRIVILEGE = "insufficient_privilege"
    CANNOT_INTERACT_WITH_TARGET = "cannot_interact_with_target"

    @property
    def allowed(self) -> bool:
        return self is AuthorizationDecision.AUTHORIZED


@dataclass(slots=True, frozen=True)
class Delivered:
    """The kick notice reached the target.

    ``message`` is only kept so the notice can be deleted if the kick fails; the
    workflow does not own the remote message.
    """
    message: discord.Message


@dataclass(slots=True, frozen=True)
class Undeliverable:
    """The kick notice could not be delivered (DMs closed, channel open failed, ...)."""
    cause: Exception


@dataclass(slots=True, frozen=True)
class Applied:
    """The kick was applied."""


@dataclass(slots=True, frozen=True)
class Failed:
    """The kick call failed."""
    cause: Exception


@dataclass(slots=True, frozen=True)
class Sent:
    """Feedback reached the invoker."""
    message: discord.Message | None = None


@dataclass(slots=True, frozen=True)
class NotSent:
    """Feedback could not be delivered to the invoker."""
    cause: Exception | None = None


NotificationOutcome = Union[Delivered, Undeliverable]
ActionOutcome = Union[Applied, Failed]
DeliveryResult = Union[Sent, NotSent]


def describe_failure(cause: BaseException) -> str:
    """Render a failure cause as ``ExceptionName: message``."""
    detail = str(cause)
    name = type(cause).__name__
    return f"{name}: {detail}" if detail else name
