"""Applies the kick."""

from __future__ import annotations

from modcase.datatypes.action_datatypes import ModerationRequest
from modcase.datatypes.outcome_datatypes import ActionOutcome, Applied, Failed, describe_failure
from modcase.moderation.platform import ModerationPlatform
from modcase.util.logger import get_logger

logger = get_logger("action_executor")


class ActionExecutor:
    """Issues a single kick call for a request. There is no retry."""

    def __init__(self, platform: ModerationPlatform) -> None:
        self.platform = platform

    async def execute(self, request: ModerationRequest) -> ActionOutcome:
        try:
            await self.platform.kick(request.guild_id, request.target_id, request.reason)
        except Exception as exc:
            logger.warning(
                "[ACTION] Kick of user %s in guild %s failed: %s",
                request.target_id,
                request.guild_id,
                describe_failure(exc),
            )
            return Failed(exc)

        logger.info(
            "[ACTION] User %s kicked from guild %s by %s",
            request.target_id,
            request.guild_id,
            request.invoker_id,
        )
        return Applied()
