import pytest

from modcase.datatypes.action_datatypes import CommandInvocation, ModerationRequest
from modcase.datatypes.discord_datatypes import GuildID, UserID
from modcase.datatypes.outcome_datatypes import AuthorizationDecision
from modcase.moderation.authorization_gate import AuthorizationGate
from modcase.moderation.moderation_errors import NotInGuildContext, TargetNotInGuild

from fakes import FakeGuild, FakeMember, FakePlatform

GUILD = FakeGuild(500)


@pytest.fixture
def platform():
    platform = FakePlatform()
    platform.add_member(GUILD, FakeMember(10, rank=5, kick_members=True))
    platform.add_member(GUILD, FakeMember(20, rank=1))
    return platform


def test_check_context_rejects_direct_messages(platform):
    gate = AuthorizationGate(platform)
    with pytest.raises(NotInGuildContext):
        gate.check_context(CommandInvocation(invoker=FakeMember(10), guild=None))


def test_check_context_returns_invoker(platform):
    invoker = platform.members[(500, 10)]
    gate = AuthorizationGate(platform)

    assert gate.check_context(CommandInvocation(invoker=invoker, guild=GUILD)) is invoker


def test_check_capability(platform):
    gate = AuthorizationGate(platform)

    assert gate.check_capability(platform.members[(500, 10)]) is AuthorizationDecision.AUTHORIZED
    assert gate.check_capability(platform.members[(500, 20)]) is AuthorizationDecision.INSUFFICIENT_PRIVILEGE


def test_check_target_requires_strictly_higher_rank(platform):
    gate = AuthorizationGate(platform)
    moderator = platform.members[(500, 10)]
    peer = FakeMember(30, rank=5)

    assert gate.check_target(moderator, platform.members[(500, 20)]) is AuthorizationDecision.AUTHORIZED
    assert gate.check_target(moderator, peer) is AuthorizationDecision.CANNOT_INTERACT_WITH_TARGET


def test_resolve_target(platform):
    gate = AuthorizationGate(platform)
    request = ModerationRequest(UserID(10), GuildID(500), UserID(20), "spam")

    assert gate.resolve_target(request) is platform.members[(500, 20)]


def test_resolve_target_that_left(platform):
    gate = AuthorizationGate(platform)
    request = ModerationRequest(UserID(10), GuildID(500), UserID(99), "spam")

    with pytest.raises(TargetNotInGuild):
        gate.resolve_target(request)


def test_decision_allowed_flag():
    assert AuthorizationDecision.AUTHORIZED.allowed
    assert not AuthorizationDecision.INSUFFICIENT_PRIVILEGE.allowed
    assert not AuthorizationDecision.CANNOT_INTERACT_WITH_TARGET.allowed
