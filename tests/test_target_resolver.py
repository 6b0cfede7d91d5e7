import pytest

from modcase.datatypes.action_datatypes import CommandInvocation
from modcase.datatypes.discord_datatypes import GuildID, UserID
from modcase.moderation.moderation_errors import MissingReason, NoTargetMentioned, NotInGuildContext
from modcase.moderation.target_resolver import TargetResolver

from fakes import FakeGuild, FakeMember


def make_invocation(arguments, mentions=(20,), guild=FakeGuild(500)):
    return CommandInvocation(
        invoker=FakeMember(10),
        guild=guild,
        mentioned_user_ids=[UserID(mention) for mention in mentions],
        arguments=arguments,
    )


def test_resolve_builds_request():
    request = TargetResolver().resolve(make_invocation("<@20> spamming links"))

    assert request.invoker_id == UserID(10)
    assert request.guild_id == GuildID(500)
    assert request.target_id == UserID(20)
    assert request.reason == "spamming links"


def test_resolve_uses_first_mention_only():
    request = TargetResolver().resolve(make_invocation("<@20> <@21> raid", mentions=(20, 21)))

    assert request.target_id == UserID(20)
    assert request.reason == "<@21> raid"


def test_resolve_ignores_order_of_message_mentions():
    request = TargetResolver().resolve(make_invocation("<@20> <@21> raid", mentions=(21, 20)))

    assert request.target_id == UserID(20)
    assert request.reason == "<@21> raid"


def test_resolve_accepts_nickname_mention():
    request = TargetResolver().resolve(make_invocation("<@!20> spam"))

    assert request.target_id == UserID(20)


@pytest.mark.parametrize(
    "arguments, mentions",
    [
        ("spamming", ()),
        ("spamming <@20>", (20,)),
        ("<@30> spamming", (20,)),
        ("", (20,)),
        ("   ", (20,)),
    ],
)
def test_resolve_without_leading_mention_fails(arguments, mentions):
    with pytest.raises(NoTargetMentioned):
        TargetResolver().resolve(make_invocation(arguments, mentions=mentions))


@pytest.mark.parametrize("arguments", ["<@20>", "<@20>   ", "<@!20>\n"])
def test_resolve_without_reason_fails(arguments):
    with pytest.raises(MissingReason):
        TargetResolver().resolve(make_invocation(arguments))


def test_resolve_outside_guild_fails():
    with pytest.raises(NotInGuildContext):
        TargetResolver().resolve(make_invocation("<@20> spam", guild=None))


def test_split_mention_keeps_inner_whitespace():
    assert TargetResolver.split_mention("<@20>  repeated   spam \n") == (UserID(20), "repeated   spam")
    assert TargetResolver.split_mention("hello there") == (None, "there")
