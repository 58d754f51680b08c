import pytest

from chatterm.models import (
    Channel,
    ChannelType,
    Guild,
    Member,
    Role,
    State,
    StateError,
    User,
)


@pytest.fixture
def state():
    alice = User(id="1", username="alice", discriminator="0001")
    bob = User(id="2", username="bob", discriminator="0002")
    guild = Guild(
        id="g",
        name="guild",
        roles=[Role(id="r", name="mods")],
        members=[Member(user=alice, guild_id="g", nick="ally"), Member(user=bob, guild_id="g")],
        channels=[Channel(id="c", name="general", guild_id="g")],
    )
    dm = Channel(id="dm", type=ChannelType.DM, recipients=[bob])
    return State(user=alice, guilds=[guild], private_channels=[dm])


def test_member_display_name_prefers_nick(state):
    assert state.member("g", "1").display_name() == "ally"


def test_member_display_name_falls_back_to_username(state):
    member = state.member("g", "2")
    assert member.display_name() == member.user.username


def test_channel_lookup_covers_guild_and_private(state):
    assert state.channel("c").name == "general"
    assert state.channel("dm").type is ChannelType.DM


def test_private_channel_lookup_ignores_guild_channels(state):
    assert state.private_channel("dm").id == "dm"
    with pytest.raises(StateError):
        state.private_channel("c")


def test_missing_entities_raise(state):
    with pytest.raises(StateError):
        state.channel("missing")
    with pytest.raises(StateError):
        state.guild("missing")
    with pytest.raises(StateError):
        state.member("g", "missing")
    with pytest.raises(StateError):
        state.role("g", "missing")
    with pytest.raises(StateError):
        state.members("missing")


def test_state_error_is_lookup_error(state):
    with pytest.raises(LookupError):
        state.guild("missing")


def test_members_and_roles(state):
    assert [m.user.id for m in state.members("g")] == ["1", "2"]
    assert state.role("g", "r").name == "mods"


def test_private_name_prefers_channel_name():
    channel = Channel(id="x", type=ChannelType.GROUP_DM, name="crew", recipients=[User(id="1", username="a")])
    assert channel.private_name() == "crew"


def test_private_name_lists_recipients():
    channel = Channel(
        id="x",
        type=ChannelType.GROUP_DM,
        recipients=[User(id="1", username="a"), User(id="2", username="b")],
    )
    assert channel.private_name() == "a, b"