"""Chat data model: users, guilds, channels, messages and the cached state."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, List, Optional


class ChannelType(enum.IntEnum):
    GUILD_TEXT = 0
    DM = 1
    GUILD_VOICE = 2
    GROUP_DM = 3
    GUILD_CATEGORY = 4
    GUILD_NEWS = 5
    GUILD_STORE = 6


class MessageType(enum.IntEnum):
    DEFAULT = 0
    RECIPIENT_ADD = 1
    RECIPIENT_REMOVE = 2
    CALL = 3
    CHANNEL_NAME_CHANGE = 4
    CHANNEL_ICON_CHANGE = 5
    CHANNEL_PINNED_MESSAGE = 6
    GUILD_MEMBER_JOIN = 7
    USER_PREMIUM_GUILD_SUBSCRIPTION = 8
    USER_PREMIUM_GUILD_SUBSCRIPTION_TIER_1 = 9
    USER_PREMIUM_GUILD_SUBSCRIPTION_TIER_2 = 10
    USER_PREMIUM_GUILD_SUBSCRIPTION_TIER_3 = 11
    CHANNEL_FOLLOW_ADD = 12


class RelationType(enum.IntEnum):
    FRIEND = 1
    BLOCKED = 2
    INCOMING_REQUEST = 3
    OUTGOING_REQUEST = 4


class StateError(LookupError):
    """Raised when an entity is not present in the cached state."""


@dataclass
class User:
    id: str
    username: str = ""
    discriminator: str = ""
    bot: bool = False

    def display_name(self) -> str:
        return self.username


@dataclass
class Member:
    user: User
    guild_id: str = ""
    nick: str = ""
    roles: List[str] = field(default_factory=list)

    def display_name(self) -> str:
        """The nickname if one is set, otherwise the user's name."""
        return self.nick or self.user.display_name()


@dataclass
class Role:
    id: str
    name: str = ""
    position: int = 0
    hoist: bool = False
    color: int = 0


@dataclass
class Attachment:
    url: str


@dataclass
class Message:
    id: str = ""
    channel_id: str = ""
    guild_id: str = ""
    content: str = ""
    timestamp: Optional[datetime] = None
    author: User = field(default_factory=lambda: User(id=""))
    type: MessageType = MessageType.DEFAULT
    mentions: List[User] = field(default_factory=list)
    mention_roles: List[str] = field(default_factory=list)
    mention_everyone: bool = False
    attachments: List[Attachment] = field(default_factory=list)


@dataclass
class Channel:
    id: str
    type: ChannelType = ChannelType.GUILD_TEXT
    name: str = ""
    guild_id: str = ""
    topic: str = ""
    recipients: List[User] = field(default_factory=list)
    last_message_id: str = ""
    messages: List[Message] = field(default_factory=list)

    def private_name(self) -> str:
        """Name shown for a private channel: its own name or its recipients."""
        if self.name:
            return self.name
        return ", ".join(user.display_name() for user in self.recipients)


@dataclass
class Guild:
    id: str
    name: str = ""
    roles: List[Role] = field(default_factory=list)
    members: List[Member] = field(default_factory=list)
    channels: List[Channel] = field(default_factory=list)


@dataclass
class Relationship:
    id: str
    type: RelationType
    user: User


@dataclass
class State:
    """Cached view of everything the client knows about."""

    user: Optional[User] = None
    guilds: List[Guild] = field(default_factory=list)
    private_channels: List[Channel] = field(default_factory=list)
    relationships: List[Relationship] = field(default_factory=list)

    def _all_channels(self) -> Iterator[Channel]:
        yield from self.private_channels
        for guild in self.guilds:
            yield from guild.channels

    def channel(self, channel_id: str) -> Channel:
        for channel in self._all_channels():
            if channel.id == channel_id:
                return channel
        raise StateError(f"channel {channel_id} not found")

    def private_channel(self, channel_id: str) -> Channel:
        for channel in self.private_channels:
            if channel.id == channel_id:
                return channel
        raise StateError(f"private channel {channel_id} not found")

    def guild(self, guild_id: str) -> Guild:
        for guild in self.guilds:
            if guild.id == guild_id:
                return guild
        raise StateError(f"guild {guild_id} not found")

    def members(self, guild_id: str) -> List[Member]:
        return self.guild(guild_id).members

    def member(self, guild_id: str, user_id: str) -> Member:
        for member in self.guild(guild_id).members:
            if member.user.id == user_id:
                return member
        raise StateError(f"member {user_id} not found in guild {guild_id}")

    def role(self, guild_id: str, role_id: str) -> Role:
        for role in self.guild(guild_id).roles:
            if role.id == role_id:
                return role
        raise StateError(f"role {role_id} not found in guild {guild_id}")