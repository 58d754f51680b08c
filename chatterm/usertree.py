"""The list of users in a guild or group channel, grouped by hoisted roles."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional

from chatterm.models import Member, Role, State, User
from chatterm.tree import TreeNode

UserColor = Callable[[User], str]


class UserTree:
    """Shows users under a hidden root, members grouped by hoisted role."""

    def __init__(self, state: State, user_color: Optional[UserColor] = None) -> None:
        self.state = state
        self.root = TreeNode("")
        self.current_node: Optional[TreeNode] = None
        self._user_color = user_color
        self._user_nodes: Dict[str, TreeNode] = {}
        self._role_nodes: Dict[str, TreeNode] = {}
        self._roles: List[Role] = []

    def clear(self) -> None:
        """Remove all nodes and cached data."""
        for role_node in self._role_nodes.values():
            role_node.clear_children()
        self._user_nodes = {}
        self._role_nodes = {}
        self._roles = []
        self.root.clear_children()
        self.current_node = None

    def load_group(self, channel_id: str) -> None:
        """Load the recipients of a group channel; raises StateError if unknown."""
        self.clear()
        channel = self.state.private_channel(channel_id)
        self.add_or_update_users(channel.recipients)
        self._select_first_node()

    def load_guild(self, guild_id: str) -> None:
        """Load the roles and members of a guild; raises StateError if unknown."""
        self.clear()
        self._roles = self._load_guild_roles(guild_id)
        self.add_or_update_members(self.state.members(guild_id))
        self._select_first_node()

    def _select_first_node(self) -> None:
        if self.current_node is None and self.root.children:
            self.current_node = self.root.children[0]

    def _load_guild_roles(self, guild_id: str) -> List[Role]:
        guild = self.state.guild(guild_id)
        roles = sorted(guild.roles, key=lambda role: role.position, reverse=True)
        for role in roles:
            if role.hoist:
                role_node = TreeNode(role.name, selectable=False)
                self._role_nodes[role.id] = role_node
                self.root.add_child(role_node)
        return roles

    def _decorate(self, name: str, user: User) -> str:
        if self._user_color is None:
            return name
        return "[" + self._user_color(user) + "]" + name

    def _sorted_role_ids(self, role_ids: Iterable[str]) -> List[str]:
        rank = {role.id: index for index, role in enumerate(self._roles)}
        return sorted(role_ids, key=lambda role_id: rank.get(role_id, len(rank)))

    def add_or_update_member(self, member: Member) -> None:
        """Add a member under its highest hoisted role, or rename its node."""
        name = self._decorate(member.display_name(), member.user)

        existing = self._user_nodes.get(member.user.id)
        if existing is not None:
            existing.text = name
            return

        user_node = TreeNode(name)
        self._user_nodes[member.user.id] = user_node

        for role_id in self._sorted_role_ids(member.roles):
            role_node = self._role_nodes.get(role_id)
            if role_node is not None:
                role_node.add_child(user_node)
                return

        self.root.add_child(user_node)

    def add_or_update_members(self, members: Iterable[Member]) -> None:
        for member in members:
            self.add_or_update_member(member)

    def add_or_update_user(self, user: User) -> None:
        """Add a user directly under the root, or rename its node."""
        name = self._decorate(user.display_name(), user)

        existing = self._user_nodes.get(user.id)
        if existing is not None:
            existing.text = name
            return

        user_node = TreeNode(name)
        self._user_nodes[user.id] = user_node
        self.root.add_child(user_node)

    def add_or_update_users(self, users: Iterable[User]) -> None:
        for user in users:
            self.add_or_update_user(user)

    def remove_member(self, member: Member) -> None:
        """Detach the member's node from wherever it sits in the tree."""
        user_node = self._user_nodes.get(member.user.id)
        if user_node is not None and user_node.parent is not None:
            user_node.parent.remove_child(user_node)

    def remove_members(self, members: Iterable[Member]) -> None:
        for member in members:
            self.remove_member(member)