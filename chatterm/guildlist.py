"""The list of guilds the user is a member of."""

from __future__ import annotations

import re
from typing import Callable, Iterable, Optional

from chatterm.models import Guild
from chatterm.tree import TreeNode

_TAG_PATTERN = re.compile(r'(\[[a-zA-Z0-9_,;: \-\."#]+\[*)\]')


def _escape(text: str) -> str:
    """Escape bracketed sequences so they are not read as style tags."""
    return _TAG_PATTERN.sub(r"\1[]", text)


GuildSelectHandler = Callable[[TreeNode, str], None]


class GuildList:
    """Holds one node per guild under a hidden root node."""

    def __init__(
        self,
        guilds: Iterable[Guild] = (),
        on_guild_added: Optional[Callable[[str, TreeNode], None]] = None,
    ) -> None:
        self.root = TreeNode("")
        self.current_node: Optional[TreeNode] = None
        self._on_guild_select: Optional[GuildSelectHandler] = None

        for guild in guilds:
            # Guilds without a name are incomplete; their creation event is still pending.
            if not guild.name:
                continue
            node = TreeNode(_escape(guild.name), guild.id)
            self.root.add_child(node)
            if on_guild_added is not None:
                on_guild_added(guild.id, node)

        if self.root.children:
            self.current_node = self.root

    def set_on_guild_select(self, handler: Optional[GuildSelectHandler]) -> None:
        self._on_guild_select = handler

    def select(self, node: TreeNode) -> None:
        """Trigger the selection handler for a node referencing a guild."""
        guild_id = node.reference
        if isinstance(guild_id, str) and self._on_guild_select is not None:
            self._on_guild_select(node, guild_id)

    def add_guild(self, guild_id: str, name: str) -> TreeNode:
        node = TreeNode(_escape(name), guild_id)
        self.root.add_child(node)
        return node

    def remove_guild(self, guild_id: str) -> None:
        for node in self.root.children:
            if node.reference == guild_id:
                self.root.remove_child(node)
                return

    def update_name(self, guild_id: str, new_name: str) -> None:
        for node in self.root.children:
            if node.reference == guild_id:
                node.text = _escape(new_name)
                return