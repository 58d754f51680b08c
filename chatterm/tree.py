"""A simple tree of labelled nodes, as shown in list widgets."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Tuple


class TreeNode:
    """A node with display text, an optional reference and child nodes."""

    def __init__(
        self,
        text: str = "",
        reference: Any = None,
        *,
        selectable: bool = True,
        color: Optional[int] = None,
    ) -> None:
        self.text = text
        self.reference = reference
        self.selectable = selectable
        self.color = color
        self.parent: Optional[TreeNode] = None
        self._children: list[TreeNode] = []

    def __repr__(self) -> str:
        return f"TreeNode(text={self.text!r}, reference={self.reference!r})"

    @property
    def children(self) -> Tuple[TreeNode, ...]:
        return tuple(self._children)

    @children.setter
    def children(self, nodes: Iterable[TreeNode]) -> None:
        for child in self._children:
            child.parent = None
        self._children = list(nodes)
        for child in self._children:
            child.parent = self

    def add_child(self, node: TreeNode) -> TreeNode:
        """Append a child and return this node, so calls can be chained."""
        node.parent = self
        self._children.append(node)
        return self

    def remove_child(self, node: TreeNode) -> None:
        """Remove a direct child; raises ValueError if it is not one."""
        for index, child in enumerate(self._children):
            if child is node:
                del self._children[index]
                node.parent = None
                return
        raise ValueError(f"{node!r} is not a child of {self!r}")

    def clear_children(self) -> None:
        self.children = ()

    def walk(self, visitor: Callable[[TreeNode, Optional[TreeNode]], bool]) -> TreeNode:
        """Visit this node and its descendants depth first.

        ``visitor(node, parent)`` returning False skips that node's children.
        """
        self._walk(visitor, None)
        return self

    def _walk(self, visitor: Callable[[TreeNode, Optional[TreeNode]], bool], parent: Optional[TreeNode]) -> None:
        if visitor(self, parent):
            for child in list(self._children):
                child._walk(visitor, self)

    def find(self, reference: Any) -> Optional[TreeNode]:
        """Return the first node in this subtree whose reference equals ``reference``."""
        found: list[TreeNode] = []

        def visit(node: TreeNode, _parent: Optional[TreeNode]) -> bool:
            if found:
                return False
            if node.reference == reference:
                found.append(node)
                return False
            return True

        self.walk(visit)
        return found[0] if found else None