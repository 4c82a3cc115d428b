"""Behaviour shared by every entry of a node tree."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

from .output import RenderOutput
from .variables import Environment

if TYPE_CHECKING:
    from .nodes import Node


class ChildWriter(Protocol):
    """Contract the renderer relies on for every child of a node."""

    parent: Optional["Node"]

    def is_hidden(self) -> bool: ...

    def write(self, out: RenderOutput, env: Environment | None = None) -> int: ...

    def write_pretty(
        self, out: RenderOutput, indent: int, env: Environment | None = None
    ) -> int: ...


class TreeEntry:
    """Parent link plus navigation and detachment.

    The parent link never implies ownership: a node owns its children through
    its ``children`` list only.
    """

    def __init__(self) -> None:
        self.parent: Optional["Node"] = None

    def is_hidden(self) -> bool:
        return False

    def up(self, count: int = 1) -> Optional["Node"]:
        """Walk ``count`` parent links; counts below 1 count as 1.

        Returns None when the walk passes the root.
        """
        node = self.parent
        for _ in range(max(count, 1) - 1):
            if node is None:
                return None
            node = node.parent
        return node

    def remove_parent(self):
        """Detach from the parent, keeping the order of the remaining siblings."""
        parent = self.parent
        if parent is not None:
            parent._detach_child(self)
        self.parent = None
        return self
