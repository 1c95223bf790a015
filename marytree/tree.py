"""An m-ary tree whose nodes can be locked, unlocked and upgraded by users."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A named node of a locking tree."""

    name: str
    parent: Node | None = field(default=None, repr=False)
    children: list[Node] = field(default_factory=list, repr=False)
    locked_by: int | None = None
    locked_descendants: int = 0
    mutex: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def is_locked(self) -> bool:
        return self.locked_by is not None

    def ancestors(self) -> Iterator[Node]:
        """Yield the parent, the grandparent and so on up to the root."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent


class LockingTree:
    """A fully balanced m-ary tree supporting lock, unlock and upgrade."""

    def __init__(self, names: Iterable[str], arity: int) -> None:
        if arity < 1:
            raise ValueError(f"arity must be at least 1, got {arity}")
        nodes = [Node(name) for name in names]
        self._nodes: dict[str, Node] = {}
        for node in nodes:
            if node.name in self._nodes:
                raise ValueError(f"duplicate node name: {node.name!r}")
            self._nodes[node.name] = node
        for position, child in enumerate(nodes[1:], start=1):
            parent = nodes[(position - 1) // arity]
            child.parent = parent
            parent.children.append(child)

    def __getitem__(self, name: str) -> Node:
        try:
            return self._nodes[name]
        except KeyError:
            raise KeyError(f"no node named {name!r}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    @staticmethod
    def _adjust_ancestors(node: Node, change: int) -> None:
        for ancestor in node.ancestors():
            ancestor.locked_descendants += change

    def _acquire(self, node: Node, uid: int) -> None:
        node.locked_by = uid
        self._adjust_ancestors(node, 1)

    def _release(self, node: Node) -> None:
        node.locked_by = None
        self._adjust_ancestors(node, -1)

    def _collect_locked(self, node: Node, uid: int, found: list[Node]) -> bool:
        """Gather nodes locked by ``uid`` in pre-order; fail on another user's lock.

        Each subtree reports success only once at least one lock has been
        gathered so far in the walk.
        """
        if node.is_locked:
            if node.locked_by != uid:
                return False
            found.append(node)
        return all(self._collect_locked(child, uid, found) for child in node.children) and bool(found)

    def lock(self, name: str, uid: int) -> bool:
        """Lock ``name`` for ``uid`` if it, its ancestors and descendants are all free."""
        node = self[name]
        with node.mutex:
            if (
                node.is_locked
                or node.locked_descendants > 0
                or any(ancestor.is_locked for ancestor in node.ancestors())
            ):
                return False
            self._acquire(node, uid)
            return True

    def unlock(self, name: str, uid: int) -> bool:
        """Unlock ``name`` if ``uid`` holds its lock."""
        node = self[name]
        with node.mutex:
            if not node.is_locked or node.locked_by != uid:
                return False
            self._release(node)
            return True

    def upgrade(self, name: str, uid: int) -> bool:
        """Replace the descendant locks held by ``uid`` with one lock on ``name``."""
        node = self[name]
        with node.mutex:
            if node.is_locked or node.locked_descendants == 0:
                return False
            held: list[Node] = []
            if not self._collect_locked(node, uid, held):
                return False
            for descendant in held:
                self._release(descendant)
            self._acquire(node, uid)
            return True