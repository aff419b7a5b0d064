# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""NtrStore - the forest of root nodes produced by parsing or building.

NtrStore maps root keys to root NtrNode instances, keeping insertion order,
and resolves dotted paths across the whole forest.

Path Syntax:
    - 'root': a root node
    - 'root.child.grandchild': descend through child keys

Example:
    >>> store = NtrStore()
    >>> store.add_root(NtrNode('welcome').add_child(NtrNode('title', 'Hello')))
    >>> store.get_value('welcome.title')
    'Hello'
    >>> store.get_value('welcome.missing') is None
    True
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from ..exceptions import DuplicateKeyError
from ..node import NtrNode


class NtrStore:
    """An ordered collection of uniquely keyed root nodes.

    Iteration yields root nodes in insertion order, so writing a store
    always produces the same text.
    """

    __slots__ = ('_nodes',)

    def __init__(self, roots: Iterable[NtrNode] | None = None) -> None:
        """Initialize an NtrStore.

        Args:
            roots: Optional root nodes to add, in order.

        Raises:
            DuplicateKeyError: If two roots share a key.
        """
        self._nodes: dict[str, NtrNode] = {}
        if roots is not None:
            for node in roots:
                self.add_root(node)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"NtrStore({list(self._nodes.keys())})"

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NtrNode]:
        """Iterate over root nodes in insertion order."""
        return iter(self._nodes.values())

    def __contains__(self, path: str) -> bool:
        """Check if a root key or dotted path exists."""
        return self.get_node(path) is not None

    def __getitem__(self, path: str) -> str:
        """Return the value at path.

        Raises:
            KeyError: If the path does not resolve.
        """
        node = self.get_node(path)
        if node is None:
            raise KeyError(path)
        return node.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NtrStore):
            return NotImplemented
        return list(self._nodes.values()) == list(other._nodes.values())

    __hash__ = None  # type: ignore[assignment]

    # ==================== Roots ====================

    def add_root(self, node: NtrNode) -> None:
        """Add a root node.

        Raises:
            DuplicateKeyError: If a root with the same key exists.
        """
        if node.key in self._nodes:
            raise DuplicateKeyError(
                node.key, f"Root with key '{node.key}' already exists"
            )
        self._nodes[node.key] = node

    def get(self, key: str, default: NtrNode | None = None) -> NtrNode | None:
        """Return the root node with the given key, or default."""
        return self._nodes.get(key, default)

    def keys(self) -> list[str]:
        return list(self._nodes.keys())

    def values(self) -> list[NtrNode]:
        return list(self._nodes.values())

    def items(self) -> list[tuple[str, NtrNode]]:
        return list(self._nodes.items())

    @property
    def roots(self) -> list[NtrNode]:
        """Root nodes in insertion order."""
        return list(self._nodes.values())

    def clear(self) -> None:
        """Remove all roots."""
        self._nodes.clear()

    def update(self, other: NtrStore | Iterable[NtrNode]) -> None:
        """Add every root of other, in order.

        Keys are checked before anything is added, so a rejected update
        leaves this store unchanged.

        Raises:
            DuplicateKeyError: If a root key is already present.
        """
        incoming = list(other)
        seen: set[str] = set()
        for node in incoming:
            if node.key in self._nodes or node.key in seen:
                raise DuplicateKeyError(
                    node.key, f"Root with key '{node.key}' already exists"
                )
            seen.add(node.key)
        for node in incoming:
            self._nodes[node.key] = node

    def copy(self) -> NtrStore:
        """Return a deep copy sharing no nodes with this store."""
        return NtrStore(node.copy() for node in self._nodes.values())

    # ==================== Lookup ====================

    def get_node(self, path: str | None) -> NtrNode | None:
        """Resolve a dotted path to a node.

        The first segment names a root; each following segment names a
        child of the node reached so far.

        Args:
            path: Dotted path (e.g., 'error.404.title').

        Returns:
            The node, or None if path is empty or any segment is missing.
        """
        if not path:
            return None

        parts = path.split('.')
        node = self._nodes.get(parts[0])
        for part in parts[1:]:
            if node is None:
                break
            node = node.get_child(part)
        return node

    def get_value(self, path: str | None) -> str | None:
        """Return the value at path, or None if the path does not resolve.

        A node found with an empty value returns ''.
        """
        node = self.get_node(path)
        if node is None:
            return None
        return node.value

    # ==================== Walk and Conversion ====================

    def walk(self) -> Iterator[tuple[str, NtrNode]]:
        """Yield (path, node) for every node of the forest, depth-first.

        Example:
            >>> [path for path, _ in store.walk()]
            ['welcome', 'welcome.title']
        """
        for node in self._nodes.values():
            yield from node.walk()

    def as_dict(self) -> dict[str, Any]:
        """Convert to nested dicts (see NtrNode.as_dict)."""
        return {key: node.as_dict() for key, node in self._nodes.items()}
