# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""NtrNode - one entry of an NTR hierarchy."""

from __future__ import annotations

from typing import Any, Iterator

from .exceptions import DuplicateKeyError, InvalidKeyError, InvalidValueError
from .syntax import key_problem, value_problem


class NtrNode:
    """A node in an NTR hierarchy.

    Each node has:
    - key: The node's name, unique among its siblings
    - value: Opaque text, '' when the line carries no value
    - children: Ordered child nodes, also indexed by key

    Key and value are fixed at construction; children can only be added.

    Example:
        >>> node = NtrNode('welcome')
        >>> node.add_child(NtrNode('title', 'Hello'))
        NtrNode('welcome', children=1)
        >>> node.get_child('title').value
        'Hello'
    """

    __slots__ = ('_key', '_value', '_nodes', '_order')

    def __init__(self, key: str, value: str | None = '') -> None:
        """Initialize an NtrNode.

        Args:
            key: The node's key. Must be a non-empty string.
            value: The node's value. None is stored as ''.

        Raises:
            InvalidKeyError: If key is None, empty, padded with whitespace,
                spans lines, contains '>' or starts with '@'.
            InvalidValueError: If value is padded with whitespace or
                spans lines.
        """
        if not key:
            raise InvalidKeyError("Key cannot be empty")
        problem = key_problem(key)
        if problem:
            raise InvalidKeyError(f"{problem}: {key!r}")
        if value is None:
            value = ''
        problem = value_problem(value)
        if problem:
            raise InvalidValueError(f"{problem}: {value!r}")
        self._key = key
        self._value = value
        self._nodes: dict[str, NtrNode] = {}
        self._order: list[NtrNode] = []

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> str:
        return self._value

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        if self._value:
            return f"NtrNode({self._key!r}, {self._value!r}, children={len(self._order)})"
        return f"NtrNode({self._key!r}, children={len(self._order)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NtrNode):
            return NotImplemented
        return (
            self._key == other._key
            and self._value == other._value
            and self._order == other._order
        )

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[NtrNode]:
        """Iterate over children in insertion order."""
        return iter(self._order)

    def __contains__(self, key: str) -> bool:
        return key in self._nodes

    def __getitem__(self, key: str) -> NtrNode:
        return self._nodes[key]

    # ==================== Children ====================

    def add_child(self, child: NtrNode) -> NtrNode:
        """Append a child node.

        Args:
            child: The node to append.

        Returns:
            This node, for chaining.

        Raises:
            DuplicateKeyError: If a child with the same key already exists.
        """
        if child.key in self._nodes:
            raise DuplicateKeyError(child.key)
        self._nodes[child.key] = child
        self._order.append(child)
        return self

    def get_child(self, key: str) -> NtrNode | None:
        """Return the child with the given key, or None."""
        return self._nodes.get(key)

    @property
    def children(self) -> list[NtrNode]:
        """Children in insertion order (a copy)."""
        return list(self._order)

    @property
    def child_count(self) -> int:
        return len(self._order)

    @property
    def has_children(self) -> bool:
        return bool(self._order)

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self._order

    # ==================== Traversal and Conversion ====================

    def walk(self, _prefix: str = '') -> Iterator[tuple[str, NtrNode]]:
        """Yield (path, node) for this node and its descendants, depth-first.

        Example:
            >>> for path, node in root.walk():
            ...     print(path, node.value)
        """
        path = f"{_prefix}.{self._key}" if _prefix else self._key
        yield path, self
        for child in self._order:
            yield from child.walk(path)

    def copy(self) -> NtrNode:
        """Return a deep copy of this node and its subtree."""
        clone = NtrNode(self._key, self._value)
        for child in self._order:
            clone.add_child(child.copy())
        return clone

    def as_dict(self) -> Any:
        """Convert the subtree to plain Python data.

        Leaves become their value. Branches become dicts of their children,
        with the branch's own value under '_value' when it is not empty.
        """
        if not self._order:
            return self._value
        result: dict[str, Any] = {}
        if self._value:
            result['_value'] = self._value
        for child in self._order:
            result[child.key] = child.as_dict()
        return result
