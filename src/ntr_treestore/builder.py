# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""NtrBuilder - build an NTR forest programmatically."""

from __future__ import annotations

from .exceptions import InvalidStateError, UnknownRootError
from .node import NtrNode
from .store import NtrStore
from .writer import NtrWriter


class NtrBuilder:
    """Cursor-based builder producing the same forest the parser would.

    The cursor is the path from a root to the current node. add_child()
    descends, parent() climbs, sibling() moves sideways, and add_root()
    or navigate_to_root() restart from a root. Every method returns the
    builder for chaining.

    Example:
        >>> builder = NtrBuilder()
        >>> (builder.add_root('welcome')
        ...     .add_child('title', 'Hello')
        ...     .sibling('message', 'Welcome!'))
        NtrBuilder(path='welcome.message')
        >>> builder.build().get_value('welcome.message')
        'Welcome!'
    """

    __slots__ = ('_store', '_stack')

    def __init__(self) -> None:
        self._store = NtrStore()
        self._stack: list[NtrNode] = []

    def __repr__(self) -> str:
        return f"NtrBuilder(path={self.path!r})"

    # ==================== Cursor ====================

    @property
    def current(self) -> NtrNode | None:
        """The node under the cursor, or None before the first root."""
        return self._stack[-1] if self._stack else None

    @property
    def depth(self) -> int:
        """Number of nodes on the cursor path (0 before the first root)."""
        return len(self._stack)

    @property
    def path(self) -> str:
        """Dotted path of the current node ('' before the first root)."""
        return '.'.join(node.key for node in self._stack)

    # ==================== Construction ====================

    def add_root(self, key: str, value: str = '') -> NtrBuilder:
        """Add a root and make it current.

        Raises:
            DuplicateKeyError: If a root with this key already exists.
            InvalidKeyError: If key is empty.
        """
        node = NtrNode(key, value)
        self._store.add_root(node)
        self._stack = [node]
        return self

    def add_child(self, key: str, value: str = '') -> NtrBuilder:
        """Add a child to the current node and descend into it.

        Raises:
            InvalidStateError: If no root has been added yet.
            DuplicateKeyError: If the current node has a child with this key.
        """
        if not self._stack:
            raise InvalidStateError("No current node. Call add_root() first.")
        node = NtrNode(key, value)
        self._stack[-1].add_child(node)
        self._stack.append(node)
        return self

    def parent(self) -> NtrBuilder:
        """Move to the parent of the current node; stays put at a root."""
        if len(self._stack) > 1:
            self._stack.pop()
        return self

    def sibling(self, key: str, value: str = '') -> NtrBuilder:
        """Add a node next to the current one and make it current.

        At a root (or before any root) this is add_root().
        """
        if len(self._stack) <= 1:
            return self.add_root(key, value)
        node = NtrNode(key, value)
        self._stack[-2].add_child(node)
        self._stack[-1] = node
        return self

    def navigate_to_root(self, key: str) -> NtrBuilder:
        """Make an existing root current.

        Raises:
            UnknownRootError: If no root has this key.
        """
        node = self._store.get(key)
        if node is None:
            raise UnknownRootError(key)
        self._stack = [node]
        return self

    # ==================== Output ====================

    def build(self) -> NtrStore:
        """Return an independent copy of the forest built so far."""
        return self._store.copy()

    def create_writer(self, comment: str | None = None) -> NtrWriter:
        """Return a writer over a snapshot of the current forest."""
        return NtrWriter(self.build(), comment=comment)
