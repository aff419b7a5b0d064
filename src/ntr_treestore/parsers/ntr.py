# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parser for NTR indentation-based key-value text.

Structure is carried by indentation alone. Each line is compared with the
indentation of the previous non-skipped line:

- indentation 0: a new root; the cursor restarts from it
- deeper: a child of the current node
- same: a sibling of the current node
- shallower: climb ``(previous - current) // unit + 1`` levels, then add
  a child to the node reached

Blank lines and lines starting with ``@`` are skipped and never touch the
cursor.

Example:
    >>> parser = NtrParser()
    >>> parser.parse_string('welcome\\n  title>Hello\\n  message>Welcome!\\n')
    NtrParser(['welcome'])
    >>> parser.get_value('welcome.title')
    'Hello'
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Iterable

from ..exceptions import (
    DuplicateKeyError,
    InvalidStateError,
    NtrError,
    NtrIOError,
    NtrParseError,
)
from ..node import NtrNode
from ..store import NtrStore
from ..syntax import COMMENT_MARKER, DEFAULT_INDENT_UNIT, leading_whitespace, split_entry

logger = logging.getLogger(__name__)


class NtrParser:
    """Line-oriented NTR parser.

    Roots accumulate across parse calls until clear() is called. A call
    that fails adds none of its roots.

    Attributes:
        indent_unit: Whitespace characters per depth level, or None to use
            the first non-zero indentation seen in each call.
    """

    def __init__(self, indent_unit: int | None = None) -> None:
        """Initialize an NtrParser.

        Args:
            indent_unit: Fixed indentation step. None detects it per call.

        Raises:
            ValueError: If indent_unit is not a positive integer.
        """
        if indent_unit is not None and indent_unit < 1:
            raise ValueError(f"indent_unit must be positive, got {indent_unit}")
        self.indent_unit = indent_unit
        self._store = NtrStore()

    def __repr__(self) -> str:
        return f"NtrParser({self._store.keys()})"

    # ==================== Parsing ====================

    def parse_lines(self, lines: Iterable[str]) -> NtrParser:
        """Parse a sequence of lines.

        Args:
            lines: Text lines, with or without line terminators.

        Returns:
            This parser, for chaining.

        Raises:
            NtrParseError: At the first line that cannot be placed. The
                structural error is available as ``cause``.
        """
        staged = NtrStore()
        stack: list[NtrNode] = []
        unit = self.indent_unit
        prev_indent = 0
        line_number = 0

        for line_number, raw in enumerate(lines, start=1):
            line = raw.rstrip('\r\n')
            text = line.strip()
            if not text or text.startswith(COMMENT_MARKER):
                continue

            indentation = leading_whitespace(line)
            if unit is None and indentation > 0:
                unit = indentation

            try:
                key, value = split_entry(text)
                self._place(
                    NtrNode(key, value), indentation, prev_indent,
                    unit or DEFAULT_INDENT_UNIT, stack, staged,
                )
            except NtrError as exc:
                raise NtrParseError(
                    f"Error parsing line {line_number}: {line}",
                    line_number=line_number,
                    line=line,
                    cause=exc,
                ) from exc

            prev_indent = indentation

        self._store.update(staged)
        logger.debug("Parsed %d lines, added roots %s", line_number, staged.keys())
        return self

    def _place(
        self,
        node: NtrNode,
        indentation: int,
        prev_indent: int,
        unit: int,
        stack: list[NtrNode],
        staged: NtrStore,
    ) -> None:
        """Attach node to the tree and move the cursor onto it."""
        if indentation == 0:
            if self._store.get(node.key) is not None:
                raise DuplicateKeyError(
                    node.key, f"Root with key '{node.key}' already exists"
                )
            staged.add_root(node)
            stack[:] = [node]
            return

        if indentation > prev_indent:
            if not stack:
                raise InvalidStateError("Indented line has no parent node")
            stack[-1].add_child(node)
            stack.append(node)
        elif indentation == prev_indent:
            if len(stack) < 2:
                raise InvalidStateError("Indented line has no parent node")
            stack[-2].add_child(node)
            stack[-1] = node
        else:
            levels_up = (prev_indent - indentation) // unit + 1
            for _ in range(levels_up):
                if len(stack) <= 1:
                    break
                stack.pop()
            if not stack:
                raise InvalidStateError("Indented line has no parent node")
            stack[-1].add_child(node)
            stack.append(node)

    def parse_string(self, content: str) -> NtrParser:
        """Parse NTR text held in a string."""
        return self.parse_lines(content.splitlines())

    def parse_stream(
        self,
        stream: IO[str] | IO[bytes],
        encoding: str = 'utf-8',
        target: str = '<stream>',
    ) -> NtrParser:
        """Parse NTR text from a text or binary stream.

        Args:
            stream: Open stream; bytes lines are decoded with encoding.
            encoding: Encoding for binary streams.
            target: Name used in I/O error messages.

        Raises:
            NtrIOError: If reading or decoding fails.
            NtrParseError: If a line cannot be parsed.
        """
        def _lines() -> Iterable[str]:
            for raw in stream:
                yield raw.decode(encoding) if isinstance(raw, bytes) else raw

        try:
            return self.parse_lines(_lines())
        except (OSError, UnicodeError) as exc:
            raise NtrIOError('read', target) from exc

    def parse_file(self, path: str | Path, encoding: str = 'utf-8') -> NtrParser:
        """Parse an NTR file.

        Raises:
            NtrIOError: If the file cannot be opened or read.
            NtrParseError: If a line cannot be parsed.
        """
        logger.info("Parsing NTR file: %s", path)
        try:
            stream = open(path, encoding=encoding)
        except OSError as exc:
            raise NtrIOError('read', str(path)) from exc
        with stream:
            return self.parse_stream(stream, encoding=encoding, target=str(path))

    # ==================== Lookup ====================

    @property
    def store(self) -> NtrStore:
        """The accumulated forest (live, not a copy)."""
        return self._store

    @property
    def root_nodes(self) -> dict[str, NtrNode]:
        """Mapping of root key to root node (a new dict each call)."""
        return dict(self._store.items())

    def get_node(self, path: str | None) -> NtrNode | None:
        """Return the node at a dotted path, or None."""
        return self._store.get_node(path)

    def get_value(self, path: str | None) -> str | None:
        """Return the value at a dotted path, or None."""
        return self._store.get_value(path)

    def clear(self) -> NtrParser:
        """Drop all parsed roots."""
        self._store.clear()
        return self


def parse_ntr(content: str, indent_unit: int | None = None) -> NtrStore:
    """Parse NTR text into a new NtrStore.

    Example:
        >>> store = parse_ntr('a\\n  b\\n    c>v\\n')
        >>> store.get_value('a.b.c')
        'v'
    """
    return NtrParser(indent_unit=indent_unit).parse_string(content).store


def parse_ntr_file(
    path: str | Path,
    encoding: str = 'utf-8',
    indent_unit: int | None = None,
) -> NtrStore:
    """Parse an NTR file into a new NtrStore."""
    return NtrParser(indent_unit=indent_unit).parse_file(path, encoding=encoding).store
