# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""NtrWriter - serialize a forest of NtrNode back to NTR text."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO, Iterable, Iterator, Mapping

from .exceptions import NtrIOError
from .node import NtrNode
from .store import NtrStore
from .syntax import COMMENT_MARKER, INDENT, format_entry

logger = logging.getLogger(__name__)


class NtrWriter:
    """Regenerates canonical NTR text from root nodes.

    Output layout:
    - optional ``@comment`` header followed by a blank line
    - each root block, depth-first, ``indent`` repeated once per level
    - one blank line between root blocks

    Example:
        >>> writer = NtrWriter(store).set_comment('Messages')
        >>> print(writer.write_to_string())
        @Messages
        <BLANKLINE>
        welcome
          title>Hello
        <BLANKLINE>
    """

    def __init__(
        self,
        roots: NtrStore | Mapping[str, NtrNode] | Iterable[NtrNode],
        comment: str | None = None,
        indent: str = INDENT,
    ) -> None:
        """Initialize an NtrWriter.

        Args:
            roots: An NtrStore, a mapping of key to root node, or root nodes.
            comment: Optional header comment, without the leading '@'.
            indent: String emitted once per depth level.
        """
        if isinstance(roots, (NtrStore, Mapping)):
            self._roots = list(roots.values())
        else:
            self._roots = list(roots)
        self.comment = comment
        self.indent = indent

    def set_comment(self, comment: str | None) -> NtrWriter:
        """Set the header comment. Returns self for chaining."""
        self.comment = comment
        return self

    # ==================== Rendering ====================

    def iter_lines(self) -> Iterator[str]:
        """Yield output lines without line terminators."""
        comment_lines = self.comment.splitlines() if self.comment else []
        if comment_lines:
            for part in comment_lines:
                yield f"{COMMENT_MARKER}{part}"
            yield ''

        for i, node in enumerate(self._roots):
            if i:
                yield ''
            yield from self._node_lines(node, 0)

    def _node_lines(self, node: NtrNode, level: int) -> Iterator[str]:
        yield f"{self.indent * level}{format_entry(node.key, node.value)}"
        for child in node:
            yield from self._node_lines(child, level + 1)

    def write_to_string(self) -> str:
        """Render to a string, each line terminated by a newline."""
        return ''.join(f"{line}\n" for line in self.iter_lines())

    # ==================== Output ====================

    def write_to_stream(
        self,
        stream: IO[str] | IO[bytes],
        encoding: str = 'utf-8',
        target: str = '<stream>',
    ) -> None:
        """Write to a text or binary stream. The stream is not closed.

        Raises:
            NtrIOError: If the stream rejects the write.
        """
        text = self.write_to_string()
        try:
            if _is_binary(stream):
                stream.write(text.encode(encoding))
            else:
                stream.write(text)
        except (OSError, UnicodeError) as exc:
            raise NtrIOError('write', target) from exc

    def write_to_file(self, path: str | Path, encoding: str = 'utf-8') -> None:
        """Write to a file, replacing its content.

        Raises:
            NtrIOError: If the file cannot be opened or written.
        """
        logger.info("Writing NTR file: %s", path)
        try:
            stream = open(path, 'w', encoding=encoding)
        except OSError as exc:
            raise NtrIOError('write', str(path)) from exc
        with stream:
            self.write_to_stream(stream, encoding=encoding, target=str(path))


def _is_binary(stream: IO[str] | IO[bytes]) -> bool:
    """True for byte streams; wrappers are judged by their mode."""
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    if isinstance(stream, io.TextIOBase):
        return False
    return 'b' in getattr(stream, 'mode', '')
