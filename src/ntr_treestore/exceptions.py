# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""NTR exceptions."""

from __future__ import annotations


class NtrError(Exception):
    """Base exception for NTR errors."""

    pass


class InvalidKeyError(NtrError, ValueError):
    """Raised when a node key is empty or cannot be written as NTR text."""

    pass


class InvalidValueError(NtrError, ValueError):
    """Raised when a node value cannot be written as NTR text."""

    pass


class DuplicateKeyError(NtrError, ValueError):
    """Raised when a key is added twice under the same parent or root set."""

    def __init__(self, key: str, message: str | None = None) -> None:
        self.key = key
        super().__init__(message or f"Child with key '{key}' already exists")


class InvalidStateError(NtrError, RuntimeError):
    """Raised when a builder operation needs a current node and there is none."""

    pass


class UnknownRootError(NtrError, LookupError):
    """Raised when navigating to a root key that does not exist."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No root node with key: {key}")


class NtrParseError(NtrError):
    """Raised when a line cannot be parsed.

    Attributes:
        line_number: 1-based number of the offending line, if known.
        line: The original, unstripped text of the offending line.
        cause: The structural error that triggered the failure, if any.
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.line = line
        self.cause = cause


class NtrIOError(NtrError):
    """Raised when reading or writing NTR text fails at the I/O level.

    Attributes:
        operation: 'read' or 'write'.
        target: Path or description of the source/destination.
    """

    def __init__(self, operation: str, target: str, message: str | None = None) -> None:
        self.operation = operation
        self.target = target
        super().__init__(message or f"Failed to {operation} NTR data: {target}")
