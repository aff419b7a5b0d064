# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Lexical constants of the NTR text format.

NTR lines look like::

    @comment
    root
      key>value
      branch
        leaf>text
"""

from __future__ import annotations

COMMENT_MARKER = '@'
SEPARATOR = '>'
INDENT = '  '
DEFAULT_INDENT_UNIT = len(INDENT)


def leading_whitespace(line: str) -> int:
    """Count leading whitespace characters (spaces and tabs count as one each)."""
    count = 0
    for char in line:
        if not char.isspace():
            break
        count += 1
    return count


def split_entry(text: str) -> tuple[str, str]:
    """Split a stripped line into (key, value) at the first separator.

    Example:
        >>> split_entry('title > Hello')
        ('title', 'Hello')
        >>> split_entry('welcome')
        ('welcome', '')
    """
    key, sep, value = text.partition(SEPARATOR)
    if not sep:
        return text, ''
    return key.strip(), value.strip()


def format_entry(key: str, value: str) -> str:
    """Inverse of split_entry: omit the separator when value is empty."""
    if value:
        return f"{key}{SEPARATOR}{value}"
    return key


def key_problem(key: str) -> str | None:
    """Describe why key cannot be written as an NTR key, or None if it can."""
    if key != key.strip():
        return "Key cannot have leading or trailing whitespace"
    if len(key.splitlines()) > 1:
        return "Key cannot contain line breaks"
    if SEPARATOR in key:
        return f"Key cannot contain '{SEPARATOR}'"
    if key.startswith(COMMENT_MARKER):
        return f"Key cannot start with '{COMMENT_MARKER}'"
    return None


def value_problem(value: str) -> str | None:
    """Describe why value cannot be written as an NTR value, or None if it can."""
    if value != value.strip():
        return "Value cannot have leading or trailing whitespace"
    if len(value.splitlines()) > 1:
        return "Value cannot contain line breaks"
    return None
