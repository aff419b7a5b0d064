# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""NTR-TreeStore - Parse, query, build and write NTR hierarchical text.

NTR is a small indentation-based key-value format::

    @Messages
    welcome
      title>Hello
      message>Welcome!

A lightweight, zero-dependency library for NTR documents.
"""

__version__ = "0.1.0"

from .builder import NtrBuilder
from .exceptions import (
    DuplicateKeyError,
    InvalidKeyError,
    InvalidStateError,
    InvalidValueError,
    NtrError,
    NtrIOError,
    NtrParseError,
    UnknownRootError,
)
from .node import NtrNode
from .parsers import NtrParser, parse_ntr, parse_ntr_file
from .store import NtrStore
from .writer import NtrWriter

__all__ = [
    # Core classes
    "NtrNode",
    "NtrStore",
    # Parsing and writing
    "NtrParser",
    "NtrWriter",
    "parse_ntr",
    "parse_ntr_file",
    # Builder
    "NtrBuilder",
    # Exceptions
    "NtrError",
    "InvalidKeyError",
    "InvalidValueError",
    "DuplicateKeyError",
    "InvalidStateError",
    "UnknownRootError",
    "NtrParseError",
    "NtrIOError",
]
