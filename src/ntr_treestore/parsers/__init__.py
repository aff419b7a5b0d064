# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parsers for populating an NtrStore from NTR text.

Example:
    >>> from ntr_treestore.parsers import parse_ntr, parse_ntr_file
    >>> store = parse_ntr_file('messages.ntr')
    >>> store['welcome.title']
"""

from .ntr import NtrParser, parse_ntr, parse_ntr_file

__all__ = [
    'NtrParser',
    'parse_ntr',
    'parse_ntr_file',
]
