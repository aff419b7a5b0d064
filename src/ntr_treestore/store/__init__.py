# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""NtrStore package - the forest container and dotted-path lookup.

Example:
    >>> from ntr_treestore import parse_ntr
    >>> store = parse_ntr('welcome\\n  title>Hello\\n')
    >>> store['welcome.title']
    'Hello'
"""

from .core import NtrStore

__all__ = ["NtrStore"]
