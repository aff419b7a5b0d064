# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Messages example - parse an NTR file, query it, and write a new one.

Usage:
    python messages.py [output.ntr]
"""

from __future__ import annotations

import logging
import sys

from ntr_treestore import NtrBuilder, parse_ntr

SOURCE = """\
@Welcome texts
welcome
  title>Welcome to our site
  message>Glad you are here!

@Error messages
error
  404
    title>Page not found
  500
    title>Server error
"""


def main(argv: list[str]) -> None:
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')

    store = parse_ntr(SOURCE)
    for path, node in store.walk():
        if node.value:
            print(f"{path} = {node.value}")

    builder = (
        NtrBuilder()
        .add_root('settings')
        .add_child('theme', 'dark')
        .sibling('language', 'en')
        .add_root('user')
        .add_child('profile')
        .add_child('name', 'Ada')
    )
    writer = builder.create_writer(comment='Generated settings')

    if len(argv) > 1:
        writer.write_to_file(argv[1])
    else:
        print(writer.write_to_string(), end='')


if __name__ == '__main__':
    main(sys.argv)
