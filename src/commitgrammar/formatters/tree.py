# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""Box-drawing tree output, rendered with ``rich``.

Example output::

    commit
    ├── type: feat
    │   └── scope: (scope)
    ├── description: this is a commit description
    └── footer
        └── BREAKING CHANGE: X now does Y

Absent parts are left out. Labels are plain :class:`rich.text.Text` so
that brackets in commit text are never read as console markup.
"""

from __future__ import annotations

import io

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from commitgrammar.grammar import CommitMessage


def build_tree(msg: CommitMessage) -> Tree:
    """Build a :class:`rich.tree.Tree` for the commit."""
    root = Tree(Text('commit'))

    type_node = root.add(Text(f'type: {msg.type.value}'))
    if msg.type.scope is not None:
        type_node.add(Text(f'scope: {msg.type.scope}'))

    root.add(Text(f'description: {msg.description}'))

    if msg.footer is not None:
        footer_node = root.add(Text('footer'))
        for line in msg.footer.lines:
            footer_node.add(Text(f'{line.tag}: {line.value}'))

    if msg.body is not None:
        body_node = root.add(Text('body'))
        if msg.body.value is not None:
            body_node.add(Text(msg.body.value))

    return root


def format_tree(msg: CommitMessage, *, width: int = 100) -> str:
    """Render the commit tree as plain text.

    Args:
        msg: The parsed message.
        width: Console width used for wrapping long lines.

    Returns:
        The rendered tree without ANSI styling.
    """
    buffer = io.StringIO()
    console = Console(file=buffer, width=width, color_system=None, force_terminal=False, highlight=False)
    console.print(build_tree(msg))
    return buffer.getvalue()


__all__ = [
    'build_tree',
    'format_tree',
]
