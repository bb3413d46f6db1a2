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

"""Formatter registry and dispatch.

Maps format names to formatter functions and provides a single
``format_commit()`` entry point for the CLI.
"""

from __future__ import annotations

from collections.abc import Callable

from commitgrammar.formatters.debug import format_debug
from commitgrammar.formatters.json_fmt import format_json
from commitgrammar.formatters.tree import format_tree
from commitgrammar.grammar import CommitMessage

Formatter = Callable[[CommitMessage], str]

FORMATTERS: dict[str, Formatter] = {
    'debug': format_debug,
    'json': format_json,
    'tree': format_tree,
}


def format_commit(msg: CommitMessage, *, fmt: str = 'debug') -> str:
    """Format a parsed commit message using the named formatter.

    Args:
        msg: The parsed message.
        fmt: Format name (one of :data:`FORMATTERS`).

    Returns:
        The formatted text, ending with a newline.

    Raises:
        ValueError: If ``fmt`` is not a registered format name.
    """
    formatter = FORMATTERS.get(fmt)
    if formatter is None:
        available = ', '.join(sorted(FORMATTERS))
        msg_text = f'Unknown format {fmt!r}. Available: {available}'
        raise ValueError(msg_text)
    return formatter(msg)


__all__ = [
    'FORMATTERS',
    'Formatter',
    'format_commit',
]
