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

"""Indented debug dump of a commit tree.

This is the default ``commitgrammar parse`` output. Every dataclass is
shown as a ``Name {`` block, one ``field: value`` per line, with nested
values indented by four spaces. Footer lines are shown as a ``[...]`` list.

Example output::

    CommitMessage {
        type: Type {
            value: 'feat',
            scope: '(scope)',
        },
        description: 'this is a commit description',
        footer: None,
        body: None,
    }
"""

from __future__ import annotations

import dataclasses

from commitgrammar.grammar import CommitMessage

_INDENT = '    '


def _render(value: object, depth: int) -> str:
    """Render one value; nested structures open on the current line."""
    pad = _INDENT * (depth + 1)
    close = _INDENT * depth

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = [f'{pad}{f.name}: {_render(getattr(value, f.name), depth + 1)},' for f in dataclasses.fields(value)]
        return '\n'.join([f'{type(value).__name__} {{', *fields, f'{close}}}'])

    if isinstance(value, tuple):
        if not value:
            return '[]'
        items = [f'{pad}{_render(item, depth + 1)},' for item in value]
        return '\n'.join(['[', *items, f'{close}]'])

    return repr(value)


def format_debug(msg: CommitMessage) -> str:
    """Render the commit tree as an indented ``Name { field: value }`` dump."""
    return _render(msg, 0) + '\n'


__all__ = ['format_debug']
