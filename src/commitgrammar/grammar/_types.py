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

"""Pure types for the commit message syntax tree.

This module has **zero** runtime dependencies beyond the standard library.
Everything here is a frozen dataclass: no I/O, no logging, no side effects.

Tree shape::

    CommitMessage
    ├── type: Type(value, scope)
    ├── description: str
    ├── footer: Footer(lines=(FooterLine(tag, value), ...)) | None
    └── body: Body(value) | None
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Type:
    """The commit classification in the header.

    Attributes:
        value: One of the fixed type keywords (e.g. ``"feat"``).
        scope: The raw scope text *including* its parentheses
            (e.g. ``"(auth)"``), or ``None``.
    """

    value: str
    scope: str | None = None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping."""
        return {'value': self.value, 'scope': self.scope}


@dataclass(frozen=True)
class Body:
    """The free-text body that follows the description.

    A body can be recognized from its leading line break alone, in which
    case ``value`` is ``None``. Treat that the same as "no body content".

    Attributes:
        value: The body line, or ``None``.
    """

    value: str | None = None

    @property
    def is_empty(self) -> bool:
        """Whether the body carries no text."""
        return not self.value

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping."""
        return {'value': self.value}


@dataclass(frozen=True)
class FooterLine:
    """A single ``tag: value`` footer entry.

    Attributes:
        tag: Text before the first ``": "`` (may contain spaces,
            e.g. ``"BREAKING CHANGE"``).
        value: Text after the separator.
    """

    tag: str
    value: str

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping."""
        return {'tag': self.tag, 'value': self.value}


@dataclass(frozen=True)
class Footer:
    """The footer block: one or more :class:`FooterLine` entries.

    Attributes:
        lines: Footer lines in input order. Never empty.
    """

    lines: tuple[FooterLine, ...]

    def get(self, tag: str) -> str | None:
        """Return the value of the first line with ``tag``, or ``None``.

        >>> Footer(lines=(FooterLine('Refs', '#1'),)).get('Refs')
        '#1'
        """
        for line in self.lines:
            if line.tag == tag:
                return line.value
        return None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping."""
        return {'lines': [line.to_dict() for line in self.lines]}


@dataclass(frozen=True)
class CommitMessage:
    """A parsed Conventional Commits message.

    Attributes:
        type: The commit type and optional scope.
        description: The one-line summary after ``type(scope): ``.
        footer: The footer block, if any.
        body: The body, if any.
    """

    type: Type
    description: str
    footer: Footer | None = None
    body: Body | None = None

    @property
    def scope_name(self) -> str | None:
        """The scope without its surrounding parentheses."""
        if self.type.scope is None:
            return None
        return self.type.scope[1:-1]

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of the whole tree."""
        return {
            'type': self.type.to_dict(),
            'description': self.description,
            'footer': self.footer.to_dict() if self.footer else None,
            'body': self.body.to_dict() if self.body else None,
        }
