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

"""Leaf rules: the smallest lexical units of the commit grammar.

A leaf rule looks at the input at a :class:`Cursor` and either returns a
:class:`Match` (the stored value plus the cursor after the match) or
``None``. Leaf rules never raise; the structural parser decides what a
missing match means.

Key Concepts (ELI5)::

    ┌─────────────┬──────────────────────────────────────────────────────┐
    │ Concept     │ ELI5 Explanation                                     │
    ├─────────────┼──────────────────────────────────────────────────────┤
    │ Cursor      │ A bookmark in the message. Moving forward makes a    │
    │             │ new bookmark; the old one still points where it was. │
    ├─────────────┼──────────────────────────────────────────────────────┤
    │ Literal     │ "Does the text here start with exactly ':'?"         │
    ├─────────────┼──────────────────────────────────────────────────────┤
    │ Pattern     │ "Does a regex match right here?" Keeps what matched, │
    │             │ optionally transformed.                              │
    ├─────────────┼──────────────────────────────────────────────────────┤
    │ Whitespace  │ "Is the next character whitespace?" A line break     │
    │             │ counts, so a value may start on the next line.       │
    └─────────────┴──────────────────────────────────────────────────────┘

Pure implementation: depends only on ``re``. No I/O, no logging.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

# The closed set of commit types, in the order they are documented.
TYPE_KEYWORD_ORDER: tuple[str, ...] = (
    'feat',
    'fix',
    'docs',
    'style',
    'refactor',
    'perf',
    'test',
    'build',
    'ci',
    'chore',
    'revert',
)
TYPE_KEYWORDS: frozenset[str] = frozenset(TYPE_KEYWORD_ORDER)


@dataclass(frozen=True)
class Cursor:
    """An immutable position in the input text.

    Attributes:
        text: The full input.
        pos: Offset of the next unread character.
    """

    text: str
    pos: int = 0

    @property
    def remaining(self) -> str:
        """The unread input."""
        return self.text[self.pos :]

    @property
    def at_end(self) -> bool:
        """Whether all input has been consumed."""
        return self.pos >= len(self.text)

    def advance(self, n: int) -> Cursor:
        """Return a cursor ``n`` characters further on."""
        return Cursor(self.text, self.pos + n)

    def line_col(self) -> tuple[int, int]:
        """Return the 1-based ``(line, column)`` of this position.

        >>> Cursor('ab\\ncd', 4).line_col()
        (2, 2)
        """
        consumed = self.text[: self.pos]
        line = consumed.count('\n') + 1
        column = self.pos - (consumed.rfind('\n') + 1) + 1
        return line, column


@dataclass(frozen=True)
class Match:
    """A successful leaf match.

    Attributes:
        value: The transformed matched text, or ``None`` for markers.
        cursor: The position just after the match.
    """

    value: str | None
    cursor: Cursor


class Literal:
    """Match an exact piece of text. Produces no value."""

    def __init__(self, text: str, *, expected: str | None = None) -> None:
        """Initialize with the literal text and an optional label."""
        self.text = text
        self.expected = expected or repr(text)

    def match(self, cursor: Cursor) -> Match | None:
        """Match the literal at ``cursor``."""
        if cursor.text.startswith(self.text, cursor.pos):
            return Match(None, cursor.advance(len(self.text)))
        return None

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f'Literal({self.text!r})'


class Pattern:
    """Match a regular expression anchored at the cursor.

    The matched span is passed through ``transform`` to produce the stored
    value. A ``transform`` of ``None`` makes the rule a structural marker
    that stores nothing. Empty matches are treated as failures so that no
    rule can succeed without consuming input.
    """

    def __init__(
        self,
        pattern: str,
        *,
        expected: str,
        transform: Callable[[str], str] | None = str,
    ) -> None:
        """Initialize with a regex source, a label, and a transform."""
        self.regex: re.Pattern[str] = re.compile(pattern)
        self.expected = expected
        self.transform = transform

    def match(self, cursor: Cursor) -> Match | None:
        """Match the pattern at ``cursor``."""
        m = self.regex.match(cursor.text, cursor.pos)
        if m is None or m.end() == cursor.pos:
            return None
        span = m.group(0)
        value = self.transform(span) if self.transform is not None else None
        return Match(value, cursor.advance(len(span)))

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f'Pattern({self.regex.pattern!r})'


class Whitespace(Pattern):
    """Match exactly one whitespace character, line breaks included."""

    def __init__(self) -> None:
        """Initialize the single-character whitespace rule."""
        super().__init__(r'\s', expected='a whitespace character', transform=None)

    def __repr__(self) -> str:
        """Return a debug representation."""
        return 'Whitespace()'


TYPE_KEYWORD = Pattern(
    # Longest keywords first so the alternation never stops on a prefix.
    '|'.join(sorted(TYPE_KEYWORD_ORDER, key=len, reverse=True)),
    expected=f'a commit type ({", ".join(TYPE_KEYWORD_ORDER)})',
)
SCOPE = Pattern(r'\(.+?\)', expected='a scope in parentheses')
COLON = Literal(':', expected="':'")
WHITESPACE = Whitespace()
LINE = Pattern(r'.+', expected='a line of text')
NEWLINE = Literal('\n', expected='a line break')
BLANK_LINE = Literal('\n\n', expected='a blank line')
BODY_PREFIX = Pattern(r'\n\n?', expected='a line break', transform=None)
FOOTER_TAG = Pattern(r'.+?(?=:\s)', expected="a footer tag followed by ': '")


__all__ = [
    'BLANK_LINE',
    'BODY_PREFIX',
    'COLON',
    'FOOTER_TAG',
    'LINE',
    'NEWLINE',
    'SCOPE',
    'TYPE_KEYWORD',
    'TYPE_KEYWORDS',
    'TYPE_KEYWORD_ORDER',
    'WHITESPACE',
    'Cursor',
    'Literal',
    'Match',
    'Pattern',
    'Whitespace',
]
