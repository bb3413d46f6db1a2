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

"""Recursive-descent parser for Conventional Commits messages.

Grammar (``?`` optional, ``+`` one or more)::

    commit      := type WHITESPACE LINE footer? body? END
    type        := KEYWORD SCOPE? ':'
    footer      := '\\n\\n' footer_line ('\\n' footer_line)*
    footer_line := TAG ':' WHITESPACE LINE
    body        := ('\\n\\n' | '\\n') LINE?

Required parts raise :class:`~commitgrammar.errors.ParseFailure` at the
first rule that does not match. Optional parts return ``None`` and leave
the cursor where it was, so an abandoned attempt never changes what has
already been parsed.

The footer is tried before the body over the same span. A blank line
followed by ``tag: value`` lines is therefore always a footer; anything
else after the description is offered to the body.

Pure implementation: depends only on sibling modules. No I/O, no logging.
"""

from __future__ import annotations

from commitgrammar.errors import ParseFailure
from commitgrammar.grammar._leaves import (
    BLANK_LINE,
    BODY_PREFIX,
    COLON,
    FOOTER_TAG,
    LINE,
    NEWLINE,
    SCOPE,
    TYPE_KEYWORD,
    WHITESPACE,
    Cursor,
    Literal,
    Match,
    Pattern,
)
from commitgrammar.grammar._types import Body, CommitMessage, Footer, FooterLine, Type


def _failure(expected: str, cursor: Cursor) -> ParseFailure:
    """Build a :class:`ParseFailure` for ``expected`` at ``cursor``."""
    line, column = cursor.line_col()
    found = None if cursor.at_end else cursor.remaining.split('\n', 1)[0]
    return ParseFailure(expected, position=cursor.pos, line=line, column=column, found=found)


def _require(rule: Literal | Pattern, cursor: Cursor) -> Match:
    """Match a required leaf or raise."""
    match = rule.match(cursor)
    if match is None:
        raise _failure(rule.expected, cursor)
    return match


def parse_type(cursor: Cursor) -> tuple[Type, Cursor]:
    """Parse ``keyword(scope):``.

    Raises:
        ParseFailure: If the keyword or the ``:`` separator is missing.
    """
    keyword = _require(TYPE_KEYWORD, cursor)
    cursor = keyword.cursor

    scope = SCOPE.match(cursor)
    if scope is not None:
        cursor = scope.cursor

    cursor = _require(COLON, cursor).cursor
    return Type(value=keyword.value or '', scope=scope.value if scope else None), cursor


def parse_footer_line(cursor: Cursor) -> tuple[FooterLine, Cursor] | None:
    """Parse one ``tag: value`` line, or return ``None``."""
    tag = FOOTER_TAG.match(cursor)
    if tag is None:
        return None
    colon = COLON.match(tag.cursor)
    if colon is None:
        return None
    space = WHITESPACE.match(colon.cursor)
    if space is None:
        return None
    value = LINE.match(space.cursor)
    if value is None:
        return None
    return FooterLine(tag=tag.value or '', value=value.value or ''), value.cursor


def parse_footer(cursor: Cursor) -> tuple[Footer, Cursor] | None:
    """Parse a blank line followed by one or more footer lines.

    Lines are collected until the next line is not ``tag: value``; the
    newline before that line is left unconsumed.
    """
    prefix = BLANK_LINE.match(cursor)
    if prefix is None:
        return None

    first = parse_footer_line(prefix.cursor)
    if first is None:
        return None

    line, cursor = first
    lines = [line]
    while True:
        sep = NEWLINE.match(cursor)
        if sep is None:
            break
        following = parse_footer_line(sep.cursor)
        if following is None:
            break
        line, cursor = following
        lines.append(line)

    return Footer(lines=tuple(lines)), cursor


def parse_body(cursor: Cursor) -> tuple[Body, Cursor] | None:
    """Parse a line break (or blank line) and an optional line of text."""
    prefix = BODY_PREFIX.match(cursor)
    if prefix is None:
        return None

    text = LINE.match(prefix.cursor)
    if text is None:
        return Body(value=None), prefix.cursor
    return Body(value=text.value), text.cursor


def parse_commit(text: str) -> CommitMessage:
    """Parse a complete commit message.

    Args:
        text: The full commit message.

    Returns:
        The parsed :class:`CommitMessage`.

    Raises:
        ParseFailure: If any required part is missing or input is left
            over after the last recognized block.
    """
    cursor = Cursor(text)

    commit_type, cursor = parse_type(cursor)
    cursor = _require(WHITESPACE, cursor).cursor
    description = _require(LINE, cursor)
    cursor = description.cursor

    footer: Footer | None = None
    footer_result = parse_footer(cursor)
    if footer_result is not None:
        footer, cursor = footer_result

    body: Body | None = None
    body_result = parse_body(cursor)
    if body_result is not None:
        body, cursor = body_result

    if not cursor.at_end:
        raise _failure('end of input', cursor)

    return CommitMessage(
        type=commit_type,
        description=description.value or '',
        footer=footer,
        body=body,
    )


class CommitGrammarParser:
    """Parser for `Conventional Commits <https://www.conventionalcommits.org/>`_.

    Stateless; one instance can be shared freely, including across
    threads.

    Example::

        parser = CommitGrammarParser()
        msg = parser.parse('feat(auth): add OAuth2')
        assert msg.type.value == 'feat'
        assert msg.type.scope == '(auth)'

        assert parser.try_parse('foo: bar') is None
    """

    def parse(self, message: str) -> CommitMessage:
        """Parse ``message`` or raise :class:`ParseFailure`."""
        return parse_commit(message)

    def try_parse(self, message: str) -> CommitMessage | None:
        """Parse ``message``, returning ``None`` if it does not conform."""
        try:
            return parse_commit(message)
        except ParseFailure:
            return None

    def is_valid(self, message: str) -> bool:
        """Whether ``message`` conforms to the grammar."""
        return self.try_parse(message) is not None


__all__ = [
    'CommitGrammarParser',
    'parse_body',
    'parse_commit',
    'parse_footer',
    'parse_footer_line',
    'parse_type',
]
