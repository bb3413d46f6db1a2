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

"""Conventional Commits grammar.

Turns a commit message into a typed syntax tree::

    <type>[(<scope>)]: <description>

    [body]

    [footer: value]

Usage::

    from commitgrammar.grammar import (
        CommitGrammarParser,
        parse_commit_message,
        try_parse_commit_message,
    )

    msg = parse_commit_message('feat(auth): add OAuth2')
    assert msg.type.value == 'feat'
    assert msg.type.scope == '(auth)'

    # Non-conforming messages:
    assert try_parse_commit_message('foo: bar') is None
"""

from commitgrammar.errors import ParseFailure
from commitgrammar.grammar._leaves import TYPE_KEYWORD_ORDER, TYPE_KEYWORDS
from commitgrammar.grammar._parser import CommitGrammarParser
from commitgrammar.grammar._types import Body, CommitMessage, Footer, FooterLine, Type

# Module-level singleton for convenience.
_DEFAULT_PARSER = CommitGrammarParser()


def parse_commit_message(message: str) -> CommitMessage:
    """Parse a full commit message.

    Args:
        message: The commit message text.

    Returns:
        The parsed :class:`CommitMessage`.

    Raises:
        ParseFailure: If the message does not follow the grammar.
    """
    return _DEFAULT_PARSER.parse(message)


def try_parse_commit_message(message: str) -> CommitMessage | None:
    """Parse a full commit message, or return ``None`` if it does not conform."""
    return _DEFAULT_PARSER.try_parse(message)


def is_valid_commit_message(message: str) -> bool:
    """Whether ``message`` follows the grammar."""
    return _DEFAULT_PARSER.is_valid(message)


__all__ = [
    'TYPE_KEYWORDS',
    'TYPE_KEYWORD_ORDER',
    'Body',
    'CommitGrammarParser',
    'CommitMessage',
    'Footer',
    'FooterLine',
    'ParseFailure',
    'Type',
    'is_valid_commit_message',
    'parse_commit_message',
    'try_parse_commit_message',
]
