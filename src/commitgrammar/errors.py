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

"""Structured error system for commitgrammar.

Every error has a unique ``CG-NAMED-KEY`` code, a human-readable message,
and an optional hint with a suggested fix.

Code categories::

    CG-PARSE-*     Commit message grammar errors
    CG-INPUT-*     Reading the message from a file or stdin
    CG-CONFIG-*    commitgrammar.toml errors

Usage::

    from commitgrammar.errors import CommitGrammarError, E

    raise CommitGrammarError(
        code=E.INPUT_NOT_FOUND,
        message='No such file: COMMIT_EDITMSG',
        hint='Pass the path to a file containing the commit message.',
    )
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from rich.console import Console
from rich.markup import escape as rich_escape


class ErrorCode(str, Enum):
    """Enumeration of all commitgrammar diagnostic codes."""

    # Grammar
    PARSE_FAILED = 'CG-PARSE-FAILED'

    # Input
    INPUT_NOT_FOUND = 'CG-INPUT-NOT-FOUND'
    INPUT_UNREADABLE = 'CG-INPUT-UNREADABLE'

    # Configuration
    CONFIG_INVALID_KEY = 'CG-CONFIG-INVALID-KEY'
    CONFIG_INVALID_VALUE = 'CG-CONFIG-INVALID-VALUE'
    CONFIG_PARSE_ERROR = 'CG-CONFIG-PARSE-ERROR'


# Convenience alias for shorter imports.
E = ErrorCode


@dataclass(frozen=True)
class ErrorInfo:
    """Metadata for a single error code.

    Attributes:
        code: The ``CG-NAMED-KEY`` error code.
        message: Human-readable description of what went wrong.
        hint: Optional suggestion for how to fix the error.
    """

    code: ErrorCode
    message: str
    hint: str = ''


class CommitGrammarError(Exception):
    """Base exception for all commitgrammar errors.

    Args:
        code: The error code from :class:`ErrorCode`.
        message: Human-readable description of what went wrong.
        hint: Optional suggestion for how to fix the error.
    """

    def __init__(self, code: ErrorCode, message: str, hint: str = '') -> None:
        """Initialize with an error code, message, and optional hint."""
        self.info = ErrorInfo(code=code, message=message, hint=hint)
        super().__init__(f'[{code.value}] {message}')

    @property
    def code(self) -> ErrorCode:
        """The error code."""
        return self.info.code

    @property
    def hint(self) -> str:
        """Suggestion for fixing this error, or empty string."""
        return self.info.hint


class ParseFailure(CommitGrammarError):
    """The message does not follow the commit grammar.

    There is no partial result: either the whole message parses or this
    is raised at the first rule that could not match.

    Args:
        expected: Label of the rule that failed (e.g. ``"':'"``).
        position: Character offset where the rule was tried.
        line: 1-based line of ``position``.
        column: 1-based column of ``position``.
        found: The input at ``position`` up to the end of its line, or
            ``None`` at end of input.
    """

    def __init__(
        self,
        expected: str,
        *,
        position: int,
        line: int,
        column: int,
        found: str | None = None,
    ) -> None:
        """Initialize with the failing rule and where it was tried."""
        self.expected = expected
        self.position = position
        self.line = line
        self.column = column
        self.found = found
        if found is None:
            got = 'found end of input'
        elif found:
            got = f'found {found!r}'
        else:
            got = 'found a line break'
        super().__init__(
            code=E.PARSE_FAILED,
            message=f'line {line}, column {column}: expected {expected}, {got}',
            hint=ERRORS[E.PARSE_FAILED].hint,
        )


ERRORS: dict[ErrorCode, ErrorInfo] = {
    E.PARSE_FAILED: ErrorInfo(
        code=E.PARSE_FAILED,
        message='The commit message does not follow the Conventional Commits format.',
        hint="Use '<type>[(<scope>)]: <description>', optionally followed by a blank line and a body or footers.",
    ),
    E.INPUT_NOT_FOUND: ErrorInfo(
        code=E.INPUT_NOT_FOUND,
        message='The commit message file does not exist.',
        hint="Pass a path to a file containing the message, or '-' to read stdin.",
    ),
    E.INPUT_UNREADABLE: ErrorInfo(
        code=E.INPUT_UNREADABLE,
        message='The commit message could not be read or decoded.',
        hint="Check file permissions and the 'encoding' setting in commitgrammar.toml.",
    ),
    E.CONFIG_INVALID_KEY: ErrorInfo(
        code=E.CONFIG_INVALID_KEY,
        message='commitgrammar.toml contains an unknown key.',
        hint="Valid keys are 'format', 'encoding', and 'json_log'.",
    ),
    E.CONFIG_INVALID_VALUE: ErrorInfo(
        code=E.CONFIG_INVALID_VALUE,
        message='commitgrammar.toml contains a value of the wrong type or an unsupported value.',
    ),
    E.CONFIG_PARSE_ERROR: ErrorInfo(
        code=E.CONFIG_PARSE_ERROR,
        message='commitgrammar.toml is not valid TOML.',
    ),
}


def explain(code: str) -> str | None:
    """Return a detailed explanation for an error code.

    Args:
        code: The error code string, e.g. ``"CG-PARSE-FAILED"``.

    Returns:
        A formatted explanation string, or ``None`` if the code is unknown.
    """
    try:
        error_code = ErrorCode(code)
    except ValueError:
        return None

    info = ERRORS.get(error_code)
    if info is None:
        return f'{code}: No detailed explanation available.'

    lines = [f'{code}: {info.message}']
    if info.hint:
        lines.append(f'  Hint: {info.hint}')
    return '\n'.join(lines)


def render_error(exc: CommitGrammarError, *, file: TextIO | None = None) -> None:
    """Render an error in Rust-compiler style with color.

    Output format::

        error[CG-PARSE-FAILED]: line 1, column 1: expected a commit type ...
          |
          = hint: Use '<type>[(<scope>)]: <description>' ...

    Args:
        exc: The error to render.
        file: Output stream (defaults to ``sys.stderr``).
    """
    out = file or sys.stderr

    if out.isatty():
        console = Console(file=out, highlight=False)
        msg = rich_escape(exc.info.message)
        console.print(
            f'[bold red]error[/bold red][bold red]\\[{exc.code.value}][/bold red][bold]: {msg}[/bold]',
        )
        if exc.hint:
            hint = rich_escape(exc.hint)
            console.print('  [dim]|[/dim]')
            console.print(f'  [dim]=[/dim] [cyan]hint[/cyan]: {hint}')
        console.print()
    else:
        print(f'error[{exc.code.value}]: {exc.info.message}', file=out)  # noqa: T201 - CLI output
        if exc.hint:
            print('  |', file=out)  # noqa: T201 - CLI output
            print(f'  = hint: {exc.hint}', file=out)  # noqa: T201 - CLI output
        print(file=out)  # noqa: T201 - CLI output


__all__ = [
    'E',
    'ERRORS',
    'CommitGrammarError',
    'ErrorCode',
    'ErrorInfo',
    'ParseFailure',
    'explain',
    'render_error',
]
