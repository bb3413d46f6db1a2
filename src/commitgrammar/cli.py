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

"""CLI entry point for commitgrammar.

Subcommands::

    commitgrammar parse    Parse one commit message and print its tree
    commitgrammar check    Check that commit messages follow the grammar
    commitgrammar explain  Explain an error code

Usage::

    # Print the debug tree for a message file:
    commitgrammar parse .git/COMMIT_EDITMSG

    # Pipe a message in and get JSON:
    git log -1 --format=%B | commitgrammar parse - --format json

    # As a commit-msg hook:
    commitgrammar check "$1"

    # Explain an error:
    commitgrammar explain CG-PARSE-FAILED
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich_argparse import RichHelpFormatter

from commitgrammar import __version__
from commitgrammar.config import CONFIG_FILENAME, CommitGrammarConfig, load_config
from commitgrammar.errors import E, CommitGrammarError, ParseFailure, explain, render_error
from commitgrammar.formatters import FORMATTERS, format_commit
from commitgrammar.grammar import CommitMessage, parse_commit_message
from commitgrammar.logging import configure_logging, get_logger

logger = get_logger(__name__)

# Path argument that means "read the message from stdin".
STDIN_PATH = '-'


def _find_config_dir() -> Path:
    """Find the directory holding ``commitgrammar.toml``.

    Walks up from CWD; falls back to CWD itself when no file is found,
    which makes :func:`load_config` return defaults.
    """
    cwd = Path.cwd().resolve()
    for parent in [cwd, *cwd.parents]:
        if (parent / CONFIG_FILENAME).is_file():
            return parent
    return cwd


def read_message(path: str, *, encoding: str = 'utf-8') -> str:
    """Read a commit message from a file, or from stdin for ``-``.

    Both sources are decoded with ``encoding`` and line endings are
    normalized to ``\\n``.

    Raises:
        CommitGrammarError: If the file is missing or cannot be decoded.
    """
    if path == STDIN_PATH:
        data = sys.stdin.buffer.read()
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError as exc:
            raise CommitGrammarError(
                code=E.INPUT_UNREADABLE,
                message=f'Failed to decode stdin: {exc}',
                hint=f"Stdin was decoded as {encoding}; set 'encoding' in {CONFIG_FILENAME} if that is wrong.",
            ) from exc
        return text.replace('\r\n', '\n').replace('\r', '\n')

    file_path = Path(path)
    if not file_path.is_file():
        raise CommitGrammarError(
            code=E.INPUT_NOT_FOUND,
            message=f'No such file: {path}',
            hint="Pass a path to a file containing the message, or '-' to read stdin.",
        )
    try:
        return file_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise CommitGrammarError(
            code=E.INPUT_UNREADABLE,
            message=f'Failed to read {path}: {exc}',
            hint=f"The file was decoded as {encoding}; set 'encoding' in {CONFIG_FILENAME} if that is wrong.",
        ) from exc


def _parse_file(path: str, cfg: CommitGrammarConfig) -> CommitMessage:
    """Read and parse one message, logging the outcome."""
    text = read_message(path, encoding=cfg.encoding)
    try:
        msg = parse_commit_message(text)
    except ParseFailure as exc:
        logger.debug('parse_failed', path=path, line=exc.line, column=exc.column, expected=exc.expected)
        raise
    logger.debug(
        'message_parsed',
        path=path,
        type=msg.type.value,
        footer_lines=len(msg.footer.lines) if msg.footer else 0,
        has_body=msg.body is not None,
    )
    return msg


def _cmd_parse(args: argparse.Namespace, cfg: CommitGrammarConfig) -> int:
    """Handle the ``parse`` subcommand."""
    msg = _parse_file(args.path, cfg)
    fmt = args.format or cfg.format
    sys.stdout.write(format_commit(msg, fmt=fmt))
    return 0


def _cmd_check(args: argparse.Namespace, cfg: CommitGrammarConfig) -> int:
    """Handle the ``check`` subcommand.

    Every path is checked even after a failure; the exit code is 1 if any
    message failed.
    """
    failed = 0
    for path in args.paths:
        try:
            _parse_file(path, cfg)
        except CommitGrammarError as exc:
            failed += 1
            print(f'{path}: error')  # noqa: T201 - CLI output
            render_error(exc)
            continue
        print(f'{path}: ok')  # noqa: T201 - CLI output

    if len(args.paths) > 1:
        print()  # noqa: T201 - CLI output
        print(f'{len(args.paths) - failed} ok, {failed} failed')  # noqa: T201 - CLI output
    return 1 if failed else 0


def _cmd_explain(args: argparse.Namespace) -> int:
    """Handle the ``explain`` subcommand."""
    result = explain(args.code)
    if result is None:
        print(f'Unknown error code: {args.code}')  # noqa: T201 - CLI output
        return 1
    print(result)  # noqa: T201 - CLI output
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        Configured :class:`argparse.ArgumentParser`.
    """
    RichHelpFormatter.styles['argparse.groups'] = 'bold yellow'
    parser = argparse.ArgumentParser(
        prog='commitgrammar',
        description='Parse and check Conventional Commits messages.',
        formatter_class=RichHelpFormatter,
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}',
    )
    parser.add_argument(
        '--verbose',
        '-v',
        action='store_true',
        help='Show debug log output.',
    )
    parser.add_argument(
        '--quiet',
        '-q',
        action='store_true',
        help='Only log warnings and errors.',
    )
    parser.add_argument(
        '--json-log',
        action='store_true',
        default=None,
        help='Write log lines as JSON (overrides json_log in the config file).',
    )
    parser.add_argument(
        '--config',
        metavar='DIR',
        type=Path,
        default=None,
        help=f'Directory containing {CONFIG_FILENAME}. Defaults to the nearest one above CWD.',
    )

    subparsers = parser.add_subparsers(dest='command')

    parse_parser = subparsers.add_parser(
        'parse',
        help='Parse a commit message and print its syntax tree.',
        formatter_class=RichHelpFormatter,
    )
    parse_parser.add_argument(
        'path',
        help="File containing the commit message, or '-' for stdin.",
    )
    parse_parser.add_argument(
        '--format',
        '-f',
        choices=sorted(FORMATTERS),
        default=None,
        help='Output format (default: from config, else debug).',
    )

    check_parser = subparsers.add_parser(
        'check',
        help='Check that commit messages follow the grammar.',
        formatter_class=RichHelpFormatter,
    )
    check_parser.add_argument(
        'paths',
        nargs='+',
        help="Files containing commit messages ('-' for stdin).",
    )

    explain_parser = subparsers.add_parser(
        'explain',
        help='Explain an error code.',
        formatter_class=RichHelpFormatter,
    )
    explain_parser.add_argument(
        'code',
        help='Error code, e.g. CG-PARSE-FAILED.',
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Args:
        argv: Arguments to parse (defaults to ``sys.argv[1:]``).

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, quiet=args.quiet, json_log=bool(args.json_log))

    try:
        command = args.command
        if command == 'explain':
            return _cmd_explain(args)

        if command in {'parse', 'check'}:
            cfg = load_config(args.config if args.config is not None else _find_config_dir())
            if args.json_log is None and cfg.json_log:
                configure_logging(verbose=args.verbose, quiet=args.quiet, json_log=True)
            if command == 'parse':
                return _cmd_parse(args, cfg)
            return _cmd_check(args, cfg)

        parser.print_help()  # noqa: T201 - CLI output
        print(  # noqa: T201 - CLI output
            f'\n{parser.prog}: error: please provide a command',
            file=sys.stderr,
        )
        return 2

    except CommitGrammarError as exc:
        render_error(exc)
        return 1
    except KeyboardInterrupt:
        logger.info('interrupted')
        return 130


def _main() -> None:
    """Wrapper for pyproject.toml [project.scripts] entry point."""
    sys.exit(main())


__all__ = [
    'build_parser',
    'main',
    'read_message',
]
