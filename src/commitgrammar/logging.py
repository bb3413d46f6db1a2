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

"""Structured logging for commitgrammar.

Uses `structlog <https://www.structlog.org/>`_ on top of the standard
library ``logging`` module. Events go to stderr so that the parsed tree on
stdout can be piped (``commitgrammar parse MSG --format json | jq``).

The grammar itself never logs; only the CLI and the config loader do.

Usage::

    from commitgrammar.logging import configure_logging, get_logger

    configure_logging(verbose=True)
    log = get_logger(__name__)
    log.debug('message_parsed', path='COMMIT_EDITMSG', footer_lines=2)
"""

from __future__ import annotations

import logging
import sys

import structlog


def _level(*, verbose: bool, quiet: bool) -> int:
    """Map CLI verbosity flags to a stdlib level. ``quiet`` wins."""
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    return logging.INFO


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
) -> None:
    """Configure structlog and the stdlib root logger.

    Safe to call more than once; the last call wins.

    Args:
        verbose: Emit debug events.
        quiet: Only emit warnings and errors.
        json_log: Render one JSON object per line instead of console text.
    """
    logging.basicConfig(
        format='%(message)s',
        stream=sys.stderr,
        level=_level(verbose=verbose, quiet=quiet),
        force=True,
    )

    renderer: structlog.types.Processor
    if json_log:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str = 'commitgrammar') -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


__all__ = [
    'configure_logging',
    'get_logger',
]
