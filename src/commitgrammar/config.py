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

"""Configuration reader for the commitgrammar CLI.

Reads an optional ``commitgrammar.toml`` and returns a validated, frozen
:class:`CommitGrammarConfig`. The grammar has no settings; everything here
tunes how the CLI reads input and prints results. Command-line flags
override values from the file.

Supported keys::

    format   = "debug"    # default output format: "debug", "json", or "tree"
    encoding = "utf-8"    # encoding used to read message files
    json_log = false      # JSON log lines instead of console output

Validation order: unknown keys (with a "did you mean?" hint), then value
types, then allowed values.

Usage::

    from commitgrammar.config import load_config

    cfg = load_config(Path.cwd())
    print(cfg.format)  # "debug"
"""

from __future__ import annotations

import codecs
import difflib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit
import tomlkit.exceptions

from commitgrammar.errors import E, CommitGrammarError
from commitgrammar.formatters import FORMATTERS
from commitgrammar.logging import get_logger

logger = get_logger(__name__)

# The config file name inside the config directory.
CONFIG_FILENAME = 'commitgrammar.toml'

# All recognized keys in commitgrammar.toml.
VALID_KEYS: frozenset[str] = frozenset({
    'encoding',
    'format',
    'json_log',
})

_TYPE_MAP: dict[str, type] = {
    'encoding': str,
    'format': str,
    'json_log': bool,
}


@dataclass(frozen=True)
class CommitGrammarConfig:
    """Settings for the commitgrammar CLI.

    Attributes:
        format: Default output format for ``commitgrammar parse``.
        encoding: Text encoding for message files.
        json_log: Emit JSON log lines.
        config_path: The file these settings came from, or ``None``
            when defaults are in use.
    """

    format: str = 'debug'
    encoding: str = 'utf-8'
    json_log: bool = False
    config_path: Path | None = None


def _suggest_key(unknown: str) -> str | None:
    """Return the closest valid key for a typo, or None."""
    matches = difflib.get_close_matches(unknown, VALID_KEYS, n=1, cutoff=0.6)
    return matches[0] if matches else None


def _validate_value_type(key: str, value: Any) -> None:  # noqa: ANN401 - dynamic config values
    """Raise if a config value has the wrong type."""
    expected = _TYPE_MAP[key]
    if not isinstance(value, expected):
        raise CommitGrammarError(
            code=E.CONFIG_INVALID_VALUE,
            message=f"'{key}' must be {expected.__name__}, got {type(value).__name__}",
            hint=f'Check the value of {key} in {CONFIG_FILENAME}.',
        )


def _validate_format(value: str) -> None:
    """Raise if format is not a registered formatter."""
    if value not in FORMATTERS:
        raise CommitGrammarError(
            code=E.CONFIG_INVALID_VALUE,
            message=f"format must be one of {sorted(FORMATTERS)}, got '{value}'",
            hint="Use 'debug' for a readable dump or 'json' for tooling.",
        )


def _validate_encoding(value: str) -> None:
    """Raise if encoding is not a codec Python knows."""
    try:
        codecs.lookup(value)
    except LookupError as exc:
        raise CommitGrammarError(
            code=E.CONFIG_INVALID_VALUE,
            message=f"Unknown encoding '{value}'",
            hint="Use a Python codec name such as 'utf-8' or 'latin-1'.",
        ) from exc


def load_config(config_dir: Path) -> CommitGrammarConfig:
    """Load and validate ``commitgrammar.toml`` from ``config_dir``.

    Args:
        config_dir: Directory that may contain ``commitgrammar.toml``.

    Returns:
        A validated :class:`CommitGrammarConfig`; defaults when the file
        does not exist.

    Raises:
        CommitGrammarError: If the file cannot be read, is not TOML, or
            holds unknown keys or invalid values.
    """
    config_path = config_dir / CONFIG_FILENAME

    if not config_path.is_file():
        logger.debug('no_commitgrammar_config', path=str(config_path))
        return CommitGrammarConfig(config_path=None)

    try:
        text = config_path.read_text(encoding='utf-8')
    except OSError as exc:
        raise CommitGrammarError(
            code=E.CONFIG_PARSE_ERROR,
            message=f'Failed to read {config_path}: {exc}',
        ) from exc

    try:
        doc = tomlkit.parse(text)
    except tomlkit.exceptions.TOMLKitError as exc:
        raise CommitGrammarError(
            code=E.CONFIG_PARSE_ERROR,
            message=f'Failed to parse {config_path}: {exc}',
        ) from exc

    raw: dict[str, Any] = doc.unwrap()  # noqa: ANN401

    for key in raw:
        if key not in VALID_KEYS:
            suggestion = _suggest_key(key)
            hint = f"Did you mean '{suggestion}'?" if suggestion else f'Valid keys: {", ".join(sorted(VALID_KEYS))}.'
            raise CommitGrammarError(
                code=E.CONFIG_INVALID_KEY,
                message=f"Unknown key '{key}' in {CONFIG_FILENAME}",
                hint=hint,
            )

    for key, value in raw.items():
        _validate_value_type(key, value)

    if 'format' in raw:
        _validate_format(raw['format'])
    if 'encoding' in raw:
        _validate_encoding(raw['encoding'])

    logger.debug('config_loaded', path=str(config_path), keys=sorted(raw))
    return CommitGrammarConfig(**raw, config_path=config_path)


__all__ = [
    'CONFIG_FILENAME',
    'VALID_KEYS',
    'CommitGrammarConfig',
    'load_config',
]
