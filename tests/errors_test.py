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

"""Tests for commitgrammar.errors module."""

from __future__ import annotations

import dataclasses
import io

import pytest
from commitgrammar.errors import (
    ERRORS,
    E,
    CommitGrammarError,
    ErrorCode,
    ErrorInfo,
    ParseFailure,
    explain,
    render_error,
)


class TestErrorCode:
    """Tests for ErrorCode enum."""

    def test_all_codes_have_cg_prefix(self) -> None:
        """Every error code must start with 'CG-'."""
        for code in ErrorCode:
            assert code.value.startswith('CG-'), f'{code.name} does not start with CG-'

    def test_no_duplicate_values(self) -> None:
        """Error code values must be unique."""
        values = [c.value for c in ErrorCode]
        assert len(values) == len(set(values)), 'Duplicate error code values found'

    def test_e_alias(self) -> None:
        """E should be an alias for ErrorCode."""
        assert E is ErrorCode
        assert E.PARSE_FAILED is ErrorCode.PARSE_FAILED

    def test_every_code_is_catalogued(self) -> None:
        """Every code has an ERRORS entry with a matching code."""
        for code in ErrorCode:
            assert code in ERRORS
            assert ERRORS[code].code is code


class TestErrorInfo:
    """Tests for ErrorInfo dataclass."""

    def test_frozen(self) -> None:
        """ErrorInfo instances should be immutable."""
        assert dataclasses.is_dataclass(ErrorInfo)
        info = ErrorInfo(code=E.PARSE_FAILED, message='test')
        with pytest.raises(AttributeError):
            info.message = 'changed'  # type: ignore[misc]

    def test_default_hint(self) -> None:
        """Hint should default to empty string."""
        assert ErrorInfo(code=E.PARSE_FAILED, message='test').hint == ''


class TestCommitGrammarError:
    """Tests for CommitGrammarError exception."""

    def test_message_includes_code(self) -> None:
        """Exception message should include the CG code."""
        err = CommitGrammarError(code=E.INPUT_NOT_FOUND, message='no such file')
        assert str(err) == '[CG-INPUT-NOT-FOUND] no such file'

    def test_code_and_hint(self) -> None:
        """Test code and hint."""
        err = CommitGrammarError(code=E.CONFIG_INVALID_KEY, message='bad', hint='fix it')
        assert err.code is E.CONFIG_INVALID_KEY
        assert err.hint == 'fix it'

    def test_is_exception(self) -> None:
        """Test is exception."""
        with pytest.raises(CommitGrammarError):
            raise CommitGrammarError(code=E.INPUT_UNREADABLE, message='x')


class TestParseFailure:
    """Tests for ParseFailure."""

    def test_attributes(self) -> None:
        """Test attributes."""
        err = ParseFailure("':'", position=4, line=1, column=5, found='ure: x')
        assert err.expected == "':'"
        assert err.position == 4
        assert (err.line, err.column) == (1, 5)
        assert err.found == 'ure: x'
        assert err.code is E.PARSE_FAILED
        assert err.hint == ERRORS[E.PARSE_FAILED].hint

    def test_is_commit_grammar_error(self) -> None:
        """Test is commit grammar error."""
        assert issubclass(ParseFailure, CommitGrammarError)

    def test_message_with_found_text(self) -> None:
        """Test message with found text."""
        err = ParseFailure('a commit type', position=0, line=1, column=1, found='foo')
        assert str(err) == "[CG-PARSE-FAILED] line 1, column 1: expected a commit type, found 'foo'"

    def test_message_at_end_of_input(self) -> None:
        """Test message at end of input."""
        err = ParseFailure('a line of text', position=6, line=1, column=7)
        assert 'found end of input' in str(err)

    def test_message_at_line_break(self) -> None:
        """Test message at line break."""
        err = ParseFailure('end of input', position=3, line=2, column=1, found='')
        assert 'found a line break' in str(err)


class TestExplain:
    """Tests for explain()."""

    def test_known_code(self) -> None:
        """Test known code."""
        result = explain('CG-PARSE-FAILED')
        assert result is not None
        assert result.startswith('CG-PARSE-FAILED: ')
        assert 'Hint:' in result

    def test_code_without_hint(self) -> None:
        """Test code without hint."""
        result = explain('CG-CONFIG-PARSE-ERROR')
        assert result is not None
        assert 'Hint:' not in result

    def test_unknown_code(self) -> None:
        """Test unknown code."""
        assert explain('CG-NOPE') is None


class TestRenderError:
    """Tests for render_error() on a non-TTY stream."""

    def test_plain_output(self) -> None:
        """Test plain output."""
        out = io.StringIO()
        render_error(CommitGrammarError(code=E.INPUT_NOT_FOUND, message='No such file: x', hint='try y'), file=out)
        assert out.getvalue() == 'error[CG-INPUT-NOT-FOUND]: No such file: x\n  |\n  = hint: try y\n\n'

    def test_plain_output_without_hint(self) -> None:
        """Test plain output without hint."""
        out = io.StringIO()
        render_error(CommitGrammarError(code=E.CONFIG_PARSE_ERROR, message='bad toml'), file=out)
        assert out.getvalue() == 'error[CG-CONFIG-PARSE-ERROR]: bad toml\n\n'
