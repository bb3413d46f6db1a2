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

"""JSON output for parsed commit messages.

Absent parts are ``null``; footer lines keep their input order.
"""

from __future__ import annotations

import json

from commitgrammar.grammar import CommitMessage


def format_json(msg: CommitMessage, *, indent: int = 2) -> str:
    """Render the commit tree as a JSON string.

    Args:
        msg: The parsed message.
        indent: JSON indentation level.

    Returns:
        A JSON document with ``type``, ``description``, ``footer``
        and ``body`` keys.
    """
    return json.dumps(msg.to_dict(), indent=indent, ensure_ascii=False) + '\n'


__all__ = ['format_json']
