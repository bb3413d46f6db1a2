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

"""Output formatters for parsed commit messages.

Each formatter is a pure function: ``CommitMessage → str``. No side
effects, no I/O.

Available formats:

- **debug**: Indented ``Name { field: value }`` dump of the whole tree (default)
- **json**: Machine-readable JSON
- **tree**: Box-drawing tree rendered with ``rich``

Usage::

    from commitgrammar.formatters import format_commit

    output = format_commit(msg, fmt='json')
    print(output)
"""

from __future__ import annotations

from commitgrammar.formatters.registry import FORMATTERS, format_commit

__all__ = [
    'FORMATTERS',
    'format_commit',
]
