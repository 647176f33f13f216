# Copyright 2026 Firefly Software Solutions Inc.
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
"""Reader for Java-style ``.properties`` message files.

Supported syntax:

- ``#`` and ``!`` comment lines, blank lines
- ``key=value``, ``key: value`` and ``key value`` entries
- a trailing backslash continues the entry on the next line
  (leading whitespace of the continuation is dropped)
- ``\\t``, ``\\n``, ``\\r``, ``\\f`` and ``\\uXXXX`` escapes; any other escaped
  character stands for itself, so ``\\=`` and ``\\:`` may appear in keys
"""

from __future__ import annotations

import re
import string
from collections.abc import Iterator

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_KEY_TERMINATORS = "=:" + _WHITESPACE
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def iter_properties(text: str) -> Iterator[tuple[str, str]]:
    """Yield ``(key, value)`` pairs in file order, duplicates included.

    Raises ``ValueError`` on a malformed ``\\uXXXX`` escape.
    """
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        yield _unescape(key), _unescape(value)


def parse_properties(text: str) -> dict[str, str]:
    """Parse *text* into a dict; a repeated key keeps its last value."""
    return dict(iter_properties(text))


def _logical_lines(text: str) -> Iterator[str]:
    pending: str | None = None
    for natural in _LINE_BREAK_RE.split(text):
        line = natural.lstrip(_WHITESPACE)
        if pending is None and (not line or line[0] in "#!"):
            continue

        joined = line if pending is None else pending + line
        if _continues(line):
            pending = joined[:-1]
            continue
        pending = None
        yield joined

    if pending is not None:
        yield pending


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str) -> tuple[str, str]:
    end = 0
    while end < len(line):
        char = line[end]
        if char == "\\":
            end += 2
            continue
        if char in _KEY_TERMINATORS:
            break
        end += 1

    key = line[:end]
    rest = line[end:].lstrip(_WHITESPACE)
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def _unescape(value: str) -> str:
    if "\\" not in value:
        return value

    out: list[str] = []
    pos = 0
    while pos < len(value):
        char = value[pos]
        pos += 1
        if char != "\\":
            out.append(char)
            continue
        if pos >= len(value):
            break

        escaped = value[pos]
        pos += 1
        if escaped == "u":
            digits = value[pos : pos + 4]
            if len(digits) != 4 or any(d not in string.hexdigits for d in digits):
                raise ValueError(f"Malformed \\uxxxx encoding: '\\u{digits}'")
            out.append(chr(int(digits, 16)))
            pos += 4
        else:
            out.append(_ESCAPES.get(escaped, escaped))
    return "".join(out)
