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
"""Locale identifiers — normalisation and the candidate-locale chain."""

from __future__ import annotations


def normalize_locale(locale: str | None) -> str | None:
    """Return *locale* in ``language_REGION`` form, or ``None`` when blank.

    Accepts both BCP-47 (``en-US``) and POSIX (``en_US``) spellings so that
    either addresses the same catalog::

        >>> normalize_locale("en-us")
        'en_US'
        >>> normalize_locale("KO")
        'ko'
    """
    if locale is None:
        return None
    locale = locale.strip().replace("-", "_")
    if not locale:
        return None

    language, _, rest = locale.partition("_")
    if not rest:
        return language.lower()
    region, _, variant = rest.partition("_")
    parts = [language.lower(), region.upper()]
    if variant:
        parts.append(variant)
    return "_".join(parts)


def candidate_locales(locale: str | None) -> tuple[str, ...]:
    """Locale keys to try for *locale*, most specific first.

    ``ko-KR`` yields ``("ko_KR", "ko")``; ``None`` yields an empty tuple,
    meaning only the default catalog applies.
    """
    normalized = normalize_locale(locale)
    if normalized is None:
        return ()

    candidates = [normalized]
    parts = normalized.split("_")
    while len(parts) > 1:
        parts.pop()
        candidates.append("_".join(parts))
    return tuple(candidates)
