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
"""Catalog data model — immutable code-to-template mappings per locale."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from msgfly.i18n.locale import normalize_locale


@dataclass(frozen=True, eq=False)
class Catalog:
    """Read-only message templates for one locale.

    ``locale`` is ``None`` for the default catalog (the file without a
    locale suffix). ``source`` records where the messages were loaded from,
    if anywhere. Catalogs compare and hash by identity.
    """

    messages: Mapping[str, str] = field(default_factory=dict)
    locale: str | None = None
    source: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))
        object.__setattr__(self, "locale", normalize_locale(self.locale))

    def get(self, code: str) -> str | None:
        return self.messages.get(code)

    def codes(self) -> frozenset[str]:
        return frozenset(self.messages)

    def __contains__(self, code: object) -> bool:
        return code in self.messages

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)


@dataclass(frozen=True, eq=False)
class CatalogSet:
    """The default catalog plus locale-specific catalogs keyed by locale.

    Keys are normalised on construction, so ``catalog_for("en-US")`` and
    ``catalog_for("en_US")`` return the same catalog. Compared and hashed by
    identity, like :class:`Catalog`.
    """

    default: Catalog = field(default_factory=Catalog)
    catalogs: Mapping[str, Catalog] = field(default_factory=dict)

    def __post_init__(self) -> None:
        normalized: dict[str, Catalog] = {}
        for locale, catalog in self.catalogs.items():
            key = normalize_locale(locale)
            if key is None:
                raise ValueError("Locale-specific catalogs need a non-empty locale; use 'default' instead")
            normalized[key] = catalog
        object.__setattr__(self, "catalogs", MappingProxyType(normalized))

    @classmethod
    def from_mappings(
        cls,
        default: Mapping[str, str],
        **by_locale: Mapping[str, str],
    ) -> CatalogSet:
        """Build a set from plain dicts: ``CatalogSet.from_mappings({...}, en={...})``."""
        return cls(
            default=Catalog(default),
            catalogs={locale: Catalog(messages, locale=locale) for locale, messages in by_locale.items()},
        )

    @property
    def locales(self) -> frozenset[str]:
        return frozenset(self.catalogs)

    def catalog_for(self, locale: str | None) -> Catalog | None:
        """Exact catalog for *locale*, or ``None`` when none was loaded."""
        key = normalize_locale(locale)
        if key is None:
            return None
        return self.catalogs.get(key)


@dataclass(frozen=True)
class ResolutionRequest:
    """One message lookup: code, optional locale, arguments, default message."""

    code: str
    locale: str | None = None
    arguments: Sequence[Any] | None = ()
    default_message: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", tuple(self.arguments or ()))
