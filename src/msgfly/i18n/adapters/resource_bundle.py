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
"""Resource-bundle message sources backed by a :class:`MessageCatalogResolver`."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from msgfly.i18n.catalog import CatalogSet
from msgfly.i18n.loader import load_catalog_set
from msgfly.i18n.resolver import MessageCatalogResolver


class StaticMessageSource:
    """MessageSource over a :class:`CatalogSet` that is already built."""

    def __init__(self, catalogs: CatalogSet, use_code_as_default_message: bool = False) -> None:
        self._resolver = MessageCatalogResolver(catalogs, use_code_as_default_message)

    @property
    def resolver(self) -> MessageCatalogResolver:
        return self._resolver

    def get_message(
        self,
        code: str,
        args: Sequence[Any] | None = (),
        locale: str | None = None,
    ) -> str:
        return self.resolver.get_message(code, args, locale)

    def get_message_or_default(
        self,
        code: str,
        default: str,
        args: Sequence[Any] | None = (),
        locale: str | None = None,
    ) -> str:
        return self.resolver.get_message(code, args, locale, default=default)


class ResourceBundleMessageSource(StaticMessageSource):
    """Resolves messages from ``{basename}[_{locale}]`` files under *base_path*.

    Files are read once, on first lookup, and never reloaded. With
    ``locales=None`` every locale present on disk is loaded. See
    :mod:`msgfly.i18n.loader` for the accepted file formats.

    Example::

        source = ResourceBundleMessageSource("i18n/", basename="messages")
        source.get_message("hello.name", ("Spring",))         # default catalog
        source.get_message("hello", locale="en")              # messages_en
    """

    def __init__(
        self,
        base_path: str | Path = "i18n/",
        basename: str = "messages",
        locales: Iterable[str] | None = None,
        encoding: str = "utf-8",
        use_code_as_default_message: bool = False,
    ) -> None:
        self._base_path = Path(base_path)
        self._basename = basename
        self._locales = None if locales is None else tuple(locales)
        self._encoding = encoding
        self._use_code_as_default_message = use_code_as_default_message
        self._loaded: MessageCatalogResolver | None = None
        self._lock = threading.Lock()

    @property
    def resolver(self) -> MessageCatalogResolver:
        if self._loaded is None:
            with self._lock:
                if self._loaded is None:
                    catalogs = load_catalog_set(
                        self._base_path,
                        basename=self._basename,
                        locales=self._locales,
                        encoding=self._encoding,
                    )
                    self._loaded = MessageCatalogResolver(catalogs, self._use_code_as_default_message)
        return self._loaded
