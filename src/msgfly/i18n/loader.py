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
"""Catalog loading — build a :class:`CatalogSet` from files on disk.

File naming convention, for basename ``messages``::

    {base_path}/messages.properties        default catalog
    {base_path}/messages_{locale}.properties

``.yaml``, ``.yml`` and ``.json`` files are accepted too; when several
exist for the same catalog the first of ``.properties``, ``.yaml``,
``.yml``, ``.json`` wins. Nested YAML/JSON keys are flattened with dots::

    greeting:
      hello: "Hello, {0}!"

is addressed as ``greeting.hello``.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog
import yaml  # type: ignore[import-untyped]

from msgfly.i18n.catalog import Catalog, CatalogSet
from msgfly.i18n.locale import normalize_locale
from msgfly.i18n.properties import iter_properties
from msgfly.kernel.exceptions import CatalogLoadError

logger = structlog.get_logger("msgfly.i18n.loader")

CATALOG_EXTENSIONS: tuple[str, ...] = (".properties", ".yaml", ".yml", ".json")

# language[_REGION[_variant]], e.g. en, pt_BR, es-419, ja_JP_JP
_LOCALE_SUFFIX = r"[A-Za-z]{2,3}(?:[_-](?:[A-Za-z]{2}|[0-9]{3})(?:[_-][A-Za-z0-9]+)?)?"


def load_catalog_set(
    base_path: str | Path,
    basename: str = "messages",
    locales: Iterable[str] | None = None,
    encoding: str = "utf-8",
) -> CatalogSet:
    """Load the default catalog and one catalog per locale in *locales*.

    When *locales* is ``None`` every locale found by :func:`discover_locales`
    is loaded. Locales without a file are skipped; lookups for them fall
    through to the default catalog.
    """
    base = Path(base_path)
    locale_files = _locale_files(base, basename)
    if locales is None:
        locales = sorted(locale_files)

    default_path = find_catalog_file(base, basename)
    if default_path is None:
        logger.warning("message_catalog_missing", base_path=str(base), basename=basename)
        default = Catalog()
    else:
        default = load_catalog(default_path, encoding=encoding)

    catalogs: dict[str, Catalog] = {}
    for locale in locales:
        key = normalize_locale(locale)
        if key is None or key in catalogs:
            continue
        path = locale_files.get(key)
        if path is None:
            logger.debug("message_catalog_skipped", locale=key, basename=basename)
            continue
        catalogs[key] = load_catalog(path, locale=key, encoding=encoding)

    logger.info(
        "message_catalogs_loaded",
        basename=basename,
        default_codes=len(default),
        locales=sorted(catalogs),
    )
    return CatalogSet(default=default, catalogs=catalogs)


def discover_locales(base_path: str | Path, basename: str = "messages") -> list[str]:
    """Normalised locales of the ``{basename}_{locale}.*`` files in *base_path*."""
    return sorted(_locale_files(Path(base_path), basename))


def _locale_files(base_path: Path, basename: str) -> dict[str, Path]:
    """Map each normalised locale to its catalog file, honouring extension order.

    ``messages_en-US.json`` and ``messages_en_us.properties`` both map to
    ``en_US``; the ``.properties`` file wins. Sibling bundles whose suffix is
    not a locale, such as ``messages_errors.properties``, are ignored.
    """
    if not base_path.is_dir():
        return {}

    pattern = re.compile(rf"^{re.escape(basename)}_({_LOCALE_SUFFIX})$")
    ranked: dict[str, tuple[int, str, Path]] = {}
    for path in base_path.iterdir():
        if not path.is_file() or path.suffix not in CATALOG_EXTENSIONS:
            continue
        match = pattern.match(path.stem)
        if match is None:
            continue
        locale = normalize_locale(match.group(1))
        if locale is None:
            continue
        rank = (CATALOG_EXTENSIONS.index(path.suffix), path.name, path)
        if locale not in ranked or rank[:2] < ranked[locale][:2]:
            ranked[locale] = rank
    return {locale: rank[2] for locale, rank in ranked.items()}


def find_catalog_file(base_path: Path, stem: str) -> Path | None:
    for ext in CATALOG_EXTENSIONS:
        candidate = base_path / f"{stem}{ext}"
        if candidate.is_file():
            return candidate
    return None


def load_catalog(path: str | Path, locale: str | None = None, encoding: str = "utf-8") -> Catalog:
    """Parse one catalog file; raises :class:`CatalogLoadError` if it is unreadable or malformed."""
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogLoadError(str(path), str(exc)) from exc

    if path.suffix == ".properties":
        messages = _read_properties(path, text)
    elif path.suffix in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise CatalogLoadError(str(path), str(exc)) from exc
        messages = _flatten(path, _require_mapping(path, data))
    elif path.suffix == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CatalogLoadError(str(path), str(exc)) from exc
        messages = _flatten(path, _require_mapping(path, data))
    else:
        raise CatalogLoadError(str(path), f"unsupported catalog extension '{path.suffix}'")

    return Catalog(messages, locale=locale, source=str(path))


def _read_properties(path: Path, text: str) -> dict[str, str]:
    messages: dict[str, str] = {}
    try:
        for code, template in iter_properties(text):
            if code in messages:
                logger.warning("duplicate_message_code", code=code, path=str(path))
            messages[code] = template
    except ValueError as exc:
        raise CatalogLoadError(str(path), str(exc)) from exc
    return messages


def _require_mapping(path: Path, data: Any) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CatalogLoadError(str(path), f"top level must be a mapping, got {type(data).__name__}")
    return data


def _flatten(path: Path, data: dict[Any, Any], prefix: str = "") -> dict[str, str]:
    """Flatten a nested dict into dot-separated keys with string values.

    Empty leaves (``hello:`` in YAML, ``null`` in JSON) define no message.
    Boolean and null keys, which YAML produces from unquoted ``yes``/``no``/
    ``on``/``off``/``~``, are rejected rather than turned into ``"True"``.
    """
    items: dict[str, str] = {}
    for key, value in data.items():
        if key is None or isinstance(key, bool):
            raise CatalogLoadError(str(path), f"message code {key!r} is not text; quote it in the catalog")
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            items.update(_flatten(path, value, full_key))
        elif value is None:
            logger.debug("empty_message_skipped", code=full_key, path=str(path))
        else:
            items[full_key] = str(value)
    return items
