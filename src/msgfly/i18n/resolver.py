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
"""MessageCatalogResolver — locale fallback chain plus ``{i}`` interpolation."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

import structlog

from msgfly.i18n.catalog import Catalog, CatalogSet, ResolutionRequest
from msgfly.i18n.locale import candidate_locales
from msgfly.kernel.exceptions import MessageNotFoundError

logger = structlog.get_logger("msgfly.i18n.resolver")

_PLACEHOLDER_RE = re.compile(r"\{(\d+)\}")


class MessageCatalogResolver:
    """Resolve message codes against an immutable :class:`CatalogSet`.

    Lookup order for a request with locale ``ko_KR``: the ``ko_KR``
    catalog, then ``ko``, then the default catalog. Locales without a
    catalog are skipped. When nothing matches, the request's default
    message is returned as-is; failing that, the code itself if
    *use_code_as_default_message* is set; otherwise
    :class:`MessageNotFoundError` is raised.

    The resolver holds no mutable state, so one instance can serve any
    number of threads.
    """

    def __init__(self, catalogs: CatalogSet, use_code_as_default_message: bool = False) -> None:
        self._catalogs = catalogs
        self._use_code_as_default_message = use_code_as_default_message

    @property
    def catalogs(self) -> CatalogSet:
        return self._catalogs

    def resolve(self, request: ResolutionRequest) -> str:
        template = self._find_template(request.code, request.locale)

        if template is None:
            if request.default_message is not None:
                return request.default_message
            if self._use_code_as_default_message:
                return request.code
            raise MessageNotFoundError(request.code, request.locale)

        return format_message(template, request.arguments)

    def get_message(
        self,
        code: str,
        args: Sequence[Any] | None = (),
        locale: str | None = None,
        default: str | None = None,
    ) -> str:
        """Shorthand for ``resolve(ResolutionRequest(code, locale, args, default))``."""
        return self.resolve(ResolutionRequest(code, locale, args, default))

    def fallback_chain(self, locale: str | None) -> list[Catalog]:
        """Catalogs consulted for *locale*, in order; always ends with the default."""
        chain = [
            catalog
            for candidate in candidate_locales(locale)
            if (catalog := self._catalogs.catalog_for(candidate)) is not None
        ]
        chain.append(self._catalogs.default)
        return chain

    def _find_template(self, code: str, locale: str | None) -> str | None:
        chain = self.fallback_chain(locale)
        for catalog in chain:
            template = catalog.get(code)
            if template is None:
                continue
            if locale is not None and catalog is self._catalogs.default:
                logger.debug("message_locale_fallback", code=code, locale=locale)
            return template
        return None


def format_message(template: str, args: Sequence[Any]) -> str:
    """Replace ``{0}``, ``{1}``, ... in *template* with ``str(args[i])``.

    Placeholders without a matching argument stay verbatim. Substitution is
    a single pass, so argument text is never itself interpolated.
    """
    if not args:
        return template

    def _replace(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index < len(args):
            return str(args[index])
        return match.group(0)

    return _PLACEHOLDER_RE.sub(_replace, template)
