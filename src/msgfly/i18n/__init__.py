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
"""msgfly i18n — locale-aware message catalogs with fallback and interpolation.

Typical use::

    from msgfly.i18n import ResourceBundleMessageSource

    messages = ResourceBundleMessageSource("i18n/", basename="messages")
    messages.get_message("hello.name", ("Spring",), locale="en")
"""

from msgfly.i18n.adapters.resource_bundle import ResourceBundleMessageSource, StaticMessageSource
from msgfly.i18n.catalog import Catalog, CatalogSet, ResolutionRequest
from msgfly.i18n.configuration import MessageSourceProperties, message_source_from_config
from msgfly.i18n.loader import discover_locales, load_catalog, load_catalog_set
from msgfly.i18n.locale import candidate_locales, normalize_locale
from msgfly.i18n.ports.outbound import MessageSource
from msgfly.i18n.resolver import MessageCatalogResolver, format_message

__all__ = [
    "Catalog",
    "CatalogSet",
    "MessageCatalogResolver",
    "MessageSource",
    "MessageSourceProperties",
    "ResolutionRequest",
    "ResourceBundleMessageSource",
    "StaticMessageSource",
    "candidate_locales",
    "discover_locales",
    "format_message",
    "load_catalog",
    "load_catalog_set",
    "message_source_from_config",
    "normalize_locale",
]
