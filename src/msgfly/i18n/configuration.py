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
"""Explicit construction of message sources from configuration.

Reads the ``msgfly.i18n`` section::

    msgfly:
      i18n:
        base-path: "i18n/"
        basename: messages
        locales: [en, ko]          # omit to load every locale on disk
        encoding: utf-8
        use-code-as-default-message: false
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from msgfly.core.config import Config, config_properties
from msgfly.i18n.adapters.resource_bundle import ResourceBundleMessageSource


@config_properties(prefix="msgfly.i18n")
class MessageSourceProperties(BaseModel):
    """Settings of the ``msgfly.i18n`` section."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    base_path: str = Field(default="i18n/", alias="base-path", min_length=1)
    basename: str = Field(default="messages", min_length=1)
    locales: list[str] | None = None
    encoding: str = "utf-8"
    use_code_as_default_message: bool = Field(default=False, alias="use-code-as-default-message")


def message_source_from_config(config: Config) -> ResourceBundleMessageSource:
    """Build a :class:`ResourceBundleMessageSource` from ``msgfly.i18n``.

    Raises ``ValueError`` when the section fails validation.
    """
    props = config.bind(MessageSourceProperties)
    return ResourceBundleMessageSource(
        base_path=props.base_path,
        basename=props.basename,
        locales=props.locales,
        encoding=props.encoding,
        use_code_as_default_message=props.use_code_as_default_message,
    )
