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
"""Exception hierarchy for msgfly.

All library exceptions inherit from MsgFlyException, so callers can catch
one type for everything msgfly raises, or a specific subclass for targeted
handling.

Categories:
- BusinessException: lookups that cannot be satisfied (e.g. unknown message code)
- InfrastructureException: catalog files that cannot be read or parsed
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class MsgFlyException(Exception):
    """Base exception for all msgfly errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "MESSAGE_NOT_FOUND").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Business Exceptions
# =============================================================================


class BusinessException(MsgFlyException):
    """A request that cannot be satisfied from the loaded data."""


class ResourceNotFoundException(BusinessException):
    """Requested resource does not exist."""


class MessageNotFoundError(ResourceNotFoundException, LookupError):
    """Raised with ``message_code`` (the code looked up) and ``attempted_locale``.

    No catalog in the fallback chain defines the message code. ``code`` is
    the hierarchy's machine-readable error code, always ``"MESSAGE_NOT_FOUND"``.
    """

    def __init__(self, message_code: str, attempted_locale: str | None = None) -> None:
        locale_display = attempted_locale if attempted_locale is not None else "<default>"
        super().__init__(
            f"No message found under code '{message_code}' for locale '{locale_display}'",
            code="MESSAGE_NOT_FOUND",
            context={"message_code": message_code, "locale": attempted_locale},
        )
        self.message_code = message_code
        self.attempted_locale = attempted_locale


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(MsgFlyException):
    """Failures reading external resources such as catalog files."""


class CatalogLoadError(InfrastructureException):
    """A catalog file exists but could not be parsed into messages."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Failed to load message catalog '{path}': {reason}",
            code="CATALOG_LOAD_FAILED",
            context={"path": path},
        )
        self.path = path
