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
"""Tests for the MessageSource protocol."""

from msgfly.i18n.ports.outbound import MessageSource


class TestMessageSourceProtocol:
    def test_conforming_class_is_instance(self):
        class Echo:
            def get_message(self, code, args=(), locale=None):
                return code

            def get_message_or_default(self, code, default, args=(), locale=None):
                return default

        assert isinstance(Echo(), MessageSource)

    def test_missing_default_variant_is_not_instance(self):
        class OnlyGet:
            def get_message(self, code, args=(), locale=None):
                return code

        assert not isinstance(OnlyGet(), MessageSource)
