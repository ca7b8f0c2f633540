# Copyright 2016 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import mock
import pytest

from google.api_client import http


@pytest.fixture
def make_transport():
    def factory(supports_patch=True, supports_head=True):
        transport = mock.create_autospec(http.HttpTransport, instance=True)
        transport.supports_patch.return_value = supports_patch
        transport.supports_head.return_value = supports_head
        transport.supports_method.return_value = True
        return transport

    return factory


@pytest.fixture
def transport(make_transport):
    return make_transport()


@pytest.fixture
def legacy_transport(make_transport):
    """A transport that can send neither PATCH nor HEAD."""
    return make_transport(supports_patch=False, supports_head=False)
