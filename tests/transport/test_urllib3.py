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

import http.client as http_client

import mock
import pytest
import urllib3
import urllib3.exceptions

from google.api_client import exceptions
from google.api_client import http
from google.api_client import method_override
from google.api_client.transport import urllib3 as urllib3_transport

URL = "https://www.googleapis.com/calendar/v3/calendars/primary/events/e1"


def make_http(status=http_client.OK, data=b"", headers=None):
    pool = mock.create_autospec(urllib3.PoolManager, instance=True)
    response = mock.Mock(status=status, data=data, headers=headers or {})
    pool.request.return_value = response
    return pool


def test_default_http():
    transport = urllib3_transport.Urllib3Transport()
    assert isinstance(transport.http, urllib3.PoolManager)


def test_capabilities():
    transport = urllib3_transport.Urllib3Transport(
        mock.sentinel.http, supports_patch=False
    )

    assert not transport.supports_patch()
    assert transport.supports_head()
    assert not transport.supports_method("PATCH")


def test_send():
    pool = make_http(data=b"{}", headers={"content-type": "application/json"})
    transport = urllib3_transport.Urllib3Transport(pool)

    response = transport.send("GET", URL, headers={"a": "b"})

    pool.request.assert_called_once_with("GET", URL, body=None, headers={"a": "b"})
    assert response.status == http_client.OK
    assert response.data == b"{}"
    assert response.headers["content-type"] == "application/json"


def test_send_timeout():
    pool = make_http()
    transport = urllib3_transport.Urllib3Transport(pool)

    transport.send("GET", URL, timeout=5)

    assert pool.request.call_args[1]["timeout"] == 5


def test_send_error():
    pool = make_http()
    pool.request.side_effect = urllib3.exceptions.HTTPError("failed")
    transport = urllib3_transport.Urllib3Transport(pool)

    with pytest.raises(exceptions.TransportError) as excinfo:
        transport.send("GET", URL)

    assert isinstance(excinfo.value.__cause__, urllib3.exceptions.HTTPError)


def test_method_override_pipeline():
    pool = make_http(status=http_client.NO_CONTENT)
    transport = urllib3_transport.Urllib3Transport(pool)
    factory = transport.create_request_factory(
        method_override.MethodOverride(["DELETE"])
    )

    response = factory.build_delete_request(URL).execute()

    assert response.status == http_client.NO_CONTENT
    pool.request.assert_called_once_with(
        "POST", URL, body=b" ", headers={http.OVERRIDE_HEADER: "DELETE"}
    )
