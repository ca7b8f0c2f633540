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

"""Transport adapter for Requests."""

import logging

import requests
import requests.exceptions

from google.api_client import _helpers
from google.api_client import exceptions
from google.api_client import http


_LOGGER = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 120  # in seconds


class _Response(http.Response):
    """Requests transport response adapter.

    Args:
        response (requests.Response): The raw Requests response.
    """

    def __init__(self, response):
        self._response = response

    @property
    def status(self):
        return self._response.status_code

    @property
    def headers(self):
        return self._response.headers

    @property
    def data(self):
        return self._response.content


class RequestsTransport(http.HttpTransport):
    """Requests transport.

    Args:
        session (requests.Session): An instance :class:`requests.Session` used
            to make HTTP requests. If not specified, a session will be created.
        supports_patch (bool): Whether PATCH requests can be sent as is.
            Set to False when a proxy or firewall strips PATCH requests.
        supports_head (bool): Whether HEAD requests can be sent as is.
    """

    def __init__(self, session=None, supports_patch=True, supports_head=True):
        if not session:
            session = requests.Session()
        self.session = session
        self._supports_patch = supports_patch
        self._supports_head = supports_head

    def supports_patch(self):
        return self._supports_patch

    def supports_head(self):
        return self._supports_head

    @_helpers.copy_docstring(http.HttpTransport)
    def send(self, method, url, body=None, headers=None, timeout=None, **kwargs):
        if timeout is None:
            timeout = _DEFAULT_TIMEOUT

        try:
            _LOGGER.debug("Making request: %s %s", method, url)
            response = self.session.request(
                method, url, data=body, headers=headers, timeout=timeout, **kwargs
            )
            return _Response(response)
        except requests.exceptions.RequestException as caught_exc:
            raise exceptions.TransportError(caught_exc) from caught_exc
