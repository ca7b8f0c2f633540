# Copyright 2016 Google Inc. All rights reserved.
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

"""Transport adapter for urllib3."""

import logging

import urllib3
import urllib3.exceptions

from google.api_client import _helpers
from google.api_client import exceptions
from google.api_client import http


_LOGGER = logging.getLogger(__name__)


class _Response(http.Response):
    """urllib3 transport response adapter.

    Args:
        response (urllib3.response.HTTPResponse): The raw urllib3 response.
    """

    def __init__(self, response):
        self._response = response

    @property
    def status(self):
        return self._response.status

    @property
    def headers(self):
        return self._response.headers

    @property
    def data(self):
        return self._response.data


class Urllib3Transport(http.HttpTransport):
    """urllib3 transport.

    Args:
        http (urllib3.request.RequestMethods): An instance of any urllib3
            class that implements :class:`~urllib3.request.RequestMethods`,
            usually :class:`urllib3.PoolManager`. If not specified, a new
            :class:`urllib3.PoolManager` is created.
        supports_patch (bool): Whether PATCH requests can be sent as is.
            Set to False when a proxy or firewall strips PATCH requests.
        supports_head (bool): Whether HEAD requests can be sent as is.
    """

    def __init__(self, http=None, supports_patch=True, supports_head=True):
        if http is None:
            http = urllib3.PoolManager()
        self.http = http
        self._supports_patch = supports_patch
        self._supports_head = supports_head

    def supports_patch(self):
        return self._supports_patch

    def supports_head(self):
        return self._supports_head

    @_helpers.copy_docstring(http.HttpTransport)
    def send(self, method, url, body=None, headers=None, timeout=None, **kwargs):
        # urllib3 uses a sentinel default value for timeout, so only set it if
        # specified.
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            _LOGGER.debug("Making request: %s %s", method, url)
            response = self.http.request(
                method, url, body=body, headers=headers, **kwargs
            )
            return _Response(response)
        except urllib3.exceptions.HTTPError as caught_exc:
            raise exceptions.TransportError(caught_exc) from caught_exc
