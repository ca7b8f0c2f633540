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

"""HTTP method override for Google APIs.

Google API servers accept a ``POST`` request carrying an
``X-HTTP-Method-Override`` header in place of any other HTTP method. This
module provides an interceptor that performs that substitution for methods
the HTTP transport can't send, or that a proxy or firewall between the client
and the server is known to strip.

Use it as the request initializer of a request factory::

    from google.api_client import method_override
    from google.api_client.transport import requests

    transport = requests.RequestsTransport(supports_patch=False)
    factory = transport.create_request_factory(
        method_override.MethodOverride(["DELETE"]))

By default only the methods not supported by the transport are overridden.
GET and POST are never overridden.
"""

import logging
import os

from google.api_client import _helpers
from google.api_client import environment_vars
from google.api_client import http


_LOGGER = logging.getLogger(__name__)

# Google servers will fail to process a POST unless the Content-Length
# header is >= 1.
_PLACEHOLDER_CONTENT = b" "


class MethodOverride(http.HttpExecuteInterceptor, http.HttpRequestInitializer):
    """Wraps HTTP requests other than GET or POST inside of a POST request.

    Args:
        override (Optional[Iterable[str]]): HTTP methods to override in
            addition to the ones the transport doesn't support. The methods
            are copied, so later changes to ``override`` have no effect.
    """

    def __init__(self, override=None):
        self._override = _helpers.parse_methods(override)

    def __repr__(self):
        return "MethodOverride(override={!r})".format(sorted(self._override))

    @classmethod
    def from_environment(cls):
        """Creates an interceptor configured from the environment.

        The methods to override are read from the
        ``GOOGLE_API_METHOD_OVERRIDE`` environment variable, a comma or space
        separated list of HTTP method names.

        Returns:
            MethodOverride: The constructed interceptor.
        """
        return cls(os.environ.get(environment_vars.GOOGLE_API_METHOD_OVERRIDE))

    @property
    def override_methods(self):
        """frozenset: HTTP methods always overridden, regardless of transport."""
        return self._override

    def initialize(self, request):
        request.interceptor = self

    def intercept(self, request):
        if not self._override_this_method(request):
            return

        method = request.method
        # The length query may raise, so run it before the request is touched.
        empty = request.content is None or request.content.length == 0
        request.method = http.HttpMethod.POST
        request.headers[http.OVERRIDE_HEADER] = method
        if empty:
            request.content = http.ByteArrayContent(_PLACEHOLDER_CONTENT)
        _LOGGER.debug("Overriding %s request to %s with POST", method, request.url)

    def _override_this_method(self, request):
        method = request.method
        if (
            method not in (http.HttpMethod.GET, http.HttpMethod.POST)
            and method in self._override
        ):
            return True
        if method == http.HttpMethod.PATCH:
            return not request.transport.supports_patch()
        if method == http.HttpMethod.HEAD:
            return not request.transport.supports_head()
        return False
