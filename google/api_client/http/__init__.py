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

"""HTTP request model used by Google API clients.

This module defines the small set of interfaces shared by the request
pipeline: the request itself, its body, the transport that sends it and the
hooks (:class:`HttpRequestInitializer` and :class:`HttpExecuteInterceptor`)
that may adjust a request before it is sent.

A typical pipeline looks like::

    from google.api_client import method_override
    from google.api_client.transport import urllib3

    transport = urllib3.Urllib3Transport()
    factory = transport.create_request_factory(method_override.MethodOverride())
    response = factory.build_delete_request(url).execute()
"""

import abc
import io
import os
from typing import Any, Mapping, Optional

from requests import structures

from google.api_client import _helpers
from google.api_client import exceptions


class HttpMethod(object):
    """HTTP method names."""

    DELETE = "DELETE"
    GET = "GET"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"
    POST = "POST"
    PUT = "PUT"
    TRACE = "TRACE"

    ALL = frozenset((DELETE, GET, HEAD, OPTIONS, PATCH, POST, PUT, TRACE))


OVERRIDE_HEADER = "X-HTTP-Method-Override"
"""Header carrying the real HTTP method of a request tunneled through POST."""

_CONTENT_TYPE_HEADER = "Content-Type"


class HttpHeaders(structures.CaseInsensitiveDict):
    """Case-insensitive mapping of HTTP request headers."""


class HttpContent(metaclass=abc.ABCMeta):
    """HTTP request body."""

    @property
    @abc.abstractmethod
    def type(self) -> Optional[str]:
        """Optional[str]: The media type of the content, if known."""
        ...

    @property
    @abc.abstractmethod
    def length(self) -> int:
        """int: The content length in bytes.

        Raises:
            OSError: If the length of the underlying data can't be determined.
        """
        ...

    @abc.abstractmethod
    def write_to(self, stream: io.RawIOBase) -> None:
        """Writes the content to a binary stream.

        Args:
            stream: The stream to write to.
        """
        ...


class ByteArrayContent(HttpContent):
    """Content backed by an in-memory byte string.

    Args:
        data (Union[str, bytes]): The content. Text is encoded as UTF-8.
        content_type (Optional[str]): The media type of the content.
    """

    def __init__(self, data, content_type=None):
        self._data = _helpers.to_bytes(data)
        self._type = content_type

    @property
    def type(self):
        return self._type

    @property
    def length(self):
        return len(self._data)

    @property
    def data(self):
        """bytes: The raw content."""
        return self._data

    def write_to(self, stream):
        stream.write(self._data)


class FileContent(HttpContent):
    """Content read from a file on disk.

    The file is opened lazily every time the content is written, so the
    same instance can be sent more than once.

    Args:
        path (str): The path of the file.
        content_type (Optional[str]): The media type of the content.
    """

    _CHUNK_SIZE = 64 * 1024

    def __init__(self, path, content_type=None):
        self._path = path
        self._type = content_type

    @property
    def type(self):
        return self._type

    @property
    def path(self):
        """str: The path of the file."""
        return self._path

    @property
    def length(self):
        return os.stat(self._path).st_size

    def write_to(self, stream):
        with open(self._path, "rb") as fh:
            while True:
                chunk = fh.read(self._CHUNK_SIZE)
                if not chunk:
                    break
                stream.write(chunk)


class Response(metaclass=abc.ABCMeta):
    """HTTP Response data."""

    @property
    @abc.abstractmethod
    def status(self) -> int:
        """int: The HTTP status code."""
        ...

    @property
    @abc.abstractmethod
    def headers(self) -> Mapping[str, str]:
        """Mapping[str, str]: The HTTP response headers."""
        ...

    @property
    @abc.abstractmethod
    def data(self) -> bytes:
        """bytes: The response body."""
        ...


class HttpExecuteInterceptor(metaclass=abc.ABCMeta):
    """Intercepts a request just before it is sent by the transport."""

    @abc.abstractmethod
    def intercept(self, request: "HttpRequest") -> None:
        """Adjusts the request before execution.

        Args:
            request: The request about to be executed. It may be modified in
                place.
        """
        ...


class HttpRequestInitializer(metaclass=abc.ABCMeta):
    """Initializes every request built by an :class:`HttpRequestFactory`."""

    @abc.abstractmethod
    def initialize(self, request: "HttpRequest") -> None:
        """Initializes a newly built request.

        Args:
            request: The request to initialize.
        """
        ...


class HttpTransport(metaclass=abc.ABCMeta):
    """Low level HTTP transport.

    Subclasses implement :meth:`send`, and report which of the less common
    HTTP methods they are able to send natively.
    """

    def supports_method(self, method: str) -> bool:
        """Returns whether the transport can send the given HTTP method.

        Args:
            method: The HTTP method name.

        Returns:
            bool: True if the method can be sent as is.
        """
        method = method.upper()
        if method == HttpMethod.PATCH:
            return self.supports_patch()
        if method == HttpMethod.HEAD:
            return self.supports_head()
        return method in HttpMethod.ALL

    def supports_patch(self) -> bool:
        """bool: Whether the transport can send PATCH requests."""
        return True

    def supports_head(self) -> bool:
        """bool: Whether the transport can send HEAD requests."""
        return True

    @abc.abstractmethod
    def send(
        self,
        method: str,
        url: str,
        body: Optional[bytes] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
        **kwargs: Any,
    ) -> Response:
        """Sends an HTTP request.

        Args:
            method: The HTTP method to use for the request.
            url: The URI to be requested.
            body: The payload / body in HTTP request.
            headers: Request headers.
            timeout: The number of seconds to wait for a response from the
                server. If not specified or if None, the transport's default
                timeout will be used.
            kwargs: Additional arguments passed through to the underlying
                HTTP library.

        Returns:
            Response: The HTTP response.

        Raises:
            google.api_client.exceptions.TransportError: If any exception
                occurred.
        """
        ...

    def create_request_factory(self, initializer=None):
        """Creates a request factory bound to this transport.

        Args:
            initializer (Optional[HttpRequestInitializer]): Initializer run on
                every request the factory builds.

        Returns:
            HttpRequestFactory: The request factory.
        """
        return HttpRequestFactory(self, initializer=initializer)


class HttpRequest(object):
    """A single HTTP request.

    The ``method``, ``headers`` and ``content`` attributes may be freely
    modified until :meth:`execute` is called, which is what an
    :class:`HttpExecuteInterceptor` does.

    Args:
        transport (HttpTransport): The transport used to send the request.
        method (str): The HTTP method.
        url (str): The URI to be requested.
        content (Optional[HttpContent]): The request body.
        headers (Optional[Mapping[str, str]]): Request headers.
        timeout (Optional[float]): Timeout in seconds passed to the transport.
    """

    def __init__(
        self, transport, method, url, content=None, headers=None, timeout=None
    ):
        self.transport = transport
        self.method = method.upper()
        self.url = url
        self.content = content
        self.headers = HttpHeaders(headers or {})
        self.timeout = timeout
        self.interceptor = None

    def __repr__(self):
        return "HttpRequest(method={!r}, url={!r})".format(self.method, self.url)

    def _serialize_content(self):
        if self.content is None:
            return None
        if self.content.type and _CONTENT_TYPE_HEADER not in self.headers:
            self.headers[_CONTENT_TYPE_HEADER] = self.content.type
        stream = io.BytesIO()
        self.content.write_to(stream)
        return stream.getvalue()

    def execute(self, **kwargs):
        """Runs the interceptor and sends the request.

        Args:
            kwargs: Additional arguments passed through to
                :meth:`HttpTransport.send`.

        Returns:
            Response: The HTTP response.

        Raises:
            google.api_client.exceptions.TransportError: If the transport
                can't send the request method, or the request failed.
            OSError: If the request content could not be read.
        """
        if self.interceptor is not None:
            self.interceptor.intercept(self)

        if not self.transport.supports_method(self.method):
            raise exceptions.TransportError(
                "HTTP transport {!r} doesn't support the {} method".format(
                    self.transport, self.method
                )
            )

        body = self._serialize_content()
        return self.transport.send(
            self.method,
            self.url,
            body=body,
            headers=dict(self.headers),
            timeout=self.timeout,
            **kwargs,
        )


class HttpRequestFactory(object):
    """Builds requests bound to a transport.

    Args:
        transport (HttpTransport): The transport used to send requests.
        initializer (Optional[HttpRequestInitializer]): Initializer run on
            every built request.
    """

    def __init__(self, transport, initializer=None):
        self.transport = transport
        self.initializer = initializer

    def build_request(self, method, url, content=None):
        """Builds a request.

        Args:
            method (str): The HTTP method.
            url (str): The URI to be requested.
            content (Optional[HttpContent]): The request body.

        Returns:
            HttpRequest: The initialized request.
        """
        request = HttpRequest(self.transport, method, url, content=content)
        if self.initializer is not None:
            self.initializer.initialize(request)
        return request

    def build_get_request(self, url):
        return self.build_request(HttpMethod.GET, url)

    def build_head_request(self, url):
        return self.build_request(HttpMethod.HEAD, url)

    def build_delete_request(self, url):
        return self.build_request(HttpMethod.DELETE, url)

    def build_post_request(self, url, content):
        return self.build_request(HttpMethod.POST, url, content=content)

    def build_put_request(self, url, content):
        return self.build_request(HttpMethod.PUT, url, content=content)

    def build_patch_request(self, url, content):
        return self.build_request(HttpMethod.PATCH, url, content=content)
