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

"""Exceptions used in the google.api_client package."""

from typing import Any


class GoogleApiClientError(Exception):
    """Base class for all google.api_client errors."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args)
        self._retryable: bool = kwargs.get("retryable", False)

    @property
    def retryable(self) -> bool:
        return self._retryable


class TransportError(GoogleApiClientError):
    """Used to indicate an error occurred during an HTTP request."""


class InvalidValue(GoogleApiClientError, ValueError):
    """Used to wrap general ValueError of python."""

    @property
    def retryable(self) -> bool:
        return False


class InvalidType(GoogleApiClientError, TypeError):
    """Used to wrap general TypeError of python."""

    @property
    def retryable(self) -> bool:
        return False
