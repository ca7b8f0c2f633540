# Copyright 2015 Google Inc. All rights reserved.
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

"""Helper functions for commonly used utilities."""

import re

from google.api_client import exceptions


_METHOD_SEPARATOR = re.compile(r"[\s,]+")


def copy_docstring(source_class):
    """Decorator that copies a method's docstring from another class.

    Args:
        source_class (type): The class that has the documented method.

    Returns:
        Callable: A decorator that will copy the docstring of the same
            named method in the source class to the decorated method.
    """

    def decorator(method):
        """Decorator implementation.

        Args:
            method (Callable): The method to copy the docstring to.

        Returns:
            Callable: the same method passed in with an updated docstring.

        Raises:
            ValueError: if the method already has a docstring.
        """
        if method.__doc__:
            raise ValueError("Method already has a docstring.")

        source_method = getattr(source_class, method.__name__)
        method.__doc__ = source_method.__doc__

        return method

    return decorator


def to_bytes(value, encoding="utf-8"):
    """Converts a string value to bytes, if necessary.

    Args:
        value (Union[str, bytes]): The value to be converted.
        encoding (str): The encoding to use to convert unicode to bytes.
            Defaults to "utf-8".

    Returns:
        bytes: The original value converted to bytes (if unicode) or as
            passed in if it started out as bytes.

    Raises:
        ValueError: If the value could not be converted to bytes.
    """
    result = value.encode(encoding) if isinstance(value, str) else value
    if isinstance(result, bytes):
        return result
    else:
        raise ValueError("{0!r} could not be converted to bytes".format(value))


def parse_methods(value):
    """Converts a stringified list of HTTP methods to a set.

    If value is a string it is split on commas and whitespace. If value is an
    iterable then each of its items is taken as a method name. Method names
    are upper-cased.

    Args:
        value (Union[str, Iterable[str], None])

    Returns:
        frozenset: The method names.

    Raises:
        google.api_client.exceptions.InvalidType: If an item of value is not
            a string.
    """
    if not value:
        return frozenset()
    if isinstance(value, str):
        value = _METHOD_SEPARATOR.split(value)

    methods = set()
    for method in value:
        if not isinstance(method, str):
            raise exceptions.InvalidType(
                "HTTP method {!r} is not a string".format(method)
            )
        method = method.strip()
        if method:
            methods.add(method.upper())
    return frozenset(methods)
