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

import pytest

from google.api_client import _helpers
from google.api_client import exceptions


class SourceClass(object):
    def func(self):  # pragma: NO COVER
        """example docstring"""


def test_copy_docstring_success():
    def func():  # pragma: NO COVER
        pass

    _helpers.copy_docstring(SourceClass)(func)

    assert func.__doc__ == SourceClass.func.__doc__


def test_copy_docstring_conflict():
    def func():  # pragma: NO COVER
        """existing docstring"""
        pass

    with pytest.raises(ValueError):
        _helpers.copy_docstring(SourceClass)(func)


def test_copy_docstring_non_existing():
    def func2():  # pragma: NO COVER
        pass

    with pytest.raises(AttributeError):
        _helpers.copy_docstring(SourceClass)(func2)


def test_to_bytes_with_bytes():
    value = b"bytes-val"
    assert _helpers.to_bytes(value) == value


def test_to_bytes_with_unicode():
    value = u"string-val"
    encoded_value = b"string-val"
    assert _helpers.to_bytes(value) == encoded_value


def test_to_bytes_with_nonstring_type():
    with pytest.raises(ValueError):
        _helpers.to_bytes(object())


def test_parse_methods_empty():
    assert _helpers.parse_methods(None) == frozenset()
    assert _helpers.parse_methods("") == frozenset()
    assert _helpers.parse_methods([]) == frozenset()


def test_parse_methods_string():
    assert _helpers.parse_methods("delete, put patch") == frozenset(
        ["DELETE", "PUT", "PATCH"]
    )


def test_parse_methods_iterable():
    assert _helpers.parse_methods(["delete", " Put ", ""]) == frozenset(
        ["DELETE", "PUT"]
    )


@pytest.mark.parametrize("value", [[b"DELETE"], ["PUT", None], [1]])
def test_parse_methods_non_string_item(value):
    with pytest.raises(exceptions.InvalidType):
        _helpers.parse_methods(value)
