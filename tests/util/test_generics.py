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

import collections.abc
import numbers
import typing

import pytest

from google.api_client import exceptions
from google.api_client.util import generics

K = typing.TypeVar("K")
V = typing.TypeVar("V")
N = typing.TypeVar("N", bound=numbers.Number)


class Pair(typing.Generic[K, V]):
    key: K
    value: V
    label: typing.Optional[str]
    notes: typing.Annotated[typing.List[str], "notes"]


class NumberPair(Pair[str, N]):
    extra: N


class FloatPair(NumberPair[float]):
    pass


class Plain(object):
    count: int


class PlainChild(Plain):
    pass


class ArrayMap(object):
    pass


generics.register_lineage(ArrayMap, (K, V), collections.abc.MutableMapping[K, V])


class TestPrimitiveType(object):
    def test_typecodes(self):
        assert generics.PrimitiveType.INT.typecode == "i"
        assert generics.PrimitiveType.LONG.typecode == "q"
        assert generics.PrimitiveType.DOUBLE.typecode == "d"

    def test_python_types(self):
        assert generics.PrimitiveType.SHORT.python_type is int
        assert generics.PrimitiveType.FLOAT.python_type is float


class TestDescriptors(object):
    def test_parameterized_type_arguments_tuple(self):
        parameterized = generics.ParameterizedType(list, [int])
        assert parameterized.arguments == (int,)
        assert parameterized == generics.ParameterizedType(list, (int,))

    def test_type_variable_equality_ignores_bounds(self):
        assert generics.TypeVariable("T", Pair, (int,)) == generics.TypeVariable(
            "T", Pair
        )
        assert generics.TypeVariable("T", Pair) != generics.TypeVariable(
            "T", NumberPair
        )

    def test_wildcard_defaults(self):
        wildcard = generics.WildcardType()
        assert wildcard.upper_bounds == (object,)
        assert wildcard.lower_bounds == ()


class TestFromAnnotation(object):
    def test_class(self):
        assert generics.from_annotation(str) is str

    def test_any(self):
        assert generics.from_annotation(typing.Any) is object

    def test_none(self):
        assert generics.from_annotation(None) is type(None)

    def test_descriptor_unchanged(self):
        array_type = generics.ArrayType(int)
        assert generics.from_annotation(array_type) is array_type

    def test_builtin_generic(self):
        assert generics.from_annotation(dict[str, int]) == generics.ParameterizedType(
            dict, (str, int)
        )

    def test_typing_generic(self):
        assert generics.from_annotation(
            typing.Mapping[str, typing.List[int]]
        ) == generics.ParameterizedType(
            collections.abc.Mapping,
            (str, generics.ParameterizedType(list, (int,))),
        )

    def test_bare_typing_alias(self):
        assert generics.from_annotation(typing.List) is list

    def test_homogeneous_tuple(self):
        assert generics.from_annotation(
            typing.Tuple[int, ...]
        ) == generics.ParameterizedType(tuple, (int,))

    def test_optional(self):
        assert generics.from_annotation(typing.Optional[int]) is int
        assert generics.from_annotation(int | None) is int

    def test_annotated(self):
        assert generics.from_annotation(typing.Annotated[int, "meta"]) is int

    def test_union(self):
        with pytest.raises(exceptions.InvalidType):
            generics.from_annotation(typing.Union[int, str])

    def test_unsupported(self):
        with pytest.raises(exceptions.InvalidType):
            generics.from_annotation("int")

    def test_type_variable_with_owner(self):
        variable = generics.from_annotation(K, owner=Pair)
        assert variable == generics.TypeVariable("K", Pair)

    def test_type_variable_not_declared_by_owner(self):
        variable = generics.from_annotation(K, owner=Plain)
        assert variable.declaration is None

    def test_type_variable_bound(self):
        variable = generics.from_annotation(N, owner=NumberPair)
        assert variable.bounds == (numbers.Number,)


class TestLineage(object):
    def test_type_parameters_generic(self):
        assert generics.type_parameters(Pair) == (
            generics.TypeVariable("K", Pair),
            generics.TypeVariable("V", Pair),
        )

    def test_type_parameters_partially_bound(self):
        assert generics.type_parameters(NumberPair) == (
            generics.TypeVariable("N", NumberPair),
        )

    def test_type_parameters_non_generic(self):
        assert generics.type_parameters(FloatPair) == ()
        assert generics.type_parameters(Plain) == ()

    def test_type_parameters_registered(self):
        names = [variable.name for variable in generics.type_parameters(dict)]
        assert names == ["K", "V"]

    def test_generic_bases(self):
        assert generics.generic_bases(NumberPair) == (
            generics.ParameterizedType(
                Pair, (str, generics.TypeVariable("N", NumberPair))
            ),
        )
        assert generics.generic_bases(FloatPair) == (
            generics.ParameterizedType(NumberPair, (float,)),
        )

    def test_generic_bases_skips_generic_marker(self):
        assert generics.generic_bases(Pair) == ()

    def test_generic_bases_plain(self):
        assert generics.generic_bases(PlainChild) == (Plain,)
        assert generics.generic_bases(Plain) == ()

    def test_generic_bases_registered(self):
        assert generics.generic_bases(ArrayMap) == (
            generics.ParameterizedType(
                collections.abc.MutableMapping,
                (
                    generics.TypeVariable("K", ArrayMap),
                    generics.TypeVariable("V", ArrayMap),
                ),
            ),
        )

    def test_register_lineage_not_a_class(self):
        with pytest.raises(exceptions.InvalidType):
            generics.register_lineage("ArrayMap", (K,))

    def test_register_lineage_bad_parameter(self):
        with pytest.raises(exceptions.InvalidType):
            generics.register_lineage(ArrayMap, ("K",))


class TestFieldType(object):
    def test_type_variable(self):
        assert generics.field_type(Pair, "value") == generics.TypeVariable("V", Pair)

    def test_inherited_field_owned_by_declaring_class(self):
        assert generics.field_type(FloatPair, "key") == generics.TypeVariable(
            "K", Pair
        )
        assert generics.field_type(FloatPair, "extra") == generics.TypeVariable(
            "N", NumberPair
        )

    def test_optional_and_annotated(self):
        assert generics.field_type(Pair, "label") is str
        assert generics.field_type(Pair, "notes") == generics.ParameterizedType(
            list, (str,)
        )

    def test_plain(self):
        assert generics.field_type(PlainChild, "count") is int

    def test_missing(self):
        with pytest.raises(exceptions.InvalidValue):
            generics.field_type(Plain, "missing")


class TestRawClassOf(object):
    def test_class(self):
        assert generics.raw_class_of(str) is str

    def test_parameterized(self):
        assert generics.raw_class_of(generics.ParameterizedType(list, (int,))) is list

    @pytest.mark.parametrize(
        "descriptor",
        [
            generics.TypeVariable("T"),
            generics.WildcardType(),
            generics.ArrayType(int),
            generics.PrimitiveType.INT,
        ],
    )
    def test_no_raw_class(self, descriptor):
        with pytest.raises(exceptions.InvalidType):
            generics.raw_class_of(descriptor)
