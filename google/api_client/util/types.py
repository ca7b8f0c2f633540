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

"""Utilities for working with generic type descriptors.

These are used by the JSON data-binding layer to find out which concrete type
to deserialize a value into. All functions operate on the descriptors defined
in :mod:`google.api_client.util.generics` and never modify them.

For example, given::

    T = typing.TypeVar("T")

    class Page(typing.Generic[T]):
        items: list[T]

    class FilePage(Page[File]):
        pass

the element type of ``FilePage.items`` is found with::

    items = generics.field_type(FilePage, "items")
    element = types.get_iterable_parameter(items)  # TypeVariable T of Page
    types.resolve_type_variable([FilePage], element)  # File
"""

import array
import collections.abc
import inspect
import numbers

from google.api_client import exceptions
from google.api_client.util import generics


def is_assignable_to_or_from(class_a, class_b):
    """Returns whether a type is assignable to or from another type.

    Args:
        class_a (Any): A class, parameterized type, primitive or array
            descriptor.
        class_b (Any): Another type descriptor of the same kinds.

    Returns:
        bool: True if ``class_a`` is assignable to ``class_b``, or
            ``class_b`` to ``class_a``.
    """
    return _is_assignable(class_a, class_b) or _is_assignable(class_b, class_a)


def _is_assignable(source, target):
    if isinstance(source, generics.PrimitiveType) or isinstance(
        target, generics.PrimitiveType
    ):
        return source is target
    if target is object:
        return True
    if isinstance(source, generics.ArrayType) or isinstance(
        target, generics.ArrayType
    ):
        return (
            isinstance(source, generics.ArrayType)
            and isinstance(target, generics.ArrayType)
            and _is_assignable(source.component, target.component)
        )
    return issubclass(generics.raw_class_of(source), generics.raw_class_of(target))


def new_instance(cls):
    """Creates a new instance of a class using its zero-argument constructor.

    Args:
        cls (type): The class to instantiate.

    Returns:
        Any: The new instance.

    Raises:
        google.api_client.exceptions.InvalidValue: If ``cls`` is a primitive
            or array descriptor, ``NoneType``, an abstract class, or not a
            class at all.
    """
    if isinstance(cls, generics.PrimitiveType):
        raise exceptions.InvalidValue(
            "Unable to create new instance of primitive type {}".format(cls.name)
        )
    if isinstance(cls, generics.ArrayType):
        raise exceptions.InvalidValue(
            "Unable to create new instance of array type {!r}".format(cls)
        )
    if not isinstance(cls, type):
        raise exceptions.InvalidValue("{!r} is not a class".format(cls))
    if cls is type(None):
        raise exceptions.InvalidValue("Unable to create new instance of NoneType")
    if inspect.isabstract(cls):
        raise exceptions.InvalidValue(
            "Unable to create new instance of abstract class {}".format(
                cls.__name__
            )
        )
    return cls()


def get_bound(wildcard_type):
    """Returns the upper bound of a wildcard type.

    Lower bounds are ignored.

    Args:
        wildcard_type (google.api_client.util.generics.WildcardType): The
            wildcard.

    Returns:
        Any: Its single upper bound, or :class:`object` if it has none.
    """
    upper_bounds = wildcard_type.upper_bounds
    if upper_bounds:
        return upper_bounds[0]
    return object


def get_super_parameterized_type(type_, super_class):
    """Returns the parameterization of a superclass of a type.

    The supertypes of ``type_`` are searched depth first, in base class
    order, until the one whose raw class is ``super_class`` is found. A base
    whose lineage doesn't parameterize ``super_class`` is skipped, even if it
    is a virtual subclass of it.

    Args:
        type_ (Any): A class or parameterized type descriptor.
        super_class (type): The superclass to look for.

    Returns:
        Optional[google.api_client.util.generics.ParameterizedType]: The
            parameterized superclass, or None if ``type_`` is not a class or
            parameterized type, or is not parameterized as ``super_class``
            anywhere in its lineage.
    """
    if isinstance(type_, generics.ParameterizedType):
        if type_.raw is super_class:
            return type_
        raw = type_.raw
    elif isinstance(type_, type) and type_ is not object:
        raw = type_
    else:
        return None

    for base in generics.generic_bases(raw):
        if not issubclass(generics.raw_class_of(base), super_class):
            continue
        parameterized = get_super_parameterized_type(base, super_class)
        if parameterized is not None:
            return parameterized
    return None


def _type_parameter_index(declaration, type_variable):
    for index, parameter in enumerate(generics.type_parameters(declaration)):
        if parameter == type_variable:
            return index
    raise exceptions.InvalidType(
        "{!r} is not declared by {}".format(type_variable, declaration.__name__)
    )


def resolve_type_variable(context, type_variable):
    """Resolves a type variable against a context chain.

    The context is searched from its last entry backwards for a type that
    parameterizes the class declaring ``type_variable``. If the argument found
    there is itself a type variable, it is resolved in turn; when that fails
    the still unresolved variable is returned.

    Args:
        context (Sequence[Any]): Class or parameterized type descriptors, for
            example the classes of the objects being deserialized, outermost
            first.
        type_variable (google.api_client.util.generics.TypeVariable): The
            type variable.

    Returns:
        Optional[Any]: The resolved type, or None if no entry in the context
            parameterizes the declaring class. Callers then fall back to the
            declared type.
    """
    declaration = type_variable.declaration
    if not isinstance(declaration, type):
        return None

    parameterized = None
    for entry in reversed(context):
        parameterized = get_super_parameterized_type(entry, declaration)
        if parameterized is not None:
            break
    if parameterized is None:
        return None

    index = _type_parameter_index(declaration, type_variable)
    if index >= len(parameterized.arguments):
        return None
    result = parameterized.arguments[index]
    if isinstance(result, generics.TypeVariable) and result != type_variable:
        resolved = resolve_type_variable(context, result)
        if resolved is not None:
            return resolved
    return result


def get_raw_class(parameterized_type):
    """Returns the raw class of a parameterized type.

    Raises:
        google.api_client.exceptions.InvalidType: If ``parameterized_type``
            is not a :class:`~google.api_client.util.generics.ParameterizedType`.
    """
    if not isinstance(parameterized_type, generics.ParameterizedType):
        raise exceptions.InvalidType(
            "{!r} is not a parameterized type".format(parameterized_type)
        )
    return parameterized_type.raw


def is_array(type_):
    """Returns whether a type descriptor is an array type."""
    return isinstance(type_, generics.ArrayType)


def get_array_component_type(array_type):
    """Returns the component type of an array type.

    Raises:
        google.api_client.exceptions.InvalidType: If ``array_type`` is not an
            :class:`~google.api_client.util.generics.ArrayType`.
    """
    if not is_array(array_type):
        raise exceptions.InvalidType("{!r} is not an array type".format(array_type))
    return array_type.component


def _actual_parameter_at_position(type_, super_class, position):
    parameterized = get_super_parameterized_type(type_, super_class)
    if parameterized is None or position >= len(parameterized.arguments):
        return None
    value_type = parameterized.arguments[position]
    # Normally a type variable, unless type_ is super_class itself, as in
    # Iterable[str].
    if isinstance(value_type, generics.TypeVariable):
        resolved = resolve_type_variable([type_], value_type)
        if resolved is not None:
            return resolved
    return value_type


def get_iterable_parameter(iterable_type):
    """Returns the element type of an iterable or array type.

    Args:
        iterable_type (Any): A class, parameterized type or array descriptor.

    Returns:
        Optional[Any]: The component type of an array, the element type of an
            iterable, or the declaring type variable of the element type if
            the iterable is not parameterized. None if ``iterable_type`` is
            not iterable.
    """
    if is_array(iterable_type):
        return iterable_type.component
    return _actual_parameter_at_position(iterable_type, collections.abc.Iterable, 0)


def get_map_value_parameter(map_type):
    """Returns the value type of a mapping type.

    Args:
        map_type (Any): A class or parameterized type descriptor.

    Returns:
        Optional[Any]: The value type, or the declaring type variable of the
            value type if the mapping is not parameterized. None if
            ``map_type`` is not a mapping.
    """
    return _actual_parameter_at_position(map_type, collections.abc.Mapping, 1)


def iterable_of(value):
    """Returns a value that is an iterable or an array as an iterable.

    No copy is made: lists, tuples and :class:`array.array` instances are
    already iterable and are returned as is.

    Args:
        value (Iterable): The iterable or array.

    Returns:
        Iterable: ``value``.

    Raises:
        google.api_client.exceptions.InvalidType: If ``value`` is text or
            not iterable.
    """
    if isinstance(value, str) or not isinstance(value, collections.abc.Iterable):
        raise exceptions.InvalidType(
            "{!r} is not an iterable or array".format(value)
        )
    return value


def to_array(iterable, component_type):
    """Creates an array holding the values of an iterable.

    Args:
        iterable (Iterable): The values.
        component_type (Any): The component type of the array. A
            :class:`~google.api_client.util.generics.PrimitiveType`, an
            :class:`~google.api_client.util.generics.ArrayType` for
            multi-dimensional arrays, or a class.

    Returns:
        Union[array.array, Tuple]: An :class:`array.array` for primitive
            component types, otherwise a tuple.

    Raises:
        google.api_client.exceptions.InvalidType: If a value is not an
            instance of a class component type, or a nested value is not
            iterable. Values of a primitive array must already be integers
            for integer kinds, or real numbers for floating point kinds.
    """
    if isinstance(component_type, generics.PrimitiveType):
        if component_type.python_type is int:
            accepted = numbers.Integral
        else:
            accepted = numbers.Real
        values = tuple(iterable)
        for value in values:
            if not isinstance(value, accepted):
                raise exceptions.InvalidType(
                    "{!r} can't be stored in a {} array".format(
                        value, component_type.name
                    )
                )
        return array.array(
            component_type.typecode,
            (component_type.python_type(value) for value in values),
        )

    if is_array(component_type):
        return tuple(
            None
            if value is None
            else to_array(iterable_of(value), component_type.component)
            for value in iterable
        )

    raw = generics.raw_class_of(component_type)
    values = tuple(iterable)
    for value in values:
        if value is not None and not isinstance(value, raw):
            raise exceptions.InvalidType(
                "{!r} is not an instance of {}".format(value, raw.__name__)
            )
    return values
