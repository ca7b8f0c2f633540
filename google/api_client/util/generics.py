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

"""Generic type descriptors.

Python erases most generic information at runtime, so the type utilities in
:mod:`google.api_client.util.types` work on an explicit descriptor model
instead of raw annotations. A descriptor is one of:

* a concrete type: a Python class, or a :class:`PrimitiveType` numeric kind,
* a :class:`ParameterizedType`, such as ``list[int]``,
* a :class:`TypeVariable`, a placeholder declared by a generic class,
* a :class:`WildcardType`, an unknown type with bounds,
* an :class:`ArrayType`, a fixed-size sequence of a component type.

Descriptors are built from ``typing`` annotations with
:func:`from_annotation`, or from annotated class fields with
:func:`field_type`.

The supertypes of a class, and the type parameters it declares, form its
*lineage*. For classes deriving from :class:`typing.Generic` the lineage is
read from the class itself. The built-in containers carry no such metadata,
so their lineage is registered explicitly in this module, and other classes
can be added with :func:`register_lineage`::

    K = typing.TypeVar("K")
    V = typing.TypeVar("V")

    generics.register_lineage(
        ArrayMap, (K, V), collections.abc.MutableMapping[K, V])
"""

import collections
import collections.abc
import dataclasses
import enum
import inspect
import types
import typing
from typing import Any, NamedTuple, Optional, Tuple

from google.api_client import exceptions


class PrimitiveType(enum.Enum):
    """Primitive numeric kinds that can be stored unboxed in an array.

    Each kind maps to an :mod:`array` type code and the Python type used to
    box and unbox its values.
    """

    BYTE = ("b", int)
    SHORT = ("h", int)
    INT = ("i", int)
    LONG = ("q", int)
    FLOAT = ("f", float)
    DOUBLE = ("d", float)

    def __init__(self, typecode, python_type):
        self.typecode = typecode
        self.python_type = python_type


@dataclasses.dataclass(frozen=True)
class ParameterizedType:
    """A generic class with type arguments, such as ``dict[str, int]``.

    Attributes:
        raw (type): The generic class.
        arguments (Tuple): The type argument descriptors.
    """

    raw: type
    arguments: Tuple[Any, ...]

    def __post_init__(self):
        object.__setattr__(self, "arguments", tuple(self.arguments))


@dataclasses.dataclass(frozen=True)
class TypeVariable:
    """A type parameter declared by a generic class.

    Two type variables are equal if they have the same name and declaring
    class.

    Attributes:
        name (str): The name of the type variable.
        declaration (Optional[type]): The class declaring the variable, or
            None if it is unknown.
        bounds (Tuple): The upper bounds of the variable.
    """

    name: str
    declaration: Optional[type] = None
    bounds: Tuple[Any, ...] = dataclasses.field(default=(object,), compare=False)


@dataclasses.dataclass(frozen=True)
class WildcardType:
    """An unknown type argument with bounds, such as "some kind of number".

    Attributes:
        upper_bounds (Tuple): Types the wildcard is assignable to.
        lower_bounds (Tuple): Types assignable to the wildcard.
    """

    upper_bounds: Tuple[Any, ...] = (object,)
    lower_bounds: Tuple[Any, ...] = ()


@dataclasses.dataclass(frozen=True)
class ArrayType:
    """A fixed-size sequence with a single component type.

    Attributes:
        component: The component type descriptor.
    """

    component: Any


_DESCRIPTOR_TYPES = (
    PrimitiveType,
    ParameterizedType,
    TypeVariable,
    WildcardType,
    ArrayType,
)

_GENERIC_MARKERS = (typing.Generic, typing.Protocol)

_UNION_TYPES = (typing.Union, types.UnionType)


class _Lineage(NamedTuple):
    parameters: Tuple[typing.TypeVar, ...]
    bases: Tuple[Any, ...]


_LINEAGE = {}


def register_lineage(cls, parameters, *bases):
    """Registers the type parameters and generic supertypes of a class.

    Registration is needed for classes whose generic lineage is not visible
    at runtime, such as built-in containers. It overrides whatever lineage
    the class itself exposes.

    Args:
        cls (type): The class.
        parameters (Sequence[typing.TypeVar]): The type parameters declared
            by the class, in order.
        bases (Any): The direct supertypes of the class, as annotations that
            may use the type variables in ``parameters``.

    Raises:
        google.api_client.exceptions.InvalidType: If ``cls`` is not a class,
            or ``parameters`` contains something other than type variables.
    """
    if not isinstance(cls, type):
        raise exceptions.InvalidType("{!r} is not a class".format(cls))
    parameters = tuple(parameters)
    for parameter in parameters:
        if not isinstance(parameter, typing.TypeVar):
            raise exceptions.InvalidType(
                "{!r} is not a type variable".format(parameter)
            )
    # Bases are converted against the entry, so store the parameters first.
    _LINEAGE[cls] = _Lineage(parameters, ())
    _LINEAGE[cls] = _Lineage(
        parameters, tuple(from_annotation(base, owner=cls) for base in bases)
    )


def _declared_type_vars(cls):
    lineage = _LINEAGE.get(cls)
    if lineage is not None:
        return lineage.parameters
    namespace = getattr(cls, "__dict__", {})
    return tuple(
        parameter
        for parameter in namespace.get("__parameters__", ())
        if isinstance(parameter, typing.TypeVar)
    )


def _type_variable(type_var, owner):
    declaration = None
    if owner is not None and type_var in _declared_type_vars(owner):
        declaration = owner
    bound = type_var.__bound__
    if bound is None or isinstance(bound, typing.ForwardRef):
        bounds = (object,)
    else:
        bounds = (from_annotation(bound, owner),)
    return TypeVariable(type_var.__name__, declaration, bounds)


def type_parameters(cls):
    """Returns the type variables declared by a class.

    Args:
        cls (type): The class.

    Returns:
        Tuple[TypeVariable, ...]: The declared type variables, in order. Empty
            if the class is not generic.
    """
    return tuple(_type_variable(type_var, cls) for type_var in _declared_type_vars(cls))


def generic_bases(cls):
    """Returns the direct supertypes of a class, with their type arguments.

    Args:
        cls (type): The class.

    Returns:
        Tuple: Class or :class:`ParameterizedType` descriptors, in declaration
            order. :class:`object` and generic markers such as
            :class:`typing.Generic` are left out.
    """
    lineage = _LINEAGE.get(cls)
    if lineage is not None:
        return lineage.bases

    orig_bases = cls.__dict__.get("__orig_bases__")
    if orig_bases is None:
        return tuple(base for base in cls.__bases__ if base is not object)

    bases = []
    for base in orig_bases:
        if base is object or base in _GENERIC_MARKERS:
            continue
        if typing.get_origin(base) in _GENERIC_MARKERS:
            continue
        bases.append(from_annotation(base, owner=cls))
    return tuple(bases)


def from_annotation(annotation, owner=None):
    """Converts a ``typing`` annotation to a type descriptor.

    Args:
        annotation (Any): The annotation, for example ``list[int]``,
            ``typing.Mapping[str, T]`` or a :class:`typing.TypeVar`.
            Descriptors are returned unchanged.
        owner (Optional[type]): The class the annotation appears in. Type
            variables declared by this class are bound to it.

    Returns:
        Any: The type descriptor.

    Raises:
        google.api_client.exceptions.InvalidType: If the annotation has no
            descriptor equivalent, such as a union of several types.
    """
    if isinstance(annotation, _DESCRIPTOR_TYPES):
        return annotation
    if annotation is typing.Any:
        return object
    if annotation is None:
        return type(None)
    if isinstance(annotation, typing.TypeVar):
        return _type_variable(annotation, owner)

    origin = typing.get_origin(annotation)
    if origin is None:
        if isinstance(annotation, type):
            return annotation
        raise exceptions.InvalidType(
            "Unsupported type annotation: {!r}".format(annotation)
        )

    arguments = typing.get_args(annotation)
    if origin is typing.Annotated:
        return from_annotation(arguments[0], owner)
    if origin in _UNION_TYPES:
        members = [argument for argument in arguments if argument is not type(None)]
        if len(members) != 1:
            raise exceptions.InvalidType(
                "Unsupported union annotation: {!r}".format(annotation)
            )
        # Optional[X]
        return from_annotation(members[0], owner)
    if origin is tuple and len(arguments) == 2 and arguments[1] is Ellipsis:
        arguments = arguments[:1]
    if not arguments:
        return origin
    return ParameterizedType(
        origin, tuple(from_annotation(argument, owner) for argument in arguments)
    )


def field_type(cls, name):
    """Returns the type descriptor of an annotated class field.

    Type variables in the annotation are bound to the class that declares the
    field, which may be a base class of ``cls``.

    Args:
        cls (type): The class.
        name (str): The name of the field.

    Returns:
        Any: The type descriptor.

    Raises:
        google.api_client.exceptions.InvalidValue: If no class in the MRO of
            ``cls`` annotates ``name``.
    """
    for klass in inspect.getmro(cls):
        if name in inspect.get_annotations(klass):
            hints = typing.get_type_hints(klass, include_extras=True)
            return from_annotation(hints[name], owner=klass)
    raise exceptions.InvalidValue(
        "{} has no annotated field {!r}".format(cls.__name__, name)
    )


def raw_class_of(type_):
    """Returns the class underlying a class or parameterized type descriptor.

    Raises:
        google.api_client.exceptions.InvalidType: For any other descriptor.
    """
    if isinstance(type_, ParameterizedType):
        return type_.raw
    if isinstance(type_, type):
        return type_
    raise exceptions.InvalidType("{!r} has no raw class".format(type_))


_E = typing.TypeVar("E")
_K = typing.TypeVar("K")
_V = typing.TypeVar("V")

register_lineage(collections.abc.Iterable, (_E,))
register_lineage(collections.abc.Iterator, (_E,), collections.abc.Iterable[_E])
register_lineage(collections.abc.Collection, (_E,), collections.abc.Iterable[_E])
register_lineage(collections.abc.Sequence, (_E,), collections.abc.Collection[_E])
register_lineage(
    collections.abc.MutableSequence, (_E,), collections.abc.Sequence[_E]
)
register_lineage(collections.abc.Set, (_E,), collections.abc.Collection[_E])
register_lineage(collections.abc.MutableSet, (_E,), collections.abc.Set[_E])
register_lineage(
    collections.abc.Mapping, (_K, _V), collections.abc.Collection[_K]
)
register_lineage(
    collections.abc.MutableMapping, (_K, _V), collections.abc.Mapping[_K, _V]
)

register_lineage(list, (_E,), collections.abc.MutableSequence[_E])
register_lineage(tuple, (_E,), collections.abc.Sequence[_E])
register_lineage(collections.deque, (_E,), collections.abc.MutableSequence[_E])
register_lineage(set, (_E,), collections.abc.MutableSet[_E])
register_lineage(frozenset, (_E,), collections.abc.Set[_E])
register_lineage(dict, (_K, _V), collections.abc.MutableMapping[_K, _V])
register_lineage(collections.OrderedDict, (_K, _V), dict[_K, _V])
register_lineage(collections.defaultdict, (_K, _V), dict[_K, _V])
register_lineage(collections.Counter, (_E,), dict[_E, int])
