"""Runtime type descriptions for schema_types.

A small structural type system used as the target of the JSON Schema transform.
Each type can answer membership (``accepts``) and construct a value (``__call__``):

  Kind          Built with               Accepts
  -----------------------------------------------------------------
  irreducible   String, Number, ...      values passing a fixed check
  enums         enum_of(values)          one of a fixed set of values
  subtype       refine(type, pred)       values of type also passing pred
  list          list_of(item)            sequences of item
  tuple         tuple_of(items)          fixed-arity sequences
  union         union(types)             values accepted by any alternative
  maybe         optional(type)           None, MISSING or values of type
  struct        struct(fields, name)     dicts whose fields match
"""

import datetime
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import TypeAlias, Any as AnyValue


class _Missing:
    """Sentinel for a value that was not provided at all (distinct from None)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()

Predicate: TypeAlias = Callable[[AnyValue], bool]


class TypeCheckError(ValueError):
    """Raised when a value cannot be constructed by a runtime type."""

    def __init__(self, value: AnyValue, type_: "RuntimeType", path: tuple = ()):
        self.value = value
        self.type = type_
        self.path = path
        location = f" at {'/'.join(str(p) for p in path)}" if path else ""
        super().__init__(f"Invalid value {value!r} supplied to {type_.name}{location}")


# --- Base ---


class RuntimeType:
    """Base class for all runtime types."""

    kind: str
    name: str

    def accepts(self, value: AnyValue) -> bool:
        raise NotImplementedError

    def __call__(self, value: AnyValue, path: tuple = ()) -> AnyValue:
        if not self.accepts(value):
            raise TypeCheckError(value, self, path)
        return value

    def __repr__(self) -> str:
        return f"<{self.kind} {self.name}>"


@dataclass(eq=False, repr=False)
class Irreducible(RuntimeType):
    """A primitive type defined only by a membership check."""

    name: str
    check: Predicate
    kind: str = field(default="irreducible", init=False)

    def accepts(self, value: AnyValue) -> bool:
        return self.check(value)


# --- Primitives ---


def _is_number(value: AnyValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: AnyValue) -> bool:
    if isinstance(value, float):
        return value.is_integer()
    return _is_number(value)


def is_plain_object(value: AnyValue) -> bool:
    """True for mapping values (JSON objects) at schema-authoring time."""
    return isinstance(value, Mapping)


def is_array(value: AnyValue) -> bool:
    """True for sequence values (JSON arrays), never for strings."""
    return isinstance(value, (list, tuple))


String = Irreducible("String", lambda v: isinstance(v, str))
Number = Irreducible("Number", _is_number)
Integer = Irreducible("Integer", _is_integer)
Boolean = Irreducible("Boolean", lambda v: isinstance(v, bool))
Object = Irreducible("Object", is_plain_object)
Array = Irreducible("Array", is_array)
Any = Irreducible("Any", lambda v: True)
Null = Irreducible("Null", lambda v: v is None)
Date = Irreducible("Date", lambda v: isinstance(v, datetime.date))


# --- Combinators ---


@dataclass(eq=False, repr=False)
class Enums(RuntimeType):
    """A type accepting exactly one of a fixed set of values."""

    values: tuple
    name: str = ""
    kind: str = field(default="enums", init=False)

    def __post_init__(self):
        if not self.name:
            self.name = " | ".join(repr(v) for v in self.values)

    def accepts(self, value: AnyValue) -> bool:
        return any(value == v and type(value) is type(v) for v in self.values)


@dataclass(eq=False, repr=False)
class Refinement(RuntimeType):
    """A base type narrowed by an additional predicate."""

    type: RuntimeType
    predicate: Predicate
    name: str = ""
    kind: str = field(default="subtype", init=False)

    def __post_init__(self):
        if not self.name:
            self.name = f"{{{self.type.name} | {getattr(self.predicate, '__name__', 'predicate')}}}"

    def accepts(self, value: AnyValue) -> bool:
        return self.type.accepts(value) and bool(self.predicate(value))

    def __call__(self, value: AnyValue, path: tuple = ()) -> AnyValue:
        constructed = self.type(value, path)
        if not self.predicate(constructed):
            raise TypeCheckError(value, self, path)
        return constructed


@dataclass(eq=False, repr=False)
class ListType(RuntimeType):
    """A homogeneous sequence of item values."""

    type: RuntimeType
    name: str = ""
    kind: str = field(default="list", init=False)

    def __post_init__(self):
        if not self.name:
            self.name = f"Array<{self.type.name}>"

    def accepts(self, value: AnyValue) -> bool:
        return is_array(value) and all(self.type.accepts(item) for item in value)

    def __call__(self, value: AnyValue, path: tuple = ()) -> list:
        if not is_array(value):
            raise TypeCheckError(value, self, path)
        return [self.type(item, path + (i,)) for i, item in enumerate(value)]


@dataclass(eq=False, repr=False)
class TupleType(RuntimeType):
    """A fixed-arity sequence with a type per position."""

    types: tuple
    name: str = ""
    kind: str = field(default="tuple", init=False)

    def __post_init__(self):
        if not self.name:
            self.name = "[" + ", ".join(t.name for t in self.types) + "]"

    def accepts(self, value: AnyValue) -> bool:
        return (
            is_array(value)
            and len(value) == len(self.types)
            and all(t.accepts(item) for t, item in zip(self.types, value))
        )

    def __call__(self, value: AnyValue, path: tuple = ()) -> list:
        if not is_array(value) or len(value) != len(self.types):
            raise TypeCheckError(value, self, path)
        return [t(item, path + (i,)) for i, (t, item) in enumerate(zip(self.types, value))]


@dataclass(eq=False, repr=False)
class Union(RuntimeType):
    """A value accepted by any of the alternatives, tried in order."""

    types: tuple
    name: str = ""
    kind: str = field(default="union", init=False)

    def __post_init__(self):
        if not self.name:
            self.name = " | ".join(t.name for t in self.types)

    def accepts(self, value: AnyValue) -> bool:
        return self.dispatch(value) is not None

    def dispatch(self, value: AnyValue) -> RuntimeType | None:
        """Return the first alternative accepting the value."""
        for alternative in self.types:
            if alternative.accepts(value):
                return alternative
        return None

    def __call__(self, value: AnyValue, path: tuple = ()) -> AnyValue:
        alternative = self.dispatch(value)
        if alternative is None:
            raise TypeCheckError(value, self, path)
        return alternative(value, path)


@dataclass(eq=False, repr=False)
class Maybe(RuntimeType):
    """An optional value: None and MISSING are accepted besides the inner type."""

    type: RuntimeType
    name: str = ""
    kind: str = field(default="maybe", init=False)

    def __post_init__(self):
        if not self.name:
            self.name = f"?{self.type.name}"

    def accepts(self, value: AnyValue) -> bool:
        return value is None or value is MISSING or self.type.accepts(value)

    def __call__(self, value: AnyValue, path: tuple = ()) -> AnyValue:
        if value is None or value is MISSING:
            return value
        return self.type(value, path)


@dataclass(eq=False, repr=False)
class Struct(RuntimeType):
    """A record with a type per declared field. Undeclared keys are ignored."""

    props: dict[str, RuntimeType]
    name: str = "Struct"
    kind: str = field(default="struct", init=False)

    def accepts(self, value: AnyValue) -> bool:
        if not is_plain_object(value):
            return False
        return all(t.accepts(value.get(k, MISSING)) for k, t in self.props.items())

    def __call__(self, value: AnyValue, path: tuple = ()) -> dict:
        if not is_plain_object(value):
            raise TypeCheckError(value, self, path)
        result = {}
        for key, prop_type in self.props.items():
            constructed = prop_type(value.get(key, MISSING), path + (key,))
            if constructed is not MISSING:
                result[key] = constructed
        return result


# --- Constructors ---


def struct(fields: Mapping[str, RuntimeType], name: str | None = None) -> Struct:
    return Struct(dict(fields), name or "Struct")


def list_of(item_type: RuntimeType, name: str | None = None) -> ListType:
    return ListType(item_type, name or "")


def tuple_of(item_types: Iterable[RuntimeType], name: str | None = None) -> TupleType:
    return TupleType(tuple(item_types), name or "")


def union(types: Iterable[RuntimeType], name: str | None = None) -> Union:
    return Union(tuple(types), name or "")


def enum_of(values: Iterable, name: str | None = None) -> Enums:
    return Enums(tuple(values), name or "")


def optional(type_: RuntimeType, name: str | None = None) -> Maybe:
    return Maybe(type_, name or "")


def refine(type_: RuntimeType, predicate: Predicate, name: str | None = None) -> Refinement:
    return Refinement(type_, predicate, name or "")


def is_type(value: AnyValue) -> bool:
    """True if value is a runtime type (as opposed to a predicate)."""
    return isinstance(value, RuntimeType)
