"""Runtime type system targeted by the JSON Schema transform."""

from schema_types.runtime.types import (
    MISSING,
    Any,
    Array,
    Boolean,
    Date,
    Enums,
    Integer,
    Irreducible,
    ListType,
    Maybe,
    Null,
    Number,
    Object,
    Refinement,
    RuntimeType,
    String,
    Struct,
    TupleType,
    TypeCheckError,
    Union,
    enum_of,
    is_array,
    is_plain_object,
    is_type,
    list_of,
    optional,
    refine,
    struct,
    tuple_of,
    union,
)

__all__ = [
    # Sentinel and errors
    "MISSING",
    "TypeCheckError",
    # Primitives
    "Any",
    "Array",
    "Boolean",
    "Date",
    "Integer",
    "Null",
    "Number",
    "Object",
    "String",
    # Type classes
    "Enums",
    "Irreducible",
    "ListType",
    "Maybe",
    "Refinement",
    "RuntimeType",
    "Struct",
    "TupleType",
    "Union",
    # Constructors
    "enum_of",
    "list_of",
    "optional",
    "refine",
    "struct",
    "tuple_of",
    "union",
    # Queries
    "is_array",
    "is_plain_object",
    "is_type",
]
