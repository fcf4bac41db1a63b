"""Kind transformers: one function per primitive JSON Schema kind.

Each takes a schema node and the active ``SchemaTransformer`` (for recursion and
format lookup) and returns a ``TransformResult``. The runtime type and the
constraint fragment are derived side by side from the same keywords.

Constraint fragments are not merged across keywords: when several keywords
apply, the fragment of the last one seen replaces the previous one.
"""

from typing import TYPE_CHECKING

from loguru import logger

from schema_types.config import get_settings
from schema_types.runtime import types as t
from schema_types.schema import constraints as c
from schema_types.schema import predicates as p
from schema_types.schema.errors import MissingFormatError
from schema_types.schema.result import FieldValidator, TransformResult

if TYPE_CHECKING:
    from schema_types.schema.dispatcher import SchemaTransformer


def _refined(base: t.RuntimeType, predicate: p.Predicate | None) -> t.RuntimeType:
    return t.refine(base, predicate) if predicate is not None else base


# --- Scalars ---


def transform_string(s: dict, ctx: "SchemaTransformer") -> TransformResult:
    predicate = None
    constraint = None

    # --- Enum ---
    # Trigger: enum keyword present (list of values or mapping)
    # Why: an enumeration fully describes the allowed strings
    # Outcome: no other string keyword is consulted
    if "enum" in s:
        enum = s["enum"]
        values = list(enum.values()) if t.is_plain_object(enum) else list(enum)
        return TransformResult(type=t.enum_of(values), constraint=c.inclusion(values))

    if "minLength" in s:
        predicate = p.and_(predicate, p.min_length(s["minLength"]))
        constraint = c.string_minimum(s["minLength"])

    if "maxLength" in s:
        predicate = p.and_(predicate, p.max_length(s["maxLength"]))
        constraint = c.string_maximum(s["maxLength"])

    if "pattern" in s:
        predicate = p.and_(predicate, p.regexp(s["pattern"]))
        constraint = c.pattern(s["pattern"], s.get("message"))

    # --- Format ---
    # Trigger: format keyword present
    # Why: formats come from the process-wide registry
    # Outcome: a registered type replaces everything, a predicate is ANDed in
    if "format" in s:
        name = s["format"]
        if name not in ctx.formats:
            raise MissingFormatError(name)
        entry = ctx.formats.get(name)
        if t.is_type(entry):
            return TransformResult(type=entry, constraint=constraint)
        predicate = p.and_(predicate, entry)

    return TransformResult(type=_refined(t.String, predicate), constraint=constraint)


def _numeric(s: dict, base: t.RuntimeType, allow_integer_flag: bool) -> TransformResult:
    predicate = None
    constraint = None

    if "minimum" in s:
        exclusive = bool(s.get("exclusiveMinimum"))
        bound = p.gt(s["minimum"]) if exclusive else p.gte(s["minimum"])
        predicate = p.and_(predicate, bound)
        constraint = c.lower_bound(s["minimum"], exclusive)

    if "maximum" in s:
        exclusive = bool(s.get("exclusiveMaximum"))
        bound = p.lt(s["maximum"]) if exclusive else p.lte(s["maximum"])
        predicate = p.and_(predicate, bound)
        constraint = c.upper_bound(s["maximum"], exclusive)

    if allow_integer_flag and s.get("integer"):
        predicate = p.and_(predicate, p.is_integer)
        constraint = c.only_integer()

    return TransformResult(type=_refined(base, predicate), constraint=constraint)


def transform_number(s: dict, ctx: "SchemaTransformer") -> TransformResult:
    return _numeric(s, t.Number, allow_integer_flag=True)


def transform_integer(s: dict, ctx: "SchemaTransformer") -> TransformResult:
    return _numeric(s, t.Integer, allow_integer_flag=False)


def transform_boolean(s: dict, ctx: "SchemaTransformer") -> TransformResult:
    return TransformResult(type=t.Boolean)


def transform_null(s: dict, ctx: "SchemaTransformer") -> TransformResult:
    return TransformResult(type=t.Null)


# --- Containers ---


def transform_object(s: dict, ctx: "SchemaTransformer") -> TransformResult:
    """Build a struct from ``properties``.

    Fields named in ``required`` or typed boolean keep their bare type; every
    other field becomes optional. Required fields get ``presence`` added to
    their constraint fragment.
    """
    properties = s.get("properties") or {}
    required = set(s.get("required") or [])

    undeclared = required - set(properties)
    if undeclared:
        logger.warning(f"Required fields not declared in properties: {sorted(undeclared)}")

    if not properties:
        return TransformResult(type=t.Object, constraint={}, options={"fields": {}})

    props: dict[str, t.RuntimeType] = {}
    constraint: dict = {}
    fields: dict[str, FieldValidator] = {}

    for name, sub_schema in properties.items():
        transformed = ctx.transform(sub_schema)
        is_required = name in required

        if is_required or transformed.type is t.Boolean:
            props[name] = transformed.type
        else:
            props[name] = t.optional(transformed.type)

        constraint[name] = (
            c.with_presence(transformed.constraint) if is_required else transformed.constraint
        )
        # Nested objects carry a per-field mapping; only presence applies here
        if transformed.options is not None:
            field_constraint = {"presence": True} if is_required else None
        else:
            field_constraint = constraint[name]
        fields[name] = FieldValidator(field=name, constraint=field_constraint)

    struct_name = s.get("description") or get_settings().default_struct_name
    return TransformResult(
        type=t.struct(props, struct_name),
        constraint=constraint,
        options={"fields": fields},
    )


def transform_array(s: dict, ctx: "SchemaTransformer") -> TransformResult:
    type_: t.RuntimeType = t.Array
    constraint = None

    if "items" in s:
        items = s["items"]
        if t.is_plain_object(items):
            type_ = t.list_of(ctx.transform(items).type)
        else:
            # --- Tuple ---
            # Trigger: items is a sequence of schema nodes
            # Why: positional item schemas describe a fixed arity
            # Outcome: length keywords do not apply, return immediately
            return TransformResult(type=t.tuple_of(ctx.transform(item).type for item in items))

    predicate = None
    if "minItems" in s:
        predicate = p.and_(predicate, p.min_length(s["minItems"]))
        constraint = c.min_items(s["minItems"])

    if "maxItems" in s:
        predicate = p.and_(predicate, p.max_length(s["maxItems"]))
        constraint = c.max_items(s["maxItems"])

    return TransformResult(type=_refined(type_, predicate), constraint=constraint)
