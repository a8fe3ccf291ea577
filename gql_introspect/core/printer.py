"""Human-readable, SDL-like renderings of schema members.

The output approximates GraphQL SDL closely enough to read and diff, but is
not meant to be parsed back into a schema.
"""

import logging
from typing import Iterable

from .model import Field, FullType, InputValue, Schema
from .typeref import TypeKind

logger = logging.getLogger(__name__)

# Built-in scalars need no declaration
BUILTIN_SCALARS = frozenset({"Boolean", "Float", "ID", "Int", "String"})

_BLOCK_KEYWORDS = {
    TypeKind.OBJECT: "type",
    TypeKind.INTERFACE: "interface",
    TypeKind.INPUT_OBJECT: "input",
    TypeKind.ENUM: "enum",
}


def render_args(args: Iterable[InputValue]) -> str:
    """Render arguments as ``name: Type`` pairs, comma-separated."""
    return ", ".join(f"{arg.name}: {arg.type.resolve()}" for arg in args)


def render_field(field: Field) -> str:
    """Render a field as a call signature, e.g. ``user(id: ID!): User``."""
    return f"{field.name}({render_args(field.args)}): {field.type.resolve()}"


def render_full_type(full_type: FullType, include_deprecated: bool = True) -> str:
    """Render a declared type as an SDL-like block.

    Built-in scalars render as an empty string. Kinds without a block
    rendering (unions) fall back to a ``#``-prefixed dump of the model.

    Args:
        full_type: The type to render
        include_deprecated: If False, deprecated fields and enum values are left out
    """
    if full_type.kind == TypeKind.SCALAR:
        if full_type.name in BUILTIN_SCALARS:
            return ""
        return f"scalar {full_type.name}"

    keyword = _BLOCK_KEYWORDS.get(full_type.kind)
    if keyword is None:
        logger.debug("No block rendering for %s (%s)", full_type.name, full_type.kind.value)
        return f"#{full_type!r}"

    lines = [f"{keyword} {full_type.name} {{\n"]
    for input_field in full_type.input_fields:
        lines.append(f"\t{input_field.name}: {input_field.type.resolve()}\n")
    for field in full_type.fields:
        if field.is_deprecated and not include_deprecated:
            continue
        lines.append(f"\t{field.name}: {field.type.resolve()}\n")
    for enum_value in full_type.enum_values:
        if enum_value.is_deprecated and not include_deprecated:
            continue
        lines.append(f"\t{enum_value.name}\n")
    lines.append("}")
    return "".join(lines)


def render_schema(schema: Schema, include_deprecated: bool = True) -> str:
    """Render every declared type, in schema order, separated by blank lines."""
    blocks = (render_full_type(t, include_deprecated) for t in schema.types)
    return "\n\n".join(block for block in blocks if block)
