"""Flat, namespaced index of everything a schema exposes.

Every member lands under exactly one namespace:

    query.<field>          fields of the query root type
    mutation.<field>       fields of the mutation root type
    subscription.<field>   fields of the subscription root type
    scalar.<name>          SCALAR types
    enum.<name>            ENUM types
    interface.<name>       INTERFACE types
    input.<name>           INPUT_OBJECT types
    type.<name>            everything else (objects, unions)

Root types are consumed by their operation namespace and never appear
under ``type.``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .model import Schema
from .printer import render_field, render_full_type
from .typeref import TypeKind


class MemberKind(Enum):
    """Namespace a schema member is indexed under."""
    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"
    SCALAR = "scalar"
    ENUM = "enum"
    INTERFACE = "interface"
    INPUT = "input"
    TYPE = "type"


_KIND_NAMESPACES = {
    TypeKind.SCALAR: MemberKind.SCALAR,
    TypeKind.ENUM: MemberKind.ENUM,
    TypeKind.INTERFACE: MemberKind.INTERFACE,
    TypeKind.INPUT_OBJECT: MemberKind.INPUT,
}


@dataclass(frozen=True)
class SchemaMember:
    """One indexed member and its rendering."""
    kind: MemberKind
    name: str
    rendered: str

    @property
    def key(self) -> str:
        """Return the namespaced key, e.g. ``query.user``."""
        return f"{self.kind.value}.{self.name}"


def iter_members(schema: Schema, include_deprecated: bool = True) -> Iterator[SchemaMember]:
    """Yield every member of the schema, walking declared types in order."""
    roots = (
        (schema.query_type_name, MemberKind.QUERY),
        (schema.mutation_type_name, MemberKind.MUTATION),
        (schema.subscription_type_name, MemberKind.SUBSCRIPTION),
    )
    for full_type in schema.types:
        root_kind = next(
            (kind for name, kind in roots if name is not None and name == full_type.name),
            None,
        )
        if root_kind is not None:
            for field in full_type.fields:
                if field.is_deprecated and not include_deprecated:
                    continue
                yield SchemaMember(root_kind, field.name, render_field(field))
            continue

        kind = _KIND_NAMESPACES.get(full_type.kind, MemberKind.TYPE)
        yield SchemaMember(kind, full_type.name, render_full_type(full_type, include_deprecated))


def build_index(schema: Schema, include_deprecated: bool = True) -> dict[str, str]:
    """Map ``<namespace>.<name>`` keys to rendered members.

    Iteration order of the result carries no meaning; sort the keys when a
    stable order is needed.
    """
    return {
        member.key: member.rendered
        for member in iter_members(schema, include_deprecated)
    }
