"""Typed model of one introspected GraphQL schema.

The models mirror the ``__schema`` object returned by the standard
introspection query. They are immutable once validated; sequences are
stored as tuples and JSON ``null`` sequences become empty tuples.
"""

from typing import Annotated

from pydantic import BeforeValidator

from .typeref import IntrospectionModel, TypeKind, TypeRef


def _none_as_empty(value):
    return () if value is None else value


# Introspection sends null instead of [] for sequences that do not apply
NoneAsEmpty = BeforeValidator(_none_as_empty)


class InputValue(IntrospectionModel):
    """An argument, or a member of an input object."""
    name: str
    type: TypeRef
    description: str | None = None
    # Source literal, e.g. '"abc"' or '[1, 2]'; never parsed
    default_value: str | None = None


class Field(IntrospectionModel):
    """A field of an object, interface, or root operation type."""
    name: str
    type: TypeRef
    description: str | None = None
    args: Annotated[tuple[InputValue, ...], NoneAsEmpty] = ()
    is_deprecated: bool = False
    deprecation_reason: str | None = None


class EnumValue(IntrospectionModel):
    """A single value of an enum type."""
    name: str
    description: str | None = None
    is_deprecated: bool = False
    deprecation_reason: str | None = None


class Directive(IntrospectionModel):
    """A directive declared by the schema."""
    name: str
    description: str | None = None
    locations: Annotated[tuple[str, ...], NoneAsEmpty] = ()
    args: Annotated[tuple[InputValue, ...], NoneAsEmpty] = ()
    is_repeatable: bool = False


class FullType(IntrospectionModel):
    """A declared type.

    Only the sequences relevant to ``kind`` are populated: ``fields`` for
    objects and interfaces, ``input_fields`` for input objects,
    ``enum_values`` for enums and ``possible_types`` for unions and
    interfaces.
    """
    kind: TypeKind
    name: str
    description: str | None = None
    fields: Annotated[tuple[Field, ...], NoneAsEmpty] = ()
    input_fields: Annotated[tuple[InputValue, ...], NoneAsEmpty] = ()
    interfaces: Annotated[tuple[TypeRef, ...], NoneAsEmpty] = ()
    enum_values: Annotated[tuple[EnumValue, ...], NoneAsEmpty] = ()
    possible_types: Annotated[tuple[TypeRef, ...], NoneAsEmpty] = ()


class RootTypeRef(IntrospectionModel):
    """The ``{name}`` object naming a root operation type."""
    name: str


class Schema(IntrospectionModel):
    """Root of an introspected schema."""
    query_type: RootTypeRef | None = None
    mutation_type: RootTypeRef | None = None
    subscription_type: RootTypeRef | None = None
    types: Annotated[tuple[FullType, ...], NoneAsEmpty] = ()
    directives: Annotated[tuple[Directive, ...], NoneAsEmpty] = ()
    description: str | None = None

    @property
    def query_type_name(self) -> str | None:
        return self.query_type.name if self.query_type else None

    @property
    def mutation_type_name(self) -> str | None:
        return self.mutation_type.name if self.mutation_type else None

    @property
    def subscription_type_name(self) -> str | None:
        return self.subscription_type.name if self.subscription_type else None

    def get_type(self, name: str) -> FullType | None:
        """Look up a declared type by name."""
        for full_type in self.types:
            if full_type.name == name:
                return full_type
        return None

    def _root_fields(self, root_name: str | None) -> tuple[Field, ...]:
        """Collect the fields of the OBJECT type named ``root_name``."""
        if root_name is None:
            return ()
        fields: list[Field] = []
        for full_type in self.types:
            if full_type.kind == TypeKind.OBJECT and full_type.name == root_name:
                fields.extend(full_type.fields)
        return tuple(fields)

    def get_queries(self) -> tuple[Field, ...]:
        """Return all fields of the query root type."""
        return self._root_fields(self.query_type_name)

    def get_query(self, name: str) -> Field | None:
        """Return the query root field called ``name``, if any."""
        for field in self.get_queries():
            if field.name == name:
                return field
        return None

    def get_mutations(self) -> tuple[Field, ...]:
        """Return all fields of the mutation root type (empty if none)."""
        return self._root_fields(self.mutation_type_name)

    def get_subscriptions(self) -> tuple[Field, ...]:
        """Return all fields of the subscription root type (empty if none)."""
        return self._root_fields(self.subscription_type_name)
