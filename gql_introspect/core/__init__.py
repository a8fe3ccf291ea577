"""Core modules for GraphQL schema introspection and rendering."""

from .client import INTROSPECTION_QUERY, IntrospectionClient, introspect
from .errors import GraphQLError, IntrospectionError
from .indexer import MemberKind, SchemaMember, build_index, iter_members
from .model import (
    Directive,
    EnumValue,
    Field,
    FullType,
    InputValue,
    RootTypeRef,
    Schema,
)
from .parser import load_file, parse_response, parse_schema
from .printer import (
    BUILTIN_SCALARS,
    render_args,
    render_field,
    render_full_type,
    render_schema,
)
from .typeref import TypeKind, TypeRef

__all__ = [
    # Model
    "Directive",
    "EnumValue",
    "Field",
    "FullType",
    "InputValue",
    "RootTypeRef",
    "Schema",
    "TypeKind",
    "TypeRef",
    # Printer
    "BUILTIN_SCALARS",
    "render_args",
    "render_field",
    "render_full_type",
    "render_schema",
    # Indexer
    "MemberKind",
    "SchemaMember",
    "build_index",
    "iter_members",
    # Parser
    "load_file",
    "parse_response",
    "parse_schema",
    # Client
    "INTROSPECTION_QUERY",
    "IntrospectionClient",
    "introspect",
    # Errors
    "GraphQLError",
    "IntrospectionError",
]
