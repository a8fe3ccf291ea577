"""Exceptions raised while turning an introspection response into a schema."""

from typing import Any


class IntrospectionError(Exception):
    """Raised when an introspection payload cannot be turned into a Schema."""


class GraphQLError(IntrospectionError):
    """Raised when the server answers the introspection query with errors."""

    def __init__(self, message: str, errors: list[dict[str, Any]]):
        self.message = message
        self.errors = errors
        super().__init__(message)
