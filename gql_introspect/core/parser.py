"""Deserialize introspection responses into the schema model."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import GraphQLError, IntrospectionError
from .model import Schema

logger = logging.getLogger(__name__)


def parse_schema(data: dict[str, Any]) -> Schema:
    """Validate a ``__schema`` object into a Schema."""
    try:
        return Schema.model_validate(data)
    except ValidationError as e:
        raise IntrospectionError(f"Invalid introspection schema: {e}") from e


def parse_response(payload: dict[str, Any] | str | bytes) -> Schema:
    """Parse a full introspection response.

    Accepts the standard ``{"data": {"__schema": ...}}`` envelope, either
    already decoded or as JSON text. A bare ``{"__schema": ...}`` object
    (as some tools save it) is accepted too.

    Raises:
        GraphQLError: If the response carries GraphQL errors
        IntrospectionError: If the payload is not a valid introspection result
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except ValueError as e:
            raise IntrospectionError(f"Response is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise IntrospectionError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )

    if payload.get("errors"):
        errors = payload["errors"]
        if not isinstance(errors, list):
            errors = [errors]
        error_messages = "; ".join(
            e.get("message", str(e)) if isinstance(e, dict) else str(e)
            for e in errors
        )
        raise GraphQLError(f"GraphQL errors: {error_messages}", errors)

    data = payload.get("data", payload)
    if not isinstance(data, dict) or not isinstance(data.get("__schema"), dict):
        raise IntrospectionError("Response has no data.__schema object")

    schema = parse_schema(data["__schema"])
    logger.debug(
        "Parsed schema with %d types and %d directives",
        len(schema.types),
        len(schema.directives),
    )
    return schema


def load_file(path: str | Path) -> Schema:
    """Load a saved introspection response from a JSON file."""
    path = Path(path)
    logger.debug("Loading introspection result from %s", path)
    return parse_response(path.read_bytes())
