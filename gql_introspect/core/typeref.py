"""Type references and their canonical GraphQL spelling.

A type reference, as served by introspection, is a chain of wrapper layers
(``NON_NULL`` and ``LIST``) ending in a single named layer:

    {"kind": "NON_NULL", "name": None,
     "ofType": {"kind": "LIST", "name": None,
      "ofType": {"kind": "NON_NULL", "name": None,
       "ofType": {"kind": "SCALAR", "name": "String", "ofType": None}}}}

resolves to ``[String!]!``. The chain may be nested to any depth.
"""

from enum import Enum

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class TypeKind(str, Enum):
    """Values of the ``__TypeKind`` introspection enum."""
    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    LIST = "LIST"          # wrapper, see ofType
    NON_NULL = "NON_NULL"  # wrapper, see ofType


WRAPPER_KINDS = frozenset({TypeKind.LIST, TypeKind.NON_NULL})
NAMED_KINDS = frozenset(TypeKind) - WRAPPER_KINDS


class IntrospectionModel(BaseModel):
    """Base for all models deserialized from introspection JSON."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TypeRef(IntrospectionModel):
    """One layer of a type reference chain."""
    kind: TypeKind | None = None
    name: str | None = None
    of_type: "TypeRef | None" = None

    @property
    def is_wrapper(self) -> bool:
        return self.kind in WRAPPER_KINDS

    @model_validator(mode="before")
    @classmethod
    def _validate_from_innermost(cls, data: Any) -> Any:
        """Validate a nested ``ofType`` chain innermost layer first.

        Each inner layer is handed to its parent as an already validated
        TypeRef, so validation never nests and chain depth is unbounded.
        """
        if not isinstance(data, dict):
            return data
        layers = []
        current = data
        while isinstance(current, dict):
            layers.append(current)
            current = current.get("ofType", current.get("of_type"))
        if len(layers) == 1:
            return data

        inner = current
        for layer in reversed(layers[1:]):
            inner = cls.model_validate(_with_inner(layer, inner))
        return _with_inner(data, inner)

    def resolve(self) -> str:
        """Return the canonical spelling, e.g. ``[String!]!``.

        A chain that ends in a wrapper without an inner layer is truncated
        and resolves to an empty string. Such a result is only good for
        display.
        """
        wrappers = []
        ref = self
        while ref is not None and ref.kind not in NAMED_KINDS:
            wrappers.append(ref.kind)
            ref = ref.of_type
        if ref is None or not ref.name:
            return ""

        spelling = ref.name
        for kind in reversed(wrappers):
            if kind == TypeKind.LIST:
                spelling = f"[{spelling}]"
            elif kind == TypeKind.NON_NULL:
                spelling = f"{spelling}!"
        return spelling

    def is_list(self) -> bool:
        """Check whether a LIST layer appears anywhere in the chain."""
        ref = self
        while ref is not None:
            if ref.kind == TypeKind.LIST:
                return True
            ref = ref.of_type
        return False

    def is_non_null(self) -> bool:
        """Check whether the outermost layer is NON_NULL."""
        return self.kind == TypeKind.NON_NULL

    def named_type(self) -> "TypeRef | None":
        """Return the terminal named layer, or None for a truncated chain."""
        ref = self
        while ref is not None:
            if ref.kind in NAMED_KINDS:
                return ref
            ref = ref.of_type
        return None

    def __str__(self) -> str:
        return self.resolve()


def _with_inner(layer: dict[str, Any], inner: Any) -> dict[str, Any]:
    """Copy ``layer`` with its inner reference replaced by ``inner``."""
    fields = {k: v for k, v in layer.items() if k not in ("ofType", "of_type")}
    fields["ofType"] = inner
    return fields
