"""Intermediate Representation (IR) for GraphQL introspection schemas.

This module defines immutable dataclasses that mirror the parts of an
introspection document the declaration generator reads. Instances are
built once by the parser and never modified afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum


class TypeKind(str, Enum):
    """Kinds found in introspection `kind` members."""

    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INPUT_OBJECT = "INPUT_OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    LIST = "LIST"
    NON_NULL = "NON_NULL"
    # Any kind string outside the set above; treated as a plain named type
    UNRECOGNIZED = "UNRECOGNIZED"

    @classmethod
    def parse(cls, value: str | None) -> "TypeKind":
        """Map a raw kind string to a TypeKind, never failing."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNRECOGNIZED

    @property
    def is_wrapper(self) -> bool:
        return self in (TypeKind.LIST, TypeKind.NON_NULL)


@dataclass(frozen=True)
class IRTypeRef:
    """A possibly wrapped reference to a named type.

    Wrappers (LIST, NON_NULL) carry `of_type`; named kinds carry `name`.
    """
    kind: TypeKind
    name: str | None = None
    of_type: "IRTypeRef | None" = None

    @property
    def is_non_null(self) -> bool:
        return self.kind is TypeKind.NON_NULL


@dataclass(frozen=True)
class IRField:
    """A field of an object/interface or an input field of an input object."""
    name: str
    type: IRTypeRef


@dataclass(frozen=True)
class IRType:
    """A named schema type."""
    name: str
    kind: TypeKind
    description: str | None = None
    fields: tuple[IRField, ...] = ()
    input_fields: tuple[IRField, ...] = ()
    enum_values: tuple[str, ...] = ()
    possible_types: tuple[IRTypeRef, ...] = ()

    @property
    def is_input(self) -> bool:
        return self.kind is TypeKind.INPUT_OBJECT

    @property
    def is_introspection(self) -> bool:
        """True for the reserved `__Schema`, `__Type`, ... types."""
        return self.name.startswith("__")


@dataclass(frozen=True)
class IRSchema:
    """Complete intermediate representation of an introspection schema."""
    query_type: str | None = None
    mutation_type: str | None = None
    types: tuple[IRType, ...] = ()

    def get_type_by_name(self, name: str) -> IRType | None:
        """Look up a type by name."""
        for ir_type in self.types:
            if ir_type.name == name:
                return ir_type
        return None

    def count_by_kind(self) -> dict[TypeKind, int]:
        """Number of types per kind, used for verbose reporting."""
        counts: dict[TypeKind, int] = {}
        for ir_type in self.types:
            counts[ir_type.kind] = counts.get(ir_type.kind, 0) + 1
        return counts


@dataclass(frozen=True)
class GeneratorOptions:
    """Caller-supplied settings for one generation run.

    Attributes:
        ignored_types: Type names excluded everywhere (declarations,
            fields whose root type matches, union/interface members).
        export: Emit every declaration with an `export` marker.
        post_fix: Appended to every generated type and enum name.
        module_name: Name shown in the module header; not used by the
            declaration generator itself.
    """
    ignored_types: frozenset[str] = field(default_factory=frozenset)
    export: bool = False
    post_fix: str = ""
    module_name: str = "GQL"

    @property
    def export_prefix(self) -> str:
        return "export " if self.export else ""

    def is_ignored(self, name: str | None) -> bool:
        return name is not None and name in self.ignored_types
