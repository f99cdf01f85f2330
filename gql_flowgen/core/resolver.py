"""Type reference resolution.

Turns an introspection type reference, with any nesting of LIST and
NON_NULL wrappers, into a Flow type expression, and finds the named type
at the bottom of a wrapper chain.
"""

from .ir import GeneratorOptions, IRTypeRef, TypeKind

# Introspection queries nest `ofType` about seven levels deep; anything far
# beyond that is a malformed document.
MAX_TYPE_DEPTH = 32

UNKNOWN_TYPE = "any"

BUILTIN_SCALARS = {
    "ID": "string",
    "String": "string",
    "Boolean": "boolean",
    "Float": "number",
    "Int": "number",
}


class TypeDepthError(ValueError):
    """Raised when a type reference nests deeper than MAX_TYPE_DEPTH."""

    def __init__(self, depth: int):
        self.depth = depth
        super().__init__(
            f"Type reference nested deeper than {MAX_TYPE_DEPTH} levels"
        )


def type_name(name: str, options: GeneratorOptions) -> str:
    """Generated name of an object, input, interface or union type."""
    return f"{name}{options.post_fix}"


def enum_name(name: str, options: GeneratorOptions) -> str:
    """Generated name of an enum type."""
    return f"{name}Enum{options.post_fix}"


def scalar_expression(name: str | None) -> str:
    """Map a built-in scalar to its Flow type; other scalars become `any`."""
    return BUILTIN_SCALARS.get(name, UNKNOWN_TYPE)


def resolve_type_expression(
    ref: IRTypeRef | None,
    options: GeneratorOptions,
    depth: int = 0,
) -> str:
    """Resolve a type reference to a Flow type expression.

    LIST wraps the inner expression in `Array<...>`. NON_NULL is
    transparent here; nullability is expressed on the field instead.

    Raises:
        TypeDepthError: If the wrapper chain exceeds MAX_TYPE_DEPTH.
    """
    if depth > MAX_TYPE_DEPTH:
        raise TypeDepthError(depth)
    if ref is None:
        return UNKNOWN_TYPE

    kind = ref.kind
    if kind is TypeKind.LIST:
        return f"Array<{resolve_type_expression(ref.of_type, options, depth + 1)}>"
    if kind is TypeKind.NON_NULL:
        return resolve_type_expression(ref.of_type, options, depth + 1)
    if ref.name is None:
        return UNKNOWN_TYPE
    if kind is TypeKind.SCALAR:
        return scalar_expression(ref.name)
    if kind is TypeKind.ENUM:
        return enum_name(ref.name, options)
    # INTERFACE, OBJECT, INPUT_OBJECT, UNION and unrecognized kinds
    return type_name(ref.name, options)


def unwrap_to_root_type(ref: IRTypeRef) -> IRTypeRef:
    """Strip all wrappers and return the innermost reference.

    Raises:
        TypeDepthError: If the wrapper chain exceeds MAX_TYPE_DEPTH.
    """
    depth = 0
    while ref.of_type is not None:
        depth += 1
        if depth > MAX_TYPE_DEPTH:
            raise TypeDepthError(depth)
        ref = ref.of_type
    return ref
