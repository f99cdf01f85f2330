"""Declaration generator for introspection schemas.

Produces one Flow `type` declaration per eligible schema type, preceded
by the three response envelope declarations. Every function takes the
GeneratorOptions explicitly and returns text; nothing here touches the
filesystem.
"""

from .ir import GeneratorOptions, IRField, IRSchema, IRType, TypeKind
from .resolver import enum_name, resolve_type_expression, type_name, unwrap_to_root_type

TYPENAME_DECLARATION = "__typename: string;"
INDENT = "  "


def maybe_description(description: str | None) -> str:
    """Render a description as a block comment, or nothing."""
    if not description:
        return ""
    return f"/*\n  description: {description}\n*/\n"


def _structure(members: list[str]) -> str:
    if not members:
        return "{}"
    body = "\n".join(f"{INDENT}{member}" for member in members)
    return f"{{\n{body}\n}}"


def root_data_name(schema: IRSchema, options: GeneratorOptions) -> str:
    """Union of the query and mutation root names; empty if neither exists."""
    roots = []
    if schema.query_type:
        roots.append(type_name(schema.query_type, options))
    if schema.mutation_type:
        roots.append(type_name(schema.mutation_type, options))
    return " | ".join(roots)


def generate_envelope(schema: IRSchema, options: GeneratorOptions) -> list[str]:
    """Generate the response root, error and error location declarations."""
    export = options.export_prefix
    post_fix = options.post_fix
    data = root_data_name(schema, options)
    return [
        f"{export}type GraphQLResponseRoot{post_fix} = "
        + _structure([
            f"data?: {data};",
            f"errors?: Array<GraphQLResponseError{post_fix}>;",
        ]),
        f"{export}type GraphQLResponseError{post_fix} = "
        + _structure([
            "message: string;",
            f"locations?: Array<GraphQLResponseErrorLocation{post_fix}>;",
            "[propName: string]: any;",
        ]),
        f"{export}type GraphQLResponseErrorLocation{post_fix} = "
        + _structure([
            "line: number;",
            "column: number;",
        ]),
    ]


def filter_field(field: IRField, options: GeneratorOptions) -> bool:
    """True unless the field's root type is ignored."""
    return not options.is_ignored(unwrap_to_root_type(field.type).name)


def field_to_definition(field: IRField, options: GeneratorOptions) -> str | None:
    """Render one field as a member line, or None if it is filtered out.

    A NON_NULL field becomes `name: Expr;`, anything else `name?: Expr;`.
    """
    if not filter_field(field, options):
        return None
    expression = resolve_type_expression(field.type, options)
    if field.type.is_non_null:
        return f"{field.name}: {expression};"
    return f"{field.name}?: {expression};"


def fields_to_definitions(fields, options: GeneratorOptions) -> list[str]:
    """Render, filter and sort member lines.

    Lines are sorted by their rendered text, not by field name.
    """
    lines = [field_to_definition(field, options) for field in fields]
    return sorted(line for line in lines if line)


def generate_enum_declaration(ir_type: IRType, options: GeneratorOptions) -> str:
    values = " | ".join(f'"{value}{options.post_fix}"' for value in ir_type.enum_values)
    return (
        f"{maybe_description(ir_type.description)}"
        f"{options.export_prefix}type {enum_name(ir_type.name, options)} = {values};"
    )


def generate_union_declaration(
    ir_type: IRType, possible_types: list[str], options: GeneratorOptions
) -> str:
    return (
        f"{maybe_description(ir_type.description)}"
        f"{options.export_prefix}type {type_name(ir_type.name, options)} = "
        f"{' | '.join(possible_types)};"
    )


def generate_structural_declaration(ir_type: IRType, options: GeneratorOptions) -> str:
    if ir_type.is_input:
        members = fields_to_definitions(ir_type.input_fields, options)
    else:
        members = [TYPENAME_DECLARATION] + fields_to_definitions(ir_type.fields, options)
    return (
        f"{maybe_description(ir_type.description)}"
        f"{options.export_prefix}type {type_name(ir_type.name, options)} = "
        f"{_structure(members)}"
    )


def possible_type_names(ir_type: IRType, options: GeneratorOptions) -> list[str]:
    """Generated names of the non-ignored possible types, in schema order."""
    return [
        type_name(ref.name, options)
        for ref in ir_type.possible_types
        if ref.name is not None and not options.is_ignored(ref.name)
    ]


def type_to_declaration(ir_type: IRType, options: GeneratorOptions) -> str | None:
    """Generate the declaration for one schema type.

    Returns None for kinds that need no declaration (scalars).
    """
    kind = ir_type.kind
    if kind is TypeKind.SCALAR:
        return None
    if kind is TypeKind.ENUM:
        return generate_enum_declaration(ir_type, options)
    if kind in (TypeKind.INTERFACE, TypeKind.UNION):
        possible_types = possible_type_names(ir_type, options)
        if possible_types:
            return generate_union_declaration(ir_type, possible_types, options)
        return generate_structural_declaration(ir_type, options)
    if kind in (TypeKind.OBJECT, TypeKind.INPUT_OBJECT, TypeKind.UNRECOGNIZED):
        return generate_structural_declaration(ir_type, options)
    # Wrapper kinds only appear inside type references
    if kind.is_wrapper:
        return None
    raise ValueError(f"Unhandled type kind: {kind}")


def is_eligible(ir_type: IRType, options: GeneratorOptions) -> bool:
    """True for non-introspection types that are not ignored."""
    return not ir_type.is_introspection and not options.is_ignored(ir_type.name)


def schema_to_declarations(schema: IRSchema, options: GeneratorOptions) -> list[str]:
    """Generate the envelope followed by one declaration per eligible type."""
    declarations = generate_envelope(schema, options)
    for ir_type in schema.types:
        if not is_eligible(ir_type, options):
            continue
        declaration = type_to_declaration(ir_type, options)
        if declaration:
            declarations.append(declaration)
    return declarations


def join_declarations(declarations: list[str]) -> str:
    """Join declarations with a blank line between each pair."""
    return "\n\n".join(declarations)


def schema_to_source(schema: IRSchema, options: GeneratorOptions) -> str:
    return join_declarations(schema_to_declarations(schema, options))
