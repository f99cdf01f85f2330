"""Core modules for GraphQL declaration generation."""

from .auth import Auth, BearerAuth, CombinedAuth, HeaderAuth, NoAuth
from .generator import (
    field_to_definition,
    generate_envelope,
    schema_to_declarations,
    schema_to_source,
    type_to_declaration,
)
from .hooks import (
    AddHeaderHook,
    ExternalFormatterHook,
    FilterTypesHook,
    FormatterError,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .introspection import IntrospectionClient, IntrospectionError
from .ir import (
    GeneratorOptions,
    IRField,
    IRSchema,
    IRType,
    IRTypeRef,
    TypeKind,
)
from .module import ModuleGenerator
from .parser import IntrospectionParser, SchemaParseError
from .resolver import (
    TypeDepthError,
    resolve_type_expression,
    unwrap_to_root_type,
)

__all__ = [
    # Auth
    "Auth",
    "BearerAuth",
    "CombinedAuth",
    "HeaderAuth",
    "NoAuth",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "ExternalFormatterHook",
    "FilterTypesHook",
    "FormatterError",
    "HookRunner",
    # IR types
    "GeneratorOptions",
    "IRField",
    "IRSchema",
    "IRType",
    "IRTypeRef",
    "TypeKind",
    # Parser
    "IntrospectionParser",
    "SchemaParseError",
    # Introspection
    "IntrospectionClient",
    "IntrospectionError",
    # Resolver
    "TypeDepthError",
    "resolve_type_expression",
    "unwrap_to_root_type",
    # Generator
    "field_to_definition",
    "generate_envelope",
    "schema_to_declarations",
    "schema_to_source",
    "type_to_declaration",
    "ModuleGenerator",
]
