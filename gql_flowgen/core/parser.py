"""Introspection document parser.

Builds an IRSchema from an introspection result. Three sources are
supported: an introspection JSON file, a GraphQL SDL file (converted to
introspection with graphql-core) and an already decoded document.
"""

import json
import os
from typing import Any

from graphql import GraphQLError, build_schema, introspection_from_schema

from .ir import IRField, IRSchema, IRType, IRTypeRef, TypeKind
from .resolver import MAX_TYPE_DEPTH, TypeDepthError

JSON_SUFFIXES = (".json",)
SDL_SUFFIXES = (".graphql", ".graphqls", ".gql")


class SchemaParseError(Exception):
    """Raised when a schema source cannot be turned into an IRSchema."""


class IntrospectionParser:
    """Parses introspection documents into IR.

    Only the members read by the declaration generator are extracted.
    Missing optional members (descriptions, root types, field lists)
    default to empty values; nothing else is validated.
    """

    def __init__(self, schema_path: str | None = None):
        """Initialize parser with an optional path to a schema file."""
        self.schema_path = schema_path

    def parse_file(self) -> IRSchema:
        """Parse the file given at construction time."""
        if not self.schema_path:
            raise SchemaParseError("No schema path given")
        path = self.schema_path
        lower = path.lower()
        if lower.endswith(JSON_SUFFIXES):
            return self.parse_document(self._read_json(path))
        if lower.endswith(SDL_SUFFIXES):
            return self.parse_sdl(self._read_text(path))
        raise SchemaParseError(
            f"Unsupported schema file {os.path.basename(path)}: expected "
            f"one of {', '.join(JSON_SUFFIXES + SDL_SUFFIXES)}"
        )

    def parse_sdl(self, sdl: str) -> IRSchema:
        """Parse GraphQL SDL by way of its introspection result."""
        try:
            schema = build_schema(sdl)
        # build_schema reports SDL validation failures as TypeError
        except (GraphQLError, TypeError) as e:
            raise SchemaParseError(f"Invalid GraphQL SDL: {e}") from e
        return self.parse_document(introspection_from_schema(schema))

    def parse_document(self, document: Any) -> IRSchema:
        """Parse a decoded introspection response.

        Accepts `{"data": {"__schema": ...}}` as returned by a server and
        the bare `{"__schema": ...}` form.
        """
        if not isinstance(document, dict):
            raise SchemaParseError("Introspection document must be a JSON object")
        data = document.get("data", document)
        if not isinstance(data, dict) or "__schema" not in data:
            raise SchemaParseError("Introspection document has no __schema")
        if not isinstance(data["__schema"], dict):
            raise SchemaParseError("Introspection __schema must be a JSON object")
        try:
            return self._parse_schema(data["__schema"])
        except KeyError as e:
            raise SchemaParseError(f"Malformed introspection document: missing {e}") from e
        except (TypeError, AttributeError) as e:
            raise SchemaParseError(f"Malformed introspection document: {e}") from e

    def _read_json(self, path: str) -> Any:
        content = self._read_text(path)
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise SchemaParseError(
                f"Invalid JSON in {os.path.basename(path)}: {e}"
            ) from e

    def _read_text(self, path: str) -> str:
        try:
            with open(path, encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            raise SchemaParseError(f"Cannot read {path}: {e.strerror}") from e

    def _parse_schema(self, raw: dict[str, Any]) -> IRSchema:
        return IRSchema(
            query_type=self._root_name(raw.get("queryType")),
            mutation_type=self._root_name(raw.get("mutationType")),
            types=tuple(self._parse_type(t) for t in raw.get("types") or ()),
        )

    @staticmethod
    def _root_name(raw: dict[str, Any] | None) -> str | None:
        if not raw:
            return None
        return raw.get("name")

    def _parse_type(self, raw: dict[str, Any]) -> IRType:
        return IRType(
            name=raw["name"],
            kind=TypeKind.parse(raw.get("kind")),
            description=raw.get("description") or None,
            fields=self._parse_fields(raw.get("fields")),
            input_fields=self._parse_fields(raw.get("inputFields")),
            enum_values=tuple(
                self._enum_value_name(v) for v in raw.get("enumValues") or ()
            ),
            possible_types=tuple(
                self._parse_type_ref(ref) for ref in raw.get("possibleTypes") or ()
            ),
        )

    def _parse_fields(self, raw_fields: list[dict[str, Any]] | None) -> tuple[IRField, ...]:
        return tuple(
            IRField(name=f["name"], type=self._parse_type_ref(f.get("type")))
            for f in raw_fields or ()
        )

    @staticmethod
    def _enum_value_name(raw: Any) -> str:
        if isinstance(raw, dict):
            return raw["name"]
        return str(raw)

    def _parse_type_ref(self, raw: dict[str, Any] | None, depth: int = 0) -> IRTypeRef:
        """Build a type reference chain, guarding against runaway nesting."""
        if depth > MAX_TYPE_DEPTH:
            raise TypeDepthError(depth)
        if not raw:
            return IRTypeRef(kind=TypeKind.UNRECOGNIZED)
        of_type = raw.get("ofType")
        return IRTypeRef(
            kind=TypeKind.parse(raw.get("kind")),
            name=raw.get("name"),
            of_type=self._parse_type_ref(of_type, depth + 1) if of_type else None,
        )
