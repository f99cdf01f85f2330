"""Generation hooks for customizing declaration output.

Pre-generation hooks receive the IRSchema and return a (new) schema to
generate from. Post-generation hooks receive the rendered module text and
return the text to write.

Example usage:
    from dataclasses import replace
    from gql_flowgen.core.hooks import HookRunner

    class DropConnections:
        def pre_generate(self, schema):
            types = tuple(t for t in schema.types if not t.name.endswith("Connection"))
            return replace(schema, types=types)

    runner = HookRunner()
    runner.add_pre_hook(DropConnections())
"""

import subprocess
from dataclasses import replace
from functools import reduce
from typing import Protocol, runtime_checkable

from .ir import IRSchema, IRType


class FormatterError(Exception):
    """Raised when an external formatter fails."""


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    IRSchema is frozen, so hooks build a new schema with
    `dataclasses.replace` instead of mutating the one they receive.
    """

    def pre_generate(self, schema: IRSchema) -> IRSchema:
        """Called before declarations are generated."""
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks."""

    def post_generate(self, filename: str, content: str) -> str:
        """Called with the rendered module before it is written.

        Args:
            filename: Name of the output file (e.g., "graphql-export.flow.js")
            content: The rendered module text

        Returns:
            The (possibly transformed) text to write
        """
        ...


class AddHeaderHook:
    """Built-in hook that puts a banner above the generated module.

    Example:
        hook = AddHeaderHook("// Auto-generated - do not edit")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        if not self.header.endswith("\n"):
            header = self.header + "\n"
        else:
            header = self.header
        return header + content


class ExternalFormatterHook:
    """Pipes the module through an external formatter command.

    The command reads source on stdin and writes the result to stdout.

    Example:
        hook = ExternalFormatterHook(["prettier", "--parser", "flow", "--single-quote"])
    """

    def __init__(self, command: list[str], timeout: float = 60.0):
        if not command:
            raise FormatterError("Formatter command is empty")
        self.command = list(command)
        self.timeout = timeout

    def post_generate(self, _filename: str, content: str) -> str:
        try:
            result = subprocess.run(
                self.command,
                input=content,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise FormatterError(f"Formatter {self.command[0]} failed: {e}") from e
        if result.returncode != 0:
            raise FormatterError(
                f"Formatter {self.command[0]} exited with status "
                f"{result.returncode}: {result.stderr.strip()}"
            )
        return result.stdout


class FilterTypesHook:
    """Built-in hook that drops schema types by name prefix/suffix.

    The query and mutation roots always survive, since the response
    envelope names them. Union and interface members that point at a
    dropped type are removed as well, so no alias refers to a type that
    is no longer declared.

    Example:
        # Remove all types starting with underscore
        hook = FilterTypesHook(exclude_prefix="_")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def matches(self, name: str) -> bool:
        """True when a type name passes every configured filter."""
        excluded = (self.exclude_prefix and name.startswith(self.exclude_prefix)) or (
            self.exclude_suffix and name.endswith(self.exclude_suffix)
        )
        included = (not self.include_prefix or name.startswith(self.include_prefix)) and (
            not self.include_suffix or name.endswith(self.include_suffix)
        )
        return included and not excluded

    def pre_generate(self, schema: IRSchema) -> IRSchema:
        """Drop the types that fail the name filters."""
        roots = {schema.query_type, schema.mutation_type} - {None}
        kept = [t for t in schema.types if t.name in roots or self.matches(t.name)]
        dropped = {t.name for t in schema.types} - {t.name for t in kept}
        return replace(schema, types=tuple(_prune_members(t, dropped) for t in kept))


def _prune_members(ir_type: IRType, dropped: set[str]) -> IRType:
    members = tuple(ref for ref in ir_type.possible_types if ref.name not in dropped)
    if len(members) == len(ir_type.possible_types):
        return ir_type
    return replace(ir_type, possible_types=members)


class HookRunner:
    """Applies pre hooks to the IRSchema and post hooks to the module text.

    Hooks run in the order they were added. Each one receives the result
    of the previous hook.
    """

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        if not isinstance(hook, PreGenerateHook):
            raise TypeError(f"{type(hook).__name__} has no pre_generate method")
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        if not isinstance(hook, PostGenerateHook):
            raise TypeError(f"{type(hook).__name__} has no post_generate method")
        self.post_hooks.append(hook)

    def run_pre_hooks(self, schema: IRSchema) -> IRSchema:
        return reduce(lambda current, hook: hook.pre_generate(current), self.pre_hooks, schema)

    def run_post_hooks(self, filename: str, content: str) -> str:
        return reduce(
            lambda current, hook: hook.post_generate(filename, current), self.post_hooks, content
        )
