"""Module assembly for generated declarations.

Renders the declaration source into a Jinja2 module template and writes
the result.

Supports custom templates via the template_dir parameter:
    generator = ModuleGenerator(schema, options, template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import os
from pathlib import Path

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .generator import join_declarations, schema_to_declarations
from .hooks import HookRunner
from .ir import GeneratorOptions, IRSchema

MODULE_TEMPLATE = "module.js.j2"


class ModuleGenerator:
    """Generates a complete Flow module from an IRSchema.

    The template receives `module_name`, `declarations` (list of
    declaration strings) and `body` (declarations joined by blank lines).
    """

    def __init__(
        self,
        schema: IRSchema,
        options: GeneratorOptions,
        template_dir: str | None = None,
        hooks: HookRunner | None = None,
    ):
        """Initialize the module generator.

        Args:
            schema: The parsed introspection schema
            options: Naming, export and filtering options
            template_dir: Optional directory with a custom module.js.j2
            hooks: Optional pre/post generation hooks
        """
        self.schema = schema
        self.options = options
        self.hooks = hooks or HookRunner()

        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_flowgen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            keep_trailing_newline=True,
        )

    def declarations(self) -> list[str]:
        """Run pre-generate hooks and generate all declarations."""
        schema = self.hooks.run_pre_hooks(self.schema)
        return schema_to_declarations(schema, self.options)

    def render(self, filename: str = "") -> str:
        """Render the module text, post-generate hooks applied."""
        declarations = self.declarations()
        template = self.env.get_template(MODULE_TEMPLATE)
        content = template.render(
            module_name=self.options.module_name,
            declarations=declarations,
            body=join_declarations(declarations),
        )
        return self.hooks.run_post_hooks(filename, content)

    def write(self, output_path: str) -> str:
        """Render and write the module; returns the written text."""
        content = self.render(os.path.basename(output_path))
        parent = os.path.dirname(output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
        return content
