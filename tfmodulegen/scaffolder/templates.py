"""Jinja2 template rendering for Terraform module scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``tfmodulegen/scaffolder/templates/`` directory and renders them against a
``ModuleDescriptor``.  The template bodies are plain data files, so an
alternative template set can be used by pointing the renderer at another
directory.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from tfmodulegen.models import ModuleDescriptor


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

CODE_FENCE = "```"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders module templates for a ``ModuleDescriptor``.

    Templates see the descriptor fields (``module_name``, ``description``,
    ``terraform_version``, ``providers``) plus a ``code_fence()`` global that
    emits a literal triple backtick for Markdown code blocks.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.globals["code_fence"] = _code_fence

    # -- Rendering ---------------------------------------------------------

    def render(self, template_name: str, descriptor: ModuleDescriptor) -> str:
        """Render a single template against *descriptor*.

        Args:
            template_name: Path relative to the template directory (e.g.
                ``"versions.tf.j2"``).
            descriptor: The module being generated.

        Returns:
            The rendered file content.
        """
        template = self.env.get_template(template_name)
        return template.render(**descriptor.template_context())

    def render_string(self, template_body: str, descriptor: ModuleDescriptor) -> str:
        """Render an inline template body against *descriptor*."""
        template = self.env.from_string(template_body)
        return template.render(**descriptor.template_context())

    # -- Utility -----------------------------------------------------------

    def check_templates(self, template_names: Iterable[str]) -> None:
        """Compile every named template without rendering it.

        Raises:
            jinja2.TemplateNotFound: If a template file is missing.
            jinja2.TemplateSyntaxError: If a template is malformed.
        """
        for name in template_names:
            self.env.get_template(name)

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` templates in the template directory."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in self.template_dir.rglob("*.j2")
        )


def _code_fence() -> str:
    return CODE_FENCE
