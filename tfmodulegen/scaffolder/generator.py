"""Terraform module scaffolding orchestrator.

Takes a finished ``ModuleDescriptor``, renders the five module files in
memory and writes them into a directory named after the module::

    <module_name>/
        versions.tf
        main.tf
        output.tf
        variable.tf
        README.md
"""

from __future__ import annotations

import os
from pathlib import Path

from tfmodulegen.models import ModuleDescriptor
from tfmodulegen.utils import print_warning

from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Output file table
# ---------------------------------------------------------------------------

# Output file name -> template name, in emission order.
MODULE_FILES: tuple[tuple[str, str], ...] = (
    ("versions.tf", "versions.tf.j2"),
    ("main.tf", "main.tf.j2"),
    ("output.tf", "output.tf.j2"),
    ("variable.tf", "variable.tf.j2"),
    ("README.md", "README.md.j2"),
)


class EmitError(Exception):
    """Raised when the module directory or one of its files cannot be written."""


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ModuleGenerator:
    """Renders and writes the boilerplate files of one Terraform module."""

    def __init__(
        self,
        descriptor: ModuleDescriptor,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.descriptor = descriptor
        self.renderer = renderer or TemplateRenderer()

    def render_all(self) -> list[tuple[str, str]]:
        """Render every module file.

        Returns:
            ``(filename, content)`` pairs in emission order.
        """
        return [
            (filename, self.renderer.render(template_name, self.descriptor))
            for filename, template_name in MODULE_FILES
        ]

    def generate(self, output_dir: str | Path = ".") -> Path:
        """Generate the module directory under *output_dir*.

        Templates are compiled and rendered before anything touches the
        file system, so a template error leaves the disk unchanged.

        Args:
            output_dir: Existing parent directory for the module folder.

        Returns:
            Path to the module directory.

        Raises:
            EmitError: If the module name is unusable as a directory name or
                a directory/file cannot be written.
            jinja2.TemplateError: If a template is missing or malformed.
        """
        validate_module_name(self.descriptor.module_name)
        self.renderer.check_templates(name for _, name in MODULE_FILES)
        files = self.render_all()

        module_dir = Path(output_dir) / self.descriptor.module_name
        emit_files(module_dir, files)
        return module_dir


# ---------------------------------------------------------------------------
# File emission
# ---------------------------------------------------------------------------


def validate_module_name(name: str) -> None:
    """Reject module names that do not denote a single new directory.

    Raises:
        EmitError: For an empty name, ``.``/``..``, or a name containing a
            path separator or NUL byte.
    """
    if not name:
        raise EmitError("Error creating directory: module name is empty")
    if name in (".", ".."):
        raise EmitError(f"Error creating directory: invalid module name '{name}'")
    separators = {os.sep, "/"} | ({os.altsep} if os.altsep else set())
    if any(sep in name for sep in separators):
        raise EmitError(
            f"Error creating directory: module name '{name}' must not contain a path separator"
        )
    if "\x00" in name:
        raise EmitError("Error creating directory: module name contains a NUL byte")


def emit_files(directory: str | Path, files: list[tuple[str, str]]) -> list[Path]:
    """Create *directory* and write each ``(filename, content)`` pair into it.

    An existing directory is reused after a warning and existing files are
    overwritten.  Files are written in order; the first failure stops the
    batch and files written before it are left in place.

    Returns:
        The written file paths, in order.

    Raises:
        EmitError: If the directory cannot be created or a file cannot be
            written.
    """
    dir_path = Path(directory)
    try:
        dir_path.mkdir()
    except FileExistsError:
        if not dir_path.is_dir():
            raise EmitError(
                f"Error creating directory: '{dir_path}' exists and is not a directory"
            ) from None
        print_warning(
            f"Directory '{dir_path.name}' already exists. "
            "Files will be overwritten if they exist."
        )
    except (OSError, ValueError) as exc:
        raise EmitError(f"Error creating directory: {exc}") from exc

    written: list[Path] = []
    for filename, content in files:
        file_path = dir_path / filename
        try:
            _write_file(file_path, content)
        except (OSError, ValueError) as exc:
            raise EmitError(f"Failed to generate {filename}: {exc}") from exc
        written.append(file_path)

    return written


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    # newline="" keeps the template's LF line endings on every platform.
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)
