"""Terraform module generator pipeline.

A single linear pass:

1. Load defaults from ``tfmodulegen.config.json`` (optional).
2. Collect the module descriptor interactively.
3. Render the five module templates.
4. Write them into ``./<module_name>/``.

Usage::

    python -m tfmodulegen
"""

from __future__ import annotations

import sys
from pathlib import Path

from jinja2 import TemplateError

from tfmodulegen import __version__
from tfmodulegen.config import CONFIG_FILENAME, load_config
from tfmodulegen.prompts import ConsoleReader, InputClosedError, LineReader, collect_module
from tfmodulegen.scaffolder import EmitError, ModuleGenerator
from tfmodulegen.utils import console, print_error, print_success


def run(
    reader: LineReader | None = None,
    config_path: str | Path = CONFIG_FILENAME,
    output_dir: str | Path = ".",
) -> Path:
    """Run one generation session.

    Args:
        reader: Source of operator answers. Defaults to the terminal.
        config_path: Location of the optional defaults file.
        output_dir: Parent directory of the generated module folder.

    Returns:
        Path to the generated module directory.

    Raises:
        InputClosedError: If reading an answer fails; nothing is written.
        EmitError: If the module directory or a file cannot be written.
        jinja2.TemplateError: If a module template is missing or malformed.
    """
    config = load_config(config_path)
    descriptor = collect_module(config, reader or ConsoleReader())
    return ModuleGenerator(descriptor).generate(output_dir)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``python -m tfmodulegen``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="tfmodulegen",
        description="Interactively scaffold a Terraform module directory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            f"Defaults are read from ./{CONFIG_FILENAME} when present:\n"
            '  {"terraform_version": "~> 1.9.6",\n'
            '   "providers": [{"name": "google", "source": "hashicorp/google", '
            '"version": "6.4.0"}]}\n'
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.parse_args(argv)

    try:
        module_dir = run()
    except (InputClosedError, EmitError) as exc:
        print_error(str(exc))
        return 1
    except TemplateError as exc:
        print_error(f"Template error: {exc}")
        return 1
    except KeyboardInterrupt:
        console.print()
        print_error("Aborted.")
        return 130

    print_success(
        "Terraform module boilerplate files generated successfully "
        f"in the '{module_dir.name}' directory!"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
