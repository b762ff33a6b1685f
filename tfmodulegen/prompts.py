"""Interactive collection of the module descriptor.

The operator is walked through the module name, description, required
Terraform version and provider list.  Values from ``GeneratorConfig`` act as
defaults:

* the configured Terraform version is offered as the prompt default;
* a non-empty configured provider list is used as-is and the provider
  prompts are skipped entirely.  Extending a configured list means editing
  the configuration file.

Input is read through a ``LineReader`` so that tests can drive a session
with a scripted sequence of answers.
"""

from __future__ import annotations

from typing import Protocol

from rich.markup import escape

from tfmodulegen.config import GeneratorConfig
from tfmodulegen.models import ModuleDescriptor, Provider
from tfmodulegen.utils import console

AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})


class InputClosedError(Exception):
    """Raised when the operator's input stream cannot deliver another line."""

    def __init__(self, field: str, cause: BaseException | str | None = None) -> None:
        self.field = field
        self.cause = cause
        detail = str(cause) if cause is not None and str(cause) else "input stream closed"
        super().__init__(f"Error reading {field}: {detail}")


class LineReader(Protocol):
    """Source of operator answers, one line per prompt."""

    def read_line(self, prompt: str) -> str:
        """Show *prompt* and return the next line without its newline.

        Raises:
            InputClosedError: If no line can be read.
        """
        ...


class ConsoleReader:
    """``LineReader`` backed by the shared Rich console."""

    def read_line(self, prompt: str) -> str:
        try:
            return console.input(escape(prompt))
        except (EOFError, OSError) as exc:
            # Keep the next message off the prompt line.
            console.print()
            raise InputClosedError("input", exc) from exc


def is_affirmative(answer: str) -> bool:
    """Return ``True`` for ``y``/``yes`` in any letter case."""
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def collect_module(config: GeneratorConfig, reader: LineReader) -> ModuleDescriptor:
    """Prompt for every field of a ``ModuleDescriptor``.

    Args:
        config: Defaults loaded from the configuration file (may be empty).
        reader: Where answers come from.

    Returns:
        The finished, frozen descriptor.

    Raises:
        InputClosedError: If the input stream fails at any prompt.  Nothing
            collected so far is kept.
    """
    module_name = _ask(reader, "Enter module name: ", "module name")
    description = _ask(reader, "Enter module description: ", "description")
    terraform_version = _ask_terraform_version(reader, config)

    if config.has_providers:
        providers = list(config.providers)
        _show_configured_providers(providers)
    else:
        providers = _ask_providers(reader)

    return ModuleDescriptor(
        module_name=module_name,
        description=description,
        terraform_version=terraform_version,
        providers=tuple(providers),
    )


# ---------------------------------------------------------------------------
# Individual prompts
# ---------------------------------------------------------------------------


def _ask(reader: LineReader, prompt: str, field: str) -> str:
    try:
        answer = reader.read_line(prompt)
    except InputClosedError as exc:
        raise InputClosedError(field, exc.cause) from exc
    return answer.strip()


def _ask_terraform_version(reader: LineReader, config: GeneratorConfig) -> str:
    default = config.default_terraform_version
    if config.has_terraform_version:
        prompt = f"Enter required Terraform version (default from config: {default}): "
    else:
        prompt = f"Enter required Terraform version (default: {default}): "

    answer = _ask(reader, prompt, "Terraform version")
    return answer or default


def _ask_providers(reader: LineReader) -> list[Provider]:
    providers: list[Provider] = []
    while True:
        answer = _ask(reader, "Do you want to add a provider? (y/n): ", "input")
        if not is_affirmative(answer):
            break

        name = _ask(reader, "Enter provider name (e.g. google): ", "provider name")
        source = _ask(reader, "Enter provider source (e.g. hashicorp/google): ", "provider source")
        version = _ask(reader, "Enter provider version (e.g. 6.4.0): ", "provider version")
        providers.append(Provider(name=name, source=source, version=version))

    return providers


def _show_configured_providers(providers: list[Provider]) -> None:
    console.print("Using provider configuration from config file:")
    for provider in providers:
        console.print(
            f"  - {escape(provider.name)}: source={escape(provider.source)}, "
            f"version={escape(provider.version)}"
        )
