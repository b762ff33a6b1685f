"""Generator configuration.

Defaults for the interactive session are read from an optional JSON file in
the working directory::

    {
      "terraform_version": "~> 1.9.6",
      "providers": [
        {"name": "google", "source": "hashicorp/google", "version": "6.4.0"}
      ]
    }

A missing, unreadable or malformed file is never fatal: the session simply
starts without defaults.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from tfmodulegen.models import Provider
from tfmodulegen.utils import print_info, print_warning

CONFIG_FILENAME = "tfmodulegen.config.json"

# Offered when the configuration does not pin a Terraform version.
DEFAULT_TERRAFORM_VERSION = ">= 0.12"


class GeneratorConfig(BaseModel):
    """Defaults loaded from ``tfmodulegen.config.json``.

    An empty ``terraform_version`` or an empty ``providers`` list means the
    value is absent.  Unknown keys are ignored.
    """

    terraform_version: str = Field(default="")
    providers: list[Provider] = Field(default_factory=list)

    @field_validator("terraform_version", mode="before")
    @classmethod
    def _null_version(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("providers", mode="before")
    @classmethod
    def _null_providers(cls, value: object) -> object:
        return [] if value is None else value

    @property
    def has_terraform_version(self) -> bool:
        return self.terraform_version != ""

    @property
    def has_providers(self) -> bool:
        return len(self.providers) > 0

    @property
    def default_terraform_version(self) -> str:
        """The version used when the operator leaves the prompt empty."""
        if self.has_terraform_version:
            return self.terraform_version
        return DEFAULT_TERRAFORM_VERSION


def load_config(path: str | Path = CONFIG_FILENAME) -> GeneratorConfig:
    """Load generator defaults from *path*.

    Args:
        path: Location of the JSON configuration file.

    Returns:
        The parsed configuration, or an empty ``GeneratorConfig`` when the
        file does not exist, cannot be read, or cannot be parsed.  Read and
        parse failures are reported as warnings.
    """
    config_path = Path(path)
    if not config_path.exists():
        return GeneratorConfig()

    try:
        raw = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print_warning(f"Error opening config file: {exc}")
        return GeneratorConfig()

    try:
        config = GeneratorConfig.model_validate_json(raw)
    except ValidationError as exc:
        print_warning(f"Error decoding config file: {_first_error(exc)}")
        return GeneratorConfig()

    print_info(f"Loaded configuration from {config_path}")
    return config


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    if location:
        return f"{location}: {first.get('msg', '')}"
    return str(first.get("msg", exc))
