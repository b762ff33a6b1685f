"""Pydantic v2 models for the Terraform module generator.

A ``ModuleDescriptor`` is the single record threaded through every rendering
step.  Both models are frozen so that all five generated files observe the
same snapshot of the collected values.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Provider(BaseModel):
    """One ``required_providers`` entry.

    Fields are not validated: a configuration entry with a missing key
    deserializes to an empty string, exactly like an empty interactive answer.
    A JSON ``null`` is read the same way.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Local provider name, e.g. 'google'")
    source: str = Field(default="", description="Registry source, e.g. 'hashicorp/google'")
    version: str = Field(default="", description="Version constraint, e.g. '6.4.0'")

    @field_validator("name", "source", "version", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return "" if value is None else value


class ModuleDescriptor(BaseModel):
    """Everything needed to render the files of one generated module."""

    model_config = ConfigDict(frozen=True)

    module_name: str = Field(..., description="Directory name and display name of the module")
    description: str = Field(default="")
    terraform_version: str = Field(..., description="Value of required_version")
    providers: tuple[Provider, ...] = Field(default=())

    def template_context(self) -> dict[str, Any]:
        """Return the variables exposed to the module templates."""
        return {
            "module_name": self.module_name,
            "description": self.description,
            "terraform_version": self.terraform_version,
            "providers": self.providers,
        }
