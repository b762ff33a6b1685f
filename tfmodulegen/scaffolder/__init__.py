"""Terraform module scaffolder -- renders and writes module boilerplate.

Quick usage::

    from tfmodulegen.models import ModuleDescriptor
    from tfmodulegen.scaffolder import ModuleGenerator

    descriptor = ModuleDescriptor(module_name="network", terraform_version=">= 1.5")
    module_path = ModuleGenerator(descriptor).generate("/tmp/output")
"""

from tfmodulegen.scaffolder.generator import (
    MODULE_FILES,
    EmitError,
    ModuleGenerator,
    emit_files,
    validate_module_name,
)
from tfmodulegen.scaffolder.templates import TemplateRenderer

__all__ = [
    "MODULE_FILES",
    "EmitError",
    "ModuleGenerator",
    "TemplateRenderer",
    "emit_files",
    "validate_module_name",
]
