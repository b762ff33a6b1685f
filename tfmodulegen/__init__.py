"""Interactive Terraform module boilerplate generator."""

__version__ = "0.1.0"
