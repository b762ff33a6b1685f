"""Shared pytest fixtures for the tfmodulegen test suite.

Provides reusable fixtures for:
- A scripted ``LineReader`` that replays canned operator answers
- Sample providers, descriptors and configuration files
- Running inside a temporary working directory
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import pytest

from tfmodulegen.models import ModuleDescriptor, Provider
from tfmodulegen.prompts import InputClosedError


# ---------------------------------------------------------------------------
# Scripted input
# ---------------------------------------------------------------------------


class ScriptedReader:
    """``LineReader`` that returns pre-recorded answers in order.

    Every prompt shown is recorded in ``prompts``.  Once the answers run
    out, ``InputClosedError`` is raised, like a closed stdin.
    """

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise InputClosedError("input", "EOF")
        return self._answers.pop(0)

    @property
    def remaining(self) -> list[str]:
        return list(self._answers)


@pytest.fixture
def scripted_reader():
    """Factory fixture: ``scripted_reader(["answer", ...])``."""
    return ScriptedReader


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


@pytest.fixture
def google_provider() -> Provider:
    return Provider(name="google", source="hashicorp/google", version="6.4.0")


@pytest.fixture
def aws_provider() -> Provider:
    return Provider(name="aws", source="hashicorp/aws", version="~> 5.0")


@pytest.fixture
def bare_descriptor() -> ModuleDescriptor:
    """A descriptor without providers."""
    return ModuleDescriptor(
        module_name="network",
        description="VPC and subnets.",
        terraform_version=">= 0.12",
    )


@pytest.fixture
def provider_descriptor(google_provider: Provider, aws_provider: Provider) -> ModuleDescriptor:
    """A descriptor with two providers."""
    return ModuleDescriptor(
        module_name="storage",
        description="Buckets for build artifacts.",
        terraform_version="~> 1.9.6",
        providers=(google_provider, aws_provider),
    )


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    return {
        "terraform_version": "~> 1.9.6",
        "providers": [
            {"name": "google", "source": "hashicorp/google", "version": "6.4.0"},
            {"name": "aws", "source": "hashicorp/aws", "version": "~> 5.0"},
        ],
    }


@pytest.fixture
def write_config(tmp_path: Path):
    """Factory fixture writing a config file and returning its path.

    Dicts and lists are serialised as JSON; strings are written verbatim.
    """

    def _write(content: Any, name: str = "tfmodulegen.config.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content, indent=2), encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Working directory
# ---------------------------------------------------------------------------


@pytest.fixture
def in_tmp_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with ``tmp_path`` as the current working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
