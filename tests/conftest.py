"""Shared fixtures: access to the JSON documents under tests/resources."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from json_pattern_match import MatchConfig

RESOURCES = Path(__file__).parent / "resources"


def read_resource(name: str) -> str:
    """Read a resource file as UTF-8 text.

    Raises:
        FileNotFoundError: With the resource name if it does not exist.
    """
    path = RESOURCES / name
    if not path.is_file():
        raise FileNotFoundError(f"Resource {name} not found")
    return path.read_text(encoding="utf-8")


@pytest.fixture
def resource() -> Callable[[str], str]:
    """The read_resource helper as a fixture."""
    return read_resource


@pytest.fixture
def bare_config() -> MatchConfig:
    """Config whose reports omit the document dumps, for exact message checks."""
    return MatchConfig(include_documents=False)
