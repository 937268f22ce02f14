"""
Shared test fixtures for cmdref tests.

This module provides common fixtures used across the unit tests:
- The sample Click application and its wrapped tree
- A fixed clock for footer dates
- Output directories
"""

from datetime import date

import pytest

from cmdref.command_tree import build_tree
from cmdref.models import CommandNode
from fixtures.sample_cli import app

FIXED_DAY = date(2026, 10, 19)


@pytest.fixture
def sample_app():
    """The sample Click application (root group named "app")."""
    return app


@pytest.fixture
def tree() -> CommandNode:
    """Sample application wrapped into CommandNodes, footer enabled."""
    return build_tree(app, name="app")


@pytest.fixture
def fixed_today():
    """Clock that always returns 19-Oct-2026."""
    return lambda: FIXED_DAY


@pytest.fixture
def output_dir(tmp_path):
    """Existing, empty output directory."""
    out = tmp_path / "reference"
    out.mkdir()
    return out


