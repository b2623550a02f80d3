"""Shared pytest configuration for the wren examples.

A wren App freezes its route table on the first request, and example
tests register nothing themselves. ``example_app`` therefore re-executes
the sibling ``app.py`` for every test so each one starts from an
unfrozen App with exactly the routes the example declares.
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest):
    """A freshly loaded App from the ``app.py`` beside the test file."""
    app_path = Path(request.path).parent / "app.py"
    spec = importlib.util.spec_from_file_location(f"example_{app_path.parent.name}", app_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.app
