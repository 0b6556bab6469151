"""Shared pytest configuration for winnow examples.

Each example keeps its code in a sibling ``app.py``. The ``example``
fixture runs that file from scratch for every test, so module-level
state such as an in-memory user list never leaks between tests.
"""

import runpy
from pathlib import Path
from types import SimpleNamespace

import pytest


@pytest.fixture
def example(request: pytest.FixtureRequest) -> SimpleNamespace:
    """Globals of the test's sibling app.py, as attributes."""
    app_path = Path(request.path).with_name("app.py")
    namespace = runpy.run_path(str(app_path), run_name=f"example_{app_path.parent.name}")
    return SimpleNamespace(**namespace)
