"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation: log output goes to an in-memory recording console.
- Tree/factory fixtures for building programs by hand.
"""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'protoclass' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from protoclass.core.js import IR, SyntaxTree  # noqa: E402
from protoclass.core.tracer import reset_tracer  # noqa: E402
from protoclass.utils.console import reset_console, set_console  # noqa: E402


@pytest.fixture(autouse=True)
def captured_console():
  """Routes logging to a recording console for the duration of a test."""
  capture = Console(record=True, file=io.StringIO(), width=200)
  set_console(capture)
  reset_tracer()
  yield capture
  reset_console()


@pytest.fixture
def tree() -> SyntaxTree:
  return SyntaxTree()


@pytest.fixture
def ir(tree) -> IR:
  return IR(tree)
