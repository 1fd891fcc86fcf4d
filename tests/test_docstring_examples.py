"""Docstring examples stay runnable.

Runs the interactive examples of the public modules with doctest so that
documented output matches real behaviour (Babel-backed where a module uses
the default provider).

Python 3.13+.
"""

import doctest
from types import ModuleType

import pytest

from durationformat import locale_utils, options
from durationformat.diagnostics import formatter
from durationformat.runtime import duration_format, negotiator


@pytest.mark.parametrize(
    "module",
    [options, locale_utils, formatter, negotiator, duration_format],
    ids=lambda module: module.__name__,
)
def test_docstring_examples_pass(module: ModuleType) -> None:
    """Every example in the module docstrings produces its documented output."""
    result = doctest.testmod(module, verbose=False, report=False)
    assert result.attempted > 0
    assert result.failed == 0
