"""pytest plugin for json-equivalence.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

The default comparison mode of the fixture is read from the ``json_compare_mode``
ini option (a ``CompareMode`` member name, case-insensitive; default ``lenient``)::

    [tool.pytest.ini_options]
    json_compare_mode = "strict"

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_equivalence import CompareMode, assert_json_equals
from json_equivalence.api import ModeOrComparator

_INI_NAME = "json_compare_mode"


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini(
        _INI_NAME,
        help="Default CompareMode of the assert_json_equivalent fixture "
        "(strict, lenient, non_extensible, strict_order).",
        default="lenient",
    )


def _configured_mode(config: pytest.Config) -> CompareMode:
    raw = str(config.getini(_INI_NAME)).strip()
    try:
        return CompareMode[raw.upper()]
    except KeyError:
        names = ", ".join(m.name.lower() for m in CompareMode)
        msg = f"Invalid {_INI_NAME} {raw!r}; expected one of: {names}"
        raise pytest.UsageError(msg) from None


def pytest_configure(config: pytest.Config) -> None:
    # Reject a bad ini value at startup instead of in every test using the fixture.
    _configured_mode(config)


@pytest.fixture(scope="session")
def assert_json_equivalent(pytestconfig: pytest.Config) -> Any:
    """Fixture that returns a callable JSON equivalence asserter.

    The fixture is session-scoped because the returned callable is stateless
    (every call creates a fresh DiffResult).

    Usage in tests::

        def test_payload(assert_json_equivalent):
            assert_json_equivalent({"id": 1, "extra": True}, {"id": 1})

        def test_strict(assert_json_equivalent):
            with pytest.raises(AssertionError, match=r"Unexpected"):
                assert_json_equivalent({"id": 1, "extra": True}, {"id": 1},
                                       mode=CompareMode.STRICT)

    Returns:
        A callable ``_assert(actual, expected, mode=None, msg="") -> None``
        that raises ``AssertionError`` with the diff message when the
        documents are not equivalent.  ``mode`` defaults to the configured
        ``json_compare_mode``.
    """
    default_mode = _configured_mode(pytestconfig)

    def _assert(
        actual: Any,
        expected: Any,
        mode: ModeOrComparator | None = None,
        msg: str = "",
    ) -> None:
        """Assert that two JSON documents are equivalent.

        Args:
            actual:   The actual JSON value (or JSON text) produced by the code under test.
            expected: The expected/reference JSON value (or JSON text).
            mode:     CompareMode, comparator or bool; defaults to the
                      configured ``json_compare_mode``.
            msg:      Optional prefix for the failure message.

        Raises:
            AssertionError: When the documents differ, listing every
                difference as ``<path>: <detail>``.
        """
        assert_json_equals(
            expected,
            actual,
            default_mode if mode is None else mode,
            msg=msg,
        )

    return _assert
