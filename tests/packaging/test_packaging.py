"""Packaging correctness verification for json-equivalence.

Tests validate that:
- The base install imports cleanly and exposes the public API
- py.typed marker is present in the wheel
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the built wheel and current installation rather than
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import subprocess
import sys
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    """Verify the installed package imports and works."""

    def test_import_json_equivalence(self):  # type: ignore[no-untyped-def]
        """Top-level import succeeds."""
        import json_equivalence

        assert hasattr(json_equivalence, "compare")
        assert hasattr(json_equivalence, "compare_json")
        assert hasattr(json_equivalence, "assert_json_equals")

    def test_compare_basic(self):  # type: ignore[no-untyped-def]
        from json_equivalence import compare

        assert compare({"a": [1, 2]}, {"a": [1, 2]}).passed()

    def test_library_logger_is_silent_by_default(self):  # type: ignore[no-untyped-def]
        """The package logger carries a NullHandler so applications opt in."""
        import logging

        import json_equivalence  # noqa: F401

        handlers = logging.getLogger("json_equivalence").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        dist_dir = PROJECT_ROOT / "dist"
        # Use poetry build since that's the project's build system
        try:
            result = subprocess.run(
                ["poetry", "build", "-f", "wheel"],
                cwd=str(PROJECT_ROOT),
                capture_output=True,
                text=True,
            )
        except FileNotFoundError:
            pytest.skip("poetry is not installed")
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """py.typed marker must be included in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            py_typed_files = [n for n in names if n.endswith("py.typed")]
            assert py_typed_files, f"py.typed not found in wheel. Contents: {names}"

    def test_no_pycache_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """__pycache__ directories must not be in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            pycache_files = [n for n in zf.namelist() if "__pycache__" in n]
            assert not pycache_files, f"__pycache__ found in wheel: {pycache_files}"

    def test_all_source_modules_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """All source modules must be present in the wheel."""
        expected_modules = [
            "json_equivalence/__init__.py",
            "json_equivalence/api.py",
            "json_equivalence/comparator.py",
            "json_equivalence/exceptions.py",
            "json_equivalence/matchers.py",
            "json_equivalence/protocols.py",
            "json_equivalence/result.py",
            "json_equivalence/algorithm/__init__.py",
            "json_equivalence/algorithm/arrays.py",
            "json_equivalence/algorithm/config.py",
            "json_equivalence/algorithm/matcher.py",
            "json_equivalence/tree/__init__.py",
            "json_equivalence/tree/nodes.py",
            "json_equivalence/tree/parser.py",
            "json_equivalence/integrations/__init__.py",
            "json_equivalence/integrations/_pytest_plugin.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert any(module in n for n in names), (
                    f"Module {module} not found in wheel"
                )

    def test_metadata_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """Wheel metadata must include correct package info."""
        with zipfile.ZipFile(wheel_path) as zf:
            metadata_files = [n for n in zf.namelist() if "METADATA" in n]
            assert metadata_files, "No METADATA found in wheel"
            metadata = zf.read(metadata_files[0]).decode()
            assert (
                "json-equivalence" in metadata.lower()
                or "json_equivalence" in metadata.lower()
            )
            assert "0.1.0" in metadata


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        """pytest11 entry point must be registered for json-equivalence."""
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")

        eq_eps = [ep for ep in pytest11_eps if "json_equivalence" in str(ep.value)]
        assert eq_eps, (
            f"No pytest11 entry point found for json-equivalence. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        """assert_json_equivalent fixture must be importable from plugin."""
        import importlib

        mod = importlib.import_module("json_equivalence.integrations._pytest_plugin")
        assert hasattr(mod, "assert_json_equivalent")
        assert hasattr(mod, "pytest_addoption")

    def test_plugin_discovery_via_pytest(self):  # type: ignore[no-untyped-def]
        """pytest --fixtures should list assert_json_equivalent."""
        result = subprocess.run(
            [sys.executable, "-m", "pytest", "--fixtures", "-q"],
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
        )
        assert "assert_json_equivalent" in result.stdout, (
            f"Fixture not found in pytest fixtures list. stdout: {result.stdout[:500]}"
        )


class TestPackageMetadata:
    """Verify pyproject.toml metadata completeness."""

    def test_version(self):  # type: ignore[no-untyped-def]
        import json_equivalence

        assert json_equivalence.__version__ == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        """__all__ must include the documented public API."""
        import json_equivalence

        expected = {
            "ArrayMatching",
            "ArraySizeComparator",
            "ArrayValueMatcher",
            "CompareMode",
            "CustomComparator",
            "Customization",
            "DefaultComparator",
            "DiffEntry",
            "DiffKind",
            "DiffResult",
            "JSONComparator",
            "JSONEquivalenceError",
            "JSONParseError",
            "MatchOutcome",
            "PredicateMatcher",
            "RegularExpressionValueMatcher",
            "ValueMatcher",
            "ValueMatcherError",
            "assert_json_equals",
            "assert_json_not_equals",
            "compare",
            "compare_json",
            "is_equivalent",
        }
        actual = set(json_equivalence.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
