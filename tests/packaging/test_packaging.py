"""Packaging correctness verification for json-pattern-match.

Tests validate that:
- The top-level import exposes the documented public API
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
    """Verify the base install imports and works."""

    def test_import_json_pattern_match(self):  # type: ignore[no-untyped-def]
        """Top-level import succeeds."""
        import json_pattern_match

        assert hasattr(json_pattern_match, "assert_json_matches")
        assert hasattr(json_pattern_match, "compare_json")
        assert hasattr(json_pattern_match, "JsonPattern")

    def test_assert_basic(self):  # type: ignore[no-untyped-def]
        """assert_json_matches() works on the simplest input."""
        from json_pattern_match import assert_json_matches

        assert_json_matches('{"a": "..."}', '{"a": 1}')

    def test_compare_basic(self):  # type: ignore[no-untyped-def]
        from json_pattern_match import compare_json

        assert compare_json({"a": 1}, {"a": 1}).matched


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

        wheels = sorted(dist_dir.glob("json_pattern_match-*.whl"), key=lambda p: p.stat().st_mtime)
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
            "json_pattern_match/__init__.py",
            "json_pattern_match/api.py",
            "json_pattern_match/exceptions.py",
            "json_pattern_match/parsing.py",
            "json_pattern_match/paths.py",
            "json_pattern_match/reporting.py",
            "json_pattern_match/result.py",
            "json_pattern_match/templates.py",
            "json_pattern_match/algorithm/__init__.py",
            "json_pattern_match/algorithm/config.py",
            "json_pattern_match/algorithm/engine.py",
            "json_pattern_match/algorithm/matcher.py",
            "json_pattern_match/tree/__init__.py",
            "json_pattern_match/tree/nodes.py",
            "json_pattern_match/integrations/__init__.py",
            "json_pattern_match/integrations/_pattern.py",
            "json_pattern_match/integrations/_pytest_plugin.py",
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
                "json-pattern-match" in metadata.lower()
                or "json_pattern_match" in metadata.lower()
            )
            assert "0.1.0" in metadata


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        """pytest11 entry point must be registered for json-pattern-match."""
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")

        eps = [ep for ep in pytest11_eps if "json_pattern_match" in str(ep.value)]
        assert eps, (
            f"No pytest11 entry point found for json-pattern-match. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        """assert_json_matches fixture must be importable from plugin."""
        import importlib

        mod = importlib.import_module("json_pattern_match.integrations._pytest_plugin")
        assert hasattr(mod, "assert_json_matches")
        assert hasattr(mod, "pytest_assertrepr_compare")

    def test_plugin_discovery_via_pytest(self):  # type: ignore[no-untyped-def]
        """pytest --fixtures should list assert_json_matches."""
        result = subprocess.run(
            [sys.executable, "-m", "pytest", "--fixtures", "-q"],
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
        )
        assert "assert_json_matches" in result.stdout, (
            f"Fixture not found in pytest fixtures list. stdout: {result.stdout[:500]}"
        )


class TestPackageMetadata:
    """Verify pyproject.toml metadata completeness."""

    def test_version(self):  # type: ignore[no-untyped-def]
        """Package version must be 0.1.0."""
        import json_pattern_match

        assert json_pattern_match.__version__ == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        """__all__ must include the documented public API."""
        import json_pattern_match

        expected = {
            "ArrayMode",
            "JsonMatchError",
            "JsonParseError",
            "JsonPattern",
            "MatchConfig",
            "MatchResult",
            "MismatchKind",
            "MismatchRecord",
            "assert_json_matches",
            "assert_json_matches_any_order",
            "compare_json",
            "is_matching_json",
            "matches_json",
        }
        actual = set(json_pattern_match.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
