"""Packaging correctness verification for json-profiler.

Tests validate:
- Base install imports cleanly and exposes the public API
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
    """Verify the base install imports and runs."""

    def test_import_json_profiler(self):  # type: ignore[no-untyped-def]
        import json_profiler

        assert hasattr(json_profiler, "analyze")
        assert hasattr(json_profiler, "compare")
        assert hasattr(json_profiler, "validate")

    def test_analyze_basic(self):  # type: ignore[no-untyped-def]
        from json_profiler import analyze

        assert analyze('{"a": 1}').paths == ["a"]

    def test_integrations_do_not_import_pytest_eagerly(self):  # type: ignore[no-untyped-def]
        """The integrations package itself has no pytest dependency."""
        import json_profiler.integrations as integrations

        assert integrations.__all__ == []


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        dist_dir = PROJECT_ROOT / "dist"
        # Use poetry build since that's the project's build system
        result = subprocess.run(
            ["poetry", "build", "-f", "wheel"],
            cwd=str(PROJECT_ROOT),
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            py_typed_files = [n for n in names if n.endswith("py.typed")]
            assert py_typed_files, f"py.typed not found in wheel. Contents: {names}"

    def test_no_pycache_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        with zipfile.ZipFile(wheel_path) as zf:
            pycache_files = [n for n in zf.namelist() if "__pycache__" in n]
            assert not pycache_files, f"__pycache__ found in wheel: {pycache_files}"

    def test_all_source_modules_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        expected_modules = [
            "json_profiler/__init__.py",
            "json_profiler/analyzer.py",
            "json_profiler/api.py",
            "json_profiler/cache.py",
            "json_profiler/config.py",
            "json_profiler/errors.py",
            "json_profiler/protocols.py",
            "json_profiler/report.py",
            "json_profiler/result.py",
            "json_profiler/analysis/__init__.py",
            "json_profiler/analysis/diff.py",
            "json_profiler/analysis/paths.py",
            "json_profiler/analysis/schema.py",
            "json_profiler/analysis/statistics.py",
            "json_profiler/analysis/structure.py",
            "json_profiler/tree/__init__.py",
            "json_profiler/tree/builder.py",
            "json_profiler/tree/nodes.py",
            "json_profiler/validation/__init__.py",
            "json_profiler/validation/scoped.py",
            "json_profiler/validation/textual.py",
            "json_profiler/integrations/__init__.py",
            "json_profiler/integrations/_pytest_plugin.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert any(module in n for n in names), (
                    f"Module {module} not found in wheel"
                )

    def test_metadata_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        with zipfile.ZipFile(wheel_path) as zf:
            metadata_files = [n for n in zf.namelist() if "METADATA" in n]
            assert metadata_files, "No METADATA found in wheel"
            metadata = zf.read(metadata_files[0]).decode()
            assert "json-profiler" in metadata.lower() or "json_profiler" in metadata.lower()
            assert "0.1.0" in metadata


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")

        jp_eps = [
            ep
            for ep in pytest11_eps
            if "json_profiler" in ep.name.lower() or "json_profiler" in str(ep.value)
        ]
        assert jp_eps, (
            f"No pytest11 entry point found for json-profiler. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        import importlib

        mod = importlib.import_module("json_profiler.integrations._pytest_plugin")
        assert hasattr(mod, "assert_json_paths_match")

    def test_plugin_discovery_via_pytest(self):  # type: ignore[no-untyped-def]
        result = subprocess.run(
            [sys.executable, "-m", "pytest", "--fixtures", "-q"],
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
        )
        assert "assert_json_paths_match" in result.stdout, (
            f"Fixture not found in pytest fixtures list. stdout: {result.stdout[:500]}"
        )


class TestPackageMetadata:
    """Verify package metadata completeness."""

    def test_version(self):  # type: ignore[no-untyped-def]
        import json_profiler

        assert json_profiler.__version__ == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        """__all__ must include the documented public API."""
        import json_profiler

        expected = {
            "AnalysisError",
            "AnalysisResult",
            "AnalyzerConfig",
            "ComparisonParseError",
            "ComparisonResult",
            "JSONAnalyzer",
            "ParseError",
            "PathNotFoundError",
            "ResourceLimitError",
            "Schema",
            "ValidationReport",
            "analyze",
            "analyze_structure",
            "collect_statistics",
            "compare",
            "enumerate_paths",
            "infer_schema",
            "parse",
            "resolve_path",
            "validate",
        }
        actual = set(json_profiler.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
