"""pytest plugin for json-profiler.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_profiler import AnalyzerConfig, compare


@pytest.fixture(scope="session")
def assert_json_paths_match() -> Any:
    """Fixture that returns a callable path-diff asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which builds fresh resolvers per call).

    Usage in tests::

        def test_same_shape(assert_json_paths_match):
            assert_json_paths_match({"a": 1}, {"a": 2}, values=False)

        def test_missing_key(assert_json_paths_match):
            with pytest.raises(AssertionError, match=r"only_in_second"):
                assert_json_paths_match({"a": 1}, {"a": 1, "b": 2})

    Returns:
        A callable ``_assert(actual, expected, values=True, config=None) -> None``
        that raises ``AssertionError`` when the documents differ.
    """

    def _assert(
        actual: Any,
        expected: Any,
        values: bool = True,
        config: AnalyzerConfig | None = None,
    ) -> None:
        """Assert that two JSON documents have the same paths (and values).

        Args:
            actual:   The actual JSON value produced by the code under test.
            expected: The expected/reference JSON value.
            values:   When False, only the path sets are compared and value
                      changes at shared paths are ignored.
            config:   Optional AnalyzerConfig forwarded to compare().

        Raises:
            AssertionError: With the differing paths listed.
        """
        result = compare(actual, expected, config=config)
        changed = [change.path for change in result.changed] if values else []
        if result.structural_diff or changed:
            raise AssertionError(
                f"JSON documents differ:\n"
                f"  only_in_first:  {result.only_in_first}\n"
                f"  only_in_second: {result.only_in_second}\n"
                f"  changed:        {changed}"
            )

    return _assert
