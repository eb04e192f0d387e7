"""Integrations subpackage for json-profiler.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point)

The plugin module is loaded by pytest itself and is not imported here, so the
base install never imports pytest.
"""

from __future__ import annotations

__all__: list[str] = []
