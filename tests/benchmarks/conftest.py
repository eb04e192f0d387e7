"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 100-key flat, ~10k-node nested, and a deep chain past the
interpreter recursion limit.
"""

from __future__ import annotations

import json
from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def generate_nested_records(sections: int, rows: int) -> dict[str, Any]:
    """Generate ``sections`` arrays of ``rows`` small records each."""
    return {
        f"section_{s}": [
            {
                "id": r,
                "name": f"row_{r}",
                "tags": ["a", "b"],
                "score": r * 0.5,
                "ok": r % 2 == 0,
            }
            for r in range(rows)
        ]
        for s in range(sections)
    }


def generate_deep_chain(depth: int) -> dict[str, Any]:
    """Generate ``{"n": {"n": ... {"leaf": 0}}}`` nested ``depth`` levels."""
    doc: dict[str, Any] = {"leaf": 0}
    for _ in range(depth):
        doc = {"n": doc}
    return doc


@pytest.fixture
def flat_text() -> str:
    return json.dumps(generate_flat_object(100))


@pytest.fixture
def nested_text() -> str:
    # 10 sections x 200 rows x 6 nodes per row
    return json.dumps(generate_nested_records(10, 200))


@pytest.fixture
def nested_pair() -> tuple[dict[str, Any], dict[str, Any]]:
    left = generate_nested_records(10, 200)
    right = generate_nested_records(10, 200)
    right["section_3"][17]["name"] = "changed"
    del right["section_9"][199]
    return left, right


@pytest.fixture
def deep_chain() -> dict[str, Any]:
    return generate_deep_chain(2000)
