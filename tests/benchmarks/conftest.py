"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers by container count: ~100, ~2,500 (LARGE) and ~6,000 (VERY_LARGE
under the default thresholds).
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_records(num_records: int, tags_per_record: int = 3) -> dict[str, Any]:
    """Generate an API-style payload: a list of records with nested objects.

    Each record contributes 3 containers (record, ``address``, ``tags``).
    """
    return {
        "meta": {"count": num_records, "source": "benchmark"},
        "records": [
            {
                "id": i,
                "name": f"user_{i}",
                "active": i % 2 == 0,
                "score": i * 0.5,
                "address": {"city": f"city_{i % 17}", "zip": f"{10000 + i}"},
                "tags": [f"tag_{i}_{j}" for j in range(tags_per_record)],
            }
            for i in range(num_records)
        ],
    }


def _modified_copy(document: dict[str, Any]) -> dict[str, Any]:
    """Copy ``document`` with every tenth record's score changed and one record dropped."""
    records = [
        {**record, "score": record["score"] + 1} if index % 10 == 0 else record
        for index, record in enumerate(document["records"][:-1])
    ]
    return {"meta": document["meta"], "records": records}


# --- Fixtures for each size tier ---


@pytest.fixture
def doc_small() -> dict[str, Any]:
    """~100 containers."""
    return generate_records(33)


@pytest.fixture
def doc_large() -> dict[str, Any]:
    """~2,500 containers (LARGE)."""
    return generate_records(830)


@pytest.fixture
def doc_very_large() -> dict[str, Any]:
    """~6,000 containers (VERY_LARGE)."""
    return generate_records(2000)


@pytest.fixture
def pair_large() -> tuple[dict[str, Any], dict[str, Any]]:
    left = generate_records(830)
    return left, _modified_copy(left)
