# tests/conftest.py
from __future__ import annotations

import os
import random
from datetime import date
from pathlib import Path

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

from signup_engine.config import Config  # noqa: E402
from signup_engine.volunteer import Person  # noqa: E402


# -----------------------------
# Global, deterministic seeding
# -----------------------------
@pytest.fixture(autouse=True, scope="session")
def _seed_everything() -> None:
    """
    Make tests deterministic across runs. If you need a different seed in a test,
    override locally.
    """
    seed = int(os.environ.get("PYTEST_SEED", "1234"))
    os.environ["PYTHONHASHSEED"] = str(seed)
    random.seed(seed)
    np.random.seed(seed)


# -----------------------------
# Path helpers
# -----------------------------
@pytest.fixture(scope="session")
def project_root() -> Path:
    """Repository root (where pyproject.toml lives)."""
    return Path(__file__).resolve().parents[1]


# -----------------------------
# Small signup fixtures
# -----------------------------
JUNE_1 = date(2016, 6, 1)
JUNE_2 = date(2016, 6, 2)
JUNE_3 = date(2016, 6, 3)


@pytest.fixture
def make_cfg(tmp_path):
    """Factory for a Config that writes under tmp_path."""

    def _make(capacity: int | None = 2, seed: int | None = 11) -> Config:
        return Config(CAPACITY=capacity, SEED=seed, OUTPUT_DIR=tmp_path / "out")

    return _make


@pytest.fixture
def mixed_people() -> list[Person]:
    """Six people over three dates with uneven demand (6/3 is the scarcest)."""
    return [
        Person("Ann", "ann@example.edu", [JUNE_1, JUNE_2]),
        Person("Bob", "bob@example.edu", [JUNE_1]),
        Person("Cat", "cat@example.edu", [JUNE_1, JUNE_3]),
        Person("Dan", "dan@example.edu", [JUNE_2]),
        Person("Eve", "eve@example.edu", [JUNE_1, JUNE_2]),
        Person("Fay", "fay@example.edu", [JUNE_1]),
    ]
