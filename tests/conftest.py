"""Shared pytest configuration for the project test suite."""
from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest


# Ensure the repository root (which holds the ``services``/``utils`` packages) is importable.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def june_week_totals():
    """Spend for Monday 2024-06-03 through Wednesday 2024-06-05."""
    return {
        '2024-06-03': 100.0,
        '2024-06-04': 200.0,
        '2024-06-05': 50.0,
    }


@pytest.fixture
def wednesday():
    return date(2024, 6, 5)
