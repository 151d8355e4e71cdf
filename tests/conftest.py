"""
Test configuration and fixtures for the neuron layout classification core.
"""
import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("OMP_NUM_THREADS", "1")
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from neuronlayout.core.classification import (  # noqa: E402
    Category,
    NeuronClassification,
)


@pytest.fixture(autouse=True)
def _quiet_debug(monkeypatch):
    """Keep the debug echo off unless a test enables it."""
    monkeypatch.delenv("NEURONLAYOUT_DEBUG", raising=False)


@pytest.fixture
def empty_state():
    """Fresh classification with no memberships."""
    return NeuronClassification()


@pytest.fixture
def seeded_state():
    """Classification loaded from a layout, including one overlap at 4."""
    return NeuronClassification.from_pairs(
        [
            (3, Category.ACTIVE),
            (4, Category.ACTIVE),
            (4, Category.INHIBITORY),
            (5, Category.INHIBITORY),
            (4, Category.PROBED),
            (7, Category.PROBED),
        ]
    )


@pytest.fixture
def layout_yaml():
    """Seed description as produced by an external layout loader."""
    return """
    metadata:
      source: unit-test
    grid:
      rows: 3
      cols: 4
    active: [5, 1]
    inhibitory: [2, 5]
    probed: [11]
    """
