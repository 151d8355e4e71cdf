"""Core module for neuron layout classification.

Modules:
    classification: Category tags, toggle rules and membership queries
    layout_grid: Row-major cell addressing and dense category maps
"""

from .classification import (
    Category,
    ToggleCategory,
    ClassificationChange,
    NeuronClassification,
    category_label,
)
from .layout_grid import LayoutGrid

__all__ = [
    "Category",
    "ToggleCategory",
    "ClassificationChange",
    "NeuronClassification",
    "category_label",
    "LayoutGrid",
]
