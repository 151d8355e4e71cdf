"""neuronlayout: neuron classification state for a 2D layout editor.

The user paints grid cells as active, inhibitory or probed; an exporter later
turns the layout into a simulation configuration. This package holds the
state in between and the rules for editing it.

Key Components:
    - core: Category tags, NeuronClassification, LayoutGrid
    - config: Layout seed schema (dict/YAML)
    - gui: PyQt5 signal bridge for the editing surface

Example:
    >>> from neuronlayout import NeuronClassification, ToggleCategory
    >>> state = NeuronClassification()
    >>> state.toggle(ToggleCategory.INHIBITORY, 12).message
    'inhibitory neuron placed at index 12'
"""

__version__ = "0.1.0"
__author__ = "neuronlayout Contributors"
__license__ = "MIT"

from neuronlayout.core.classification import (
    Category,
    ToggleCategory,
    ClassificationChange,
    NeuronClassification,
    category_label,
)
from neuronlayout.core.layout_grid import LayoutGrid
from neuronlayout.config.schema import LayoutConfig, LayoutGridConfig

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "Category",
    "ToggleCategory",
    "ClassificationChange",
    "NeuronClassification",
    "category_label",
    "LayoutGrid",
    "LayoutConfig",
    "LayoutGridConfig",
]
