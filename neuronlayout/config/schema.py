"""Seed configuration for a neuron layout.

A :class:`LayoutConfig` is what an external layout loader hands to the editor:
the grid dimensions plus the indices already assigned to each category. It
converts to and from plain dicts and YAML strings so the loader and the
exporter can share one format, and :meth:`LayoutConfig.build` turns it into a
:class:`~neuronlayout.core.classification.NeuronClassification`.

Example:
    >>> from neuronlayout.config.schema import LayoutConfig
    >>> config = LayoutConfig.from_yaml(yaml_str)
    >>> state = config.build()
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from neuronlayout.config.yaml_utils import load_layout_yaml
from neuronlayout.core.classification import NeuronClassification
from neuronlayout.core.layout_grid import LayoutGrid


def _index_list(label: str, values: Any) -> List[int]:
    if values is None:
        return []
    if not isinstance(values, (list, tuple, set, frozenset)):
        raise ValueError(f"'{label}' must be a list of indices, got {type(values).__name__}")
    indices = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"'{label}' contains non-integer index {value!r}")
        if value < 0:
            raise ValueError(f"'{label}' contains negative index {value}")
        indices.append(value)
    return sorted(set(indices))


@dataclass
class LayoutGridConfig:
    """Editor grid dimensions.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
    """
    rows: int = 10
    cols: int = 10

    def to_dict(self) -> Dict[str, Any]:
        return {"rows": self.rows, "cols": self.cols}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LayoutGridConfig:
        kwargs = {}
        for field_name in cls.__dataclass_fields__:
            if field_name in data:
                kwargs[field_name] = int(data[field_name])
        # Accept the editor's [width, height] size shorthand
        if "size" in data and isinstance(data["size"], list):
            kwargs["cols"], kwargs["rows"] = (int(v) for v in data["size"])
        return cls(**kwargs)

    def to_grid(self) -> LayoutGrid:
        return LayoutGrid(self.rows, self.cols)


@dataclass
class LayoutConfig:
    """Seed description of a neuron layout.

    Attributes:
        grid: Editor grid dimensions.
        active: Indices seeded as active.
        inhibitory: Indices seeded as inhibitory.
        probed: Indices seeded as probed.
        allow_overlap: Whether an index may be seeded both active and
            inhibitory. Interactive toggling never produces this state.
        metadata: Free-form metadata (source, version, ...).
    """
    grid: LayoutGridConfig = field(default_factory=LayoutGridConfig)
    active: List[int] = field(default_factory=list)
    inhibitory: List[int] = field(default_factory=list)
    probed: List[int] = field(default_factory=list)
    allow_overlap: bool = True
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.active = _index_list("active", self.active)
        self.inhibitory = _index_list("inhibitory", self.inhibitory)
        self.probed = _index_list("probed", self.probed)
        if not isinstance(self.allow_overlap, bool):
            raise ValueError(
                f"'allow_overlap' must be true or false, got {self.allow_overlap!r}"
            )
        if not self.allow_overlap:
            overlap = sorted(set(self.active) & set(self.inhibitory))
            if overlap:
                raise ValueError(
                    f"Indices {overlap} are both active and inhibitory "
                    "but allow_overlap is False"
                )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain dict for YAML serialization."""
        return {
            "metadata": self.metadata,
            "grid": self.grid.to_dict(),
            "active": list(self.active),
            "inhibitory": list(self.inhibitory),
            "probed": list(self.probed),
            "allow_overlap": self.allow_overlap,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LayoutConfig:
        """Create from dict (e.g., from YAML).

        Raises:
            ValueError: If an index list is malformed or overlap is disallowed
                but present.
        """
        return cls(
            grid=LayoutGridConfig.from_dict(data.get("grid") or {}),
            active=data.get("active"),
            inhibitory=data.get("inhibitory"),
            probed=data.get("probed"),
            allow_overlap=data.get("allow_overlap", True),
            metadata=data.get("metadata") or {},
        )

    def to_yaml(self) -> str:
        return yaml.dump(
            self.to_dict(),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

    @classmethod
    def from_yaml(cls, yaml_str: str) -> LayoutConfig:
        """Load from YAML string, rejecting duplicate keys."""
        return cls.from_dict(load_layout_yaml(yaml_str))

    @classmethod
    def from_classification(
        cls,
        classification: NeuronClassification,
        grid: LayoutGridConfig,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> LayoutConfig:
        """Capture the current memberships of ``classification``."""
        return cls(
            grid=grid,
            active=list(classification.active),
            inhibitory=list(classification.inhibitory),
            probed=list(classification.probed),
            metadata=metadata or {},
        )

    def build(self, debug: bool = False) -> NeuronClassification:
        """Seed a new :class:`NeuronClassification` from this config.

        Indices outside the grid are seeded anyway; a ``UserWarning`` names
        them.
        """
        grid = self.grid.to_grid()
        outside = sorted(
            i
            for i in set(self.active) | set(self.inhibitory) | set(self.probed)
            if not grid.contains(i)
        )
        if outside:
            warnings.warn(
                f"Indices {outside} lie outside the {grid.cols}x{grid.rows} grid",
                UserWarning,
            )
        return NeuronClassification.from_sets(
            active=self.active,
            inhibitory=self.inhibitory,
            probed=self.probed,
            debug=debug,
        )
