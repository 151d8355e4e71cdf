"""Row-major addressing of editor grid cells.

The editor numbers cells ``index = y * cols + x``. :class:`LayoutGrid` maps
between indices and ``(x, y)`` positions and rasterises a
:class:`~neuronlayout.core.classification.NeuronClassification` into dense
tensors for the renderer.
"""

from __future__ import annotations

from typing import Iterator, Tuple

import torch

from .classification import Category, NeuronClassification


class LayoutGrid:
    """Rectangular editor grid of ``rows`` x ``cols`` cells.

    Attributes:
        rows: Number of rows (y extent).
        cols: Number of columns (x extent).
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.rows = int(rows)
        self.cols = int(cols)

    @property
    def size(self) -> int:
        return self.rows * self.cols

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def contains(self, index: int) -> bool:
        return 0 <= index < self.size

    def index_of(self, x: int, y: int) -> int:
        """Return the cell index at column ``x``, row ``y``.

        Raises:
            IndexError: If the position lies outside the grid.
        """
        if not (0 <= x < self.cols and 0 <= y < self.rows):
            raise IndexError(
                f"Position ({x}, {y}) outside {self.cols}x{self.rows} grid"
            )
        return y * self.cols + x

    def position_of(self, index: int) -> Tuple[int, int]:
        """Return ``(x, y)`` for a cell index.

        Raises:
            IndexError: If ``index`` is not a cell of this grid.
        """
        if not self.contains(index):
            raise IndexError(f"Index {index} outside grid of {self.size} cells")
        y, x = divmod(index, self.cols)
        return x, y

    def indices(self) -> Iterator[int]:
        return iter(range(self.size))

    def category_map(
        self,
        classification: NeuronClassification,
        device: torch.device | str = "cpu",
    ) -> torch.Tensor:
        """Rasterise classifications into a ``[rows, cols]`` long tensor.

        Cells hold :class:`Category` values; indices outside the grid are
        ignored.
        """
        flat = torch.full((self.size,), int(Category.OTHER), dtype=torch.long)
        for category in (Category.ACTIVE, Category.INHIBITORY, Category.OVERLAP):
            members = self._inside(classification.members(category))
            if members:
                flat[torch.tensor(members, dtype=torch.long)] = int(category)
        return flat.view(self.rows, self.cols).to(device)

    def probe_mask(
        self,
        classification: NeuronClassification,
        device: torch.device | str = "cpu",
    ) -> torch.Tensor:
        """Boolean ``[rows, cols]`` tensor marking probed cells."""
        flat = torch.zeros(self.size, dtype=torch.bool)
        members = self._inside(classification.probed)
        if members:
            flat[torch.tensor(members, dtype=torch.long)] = True
        return flat.view(self.rows, self.cols).to(device)

    def _inside(self, members: Tuple[int, ...]) -> list:
        return [i for i in members if self.contains(i)]

    def __repr__(self) -> str:
        return f"LayoutGrid(rows={self.rows}, cols={self.cols})"
