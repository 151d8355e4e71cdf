"""Neuron classification state for the layout editor.

Tracks which grid indices are active, inhibitory or probed and answers the
classification queries used by the renderer and the exporter. Toggling is the
only editing mutation; it keeps active and inhibitory exclusive by moving an
index from one set to the other. Overlapping active/inhibitory membership can
only enter through seeding (e.g. a loaded layout).

Example:
    >>> from neuronlayout.core.classification import (
    ...     NeuronClassification, ToggleCategory, Category)
    >>> state = NeuronClassification()
    >>> change = state.toggle(ToggleCategory.ACTIVE, 5)
    >>> state.classify(5) is Category.ACTIVE
    True
"""

from __future__ import annotations

import operator
import os
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Set,
    Tuple,
    Union,
)

import numpy as np

__all__ = [
    "Category",
    "ToggleCategory",
    "ClassificationChange",
    "NeuronClassification",
    "category_label",
]


class Category(IntEnum):
    """Classification tag of a grid index.

    ``OTHER`` and ``OVERLAP`` are derived and never stored.
    """

    OTHER = 0
    INHIBITORY = 1
    ACTIVE = 2
    PROBED = 3
    OVERLAP = 4


class ToggleCategory(IntEnum):
    """Categories accepted by :meth:`NeuronClassification.toggle`."""

    INHIBITORY = 1
    ACTIVE = 2
    PROBED = 3

    @property
    def category(self) -> Category:
        return Category(int(self))


_LABELS = {
    Category.OTHER: "other neuron",
    Category.INHIBITORY: "inhibitory neuron",
    Category.ACTIVE: "active neuron",
    Category.PROBED: "probed neuron",
    Category.OVERLAP: "overlapping inhibitory/active neuron",
}

Listener = Callable[["ClassificationChange"], None]
CategoryLike = Union[Category, ToggleCategory, int]


def category_label(tag: Any) -> str:
    """Return the display label for a category tag.

    Unknown tags map to ``"unknown neuron"`` instead of raising so stray
    input from the editing surface never breaks the UI.
    """
    try:
        return _LABELS[Category(_as_int(tag))]
    except (TypeError, ValueError):
        return "unknown neuron"


def _as_int(value: Any) -> int:
    """Coerce an integer or enum member, refusing floats and bools."""
    if isinstance(value, bool):
        raise TypeError(f"Expected an integer, got {value!r}")
    return operator.index(value)


def _as_toggle_category(category: CategoryLike) -> ToggleCategory:
    try:
        return ToggleCategory(_as_int(category))
    except (TypeError, ValueError):
        raise ValueError(
            f"Cannot toggle '{category_label(category)}' ({category!r}); "
            f"expected one of {[c.name for c in ToggleCategory]}"
        ) from None


@dataclass(frozen=True)
class ClassificationChange:
    """Result of a single toggle, delivered to listeners.

    Attributes:
        index: Grid index that was toggled.
        category: Category whose membership was flipped.
        added: True if the index joined ``category``, False if it left.
        result: Classification of the index after the toggle.
        probed: Probe state of the index after the toggle.
    """

    index: int
    category: ToggleCategory
    added: bool
    result: Category
    probed: bool

    @property
    def message(self) -> str:
        verb = "placed at" if self.added else "removed from"
        return f"{category_label(self.category)} {verb} index {self.index}"


class NeuronClassification:
    """Active, inhibitory and probed membership over grid indices.

    Attributes:
        debug: Echo every toggle to stdout. Also enabled by the
            ``NEURONLAYOUT_DEBUG`` environment variable.
    """

    def __init__(self, debug: bool = False) -> None:
        self._active: Set[int] = set()
        self._inhibitory: Set[int] = set()
        self._probed: Set[int] = set()
        self._listeners: List[Listener] = []
        env_flag = os.getenv("NEURONLAYOUT_DEBUG", "")
        env_debug = str(env_flag).strip().lower() in {"1", "true", "yes", "on"}
        self.debug = bool(debug) or env_debug

    # ------------------------------------------------------------------
    # Construction from an external layout
    # ------------------------------------------------------------------
    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Tuple[int, CategoryLike]],
        debug: bool = False,
    ) -> "NeuronClassification":
        state = cls(debug=debug)
        state.seed(pairs)
        return state

    @classmethod
    def from_sets(
        cls,
        active: Iterable[int] = (),
        inhibitory: Iterable[int] = (),
        probed: Iterable[int] = (),
        debug: bool = False,
    ) -> "NeuronClassification":
        state = cls(debug=debug)
        state._active.update(_as_int(i) for i in active)
        state._inhibitory.update(_as_int(i) for i in inhibitory)
        state._probed.update(_as_int(i) for i in probed)
        return state

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "NeuronClassification":
        """Create from the mapping produced by :meth:`to_dict`."""
        return cls.from_sets(
            active=payload.get("active", []),
            inhibitory=payload.get("inhibitory", []),
            probed=payload.get("probed", []),
        )

    def seed(self, pairs: Iterable[Tuple[int, CategoryLike]]) -> None:
        """Add ``(index, category)`` pairs directly, bypassing the toggle rule.

        An ``OVERLAP`` pair seeds both active and inhibitory. ``OTHER`` pairs
        carry no membership and are skipped. No notifications are sent.

        All pairs are checked before any is applied, so a bad pair leaves
        the state untouched.

        Raises:
            ValueError: If a category tag is not a known :class:`Category`.
            TypeError: If an index is not an integer.
        """
        active: Set[int] = set()
        inhibitory: Set[int] = set()
        probed: Set[int] = set()
        for index, tag in pairs:
            try:
                category = Category(_as_int(tag))
            except (TypeError, ValueError):
                raise ValueError(
                    f"Unknown category tag {tag!r} for index {index}"
                ) from None
            index = _as_int(index)
            if category in (Category.ACTIVE, Category.OVERLAP):
                active.add(index)
            if category in (Category.INHIBITORY, Category.OVERLAP):
                inhibitory.add(index)
            if category is Category.PROBED:
                probed.add(index)
        self._active.update(active)
        self._inhibitory.update(inhibitory)
        self._probed.update(probed)

    def clear(self) -> None:
        self._active.clear()
        self._inhibitory.clear()
        self._probed.clear()

    def copy(self) -> "NeuronClassification":
        """Return an independent copy of the memberships (listeners not copied)."""
        return type(self).from_sets(
            self._active, self._inhibitory, self._probed, debug=self.debug
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def classify(self, index: int) -> Category:
        in_active = index in self._active
        in_inhibitory = index in self._inhibitory
        if in_active and in_inhibitory:
            return Category.OVERLAP
        if in_active:
            return Category.ACTIVE
        if in_inhibitory:
            return Category.INHIBITORY
        return Category.OTHER

    def is_probed(self, index: int) -> bool:
        return index in self._probed

    @property
    def active(self) -> Tuple[int, ...]:
        return tuple(sorted(self._active))

    @property
    def inhibitory(self) -> Tuple[int, ...]:
        return tuple(sorted(self._inhibitory))

    @property
    def probed(self) -> Tuple[int, ...]:
        return tuple(sorted(self._probed))

    @property
    def overlapping(self) -> Tuple[int, ...]:
        return tuple(sorted(self._active & self._inhibitory))

    def members(self, category: CategoryLike) -> Tuple[int, ...]:
        """Return the ascending members of a stored or derived category.

        Raises:
            ValueError: For ``OTHER`` (unbounded) or an unknown tag.
        """
        try:
            category = Category(_as_int(category))
        except (TypeError, ValueError):
            raise ValueError(f"Unknown category tag {category!r}") from None
        if category is Category.OTHER:
            raise ValueError("'other neuron' is the complement of all sets")
        if category is Category.OVERLAP:
            return self.overlapping
        return tuple(sorted(self._store(category)))

    def members_array(self, category: CategoryLike) -> np.ndarray:
        """Ascending members of ``category`` as an ``int64`` array."""
        return np.asarray(self.members(category), dtype=np.int64)

    def counts(self) -> Dict[Category, int]:
        return {
            Category.ACTIVE: len(self._active),
            Category.INHIBITORY: len(self._inhibitory),
            Category.PROBED: len(self._probed),
            Category.OVERLAP: len(self._active & self._inhibitory),
        }

    def is_empty(self) -> bool:
        return not (self._active or self._inhibitory or self._probed)

    def to_dict(self) -> Dict[str, List[int]]:
        return {
            "active": list(self.active),
            "inhibitory": list(self.inhibitory),
            "probed": list(self.probed),
        }

    def __contains__(self, index: object) -> bool:
        return (
            index in self._active
            or index in self._inhibitory
            or index in self._probed
        )

    def __len__(self) -> int:
        return len(self._active | self._inhibitory | self._probed)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NeuronClassification):
            return NotImplemented
        return (
            self._active == other._active
            and self._inhibitory == other._inhibitory
            and self._probed == other._probed
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"NeuronClassification(active={len(self._active)}, "
            f"inhibitory={len(self._inhibitory)}, "
            f"probed={len(self._probed)})"
        )

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------
    def toggle(self, category: CategoryLike, index: int) -> ClassificationChange:
        """Flip membership of ``index`` in ``category``.

        Adding an index to active removes it from inhibitory and vice versa.
        Removing leaves the other set alone. Probed membership is independent.

        Raises:
            ValueError: If ``category`` is not one of :class:`ToggleCategory`.
            TypeError: If ``index`` is not an integer.
        """
        mode = _as_toggle_category(category)
        index = _as_int(index)
        store = self._store(mode.category)
        added = index not in store
        if added:
            store.add(index)
            if mode is ToggleCategory.ACTIVE:
                self._inhibitory.discard(index)
            elif mode is ToggleCategory.INHIBITORY:
                self._active.discard(index)
        else:
            store.discard(index)

        change = ClassificationChange(
            index=index,
            category=mode,
            added=added,
            result=self.classify(index),
            probed=self.is_probed(index),
        )
        self._debug(change.message, index=index, result=change.result.name)
        for listener in list(self._listeners):
            listener(change)
        return change

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for toggle notifications.

        Returns:
            Callable that removes the listener again.
        """
        if not callable(listener):
            raise TypeError(f"Listener must be callable, got {type(listener)!r}")
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _store(self, category: Category) -> Set[int]:
        if category is Category.ACTIVE:
            return self._active
        if category is Category.INHIBITORY:
            return self._inhibitory
        if category is Category.PROBED:
            return self._probed
        raise ValueError(f"'{category_label(category)}' is not stored")

    def _debug(self, message: str, **fields: object) -> None:
        if not self.debug:
            return
        timestamp = datetime.now().strftime("%H:%M:%S")
        details = " ".join(f"{key}={value}" for key, value in fields.items())
        if details:
            print(f"[NLEdit {timestamp}] {message} | {details}", flush=True)
        else:
            print(f"[NLEdit {timestamp}] {message}", flush=True)
