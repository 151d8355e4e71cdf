"""Qt bridge forwarding classification changes to the editing surface.

The classification core reports toggles through plain callbacks. Widgets
connect to :class:`ClassificationNotifier` signals instead, which keeps the
core free of Qt.
"""

from __future__ import annotations

from typing import Callable, Optional

from PyQt5 import QtCore

from neuronlayout.core.classification import (
    ClassificationChange,
    NeuronClassification,
)


class ClassificationNotifier(QtCore.QObject):
    """Re-emit toggles of one :class:`NeuronClassification` as Qt signals.

    Signals:
        changed(index, category, added): Raw toggle outcome. ``category`` is
            the resulting classification as an int.
        probe_changed(index, probed): Probe state after the toggle.
        message(str): Text suitable for a status bar or log view.
    """

    changed = QtCore.pyqtSignal(int, int, bool)
    probe_changed = QtCore.pyqtSignal(int, bool)
    message = QtCore.pyqtSignal(str)

    def __init__(
        self,
        classification: Optional[NeuronClassification] = None,
        parent: Optional[QtCore.QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._classification: Optional[NeuronClassification] = None
        self._unsubscribe: Optional[Callable[[], None]] = None
        if classification is not None:
            self.attach(classification)

    @property
    def classification(self) -> Optional[NeuronClassification]:
        return self._classification

    def attach(self, classification: NeuronClassification) -> None:
        """Follow ``classification``, dropping any previously attached one."""
        self.detach()
        self._classification = classification
        self._unsubscribe = classification.subscribe(self._forward)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
        self._unsubscribe = None
        self._classification = None

    def _forward(self, change: ClassificationChange) -> None:
        self.changed.emit(change.index, int(change.result), change.added)
        self.probe_changed.emit(change.index, change.probed)
        self.message.emit(change.message)
