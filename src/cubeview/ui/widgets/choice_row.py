"""Label + QComboBox for enumerated values."""

from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QComboBox, QSizePolicy
from PySide6.QtCore import Qt, Signal


class ChoiceRow(QWidget):
    """A row with a label and a combo box of named choices.

    Emits the *name* of the chosen entry.
    """

    choice_changed = Signal(str)

    def __init__(
        self,
        label: str,
        choices: list[str],
        current: str | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 1, 0, 1)
        layout.setSpacing(6)

        self._label = QLabel(label)
        self._label.setObjectName("sliderLabel")
        self._label.setFixedWidth(110)
        self._label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        layout.addWidget(self._label)

        self._combo = QComboBox()
        self._combo.addItems(choices)
        self._combo.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self._combo.currentTextChanged.connect(self._on_changed)
        layout.addWidget(self._combo)

        self.set_current(current)

    # ── Public API ──

    def set_current(self, name: str | None) -> None:
        """Select *name* without emitting; ``None`` clears the selection."""
        self._combo.blockSignals(True)
        self._combo.setCurrentIndex(-1 if name is None else self._combo.findText(name))
        self._combo.blockSignals(False)

    @property
    def current(self) -> str | None:
        text = self._combo.currentText()
        return text or None

    # ── Internal ──

    def _on_changed(self, text: str) -> None:
        if text:
            self.choice_changed.emit(text)
