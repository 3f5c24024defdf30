"""Label + QLineEdit row."""

from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QLineEdit
from PySide6.QtCore import Qt, Signal


class TextRow(QWidget):
    """A row with a label and a single-line text box.

    Emits ``text_committed`` when editing finishes.  Read-only rows just
    display their value.
    """

    text_committed = Signal(str)

    def __init__(
        self,
        label: str,
        text: str = "",
        read_only: bool = False,
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

        self._edit = QLineEdit(text)
        self._edit.setReadOnly(read_only)
        self._edit.editingFinished.connect(self._on_committed)
        layout.addWidget(self._edit)

    # ── Public API ──

    def set_text(self, text: str) -> None:
        self._edit.setText(text)

    @property
    def text(self) -> str:
        return self._edit.text()

    # ── Internal ──

    def _on_committed(self) -> None:
        if not self._edit.isReadOnly():
            self.text_committed.emit(self._edit.text())
