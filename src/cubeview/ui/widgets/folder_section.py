"""Collapsible titled group of panel rows."""

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel


class FolderSection(QWidget):
    """A collapsible group with a clickable header.

    Layout::

        > Folder Title        (collapsed)
        v Folder Title        (expanded)
            row
            row
            ...
    """

    def __init__(self, title: str, expanded: bool = True, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._title = title

        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)

        header = QWidget()
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(0, 2, 0, 2)
        header_layout.setSpacing(4)

        self._arrow_btn = QPushButton()
        self._arrow_btn.setFixedSize(16, 16)
        self._arrow_btn.setFlat(True)
        self._arrow_btn.setStyleSheet(
            "QPushButton { color: #8899aa; border: none; font-size: 10px; padding: 0; }"
        )
        self._arrow_btn.clicked.connect(self._toggle_expanded)
        header_layout.addWidget(self._arrow_btn)

        self._title_label = QLabel(title)
        self._title_label.setObjectName("sectionLabel")
        header_layout.addWidget(self._title_label)
        header_layout.addStretch()

        root_layout.addWidget(header)

        self._content = QWidget()
        self._content_layout = QVBoxLayout(self._content)
        self._content_layout.setContentsMargins(8, 0, 0, 4)
        self._content_layout.setSpacing(1)
        root_layout.addWidget(self._content)

        if expanded:
            self.expand()
        else:
            self.collapse()

    # ── Public API ──

    @property
    def title(self) -> str:
        return self._title

    def add_row(self, row: QWidget) -> None:
        self._content_layout.addWidget(row)

    def expand(self) -> None:
        self._content.setVisible(True)
        self._arrow_btn.setText("▼")

    def collapse(self) -> None:
        self._content.setVisible(False)
        self._arrow_btn.setText("▶")

    @property
    def is_expanded(self) -> bool:
        return not self._content.isHidden()

    # ── Internal ──

    def _toggle_expanded(self) -> None:
        if self.is_expanded:
            self.collapse()
        else:
            self.expand()
