"""Qt view of the debug :class:`Panel`: one collapsible section per folder."""

import logging
from typing import Any, Callable

from PySide6.QtWidgets import QScrollArea, QVBoxLayout, QWidget
from PySide6.QtCore import Qt

from cubeview.ui.panel import (
    BoolField,
    ChoiceField,
    ColorField,
    Field,
    Folder,
    NumberField,
    Panel,
)
from cubeview.ui.widgets.choice_row import ChoiceRow
from cubeview.ui.widgets.color_picker import ColorPicker
from cubeview.ui.widgets.folder_section import FolderSection
from cubeview.ui.widgets.slider_row import SliderRow
from cubeview.ui.widgets.text_row import TextRow
from cubeview.ui.widgets.toggle_row import ToggleRow

logger = logging.getLogger(__name__)


class InspectorPanel(QScrollArea):
    """Scrollable column of folder sections mirroring a :class:`Panel`.

    Folders added to the panel later show up automatically.  Every widget
    edit goes through :meth:`Field.set`; when the field rejects it, the
    widget snaps back to the field's current value.
    """

    def __init__(self, panel: Panel, parent=None) -> None:
        super().__init__(parent)
        self.panel = panel
        self.sections: dict[str, FolderSection] = {}

        self.setFixedWidth(330)
        self.setWidgetResizable(True)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        container = QWidget()
        self._layout = QVBoxLayout(container)
        self._layout.setContentsMargins(8, 8, 8, 8)
        self._layout.setSpacing(4)
        self._layout.addStretch()
        self.setWidget(container)

        for folder in panel.folders:
            self._add_folder(folder)
        panel.on_folder_added(self._add_folder)

    # ── Internal ──

    def _add_folder(self, folder: Folder) -> None:
        section = FolderSection(folder.name)
        for field in folder:
            section.add_row(self._build_row(field))
        # Keep the trailing stretch last
        self._layout.insertWidget(self._layout.count() - 1, section)
        self.sections[folder.name] = section

    def _build_row(self, field: Field) -> QWidget:
        if isinstance(field, BoolField):
            row = ToggleRow(field.name, bool(field.value))
            sync = lambda: row.set_checked(bool(field.value))
            row.toggled.connect(lambda v: self._apply(field, v, sync))
        elif isinstance(field, NumberField) and field.minimum is not None and field.maximum is not None:
            row = SliderRow(
                field.name, field.minimum, field.maximum, float(field.value),
                step=field.step, decimals=field.decimals,
            )
            sync = lambda: row.set_value(float(field.value))
            row.value_changed.connect(lambda v: self._apply(field, v, sync))
        elif isinstance(field, ChoiceField):
            row = ChoiceRow(field.name, list(field.choices), field.current_key)
            sync = lambda: row.set_current(field.current_key)
            row.choice_changed.connect(lambda key: self._apply(field, str(int(field.choices[key])), sync))
        elif isinstance(field, ColorField):
            row = ColorPicker(field.name, str(field.value))
            sync = lambda: row.set_color(str(field.value))
            row.color_changed.connect(lambda v: self._apply(field, v, sync))
        else:
            row = TextRow(field.name, str(field.value), read_only=field.read_only)
            sync = lambda: row.set_text(str(field.value))
            row.text_committed.connect(lambda v: self._apply(field, v, sync))

        return row

    @staticmethod
    def _apply(field: Field, value: Any, sync: Callable[[], None]) -> None:
        try:
            accepted = field.set(value)
        except ValueError as exc:
            logger.warning("Invalid value for '%s': %s", field.name, exc)
            accepted = False
        # Clamped or rejected edits show the stored value
        sync()
        if not accepted:
            logger.debug("Edit of '%s' rejected.", field.name)
