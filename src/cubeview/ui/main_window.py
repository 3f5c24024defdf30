"""Main window: GL viewport with the material inspector docked on the right."""

from PySide6.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QStatusBar, QLabel, QSizePolicy
from PySide6.QtCore import QTimer
from PySide6.QtGui import QFont

from cubeview.core.events import EventBus, EventType
from cubeview.rendering.gl_widget import GLViewport
from cubeview.ui.inspector_panel import InspectorPanel
from cubeview.ui.panel import Panel
from cubeview.ui.style import DARK_THEME


class MainWindow(QMainWindow):
    """Main application window.

    Layout: [GLViewport | InspectorPanel]
    with a status bar showing the last material edit and the frame rate.
    """

    def __init__(
        self,
        event_bus: EventBus,
        panel: Panel,
        gl_widget: GLViewport,
        size: tuple[int, int] = (1280, 800),
        parent=None,
    ):
        super().__init__(parent)
        self.event_bus = event_bus
        self.gl_widget = gl_widget

        self.setWindowTitle("CubeView - Material Inspector")
        self.resize(*size)
        self.setStyleSheet(DARK_THEME)

        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QHBoxLayout(central)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # GL viewport (stretches to fill)
        gl_widget.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        main_layout.addWidget(gl_widget)

        self.inspector = InspectorPanel(panel)
        main_layout.addWidget(self.inspector)

        # Status bar
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        mono = QFont("monospace", 9)
        self.fps_label = QLabel("FPS: 0")
        self.fps_label.setFont(mono)
        self.status_bar.addPermanentWidget(self.fps_label)

        event_bus.subscribe(EventType.MATERIAL_EDITED, self._on_material_edited)
        event_bus.subscribe(EventType.FRAME_RENDERED, self._on_frame_rendered)

        # Status update timer (2Hz)
        self._frame_count = 0
        self._frame_count_at_last_update = 0
        self._status_timer = QTimer(self)
        self._status_timer.timeout.connect(self._update_status)
        self._status_timer.start(500)

    def _on_material_edited(self, material=None, field: str = "", value=None, **kw):
        self.status_bar.showMessage(f"{material.type}.{field} = {value}", 3000)

    def _on_frame_rendered(self, frame: int = 0, **kw):
        self._frame_count = frame

    def _update_status(self):
        frames = self._frame_count - self._frame_count_at_last_update
        self._frame_count_at_last_update = self._frame_count
        self.fps_label.setText(f"FPS: {frames * 2}")  # Timer fires at 2Hz

    def closeEvent(self, event):
        self._status_timer.stop()
        self.event_bus.unsubscribe(EventType.MATERIAL_EDITED, self._on_material_edited)
        self.event_bus.unsubscribe(EventType.FRAME_RENDERED, self._on_frame_rendered)
        self.gl_widget.cleanup()
        super().closeEvent(event)
