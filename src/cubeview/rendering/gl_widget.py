"""PySide6 QOpenGLWidget subclass bridging Qt and OpenGL rendering."""

import logging
import traceback
from typing import Callable, Optional

from PySide6.QtCore import QTimer, Qt
from PySide6.QtGui import QKeyEvent, QMouseEvent, QSurfaceFormat, QWheelEvent
from PySide6.QtOpenGLWidgets import QOpenGLWidget

from cubeview.constants import FRAME_INTERVAL_MS
from cubeview.core.scene_graph import Scene
from cubeview.coordination.frame_loop import FrameLoop
from cubeview.rendering.camera import Camera
from cubeview.rendering.orbit_controls import OrbitControls
from cubeview.rendering.renderer import GLRenderer

logger = logging.getLogger(__name__)


def create_gl_format() -> QSurfaceFormat:
    """Create an OpenGL 3.3 core-profile surface format with multisampling."""
    fmt = QSurfaceFormat()
    fmt.setVersion(3, 3)
    fmt.setProfile(QSurfaceFormat.OpenGLContextProfile.CoreProfile)
    fmt.setSamples(4)
    fmt.setDepthBufferSize(24)
    fmt.setSwapBehavior(QSurfaceFormat.SwapBehavior.DoubleBuffer)
    return fmt


class GLViewport(QOpenGLWidget):
    """OpenGL viewport widget that renders a Scene using the GLRenderer.

    The frame loop is attached with :meth:`set_frame_loop`; its ``schedule``
    hook is :meth:`schedule_frame`, which defers the next tick to the first
    repaint after the widget's frame timer fires.  The loop starts once the
    GL context exists.

    Parameters
    ----------
    scene : Scene
        Scene to draw.
    camera : Camera
        Viewing camera.
    controls : OrbitControls
        Controls fed from mouse, wheel and key events.
    parent : QWidget, optional
        Parent widget.
    """

    def __init__(
        self,
        scene: Scene,
        camera: Camera,
        controls: OrbitControls,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self.setFormat(create_gl_format())

        self.renderer: GLRenderer = GLRenderer()
        self.scene = scene
        self.camera = camera
        self.orbit_controls = controls

        self.frame_loop: Optional[FrameLoop] = None
        self._pending_frame: Optional[Callable[[], None]] = None
        self._frame_due: bool = False

        # Single frame timer; at most one frame is ever waiting on it
        self._frame_timer = QTimer(self)
        self._frame_timer.setSingleShot(True)
        self._frame_timer.setInterval(FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self._on_frame_timer)

        # Accept focus for keyboard events
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    # ------------------------------------------------------------------
    # Frame loop hooks
    # ------------------------------------------------------------------

    def set_frame_loop(self, frame_loop: FrameLoop) -> None:
        self.frame_loop = frame_loop

    def schedule_frame(self, callback: Callable[[], None]) -> None:
        """Run *callback* on the first repaint after the frame timer fires."""
        self._pending_frame = callback
        if not self._frame_timer.isActive():
            self._frame_timer.start()

    def render_scene(self) -> None:
        self.renderer.render(self.scene, self.camera)

    # ------------------------------------------------------------------
    # QOpenGLWidget overrides
    # ------------------------------------------------------------------

    def initializeGL(self) -> None:
        """Called once when the GL context is ready."""
        try:
            logger.info("GLViewport: initialising OpenGL.")
            self.renderer.init_gl()
            if self.frame_loop is not None:
                self.frame_loop.start()
        except Exception:
            logger.error("initializeGL failed:\n%s", traceback.format_exc())

    def resizeGL(self, w: int, h: int) -> None:
        """Called on every resize.

        Qt passes logical dimensions; we scale by devicePixelRatio for
        the actual framebuffer size (needed on HiDPI displays).
        """
        dpr = self.devicePixelRatio()
        self.camera.set_aspect(w, h)
        self.renderer.resize(int(w * dpr), int(h * dpr))

    def paintGL(self) -> None:
        """Run the pending frame if its timer fired, otherwise just redraw.

        Repaints Qt issues on its own (resize, expose) never advance the loop.
        """
        try:
            callback = self._pending_frame
            if self._frame_due and callback is not None:
                self._frame_due = False
                self._pending_frame = None
                callback()
            else:
                self.render_scene()
        except Exception:
            logger.error("paintGL failed:\n%s", traceback.format_exc())

    # ------------------------------------------------------------------
    # Input events -> orbit controls
    # ------------------------------------------------------------------

    def mousePressEvent(self, event: QMouseEvent) -> None:
        button = self._qt_button_to_int(event.button())
        pos = event.position()
        if button is not None:
            self.orbit_controls.on_mouse_press(pos.x(), pos.y(), button)
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        self.orbit_controls.on_mouse_move(pos.x(), pos.y())
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        self.orbit_controls.on_mouse_release()
        event.accept()

    def wheelEvent(self, event: QWheelEvent) -> None:
        # angleDelta().y() is typically +/-120 per notch
        delta = event.angleDelta().y() / 120.0
        self.orbit_controls.on_scroll(delta)
        event.accept()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        # Qt.Key_A..Key_Z share their ASCII codes
        self.orbit_controls.on_key_press(event.key())
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent) -> None:
        self.orbit_controls.on_key_release(event.key())
        super().keyReleaseEvent(event)

    # ------------------------------------------------------------------
    # Cleanup
    # ------------------------------------------------------------------

    def cleanup(self) -> None:
        """Explicitly release GL resources. Call before the widget is destroyed."""
        self._frame_timer.stop()
        self._pending_frame = None
        self._frame_due = False
        self.makeCurrent()
        self.renderer.destroy()
        self.doneCurrent()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _on_frame_timer(self) -> None:
        self._frame_due = True
        self.update()

    @staticmethod
    def _qt_button_to_int(qt_button) -> int | None:
        """Map Qt mouse button to orbit-control button constant."""
        if qt_button == Qt.MouseButton.LeftButton:
            return OrbitControls.BUTTON_LEFT
        if qt_button == Qt.MouseButton.MiddleButton:
            return OrbitControls.BUTTON_MIDDLE
        if qt_button == Qt.MouseButton.RightButton:
            return OrbitControls.BUTTON_RIGHT
        return None
