"""CubeView application entry point.

Wires together the scene, debug panel, renderer, frame loop and window.
"""

# Disable PyOpenGL's per-call error checking BEFORE any GL imports.
# macOS Metal translation layer leaves stale GL errors that cause
# PyOpenGL's automatic error checker to raise on every GL call.
import OpenGL
OpenGL.ERROR_CHECKING = False

import logging
import sys

from PySide6.QtWidgets import QApplication

from cubeview.core.clock import DeltaClock
from cubeview.core.events import EventBus
from cubeview.core.settings import load_settings
from cubeview.coordination.frame_loop import FrameLoop
from cubeview.coordination.scene_builder import build_demo_scene
from cubeview.loaders.texture_loader import TextureLoader
from cubeview.rendering.camera import init_camera
from cubeview.rendering.gl_widget import GLViewport, create_gl_format
from cubeview.rendering.orbit_controls import init_orbit_controls
from cubeview.ui.material_inspector import ControlsRegistry
from cubeview.ui.panel import Panel

logger = logging.getLogger(__name__)


def main():
    """Launch the CubeView demo."""
    # Enable logging so warnings are visible
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    settings = load_settings()

    # Set OpenGL format before creating QApplication
    from PySide6.QtGui import QSurfaceFormat
    QSurfaceFormat.setDefaultFormat(create_gl_format())

    app = QApplication(sys.argv)

    # Core systems
    event_bus = EventBus()
    panel = Panel()
    registry = ControlsRegistry(event_bus)

    demo = build_demo_scene(settings, panel, registry, TextureLoader())

    camera = init_camera(settings.camera_position)
    controls = init_orbit_controls(camera, settings.controls)

    gl_widget = GLViewport(demo.scene, camera, controls)
    frame_loop = FrameLoop(
        clock=DeltaClock(),
        controls=controls,
        render=gl_widget.render_scene,
        schedule=gl_widget.schedule_frame,
        target=demo.cube,
        rotation_step=settings.rotation_step,
        event_bus=event_bus,
    )
    gl_widget.set_frame_loop(frame_loop)

    # Main window (imported here to avoid circular imports with gl_widget)
    from cubeview.ui.main_window import MainWindow
    window = MainWindow(event_bus, panel, gl_widget, settings.window_size)
    window.show()

    logger.info("CubeView started.")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
