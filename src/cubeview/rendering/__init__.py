"""Rendering subsystem -- OpenGL 3.3 core profile with PySide6 integration."""
