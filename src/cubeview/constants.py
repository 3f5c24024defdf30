"""Shared constants and paths for cubeview."""

import math
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
ASSETS_DIR = PROJECT_ROOT / "assets"
CONFIG_DIR = ASSETS_DIR / "config"
TEXTURES_DIR = ASSETS_DIR / "textures"

DEFAULT_SETTINGS_FILE = "demo.json"

# Camera defaults
DEFAULT_CAMERA_POS = (-30.0, 40.0, 30.0)
DEFAULT_CAMERA_TARGET = (0.0, 0.0, 0.0)
DEMO_CAMERA_POS = (0.0, 20.0, 40.0)
CAMERA_FOV = 45.0
CAMERA_NEAR = 0.1
CAMERA_FAR = 1000.0

# Orbit control sensitivity
CONTROLS_ROTATE_SPEED = 1.0
CONTROLS_ZOOM_SPEED = 1.2
CONTROLS_PAN_SPEED = 0.8
CONTROLS_DAMPING_FACTOR = 0.3
CONTROLS_KEYS = (65, 83, 68)  # A: rotate, S: zoom, D: pan

# Ground plane
GROUND_SIZE = 10000.0
GROUND_TEXTURE = "floor-wood.jpg"
GROUND_TEXTURE_REPEAT = (80.0, 80.0)
GROUND_OFFSET_Y = -10.0

# Default lighting
DEFAULT_LIGHT_POS = (-10.0, 30.0, 40.0)
SPOT_LIGHT_COLOR = 0xFFFFFF
SPOT_SHADOW_MAP_SIZE = 2048
SPOT_SHADOW_FOV = 15.0
SPOT_DECAY = 2.0
SPOT_PENUMBRA = 0.05
SPOT_ANGLE = math.pi / 3
AMBIENT_LIGHT_COLOR = 0x343434
DEMO_AMBIENT_COLOR = 0x444444

# Demo object
CUBE_SIZE = 10.0
CUBE_TEXTURE = "stone.jpg"
CUBE_METALNESS = 0.2
CUBE_ROUGHNESS = 0.07

# Per-frame rotation increments (radians) on x, y, z
ROTATION_STEP = (0.01, 0.02, 0.03)

# Frame timing
TARGET_FPS = 60
FRAME_INTERVAL_MS = 16
MAX_DELTA_TIME = 0.1  # Clamp dt to avoid large jumps

CLEAR_COLOR = (0.0, 0.0, 0.0, 1.0)
