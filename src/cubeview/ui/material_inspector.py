"""Register a material's properties as live-editable panel fields.

Two entry points mirror the two folders the demo shows per object:
:func:`add_basic_material_settings` (properties every material has) and
:func:`add_specific_material_settings` (properties of one material kind).

Every call binds the material into a fresh :class:`MaterialControls`
context, which holds the ``#rrggbb`` strings the color widgets edit.
Color edits are decoded back into the material's :class:`Color`; a string
that does not decode is rejected and the previous color is kept.
"""

import logging
from typing import Any, Callable, Optional

from cubeview.core.color import ColorStyleError
from cubeview.core.events import EventBus, EventType
from cubeview.core.material import Material, MaterialKind, Side, VertexColors
from cubeview.ui.panel import Folder, Panel

logger = logging.getLogger(__name__)

SIDE_CHOICES = {
    "FrontSide": Side.FRONT,
    "BackSide": Side.BACK,
    "BothSides": Side.DOUBLE,
}

VERTEX_COLOR_CHOICES = {
    "NoColors": VertexColors.NONE,
    "FaceColors": VertexColors.FACE,
    "VertexColors": VertexColors.VERTEX,
}


class MaterialControls:
    """Binding context for one inspected material.

    ``values`` holds scratch color strings keyed ``"color"``,
    ``"specular"`` and ``"emissive"``.
    """

    def __init__(self, material: Material, event_bus: Optional[EventBus] = None) -> None:
        self.material = material
        self.values: dict[str, str] = {}
        self._event_bus = event_bus

    def notify(self, field: str, value: Any) -> None:
        """Announce an applied edit."""
        logger.debug("%s.%s = %r", self.material.type, field, value)
        if self._event_bus is not None:
            self._event_bus.publish(
                EventType.MATERIAL_EDITED, material=self.material, field=field, value=value,
            )


class ControlsRegistry:
    """Hands out one :class:`MaterialControls` per bind call."""

    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        self.event_bus = event_bus
        self.bindings: list[MaterialControls] = []

    def bind(self, material: Material) -> MaterialControls:
        controls = MaterialControls(material, self.event_bus)
        self.bindings.append(controls)
        return controls

    def controls_for(self, material: Material) -> list[MaterialControls]:
        return [c for c in self.bindings if c.material is material]


# ── Setter commands ──────────────────────────────────────────────────


class SetAttribute:
    """Assign a parsed value to a material attribute.

    *parse* converts the transported widget value; *invalidate* marks the
    material as needing its derived render state rebuilt.
    """

    def __init__(
        self,
        material: Material,
        attr: str,
        parse: Optional[Callable[[Any], Any]] = None,
        invalidate: bool = False,
    ) -> None:
        self.material = material
        self.attr = attr
        self.parse = parse
        self.invalidate = invalidate

    def __call__(self, value: Any) -> None:
        if self.parse is not None:
            value = self.parse(value)
        setattr(self.material, self.attr, value)
        if self.invalidate:
            self.material.needs_update = True


class SetColorStyle:
    """Decode a ``#rrggbb`` string into a material color."""

    def __init__(self, controls: MaterialControls, key: str) -> None:
        self.controls = controls
        self.key = key

    def __call__(self, style: str) -> bool:
        color = getattr(self.controls.material, self.key)
        try:
            color.set_style(style)
        except ColorStyleError as exc:
            logger.warning("Rejected %s edit on %s: %s", self.key, self.controls.material.type, exc)
            return False
        self.controls.values[self.key] = color.get_style()
        return True


def _getter(obj: Any, attr: str) -> Callable[[], Any]:
    return lambda: getattr(obj, attr)


def _parse_side(raw: Any) -> Side:
    return Side(int(raw))


def _parse_vertex_colors(raw: Any) -> VertexColors:
    return VertexColors(int(raw))


def _announce(folder: Folder, controls: MaterialControls) -> None:
    for field in folder:
        if not field.read_only:
            field.on_change(lambda value, name=field.name: controls.notify(name, value))


# ── Common settings ──────────────────────────────────────────────────


def add_basic_material_settings(
    panel: Panel,
    registry: ControlsRegistry,
    material: Material,
    name: Optional[str] = None,
) -> Folder:
    """Create a folder with the properties shared by every material."""
    controls = registry.bind(material)
    mat = controls.material

    folder = panel.add_folder(name if name is not None else "Material")
    folder.add_text("id", _getter(mat, "id"))
    folder.add_text("uuid", _getter(mat, "uuid"))
    folder.add_text("name", _getter(mat, "name"), SetAttribute(mat, "name"))
    folder.add_number("opacity", _getter(mat, "opacity"), SetAttribute(mat, "opacity"), 0, 1, 0.01)
    folder.add_bool("transparent", _getter(mat, "transparent"), SetAttribute(mat, "transparent"))
    folder.add_bool("visible", _getter(mat, "visible"), SetAttribute(mat, "visible"))
    folder.add_choice(
        "side", SIDE_CHOICES, _getter(mat, "side"),
        SetAttribute(mat, "side", parse=_parse_side),
    )
    folder.add_bool("colorWrite", _getter(mat, "color_write"), SetAttribute(mat, "color_write"))
    folder.add_bool(
        "flatShading", _getter(mat, "flat_shading"),
        SetAttribute(mat, "flat_shading", invalidate=True),
    )
    folder.add_bool(
        "premultipliedAlpha", _getter(mat, "premultiplied_alpha"),
        SetAttribute(mat, "premultiplied_alpha"),
    )
    folder.add_bool("dithering", _getter(mat, "dithering"), SetAttribute(mat, "dithering"))
    folder.add_choice(
        "shadowSide", SIDE_CHOICES, _getter(mat, "shadow_side"),
        SetAttribute(mat, "shadow_side"),
    )
    folder.add_choice(
        "vertexColors", VERTEX_COLOR_CHOICES, _getter(mat, "vertex_colors"),
        SetAttribute(mat, "vertex_colors", parse=_parse_vertex_colors),
    )
    folder.add_bool("fog", _getter(mat, "fog"), SetAttribute(mat, "fog"))

    _announce(folder, controls)
    return folder


# ── Kind-specific settings ───────────────────────────────────────────


def _add_color(folder: Folder, controls: MaterialControls, key: str) -> None:
    controls.values[key] = getattr(controls.material, key).get_style()
    folder.add_color(key, lambda: controls.values[key], SetColorStyle(controls, key))


def _normal_settings(folder: Folder, controls: MaterialControls) -> None:
    mat = controls.material
    folder.add_bool("wireframe", _getter(mat, "wireframe"), SetAttribute(mat, "wireframe"))


def _phong_settings(folder: Folder, controls: MaterialControls) -> None:
    mat = controls.material
    _add_color(folder, controls, "specular")
    folder.add_number("shininess", _getter(mat, "shininess"), SetAttribute(mat, "shininess"), 0, 100, 0.01)


def _standard_settings(folder: Folder, controls: MaterialControls) -> None:
    mat = controls.material
    _add_color(folder, controls, "color")
    _add_color(folder, controls, "emissive")
    folder.add_number("metalness", _getter(mat, "metalness"), SetAttribute(mat, "metalness"), 0, 1, 0.01)
    folder.add_number("roughness", _getter(mat, "roughness"), SetAttribute(mat, "roughness"), 0, 1, 0.01)
    folder.add_bool("wireframe", _getter(mat, "wireframe"), SetAttribute(mat, "wireframe"))


# Kinds mapped to None get an empty folder.
_SPECIFIC_SETTINGS: dict[MaterialKind, Optional[Callable[[Folder, MaterialControls], None]]] = {
    MaterialKind.NORMAL: _normal_settings,
    MaterialKind.PHONG: _phong_settings,
    MaterialKind.STANDARD: _standard_settings,
    MaterialKind.BASIC: None,
}


def add_specific_material_settings(
    panel: Panel,
    registry: ControlsRegistry,
    material: Material,
    name: Optional[str] = None,
) -> Folder:
    """Create a folder with the properties specific to *material*'s kind.

    Unknown kinds get an empty folder.
    """
    controls = registry.bind(material)

    folder = panel.add_folder(name if name is not None else material.type)
    add_settings = _SPECIFIC_SETTINGS.get(getattr(material, "kind", None))
    if add_settings is None:
        logger.debug("No specific settings for %s.", material.type)
        return folder

    add_settings(folder, controls)
    _announce(folder, controls)
    return folder
