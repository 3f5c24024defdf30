"""Tests for binding material properties into panel folders."""

import logging

import pytest

from cubeview.core.events import EventBus, EventType
from cubeview.core.material import (
    Material,
    MeshBasicMaterial,
    MeshNormalMaterial,
    MeshPhongMaterial,
    MeshStandardMaterial,
    Side,
    VertexColors,
)
from cubeview.ui.material_inspector import (
    ControlsRegistry,
    add_basic_material_settings,
    add_specific_material_settings,
)
from cubeview.ui.panel import Panel

BASIC_FIELDS = [
    "id", "uuid", "name", "opacity", "transparent", "visible", "side",
    "colorWrite", "flatShading", "premultipliedAlpha", "dithering",
    "shadowSide", "vertexColors", "fog",
]


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def panel():
    return Panel()


@pytest.fixture
def registry(bus):
    return ControlsRegistry(bus)


# ── Basic folder ──


def test_basic_folder_fields(panel, registry):
    folder = add_basic_material_settings(panel, registry, MeshStandardMaterial())
    assert folder.name == "Material"
    assert folder.field_names() == BASIC_FIELDS


def test_basic_folder_custom_name(panel, registry):
    folder = add_basic_material_settings(panel, registry, MeshBasicMaterial(), "cube-Material")
    assert panel.folder("cube-Material") is folder


def test_id_and_uuid_read_only(panel, registry):
    mat = MeshBasicMaterial()
    folder = add_basic_material_settings(panel, registry, mat)
    assert folder.field("id").read_only
    assert folder.field("uuid").read_only
    assert folder.field("id").value == mat.id
    assert folder.field("uuid").value == mat.uuid


def test_side_choice_parses_code(panel, registry):
    mat = MeshStandardMaterial()
    field = add_basic_material_settings(panel, registry, mat).field("side")
    field.select("BackSide")
    assert mat.side is Side.BACK
    field.select("BothSides")
    assert mat.side is Side.DOUBLE
    field.select("FrontSide")
    assert mat.side is Side.FRONT
    assert field.current_key == "FrontSide"


def test_vertex_colors_choice_parses_code(panel, registry):
    mat = MeshStandardMaterial()
    field = add_basic_material_settings(panel, registry, mat).field("vertexColors")
    field.select("VertexColors")
    assert mat.vertex_colors is VertexColors.VERTEX


def test_shadow_side_stores_raw_code(panel, registry):
    mat = MeshStandardMaterial()
    field = add_basic_material_settings(panel, registry, mat).field("shadowSide")
    assert field.current_key is None
    field.select("BackSide")
    assert mat.shadow_side == "1"
    assert field.current_key == "BackSide"


def test_opacity_clamped(panel, registry):
    mat = MeshBasicMaterial()
    add_basic_material_settings(panel, registry, mat).field("opacity").set(2.0)
    assert mat.opacity == 1.0


def test_flat_shading_flags_rebuild(panel, registry):
    mat = MeshStandardMaterial()
    add_basic_material_settings(panel, registry, mat).field("flatShading").set(True)
    assert mat.flat_shading is True
    assert mat.needs_update is True


def test_other_bool_does_not_flag_rebuild(panel, registry):
    mat = MeshStandardMaterial()
    add_basic_material_settings(panel, registry, mat).field("transparent").set(True)
    assert mat.transparent is True
    assert mat.needs_update is False


def test_name_edit(panel, registry):
    mat = MeshBasicMaterial()
    add_basic_material_settings(panel, registry, mat).field("name").set("stone")
    assert mat.name == "stone"


# ── Specific folder ──


def test_standard_fields(panel, registry):
    folder = add_specific_material_settings(panel, registry, MeshStandardMaterial())
    assert folder.name == "MeshStandardMaterial"
    assert folder.field_names() == ["color", "emissive", "metalness", "roughness", "wireframe"]


def test_phong_fields(panel, registry):
    folder = add_specific_material_settings(panel, registry, MeshPhongMaterial())
    assert folder.field_names() == ["specular", "shininess"]


def test_normal_fields(panel, registry):
    folder = add_specific_material_settings(panel, registry, MeshNormalMaterial())
    assert folder.field_names() == ["wireframe"]


def test_basic_kind_gets_empty_folder(panel, registry):
    folder = add_specific_material_settings(panel, registry, MeshBasicMaterial())
    assert folder.name == "MeshBasicMaterial"
    assert len(folder) == 0


def test_unknown_material_gets_empty_folder(panel, registry):
    folder = add_specific_material_settings(panel, registry, Material(), "plain")
    assert panel.folder("plain") is folder
    assert len(folder) == 0


def test_specular_color_edit(panel, registry):
    mat = MeshPhongMaterial()
    field = add_specific_material_settings(panel, registry, mat).field("specular")
    assert field.value == "#111111"
    assert field.set("#ff0000") is True
    assert mat.specular.to_tuple() == (1.0, 0.0, 0.0)
    assert field.value == "#ff0000"


def test_malformed_color_rejected(panel, registry, caplog):
    mat = MeshStandardMaterial()
    mat.color.set_hex(0x336699)
    field = add_specific_material_settings(panel, registry, mat).field("color")
    with caplog.at_level(logging.WARNING):
        assert field.set("#nothex") is False
    assert mat.color.get_hex() == 0x336699
    assert field.value == "#336699"
    assert "Rejected" in caplog.text


def test_roughness_clamped(panel, registry):
    mat = MeshStandardMaterial()
    add_specific_material_settings(panel, registry, mat).field("roughness").set(1.5)
    assert mat.roughness == 1.0


def test_metalness_and_wireframe(panel, registry):
    mat = MeshStandardMaterial()
    folder = add_specific_material_settings(panel, registry, mat)
    folder.field("metalness").set(0.5)
    folder.field("wireframe").set(True)
    assert mat.metalness == 0.5
    assert mat.wireframe is True


# ── Binding contexts and events ──


def test_each_call_binds_fresh_context(panel, registry):
    mat = MeshStandardMaterial()
    add_basic_material_settings(panel, registry, mat)
    add_specific_material_settings(panel, registry, mat)
    contexts = registry.controls_for(mat)
    assert len(contexts) == 2
    assert contexts[0] is not contexts[1]


def test_two_materials_do_not_share_color_state(panel, registry):
    a, b = MeshStandardMaterial(), MeshStandardMaterial()
    fa = add_specific_material_settings(panel, registry, a, "a")
    fb = add_specific_material_settings(panel, registry, b, "b")
    fa.field("color").set("#00ff00")
    assert fb.field("color").value == "#ffffff"
    assert b.color.get_hex() == 0xFFFFFF


def test_edits_publish_events(panel, registry, bus):
    mat = MeshStandardMaterial()
    received = []
    bus.subscribe(EventType.MATERIAL_EDITED, lambda **kw: received.append(kw))
    add_specific_material_settings(panel, registry, mat).field("metalness").set(0.25)
    assert received == [{"material": mat, "field": "metalness", "value": 0.25}]


def test_rejected_edit_publishes_nothing(panel, registry, bus):
    mat = MeshStandardMaterial()
    received = []
    bus.subscribe(EventType.MATERIAL_EDITED, lambda **kw: received.append(kw))
    add_specific_material_settings(panel, registry, mat).field("emissive").set("bogus")
    assert received == []


def test_registry_without_bus(panel):
    mat = MeshStandardMaterial()
    folder = add_basic_material_settings(panel, ControlsRegistry(), mat)
    folder.field("visible").set(False)
    assert mat.visible is False
