"""Tests for texture loading."""

import logging

import pytest

QtGui = pytest.importorskip("PySide6.QtGui")

from cubeview.loaders.texture_loader import TextureLoader, read_image


def _write_png(path, width=4, height=2):
    image = QtGui.QImage(width, height, QtGui.QImage.Format.Format_RGBA8888)
    image.fill(QtGui.QColor(255, 0, 0, 255))
    # Top-left pixel blue
    image.setPixelColor(0, 0, QtGui.QColor(0, 0, 255, 255))
    assert image.save(str(path))


def test_read_image_shape_and_orientation(tmp_path):
    path = tmp_path / "tex.png"
    _write_png(path)
    data = read_image(path)
    assert data.shape == (2, 4, 4)
    # Rows are flipped: the top-left pixel lands in the last row
    assert tuple(data[-1, 0]) == (0, 0, 255, 255)
    assert tuple(data[0, 0]) == (255, 0, 0, 255)


def test_read_image_missing(tmp_path):
    assert read_image(tmp_path / "missing.png") is None


def test_load_relative_to_base_dir(tmp_path):
    _write_png(tmp_path / "stone.png")
    texture = TextureLoader(tmp_path).load("stone.png")
    assert texture.width == 4
    assert texture.height == 2
    assert texture.placeholder is False
    assert texture.source == tmp_path / "stone.png"


def test_load_missing_gives_placeholder(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        texture = TextureLoader(tmp_path).load("stone.jpg")
    assert texture.placeholder is True
    assert texture.image is not None
    assert "placeholder" in caplog.text


def test_cache_shares_image_not_texture(tmp_path):
    _write_png(tmp_path / "stone.png")
    loader = TextureLoader(tmp_path)
    a = loader.load("stone.png")
    b = loader.load("stone.png")
    assert a is not b
    assert a.image is b.image
