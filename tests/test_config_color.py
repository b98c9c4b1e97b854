import logging

import pytest

from soft_wireframe_engine import Color4, RenderConfig, WIREFRAME_YELLOW, parse_hex_color
from soft_wireframe_engine.color import rgb_to_nearest_ansi8, rgb_to_nearest_xterm
from soft_wireframe_engine.log import PACKAGE_LOGGER, setup_logging


def test_wireframe_yellow_uses_full_range_on_every_channel():
    assert WIREFRAME_YELLOW.to_rgba8() == (255, 255, 0, 255)


def test_color_clamps_and_converts():
    assert Color4(2.0, -1.0, 0.5).to_rgba8() == (255, 0, 127, 255)
    assert Color4.from_rgb8(255, 0, 0).to_rgba8() == (255, 0, 0, 255)


@pytest.mark.parametrize("text,expected", [
    ("#FFFF00", (255, 255, 0)),
    ("d0dd14", (208, 221, 20)),
    ("#12345", None),
    ("#GGGGGG", None),
    (None, None),
])
def test_parse_hex_color(text, expected):
    assert parse_hex_color(text) == expected


def test_nearest_terminal_colours():
    assert rgb_to_nearest_xterm(255, 255, 0) == 226
    assert rgb_to_nearest_xterm(128, 128, 128) == 244
    assert rgb_to_nearest_ansi8(250, 10, 10) == 1


def test_config_defaults():
    config = RenderConfig()
    assert config.fov == pytest.approx(0.78)
    assert (config.znear, config.zfar) == (0.01, 1.0)
    assert config.rasterizer == "bresenham"
    assert config.wire_color == WIREFRAME_YELLOW


@pytest.mark.parametrize("kwargs", [dict(fov=0), dict(znear=1.0, zfar=1.0)])
def test_config_rejects_bad_projection(kwargs):
    with pytest.raises(ValueError):
        RenderConfig(**kwargs)


def test_detect_terminal(monkeypatch):
    monkeypatch.setenv("TERM", "xterm-256color")
    monkeypatch.setenv("LANG", "en_US.UTF-8")
    config = RenderConfig.detect_terminal(rasterizer="midpoint")
    assert config.use_color and config.use_braille
    assert config.rasterizer == "midpoint"

    monkeypatch.setenv("TERM", "linux")
    assert not RenderConfig.detect_terminal().use_braille

    monkeypatch.setenv("TERM", "dumb")
    assert not RenderConfig.detect_terminal().use_color


def test_setup_logging_to_file(tmp_path):
    log_file = tmp_path / "engine.log"
    logger = setup_logging(logging.DEBUG, log_file)
    assert logger.name == PACKAGE_LOGGER
    logging.getLogger("soft_wireframe_engine.loader").debug("hello %s", "there")
    for handler in logger.handlers:
        handler.flush()
    assert "hello there" in log_file.read_text(encoding="utf-8")
    setup_logging(logging.WARNING)
    assert len(logger.handlers) == 1


def test_setup_logging_without_console(capsys):
    logger = setup_logging(logging.WARNING, console=False)
    assert [type(h) for h in logger.handlers] == [logging.NullHandler]
    logging.getLogger("soft_wireframe_engine.renderer").warning("not on screen")
    assert capsys.readouterr().err == ""
