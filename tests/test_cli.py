import json
import logging

import pytest

import client_demo
from soft_wireframe_engine.demo import build_config, load_scene
from soft_wireframe_engine.log import PACKAGE_LOGGER


def test_parse_defaults():
    args = client_demo.parse_args([])
    assert args.model is None
    assert args.camera_z == 10.0
    assert args.rasterizer == "bresenham"
    assert args.headless is None


def test_parse_headless_size():
    args = client_demo.parse_args(["--headless", "64x48"])
    assert args.headless == (64, 48)


@pytest.mark.parametrize("argv", [["--headless", "64"], ["--headless", "0x10"],
                                  ["--snapshot", "x.ppm"], ["--rasterizer", "wu"]])
def test_parse_rejects(argv):
    with pytest.raises(SystemExit):
        client_demo.parse_args(argv)


def test_build_config_from_args():
    args = client_demo.parse_args(["--wire-color", "#00FF00", "--mono", "--ascii",
                                   "--rasterizer", "midpoint", "--spin", "0.5"])
    config = build_config(args, detect=False)
    assert config.wire_color.to_rgba8() == (0, 255, 0, 255)
    assert not config.use_color and not config.use_braille
    assert config.rasterizer == "midpoint"
    assert config.spin_step == 0.5


def test_build_config_bad_color():
    args = client_demo.parse_args(["--wire-color", "yellow"])
    with pytest.raises(ValueError):
        build_config(args, detect=False)


def test_load_scene_without_model_uses_cube():
    scene = load_scene(client_demo.parse_args(["--camera-z", "7"]))
    assert [m.name for m in scene.meshes] == ["Cube"]
    assert scene.camera.position.z == 7.0


def test_headless_snapshot(tmp_path, triangle_doc):
    model = tmp_path / "tri.babylon"
    model.write_text(json.dumps(triangle_doc), encoding="utf-8")
    snapshot = tmp_path / "frame.ppm"
    code = client_demo.run([str(model), "--headless", "64x48", "--frames", "2",
                            "--snapshot", str(snapshot)])
    assert code == 0
    data = snapshot.read_bytes()
    header = b"P6\n64 48\n255\n"
    assert data.startswith(header)
    assert len(data) == len(header) + 64 * 48 * 3
    assert any(data[len(header):])


def test_missing_model_reports_error(tmp_path, capsys):
    code = client_demo.run([str(tmp_path / "missing.babylon"), "--headless", "8x8"])
    assert code == 1
    assert "could not fetch" in capsys.readouterr().err


def test_malformed_model_reports_error(tmp_path, capsys):
    model = tmp_path / "bad.babylon"
    model.write_text(json.dumps({"meshes": [{"vertices": [0] * 7, "indices": []}]}),
                     encoding="utf-8")
    code = client_demo.run([str(model), "--headless", "8x8"])
    assert code == 1
    assert "mesh #0" in capsys.readouterr().err


def test_interactive_run_keeps_logs_off_the_screen(monkeypatch):
    handlers = []

    def fake_wrapper(func):
        handlers.extend(logging.getLogger(PACKAGE_LOGGER).handlers)

    monkeypatch.setattr(client_demo.curses, "wrapper", fake_wrapper)
    assert client_demo.run([]) == 0
    assert [type(h) for h in handlers] == [logging.NullHandler]
