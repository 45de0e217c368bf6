"""Tests for the demo scenes and the command-line entry point."""

import random

import numpy as np
import pytest
from PIL import Image

from rayonetta.camera import Camera, SolidBackground
from rayonetta.main import build_parser, main
from rayonetta.scenes import SCENES, TEXTURED_SCENES

UNTEXTURED = sorted(set(SCENES) - TEXTURED_SCENES)


@pytest.fixture
def texture(tmp_path):
    """Small stand-in for the earth map."""
    pixels = np.zeros((8, 16, 3), dtype=np.uint8)
    pixels[:, :8] = (40, 90, 200)
    pixels[:, 8:] = (60, 160, 60)
    path = tmp_path / "earth.png"
    Image.fromarray(pixels).save(path)
    return str(path)


def build(name, texture_path=None, **overrides):
    kwargs = dict(overrides)
    if name in TEXTURED_SCENES:
        kwargs["texture_path"] = texture_path
    return SCENES[name](random.Random(0), **kwargs)


class TestSceneBuilders:
    """Every scene builds and renders a tiny image."""

    @pytest.mark.parametrize("name", UNTEXTURED)
    def test_build_and_render(self, name):
        world, camera = build(name, image_width=6, samples_per_pixel=1, max_depth=3)
        assert isinstance(camera, Camera)
        assert camera.image_width == 6
        image = camera.render(world, workers=1, seed=0, progress=False)
        assert image.shape[1] == 6
        assert np.all(np.isfinite(image))

    @pytest.mark.parametrize("name", sorted(TEXTURED_SCENES))
    def test_textured_scenes(self, name, texture):
        world, camera = build(name, texture, image_width=4, samples_per_pixel=1, max_depth=2)
        image = camera.render(world, workers=1, seed=0, progress=False)
        assert image.shape[1] == 4

    @pytest.mark.parametrize("name", sorted(TEXTURED_SCENES))
    def test_textured_scene_missing_file(self, name, tmp_path):
        with pytest.raises(FileNotFoundError):
            build(name, str(tmp_path / "missing.jpg"))

    def test_none_overrides_keep_scene_defaults(self):
        _, camera = build("cornell-box", image_width=None, samples_per_pixel=None)
        assert camera.image_width == 600
        assert camera.samples_per_pixel == 200

    def test_layout_depends_on_seed(self):
        a, _ = SCENES["bouncing-spheres"](random.Random(1))
        b, _ = SCENES["bouncing-spheres"](random.Random(1))
        c, _ = SCENES["bouncing-spheres"](random.Random(2))
        assert a.objects[0].bounding_box() == b.objects[0].bounding_box()
        assert a.objects[0].bounding_box() != c.objects[0].bounding_box()

    def test_lit_scenes_have_black_background(self):
        for name in ("simple-light", "cornell-box", "cornell-smoke"):
            _, camera = build(name)
            assert isinstance(camera.background, SolidBackground)
            assert list(camera.background.color) == [0.0, 0.0, 0.0]


class TestCommandLine:
    """Tests for the rayonetta command."""

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.scene == "bouncing-spheres"
        assert args.scene not in TEXTURED_SCENES
        assert args.backend == "process"
        assert args.output is None

    def test_default_run_needs_no_assets(self, tmp_path, monkeypatch, capsys):
        """A bare run with only quality flags succeeds from an empty directory."""
        monkeypatch.chdir(tmp_path)
        code = main(["--width", "2", "--samples", "1", "--depth", "1", "--workers", "1"])
        assert code == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[:3] == ["P3", "2 1", "255"]
        assert len(lines) == 3 + 2

    @pytest.mark.parametrize("flag, value", [
        ("--workers", "0"),
        ("--width", "0"),
        ("--samples", "0"),
        ("--depth", "-1"),
    ])
    def test_invalid_settings_exit_before_rendering(self, flag, value, capsys):
        code = main(["--scene", "quadrilaterals", "--width", "3", "--samples", "1",
                     "--depth", "1", "--workers", "1", flag, value])
        assert code == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid render settings" in captured.err
        assert "Scanlines remaining" not in captured.err

    def test_unknown_scene_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--scene", "teapot"])

    def test_ppm_on_stdout(self, capsys):
        code = main(["--scene", "quadrilaterals", "--width", "5", "--samples", "1",
                     "--depth", "2", "--workers", "1", "--seed", "3"])
        assert code == 0
        captured = capsys.readouterr()
        lines = captured.out.splitlines()
        assert lines[:3] == ["P3", "5 5", "255"]
        assert len(lines) == 3 + 25
        assert "Scanlines remaining" in captured.err

    def test_same_seed_same_output(self, capsys):
        argv = ["--scene", "perlin-spheres", "--width", "4", "--samples", "1",
                "--depth", "2", "--workers", "1", "--seed", "9", "--quiet"]
        main(argv)
        first = capsys.readouterr().out
        main(argv)
        assert capsys.readouterr().out == first

    def test_output_file(self, tmp_path, texture, capsys):
        out = tmp_path / "earth.png"
        code = main(["--scene", "earth", "--texture", texture, "--width", "8", "--samples", "1",
                     "--workers", "1", "--output", str(out), "--quiet"])
        assert code == 0
        assert capsys.readouterr().out == ""
        with Image.open(out) as img:
            assert img.size[0] == 8

    def test_missing_texture_fails(self, tmp_path, capsys):
        code = main(["--scene", "earth", "--texture", str(tmp_path / "nope.jpg"), "--quiet"])
        assert code != 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "nope.jpg" in captured.err

    def test_malformed_texture_fails(self, tmp_path, capsys):
        bad = tmp_path / "bad.jpg"
        bad.write_bytes(b"\x00\x01garbage")
        code = main(["--scene", "earth", "--texture", str(bad), "--quiet"])
        assert code != 0
        assert "bad.jpg" in capsys.readouterr().err
