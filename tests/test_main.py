"""Tests for the command line entry point."""

import sys
import numpy as np
import pytest
from PIL import Image

import main


def run_main(monkeypatch, *args):
    monkeypatch.setattr(sys, 'argv', ['main.py', *args])
    return main.main()


class TestScenes:
    """Test built-in scenes."""

    @pytest.mark.parametrize("name", sorted(main.SCENES))
    def test_scenes_build(self, name):
        world = main.SCENES[name]()
        assert len(world) > 0
        assert all(obj.material is not None for obj in world)

    def test_demo_materials_are_distinct(self):
        world = main.create_demo_scene()
        materials = [obj.material for obj in world]
        assert len(set(map(id, materials))) == len(materials)


class TestMain:
    """Test end-to-end command line runs."""

    def test_renders_png(self, monkeypatch, tmp_path, capsys):
        output = tmp_path / "render.png"
        code = run_main(
            monkeypatch, '--scene', 'spheres', '--width', '6', '--height', '4',
            '--samples', '1', '--depth', '2', '--seed', '3', '--output', str(output)
        )
        assert code == 0
        assert output.exists()
        assert Image.open(output).size == (6, 4)
        assert "Done!" in capsys.readouterr().out

    def test_seeded_runs_match(self, monkeypatch, tmp_path):
        args = ['--scene', 'demo', '--width', '5', '--height', '3', '--samples', '2',
                '--depth', '3', '--seed', '11']
        run_main(monkeypatch, *args, '--output', str(tmp_path / "a.png"))
        run_main(monkeypatch, *args, '--output', str(tmp_path / "b.png"))
        a = np.asarray(Image.open(tmp_path / "a.png"))
        b = np.asarray(Image.open(tmp_path / "b.png"))
        assert np.array_equal(a, b)

    def test_scene_file(self, monkeypatch, tmp_path):
        scene = tmp_path / "scene.json"
        scene.write_text(
            '{"render": {"width": 3, "height": 2, "samples": 1, "max_depth": 1},'
            ' "objects": [{"center": [0, 0, -1], "radius": 0.5,'
            ' "material": {"type": "metal", "albedo": [0.9, 0.9, 0.9]}}]}'
        )
        output = tmp_path / "scene.png"
        assert run_main(monkeypatch, '--scene', str(scene), '--output', str(output)) == 0
        assert Image.open(output).size == (3, 2)

    def test_bad_scene_file(self, monkeypatch, tmp_path, capsys):
        code = run_main(monkeypatch, '--scene', str(tmp_path / "missing.yaml"))
        assert code == 1
        assert "Error" in capsys.readouterr().err

    def test_bad_settings(self, monkeypatch, capsys):
        assert run_main(monkeypatch, '--samples', '0') == 1
        assert "samples_per_pixel" in capsys.readouterr().err

    def test_malformed_scene_values(self, monkeypatch, tmp_path, capsys):
        scene = tmp_path / "scene.json"
        scene.write_text('{"objects": [{"center": [0, null, -1], "radius": null}]}')
        assert run_main(monkeypatch, '--scene', str(scene)) == 1
        assert "Invalid Vec3 component" in capsys.readouterr().err
