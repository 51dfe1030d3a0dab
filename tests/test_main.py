"""Tests for the CLI entry point."""
import json

import pytest

from house_interiors.config import GeneratorConfig
from house_interiors.io.material_library import MaterialLibrary
from house_interiors.main import collect_stats, main, run_generation


@pytest.fixture(autouse=True)
def _logging(restore_logging):
    yield


class TestRunGeneration:

    def test_in_memory(self, tmp_path):
        config = GeneratorConfig(output_dir=str(tmp_path / "out"))
        result = run_generation("basement", config, write_files=False)

        assert result.success
        assert result.root.name == "Basement_Root"
        assert result.report.stats.node_count == 72
        assert result.report.stats.light_count == 3
        assert not (tmp_path / "out").exists()

    def test_unknown_structure(self, config):
        result = run_generation("garage", config, write_files=False)
        assert not result.success
        assert result.report.errors

    def test_missing_materials_reported(self, config, monkeypatch):
        monkeypatch.setattr("house_interiors.main.load_materials", lambda _config: MaterialLibrary(()))

        result = run_generation("basement", config, write_files=False)
        assert result.success
        assert result.report.missing_materials == ["Concrete", "White", "Wood"]

    def test_bad_material_file_fails(self, tmp_path):
        config = GeneratorConfig(materials_path=str(tmp_path / "nope.json"), output_dir=str(tmp_path))
        result = run_generation("attic", config, write_files=False)
        assert not result.success
        assert result.root is None

    def test_collect_stats(self, config):
        result = run_generation("attic", config, write_files=False)
        stats = collect_stats(result.root)
        assert stats.light_count == 2
        assert stats.collider_count == 90
        assert stats.triangle_count > stats.face_count


class TestMain:

    def test_both_formats(self, tmp_path):
        code = main(["basement", "--output-dir", str(tmp_path), "--format", "both", "--no-log-file"])

        assert code == 0
        for name in ("basement.obj", "basement.mtl", "basement.json", "basement_report.json"):
            assert (tmp_path / name).exists(), name

        report = json.loads((tmp_path / "basement_report.json").read_text(encoding="utf-8"))
        assert report["success"] is True
        assert report["config_used"]["stair_strategy"] == "extrude"

    def test_attic_with_options(self, tmp_path):
        code = main([
            "attic", "--output-dir", str(tmp_path), "--seed", "7",
            "--prop-count", "3", "--format", "json", "--no-log-file",
        ])
        assert code == 0
        data = json.loads((tmp_path / "attic.json").read_text(encoding="utf-8"))
        props = [c for c in data["root"]["children"] if c["name"] == "Props"][0]
        assert len(props["children"]) == 3
        assert not (tmp_path / "attic.obj").exists()

    def test_log_file(self, tmp_path):
        assert main(["basement", "--output-dir", str(tmp_path), "--format", "json"]) == 0
        assert (tmp_path / "basement.log").exists()

    def test_bad_materials_exit_code(self, tmp_path, capsys):
        code = main(["attic", "--output-dir", str(tmp_path), "--materials", str(tmp_path / "x.json"), "--no-log-file"])
        assert code == 1
        assert "Generation failed with errors:" in capsys.readouterr().out

    def test_invalid_prop_count(self, tmp_path):
        assert main(["attic", "--output-dir", str(tmp_path), "--prop-count", "-2", "--no-log-file"]) == 1

    def test_unknown_structure_rejected(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["garage", "--output-dir", str(tmp_path)])
