"""Tests for the CLI interface."""
import json
import subprocess
import sys
from pathlib import Path

from footprint_builder.random_source import derive_seed

CLI = [sys.executable, "-m", "footprint_builder"]
ROOT = Path(__file__).parent.parent


def run_cli(*args: str) -> dict:
    """Run CLI command and return parsed JSON output."""
    result = subprocess.run(
        [*CLI, *args],
        capture_output=True, text=True, cwd=str(ROOT),
    )
    assert result.returncode == 0, f"CLI failed: {result.stderr}\n{result.stdout}"
    return json.loads(result.stdout)


def run_cli_expect_fail(*args: str) -> dict:
    """Run CLI command expecting failure, return parsed JSON output."""
    result = subprocess.run(
        [*CLI, *args],
        capture_output=True, text=True, cwd=str(ROOT),
    )
    assert result.returncode != 0
    return json.loads(result.stdout)


class TestGenerate:
    def test_generate_basic(self):
        data = run_cli("generate", "--depth", "3", "--width", "5", "--seed", "7")
        assert data["ok"] is True
        b = data["building"]
        assert b["depth"] == 3 and b["width"] == 5
        assert len(b["footprint"]) == 3
        assert b["footprint"][1] == "#####"
        assert b["footprint"][2] == "#####"
        assert b["layers"] in {5, 6, 7, 8}
        present = sum(row.count("#") for row in b["footprint"])
        assert b["blocks"] == b["layers"] * present

    def test_same_seed_same_output(self):
        a = run_cli("generate", "-d", "4", "-w", "9", "--seed", "11")
        b = run_cli("generate", "-d", "4", "-w", "9", "--seed", "11")
        assert a == b

    def test_dimensions_clamped(self):
        data = run_cli("generate", "--depth", "12", "--width", "0", "--seed", "1")
        assert data["building"]["depth"] == 9
        assert data["building"]["width"] == 1

    def test_quirky(self):
        data = run_cli("generate", "--style", "quirky", "--seed", "1")
        assert data["building"]["style"] == "Quirky"
        assert data["building"]["blocks"] == 0

    def test_unknown_style(self):
        data = run_cli_expect_fail("generate", "--style", "Gothic")
        assert data["ok"] is False
        assert "Gothic" in data["error"]

    def test_unknown_interior(self):
        data = run_cli_expect_fail("generate", "--interior", "hollow")
        assert data["ok"] is False
        assert "Unknown interior mode" in data["error"]

    def test_placements_include_material(self):
        data = run_cli("generate", "-d", "1", "-w", "2", "--seed", "3", "--placements")
        assert len(data["placements"]) == data["building"]["blocks"]
        first = data["placements"][0]
        assert first["block_type"] == "Straight"
        assert first["material"] == "_materials/Mat_Building_White_Vert_256"

    def test_config_file(self, tmp_path):
        cfg = tmp_path / "config.json"
        cfg.write_text(json.dumps({"depth": 2, "width": 6, "seed": 5, "interior": "constrained"}))
        data = run_cli("generate", "--config", str(cfg))
        assert data["building"]["interior"] == "constrained"
        assert data["building"]["width"] == 6

    def test_missing_config(self, tmp_path):
        data = run_cli_expect_fail("generate", "--config", str(tmp_path / "nope.json"))
        assert data["ok"] is False

    def test_verbose_keeps_stdout_json(self):
        data = run_cli("--verbose", "generate", "--seed", "2")
        assert data["ok"] is True


class TestBatch:
    def test_count_derives_seed_per_name(self):
        data = run_cli("generate", "--count", "3", "--seed", "7", "--name", "Block")
        names = [entry["building"]["name"] for entry in data["buildings"]]
        assert names == ["Block 1", "Block 2", "Block 3"]
        seeds = [entry["building"]["seed"] for entry in data["buildings"]]
        assert seeds == [derive_seed(7, n) for n in names]

    def test_count_reproducible(self):
        a = run_cli("generate", "-n", "2", "--seed", "5")
        b = run_cli("generate", "-n", "2", "--seed", "5")
        assert a == b

    def test_count_matches_single_generation_with_derived_seed(self):
        batch = run_cli("generate", "-n", "2", "--seed", "5", "--name", "Tower")
        second = batch["buildings"][1]["building"]
        single = run_cli(
            "generate", "--seed", str(derive_seed(5, "Tower 2")), "--name", "Tower 2",
        )
        assert single["building"] == second

    def test_count_saves_into_directory(self, tmp_path):
        data = run_cli("generate", "-n", "2", "--seed", "1", "-o", str(tmp_path / "batch"))
        paths = [Path(entry["path"]) for entry in data["buildings"]]
        assert [p.name for p in paths] == ["building_1.json", "building_2.json"]
        assert all(p.exists() for p in paths)


class TestSavedBuilding:
    def test_save_show_validate_render(self, tmp_path):
        out = tmp_path / "building.json"
        gen = run_cli("generate", "-d", "3", "-w", "7", "--seed", "4", "-o", str(out))
        assert Path(gen["path"]).exists()

        shown = run_cli("show", str(out))
        assert shown["building"] == gen["building"]

        validation = run_cli("validate", str(out))
        assert validation["validation"]["errors"] == 0
        assert validation["validation"]["warnings"] == 0

        png = tmp_path / "plan.png"
        rendered = run_cli("render", str(out), "-o", str(png))
        assert Path(rendered["rendered"]).exists()

    def test_render_unknown_view(self, tmp_path):
        out = tmp_path / "building.json"
        run_cli("generate", "--seed", "4", "-o", str(out))
        data = run_cli_expect_fail("render", str(out), "-o", str(tmp_path / "x.png"), "--view", "side")
        assert data["ok"] is False

    def test_show_missing_file(self, tmp_path):
        data = run_cli_expect_fail("show", str(tmp_path / "missing.json"))
        assert data["ok"] is False


class TestVersion:
    def test_version(self):
        result = subprocess.run(
            [*CLI, "version"], capture_output=True, text=True, cwd=str(ROOT),
        )
        assert result.returncode == 0
        assert result.stdout.startswith("footprint-builder v")
