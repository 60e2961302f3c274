"""End-to-end conversion runs over temporary Nexo trees."""

import logging
from pathlib import Path
from typing import Dict

import pytest
import yaml

from nexo2ce.conversion.service import ConversionService, convert


def write_items(root: Path, files: Dict[str, str]) -> Path:
    """Create ``<root>/items/<name>`` files and return root."""
    for name, content in files.items():
        path = root / "items" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def load(path: Path):
    return yaml.safe_load(path.read_text(encoding="utf-8"))


@pytest.fixture
def duplicate_tree(tmp_path: Path) -> Path:
    return write_items(
        tmp_path / "input",
        {
            "a.yml": "x:\n  material: stick\n  Pack:\n    texture: t1\n",
            "b.yml": "x:\n  material: stone\n  Pack:\n    generate_model: false\n    model: m1\n",
        },
    )


class TestConversionRun:
    """Full pipeline behaviour."""

    def test_duplicate_scenario(self, duplicate_tree: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Test the second definition of a key is dropped and its file gets no subcategory."""
        caplog.set_level(logging.WARNING)
        output = tmp_path / "output"

        convert(duplicate_tree, output, "pack")

        configuration = output / "configuration"
        assert load(configuration / "items" / "a.yml") == {
            "items": {
                "pack:x": {
                    "material": "STICK",
                    "data": {"item-name": "<!i><white><i18n:item.pack.x></white>"},
                    "model": {
                        "template": "pack:model/simplified_generated",
                        "arguments": {"path": "t1"},
                    },
                }
            }
        }
        assert not (configuration / "items" / "b.yml").exists()

        categories = load(configuration / "categories.yml")["categories"]
        assert set(categories) == {"pack:pack", "pack:a"}
        assert categories["pack:a"]["list"] == ["pack:x"]
        assert categories["pack:pack"]["list"] == ["#pack:a"]
        assert categories["pack:pack"]["icon"] == "pack:x"

        assert any("pack:x" in r.getMessage() and "b.yml" in r.getMessage() for r in caplog.records)

    def test_locale_and_templates(self, duplicate_tree: Path, tmp_path: Path) -> None:
        output = tmp_path / "output"
        convert(duplicate_tree, output, "pack")

        assert load(output / "configuration" / "i18n.yml") == {
            "i18n": {
                "en": {
                    "category.pack.name": "pack",
                    "category.pack.lore": "pack Items",
                    "item.pack.x": "x",
                    "category.pack.a": "a",
                }
            }
        }
        templates = load(output / "configuration" / "templates.yml")["templates#models#2d"]
        assert set(templates) == {"pack:model/generated", "pack:model/simplified_generated"}
        assert templates["pack:model/simplified_generated"]["path"] == "${path}"

    def test_collision_scenario(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Test shared material and CMD converts both items with one warning."""
        caplog.set_level(logging.WARNING)
        root = write_items(
            tmp_path / "input",
            {
                "blocks.yml": (
                    "one:\n  material: stone\n  Pack:\n    texture: a\n    custom_model_data: 5\n"
                    "two:\n  material: STONE\n  Pack:\n    texture: b\n    custom_model_data: 5\n"
                )
            },
        )
        output = tmp_path / "output"

        stats = ConversionService("pack").run(root, output)

        items = load(output / "configuration" / "items" / "blocks.yml")["items"]
        assert list(items) == ["pack:one", "pack:two"]
        assert stats.collisions == 1
        assert len([r for r in caplog.records if "collision" in r.getMessage()]) == 1
        assert (output / "custom_model_data.txt").read_text(encoding="utf-8") == "STONE: 5, 5\n"

    def test_subfolders_blacklist_and_unreadable_files(self, tmp_path: Path) -> None:
        root = write_items(
            tmp_path / "input",
            {
                "tools/pickaxes.yml": (
                    "pick:\n  itemname: Pickaxe\n  material: iron_pickaxe\n"
                    "  Pack:\n    generate_model: false\n    model: pack:item/pick\n    custom_model_data: 1\n"
                ),
                "nexo_defaults/defaults.yml": "default:\n  material: stick\n  Pack:\n    texture: d\n",
                "broken.yml": "a: [\n",
                "plain.yml": "nothing:\n  material: stick\n",
            },
        )
        output = tmp_path / "output"

        stats = ConversionService("pack").run(root, output)

        assert stats.files_found == 3
        assert stats.files_failed == 1
        assert stats.files_converted == 1
        assert stats.items_converted == 1
        assert (output / "configuration" / "items" / "tools" / "pickaxes.yml").exists()
        assert not (output / "configuration" / "items" / "plain.yml").exists()

        categories = load(output / "configuration" / "categories.yml")["categories"]
        assert set(categories) == {"pack:pack", "pack:pickaxes"}
        i18n = load(output / "configuration" / "i18n.yml")["i18n"]["en"]
        assert i18n["item.pack.pick"] == "Pickaxe"
        assert "item.pack.default" not in i18n
        assert (output / "custom_model_data.txt").read_text(encoding="utf-8") == "IRON_PICKAXE: 1\n"

    def test_missing_items_folder_still_writes_aggregates(self, tmp_path: Path) -> None:
        output = tmp_path / "output"
        convert(tmp_path / "input", output, "pack")

        configuration = output / "configuration"
        for name in ["i18n.yml", "categories.yml", "templates.yml"]:
            assert (configuration / name).is_file()
        assert (output / "custom_model_data.txt").read_text(encoding="utf-8") == ""
        assert load(configuration / "categories.yml")["categories"]["pack:pack"]["list"] == []

    def test_runs_are_byte_identical(self, tmp_path: Path) -> None:
        root = write_items(
            tmp_path / "input",
            {
                "z.yml": "logo_z:\n  material: paper\n  Pack:\n    texture: z\n    custom_model_data: 3\n",
                "a/m.yml": "m1:\n  material: paper\n  Pack:\n    texture: m\n    custom_model_data: 1\n",
            },
        )
        first, second = tmp_path / "out1", tmp_path / "out2"
        convert(root, first, "pack")
        convert(root, second, "pack")

        first_files = sorted(p.relative_to(first) for p in first.rglob("*") if p.is_file())
        second_files = sorted(p.relative_to(second) for p in second.rglob("*") if p.is_file())
        assert first_files == second_files
        for relative in first_files:
            assert (first / relative).read_bytes() == (second / relative).read_bytes()

        categories = load(first / "configuration" / "categories.yml")["categories"]
        assert categories["pack:pack"]["list"] == ["#pack:m", "#pack:z"]
        assert categories["pack:pack"]["icon"] == "pack:m1"
        assert (first / "custom_model_data.txt").read_text(encoding="utf-8") == "PAPER: 1, 3\n"

    def test_service_is_reusable(self, duplicate_tree: Path, tmp_path: Path) -> None:
        """Test a second run starts from fresh accumulators."""
        service = ConversionService("pack")
        service.run(duplicate_tree, tmp_path / "out1")
        stats = service.run(duplicate_tree, tmp_path / "out2")

        assert stats.items_converted == 1
        assert stats.duplicates == 1

    def test_json_source_is_written_as_yaml(self, tmp_path: Path) -> None:
        """Test a JSON item file produces a .yml document with YAML content."""
        root = write_items(
            tmp_path / "input",
            {"gems.json": '{"ruby": {"material": "paper", "Pack": {"texture": "pack:item/ruby"}}}'},
        )
        output = tmp_path / "output"

        stats = ConversionService("pack", document_suffixes=[".json"]).run(root, output)

        items_folder = output / "configuration" / "items"
        assert stats.files_converted == 1
        assert sorted(p.name for p in items_folder.iterdir()) == ["gems.yml"]
        assert "pack:ruby" in load(items_folder / "gems.yml")["items"]
        assert not (items_folder / "gems.yml").read_text(encoding="utf-8").startswith("{")
