"""Tests for the batch command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from projctl.cli import cli
from projctl.services.store import get_store


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload))
    return path


@pytest.mark.usefixtures("_isolated_project")
class TestBatchCommand:
    def test_adds_all_and_renders_lists(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        file = _write(
            tmp_path / "items.json",
            [{"title": "Alpha", "people": 1}, {"title": "Beta", "people": "4"}],
        )
        result = cli_runner.invoke(cli, ["batch", str(file)])
        assert result.exit_code == 0, result.output
        assert "added: 2" in result.output
        assert "ACTIVE PROJECTS" in result.output
        assert "FINISHED PROJECTS" in result.output
        assert [p.title for p in get_store().projects] == ["Alpha", "Beta"]

    def test_invalid_item_rejects_batch(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        file = _write(tmp_path / "items.json", [{"title": "Alpha", "people": 1}, {"title": ""}])
        result = cli_runner.invoke(cli, ["batch", str(file)])
        assert result.exit_code == 1
        assert len(get_store()) == 0

    def test_partial(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        file = _write(tmp_path / "items.json", [{"title": "Alpha", "people": 1}, {"title": ""}])
        result = cli_runner.invoke(cli, ["--json", "batch", str(file), "--partial"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["meta"] == {"added": 1, "failed": 1}
        assert len(get_store()) == 1

    def test_not_an_array(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        file = _write(tmp_path / "items.json", {"title": "Alpha"})
        result = cli_runner.invoke(cli, ["batch", str(file)])
        assert result.exit_code == 1
        assert "JSON array" in result.output

    def test_bad_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        file = tmp_path / "items.json"
        file.write_text("[{")
        result = cli_runner.invoke(cli, ["batch", str(file)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_batch_hook_dispatched(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        plugin_dir = tmp_path / ".projctl" / "plugins"
        plugin_dir.mkdir(parents=True)
        out_file = tmp_path / "batch.txt"
        (plugin_dir / "counter.py").write_text(
            "import pluggy\n"
            "hookimpl = pluggy.HookimplMarker('projctl')\n"
            "class Counter:\n"
            "    @hookimpl\n"
            "    def post_batch(self, added, failed):\n"
            f"        open({str(out_file)!r}, 'w').write(f'{{added}}/{{failed}}')\n"
        )
        file = _write(tmp_path / "items.json", [{"title": "Alpha", "people": 1}])
        result = cli_runner.invoke(cli, ["batch", str(file)])
        assert result.exit_code == 0, result.output
        assert out_file.read_text() == "1/0"
