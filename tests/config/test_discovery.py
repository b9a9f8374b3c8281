"""Tests for projctl.toml discovery."""

from pathlib import Path

import pytest

from projctl.config.discovery import CONFIG_ENV_VAR, find_config


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        cfg = tmp_path / "projctl.toml"
        cfg.write_text("")
        assert find_config(tmp_path) == cfg.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        cfg = tmp_path / "projctl.toml"
        cfg.write_text("")
        deep = tmp_path / "x" / "y"
        deep.mkdir(parents=True)
        assert find_config(deep) == cfg.resolve()

    def test_env_var_wins_over_walk_up(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        other = tmp_path / "elsewhere.toml"
        other.write_text("")
        (tmp_path / "projctl.toml").write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(tmp_path) == other

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "projctl.toml").write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


class TestExplicitPath:
    def test_explicit_wins_over_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        explicit = tmp_path / "team.toml"
        explicit.write_text("")
        env = tmp_path / "env.toml"
        env.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(env))
        assert find_config(tmp_path, explicit=str(explicit)) == explicit

    def test_missing_explicit_does_not_fall_back(self, tmp_path: Path) -> None:
        (tmp_path / "projctl.toml").write_text("")
        assert find_config(tmp_path, explicit=str(tmp_path / "absent.toml")) is None
