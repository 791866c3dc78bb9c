"""Integration tests for the CLI using Typer's CliRunner."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from abouttranslator import __version__
from abouttranslator.backends.dummy import DummyBackend
from abouttranslator.cli import app
from abouttranslator.config import AppConfig, load_config, save_config
from tests.conftest import SIMPLE_ABOUT, write_about

runner = CliRunner()


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "settings" / "config.json"
    save_config(AppConfig(request_delay=0.0), path)
    return path


def _invoke(config_path, *args, **kwargs):
    return runner.invoke(app, ["--config", str(config_path), "--no-log-file", *args], **kwargs)


class TestCLIVersion:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"abouttranslator {__version__}" in result.output


class TestCLIBatch:
    def test_batch_with_dummy_backend(self, mods_tree, config_path):
        result = _invoke(config_path, "batch", str(mods_tree), "--dummy")
        assert result.exit_code == 0
        assert "Batch Summary" in result.output

        text = (mods_tree / "ModA" / "About" / "about.xml").read_text(encoding="utf-8")
        assert "<description>[ZH-CN] Hello World</description>" in text
        assert "<!-- AI-Translated -->" in text

    def test_batch_saves_last_path(self, mods_tree, config_path):
        _invoke(config_path, "batch", str(mods_tree), "--dummy")
        assert load_config(config_path).last_selected_path == str(mods_tree.resolve())

    def test_batch_overrides_not_persisted(self, mods_tree, config_path):
        result = _invoke(
            config_path, "batch", str(mods_tree), "--dummy", "--lang", "ja", "--marker", "Done",
        )
        assert result.exit_code == 0
        text = (mods_tree / "ModA" / "About" / "about.xml").read_text(encoding="utf-8")
        assert "[JA] Hello World" in text
        assert "<!-- Done -->" in text
        assert load_config(config_path).target_language == "zh-CN"

    def test_batch_with_report(self, mods_tree, config_path, tmp_path):
        report = tmp_path / "report.json"
        result = _invoke(config_path, "batch", str(mods_tree), "--dummy", "--report", str(report))
        assert result.exit_code == 0
        data = json.loads(report.read_text(encoding="utf-8"))
        assert (data["total_files"], data["succeeded"], data["skipped"], data["failed"]) == (3, 1, 2, 0)
        assert data["backend"] == "dummy"

    def test_batch_writes_log_file(self, mods_tree, config_path, tmp_path):
        log_file = tmp_path / "run.log"
        result = runner.invoke(app, [
            "--config", str(config_path),
            "--log-file", str(log_file),
            "batch", str(mods_tree), "--dummy",
        ])
        assert result.exit_code == 0
        assert "Total: 3, Success: 1, Skipped: 2, Failed: 0" in log_file.read_text(encoding="utf-8")

    def test_batch_nonexistent_directory(self, tmp_path, config_path):
        result = _invoke(config_path, "batch", str(tmp_path / "missing"), "--dummy")
        assert result.exit_code == 1

    def test_batch_requires_api_key_without_dummy(self, mods_tree, config_path):
        result = _invoke(
            config_path, "batch", str(mods_tree),
            env={"ABOUTTRANSLATOR_API_KEY": ""},
        )
        assert result.exit_code == 1
        assert "API key required" in result.output

    def test_batch_empty_directory(self, tmp_path, config_path):
        empty = tmp_path / "empty"
        empty.mkdir()
        result = _invoke(config_path, "batch", str(empty), "--dummy")
        assert result.exit_code == 0
        assert "No about.xml files found." in result.output


class TestCLITranslate:
    def test_translate_single_file(self, tmp_path, config_path):
        path = write_about(tmp_path / "Mod", SIMPLE_ABOUT)
        result = _invoke(config_path, "translate", str(path), "--dummy", "--lang", "fr")
        assert result.exit_code == 0
        assert "[FR] Hello World" in path.read_text(encoding="utf-8")

    def test_translate_already_translated(self, tmp_path, config_path):
        path = write_about(tmp_path / "Mod", SIMPLE_ABOUT)
        _invoke(config_path, "translate", str(path), "--dummy")
        result = _invoke(config_path, "translate", str(path), "--dummy")
        assert result.exit_code == 0
        assert "Skipped" in result.output

    def test_translate_failure_exit_code(self, tmp_path, config_path):
        path = write_about(tmp_path / "Mod", SIMPLE_ABOUT)
        with patch.object(DummyBackend, "translate_batch", return_value=[""]):
            result = _invoke(config_path, "translate", str(path), "--dummy")
        assert result.exit_code == 1
        assert path.read_text(encoding="utf-8") == SIMPLE_ABOUT

    def test_translate_nonexistent_file(self, tmp_path, config_path):
        result = _invoke(config_path, "translate", str(tmp_path / "about.xml"), "--dummy")
        assert result.exit_code == 1


class TestCLIScan:
    def test_scan(self, mods_tree, config_path):
        result = _invoke(config_path, "scan", str(mods_tree))
        assert result.exit_code == 0
        assert "Found 3 about.xml files, 1 already translated" in result.output
        assert not list(mods_tree.rglob("*.bak"))

    def test_scan_nonexistent_directory(self, tmp_path, config_path):
        result = _invoke(config_path, "scan", str(tmp_path / "missing"))
        assert result.exit_code == 1


class TestCLIConfig:
    def test_set_and_show(self, config_path):
        result = _invoke(config_path, "config", "set", "target_language", "ko")
        assert result.exit_code == 0
        assert load_config(config_path).target_language == "ko"

        result = _invoke(config_path, "config", "show")
        assert result.exit_code == 0
        assert "ko" in result.output

    def test_api_key_masked(self, config_path):
        _invoke(config_path, "config", "set", "api_key", "sk-secret-value")
        result = _invoke(config_path, "config", "show")
        assert "sk-secret-value" not in result.output
        assert load_config(config_path).api_key == "sk-secret-value"

    def test_set_unknown_key(self, config_path):
        result = _invoke(config_path, "config", "set", "colour", "red")
        assert result.exit_code == 1

    def test_set_invalid_value(self, config_path):
        result = _invoke(config_path, "config", "set", "request_delay", "soon")
        assert result.exit_code == 1

    def test_path(self, config_path):
        result = _invoke(config_path, "config", "path")
        assert result.exit_code == 0
        assert config_path.name in result.output


class TestCLIMenu:
    def test_exit(self, config_path):
        result = _invoke(config_path, "menu", input="3\n")
        assert result.exit_code == 0
        assert "about.xml File Translation Tool" in result.output

    def test_change_target_language(self, config_path):
        result = _invoke(config_path, "menu", input="2\n4\nja\n7\n3\n")
        assert result.exit_code == 0
        assert "Configuration saved!" in result.output
        assert load_config(config_path).target_language == "ja"

    def test_switch_ui_language(self, config_path):
        result = _invoke(config_path, "menu", input="2\n6\n1\n7\n3\n")
        assert result.exit_code == 0
        assert load_config(config_path).ui_language == "zh-CN"
        assert "退出" in result.output

    def test_process_last_path(self, mods_tree, config_path):
        save_config(AppConfig(request_delay=0.0, last_selected_path=str(mods_tree)), config_path)
        with patch(
            "abouttranslator.cli.create_backend",
            return_value=(DummyBackend(), "dummy"),
        ):
            result = _invoke(config_path, "menu", input="1\n1\n3\n")
        assert result.exit_code == 0
        text = (mods_tree / "ModA" / "About" / "about.xml").read_text(encoding="utf-8")
        assert "[ZH-CN] Hello World" in text

    def test_process_invalid_path(self, tmp_path, config_path):
        result = _invoke(config_path, "menu", input=f"1\n2\n{tmp_path / 'nope'}\n3\n")
        assert result.exit_code == 0
        assert "Path is invalid or does not exist." in result.output

    def test_process_without_api_key(self, mods_tree, config_path):
        save_config(AppConfig(request_delay=0.0, last_selected_path=str(mods_tree)), config_path)
        result = _invoke(
            config_path, "menu", input="1\n1\n3\n", env={"ABOUTTRANSLATOR_API_KEY": ""},
        )
        assert result.exit_code == 0
        assert "API key required" in result.output

    def test_process_uses_env_api_key(self, mods_tree, config_path):
        save_config(AppConfig(request_delay=0.0, last_selected_path=str(mods_tree)), config_path)
        seen: list[str] = []

        def fake_backend(name, cfg):
            seen.append(cfg.api_key)
            return DummyBackend(), "dummy"

        with patch("abouttranslator.cli.create_backend", side_effect=fake_backend):
            result = _invoke(
                config_path, "menu", input="1\n1\n3\n",
                env={"ABOUTTRANSLATOR_API_KEY": "sk-from-env"},
            )
        assert result.exit_code == 0
        assert seen == ["sk-from-env"]
        assert load_config(config_path).api_key == ""
