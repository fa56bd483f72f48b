"""Tests for the `focusrest config` commands."""

from __future__ import annotations

import json
import re

from typer.testing import CliRunner

from focusrest.config import get_config_manager
from focusrest.main import app
from focusrest.utils.exit_codes import ERROR_INVALID_ARGS

runner = CliRunner()


def strip_ansi(text: str) -> str:
    ansi = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")
    return ansi.sub("", text)


class TestConfigView:
    def test_table(self):
        result = runner.invoke(app, ["config", "view"])
        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        assert "timer.poll_interval_ms" in output
        assert "keys.quit_word" in output

    def test_json(self):
        result = runner.invoke(app, ["config", "view", "-o", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["keys"]["focus"] == "f"

    def test_yaml(self):
        result = runner.invoke(app, ["config", "view", "-o", "yaml"])
        assert result.exit_code == 0
        assert "poll_interval_ms: 100" in result.stdout


class TestConfigGet:
    def test_existing_key(self):
        result = runner.invoke(app, ["config", "get", "keys.pause"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "p"

    def test_missing_key(self):
        result = runner.invoke(app, ["config", "get", "keys.nope"])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert "not found" in strip_ansi(result.stdout)


class TestConfigSet:
    def test_set_int(self):
        result = runner.invoke(app, ["config", "set", "timer.poll_interval_ms", "250"])
        assert result.exit_code == 0
        assert get_config_manager().get("timer.poll_interval_ms") == 250

    def test_set_bool(self):
        result = runner.invoke(app, ["config", "set", "display.show_help", "false"])
        assert result.exit_code == 0
        assert get_config_manager().get("display.show_help") is False

    def test_set_with_profile(self):
        result = runner.invoke(
            app, ["config", "set", "keys.quit_word", "exit", "--profile", "work"]
        )
        assert result.exit_code == 0
        assert get_config_manager("work").get("keys.quit_word") == "exit"
        assert get_config_manager().get("keys.quit_word") == "quit"

    def test_digit_key_binding(self):
        result = runner.invoke(app, ["config", "set", "keys.focus", "1"])
        assert result.exit_code == 0
        assert get_config_manager().get("keys.focus") == "1"

    def test_digit_quit_word(self):
        result = runner.invoke(app, ["config", "set", "keys.quit_word", "1234"])
        assert result.exit_code == 0
        assert get_config_manager().get("keys.quit_word") == "1234"

    def test_non_numeric_int_rejected(self):
        result = runner.invoke(app, ["config", "set", "timer.poll_interval_ms", "fast"])
        assert result.exit_code == ERROR_INVALID_ARGS

    def test_invalid_value(self):
        result = runner.invoke(app, ["config", "set", "keys.focus", "r"])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert "Invalid value" in strip_ansi(result.stdout)

    def test_unknown_key(self):
        result = runner.invoke(app, ["config", "set", "timer.speed", "2"])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert "Unknown configuration key" in strip_ansi(result.stdout)


class TestConfigReset:
    def test_reset_key_with_yes(self):
        get_config_manager().set("keys.quit_word", "exit")
        result = runner.invoke(app, ["config", "reset", "keys.quit_word", "--yes"])
        assert result.exit_code == 0
        assert get_config_manager().get("keys.quit_word") == "quit"

    def test_reset_cancelled(self):
        get_config_manager().set("keys.quit_word", "exit")
        result = runner.invoke(app, ["config", "reset"], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled" in strip_ansi(result.stdout)
        assert get_config_manager().get("keys.quit_word") == "exit"

    def test_reset_confirmed(self):
        get_config_manager().set("keys.quit_word", "exit")
        result = runner.invoke(app, ["config", "reset"], input="y\n")
        assert result.exit_code == 0
        assert get_config_manager().get("keys.quit_word") == "quit"

    def test_reset_unknown_key(self):
        result = runner.invoke(app, ["config", "reset", "nope", "-y"])
        assert result.exit_code == ERROR_INVALID_ARGS


class TestConfigList:
    def test_no_profiles(self):
        result = runner.invoke(app, ["config", "list"])
        assert result.exit_code == 0
        assert "No profiles found" in strip_ansi(result.stdout)

    def test_marks_current_profile(self):
        get_config_manager("default").save_config()
        get_config_manager("work").save_config()
        result = runner.invoke(app, ["config", "list", "--profile", "work"])
        lines = strip_ansi(result.stdout).split()
        assert lines == ["default", "work", "*"]
