# Area: Shared Tests
"""Tests for the interactive setup_config.py script."""

import importlib.util
import json
from pathlib import Path

import pytest

from rps_duel._config import ENV_MAPPINGS, load_config

SCRIPT = Path(__file__).resolve().parent.parent / "setup_config.py"


@pytest.fixture
def setup_config():
    spec = importlib.util.spec_from_file_location("setup_config", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for env_key in ENV_MAPPINGS:
        monkeypatch.setenv(env_key, "placeholder")
        monkeypatch.delenv(env_key)
    monkeypatch.chdir(tmp_path)


def answers(monkeypatch, *values):
    replies = iter(values)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))


class TestWriters:
    """Tests for write_config_json() and write_env_file()."""

    def test_env_file_round_trips_through_load_config(self, setup_config, tmp_path):
        env_path = tmp_path / ".env"
        setup_config.write_env_file(
            {"move_style": "word", "strict_turns": True, "log_level": "INFO", "log_file": None},
            env_path,
        )
        text = env_path.read_text(encoding="utf-8")
        assert "RPS_MOVE_STYLE=word" in text
        assert "RPS_STRICT_TURNS=true" in text
        assert "RPS_LOG_FILE" not in text

        config = load_config(dotenv_path=str(env_path))
        assert config.move_style == "word"
        assert config.strict_turns is True
        assert config.log_level == "INFO"

    def test_config_json(self, setup_config, tmp_path):
        path = tmp_path / "config.json"
        setup_config.write_config_json({"move_style": "emoji"}, path)
        assert json.loads(path.read_text(encoding="utf-8")) == {"move_style": "emoji"}


class TestMain:
    """Tests for the interactive main()."""

    def test_defaults_write_both_files(self, setup_config, monkeypatch, tmp_path):
        # style, strict, level, log file
        answers(monkeypatch, "", "", "", "")
        assert setup_config.main() == 0

        config = json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))
        assert config == {
            "log_level": "WARNING",
            "log_file": None,
            "move_style": "emoji",
            "strict_turns": False,
        }
        assert (tmp_path / ".env").exists()

    def test_invalid_answers_write_nothing(self, setup_config, monkeypatch, tmp_path):
        answers(monkeypatch, "ascii", "y", "loud", "")
        assert setup_config.main() == 1
        assert not (tmp_path / "config.json").exists()
