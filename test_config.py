"""
Tests for the configuration and logging setup.
"""
import os
import sys
import json
import logging
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

from reversi.config import Config, BoardConfig, get_default_config
from reversi.logger import setup_logger


def test_default_config():
    config = get_default_config()
    assert config.project_name == "Reversi"
    assert config.board.size == 8
    assert config.logging.log_level == "INFO"
    assert not config.logging.log_to_file


def test_config_round_trip(tmp_path):
    """Test saving and loading a config."""
    config = Config(board=BoardConfig(size=6))
    config.logging.log_level = "DEBUG"

    test_path = tmp_path / "nested" / "config.json"
    config.save(str(test_path))
    assert test_path.exists()

    loaded_config = Config.load(str(test_path))
    assert loaded_config.to_dict() == config.to_dict()
    assert loaded_config.board.size == 6


def test_partial_config_uses_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"board": {"size": 10}}))
    config = Config.load(str(path))
    assert config.board.size == 10
    assert config.logging.log_dir == "logs"


def test_unknown_config_key(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"board": {"width": 10}}))
    with pytest.raises(TypeError):
        Config.load(str(path))


def test_logger_console_only():
    config = get_default_config()
    root = logging.getLogger()
    before = list(root.handlers)

    session = setup_logger(config)
    assert session.console in root.handlers
    assert session.log_file is None

    session.close()
    assert root.handlers == before


def test_logger_writes_file(tmp_path):
    config = get_default_config()
    config.logging.log_to_file = True
    config.logging.log_dir = str(tmp_path)
    config.logging.log_level = "debug"

    session = setup_logger(config)
    logging.getLogger("reversi.test").debug("hello from the test")
    session.close()

    assert os.path.dirname(session.log_file) == session.run_dir
    with open(session.log_file) as f:
        assert "hello from the test" in f.read()


def test_logger_rejects_unknown_level():
    config = get_default_config()
    config.logging.log_level = "LOUD"
    with pytest.raises(ValueError):
        setup_logger(config)


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
