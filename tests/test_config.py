import logging

import pytest

from config import DEFAULT_INPUT, load_settings
from config.logging import ROOT_LOGGER, get_logger, setup_logging


@pytest.fixture
def quiet_tree():
    """Leave the algoviz logger the way the rest of the suite expects it."""
    yield
    setup_logging()


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------
def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_FILE", "LOG_CONSOLE", "PORT", "SEED", "DEBUG", "DEFAULT_INPUT"):
        monkeypatch.delenv(f"ALGOVIZ_{name}", raising=False)
    s = load_settings()

    assert s.log_level == "WARNING"
    assert s.port == 5000
    assert s.seed is None
    assert s.make_rng() is None
    assert s.default_input == DEFAULT_INPUT


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ALGOVIZ_PORT", "8080")
    monkeypatch.setenv("ALGOVIZ_SEED", "7")
    monkeypatch.setenv("ALGOVIZ_LOG_CONSOLE", "yes")
    s = load_settings()

    assert s.port == 8080
    assert s.log_console is True
    assert s.make_rng().random() == s.make_rng().random()


def test_bad_integer_env(monkeypatch):
    monkeypatch.setenv("ALGOVIZ_PORT", "eighty")
    with pytest.raises(ValueError, match="ALGOVIZ_PORT must be an integer"):
        load_settings()


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
def test_get_logger_nests_under_root():
    assert get_logger("engine.recorder").name == "algoviz.engine.recorder"
    assert get_logger("algoviz.main").name == "algoviz.main"
    assert get_logger(ROOT_LOGGER).name == ROOT_LOGGER


def test_no_sinks_installs_null_handler(quiet_tree):
    root = setup_logging(level="ERROR")

    assert root.level == logging.ERROR
    assert [type(h) for h in root.handlers] == [logging.NullHandler]


def test_console_and_file_sinks(quiet_tree, tmp_path):
    log_file = tmp_path / "algoviz.log"
    root = setup_logging(level="debug", log_file=str(log_file), console=True)

    kinds = {type(h) for h in root.handlers}
    assert kinds == {logging.FileHandler, logging.StreamHandler}

    get_logger("graph.graph").info("graph built")
    for h in root.handlers:
        h.flush()
    assert "algoviz.graph.graph: graph built" in log_file.read_text()


def test_file_sink_skipped_above_info(quiet_tree, tmp_path):
    root = setup_logging(level="WARNING", log_file=str(tmp_path / "x.log"))
    assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)


def test_setup_twice_replaces_handlers(quiet_tree):
    setup_logging(console=True)
    root = setup_logging(console=True)
    assert len(root.handlers) == 1


def test_unknown_level_falls_back_to_warning(quiet_tree):
    assert setup_logging(level="chatty").level == logging.WARNING
