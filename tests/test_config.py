import logging

from config.config import Config
from utils.logging import set_log_level, setup_logger


def _write_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "api:\n"
        "  port: 9000\n"
        "data_source:\n"
        "  use_local: false\n"
        "selection:\n"
        "  cap_policy: ignore\n"
    )
    return str(path)


def test_yaml_values_and_defaults(tmp_path, monkeypatch):
    for var in ("API_PORT", "USE_LOCAL_DATA", "SELECTION_CAP_POLICY", "SUPABASE_URL", "SUPABASE_KEY"):
        monkeypatch.delenv(var, raising=False)

    cfg = Config(_write_config(tmp_path))

    assert cfg.get_api_config()["port"] == 9000
    assert cfg.get_api_config()["host"] == "0.0.0.0"
    assert cfg.get_data_source_config()["use_local"] is False
    assert cfg.get_selection_config() == {"cap_policy": "ignore"}
    assert cfg.get_supabase_config() is None
    assert cfg.get("missing.key", "fallback") == "fallback"


def test_environment_overrides_yaml(tmp_path, monkeypatch):
    monkeypatch.setenv("API_PORT", "8123")
    monkeypatch.setenv("USE_LOCAL_DATA", "true")
    monkeypatch.setenv("SELECTION_CAP_POLICY", "REJECT")
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("SUPABASE_KEY", "anon")

    cfg = Config(_write_config(tmp_path))

    assert cfg.get_api_config()["port"] == 8123
    assert cfg.get_data_source_config()["use_local"] is True
    assert cfg.get_selection_config()["cap_policy"] == "reject"
    supabase = cfg.get_supabase_config()
    assert supabase["url"] == "https://example.supabase.co"
    assert supabase["tables"]["options"] == "product_options"


def test_invalid_environment_values_are_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("API_PORT", "eighty")
    monkeypatch.setenv("SELECTION_CAP_POLICY", "sometimes")

    cfg = Config(_write_config(tmp_path))

    assert cfg.get_api_config()["port"] == 9000
    assert cfg.get_selection_config()["cap_policy"] == "ignore"


def test_missing_config_file_gives_empty_config(tmp_path, monkeypatch):
    monkeypatch.delenv("API_PORT", raising=False)
    cfg = Config(str(tmp_path / "nope.yaml"))
    assert cfg.get_api_config()["port"] == 8000


def test_set_nested_value(tmp_path):
    cfg = Config(_write_config(tmp_path))
    cfg.set("selection.cap_policy", "reject")
    assert cfg.get("selection.cap_policy") == "reject"


def test_setup_logger_adds_one_handler():
    first = setup_logger("tests.example")
    second = setup_logger("tests.example")

    assert first is second
    assert len(second.handlers) == 1


def test_set_log_level_updates_created_loggers():
    logger = setup_logger("tests.levels")
    try:
        set_log_level("debug")
        assert logger.level == logging.DEBUG
    finally:
        set_log_level("INFO")
    assert logger.level == logging.INFO
