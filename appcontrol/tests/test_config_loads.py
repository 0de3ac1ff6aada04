"""Test configuration loading."""

import pytest
import yaml
from pydantic import ValidationError

from appcontrol.core.config_loader import get_nested, load_config, override_from_args, set_nested
from appcontrol.core.config_schema import AppConfig, validate_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("APPCONTROL_ENV", raising=False)
    monkeypatch.delenv("STRICT_CONFIG", raising=False)


def _write_config(directory, data, env=None, env_data=None):
    base = directory / "base.yaml"
    base.write_text(yaml.safe_dump(data), encoding="utf-8")
    if env:
        (directory / "envs").mkdir()
        (directory / "envs" / f"{env}.yaml").write_text(yaml.safe_dump(env_data), encoding="utf-8")
    return base


def test_default_config_parses():
    cfg = load_config()
    assert isinstance(cfg, dict)
    for key in ["title", "triggers", "items", "logging"]:
        assert key in cfg, f"Missing required config key: {key}"


def test_default_config_vocabulary():
    cfg = load_config()
    assert cfg["triggers"]["advance"] == ["down", "next", "forward"]
    assert cfg["triggers"]["dislike"] == ["dislike", "dont like", "do not like"]
    titles = [item["title"] for item in cfg["items"]]
    assert titles[0] == "Dune"
    assert len(titles) == 9
    assert all(item["description"] for item in cfg["items"])


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_empty_file_gets_defaults(tmp_path):
    base = tmp_path / "base.yaml"
    base.write_text("", encoding="utf-8")
    cfg = load_config(base)
    assert cfg["triggers"]["like"] == ["like", "favourite", "heart"]
    assert cfg["items"] == []
    assert cfg["logging"]["level"] == "INFO"


def test_environment_override(tmp_path, monkeypatch):
    base = _write_config(
        tmp_path,
        {"title": "Base", "logging": {"level": "INFO", "backup_count": 5}},
        env="test",
        env_data={"logging": {"level": "DEBUG"}},
    )
    monkeypatch.setenv("APPCONTROL_ENV", "test")

    cfg = load_config(base)
    assert cfg["title"] == "Base"
    assert cfg["logging"]["level"] == "DEBUG"
    assert cfg["logging"]["backup_count"] == 5


def test_env_var_expansion(tmp_path, monkeypatch):
    base = _write_config(tmp_path, {"title": "${APPCONTROL_TEST_TITLE}", "logging": {"file": "$UNSET_VAR_X/a.log"}})
    monkeypatch.setenv("APPCONTROL_TEST_TITLE", "Kiosk")
    monkeypatch.delenv("UNSET_VAR_X", raising=False)

    cfg = load_config(base)
    assert cfg["title"] == "Kiosk"
    assert cfg["logging"]["file"] == "$UNSET_VAR_X/a.log"


def test_partial_triggers_keep_defaults(tmp_path):
    base = _write_config(tmp_path, {"triggers": {"advance": ["onward"]}})
    cfg = load_config(base)
    assert cfg["triggers"]["advance"] == ["onward"]
    assert cfg["triggers"]["retreat"] == ["up", "last", "previous", "back"]


@pytest.mark.parametrize(
    "triggers",
    [
        {"advance": []},
        {"advance": ["  "]},
        {"jump": ["jump"]},
    ],
)
def test_invalid_triggers_rejected(tmp_path, triggers):
    base = _write_config(tmp_path, {"triggers": triggers})
    with pytest.raises(ValidationError):
        load_config(base)


def test_invalid_item_rejected(tmp_path):
    base = _write_config(tmp_path, {"items": [{"title": ""}]})
    with pytest.raises(ValidationError):
        load_config(base)


def test_strict_config_disabled(tmp_path, monkeypatch):
    base = _write_config(tmp_path, {"triggers": {"jump": ["jump"]}})
    monkeypatch.setenv("STRICT_CONFIG", "0")
    cfg = load_config(base)
    assert cfg == {"triggers": {"jump": ["jump"]}}


def test_log_level_case_insensitive():
    config = validate_config({"logging": {"level": "debug"}})
    assert isinstance(config, AppConfig)
    assert config.logging.level == "DEBUG"


def test_nested_helpers():
    config = {"logging": {"level": "INFO"}}
    assert get_nested(config, "logging.level") == "INFO"
    assert get_nested(config, "logging.file", default="x.log") == "x.log"
    assert get_nested(config, "missing.path") is None

    set_nested(config, "logging.file", "app.log")
    set_nested(config, "new.deep.key", 1)
    assert config["logging"] == {"level": "INFO", "file": "app.log"}
    assert config["new"] == {"deep": {"key": 1}}


def test_override_from_args():
    class Args:
        log_level = "warning"
        log_file = None

    config = {"logging": {"level": "INFO"}}
    override_from_args(config, Args())
    assert config["logging"]["level"] == "WARNING"
    assert "file" not in config["logging"]
