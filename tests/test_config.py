from pathlib import Path

import pytest
import yaml

from zipic_mcp import config as cfg


def test_defaults(patched_config_paths: Path) -> None:
    conf = cfg.Config()
    val, src = conf.get_with_source("scheme")
    assert val == "zipic"
    assert src == cfg.SOURCE_DEFAULT
    assert conf.get("bundle_id") == "studio.5km.zipic"
    assert conf.get("log_file") is None


def test_user_config_override(patched_config_paths: Path) -> None:
    user_file = cfg.USER_CONFIG_PATH
    user_file.parent.mkdir(parents=True, exist_ok=True)
    user_file.write_text(yaml.dump({"scheme": "zipic-beta", "unknown": "ignored"}))

    conf = cfg.Config()
    assert conf.get("scheme") == "zipic-beta"
    assert conf.get_with_source("scheme")[1] == cfg.SOURCE_USER_CONFIG
    assert conf.get("unknown") is None


def test_local_config_overrides_user(patched_config_paths: Path) -> None:
    user_file = cfg.USER_CONFIG_PATH
    user_file.parent.mkdir(parents=True, exist_ok=True)
    user_file.write_text(yaml.dump({"open_command": "user-open"}))
    cfg.LOCAL_CONFIG_PATH.write_text(yaml.dump({"open_command": "local-open"}))

    conf = cfg.Config()
    assert conf.get("open_command") == "local-open"
    assert conf.get_with_source("open_command")[1] == cfg.SOURCE_LOCAL_CONFIG


def test_env_var_override(monkeypatch: pytest.MonkeyPatch, patched_config_paths: Path) -> None:
    monkeypatch.setenv(cfg.ENV_VAR_PREFIX + "BUNDLE_ID", "com.example.zipic")
    monkeypatch.setenv(cfg.ENV_VAR_PREFIX + "VERBOSE", "yes")

    conf = cfg.Config()
    assert conf.get("bundle_id") == "com.example.zipic"
    assert conf.get_with_source("bundle_id")[1].startswith(cfg.SOURCE_ENV_VAR)
    assert conf.get("verbose") is True


def test_invalid_yaml_is_skipped(patched_config_paths: Path, capsys) -> None:
    cfg.LOCAL_CONFIG_PATH.write_text("scheme: [unclosed")
    conf = cfg.Config()
    assert conf.get("scheme") == "zipic"
    assert "Error loading config" in capsys.readouterr().err


def test_update_from_cli(patched_config_paths: Path) -> None:
    conf = cfg.Config()
    conf.update_from_cli("verbose", "true")
    conf.update_from_cli("log_file", None)
    assert conf.get_with_source("verbose") == (True, cfg.SOURCE_CLI)
    assert conf.get_with_source("log_file") == (None, cfg.SOURCE_DEFAULT)


def test_all_with_sources_lists_every_key(patched_config_paths: Path) -> None:
    assert set(cfg.Config().get_all_with_sources()) == set(cfg.DEFAULT_CONFIG)
