import sys
from pathlib import Path
from typing import List

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from zipic_mcp import config as cfg  # noqa: E402
from zipic_mcp.dispatcher import Dispatcher  # noqa: E402
from zipic_mcp.guard import CapabilityGuard  # noqa: E402
from zipic_mcp.handlers import CompressionService  # noqa: E402


class StubGuard(CapabilityGuard):
    def __init__(self, available: bool = True) -> None:
        self.available = available
        self.calls = 0

    def is_available(self) -> bool:
        self.calls += 1
        return self.available


class RecordingDispatcher(Dispatcher):
    def __init__(self, accept: bool = True) -> None:
        self.accept = accept
        self.uris: List[str] = []

    def dispatch(self, uri: str) -> bool:
        self.uris.append(uri)
        return self.accept


@pytest.fixture
def guard() -> StubGuard:
    return StubGuard()


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def service(guard: StubGuard, dispatcher: RecordingDispatcher) -> CompressionService:
    return CompressionService(guard, dispatcher)


def _patch_paths(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    user_dir = tmp_path / "user"
    local_file = tmp_path / ".zipicmcp.yaml"

    monkeypatch.setattr(cfg, "USER_CONFIG_DIR", user_dir)
    monkeypatch.setattr(cfg, "USER_CONFIG_PATH", user_dir / "config.yaml")
    monkeypatch.setattr(cfg, "LOCAL_CONFIG_PATH", local_file)
    monkeypatch.setattr(
        cfg,
        "SOURCE_USER_CONFIG",
        f"user global config file ({user_dir / 'config.yaml'})",
    )
    monkeypatch.setattr(
        cfg,
        "SOURCE_LOCAL_CONFIG",
        f"local project config file ({local_file})",
    )

    for key in cfg.DEFAULT_CONFIG:
        monkeypatch.delenv(cfg.ENV_VAR_PREFIX + key.upper(), raising=False)


@pytest.fixture
def patched_config_paths(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    _patch_paths(monkeypatch, tmp_path)
    return tmp_path
