import asyncio

from zipic_mcp import config as cfg
from zipic_mcp.dispatcher import OpenCommandDispatcher
from zipic_mcp.guard import BundleRegistryGuard
from zipic_mcp.server import build_service, create_server


def test_tools_are_registered(service) -> None:
    server = create_server(service)
    tools = asyncio.run(server.list_tools())
    assert sorted(tool.name for tool in tools) == ["advancedCompress", "quickCompress"]


def test_advanced_tool_exposes_request_fields(service) -> None:
    server = create_server(service)
    tools = {tool.name: tool for tool in asyncio.run(server.list_tools())}
    schema = tools["advancedCompress"].inputSchema
    for field in ("targets", "level", "format", "directory", "width", "height", "suffix"):
        assert field in schema["properties"]
    assert schema["required"] == ["targets"]


def test_build_service_uses_config(monkeypatch, patched_config_paths) -> None:
    monkeypatch.setenv(cfg.ENV_VAR_PREFIX + "SCHEME", "zipic-beta")
    monkeypatch.setenv(cfg.ENV_VAR_PREFIX + "OPEN_COMMAND", "xdg-open")

    service = build_service(cfg.Config())

    assert service.scheme == "zipic-beta"
    assert isinstance(service.guard, BundleRegistryGuard)
    assert service.guard.bundle_id == "studio.5km.zipic"
    assert isinstance(service.dispatcher, OpenCommandDispatcher)
    assert service.dispatcher.command == "xdg-open"
