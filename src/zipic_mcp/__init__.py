"""Zipic MCP server package with lazy loading of submodules."""

from __future__ import annotations

import importlib
from typing import Any

__all__ = [
    "APP_NAME",
    "__version__",
    "QuickRequest",
    "AdvancedRequest",
    "EncodedRequest",
    "ToolResult",
    "CompressionService",
    "encode",
    "build_uri",
    "predict_output_paths",
    "validate",
    "create_server",
]

APP_NAME = "zipic-mcp-server"
__version__ = "0.1.1"

_lazy_map = {
    "QuickRequest": "zipic_mcp.models",
    "AdvancedRequest": "zipic_mcp.models",
    "EncodedRequest": "zipic_mcp.models",
    "ToolResult": "zipic_mcp.models",
    "CompressionService": "zipic_mcp.handlers",
    "encode": "zipic_mcp.encoder",
    "build_uri": "zipic_mcp.encoder",
    "predict_output_paths": "zipic_mcp.paths",
    "validate": "zipic_mcp.validation",
    "create_server": "zipic_mcp.server",
}


def __getattr__(name: str) -> Any:  # pragma: no cover - simple passthrough
    if name in _lazy_map:
        module = importlib.import_module(_lazy_map[name])
        value = getattr(module, name)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - for completeness
    return sorted(list(globals().keys()) + list(_lazy_map.keys()))
