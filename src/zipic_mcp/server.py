from __future__ import annotations

"""MCP tool surface for the compression handlers."""

import logging
from typing import List, Optional, Union

from mcp.server.fastmcp import FastMCP

from . import APP_NAME
from .config import Config
from .dispatcher import OpenCommandDispatcher
from .guard import BundleRegistryGuard
from .handlers import CompressionService

logger = logging.getLogger(__name__)

# Numeric parameters are accepted loosely so the validator can coerce
# strings and report bad input against the field.
Number = Union[int, float, str]

INSTRUCTIONS = (
    "This server provides image compression through the Zipic app, "
    "enabling quick and advanced image compression through MCP tools."
)


def build_service(config: Optional[Config] = None) -> CompressionService:
    """Return a :class:`CompressionService` wired to the host from ``config``."""
    config = config or Config()
    return CompressionService(
        BundleRegistryGuard(config.get("bundle_id")),
        OpenCommandDispatcher(config.get("open_command")),
        scheme=config.get("scheme"),
        install_url=config.get("install_url"),
    )


def create_server(service: CompressionService) -> FastMCP:
    """Register the ``quickCompress`` and ``advancedCompress`` tools."""
    server = FastMCP(APP_NAME, instructions=INSTRUCTIONS)

    @server.tool(
        name="quickCompress",
        description=(
            "Quick image compression without additional options. "
            "Compressed images are saved alongside the originals."
        ),
    )
    def quick_compress(targets: List[str]) -> List[str]:
        """
        Args:
            targets: Paths to compress. Each path points to an image file or directory.
        """
        logger.debug("quickCompress called with %d target(s)", len(targets))
        return list(service.quick_compress({"targets": targets}).segments)

    @server.tool(
        name="advancedCompress",
        description=(
            "Advanced image compression with control over quality level, "
            "output format, output location, size and file naming."
        ),
    )
    def advanced_compress(
        targets: List[str],
        level: Optional[Number] = None,
        format: Optional[str] = None,
        directory: Optional[str] = None,
        width: Optional[Number] = None,
        height: Optional[Number] = None,
        suffix: Optional[str] = None,
        add_subfolder: Optional[bool] = None,
        use_default_directory: bool = False,
    ) -> List[str]:
        """
        Args:
            targets: Paths to compress. Each path points to an image file or directory.
            level: Compression level (1 ~ 6). Higher values mean more compression but lower quality.
            format: Output format: original, jpeg, webp, heic, avif or png.
            directory: Output directory. When omitted, images are saved alongside the originals.
            width: Target width. 0 keeps the aspect ratio.
            height: Target height. 0 keeps the aspect ratio.
            suffix: Suffix appended to compressed file names.
            add_subfolder: Save compressed images in a new subfolder.
            use_default_directory: Use Zipic's default output directory instead of directory.
        """
        logger.debug("advancedCompress called with %d target(s)", len(targets))
        params = {
            "targets": targets,
            "level": level,
            "format": format,
            "directory": directory,
            "width": width,
            "height": height,
            "suffix": suffix,
            "add_subfolder": add_subfolder,
            "use_default_directory": use_default_directory,
        }
        return list(service.advanced_compress(params).segments)

    return server


def run_stdio(config: Optional[Config] = None) -> None:
    """Serve the tools over stdio until the client disconnects."""
    server = create_server(build_service(config))
    logger.info("%s serving on stdio", APP_NAME)
    server.run("stdio")


__all__ = ["build_service", "create_server", "run_stdio"]
