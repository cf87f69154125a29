from __future__ import annotations

"""Request and result models for the compression tools."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


SUPPORTED_FORMATS: Tuple[str, ...] = ("original", "jpeg", "webp", "heic", "avif", "png")
MIN_LEVEL = 1
MAX_LEVEL = 6

# An absolute path to an image file or a directory of images.
CompressionTarget = str


class QuickRequest(BaseModel):
    """Compress ``targets`` with the application's default settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    targets: Tuple[CompressionTarget, ...] = Field(
        ..., description="Paths to compress. Each path is an image file or a directory."
    )


class AdvancedRequest(BaseModel):
    """
    Compress ``targets`` with explicit options.

    Supplying ``directory`` selects custom placement and supplying ``suffix``
    asks for that suffix on every output name; neither has a separate switch.
    Range checks live in :mod:`zipic_mcp.validation` so that every failure is
    reported against the field that caused it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    targets: Tuple[CompressionTarget, ...] = Field(
        ..., description="Paths to compress. Each path is an image file or a directory."
    )
    level: Optional[int] = Field(
        default=None,
        description="Compression level (1 ~ 6). Higher values mean more compression but lower quality.",
    )
    format: Optional[str] = Field(
        default=None,
        description=f"Output format, one of: {', '.join(SUPPORTED_FORMATS)}.",
    )
    directory: Optional[str] = Field(
        default=None,
        description="Directory for compressed images. When absent, outputs are saved beside the originals.",
    )
    width: Optional[int] = Field(
        default=None, description="Target width. 0 keeps the aspect ratio."
    )
    height: Optional[int] = Field(
        default=None, description="Target height. 0 keeps the aspect ratio."
    )
    suffix: Optional[str] = Field(
        default=None, description="Suffix appended to each compressed file name."
    )
    add_subfolder: Optional[bool] = Field(
        default=None, description="Whether to save compressed images in a new subfolder."
    )
    use_default_directory: bool = Field(
        default=False,
        description="Use the application's own output directory setting. Cannot be combined with directory.",
    )

    @field_validator("level", "width", "height", mode="before")
    @classmethod
    def _reject_bool(cls, value: object) -> object:
        # Lax int parsing would otherwise turn ``true`` into 1.
        if isinstance(value, bool):
            raise ValueError("expected a number, got a boolean")
        return value


@dataclass(frozen=True)
class EncodedRequest:
    """Ordered key/value pairs ready to be serialized into a request URI."""

    pairs: Tuple[Tuple[str, str], ...] = ()

    def keys(self) -> list[str]:
        return [key for key, _ in self.pairs]

    def values_for(self, key: str) -> list[str]:
        """Return every value stored under ``key`` in emission order."""
        return [value for k, value in self.pairs if k == key]

    def __iter__(self):
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)


@dataclass(frozen=True)
class ToolResult:
    """Text segments returned to the tool caller."""

    segments: Tuple[str, ...] = field(default_factory=tuple)
    is_error: bool = False

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(segments=(message,), is_error=True)

    @property
    def text(self) -> str:
        return "".join(self.segments)


__all__ = [
    "SUPPORTED_FORMATS",
    "MIN_LEVEL",
    "MAX_LEVEL",
    "CompressionTarget",
    "QuickRequest",
    "AdvancedRequest",
    "EncodedRequest",
    "ToolResult",
]
