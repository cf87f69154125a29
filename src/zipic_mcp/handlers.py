from __future__ import annotations

"""Quick and advanced compression handlers."""

import logging
from typing import Any, List, Mapping, Optional, Union

from .dispatcher import Dispatcher
from .encoder import DEFAULT_SCHEME, build_uri, encode
from .exceptions import (
    ApplicationUnavailable,
    DispatchRejected,
    EncodingFailure,
    ValidationError,
)
from .guard import CapabilityGuard
from .models import AdvancedRequest, QuickRequest, ToolResult
from .paths import predict_output_paths
from .validation import validate_advanced, validate_quick

logger = logging.getLogger(__name__)

DEFAULT_INSTALL_URL = "https://zipic.app"


class CompressionService:
    """
    Turn compression requests into a single deep-link dispatch.

    Every call returns a :class:`ToolResult`. Unavailability, validation,
    encoding and dispatch failures come back as error results rather than
    exceptions.
    """

    def __init__(
        self,
        guard: CapabilityGuard,
        dispatcher: Dispatcher,
        *,
        scheme: str = DEFAULT_SCHEME,
        install_url: str = DEFAULT_INSTALL_URL,
    ) -> None:
        self.guard = guard
        self.dispatcher = dispatcher
        self.scheme = scheme
        self.install_url = install_url

    @property
    def unavailable_message(self) -> str:
        return f"Error: Zipic app is not installed. Please install Zipic from {self.install_url}"

    def quick_compress(self, request: Union[QuickRequest, Mapping[str, Any]]) -> ToolResult:
        """Compress with default settings, saving outputs beside the originals."""
        try:
            self._ensure_available()
            validated = validate_quick(request)
            outputs = predict_output_paths(validated.targets)
            self._send(validated)
        except ApplicationUnavailable:
            return ToolResult.error(self.unavailable_message)
        except ValidationError as exc:
            return ToolResult.error(f"Error: {exc}")
        except EncodingFailure as exc:
            logger.error("%s", exc)
            return ToolResult.error("Error: Unable to create a valid URL")
        except DispatchRejected:
            return ToolResult.error("Error: Unable to open Zipic app.")

        return self._summarize("quick", outputs)

    def advanced_compress(self, request: Union[AdvancedRequest, Mapping[str, Any]]) -> ToolResult:
        """Compress with explicit level, format, placement and sizing options."""
        try:
            self._ensure_available()
            validated = validate_advanced(request)
            outputs = predict_output_paths(
                validated.targets,
                validated.directory,
                use_default_directory=validated.use_default_directory,
            )
            self._send(validated)
        except ApplicationUnavailable:
            return ToolResult.error(self.unavailable_message)
        except ValidationError as exc:
            return ToolResult.error(f"Error: {exc}")
        except EncodingFailure as exc:
            logger.error("%s", exc)
            return ToolResult.error("Error: Unable to create a valid URL")
        except DispatchRejected:
            return ToolResult.error("Error: Unable to open Zipic app.")

        note = None
        if validated.use_default_directory:
            note = "\nImages will be saved to Zipic's default directory."
        return self._summarize("advanced", outputs, note)

    def _ensure_available(self) -> None:
        if not self.guard.is_available():
            logger.warning("Zipic is not installed; request not sent")
            raise ApplicationUnavailable(self.unavailable_message)

    def _send(self, request: Union[QuickRequest, AdvancedRequest]) -> None:
        uri = build_uri(encode(request), self.scheme)
        logger.info("Dispatching %s", uri)
        if not self.dispatcher.dispatch(uri):
            logger.warning("Dispatch of %s was rejected", uri)
            raise DispatchRejected(uri)

    @staticmethod
    def _summarize(kind: str, outputs: List[str], note: Optional[str] = None) -> ToolResult:
        segments = [f"Successfully launched Zipic for {kind} image compression."]
        if outputs:
            segments.append("\nExpected output paths:")
            segments.extend(f"\n- {path}" for path in outputs)
        elif note:
            segments.append(note)
        return ToolResult(segments=tuple(segments))


__all__ = ["DEFAULT_INSTALL_URL", "CompressionService"]
