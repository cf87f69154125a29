from __future__ import annotations

"""Delivery of request URIs to the application registered for their scheme."""

import logging
import subprocess
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

DEFAULT_OPEN_COMMAND = "open"


class Dispatcher(ABC):
    """Interface for handing a request URI to the host."""

    @abstractmethod
    def dispatch(self, uri: str) -> bool:
        """Return ``True`` when the host accepted ``uri`` for delivery."""


class OpenCommandDispatcher(Dispatcher):
    """Pass the URI to the host's ``open`` command in a single attempt."""

    def __init__(self, command: str = DEFAULT_OPEN_COMMAND) -> None:
        self.command = command

    def dispatch(self, uri: str) -> bool:
        try:
            completed = subprocess.run(
                [self.command, uri],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            logger.warning("Could not run %s: %s", self.command, exc)
            return False
        if completed.returncode != 0:
            logger.warning(
                "%s rejected the request (status %s): %s",
                self.command,
                completed.returncode,
                completed.stderr.strip(),
            )
            return False
        return True


__all__ = ["DEFAULT_OPEN_COMMAND", "Dispatcher", "OpenCommandDispatcher"]
