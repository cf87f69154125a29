from __future__ import annotations

"""Checks for whether the Zipic application is present on the host."""

import logging
import subprocess
import sys
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

DEFAULT_BUNDLE_ID = "studio.5km.zipic"


class CapabilityGuard(ABC):
    """Interface for application availability checks."""

    @abstractmethod
    def is_available(self) -> bool:
        """Return ``True`` when the application can receive requests."""


class BundleRegistryGuard(CapabilityGuard):
    """Look the application up in the macOS registry by bundle identifier."""

    def __init__(self, bundle_id: str = DEFAULT_BUNDLE_ID, mdfind: str = "mdfind") -> None:
        self.bundle_id = bundle_id
        self.mdfind = mdfind

    def is_available(self) -> bool:
        if sys.platform != "darwin":
            logger.debug("Application registry lookup is only supported on macOS")
            return False
        query = f"kMDItemCFBundleIdentifier == '{self.bundle_id}'"
        try:
            completed = subprocess.run(
                [self.mdfind, query],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            logger.warning("Could not query application registry: %s", exc)
            return False
        if completed.returncode != 0:
            logger.warning(
                "Application registry query exited with status %s", completed.returncode
            )
            return False
        found = bool(completed.stdout.strip())
        logger.debug("Bundle %s available: %s", self.bundle_id, found)
        return found


__all__ = ["DEFAULT_BUNDLE_ID", "CapabilityGuard", "BundleRegistryGuard"]
