"""
Host Service - What the provider needs from the desktop it runs in.

The provider never talks to a toolkit directly. It asks its host to:
  - open_uri(uri): hand a URL to the default handler
  - create_cancel_token(): make a Cancellable for a new request
  - create_icon(hint, size): build an icon for a result row

DesktopHost implements this for a plain Linux desktop by spawning an
opener (xdg-open by default) and returning Icon descriptors.
"""

import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass

from loguru import logger

from quicksearch.search.cancellable import Cancellable


@dataclass(frozen=True)
class Icon:
    """Themed icon request, already scaled to device pixels."""
    icon_name: str
    width: int
    height: int


class Host(ABC):
    """Capabilities the search provider depends on."""

    @abstractmethod
    def open_uri(self, uri: str) -> None:
        """Open the URI with the platform default handler."""
        ...

    @abstractmethod
    def create_cancel_token(self) -> Cancellable:
        """Create a fresh token for one request."""
        ...

    @abstractmethod
    def create_icon(self, hint: str, size: int):
        """Build an icon for a symbolic icon name at a logical size."""
        ...


class DesktopHost(Host):
    """
    Host backed by the freedesktop opener and themed icon names.

    Args:
        opener: Command used to open URIs (e.g. "xdg-open")
        scale_factor: Logical-to-device pixel multiplier for icons
    """

    def __init__(self, opener: str = "xdg-open", scale_factor: int = 1):
        self.opener = opener
        self.scale_factor = scale_factor

    @classmethod
    def from_settings(cls, settings: dict) -> "DesktopHost":
        return cls(
            opener=settings["activation"]["opener"],
            scale_factor=settings["icons"]["scale_factor"],
        )

    def open_uri(self, uri: str) -> None:
        try:
            subprocess.Popen(
                [self.opener, uri],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
            logger.debug(f"Opened {uri} with {self.opener}")
        except FileNotFoundError:
            logger.warning(f"{self.opener} not found, cannot open {uri}")

    def create_cancel_token(self) -> Cancellable:
        return Cancellable()

    def create_icon(self, hint: str, size: int) -> Icon:
        scaled = size * self.scale_factor
        return Icon(icon_name=hint, width=scaled, height=scaled)


# Singleton accessor
_default_host_instance = None


def get_default_host() -> DesktopHost:
    """
    Get the shared DesktopHost built from the current settings.

    Returns:
        DesktopHost: The global instance
    """
    global _default_host_instance
    if _default_host_instance is None:
        from quicksearch.utils.helpers import load_settings
        _default_host_instance = DesktopHost.from_settings(load_settings())
    return _default_host_instance
