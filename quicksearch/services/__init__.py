# Quicksearch Services Package
"""
Host-facing services for the Quicksearch provider.

Services wrap the desktop environment: opening URIs, icons and
cancellation tokens.
"""

from .host import DesktopHost, Host, Icon, get_default_host

__all__ = ["DesktopHost", "Host", "Icon", "get_default_host"]
