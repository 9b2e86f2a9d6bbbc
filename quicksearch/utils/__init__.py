# Quicksearch Utilities Package
"""
Shared utility functions and helpers for the Quicksearch provider.
"""

from .helpers import is_valid_url, load_settings

__all__ = ["is_valid_url", "load_settings"]
