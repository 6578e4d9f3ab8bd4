"""Mini README: Utility helper functions for Ripple Effect.

Currently exports the entry point loader used by the share provider
registry to discover third-party integrations at runtime.
"""

from .plugin_loader import load_entry_point_plugins

__all__ = ["load_entry_point_plugins"]
