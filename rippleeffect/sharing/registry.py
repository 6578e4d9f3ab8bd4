"""Mini README: Registry of share providers.

Structure:
    * ShareProviderRegistry - maps provider names to ``ShareProvider``
      classes and instantiates them with configuration options.

Built-in providers register themselves on import. Third-party packages can
publish providers through the ``rippleeffect.share_providers`` entry point
group; ``discover_plugins`` loads and registers them.
"""

from __future__ import annotations

from typing import Dict, Iterable, Type

from .base import ShareProvider
from ..logging_utils import get_logger
from ..utils.plugin_loader import load_entry_point_plugins

LOGGER = get_logger(__name__)

PLUGIN_GROUP = "rippleeffect.share_providers"


class ShareProviderRegistry:
    """Simple registry for mapping provider identifiers to classes."""

    def __init__(self) -> None:
        self._providers: Dict[str, Type[ShareProvider]] = {}

    def register(self, provider: Type[ShareProvider]) -> Type[ShareProvider]:
        """Register a provider class; usable as a class decorator."""

        identifier = provider.provider_name.lower()
        LOGGER.debug("Registering share provider '%s'", identifier)
        self._providers[identifier] = provider
        return provider

    def available_providers(self) -> Iterable[str]:
        """Return iterable of provider identifiers for display."""

        return sorted(self._providers.keys())

    def create(self, identifier: str, **options: object) -> ShareProvider:
        """Instantiate a provider matching the identifier."""

        provider_cls = self._providers.get(identifier.lower())
        if not provider_cls:
            raise KeyError(f"Unknown share provider '{identifier}'")
        LOGGER.info("Creating share provider '%s'", identifier)
        return provider_cls(**options)

    def discover_plugins(self, group: str = PLUGIN_GROUP) -> int:
        """Register provider classes published through entry points."""

        registered = 0
        for plugin in load_entry_point_plugins(group):
            if isinstance(plugin, type) and issubclass(plugin, ShareProvider):
                self.register(plugin)
                registered += 1
            else:
                LOGGER.warning("Ignoring entry point %r: not a ShareProvider subclass", plugin)
        return registered


REGISTRY = ShareProviderRegistry()
