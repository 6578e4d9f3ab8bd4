"""Mini README: Share subsystem package initialiser.

Re-exports the outcome types, the provider interface and the registry.
The package is divided into ``base`` for abstractions, ``registry`` for
plugin management, ``message`` for email composition and ``providers`` for
the built-in integrations.
"""

from .base import Failure, FailureKind, Outcome, ShareProvider, Success
from .registry import REGISTRY, ShareProviderRegistry
from . import providers  # noqa: F401  # ensure built-in providers register on import

__all__ = [
    "Failure",
    "FailureKind",
    "Outcome",
    "REGISTRY",
    "ShareProvider",
    "ShareProviderRegistry",
    "Success",
]
