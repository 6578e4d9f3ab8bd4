"""Mini README: Interactive interfaces (web/CLI) for Ripple Effect.

Exports the FastAPI application factory that serves the accounting and
saved-report workflows. Future interface modules should live alongside
this module.
"""

from .web_app import create_application

__all__ = ["create_application"]
