"""Mini README: Core package initializer for the Ripple Effect report centre.

Ripple Effect records expense and sale entries for a small water-sales
business, compiles them into localised summaries, and exports those
summaries as text and CSV attachments through a pluggable share provider.
The package root only exposes the logging helper so importing it stays
cheap; subsystems live in ``finance``, ``reporting``, ``export``,
``sharing`` and ``interface``.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
