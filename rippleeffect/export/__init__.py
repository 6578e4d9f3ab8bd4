"""Mini README: Export utilities for Ripple Effect reports.

Exposes the renderers that turn a compiled report into ``.txt`` and
``.csv`` artefacts and the dispatcher that hands those artefacts to a share
provider.
"""

from .serializer import (
    Artifact,
    build_artifacts,
    build_text_artifact,
    render_csv,
    render_text_document,
    sanitize_file_stem,
)
from .dispatcher import ExportDispatcher, ShareRequest, is_valid_recipient

__all__ = [
    "Artifact",
    "ExportDispatcher",
    "ShareRequest",
    "build_artifacts",
    "build_text_artifact",
    "is_valid_recipient",
    "render_csv",
    "render_text_document",
    "sanitize_file_stem",
]
