"""Command line interface for rcli."""

from .app import app
from .render import SegmentRenderer

__all__ = ["SegmentRenderer", "app"]
