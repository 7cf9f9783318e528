"""Page handler of the ``ancre-navigation`` plugin."""

from .annotator import AnchorEntry, PageAnnotator

__all__ = ["AnchorEntry", "PageAnnotator"]
