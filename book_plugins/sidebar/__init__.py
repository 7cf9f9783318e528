"""Navigation panel model and handler of the ``sidebar-style`` plugin."""

from .annotator import SidebarAnnotator
from .panel import NavigationPanel, PanelState

__all__ = ["NavigationPanel", "PanelState", "SidebarAnnotator"]
