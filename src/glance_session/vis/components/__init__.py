from .cards import DatasetCard, PanelCard
from .views import AppView, BrowserWarning, DatasetPanels, LandingView

__all__ = [
    "DatasetCard",
    "PanelCard",
    "AppView",
    "BrowserWarning",
    "DatasetPanels",
    "LandingView",
]
