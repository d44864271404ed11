"""Live event feeds used to pre-seed emergency searches."""

from layersearch.feeds.hurricane import Storm, category_from_wind, fetch_active_hurricanes
from layersearch.feeds.wildfire import Wildfire, fetch_active_wildfires

__all__ = [
    "Storm",
    "Wildfire",
    "category_from_wind",
    "fetch_active_hurricanes",
    "fetch_active_wildfires",
]
