from .chart import (
    plot_cascade_growth,
    plot_histograms,
    plot_player_bar,
)

__all__ = [
    "plot_cascade_growth",
    "plot_histograms",
    "plot_player_bar",
]
