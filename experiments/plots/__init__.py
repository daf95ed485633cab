"""Plotting utilities for experiment results."""

from .metric_summary import plot_metric_summary
from .readability_distribution import plot_readability_distribution
from .save_config import PlotDestination, PlotSaveConfig, emit_figure
from .weekly_trend import plot_weekly_trend

__all__ = [
    "PlotDestination",
    "PlotSaveConfig",
    "emit_figure",
    "plot_metric_summary",
    "plot_readability_distribution",
    "plot_weekly_trend",
]
