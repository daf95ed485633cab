"""Faceted point-range chart for per-author metric summaries."""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.express as px

from .save_config import PlotDestination, emit_figure


def plot_metric_summary(
    summary: pd.DataFrame,
    title: str,
    save_to: Optional[PlotDestination] = None,
    show: bool = True,
) -> None:
    """Plot mean ± 95% CI per author, one facet per metric."""
    df = summary.dropna(subset=["mean"])
    if df.empty:
        return

    df = df.assign(
        err_plus=df["upper"] - df["mean"],
        err_minus=df["mean"] - df["lower"],
    ).sort_values(["metric", "mean"])

    fig = px.scatter(
        df,
        x="mean",
        y="group",
        facet_col="metric",
        facet_col_wrap=3,
        error_x="err_plus",
        error_x_minus="err_minus",
        hover_data=["n", "sd"],
        title=title,
        labels={"mean": "Mean (95% CI)", "group": "Author"},
    )
    # Metrics live on different scales.
    fig.update_xaxes(matches=None, showticklabels=True)
    fig.for_each_annotation(lambda annotation: annotation.update(text=annotation.text.split("=")[-1]))
    emit_figure(fig, save_to, show=show)
