"""Line chart of weekly similarity to the reference author."""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.express as px

from .save_config import PlotDestination, emit_figure


def plot_weekly_trend(
    records: pd.DataFrame,
    reference: str,
    save_to: Optional[PlotDestination] = None,
    show: bool = True,
) -> None:
    df = records.dropna(subset=["value", "week"])
    if df.empty:
        return

    df = df.sort_values(["metric", "author", "week"])
    fig = px.line(
        df,
        x="week",
        y="value",
        color="author",
        facet_col="metric",
        facet_col_wrap=2,
        markers=True,
        title=f"Weekly similarity to {reference}",
        labels={"week": "Week", "value": "Score", "author": "Author"},
    )
    fig.update_yaxes(matches=None, showticklabels=True)
    fig.for_each_annotation(lambda annotation: annotation.update(text=annotation.text.split("=")[-1]))
    emit_figure(fig, save_to, show=show)
