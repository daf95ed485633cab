"""Box plots of per-document readability scores."""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.express as px

from politext.metrics.readability import scale_direction

from .save_config import PlotDestination, emit_figure


def _facet_title(metric: str) -> str:
    return f"{metric} ({scale_direction(metric)})"


def plot_readability_distribution(
    records: pd.DataFrame,
    save_to: Optional[PlotDestination] = None,
    show: bool = True,
) -> None:
    df = records.dropna(subset=["value"])
    if df.empty:
        return

    fig = px.box(
        df.sort_values(["metric", "author"]),
        x="value",
        y="author",
        facet_col="metric",
        facet_col_wrap=2,
        points="outliers",
        title="Readability per document",
        labels={"value": "Score", "author": "Speaker"},
    )
    fig.update_xaxes(matches=None, showticklabels=True)
    fig.for_each_annotation(lambda annotation: annotation.update(text=_facet_title(annotation.text.split("=")[-1])))
    emit_figure(fig, save_to, show=show)
