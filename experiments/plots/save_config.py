"""Shared configuration for storing Plotly figures on disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import plotly.graph_objects as go


@dataclass(frozen=True)
class PlotDestination:
    """Resolved destinations for saving a single figure."""

    directory: Path
    slug: str
    save_static: bool
    save_html: bool

    @property
    def png_path(self) -> Path:
        return self.directory / f"{self.slug}.png"

    @property
    def html_path(self) -> Path:
        return self.directory / f"{self.slug}.html"


@dataclass(frozen=True)
class PlotSaveConfig:
    """Factory for per-figure destinations under ``<base_dir>/<experiment>/<run_tag>``."""

    base_dir: Path
    experiment: str
    run_tag: str
    save_static: bool = True
    save_html: bool = True

    @property
    def run_dir(self) -> Path:
        return self.base_dir / self.experiment / self.run_tag

    def for_plot(self, slug: str) -> PlotDestination:
        return PlotDestination(
            directory=self.run_dir,
            slug=slug,
            save_static=self.save_static,
            save_html=self.save_html,
        )


def emit_figure(fig: go.Figure, save_to: Optional[PlotDestination], show: bool = True) -> None:
    """Write ``fig`` to its destination, or display it when no destination is given."""
    if save_to is None:
        if show:
            fig.show()
        return

    save_to.directory.mkdir(parents=True, exist_ok=True)
    if save_to.save_static:
        fig.write_image(str(save_to.png_path), engine="kaleido")
    if save_to.save_html:
        fig.write_html(str(save_to.html_path), include_plotlyjs="cdn", full_html=True)


__all__ = ["PlotDestination", "PlotSaveConfig", "emit_figure"]
