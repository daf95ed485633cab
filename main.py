from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

import typer
from InquirerPy import inquirer
from InquirerPy.base.control import Choice

from experiments.plots import (
    PlotSaveConfig,
    plot_metric_summary,
    plot_readability_distribution,
    plot_weekly_trend,
)
from experiments.readability import run_readability
from experiments.similarity import run_similarity
from politext.corpus import DfmConfig
from politext.datahub import DEFAULT_RAW_ROOT, download_dataset, get_dataset_config, load_documents
from politext.metrics import available_metrics, default_metrics, select_metrics
from politext.metrics.registry import MetricFamily

app = typer.Typer()


def _resolve_metrics(names: Optional[Sequence[str]], family: MetricFamily, interactive: bool) -> Sequence[str]:
    if interactive:
        defaults = default_metrics(family)
        names = inquirer.checkbox(
            message=f"Select {family} metrics:",
            choices=[Choice(name, enabled=name in defaults) for name in available_metrics(family)],
        ).execute()
    try:
        return select_metrics(names, family)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _save_config(
    plots_root: Optional[Path],
    experiment: str,
    plots_tag: Optional[str],
    save_static: bool,
    save_html: bool,
) -> Optional[PlotSaveConfig]:
    if not plots_root:
        return None
    tag = plots_tag or datetime.utcnow().strftime("%Y%m%d-%H%M%S")
    config = PlotSaveConfig(
        base_dir=plots_root,
        experiment=experiment,
        run_tag=tag,
        save_static=save_static,
        save_html=save_html,
    )
    print(f"[plots] Saving figures under {config.run_dir}")
    return config


@app.command()
def download(
    dataset: str = typer.Option("cabinet_tweets", "--dataset", help="Dataset key (cabinet_tweets, eu_speeches)."),
    url: Optional[str] = typer.Option(None, "--url", help="Remote CSV location."),
    raw_root: Path = typer.Option(
        DEFAULT_RAW_ROOT,
        "--raw-root",
        file_okay=False,
        dir_okay=True,
        help="Directory to store raw corpora.",
    ),
    force: bool = typer.Option(False, "--force", help="Redownload even if the file exists."),
) -> None:
    """
    Fetch a raw corpus CSV into the local data directory.
    """
    try:
        download_dataset(dataset, raw_root=raw_root, url=url, force=force)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def similarity(
    dataset: str = typer.Option("cabinet_tweets", "--dataset", help="Dataset key to analyse."),
    path: Optional[Path] = typer.Option(None, "--path", help="Explicit CSV path overriding the dataset file."),
    raw_root: Path = typer.Option(DEFAULT_RAW_ROOT, "--raw-root", help="Directory holding raw corpora."),
    reference: Optional[str] = typer.Option(
        None,
        "--reference",
        help="Author every other author is compared with (defaults to the dataset's Prime Minister).",
    ),
    metric: Optional[List[str]] = typer.Option(None, "--metric", help="Pairwise metric; repeat for several."),
    interactive: bool = typer.Option(False, "--interactive", help="Pick metrics from a checklist."),
    by_week: bool = typer.Option(False, "--by-week", help="Compare author-weeks with the reference's week."),
    week_start: int = typer.Option(0, "--week-start", min=0, max=6, help="First weekday (Monday=0)."),
    weighting: str = typer.Option("count", "--weighting", help="DFM weighting: count, prop or boolean."),
    keep_stopwords: bool = typer.Option(False, "--keep-stopwords", help="Skip English stop-word removal."),
    plots_root: Optional[Path] = typer.Option(None, "--plots-root", help="Directory where plots are saved."),
    plots_tag: Optional[str] = typer.Option(None, "--plots-tag", help="Folder suffix for this run."),
    save_static: bool = typer.Option(True, help="Write static PNG snapshots when saving plots."),
    save_html: bool = typer.Option(True, help="Write interactive HTML plots when saving."),
    show: bool = typer.Option(True, help="Open figures when they are not saved."),
) -> None:
    """
    Compare each author's texts with the reference author's under every selected metric.
    """
    metrics = _resolve_metrics(metric, "pairwise", interactive)
    reference_author = reference or get_dataset_config(dataset)["reference_author"]
    if not reference_author:
        raise typer.BadParameter(f"Dataset '{dataset}' has no default reference; pass --reference.")

    dfm_config = DfmConfig(remove_stopwords=not keep_stopwords, weighting=weighting)  # type: ignore[arg-type]
    try:
        dfm_config.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    documents = load_documents(dataset, root=raw_root, path=path)
    run = run_similarity(
        documents,
        reference=reference_author,
        metrics=metrics,
        dfm_config=dfm_config,
        by_week=by_week,
        week_start=week_start,
    )
    print(run.summary.to_string(index=False))

    save_config = _save_config(plots_root, "similarity", plots_tag, save_static, save_html)
    plot_metric_summary(
        run.summary,
        title=f"Similarity to {reference_author}",
        save_to=save_config.for_plot("similarity_summary") if save_config else None,
        show=show,
    )
    if by_week:
        plot_weekly_trend(
            run.records,
            reference_author,
            save_to=save_config.for_plot("weekly_trend") if save_config else None,
            show=show,
        )


@app.command()
def readability(
    dataset: str = typer.Option("eu_speeches", "--dataset", help="Dataset key to analyse."),
    path: Optional[Path] = typer.Option(None, "--path", help="Explicit CSV path overriding the dataset file."),
    raw_root: Path = typer.Option(DEFAULT_RAW_ROOT, "--raw-root", help="Directory holding raw corpora."),
    metric: Optional[List[str]] = typer.Option(None, "--metric", help="Readability formula; repeat for several."),
    interactive: bool = typer.Option(False, "--interactive", help="Pick formulas from a checklist."),
    plots_root: Optional[Path] = typer.Option(None, "--plots-root", help="Directory where plots are saved."),
    plots_tag: Optional[str] = typer.Option(None, "--plots-tag", help="Folder suffix for this run."),
    save_static: bool = typer.Option(True, help="Write static PNG snapshots when saving plots."),
    save_html: bool = typer.Option(True, help="Write interactive HTML plots when saving."),
    show: bool = typer.Option(True, help="Open figures when they are not saved."),
) -> None:
    """
    Score every document's readability and summarise the scores per author.
    """
    metrics = _resolve_metrics(metric, "readability", interactive)
    documents = load_documents(dataset, root=raw_root, path=path)
    run = run_readability(documents, metrics)
    print(run.summary.to_string(index=False))

    save_config = _save_config(plots_root, "readability", plots_tag, save_static, save_html)
    plot_metric_summary(
        run.summary,
        title="Readability per speaker",
        save_to=save_config.for_plot("readability_summary") if save_config else None,
        show=show,
    )
    plot_readability_distribution(
        run.records,
        save_to=save_config.for_plot("readability_distribution") if save_config else None,
        show=show,
    )


if __name__ == "__main__":
    app()
