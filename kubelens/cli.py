"""Command-line entry point for kubelens."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from kubelens.app import KubelensApp
from kubelens.constants.enums import ResourceKind
from kubelens.models.state.app_settings import AppSettings
from kubelens.models.state.config_manager import (
    ConfigLoadError,
    ConfigManager,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)

app = typer.Typer(help="Live overview of Kubernetes resources in the terminal.")


def _configure_logging(log_file: Optional[Path], level: str) -> None:
    # The terminal belongs to the UI, so logs only go to a file when asked.
    if log_file is None:
        logging.basicConfig(level=logging.CRITICAL, handlers=[logging.NullHandler()])
        return
    logging.basicConfig(
        filename=str(log_file),
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_settings(config: Optional[Path]) -> AppSettings:
    try:
        return ConfigManager.load(config)
    except ConfigLoadError as exc:
        typer.secho(f"{exc}; using defaults", fg=typer.colors.YELLOW, err=True)
        return AppSettings()


@app.command()
def run(
    context: Optional[str] = typer.Option(
        None, "--context", help="kubectl context to use instead of the current one."
    ),
    namespace: Optional[str] = typer.Option(
        None, "--namespace", "-n", help="Namespace to show."
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Settings file (YAML)."
    ),
    show_completed: Optional[bool] = typer.Option(
        None,
        "--show-completed/--hide-completed",
        help="Show pods whose phase is Succeeded.",
    ),
    save: bool = typer.Option(
        False, "--save", help="Persist the effective settings before starting."
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write logs to this file."
    ),
    log_level: str = typer.Option("INFO", "--log-level", help="Log level for --log-file."),
) -> None:
    """Start the interactive overview."""
    _configure_logging(log_file, log_level)
    settings = _load_settings(config)
    overrides = {
        "context": context,
        "namespace": namespace,
        "show_completed_pods": show_completed,
    }
    settings = settings.model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )
    if save:
        try:
            saved = ConfigManager.save(settings, config)
        except ConfigSaveError as exc:
            typer.secho(str(exc), fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1) from exc
        typer.echo(f"Settings saved to {saved}")

    logger.info("Starting kubelens (context=%s, namespace=%s)", settings.context, settings.namespace)
    KubelensApp(settings=settings, config_path=config).run()


@app.command()
def kinds() -> None:
    """List the resource kinds the overview can show."""
    for kind in ResourceKind:
        typer.echo(kind.value)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
