"""Main CLI implementation using Typer."""

from pathlib import Path
from typing import Any, Callable, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from floki.errors import FlokiError
from floki.models.config import FlokiConfig, load_config
from floki.providers.image import DEFAULT_EXECUTABLE, ImageProvider
from floki.utils.logging import setup_logging


# Create Typer app
app = typer.Typer(
    name="floki-image",
    help="Resolve and obtain the container image of a floki environment",
    add_completion=False,
)

# Console for rich output
console = Console()

DEFAULT_CONFIG = Path("floki.yaml")


def _run_cli_command(handler: Callable[..., Any], **kwargs: Any):
    """Helper to run a CLI command with error handling."""
    try:
        return handler(**kwargs)
    except (FlokiError, ValidationError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def _load(config: Path, log_level: Optional[str]) -> FlokiConfig:
    """Load the config; an explicit --log-level beats the configured one."""
    loaded = load_config(config)
    setup_logging(log_level or loaded.tool.log_level)
    return loaded


def resolve_image(config: Path, log_level: Optional[str] = None) -> None:
    loaded = _load(config, log_level)
    console.print(loaded.image.name(), markup=False, highlight=False, soft_wrap=True)


def obtain_image(config: Path, log_level: Optional[str] = None) -> None:
    loaded = _load(config, log_level)
    provider = ImageProvider.from_config(loaded.tool)
    floki_root = config.resolve().parent
    name = loaded.image.obtain_image(floki_root, provider)
    console.print(name, markup=False, highlight=False, soft_wrap=True)


def pull_image(name: str, executable: str) -> None:
    ImageProvider(executable).pull(name)
    console.print(f"[green]Pulled[/green] {name}")


def check_image(name: str, executable: str) -> None:
    if ImageProvider(executable).exists(name):
        console.print(f"[green]present[/green] {name}")
    else:
        console.print(f"[yellow]absent[/yellow] {name}")
        raise typer.Exit(1)


@app.command("resolve")
def resolve_command(
    config: Path = typer.Option(
        DEFAULT_CONFIG, "--config", "-c", help="Configuration file"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="Logging level"
    ),
):
    """Print the image name without building anything."""
    _run_cli_command(resolve_image, config=config, log_level=log_level)


@app.command("obtain")
def obtain_command(
    config: Path = typer.Option(
        DEFAULT_CONFIG, "--config", "-c", help="Configuration file"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="Logging level"
    ),
):
    """Build the image if the configuration asks for it, then print its name."""
    _run_cli_command(obtain_image, config=config, log_level=log_level)


@app.command("pull")
def pull_command(
    name: str = typer.Argument(..., help="Image name to pull"),
    executable: str = typer.Option(
        DEFAULT_EXECUTABLE, "--executable", "-e", help="Image tool to run"
    ),
    log_level: str = typer.Option("WARNING", "--log-level", "-l", help="Logging level"),
):
    """Pull an image."""
    setup_logging(log_level)
    _run_cli_command(pull_image, name=name, executable=executable)


@app.command("exists")
def exists_command(
    name: str = typer.Argument(..., help="Image name"),
    executable: str = typer.Option(
        DEFAULT_EXECUTABLE, "--executable", "-e", help="Image tool to run"
    ),
    log_level: str = typer.Option("WARNING", "--log-level", "-l", help="Logging level"),
):
    """Check whether an image is available locally; exits 1 when absent."""
    setup_logging(log_level)
    _run_cli_command(check_image, name=name, executable=executable)


def main():
    """Main entry point for CLI."""
    app()
