"""Command-line interface for component-harvest."""

import asyncio
import logging
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from component_harvest import __version__
from component_harvest.config import AppConfig
from component_harvest.errors import ConfigurationError, HarvestError
from component_harvest.orchestrator import Orchestrator
from component_harvest.transformers import TransformerRegistry

app = typer.Typer(
    name="component-harvest",
    help="Harvest UI component markup into a browsable library.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"component-harvest version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """Component library harvesting tool."""


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _set(data: dict[str, Any], keys: tuple[str, ...], value: Any) -> None:
    """Overlay a command-line value onto the (possibly file-loaded) config data."""
    if value is None:
        return
    *parents, last = keys
    for key in parents:
        data = data.setdefault(key, {})
    data[last] = value


def build_config(
    config_file: Path | None = None,
    **options: Any,
) -> AppConfig:
    """Merge a TOML config file with command-line options into an AppConfig."""
    data: dict[str, Any] = AppConfig.load_toml_data(config_file) if config_file else {}

    _set(data, ("root_url",), options.get("root_url"))
    _set(data, ("max_links",), options.get("max_links"))
    _set(data, ("verbose",), options.get("verbose") or None)
    _set(data, ("extraction", "mode"), options.get("mode"))
    _set(data, ("extraction", "transformers"), options.get("transformers") or None)
    _set(data, ("output", "path"), options.get("output"))
    _set(data, ("output", "build_index"), options.get("build_index"))
    _set(data, ("output", "catalog_json"), options.get("catalog_json"))
    _set(data, ("fetcher", "use_js"), options.get("js"))
    _set(data, ("fetcher", "headless"), options.get("headless"))
    _set(data, ("auth", "email"), options.get("email"))
    _set(data, ("auth", "password"), options.get("password"))
    return AppConfig.from_mapping(data)


@app.command()
def harvest(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML config file; command-line options override its values",
    ),
    root_url: Optional[str] = typer.Option(
        None,
        "--root-url",
        help="Root URL of the component library site",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output directory",
    ),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Extraction mode: 'embedded-framework' or 'source-comment'",
    ),
    transformers: Optional[list[str]] = typer.Option(
        None,
        "--transformer",
        "-t",
        help="Transformer to apply, in order (repeatable)",
    ),
    max_links: Optional[int] = typer.Option(
        None,
        "--max-links",
        help="Maximum listing links to process (0 = all)",
    ),
    build_index: Optional[bool] = typer.Option(
        None,
        "--index/--no-index",
        help="Build browsable index pages after harvesting",
    ),
    catalog_json: Optional[Path] = typer.Option(
        None,
        "--catalog-json",
        help="Also write the assembled catalog as JSON",
    ),
    js: Optional[bool] = typer.Option(
        None,
        "--js/--no-js",
        help="Enable/disable the browser (required for login)",
    ),
    headless: Optional[bool] = typer.Option(
        None,
        "--headless/--headed",
        help="Run the browser without a window",
    ),
    email: Optional[str] = typer.Option(
        None,
        "--email",
        envvar="HARVEST_EMAIL",
        help="Login email",
    ),
    password: Optional[str] = typer.Option(
        None,
        "--password",
        envvar="HARVEST_PASSWORD",
        help="Login password",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    print_config: bool = typer.Option(
        False,
        "--print-config",
        help="Print the effective configuration as TOML (without credentials) and exit",
    ),
):
    """
    Log in, read the component listing and write every component to disk.

    Examples:

        component-harvest harvest -o ./library

        component-harvest harvest -m source-comment -t prefix_src -t add_tailwind_css

        component-harvest harvest -c harvest.toml --index --max-links 5

        component-harvest harvest -m source-comment -t prefix_src --print-config > harvest.toml
    """
    _configure_logging(verbose)

    try:
        config = build_config(
            config_file,
            root_url=root_url,
            output=output,
            mode=mode,
            transformers=transformers,
            max_links=max_links,
            build_index=build_index,
            catalog_json=catalog_json,
            js=js,
            headless=headless,
            email=email,
            password=password,
            verbose=verbose,
        )
        if print_config:
            typer.echo(config.to_toml(), nl=False)
            return
        orchestrator = Orchestrator(config, console)
        asyncio.run(orchestrator.run())
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Harvest cancelled.[/yellow]")
        raise typer.Exit(130)
    except HarvestError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)


@app.command("list-transformers")
def list_transformers():
    """List built-in transformers."""
    table = Table(title="Available Transformers")
    table.add_column("Name", style="cyan")
    table.add_column("Description")

    for name in TransformerRegistry.list_names():
        transformer = TransformerRegistry.get(name)
        doc = (getattr(transformer, "__doc__", None) or "").strip().splitlines()
        table.add_row(name, doc[0] if doc else "")

    console.print(table)


if __name__ == "__main__":
    app()
