"""CLI commands for todolist.

In the overall architecture: CLI is the single entry point, registering `serve`
(HTTP API) and the `config` command group.
"""

import json
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from todolist import __logo__, __version__
from todolist.cli.shared.logging_utils import ensure_rotating_log_file
from todolist.cli.shared.network_utils import is_port_in_use
from todolist.config.loader import convert_to_camel, get_config_path, load_config, save_config
from todolist.config.schema import Config, TodoConfig

app = typer.Typer(
    name="todolist",
    help=f"{__logo__} todolist - named to-do tasks over HTTP",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} todolist v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """todolist - named to-do tasks over HTTP."""
    pass


def _load_config_or_exit(config_path: str) -> Config:
    try:
        return load_config(Path(config_path).expanduser() if config_path else None)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def serve(
    host: str = typer.Option("", "--host", "-h", help="Bind host (default from config)"),
    port: int = typer.Option(0, "--port", "-p", help="Bind port (default from config)"),
    max_end_date: str = typer.Option("", "--max-end-date", help="Latest accepted task end date, YYYY-MM-DD"),
    config_path: str = typer.Option("", "--config", "-c", help="Config file (default ~/.todolist/config.json)"),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output"),
):
    """Start the todolist HTTP API."""
    from todolist.api.server import run_server

    config = _load_config_or_exit(config_path)
    if host:
        config.server.host = host
    if port:
        config.server.port = port
    if max_end_date:
        try:
            config.todo = TodoConfig(max_end_date=max_end_date)
        except ValueError as e:
            console.print(f"[red]Invalid --max-end-date:[/red] {escape(str(e))}")
            raise typer.Exit(1)

    host, port = config.server.host, config.server.port
    if is_port_in_use(host, port):
        console.print(
            f"[red]Port {port} is already in use.[/red] "
            f"Close the process using it or pass [cyan]--port[/cyan] (current: {host}:{port})."
        )
        raise typer.Exit(1)

    level = "DEBUG" if verbose else config.logging.level
    if config.logging.file:
        log_path = ensure_rotating_log_file("serve", level=level)
        console.print(f"[dim]Logs: {log_path}[/dim]")

    console.print(f"{__logo__} Starting todolist on {host}:{port} (max end date {config.todo.max_end_date})")
    logger.info("Serving on {}:{}", host, port)
    run_server(config, log_level="debug" if verbose else "warning")


config_app = typer.Typer(help="Show or initialize the config file")
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show(
    config_path: str = typer.Option("", "--config", "-c", help="Config file"),
):
    """Print the effective configuration as JSON."""
    config = _load_config_or_exit(config_path)
    console.print_json(json.dumps(convert_to_camel(config.model_dump())))


@config_app.command("init")
def config_init(
    config_path: str = typer.Option("", "--config", "-c", help="Config file"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
):
    """Write the default configuration file."""
    path = Path(config_path).expanduser() if config_path else get_config_path()
    if path.exists() and not force:
        console.print(f"[yellow]Config already exists at {path}[/yellow] (use --force to overwrite)")
        raise typer.Exit(1)
    save_config(Config(), path)
    console.print(f"[green]✓[/green] Wrote {path}")


if __name__ == "__main__":
    app()
