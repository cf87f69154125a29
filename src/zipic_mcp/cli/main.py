import logging
from pathlib import Path
from typing import Optional

import typer

from zipic_mcp import APP_NAME, __version__
from zipic_mcp.config import Config
from zipic_mcp.logging_utils import configure_logging, set_library_log_level
from zipic_mcp.server import run_stdio

from .config_commands import config_app

app = typer.Typer(
    help=(
        f"{APP_NAME} - An image compression server for MCP.\n\n"
        "This MCP server provides image compression capabilities, enabling quick "
        "and advanced image compression through MCP tools. Run without a command "
        "to serve on stdio."
    ),
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(config_app, name="config")


def version_callback(value: bool):
    if value:
        typer.echo(f"{APP_NAME} version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Path to write logs. If not set, logs are not written to file.",
        resolve_path=True,
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable verbose (DEBUG level) logging.",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "-v",
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information and exit.",
    ),
):
    """
    Zipic MCP server entry point.
    Configures logging, then either runs a subcommand or serves the tools.
    """
    if ctx.obj is None:
        ctx.obj = {}

    config = Config()
    if log_file:
        config.update_from_cli("log_file", str(log_file))
    if verbose:
        config.update_from_cli("verbose", True)

    resolved_verbose = bool(config.get("verbose", False))
    level = logging.DEBUG if resolved_verbose else logging.INFO
    resolved_log_file = config.get("log_file")

    # stdout carries the protocol stream, so console logs go to stderr.
    set_library_log_level(level, add_basic_handler=True)
    if resolved_log_file:
        configure_logging(Path(resolved_log_file).expanduser().resolve(), level)

    ctx.obj["config"] = config
    ctx.obj["verbose"] = resolved_verbose

    if ctx.invoked_subcommand is not None:
        return

    try:
        run_stdio(config)
    except KeyboardInterrupt:
        raise typer.Exit()
    except Exception as e:
        typer.secho(f"Error starting server: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
