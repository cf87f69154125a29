from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from zipic_mcp.config import Config, DEFAULT_CONFIG

config_app = typer.Typer(help="Inspect Zipic MCP server configuration settings.")


@config_app.command(
    "show",
    help="Displays the effective configuration values and their sources.\n\nUsage Examples:\n  zipic-mcp-server config show\n  zipic-mcp-server config show --key scheme",
)
def show_config_command(
    ctx: typer.Context,
    key: Optional[str] = typer.Option(
        None,
        "--key",
        "-k",
        help=f"Specific configuration key to display. Valid keys: {', '.join(DEFAULT_CONFIG.keys())}.",
    ),
) -> None:
    config: Config = ctx.obj["config"]
    console = Console(width=200)
    table = Table(title="Zipic MCP Server Configuration")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Effective Value", style="magenta", overflow="fold")
    table.add_column("Source", style="green", overflow="fold")

    if key:
        if key not in DEFAULT_CONFIG:
            typer.secho(f"Error: Configuration key '{key}' is not a recognized key.", fg=typer.colors.RED, err=True)
            typer.echo("Known configuration keys are:", err=True)
            for known_key in sorted(DEFAULT_CONFIG):
                typer.echo(f"- {known_key}", err=True)
            raise typer.Exit(code=1)
        value, source_info = config.get_with_source(key)
        table.add_row(key, str(value) if value is not None else "Not Set", source_info)
    else:
        for k_val, (value, source_info) in sorted(config.get_all_with_sources().items()):
            table.add_row(k_val, str(value) if value is not None else "Not Set", source_info)

    console.print(table)
