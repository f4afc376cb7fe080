"""Command line entry point for running and preparing the Person API."""

import typer
from rich.console import Console
from rich.panel import Panel

console = Console()

app = typer.Typer(
    help="Person API - serve the HTTP API and manage its database",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command(name="init-db")
def init_db() -> None:
    """Create the person tables in the configured database."""
    from src.person_api.runtime.init_db import init_db as create_tables

    url = create_tables()
    console.print(f"[green]✓[/green] Tables created in [cyan]{url}[/cyan]")


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Host to bind (defaults to config)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Run the API under uvicorn."""
    import uvicorn

    from src.person_api.runtime.context import get_config

    app_config = get_config().app
    bind_host = host or app_config.host
    bind_port = port or app_config.port

    console.print(
        Panel.fit(
            f"[bold green]Starting Person API[/bold green] on {bind_host}:{bind_port}",
            border_style="green",
        )
    )
    uvicorn.run(
        "src.person_api.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        access_log=False,  # request logging happens in the middleware
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
