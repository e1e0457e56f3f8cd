import asyncio

import typer
from rich.console import Console

serve_app = typer.Typer(help="Start servers.")
console = Console()


@serve_app.command("api")
def api(
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:
    """Start the FastAPI REST API server."""
    import uvicorn

    from kontent_dashboard.api.app import create_app

    app = create_app()
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port)


@serve_app.command("mcp")
def mcp(
    transport: str = "stdio",
) -> None:
    """Start the MCP server."""
    from kontent_dashboard.cli.common import get_context
    from kontent_dashboard.mcp.server import create_mcp_server

    ctx = get_context()
    server = create_mcp_server(ctx)

    async def _serve() -> None:
        try:
            await server.run_async(transport=transport)  # type: ignore[arg-type]
        finally:
            await ctx.dispose()

    console.print(f"[green]Starting MCP server (transport: {transport})[/green]")
    asyncio.run(_serve())
