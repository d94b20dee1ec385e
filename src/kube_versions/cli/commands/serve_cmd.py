"""kver serve - Run the MCP stdio server."""

from __future__ import annotations

import asyncio
from typing import Optional

import typer

from kube_versions.cli.options import ContextOption
from kube_versions.cli.wiring import build_services

app = typer.Typer()


@app.callback(invoke_without_command=True)
def serve(context: Optional[str] = ContextOption) -> None:
    """Serve analyze/compare/outdated tools over MCP on stdin/stdout."""
    from kube_versions.mcp.server import MCPServer

    services = build_services(context)
    server = MCPServer(
        analyzer=services.analyzer,
        workloads=services.workloads,
        releases=services.releases,
        cluster=services.cluster,
    )
    asyncio.run(server.start())
