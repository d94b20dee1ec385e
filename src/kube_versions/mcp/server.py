"""MCP stdio server exposing the version analyzer as tools.

Tools:

``analyze_versions``
    Classify every pod, container image and Helm release.
``compare_versions``
    Compare two versions of one component.
``get_outdated_components``
    Only the outdated components of an analysis.
``get_cluster_info``
    API server version, nodes and object totals.
``get_pods`` / ``get_helm_releases``
    Raw collaborator listings.

Transport: stdio (read from stdin, write to stdout).  Logging must go to
stderr while the server runs.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Awaitable, Callable

from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from kube_versions import __version__
from kube_versions.core.analyzer import VersionAnalyzer
from kube_versions.core.cluster_store import ClusterStore
from kube_versions.core.errors import KubeVersionsError
from kube_versions.core.release_store import ReleaseStore
from kube_versions.core.workload_store import WorkloadStore

logger = logging.getLogger(__name__)

_SERVER_NAME = "kube-versions"
_COMPARE_ARGS = ("component", "currentVersion", "targetVersion")

_NAMESPACE_PROP = {
    "type": "string",
    "description": "Namespace to inspect. Omit to include all namespaces.",
}

TOOLS: list[Tool] = [
    Tool(
        name="get_cluster_info",
        description="Kubernetes server version, node kubelet/OS/runtime versions, namespaces and pod/service totals.",
        inputSchema={"type": "object", "properties": {}, "additionalProperties": False},
    ),
    Tool(
        name="analyze_versions",
        description=(
            "Analyze the versions of pods, container images and Helm releases in the "
            "cluster. Returns components with status, severity, a summary and recommendations."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "namespace": _NAMESPACE_PROP,
                "component": {
                    "type": "string",
                    "description": "Only analyze pods/releases whose name contains this text.",
                },
            },
            "additionalProperties": False,
        },
    ),
    Tool(
        name="compare_versions",
        description="Compare a component's current version with a target version.",
        inputSchema={
            "type": "object",
            "properties": {
                "component": {"type": "string", "description": "Component name."},
                "currentVersion": {"type": "string", "description": "Currently deployed version."},
                "targetVersion": {"type": "string", "description": "Version to compare against."},
            },
            "required": ["component", "currentVersion", "targetVersion"],
            "additionalProperties": False,
        },
    ),
    Tool(
        name="get_outdated_components",
        description="List only the components that are behind the latest known version.",
        inputSchema={
            "type": "object",
            "properties": {"namespace": _NAMESPACE_PROP},
            "additionalProperties": False,
        },
    ),
    Tool(
        name="get_pods",
        description="List pods with their images and labels.",
        inputSchema={
            "type": "object",
            "properties": {
                "namespace": _NAMESPACE_PROP,
                "selector": {"type": "string", "description": "Label selector, e.g. 'app=web'."},
            },
            "additionalProperties": False,
        },
    ),
    Tool(
        name="get_helm_releases",
        description="List installed Helm releases.",
        inputSchema={
            "type": "object",
            "properties": {
                "namespace": _NAMESPACE_PROP,
                "status": {"type": "string", "description": "Release status, e.g. 'deployed' or 'failed'."},
            },
            "additionalProperties": False,
        },
    ),
]


def _text(payload: Any) -> list[TextContent]:
    return [TextContent(type="text", text=json.dumps(payload, indent=2))]


def _error(code: str, detail: str) -> list[TextContent]:
    return _text({"isError": True, "error": code, "detail": detail})


class MCPServer:
    """MCP stdio server wrapping the version analyzer and cluster stores."""

    def __init__(
        self,
        analyzer: VersionAnalyzer,
        workloads: WorkloadStore,
        releases: ReleaseStore,
        cluster: ClusterStore,
    ) -> None:
        self._analyzer = analyzer
        self._workloads = workloads
        self._releases = releases
        self._cluster = cluster
        self._server = Server(_SERVER_NAME)
        self._handlers: dict[str, Callable[[dict[str, Any]], Awaitable[list[TextContent]]]] = {
            "get_cluster_info": self._handle_get_cluster_info,
            "analyze_versions": self._handle_analyze_versions,
            "compare_versions": self._handle_compare_versions,
            "get_outdated_components": self._handle_get_outdated_components,
            "get_pods": self._handle_get_pods,
            "get_helm_releases": self._handle_get_helm_releases,
        }
        self._register_handlers()

    def _register_handlers(self) -> None:
        @self._server.list_tools()
        async def _list_tools() -> list[Tool]:
            return TOOLS

        @self._server.call_tool()
        async def _call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
            return await self.dispatch(name, arguments or {})

    async def dispatch(self, name: str, args: dict[str, Any]) -> list[TextContent]:
        handler = self._handlers.get(name)
        if handler is None:
            return _error("UNKNOWN_TOOL", f"Unknown tool: {name}")
        try:
            return await handler(args)
        except KubeVersionsError as e:
            logger.error("Tool %s failed: %s", name, e)
            return _error("COLLECTION_ERROR", str(e))
        except Exception as e:
            logger.exception("Tool %s raised unexpectedly", name)
            return _error("INTERNAL_ERROR", str(e))

    async def _handle_get_cluster_info(self, args: dict[str, Any]) -> list[TextContent]:
        info = await asyncio.to_thread(self._cluster.cluster_info)
        return _text(info.to_dict())

    async def _handle_analyze_versions(self, args: dict[str, Any]) -> list[TextContent]:
        analysis = await asyncio.to_thread(
            self._analyzer.analyze_versions,
            args.get("namespace"),
            args.get("component"),
        )
        return _text(analysis.to_dict())

    async def _handle_compare_versions(self, args: dict[str, Any]) -> list[TextContent]:
        missing = [k for k in _COMPARE_ARGS if k not in args]
        if missing:
            return _error("INVALID_ARGUMENTS", f"Missing required argument(s): {', '.join(missing)}")
        wrong_type = [k for k in _COMPARE_ARGS if not isinstance(args[k], str)]
        if wrong_type:
            return _error("INVALID_ARGUMENTS", f"Argument(s) must be strings: {', '.join(wrong_type)}")
        result = self._analyzer.compare_versions(
            args["component"], args["currentVersion"], args["targetVersion"],
        )
        return _text(result.to_dict())

    async def _handle_get_outdated_components(self, args: dict[str, Any]) -> list[TextContent]:
        outdated = await asyncio.to_thread(self._analyzer.get_outdated_components, args.get("namespace"))
        return _text([c.to_dict() for c in outdated])

    async def _handle_get_pods(self, args: dict[str, Any]) -> list[TextContent]:
        pods = await asyncio.to_thread(
            self._workloads.list_workloads, args.get("namespace"), args.get("selector"),
        )
        return _text([p.to_dict() for p in pods])

    async def _handle_get_helm_releases(self, args: dict[str, Any]) -> list[TextContent]:
        releases = await asyncio.to_thread(
            self._releases.list_package_releases, args.get("namespace"), args.get("status"),
        )
        return _text([r.to_dict() for r in releases])

    async def start(self) -> None:
        """Run the MCP server until stdin is closed."""
        logger.info("Starting %s MCP server %s", _SERVER_NAME, __version__)
        init_options = InitializationOptions(
            server_name=_SERVER_NAME,
            server_version=__version__,
            capabilities=self._server.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={},
            ),
        )
        async with stdio_server() as (read_stream, write_stream):
            await self._server.run(read_stream, write_stream, init_options)
        logger.info("MCP server stopped")
