"""Options shared by the kver commands."""

from __future__ import annotations

import typer

OutputOption = typer.Option("table", "--output", "-o", help="Output format (table, json or yaml)")
NamespaceOption = typer.Option(None, "--namespace", "-n", help="Limit to one namespace (default: all namespaces)")
ContextOption = typer.Option(None, "--context", help="kubeconfig context to use")
ComponentOption = typer.Option(None, "--component", "-c", help="Only pods/releases whose name contains this text")
SelectorOption = typer.Option(None, "--selector", "-l", help="Pod label selector, e.g. app=web")
