#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CLI commands

- show:     build the payload registry and print it
- lookup:   print the payload used for one destination port
- selftest: run the template decoder self-test
"""

from pathlib import Path
from typing import List, Optional

import typer

from ..common.exceptions import ConfigurationError, PortSpecError
from ..config import AppConfig, get_app_config
from ..core.payloads.escapes import selftest
from ..core.payloads.loader import LoadReport, PayloadLoader
from ..core.payloads.writer import format_templates
from .formatters import (
    ERROR_ICON,
    SUCCESS_ICON,
    format_load_report,
    format_preview,
    format_source_port,
    format_summary_table,
)


def _load_config(config_path: Optional[Path]) -> AppConfig:
    try:
        return AppConfig.load(config_path) if config_path else get_app_config()
    except ConfigurationError as e:
        typer.echo(f"{ERROR_ICON} {e}", err=True)
        raise typer.Exit(1)


def _build_registry(
    config: AppConfig,
    templates: List[Path],
    captures: List[Path],
    ports: Optional[str],
    no_builtin: bool,
    verbose: bool,
) -> LoadReport:
    if no_builtin:
        config = config.model_copy(deep=True)
        config.payloads.load_builtin_payloads = False

    try:
        report = PayloadLoader(config).load(templates=templates, captures=captures, keep_ports=ports)
    except PortSpecError as e:
        typer.echo(f"{ERROR_ICON} Invalid --ports: {e.message}", err=True)
        raise typer.Exit(1)

    format_load_report(report, verbose)
    return report


def show_command(
    templates: List[Path] = typer.Option([], "--templates", "-t", help="Text payload template file (repeatable)"),
    captures: List[Path] = typer.Option([], "--pcap", "-p", help="pcap/pcapng file to take payloads from (repeatable)"),
    ports: Optional[str] = typer.Option(None, "--ports", help="Keep only these ports, e.g. 53,161,5000-5100"),
    no_builtin: bool = typer.Option(False, "--no-builtin", help="Do not load the built-in payloads"),
    summary: bool = typer.Option(False, "--summary", "-s", help="Print a table instead of template text"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Configuration file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Report every loaded source"),
):
    """Load payloads and print the merged registry"""
    config = _load_config(config_path)
    report = _build_registry(config, templates, captures, ports, no_builtin, verbose)

    if summary:
        format_summary_table(report.registry)
    else:
        typer.echo(format_templates(report.registry), nl=False)

    if not report.success:
        raise typer.Exit(1)


def lookup_command(
    port: int = typer.Argument(..., help="Destination UDP port"),
    templates: List[Path] = typer.Option([], "--templates", "-t", help="Text payload template file (repeatable)"),
    captures: List[Path] = typer.Option([], "--pcap", "-p", help="pcap/pcapng file to take payloads from (repeatable)"),
    no_builtin: bool = typer.Option(False, "--no-builtin", help="Do not load the built-in payloads"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Configuration file"),
):
    """Print the payload that would be sent to PORT"""
    config = _load_config(config_path)
    report = _build_registry(config, templates, captures, None, no_builtin, verbose=False)

    record = report.registry.lookup(port)
    if record is None:
        typer.echo(f"{ERROR_ICON} No payload for port {port & 0xFFFF}", err=True)
        raise typer.Exit(1)

    typer.echo(f"port:        {record.port}")
    typer.echo(f"length:      {record.length}")
    typer.echo(f"checksum:    0x{record.checksum:04x}")
    typer.echo(f"source port: {format_source_port(record)}")
    typer.echo(f"data:        {format_preview(record.data, record.length)}")


def selftest_command():
    """Run the string literal decoder self-test"""
    if not selftest():
        typer.echo(f"{ERROR_ICON} payloads: selftest failed", err=True)
        raise typer.Exit(1)
    typer.echo(f"{SUCCESS_ICON} payloads: selftest passed")
