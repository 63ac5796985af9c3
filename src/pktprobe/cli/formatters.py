#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CLI output formatting
"""

from typing import Iterable

import typer

from ..core.payloads.loader import LoadReport
from ..core.payloads.models import PayloadRecord

ERROR_ICON = "❌"
WARNING_ICON = "⚠️"
SUCCESS_ICON = "✅"
INFO_ICON = "ℹ️"

PREVIEW_BYTES = 16


def format_source_port(record: PayloadRecord) -> str:
    return "-" if record.source_port is None else str(record.source_port)


def format_preview(data: bytes, limit: int = PREVIEW_BYTES) -> str:
    preview = data[:limit].hex(" ")
    return preview + (" ..." if len(data) > limit else "")


def format_summary_table(records: Iterable[PayloadRecord]):
    """One line per record: port, length, checksum, source port, first bytes"""
    typer.echo(f"{'PORT':>5}  {'LEN':>5}  {'XSUM':>6}  {'SRC':>5}  DATA")
    for record in records:
        typer.echo(
            f"{record.port:>5}  {record.length:>5}  0x{record.checksum:04x}  "
            f"{format_source_port(record):>5}  {format_preview(record.data)}"
        )


def format_load_report(report: LoadReport, verbose: bool = False):
    """Per-source results; failures always, successes when verbose"""
    for result in report.results:
        if not result.success:
            typer.echo(f"{ERROR_ICON} {result.source}: {result.error}", err=True)
            continue
        if verbose:
            typer.echo(f"{SUCCESS_ICON} {result}", err=True)
        for warning in result.warnings:
            typer.echo(f"{WARNING_ICON} {warning}", err=True)

    if verbose and report.trimmed:
        typer.echo(f"{INFO_ICON} Trimmed {report.trimmed} payloads outside the target ports", err=True)
