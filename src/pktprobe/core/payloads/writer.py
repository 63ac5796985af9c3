"""
Template writer

Renders registry records back into the text template format so a merged
registry can be inspected or saved and loaded again.
"""

from pathlib import Path
from typing import Iterable, List, TextIO, Union

from ...common.constants import FileConstants, TemplateConstants
from .models import PayloadRecord


def encode_c_string(data: bytes) -> str:
    """Quote ``data`` as a template string literal

    Printable ASCII is kept as is; quotes, backslashes and every other byte
    become two-digit ``\\xNN`` escapes.
    """
    parts = [TemplateConstants.QUOTE]
    for value in data:
        char = chr(value)
        if 0x20 <= value < 0x7F and char not in (TemplateConstants.QUOTE, TemplateConstants.ESCAPE):
            parts.append(char)
        else:
            parts.append(f"\\x{value:02x}")
    parts.append(TemplateConstants.QUOTE)
    return "".join(parts)


def format_record(record: PayloadRecord) -> List[str]:
    lines = [
        f"{TemplateConstants.PROTOCOL_MARKER} {record.port}",
        f" {encode_c_string(record.data)}",
    ]
    if record.source_port is not None:
        lines.append(f"{TemplateConstants.SOURCE_KEYWORD} {record.source_port}")
    lines.append("")
    return lines


def format_templates(records: Iterable[PayloadRecord]) -> str:
    """Text for every record, in the order given"""
    lines: List[str] = []
    for record in records:
        lines.extend(format_record(record))
    return "\n".join(lines) + ("\n" if lines else "")


def write_templates(records: Iterable[PayloadRecord], target: Union[str, Path, TextIO]):
    """Write records to a path or an open text stream"""
    text = format_templates(records)
    if isinstance(target, (str, Path)):
        with open(target, "w", encoding=FileConstants.TEMPLATE_ENCODING) as f:
            f.write(text)
    else:
        target.write(text)
