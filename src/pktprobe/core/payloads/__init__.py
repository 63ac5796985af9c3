"""
UDP payload templates

Registry of per-port probe payloads plus the ways to fill it: built-in
seeds, text template files and packet captures.
"""

from .builtin import DEFAULT_PAYLOADS, BuiltinPayload, bootstrap, create_default_registry
from .checksum import partial_checksum
from .escapes import decode_c_string, decode_literal, selftest
from .loader import LoadReport, PayloadLoader
from .models import IngestResult, PayloadBuffer, PayloadRecord
from .pcap_extractor import PcapPayloadExtractor, read_pcap_payloads
from .registry import PayloadRegistry
from .template_parser import TemplateParser, parse_template_text, read_template_file
from .writer import encode_c_string, format_templates, write_templates

__all__ = [
    "PayloadRecord",
    "PayloadBuffer",
    "IngestResult",
    "PayloadRegistry",
    "partial_checksum",
    "decode_c_string",
    "decode_literal",
    "selftest",
    "TemplateParser",
    "read_template_file",
    "parse_template_text",
    "PcapPayloadExtractor",
    "read_pcap_payloads",
    "BuiltinPayload",
    "DEFAULT_PAYLOADS",
    "bootstrap",
    "create_default_registry",
    "encode_c_string",
    "format_templates",
    "write_templates",
    "PayloadLoader",
    "LoadReport",
]
