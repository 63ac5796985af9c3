"""
Template writer tests
"""

import io

from pktprobe.core.payloads.builtin import create_default_registry
from pktprobe.core.payloads.registry import PayloadRegistry
from pktprobe.core.payloads.template_parser import parse_template_text, read_template_file
from pktprobe.core.payloads.writer import encode_c_string, format_templates, write_templates
from pktprobe.core.ports import PortSet


class TestEncodeCString:
    def test_printable_text_is_kept(self):
        assert encode_c_string(b"OPTIONS sip:x") == '"OPTIONS sip:x"'

    def test_special_bytes_are_escaped(self):
        assert encode_c_string(b'a"\\\x00\xff\r') == '"a\\x22\\x5c\\x00\\xff\\x0d"'

    def test_empty(self):
        assert encode_c_string(b"") == '""'


class TestFormatTemplates:
    def test_record_layout(self):
        registry = PayloadRegistry()
        registry.insert(PortSet.single(123), b"\xe3\x00", source_port=123)
        assert format_templates(registry) == 'udp 123\n "\\xe3\\x00"\nsource 123\n\n'

    def test_empty_registry(self):
        assert format_templates(PayloadRegistry()) == ""

    def test_output_parses_back(self):
        original = create_default_registry()
        original.insert(PortSet([(7, 9)]), b'quote " and \\ backslash', source_port=0x1234)

        reparsed = PayloadRegistry()
        result = parse_template_text(format_templates(original), reparsed)

        assert result.success
        assert reparsed.records() == original.records()


class TestWriteTemplates:
    def test_write_to_path(self, temp_dir):
        path = temp_dir / "out.txt"
        registry = create_default_registry()
        write_templates(registry, path)

        reparsed = PayloadRegistry()
        assert read_template_file(path, reparsed).success
        assert reparsed.ports() == [53, 161, 5060]

    def test_write_to_stream(self):
        stream = io.StringIO()
        registry = PayloadRegistry()
        registry.insert(PortSet.single(9), b"hi")
        write_templates(registry, stream)
        assert stream.getvalue() == 'udp 9\n "hi"\n\n'
