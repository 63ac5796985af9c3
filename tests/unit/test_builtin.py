"""
Built-in payload tests
"""

from pktprobe.core.payloads.builtin import (
    DEFAULT_PAYLOADS,
    DNS_VERSION_BIND_AND_A_QUERY,
    SIP_OPTIONS,
    SNMP_GET_PUBLIC,
    BuiltinPayload,
    bootstrap,
    create_default_registry,
)
from pktprobe.core.payloads.registry import PayloadRegistry
from pktprobe.core.payloads.template_parser import parse_template_text


class TestDefaultPayloads:
    def test_exactly_three_ports(self):
        registry = create_default_registry()
        assert registry.ports() == [53, 161, 5060]
        for record in registry:
            assert record.length > 0
            assert record.source_port is None

    def test_snmp_payload(self):
        record = create_default_registry().lookup(161)
        assert record.length == 57
        assert record.data == SNMP_GET_PUBLIC[:57]
        assert b"public" in record.data

    def test_dns_payload_holds_both_queries(self):
        record = create_default_registry().lookup(53)
        assert record.data == DNS_VERSION_BIND_AND_A_QUERY
        assert b"\x07version\x04bind\x00" in record.data
        assert b"\x03www\x05yahoo\x03com\x00" in record.data

    def test_sip_payload_stops_before_nul(self):
        record = create_default_registry().lookup(5060)
        assert record.data.startswith(b"OPTIONS sip:carol@chicago.com SIP/2.0\r\n")
        assert record.data.endswith(b"Content-Length: 0\r\n")
        assert b"\x00" not in record.data
        assert record.length == len(SIP_OPTIONS) - 1

    def test_bootstrap_counts_new_ports(self):
        registry = PayloadRegistry()
        assert bootstrap(registry) == len(DEFAULT_PAYLOADS)
        assert bootstrap(registry) == 0
        assert len(registry) == 3

    def test_template_overrides_builtin(self):
        registry = create_default_registry()
        parse_template_text('udp 161 "custom"', registry)
        assert registry.lookup(161).data == b"custom"
        assert len(registry) == 3


class TestBuiltinPayload:
    def test_length_prefix(self):
        assert BuiltinPayload(port=1, data=b"abcdef", length=3).payload() == b"abc"

    def test_nul_terminated(self):
        assert BuiltinPayload(port=1, data=b"ab\x00cd", nul_terminated=True).payload() == b"ab"

    def test_custom_table(self):
        registry = create_default_registry((BuiltinPayload(port=7, data=b"\r\n", source_port=7),))
        assert registry.ports() == [7]
        assert registry.lookup(7).source_port == 7
