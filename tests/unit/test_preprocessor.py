"""
Frame preprocessor tests
"""

from scapy.layers.dns import DNS, DNSQR
from scapy.layers.inet import ICMP, IP, TCP, UDP
from scapy.layers.l2 import ARP, Ether
from scapy.packet import Raw

from pktprobe.common.enums import FrameKind
from pktprobe.core.capture.preprocessor import preprocess_frame

from conftest import DST_MAC, SRC_MAC, ether_ip


class TestPreprocessFrame:
    def test_udp_frame(self):
        data = bytes(ether_ip() / UDP(sport=40000, dport=1234) / Raw(b"hello"))
        parsed = preprocess_frame(data)

        assert parsed.found is FrameKind.UDP
        assert parsed.is_udp
        assert parsed.port_src == 40000
        assert parsed.port_dst == 1234
        assert parsed.app_offset == 42
        assert parsed.app_length == 5
        assert data[parsed.app_offset : parsed.app_offset + parsed.app_length] == b"hello"

    def test_dns_frame(self):
        data = bytes(ether_ip() / UDP(sport=53, dport=33000) / DNS(qd=DNSQR(qname="example.org")))
        parsed = preprocess_frame(data)
        assert parsed.found is FrameKind.DNS
        assert parsed.is_udp
        assert parsed.app_length == len(data) - 42

    def test_non_udp_frames(self):
        tcp = preprocess_frame(bytes(ether_ip() / TCP(dport=80)))
        icmp = preprocess_frame(bytes(ether_ip() / ICMP()))
        assert tcp.found is FrameKind.TCP
        assert icmp.found is FrameKind.ICMP
        assert not tcp.is_udp
        assert not icmp.is_udp

    def test_frame_without_ip(self):
        arp = Ether(src=SRC_MAC, dst=DST_MAC) / ARP(psrc="192.0.2.1", pdst="192.0.2.2")
        assert preprocess_frame(bytes(arp)) is None

    def test_raw_ip_link_layer(self):
        data = bytes(IP(src="192.0.2.1", dst="192.0.2.2") / UDP(dport=161) / Raw(b"\x30\x00"))
        parsed = preprocess_frame(data, IP)
        assert parsed.app_offset == 28
        assert parsed.app_length == 2

    def test_truncated_frame_uses_available_bytes(self):
        data = bytes(ether_ip() / UDP(dport=7) / Raw(b"x" * 20))[:50]
        parsed = preprocess_frame(data)
        assert parsed.app_length == 8
