"""
Pytest configuration and fixtures for PktProbe tests
"""

import shutil
import tempfile
from pathlib import Path

import pytest
from scapy.layers.dns import DNS, DNSQR
from scapy.layers.inet import ICMP, IP, TCP, UDP
from scapy.layers.l2 import Ether
from scapy.packet import Raw
from scapy.utils import wrpcap

from pktprobe.config import AppConfig

SRC_MAC = "00:11:22:33:44:55"
DST_MAC = "66:77:88:99:aa:bb"
SRC_IP = "192.0.2.10"
DST_IP = "198.51.100.20"


def ether_ip():
    return Ether(src=SRC_MAC, dst=DST_MAC) / IP(src=SRC_IP, dst=DST_IP)


SAMPLE_TEMPLATES = r"""
# Sample payload templates
; semicolon comment
/ slash comment

udp 7 "\r\n\r\n"

udp 53
  "\x00\x00"
  "\x10\x00"
source 0x35

udp 161,162
  "abc" "def"
source 1234
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests"""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    if temp_path.exists():
        shutil.rmtree(temp_path)


@pytest.fixture
def template_file(temp_dir):
    """Template file with the sample records"""
    path = temp_dir / "payloads.txt"
    path.write_text(SAMPLE_TEMPLATES, encoding="utf-8")
    return path


@pytest.fixture
def capture_frames():
    """Mixed frames: two UDP to port 1234, one DNS query, one TCP, one ICMP"""
    return [
        ether_ip() / UDP(sport=40000, dport=1234) / Raw(b"hello"),
        ether_ip() / TCP(sport=40001, dport=80) / Raw(b"GET / HTTP/1.0\r\n\r\n"),
        ether_ip() / ICMP(),
        ether_ip() / UDP(sport=40002, dport=53) / DNS(id=0x1234, rd=1, qd=DNSQR(qname="example.com")),
        ether_ip() / UDP(sport=40003, dport=1234) / Raw(b"world!"),
    ]


@pytest.fixture
def capture_file(temp_dir, capture_frames):
    """pcap file holding ``capture_frames``"""
    path = temp_dir / "probes.pcap"
    wrpcap(str(path), capture_frames)
    return path


@pytest.fixture
def app_config():
    """Default configuration, independent of ~/.pktprobe"""
    return AppConfig.default()
