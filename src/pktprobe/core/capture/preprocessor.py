"""
Frame preprocessor

Dissects a raw frame with Scapy, classifies it, and locates the UDP
application payload inside the original bytes.
"""

from dataclasses import dataclass
from typing import Optional, Type

from scapy.layers.inet import ICMP, IP, TCP, UDP
from scapy.layers.inet6 import IPv6
from scapy.layers.l2 import Ether
from scapy.packet import Packet

from ...common.constants import NetworkConstants
from ...common.enums import FrameKind
from ...infrastructure.logging import get_logger

logger = get_logger("capture.preprocessor")


@dataclass(frozen=True)
class PreprocessedFrame:
    """Where the interesting parts of a frame are"""

    found: FrameKind
    port_src: int = 0
    port_dst: int = 0
    app_offset: int = 0
    app_length: int = 0

    @property
    def is_udp(self) -> bool:
        return self.found in (FrameKind.UDP, FrameKind.DNS)


def _header_length(layer: Packet) -> int:
    # Upper-layer re-serialization differences cancel out in the subtraction
    return len(bytes(layer)) - len(bytes(layer.payload))


def _offset_of(packet: Packet, target: Packet) -> int:
    """Byte offset of ``target`` inside the frame ``packet`` was dissected from"""
    offset = 0
    layer = packet
    while layer is not target:
        offset += _header_length(layer)
        layer = layer.payload
    return offset


def preprocess_frame(data: bytes, link_layer: Type[Packet] = Ether) -> Optional[PreprocessedFrame]:
    """Classify ``data`` and locate its UDP payload

    Returns None when the frame cannot be dissected or carries no IP.
    """
    try:
        packet = link_layer(data)
    except Exception as e:
        # Scapy raises a variety of errors on truncated or garbled frames
        logger.debug(f"Frame dissection failed: {e}")
        return None

    ip_layer = packet.getlayer(IP) or packet.getlayer(IPv6)
    if ip_layer is None:
        return None

    udp = packet.getlayer(UDP)
    if udp is None:
        if packet.haslayer(TCP):
            return PreprocessedFrame(found=FrameKind.TCP)
        if packet.haslayer(ICMP) or ip_layer.payload.name.startswith("ICMPv6"):
            return PreprocessedFrame(found=FrameKind.ICMP)
        return PreprocessedFrame(found=FrameKind.IP)

    app_offset = _offset_of(packet, udp) + NetworkConstants.UDP_HEADER_LENGTH
    available = max(0, len(data) - app_offset)
    if udp.len is not None and udp.len >= NetworkConstants.UDP_HEADER_LENGTH:
        app_length = min(udp.len - NetworkConstants.UDP_HEADER_LENGTH, available)
    else:
        app_length = available

    if NetworkConstants.DNS_PORT in (udp.sport, udp.dport):
        found = FrameKind.DNS
    else:
        found = FrameKind.UDP

    return PreprocessedFrame(
        found=found,
        port_src=udp.sport,
        port_dst=udp.dport,
        app_offset=app_offset,
        app_length=app_length,
    )
