"""
Built-in payloads

Seed templates for common UDP services that stay silent on an empty
datagram. They are loaded first, so a user template for the same port
replaces them.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from ..ports import PortSet
from .registry import PayloadRegistry


@dataclass(frozen=True)
class BuiltinPayload:
    """One seed template

    ``length`` limits the payload to a prefix of ``data``; when
    ``nul_terminated`` is set the payload ends at the first NUL byte.
    """

    port: int
    data: bytes
    length: Optional[int] = None
    nul_terminated: bool = False
    source_port: Optional[int] = None

    def payload(self) -> bytes:
        data = self.data
        if self.nul_terminated:
            end = data.find(b"\x00")
            if end >= 0:
                data = data[:end]
        if self.length is not None:
            data = data[: self.length]
        return data


SNMP_GET_PUBLIC = (
    b"\x30\x37"
    b"\x02\x01\x00"  # version
    b"\x04\x06" b"public"  # community
    b"\xa0\x2a"  # GetRequest
    b"\x02\x04\x00\x00\x00\x00"  # request id
    b"\x02\x01\x00"  # error status
    b"\x02\x01\x00"  # error index
    b"\x30\x1c"
    b"\x30\x0c"
    b"\x06\x08\x2b\x06\x01\x02\x01\x01\x01\x00"  # sysDescr.0
    b"\x05\x00"
    b"\x30\x0c"
    b"\x06\x08\x2b\x06\x01\x02\x01\x01\x05\x00"  # sysName.0
    b"\x05\x00"
)

DNS_VERSION_BIND_AND_A_QUERY = (
    b"\x50\xb6"  # transaction id
    b"\x01\x20"  # query, RD + AD
    b"\x00\x01"  # one question
    b"\x00\x00\x00\x00\x00\x00"
    b"\x07" b"version" b"\x04" b"bind" b"\x00"
    b"\x00\x10"  # TXT
    b"\x00\x03"  # CHAOS
    b"\x00\x00"  # transaction id
    b"\x01\x00"  # standard query
    b"\x00\x01\x00\x00\x00\x00\x00\x00"
    b"\x03" b"www" b"\x05" b"yahoo" b"\x03" b"com" b"\x00"
    b"\x00\x01\x00\x01"  # A IN
)

SIP_OPTIONS = (
    b"OPTIONS sip:carol@chicago.com SIP/2.0\r\n"
    b"Via: SIP/2.0/UDP pc33.atlanta.com;branch=z9hG4bKhjhs8ass877\r\n"
    b"Max-Forwards: 70\r\n"
    b"To: <sip:carol@chicago.com>\r\n"
    b"From: Alice <sip:alice@atlanta.com>;tag=1928301774\r\n"
    b"Call-ID: a84b4c76e66710\r\n"
    b"CSeq: 63104 OPTIONS\r\n"
    b"Contact: <sip:alice@pc33.atlanta.com>\r\n"
    b"Accept: application/sdp\r\n"
    b"Content-Length: 0\r\n"
    b"\x00"
)

DEFAULT_PAYLOADS = (
    BuiltinPayload(port=161, data=SNMP_GET_PUBLIC, length=57),
    BuiltinPayload(port=53, data=DNS_VERSION_BIND_AND_A_QUERY),
    BuiltinPayload(port=5060, data=SIP_OPTIONS, nul_terminated=True),
)


def bootstrap(registry: PayloadRegistry, table: Sequence[BuiltinPayload] = DEFAULT_PAYLOADS) -> int:
    """Insert every entry of ``table`` into ``registry``; returns the number added"""
    added = 0
    for entry in table:
        added += registry.insert(PortSet.single(entry.port), entry.payload(), entry.source_port)
    return added


def create_default_registry(table: Sequence[BuiltinPayload] = DEFAULT_PAYLOADS) -> PayloadRegistry:
    """New registry seeded with ``table``"""
    registry = PayloadRegistry()
    bootstrap(registry, table)
    return registry
