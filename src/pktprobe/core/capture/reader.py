"""
Capture file reader

Thin wrapper over Scapy's PcapReader (pcap and pcapng) that hands out raw
frame bytes with their capture metadata.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Type, Union

from scapy.error import Scapy_Exception
from scapy.packet import Packet
from scapy.utils import PcapReader

from ...common.constants import PayloadConstants
from ...common.exceptions import CaptureFileError
from ...infrastructure.logging import get_logger


@dataclass(frozen=True)
class CapturedFrame:
    """One frame read from a capture file"""

    timestamp: float
    captured_length: int
    original_length: int
    data: bytes
    link_layer: Type[Packet]


class CaptureReader:
    """Reads frames from a pcap/pcapng file

    Usage::

        with CaptureReader("probes.pcap") as reader:
            for frame in reader:
                ...
    """

    def __init__(self, path: Union[str, Path], max_frame_size: int = PayloadConstants.MAX_FRAME_SIZE):
        self.path = Path(path)
        self.max_frame_size = max_frame_size
        self._reader: Optional[PcapReader] = None
        self._logger = get_logger("capture.reader")

    def open(self) -> "CaptureReader":
        """Open the capture

        Raises:
            CaptureFileError: the file is missing, unreadable or not a capture
        """
        try:
            self._reader = PcapReader(str(self.path))
        except (OSError, Scapy_Exception) as e:
            raise CaptureFileError(f"can't read from file '{self.path}': {e}", file_path=str(self.path)) from e
        self._logger.debug(f"Opened capture {self.path}")
        return self

    def close(self):
        if self._reader is not None:
            self._reader.close()
            self._reader = None

    def __enter__(self) -> "CaptureReader":
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __iter__(self) -> Iterator[CapturedFrame]:
        if self._reader is None:
            self.open()
        for packet in self._reader:
            yield self._to_frame(packet)

    def _to_frame(self, packet: Packet) -> CapturedFrame:
        raw = getattr(packet, "original", None) or bytes(packet)
        data = raw[: self.max_frame_size]
        wirelen = getattr(packet, "wirelen", None)
        frame = CapturedFrame(
            timestamp=float(packet.time),
            captured_length=len(data),
            original_length=wirelen if wirelen is not None else len(raw),
            data=data,
            link_layer=type(packet),
        )
        if frame.captured_length < frame.original_length:
            self._logger.debug(
                f"{self.path}: frame cut short, {frame.captured_length} of {frame.original_length} bytes captured"
            )
        return frame
