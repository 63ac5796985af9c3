"""
Payload extraction from capture files

Every UDP (or DNS over UDP) frame in a capture contributes its application
payload as the template for its destination port. A later frame to the same
port replaces an earlier one.
"""

from pathlib import Path
from typing import Iterable, Union

from ...common.constants import ERROR_MESSAGES, PayloadConstants
from ...common.enums import SourceKind
from ...common.exceptions import CaptureFileError
from ...infrastructure.logging import get_logger
from ..capture.preprocessor import preprocess_frame
from ..capture.reader import CapturedFrame, CaptureReader
from ..ports import PortSet
from .models import IngestResult
from .registry import PayloadRegistry


class PcapPayloadExtractor:
    """Feeds UDP payloads found in captured frames into a registry"""

    def __init__(self, registry: PayloadRegistry, max_frame_size: int = PayloadConstants.MAX_FRAME_SIZE):
        self.registry = registry
        self.max_frame_size = max_frame_size
        self._logger = get_logger("payloads.pcap")

    def extract_frames(self, frames: Iterable[CapturedFrame], source: str = "<frames>") -> IngestResult:
        """Merge the payload of every accepted frame"""
        result = IngestResult(source=source, kind=SourceKind.CAPTURE)

        for frame in frames:
            parsed = preprocess_frame(frame.data, frame.link_layer)
            if parsed is None or not parsed.is_udp:
                result.skipped += 1
                continue

            payload = frame.data[parsed.app_offset : parsed.app_offset + parsed.app_length]
            result.added += self.registry.insert(PortSet.single(parsed.port_dst), payload, None)
            result.records += 1

        return result

    def load_file(self, path: Union[str, Path]) -> IngestResult:
        """Merge the payloads of a pcap/pcapng file"""
        filename = str(path)
        self._logger.debug(f"payloads:'{filename}': opening packet capture")

        try:
            with CaptureReader(path, self.max_frame_size) as reader:
                result = self.extract_frames(reader, filename)
        except CaptureFileError as e:
            message = ERROR_MESSAGES["FILE_NOT_OPENABLE"].format(filename=filename)
            self._logger.error(message)
            return IngestResult(source=filename, kind=SourceKind.CAPTURE, success=False, error=e.message)

        self._logger.info(f"payloads:'{filename}': imported {result.added} unique payloads")
        if result.skipped:
            self._logger.debug(f"payloads:'{filename}': skipped {result.skipped} non-UDP frames")
        self._logger.debug(f"payloads:'{filename}': closed packet capture")
        return result


def read_pcap_payloads(
    path: Union[str, Path],
    registry: PayloadRegistry,
    max_frame_size: int = PayloadConstants.MAX_FRAME_SIZE,
) -> IngestResult:
    """Merge the UDP payloads captured in ``path`` into ``registry``"""
    return PcapPayloadExtractor(registry, max_frame_size).load_file(path)
