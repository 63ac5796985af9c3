"""
Payload data models

- PayloadRecord: one immutable payload bound to a destination port
- PayloadBuffer: bounded accumulator used while decoding a template
- IngestResult: outcome of loading one template or capture file
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ...common.constants import PayloadConstants
from ...common.enums import SourceKind
from .checksum import partial_checksum


@dataclass(frozen=True)
class PayloadRecord:
    """Payload for one destination port

    ``checksum`` is computed from ``data`` when the record is built and is
    never recomputed. ``source_port`` of None means no source port was given.
    """

    port: int
    data: bytes
    source_port: Optional[int] = None
    checksum: int = field(init=False)

    def __post_init__(self):
        if not PayloadConstants.PORT_MIN <= self.port <= PayloadConstants.PORT_MAX:
            raise ValueError(f"port out of range: {self.port}")
        if self.source_port is not None and not (
            PayloadConstants.PORT_MIN <= self.source_port <= PayloadConstants.PORT_MAX
        ):
            raise ValueError(f"source port out of range: {self.source_port}")
        if len(self.data) > PayloadConstants.MAX_FRAME_SIZE:
            raise ValueError(f"payload exceeds {PayloadConstants.MAX_FRAME_SIZE} bytes: {len(self.data)}")
        # frozen dataclass: bypass __setattr__ for the derived fields
        object.__setattr__(self, "data", bytes(self.data))
        object.__setattr__(self, "checksum", partial_checksum(self.data))

    @property
    def length(self) -> int:
        return len(self.data)


class PayloadBuffer:
    """Fixed-capacity byte accumulator

    Bytes appended past ``capacity`` are dropped and counted in
    ``truncated``; callers decide whether that is an error.
    """

    def __init__(self, capacity: int = PayloadConstants.MAX_TEMPLATE_SIZE):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative: {capacity}")
        self.capacity = capacity
        self.truncated = 0
        self._data = bytearray()

    def append(self, value: int) -> bool:
        """Append one byte; returns False when it did not fit"""
        if len(self._data) < self.capacity:
            self._data.append(value & 0xFF)
            return True
        self.truncated += 1
        return False

    def extend(self, values: Iterable[int]) -> int:
        """Append bytes, returning how many were stored"""
        stored = 0
        for value in values:
            if self.append(value):
                stored += 1
        return stored

    @property
    def overflowed(self) -> bool:
        return self.truncated > 0

    def clear(self):
        self._data.clear()
        self.truncated = 0

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)


@dataclass
class IngestResult:
    """Result of merging one source into a registry"""

    source: str
    kind: SourceKind
    success: bool = True
    added: int = 0  # genuinely new ports
    records: int = 0  # records parsed or frames accepted
    skipped: int = 0  # frames skipped by the preprocessor
    truncated: int = 0  # templates cut to the size limit
    error: Optional[str] = None
    warnings: List[str] = field(default_factory=list)

    def __bool__(self):
        return self.success

    def __str__(self):
        if self.success:
            return f"{self.source}: imported {self.added} unique payloads ({self.records} records)"
        return f"{self.source}: failed - {self.error}"
