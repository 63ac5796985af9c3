"""
Payload registry

Sorted, per-port collection of payload records. The registry is filled during
start-up (built-ins, template files, capture files), optionally trimmed to the
ports actually being probed, and then only read.
"""

from bisect import bisect_left
from typing import Iterator, List, Optional

from ...common.constants import PayloadConstants
from ...infrastructure.logging import get_logger
from ..ports import PortSet
from .models import PayloadRecord


class PayloadRegistry:
    """Ordered payload records, at most one per destination port

    ``_records`` and ``_ports`` are kept in lockstep and sorted ascending by
    port, so the insertion point of any port is a binary search away.
    """

    def __init__(self):
        self._records: List[PayloadRecord] = []
        self._ports: List[int] = []
        self._logger = get_logger("payloads.registry")

    def insert(self, ports: PortSet, data: bytes, source_port: Optional[int] = None) -> int:
        """Store ``data`` for every port in ``ports``

        A record already present on a port is replaced in place. Returns the
        number of ports that did not have a record before.
        """
        data = bytes(data)
        added = 0
        for port in ports:
            record = PayloadRecord(port=port, data=data, source_port=source_port)
            index = bisect_left(self._ports, port)
            if index < len(self._ports) and self._ports[index] == port:
                self._records[index] = record
            else:
                self._records.insert(index, record)
                self._ports.insert(index, port)
                added += 1
        return added

    def lookup(self, port: int) -> Optional[PayloadRecord]:
        """Return the record for ``port`` (masked to 16 bits), or None"""
        port &= PayloadConstants.PORT_MASK
        index = bisect_left(self._ports, port)
        if index < len(self._ports) and self._ports[index] == port:
            return self._records[index]
        return None

    def trim(self, keep: PortSet) -> int:
        """Drop every record whose port is not in ``keep``

        Returns the number of records removed.
        """
        kept = [record for record in self._records if record.port in keep]
        removed = len(self._records) - len(kept)
        self._records = kept
        self._ports = [record.port for record in kept]
        if removed:
            self._logger.debug(f"Trimmed {removed} payloads, {len(kept)} remain")
        return removed

    def destroy(self):
        """Release every record"""
        self._records = []
        self._ports = []

    def ports(self) -> List[int]:
        return list(self._ports)

    def records(self) -> List[PayloadRecord]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PayloadRecord]:
        return iter(list(self._records))

    def __contains__(self, port: object) -> bool:
        if not isinstance(port, int):
            return False
        index = bisect_left(self._ports, port)
        return index < len(self._ports) and self._ports[index] == port

    def __repr__(self) -> str:
        return f"PayloadRegistry(ports={self._ports!r})"
