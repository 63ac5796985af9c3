"""
Partial checksum of a payload

The value is added later to the IP pseudo-header and UDP header sums when a
probe is assembled, so the payload bytes never have to be scanned again.
"""

from ...common.constants import PayloadConstants


def partial_checksum(data: bytes) -> int:
    """16-bit one's-complement partial sum of ``data``

    Words are read big-endian. The last byte of an odd-length buffer is added
    as a low-order value on its own.
    """
    even_length = len(data) - (len(data) & 1)
    total = 0
    for i in range(0, even_length, 2):
        total += (data[i] << 8) | data[i + 1]

    if len(data) & 1:
        total += data[-1]

    for _ in range(PayloadConstants.CHECKSUM_FOLDS):
        total = (total & PayloadConstants.CHECKSUM_MASK) + (total >> 16)

    return total
