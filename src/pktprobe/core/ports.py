"""
Port range sets

A PortSet is an ordered list of inclusive, non-overlapping port ranges over
the 16-bit port space. It is used both as the port list of a single template
record and as the keep-filter when trimming a registry.
"""

from bisect import bisect_right
from typing import Iterable, Iterator, List, Tuple

from ..common.constants import PayloadConstants
from ..common.exceptions import PortSpecError


PortRange = Tuple[int, int]


def _is_digit(char: str) -> bool:
    # ASCII only, int() rejects other Unicode digits
    return "0" <= char <= "9"


class PortSet:
    """Ordered set of inclusive port ranges"""

    __slots__ = ("_ranges", "_starts")

    def __init__(self, ranges: Iterable[PortRange] = ()):
        normalized = self._normalize(list(ranges))
        self._ranges: Tuple[PortRange, ...] = tuple(normalized)
        self._starts: List[int] = [begin for begin, _ in normalized]

    @staticmethod
    def _normalize(ranges: List[PortRange]) -> List[PortRange]:
        """Validate, sort and merge overlapping or adjacent ranges"""
        for begin, end in ranges:
            if not (PayloadConstants.PORT_MIN <= begin <= PayloadConstants.PORT_MAX) or not (
                PayloadConstants.PORT_MIN <= end <= PayloadConstants.PORT_MAX
            ):
                raise PortSpecError(f"port out of range: {begin}-{end}")
            if begin > end:
                raise PortSpecError(f"invalid port range: {begin}-{end}")

        if not ranges:
            return []

        sorted_ranges = sorted(ranges)
        merged = [sorted_ranges[0]]
        for begin, end in sorted_ranges[1:]:
            last_begin, last_end = merged[-1]
            if begin <= last_end + 1:
                merged[-1] = (last_begin, max(last_end, end))
            else:
                merged.append((begin, end))
        return merged

    @classmethod
    def single(cls, port: int) -> "PortSet":
        return cls([(port, port)])

    @classmethod
    def from_ports(cls, ports: Iterable[int]) -> "PortSet":
        return cls((port, port) for port in ports)

    @classmethod
    def parse(cls, text: str) -> Tuple["PortSet", str]:
        """Parse a port list from the start of ``text``

        Accepts ``53``, ``1-5,7,9-10`` (whitespace is allowed after commas).
        The list must end at whitespace, a quote or the end of ``text``; the
        unconsumed remainder is returned alongside the set. Text that does
        not start with a port number yields an empty set and the text itself.

        Raises:
            PortSpecError: a number is out of range, a range is reversed, a
                comma is not followed by another port, or the list runs into
                other characters.
        """
        pos = len(text) - len(text.lstrip())
        if pos >= len(text) or not _is_digit(text[pos]):
            return cls(), text

        ranges: List[PortRange] = []
        while True:
            begin, pos = cls._read_number(text, pos)
            end = begin
            if pos < len(text) and text[pos] == "-":
                if pos + 1 >= len(text) or not _is_digit(text[pos + 1]):
                    raise PortSpecError(f"expected port after '-': {text!r}", spec=text)
                end, pos = cls._read_number(text, pos + 1)
            if begin > end:
                raise PortSpecError(f"invalid port range: {begin}-{end}", spec=text)
            ranges.append((begin, end))

            if pos < len(text) and text[pos] == ",":
                pos += 1
                while pos < len(text) and text[pos].isspace():
                    pos += 1
                if pos >= len(text) or not _is_digit(text[pos]):
                    raise PortSpecError(f"expected port after ',': {text!r}", spec=text)
                continue
            break

        if pos < len(text) and not text[pos].isspace() and text[pos] != '"':
            raise PortSpecError(f"unexpected {text[pos]!r} in port list: {text!r}", spec=text)

        return cls(ranges), text[pos:]

    @classmethod
    def from_string(cls, text: str) -> "PortSet":
        """Parse a complete port list, rejecting trailing text"""
        ports, remainder = cls.parse(text)
        if remainder.strip() or not ports:
            raise PortSpecError(f"invalid port specification: {text!r}", spec=text)
        return ports

    @staticmethod
    def _read_number(text: str, pos: int) -> Tuple[int, int]:
        start = pos
        while pos < len(text) and _is_digit(text[pos]):
            pos += 1
        value = int(text[start:pos])
        if value > PayloadConstants.PORT_MAX:
            raise PortSpecError(f"port out of range: {value}", spec=text)
        return value, pos

    @property
    def ranges(self) -> Tuple[PortRange, ...]:
        return self._ranges

    def __contains__(self, port: object) -> bool:
        if not isinstance(port, int):
            return False
        index = bisect_right(self._starts, port) - 1
        return index >= 0 and port <= self._ranges[index][1]

    def __iter__(self) -> Iterator[int]:
        for begin, end in self._ranges:
            yield from range(begin, end + 1)

    def __len__(self) -> int:
        return sum(end - begin + 1 for begin, end in self._ranges)

    def __bool__(self) -> bool:
        return bool(self._ranges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PortSet):
            return NotImplemented
        return self._ranges == other._ranges

    def __hash__(self) -> int:
        return hash(self._ranges)

    def __str__(self) -> str:
        return ",".join(str(begin) if begin == end else f"{begin}-{end}" for begin, end in self._ranges)

    def __repr__(self) -> str:
        return f"PortSet({str(self)!r})"
