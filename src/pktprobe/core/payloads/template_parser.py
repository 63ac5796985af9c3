"""
Text payload template parser

Reads the ``nmap-payloads`` style format::

    # comment
    udp 53
      "\\x00\\x00\\x10\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x00"
    udp 7,9-10 "\\r\\n\\r\\n" source 0x1234

Every record is the marker ``udp``, a port list, zero or more quoted string
literals that are concatenated, and an optional ``source <port>``. Elements
may share a line or be spread over several lines; the parser works on the
unconsumed remainder of the current line.
"""

import re
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from ...common.constants import ERROR_MESSAGES, FileConstants, PayloadConstants, TemplateConstants
from ...common.enums import SourceKind
from ...common.exceptions import PortSpecError, TemplateSyntaxError
from ...infrastructure.logging import get_logger
from ..ports import PortSet
from .escapes import decode_c_string
from .models import IngestResult, PayloadBuffer
from .registry import PayloadRegistry

_SOURCE_PORT_RE = re.compile(r"0[xX][0-9a-fA-F]+|[0-9]+")


class _LineCursor:
    """Yields meaningful text from a line stream, remembering leftovers"""

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self.line_number = 0
        self.current = ""

    def next_text(self) -> Optional[str]:
        """Return the pending remainder, or the next non-blank, non-comment line"""
        if self.current:
            return self.current

        for line in self._lines:
            self.line_number += 1
            line = line.strip()
            if not line or line.startswith(TemplateConstants.COMMENT_PREFIXES):
                continue
            self.current = line
            return line

        self.current = ""
        return None

    def consume(self, remainder: str):
        self.current = remainder.strip()


def _starts_with_keyword(text: str, keyword: str) -> bool:
    return text.startswith(keyword) and (len(text) == len(keyword) or text[len(keyword)].isspace())


class TemplateParser:
    """Parses template text and merges every record into a registry"""

    def __init__(
        self,
        registry: PayloadRegistry,
        max_payload_size: int = PayloadConstants.MAX_TEMPLATE_SIZE,
        strict_payload_size: bool = False,
    ):
        self.registry = registry
        self.max_payload_size = max_payload_size
        self.strict_payload_size = strict_payload_size
        self._logger = get_logger("payloads.template")

    def parse_lines(self, lines: Iterable[str], filename: str = "<string>") -> IngestResult:
        """Parse every record in ``lines``

        A syntax error is logged as ``file:line: message`` and stops the
        parse; records merged before the error stay in the registry.
        """
        result = IngestResult(source=filename, kind=SourceKind.TEMPLATE)
        try:
            self._parse(_LineCursor(lines), filename, result)
        except TemplateSyntaxError as e:
            self._logger.error(str(e))
            result.success = False
            result.error = str(e)
        return result

    def parse_text(self, text: str, filename: str = "<string>") -> IngestResult:
        return self.parse_lines(text.splitlines(), filename)

    def load_file(self, path: Union[str, Path]) -> IngestResult:
        """Parse a template file"""
        filename = str(path)
        self._logger.debug(f"payloads:'{filename}': reading templates")
        try:
            with open(path, "r", encoding=FileConstants.TEMPLATE_ENCODING, errors="surrogateescape") as f:
                result = self.parse_lines(f, filename)
        except OSError as e:
            message = ERROR_MESSAGES["FILE_NOT_OPENABLE"].format(filename=filename)
            self._logger.error(f"{message}: {e}")
            return IngestResult(source=filename, kind=SourceKind.TEMPLATE, success=False, error=f"{message}: {e}")

        if result.success:
            self._logger.info(
                f"payloads:'{filename}': imported {result.added} unique payloads from {result.records} templates"
            )
        return result

    def _parse(self, cursor: _LineCursor, filename: str, result: IngestResult):
        def syntax_error(message: str) -> TemplateSyntaxError:
            return TemplateSyntaxError(message, filename=filename, line_number=cursor.line_number)

        while True:
            # [udp]
            text = cursor.next_text()
            if text is None:
                break
            if not _starts_with_keyword(text, TemplateConstants.PROTOCOL_MARKER):
                raise syntax_error(ERROR_MESSAGES["EXPECTED_UDP"])
            cursor.consume(text[len(TemplateConstants.PROTOCOL_MARKER) :])

            # [ports]
            text = cursor.next_text()
            if text is None:
                raise syntax_error(ERROR_MESSAGES["EXPECTED_PORTS"])
            try:
                ports, remainder = PortSet.parse(text)
            except PortSpecError as e:
                raise syntax_error(f"{ERROR_MESSAGES['EXPECTED_PORTS']}: {e.message}") from e
            if not ports:
                raise syntax_error(ERROR_MESSAGES["EXPECTED_PORTS"])
            cursor.consume(remainder)

            # [C strings]
            buffer = PayloadBuffer(self.max_payload_size)
            while True:
                text = cursor.next_text()
                if text is None or not text.startswith(TemplateConstants.QUOTE):
                    break
                cursor.consume(decode_c_string(text, buffer))

            # [source]
            source_port = None
            if text is not None and _starts_with_keyword(text, TemplateConstants.SOURCE_KEYWORD):
                source_port = self._parse_source_port(text[len(TemplateConstants.SOURCE_KEYWORD) :].strip())
                if source_port is None:
                    raise syntax_error(ERROR_MESSAGES["EXPECTED_SOURCE_PORT"])
                cursor.consume("")

            if buffer.overflowed:
                message = ERROR_MESSAGES["PAYLOAD_TOO_LARGE"].format(limit=self.max_payload_size)
                if self.strict_payload_size:
                    raise syntax_error(message)
                warning = f"{filename}:{cursor.line_number}: {message}, {buffer.truncated} bytes dropped"
                self._logger.warning(warning)
                result.warnings.append(warning)
                result.truncated += 1

            result.added += self.registry.insert(ports, bytes(buffer), source_port)
            result.records += 1

    @staticmethod
    def _parse_source_port(text: str) -> Optional[int]:
        match = _SOURCE_PORT_RE.match(text)
        if match is None:
            return None
        token = match.group(0)
        value = int(token, 16) if token[:2].lower() == "0x" else int(token)
        if value > PayloadConstants.PORT_MAX:
            return None
        return value


def read_template_file(
    path: Union[str, Path],
    registry: PayloadRegistry,
    max_payload_size: int = PayloadConstants.MAX_TEMPLATE_SIZE,
    strict_payload_size: bool = False,
) -> IngestResult:
    """Merge the templates in ``path`` into ``registry``"""
    return TemplateParser(registry, max_payload_size, strict_payload_size).load_file(path)


def parse_template_text(text: str, registry: PayloadRegistry, filename: str = "<string>") -> IngestResult:
    """Merge templates given as a string into ``registry``"""
    return TemplateParser(registry).parse_text(text, filename)

