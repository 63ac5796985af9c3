"""
C-style string literal decoding for payload templates

Supported escapes inside a double-quoted literal:

- ``\\NNN``  one to three octal digits
- ``\\xHH``  up to two hex digits
- ``\\a \\b \\f \\n \\r \\t \\v``  control bytes
- ``\\`` followed by anything else: that character, unescaped
"""

import string

from ...common.constants import PayloadConstants, TemplateConstants
from .models import PayloadBuffer

_OCTAL_DIGITS = frozenset("01234567")
_HEX_DIGITS = frozenset(string.hexdigits)


def decode_c_string(text: str, buffer: PayloadBuffer) -> str:
    """Decode the string literal at the start of ``text`` into ``buffer``

    ``text`` must begin with ``"``; otherwise nothing is decoded and ``text``
    is returned unchanged. Decoding stops at the closing quote or, for an
    unterminated literal, at the end of ``text``. Returns whatever follows
    the literal.
    """
    if not text.startswith(TemplateConstants.QUOTE):
        return text

    length = len(text)
    offset = 1

    while offset < length and text[offset] != TemplateConstants.QUOTE:
        char = text[offset]

        if char != TemplateConstants.ESCAPE:
            buffer.extend(char.encode("utf-8", "surrogateescape"))
            offset += 1
            continue

        offset += 1
        if offset >= length:
            # dangling backslash at end of line
            break
        char = text[offset]

        if char in string.digits:
            # \8 and \9 produce a zero byte and leave the digit in place
            value = 0
            for _ in range(3):
                if offset < length and text[offset] in _OCTAL_DIGITS:
                    value = value * 8 + int(text[offset])
                    offset += 1
            buffer.append(value)
            continue

        if char == "x":
            offset += 1
            value = 0
            for _ in range(2):
                if offset < length and text[offset] in _HEX_DIGITS:
                    value = value * 16 + int(text[offset], 16)
                    offset += 1
            buffer.append(value)
            continue

        if char in TemplateConstants.SIMPLE_ESCAPES:
            buffer.append(TemplateConstants.SIMPLE_ESCAPES[char])
        else:
            buffer.extend(char.encode("utf-8", "surrogateescape"))
        offset += 1

    if offset < length and text[offset] == TemplateConstants.QUOTE:
        offset += 1

    return text[offset:]


def decode_literal(text: str, capacity: int = PayloadConstants.MAX_TEMPLATE_SIZE) -> bytes:
    """Decode one string literal and return its bytes"""
    buffer = PayloadBuffer(capacity)
    decode_c_string(text, buffer)
    return bytes(buffer)


def selftest() -> bool:
    """Check the decoder against a fixed vector"""
    return decode_literal(TemplateConstants.SELFTEST_LITERAL) == TemplateConstants.SELFTEST_EXPECTED
