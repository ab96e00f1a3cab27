# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Text encodings for strings shown by PDF text operators.

An :data:`Encoding` is exactly one of three strategies:

* :class:`OneByteEncoding` -- each byte is looked up in a shared
  :class:`~.mappings.GlyphTable`.
* :class:`SimpleEncoding` -- a named CMap encoding. Only the names in
  :data:`~.constants.TWO_BYTE_ENCODING_NAMES` are understood; their bytes
  are raw UTF-16BE text.
* :class:`UnicodeMapEncoding` -- two-byte codes translated through the
  font's own :class:`~.cmap.ToUnicodeCMap`.

:func:`decode` and :func:`encode` dispatch on the strategy.
"""

import logging
import struct
from collections.abc import Iterable
from dataclasses import dataclass

from ..exceptions import ContentDecodeError, UnsupportedEncodingOperationError
from .cmap import ToUnicodeCMap
from .constants import TWO_BYTE_ENCODING_NAMES
from .mappings import STANDARD_ENCODING, GlyphTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OneByteEncoding:
    """Encoding backed by a shared one-byte glyph table."""

    table: GlyphTable


@dataclass(frozen=True)
class SimpleEncoding:
    """Encoding referenced only by its name (e.g. ``UniGB-UCS2-H``)."""

    name: str


@dataclass(frozen=True, eq=False)
class UnicodeMapEncoding:
    """Encoding owning the ToUnicode CMap of a single font."""

    cmap: ToUnicodeCMap


Encoding = OneByteEncoding | SimpleEncoding | UnicodeMapEncoding


def _units_to_string(units: Iterable[int]) -> str:
    """Decodes UTF-16 code units, replacing unpaired surrogates with U+FFFD."""
    units = list(units)
    data = struct.pack(f">{len(units)}H", *units)
    return data.decode("utf-16-be", errors="replace")


def _string_to_units(text: str) -> tuple[int, ...]:
    data = text.encode("utf-16-be", errors="surrogatepass")
    return struct.unpack(f">{len(data) // 2}H", data)


def bytes_to_string(table: GlyphTable, data: bytes) -> str:
    """Decodes one-byte encoded text through a glyph table.

    Bytes without a table entry produce no character.

    Args:
        table: Glyph table of the font's encoding.
        data: Raw string bytes from the content stream.

    Returns:
        The decoded text.
    """
    return _units_to_string(
        unit for unit in (table[byte] for byte in data) if unit is not None
    )


def string_to_bytes(table: GlyphTable, text: str) -> bytes:
    """Encodes text as one-byte codes through a glyph table.

    Each UTF-16 code unit of ``text`` becomes the lowest byte value mapped
    to it; units the table cannot express are dropped.

    Args:
        table: Glyph table of the font's encoding.
        text: Text to encode.

    Returns:
        The encoded bytes.
    """
    encoded = bytearray()
    for unit in _string_to_units(text):
        byte = table.byte_for(unit)
        if byte is not None:
            encoded.append(byte)
    return bytes(encoded)


def is_two_byte_encoding(name: str) -> bool:
    """Returns True if a named encoding carries raw UTF-16BE text."""
    return name in TWO_BYTE_ENCODING_NAMES


def _decode_with_cmap(cmap: ToUnicodeCMap, data: bytes) -> str:
    if len(data) % 2:
        logger.debug(
            "Dropping trailing byte %#04x of odd-length two-byte string", data[-1]
        )
    units: list[int] = []
    for i in range(0, len(data) - 1, 2):
        code = (data[i] << 8) | data[i + 1]
        units.extend(cmap.get_or_replacement_char(code))

    text = _units_to_string(units)
    logger.debug("Unicode: %s", text)
    return text


def decode(encoding: Encoding, data: bytes) -> str:
    """Decodes the bytes of a shown string to Unicode text.

    Malformed input never fails: unmapped bytes are dropped, unknown CMap
    codes become U+FFFD and broken UTF-16 is replaced with U+FFFD.

    Args:
        encoding: Encoding selected for the string's font.
        data: Raw string bytes from the content stream.

    Returns:
        The decoded text.

    Raises:
        ContentDecodeError: If the encoding is a named encoding other than
            the recognized two-byte Unicode encodings.
    """
    if isinstance(encoding, OneByteEncoding):
        return bytes_to_string(encoding.table, data)
    if isinstance(encoding, SimpleEncoding):
        if is_two_byte_encoding(encoding.name):
            return bytes(data).decode("utf-16-be", errors="replace")
        raise ContentDecodeError(encoding.name)
    if isinstance(encoding, UnicodeMapEncoding):
        return _decode_with_cmap(encoding.cmap, data)
    raise TypeError(f"Not an Encoding: {encoding!r}")


def encode(encoding: Encoding, text: str) -> bytes:
    """Encodes Unicode text to the bytes of a shown string.

    Named encodings other than the recognized two-byte Unicode encodings
    fall back to StandardEncoding.

    Args:
        encoding: Encoding selected for the target font.
        text: Text to encode.

    Returns:
        The encoded bytes.

    Raises:
        UnsupportedEncodingOperationError: If the encoding is backed by a
            ToUnicode CMap, which cannot be inverted.
    """
    if isinstance(encoding, OneByteEncoding):
        return string_to_bytes(encoding.table, text)
    if isinstance(encoding, SimpleEncoding):
        if is_two_byte_encoding(encoding.name):
            return text.encode("utf-16-be", errors="surrogatepass")
        logger.debug(
            "No encoder for %s, falling back to %s",
            encoding.name,
            STANDARD_ENCODING.name,
        )
        return string_to_bytes(STANDARD_ENCODING, text)
    if isinstance(encoding, UnicodeMapEncoding):
        raise UnsupportedEncodingOperationError("encode", "ToUnicode CMap encodings")
    raise TypeError(f"Not an Encoding: {encoding!r}")
