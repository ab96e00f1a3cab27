# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Byte/text conversion for strings shown with PDF fonts."""

from ..exceptions import ContentDecodeError, UnsupportedEncodingOperationError
from .cmap import BfRange, ToUnicodeCMap
from .constants import REPLACEMENT_CHARACTER, TWO_BYTE_ENCODING_NAMES
from .encoding import (
    Encoding,
    OneByteEncoding,
    SimpleEncoding,
    UnicodeMapEncoding,
    bytes_to_string,
    decode,
    encode,
    string_to_bytes,
)
from .font import encoding_for_font
from .mappings import (
    MAC_EXPERT_ENCODING,
    MAC_ROMAN_ENCODING,
    PDF_DOC_ENCODING,
    STANDARD_ENCODING,
    SYMBOL_ENCODING,
    WIN_ANSI_ENCODING,
    ZAPFDINGBATS_ENCODING,
    GlyphTable,
    apply_differences,
    get_glyph_table,
)

__all__ = [
    # Exceptions
    "ContentDecodeError",
    "UnsupportedEncodingOperationError",
    # Constants
    "REPLACEMENT_CHARACTER",
    "TWO_BYTE_ENCODING_NAMES",
    # Glyph tables
    "GlyphTable",
    "STANDARD_ENCODING",
    "MAC_ROMAN_ENCODING",
    "MAC_EXPERT_ENCODING",
    "WIN_ANSI_ENCODING",
    "PDF_DOC_ENCODING",
    "SYMBOL_ENCODING",
    "ZAPFDINGBATS_ENCODING",
    "apply_differences",
    "get_glyph_table",
    # ToUnicode CMaps
    "BfRange",
    "ToUnicodeCMap",
    # Encodings
    "Encoding",
    "OneByteEncoding",
    "SimpleEncoding",
    "UnicodeMapEncoding",
    "bytes_to_string",
    "string_to_bytes",
    "decode",
    "encode",
    "encoding_for_font",
]
