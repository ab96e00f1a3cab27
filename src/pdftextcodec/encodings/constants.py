# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Encoding constants."""

# Named CMap encodings whose character codes are raw UTF-16BE text
TWO_BYTE_ENCODING_NAMES = frozenset({"UniGB-UCS2-H", "UniGB-UTF16-H"})

# Substituted for character codes a ToUnicode CMap does not cover
REPLACEMENT_CHARACTER = 0xFFFD

# Number of byte values a one-byte encoding table covers
TABLE_SIZE = 256

# Largest value a UTF-16 code unit can hold
MAX_CODE_UNIT = 0xFFFF

# Predefined simple-font encodings (PDF 32000-1:2008, Annex D)
PREDEFINED_ENCODING_NAMES = frozenset(
    {
        "StandardEncoding",
        "MacRomanEncoding",
        "MacExpertEncoding",
        "WinAnsiEncoding",
        "PDFDocEncoding",
        "SymbolEncoding",
        "ZapfDingbatsEncoding",
    }
)

# Base fonts carrying their own built-in encoding
SYMBOLIC_BASE_FONTS = {
    "Symbol": "SymbolEncoding",
    "ZapfDingbats": "ZapfDingbatsEncoding",
}
