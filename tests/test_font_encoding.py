# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Tests for encodings/font.py — encoding selection for font resources."""

import logging

import pikepdf
from conftest import make_font, new_pdf
from pikepdf import Array, Dictionary, Name

from pdftextcodec import decode, encode, encoding_for_font
from pdftextcodec.encodings import (
    MAC_ROMAN_ENCODING,
    STANDARD_ENCODING,
    SYMBOL_ENCODING,
    WIN_ANSI_ENCODING,
    ZAPFDINGBATS_ENCODING,
    OneByteEncoding,
    SimpleEncoding,
    UnicodeMapEncoding,
)
from pdftextcodec.encodings.font import builtin_glyph_table


class TestBuiltinGlyphTable:
    """Tests for builtin_glyph_table."""

    def test_standard_for_text_fonts(self):
        """Non-symbolic fonts use StandardEncoding."""
        pdf = new_pdf()
        assert builtin_glyph_table(make_font(pdf)) is STANDARD_ENCODING

    def test_symbol(self):
        """The Symbol font uses SymbolEncoding."""
        pdf = new_pdf()
        font = make_font(pdf, BaseFont=Name.Symbol)
        assert builtin_glyph_table(font) is SYMBOL_ENCODING

    def test_subset_zapf_dingbats(self):
        """Subset prefixes are ignored when matching the font name."""
        pdf = new_pdf()
        font = make_font(pdf, BaseFont=Name("/ABCDEF+ZapfDingbats"))
        assert builtin_glyph_table(font) is ZAPFDINGBATS_ENCODING

    def test_missing_base_font(self):
        """Fonts without /BaseFont use StandardEncoding."""
        font = Dictionary(Type=Name.Font, Subtype=Name.Type3)
        assert builtin_glyph_table(font) is STANDARD_ENCODING


class TestEncodingForFont:
    """Tests for encoding_for_font."""

    def test_no_encoding_entry(self):
        """Fonts without /Encoding use their built-in encoding."""
        pdf = new_pdf()
        assert encoding_for_font(make_font(pdf)) == OneByteEncoding(STANDARD_ENCODING)

    def test_symbolic_font_without_encoding(self):
        """Symbol falls back to its own encoding."""
        pdf = new_pdf()
        font = make_font(pdf, BaseFont=Name.Symbol)
        assert encoding_for_font(font) == OneByteEncoding(SYMBOL_ENCODING)

    def test_predefined_encoding_name(self):
        """Annex D names select the shared table."""
        pdf = new_pdf()
        font = make_font(pdf, Encoding=Name.WinAnsiEncoding)
        encoding = encoding_for_font(font)
        assert isinstance(encoding, OneByteEncoding)
        assert encoding.table is WIN_ANSI_ENCODING

    def test_indirect_font(self):
        """Indirect font objects are resolved."""
        pdf = new_pdf()
        font = make_font(pdf, indirect=True, Encoding=Name.MacRomanEncoding)
        assert encoding_for_font(font).table is MAC_ROMAN_ENCODING

    def test_other_encoding_name(self):
        """Other names become named encodings."""
        pdf = new_pdf()
        font = make_font(pdf, Encoding=Name("/Identity-H"))
        assert encoding_for_font(font) == SimpleEncoding("Identity-H")

    def test_two_byte_encoding_name(self):
        """Recognized two-byte names decode as UTF-16BE."""
        pdf = new_pdf()
        font = make_font(pdf, Encoding=Name("/UniGB-UCS2-H"))
        encoding = encoding_for_font(font)
        assert encoding == SimpleEncoding("UniGB-UCS2-H")
        assert decode(encoding, b"\x4e\x2d") == "中"

    def test_embedded_cmap_stream(self):
        """Embedded CMap streams are identified by /CMapName."""
        pdf = new_pdf()
        cmap_stream = pdf.make_indirect(
            pikepdf.Stream(pdf, b"", CMapName=Name("/UniGB-UTF16-H"))
        )
        font = make_font(pdf, Encoding=cmap_stream)
        assert encoding_for_font(font) == SimpleEncoding("UniGB-UTF16-H")

    def test_embedded_cmap_stream_without_name(self):
        """A CMap stream without /CMapName gets an empty name."""
        pdf = new_pdf()
        cmap_stream = pdf.make_indirect(pikepdf.Stream(pdf, b""))
        font = make_font(pdf, Encoding=cmap_stream)
        assert encoding_for_font(font) == SimpleEncoding("")

    def test_encoding_dictionary_with_differences(self, differences_array):
        """Differences are applied on top of /BaseEncoding."""
        pdf = new_pdf()
        font = make_font(
            pdf,
            Encoding=Dictionary(
                Type=Name.Encoding,
                BaseEncoding=Name.WinAnsiEncoding,
                Differences=differences_array,
            ),
        )
        encoding = encoding_for_font(font)
        assert isinstance(encoding, OneByteEncoding)
        assert encoding.table.name == "WinAnsiEncoding+Differences"
        assert decode(encoding, b"ABC\x80") == "ΑΒC€"
        assert encode(encoding, "Α€") == b"A\x80"

    def test_encoding_dictionary_without_base(self, differences_array):
        """Without /BaseEncoding the built-in encoding is the base."""
        pdf = new_pdf()
        font = make_font(pdf, Encoding=Dictionary(Differences=differences_array))
        encoding = encoding_for_font(font)
        assert encoding.table.name == "StandardEncoding+Differences"
        assert decode(encoding, b"AB'") == "ΑΒ’"

    def test_encoding_dictionary_without_differences(self):
        """A bare /BaseEncoding selects the shared table."""
        pdf = new_pdf()
        font = make_font(
            pdf, Encoding=Dictionary(BaseEncoding=Name.MacRomanEncoding)
        )
        assert encoding_for_font(font).table is MAC_ROMAN_ENCODING

    def test_unknown_base_encoding(self, caplog):
        """Unknown /BaseEncoding names fall back with a warning."""
        pdf = new_pdf()
        font = make_font(pdf, Encoding=Dictionary(BaseEncoding=Name.Bogus))
        with caplog.at_level(logging.WARNING, logger="pdftextcodec.encodings.font"):
            encoding = encoding_for_font(font)
        assert encoding.table is STANDARD_ENCODING
        assert "Bogus" in caplog.text

    def test_differences_with_non_name_items(self):
        """Items other than integers and names are skipped."""
        pdf = new_pdf()
        differences = Array([0x41, Name("/Alpha"), pikepdf.String("junk")])
        font = make_font(pdf, Encoding=Dictionary(Differences=differences))
        assert decode(encoding_for_font(font), b"A") == "Α"

    def test_unexpected_encoding_object(self, caplog):
        """Unexpected /Encoding values fall back with a warning."""
        pdf = new_pdf()
        font = make_font(pdf, Encoding=Array([1, 2]))
        with caplog.at_level(logging.WARNING, logger="pdftextcodec.encodings.font"):
            encoding = encoding_for_font(font)
        assert encoding == OneByteEncoding(STANDARD_ENCODING)
        assert caplog.records

    def test_to_unicode_takes_precedence(self, sample_cmap):
        """A ToUnicode CMap overrides /Encoding."""
        pdf = new_pdf()
        font = make_font(pdf, Encoding=Name.WinAnsiEncoding)
        encoding = encoding_for_font(font, to_unicode=sample_cmap)
        assert isinstance(encoding, UnicodeMapEncoding)
        assert encoding.cmap is sample_cmap
        assert decode(encoding, b"\x00\x01\x00\x02") == "Hi"
